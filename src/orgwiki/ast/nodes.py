#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgwiki/ast/nodes.py
"""Node classes for the Org document tree.

This module defines the closed set of node kinds the transcoder consumes.
The tree is produced by an external Org parser (or loaded from JSON with
:mod:`orgwiki.ast.serialization`) and is never modified afterwards.

Node Hierarchy
--------------
All nodes inherit from :class:`Node` and support the visitor pattern through
``accept(visitor, contents, ctx)``, which dispatches to the matching
``visit_*`` method.

Elements (block level):
    - Document, Section, Headline, Paragraph, PlainList, Item
    - QuoteBlock, FixedWidth, SrcBlock, HorizontalRule
    - Table, TableRow, TableCell
    - Comment, CommentBlock, FootnoteDefinition

Objects (inline level):
    - PlainText, Bold, Italic, Underline, Code, Verbatim
    - LineBreak, Link, FootnoteReference, Target, RadioTarget

Container nodes own an ordered ``children`` tuple. Some nodes also own
secondary node sequences that are not part of their contents: a headline's
``title``, an item's ``tag``, a paragraph's or table's ``caption`` and an
inline footnote's ``definition``. Renderers render those on demand.

Nodes are frozen dataclasses compared by identity, so the same text in two
places of a document is still two distinct nodes.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar, Mapping, Optional, Sequence

from orgwiki.constants import (
    CHECKBOX_STATES,
    LIST_TYPES,
    TABLE_ROW_TYPES,
    TODO_TYPES,
    CheckboxState,
    ListType,
    TableRowType,
    TodoType,
)

if TYPE_CHECKING:
    from orgwiki.ast.visitors import NodeVisitor
    from orgwiki.renderers.context import RenderContext


def _freeze_nodes(node: Node, *names: str) -> None:
    """Store node sequences given as lists as tuples."""
    for name in names:
        value = getattr(node, name)
        if not isinstance(value, tuple):
            object.__setattr__(node, name, tuple(value))


def _check_choice(node_type: str, name: str, value: object, choices: list[str]) -> None:
    """Raise ValueError when ``value`` is not one of ``choices``."""
    if value not in choices:
        raise ValueError(f"{node_type} {name} must be one of {choices}, got {value!r}")


class Node(ABC):
    """Base class for all document tree nodes.

    Class Attributes
    ----------------
    node_type : str
        Serialized name of the node kind
    is_container : bool
        Whether the node owns a ``children`` sequence
    secondary_fields : tuple of str
        Names of node sequences owned by the node outside its contents

    """

    node_type: ClassVar[str] = "Node"
    is_container: ClassVar[bool] = False
    secondary_fields: ClassVar[tuple[str, ...]] = ()

    @abstractmethod
    def accept(self, visitor: NodeVisitor, contents: Optional[str], ctx: RenderContext) -> str:
        """Dispatch to the visitor method for this node kind.

        Parameters
        ----------
        visitor : NodeVisitor
            Renderer providing one ``visit_*`` method per node kind
        contents : str or None
            Concatenated fragments of the already-rendered children, or None
            when the node has no children
        ctx : RenderContext
            Read-only options and tree queries

        Returns
        -------
        str
            Rendered fragment

        """

    @property
    def child_nodes(self) -> tuple[Node, ...]:
        """Children forming the node's contents (empty for leaves)."""
        return getattr(self, "children", ())

    def secondary_nodes(self) -> tuple[Node, ...]:
        """All nodes owned through secondary fields, in field order."""
        nodes: list[Node] = []
        for name in self.secondary_fields:
            nodes.extend(getattr(self, name))
        return tuple(nodes)


# ============================================================================
# Elements
# ============================================================================


@dataclass(frozen=True, eq=False)
class Document(Node):
    """Root of a document tree.

    Parameters
    ----------
    children : sequence of Node
        Top-level elements, usually a Section followed by Headlines
    properties : dict
        Document keywords (TITLE, AUTHOR, ...)

    """

    node_type: ClassVar[str] = "Document"
    is_container: ClassVar[bool] = True

    children: Sequence[Node] = field(default_factory=tuple)
    properties: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        _freeze_nodes(self, "children")

    def accept(self, visitor: NodeVisitor, contents: Optional[str], ctx: RenderContext) -> str:
        return visitor.visit_document(self, contents, ctx)


@dataclass(frozen=True, eq=False)
class Section(Node):
    """Body of a headline (or the text before the first headline)."""

    node_type: ClassVar[str] = "Section"
    is_container: ClassVar[bool] = True

    children: Sequence[Node] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        _freeze_nodes(self, "children")

    def accept(self, visitor: NodeVisitor, contents: Optional[str], ctx: RenderContext) -> str:
        return visitor.visit_section(self, contents, ctx)


@dataclass(frozen=True, eq=False)
class Headline(Node):
    """Section heading with its decorations.

    Parameters
    ----------
    level : int
        Absolute Org level (number of stars)
    title : sequence of Node
        Objects forming the heading text
    children : sequence of Node
        The headline's Section followed by its sub-headlines
    todo_keyword : str or None
        TODO keyword, such as ``TODO`` or ``DONE``
    todo_type : {'todo', 'done'} or None
        Class of the TODO keyword
    priority : str or None
        Priority cookie character, such as ``A``
    tags : sequence of str
        Tags attached to the headline
    properties : dict
        Property drawer contents (``ID``, ``CUSTOM_ID``, ``UNNUMBERED``, ...)
    footnote_section : bool
        True for the synthetic headline that gathers footnote definitions

    """

    node_type: ClassVar[str] = "Headline"
    is_container: ClassVar[bool] = True
    secondary_fields: ClassVar[tuple[str, ...]] = ("title",)

    level: int = 1
    title: Sequence[Node] = field(default_factory=tuple)
    children: Sequence[Node] = field(default_factory=tuple)
    todo_keyword: Optional[str] = None
    todo_type: Optional[TodoType] = None
    priority: Optional[str] = None
    tags: Sequence[str] = field(default_factory=tuple)
    properties: Mapping[str, Any] = field(default_factory=dict)
    footnote_section: bool = False

    def __post_init__(self) -> None:
        """Validate the level and freeze sequences."""
        if self.level < 1:
            raise ValueError(f"Headline level must be positive, got {self.level}")
        if self.todo_type is not None:
            _check_choice("Headline", "todo_type", self.todo_type, TODO_TYPES)
        _freeze_nodes(self, "title", "children")
        object.__setattr__(self, "tags", tuple(self.tags))

    def accept(self, visitor: NodeVisitor, contents: Optional[str], ctx: RenderContext) -> str:
        return visitor.visit_headline(self, contents, ctx)


@dataclass(frozen=True, eq=False)
class Paragraph(Node):
    """Paragraph of objects, with optional ``#+CAPTION`` and ``#+NAME``."""

    node_type: ClassVar[str] = "Paragraph"
    is_container: ClassVar[bool] = True
    secondary_fields: ClassVar[tuple[str, ...]] = ("caption",)

    children: Sequence[Node] = field(default_factory=tuple)
    caption: Sequence[Node] = field(default_factory=tuple)
    name: Optional[str] = None

    def __post_init__(self) -> None:
        _freeze_nodes(self, "children", "caption")

    def accept(self, visitor: NodeVisitor, contents: Optional[str], ctx: RenderContext) -> str:
        return visitor.visit_paragraph(self, contents, ctx)


@dataclass(frozen=True, eq=False)
class PlainList(Node):
    """Plain list containing Items.

    Parameters
    ----------
    list_type : {'ordered', 'unordered', 'descriptive'}
        Kind of list
    children : sequence of Item
        List items

    """

    node_type: ClassVar[str] = "PlainList"
    is_container: ClassVar[bool] = True

    list_type: ListType = "unordered"
    children: Sequence[Node] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        _check_choice("PlainList", "list_type", self.list_type, LIST_TYPES)
        _freeze_nodes(self, "children")

    def accept(self, visitor: NodeVisitor, contents: Optional[str], ctx: RenderContext) -> str:
        return visitor.visit_plain_list(self, contents, ctx)


@dataclass(frozen=True, eq=False)
class Item(Node):
    """Item of a plain list.

    Parameters
    ----------
    children : sequence of Node
        Elements of the item (paragraphs, nested lists, ...)
    bullet : str
        Bullet as written in the source, such as ``-`` or ``1.``
    checkbox : {'on', 'off', 'trans'} or None
        Checkbox state
    tag : sequence of Node
        Term of a descriptive item

    """

    node_type: ClassVar[str] = "Item"
    is_container: ClassVar[bool] = True
    secondary_fields: ClassVar[tuple[str, ...]] = ("tag",)

    children: Sequence[Node] = field(default_factory=tuple)
    bullet: str = "-"
    checkbox: Optional[CheckboxState] = None
    tag: Sequence[Node] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.checkbox is not None:
            _check_choice("Item", "checkbox", self.checkbox, CHECKBOX_STATES)
        _freeze_nodes(self, "children", "tag")

    def accept(self, visitor: NodeVisitor, contents: Optional[str], ctx: RenderContext) -> str:
        return visitor.visit_item(self, contents, ctx)


@dataclass(frozen=True, eq=False)
class QuoteBlock(Node):
    """``#+BEGIN_QUOTE`` block."""

    node_type: ClassVar[str] = "QuoteBlock"
    is_container: ClassVar[bool] = True

    children: Sequence[Node] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        _freeze_nodes(self, "children")

    def accept(self, visitor: NodeVisitor, contents: Optional[str], ctx: RenderContext) -> str:
        return visitor.visit_quote_block(self, contents, ctx)


@dataclass(frozen=True, eq=False)
class FixedWidth(Node):
    """Fixed-width area (lines starting with a colon)."""

    node_type: ClassVar[str] = "FixedWidth"

    value: str = ""
    name: Optional[str] = None

    def accept(self, visitor: NodeVisitor, contents: Optional[str], ctx: RenderContext) -> str:
        return visitor.visit_fixed_width(self, contents, ctx)


@dataclass(frozen=True, eq=False)
class SrcBlock(Node):
    """Source code block.

    Parameters
    ----------
    value : str
        Code, with coderef cookies already removed by the parser
    language : str or None
        Language of the block
    name : str or None
        ``#+NAME`` of the block
    caption : sequence of Node
        ``#+CAPTION`` objects
    coderefs : dict
        Coderef label to line number within the block

    """

    node_type: ClassVar[str] = "SrcBlock"
    secondary_fields: ClassVar[tuple[str, ...]] = ("caption",)

    value: str = ""
    language: Optional[str] = None
    name: Optional[str] = None
    caption: Sequence[Node] = field(default_factory=tuple)
    coderefs: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        _freeze_nodes(self, "caption")

    def accept(self, visitor: NodeVisitor, contents: Optional[str], ctx: RenderContext) -> str:
        return visitor.visit_src_block(self, contents, ctx)


@dataclass(frozen=True, eq=False)
class HorizontalRule(Node):
    """Horizontal rule (five dashes or more)."""

    node_type: ClassVar[str] = "HorizontalRule"

    def accept(self, visitor: NodeVisitor, contents: Optional[str], ctx: RenderContext) -> str:
        return visitor.visit_horizontal_rule(self, contents, ctx)


@dataclass(frozen=True, eq=False)
class Table(Node):
    """Org table.

    Parameters
    ----------
    children : sequence of TableRow
        Rows, including rule rows
    name : str or None
        ``#+NAME`` of the table
    caption : sequence of Node
        ``#+CAPTION`` objects
    column_groups : sequence of str
        Column group cookies per column (``<``, ``>``, ``<>`` or empty), taken
        from the ``/`` row of the source table

    """

    node_type: ClassVar[str] = "Table"
    is_container: ClassVar[bool] = True
    secondary_fields: ClassVar[tuple[str, ...]] = ("caption",)

    children: Sequence[Node] = field(default_factory=tuple)
    name: Optional[str] = None
    caption: Sequence[Node] = field(default_factory=tuple)
    column_groups: Sequence[str] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        _freeze_nodes(self, "children", "caption")
        object.__setattr__(self, "column_groups", tuple(self.column_groups))

    def accept(self, visitor: NodeVisitor, contents: Optional[str], ctx: RenderContext) -> str:
        return visitor.visit_table(self, contents, ctx)


@dataclass(frozen=True, eq=False)
class TableRow(Node):
    """Table row; ``rule`` rows are the horizontal separators."""

    node_type: ClassVar[str] = "TableRow"
    is_container: ClassVar[bool] = True

    children: Sequence[Node] = field(default_factory=tuple)
    row_type: TableRowType = "standard"

    def __post_init__(self) -> None:
        _check_choice("TableRow", "row_type", self.row_type, TABLE_ROW_TYPES)
        _freeze_nodes(self, "children")

    def accept(self, visitor: NodeVisitor, contents: Optional[str], ctx: RenderContext) -> str:
        return visitor.visit_table_row(self, contents, ctx)


@dataclass(frozen=True, eq=False)
class TableCell(Node):
    """Table cell containing objects."""

    node_type: ClassVar[str] = "TableCell"
    is_container: ClassVar[bool] = True

    children: Sequence[Node] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        _freeze_nodes(self, "children")

    def accept(self, visitor: NodeVisitor, contents: Optional[str], ctx: RenderContext) -> str:
        return visitor.visit_table_cell(self, contents, ctx)


@dataclass(frozen=True, eq=False)
class Comment(Node):
    """Comment line."""

    node_type: ClassVar[str] = "Comment"

    value: str = ""

    def accept(self, visitor: NodeVisitor, contents: Optional[str], ctx: RenderContext) -> str:
        return visitor.visit_comment(self, contents, ctx)


@dataclass(frozen=True, eq=False)
class CommentBlock(Node):
    """``#+BEGIN_COMMENT`` block."""

    node_type: ClassVar[str] = "CommentBlock"

    value: str = ""

    def accept(self, visitor: NodeVisitor, contents: Optional[str], ctx: RenderContext) -> str:
        return visitor.visit_comment_block(self, contents, ctx)


@dataclass(frozen=True, eq=False)
class FootnoteDefinition(Node):
    """Footnote definition, referenced by label."""

    node_type: ClassVar[str] = "FootnoteDefinition"
    is_container: ClassVar[bool] = True

    label: str = ""
    children: Sequence[Node] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        _freeze_nodes(self, "children")

    def accept(self, visitor: NodeVisitor, contents: Optional[str], ctx: RenderContext) -> str:
        return visitor.visit_footnote_definition(self, contents, ctx)


# ============================================================================
# Objects
# ============================================================================


@dataclass(frozen=True, eq=False)
class PlainText(Node):
    """Plain text, escaped by the renderer."""

    node_type: ClassVar[str] = "PlainText"

    value: str = ""

    def accept(self, visitor: NodeVisitor, contents: Optional[str], ctx: RenderContext) -> str:
        return visitor.visit_plain_text(self, contents, ctx)


@dataclass(frozen=True, eq=False)
class Bold(Node):
    """Bold markup."""

    node_type: ClassVar[str] = "Bold"
    is_container: ClassVar[bool] = True

    children: Sequence[Node] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        _freeze_nodes(self, "children")

    def accept(self, visitor: NodeVisitor, contents: Optional[str], ctx: RenderContext) -> str:
        return visitor.visit_bold(self, contents, ctx)


@dataclass(frozen=True, eq=False)
class Italic(Node):
    """Italic markup."""

    node_type: ClassVar[str] = "Italic"
    is_container: ClassVar[bool] = True

    children: Sequence[Node] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        _freeze_nodes(self, "children")

    def accept(self, visitor: NodeVisitor, contents: Optional[str], ctx: RenderContext) -> str:
        return visitor.visit_italic(self, contents, ctx)


@dataclass(frozen=True, eq=False)
class Underline(Node):
    """Underline markup."""

    node_type: ClassVar[str] = "Underline"
    is_container: ClassVar[bool] = True

    children: Sequence[Node] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        _freeze_nodes(self, "children")

    def accept(self, visitor: NodeVisitor, contents: Optional[str], ctx: RenderContext) -> str:
        return visitor.visit_underline(self, contents, ctx)


@dataclass(frozen=True, eq=False)
class Code(Node):
    """Inline code (``~code~``)."""

    node_type: ClassVar[str] = "Code"

    value: str = ""

    def accept(self, visitor: NodeVisitor, contents: Optional[str], ctx: RenderContext) -> str:
        return visitor.visit_code(self, contents, ctx)


@dataclass(frozen=True, eq=False)
class Verbatim(Node):
    """Inline verbatim (``=verbatim=``)."""

    node_type: ClassVar[str] = "Verbatim"

    value: str = ""

    def accept(self, visitor: NodeVisitor, contents: Optional[str], ctx: RenderContext) -> str:
        return visitor.visit_verbatim(self, contents, ctx)


@dataclass(frozen=True, eq=False)
class LineBreak(Node):
    r"""Forced line break (``\\`` at end of line)."""

    node_type: ClassVar[str] = "LineBreak"

    def accept(self, visitor: NodeVisitor, contents: Optional[str], ctx: RenderContext) -> str:
        return visitor.visit_line_break(self, contents, ctx)


@dataclass(frozen=True, eq=False)
class Link(Node):
    """Link object.

    Parameters
    ----------
    link_type : str
        ``id``, ``custom-id``, ``file``, ``http``, ``https``, ``ftp``,
        ``coderef``, ``radio``, ``fuzzy`` or any other scheme
    path : str
        Link path without the type prefix; web links keep their leading
        ``//``
    raw_link : str
        Link as written in the source
    children : sequence of Node
        Description objects (empty when the link has no description)

    """

    node_type: ClassVar[str] = "Link"
    is_container: ClassVar[bool] = True

    link_type: str = "fuzzy"
    path: str = ""
    raw_link: str = ""
    children: Sequence[Node] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        _freeze_nodes(self, "children")
        if not self.raw_link:
            raw = self.path if self.link_type in ("fuzzy", "radio") else f"{self.link_type}:{self.path}"
            object.__setattr__(self, "raw_link", raw)

    def accept(self, visitor: NodeVisitor, contents: Optional[str], ctx: RenderContext) -> str:
        return visitor.visit_link(self, contents, ctx)


@dataclass(frozen=True, eq=False)
class FootnoteReference(Node):
    """Footnote reference; inline footnotes carry their own definition."""

    node_type: ClassVar[str] = "FootnoteReference"
    secondary_fields: ClassVar[tuple[str, ...]] = ("definition",)

    label: Optional[str] = None
    definition: Sequence[Node] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        _freeze_nodes(self, "definition")

    def accept(self, visitor: NodeVisitor, contents: Optional[str], ctx: RenderContext) -> str:
        return visitor.visit_footnote_reference(self, contents, ctx)


@dataclass(frozen=True, eq=False)
class Target(Node):
    """Dedicated target (``<<target>>``)."""

    node_type: ClassVar[str] = "Target"

    value: str = ""

    def accept(self, visitor: NodeVisitor, contents: Optional[str], ctx: RenderContext) -> str:
        return visitor.visit_target(self, contents, ctx)


@dataclass(frozen=True, eq=False)
class RadioTarget(Node):
    """Radio target (``<<<target>>>``); radio links render its objects."""

    node_type: ClassVar[str] = "RadioTarget"
    is_container: ClassVar[bool] = True

    value: str = ""
    children: Sequence[Node] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        _freeze_nodes(self, "children")

    def accept(self, visitor: NodeVisitor, contents: Optional[str], ctx: RenderContext) -> str:
        return visitor.visit_radio_target(self, contents, ctx)


NODE_CLASSES: dict[str, type[Node]] = {
    cls.node_type: cls
    for cls in (
        Document,
        Section,
        Headline,
        Paragraph,
        PlainList,
        Item,
        QuoteBlock,
        FixedWidth,
        SrcBlock,
        HorizontalRule,
        Table,
        TableRow,
        TableCell,
        Comment,
        CommentBlock,
        FootnoteDefinition,
        PlainText,
        Bold,
        Italic,
        Underline,
        Code,
        Verbatim,
        LineBreak,
        Link,
        FootnoteReference,
        Target,
        RadioTarget,
    )
}


def iter_nodes(root: Node):
    """Yield ``(node, parent)`` pairs in document order.

    Secondary sequences (titles, tags, captions, inline definitions) are
    visited before the node's children, matching their position in the
    source text. Objects in child sequences that are not nodes are skipped.

    Parameters
    ----------
    root : Node
        Node to start from; yielded with a ``None`` parent

    """
    stack: list[tuple[Node, Optional[Node]]] = [(root, None)]
    while stack:
        node, parent = stack.pop()
        yield node, parent
        owned = node.secondary_nodes() + node.child_nodes
        for child in reversed(owned):
            if isinstance(child, Node):
                stack.append((child, node))
