#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgwiki/ast/visitors.py
"""Visitor interface for rendering document tree nodes.

Every node kind dispatches to exactly one ``visit_*`` method through
``Node.accept``. All methods are abstract, so a renderer that forgets a node
kind fails at instantiation instead of in the middle of an export.

Each method receives the node, the already-rendered fragment of its
children (``None`` when the node has no children) and the read-only
:class:`~orgwiki.renderers.context.RenderContext`, and returns the node's
fragment.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

from orgwiki.ast.nodes import (
    Bold,
    Code,
    Comment,
    CommentBlock,
    Document,
    FixedWidth,
    FootnoteDefinition,
    FootnoteReference,
    Headline,
    HorizontalRule,
    Italic,
    Item,
    LineBreak,
    Link,
    Paragraph,
    PlainList,
    PlainText,
    QuoteBlock,
    RadioTarget,
    Section,
    SrcBlock,
    Table,
    TableCell,
    TableRow,
    Target,
    Underline,
    Verbatim,
)

if TYPE_CHECKING:
    from orgwiki.renderers.context import RenderContext


class NodeVisitor(ABC):
    """Abstract base class for node renderers.

    Examples
    --------
    Renderers implement every method; the exporter drives the walk:

        >>> renderer = WikiRenderer(options)
        >>> fragment = node.accept(renderer, contents, ctx)

    """

    @abstractmethod
    def visit_document(self, node: Document, contents: Optional[str], ctx: RenderContext) -> str:
        """Visit a Document node.

        Parameters
        ----------
        node : Document
            The document root
        contents : str or None
            Rendered fragment of the children, None when there are none
        ctx : RenderContext
            Options and tree queries for the current export

        Returns
        -------
        str
            Rendered fragment

        """
        pass

    @abstractmethod
    def visit_section(self, node: Section, contents: Optional[str], ctx: RenderContext) -> str:
        """Visit a Section node."""
        pass

    @abstractmethod
    def visit_headline(self, node: Headline, contents: Optional[str], ctx: RenderContext) -> str:
        """Visit a Headline node; ``contents`` holds its section and sub-headlines."""
        pass

    @abstractmethod
    def visit_paragraph(self, node: Paragraph, contents: Optional[str], ctx: RenderContext) -> str:
        """Visit a Paragraph node."""
        pass

    @abstractmethod
    def visit_plain_list(self, node: PlainList, contents: Optional[str], ctx: RenderContext) -> str:
        """Visit a PlainList node."""
        pass

    @abstractmethod
    def visit_item(self, node: Item, contents: Optional[str], ctx: RenderContext) -> str:
        """Visit an Item node."""
        pass

    @abstractmethod
    def visit_quote_block(self, node: QuoteBlock, contents: Optional[str], ctx: RenderContext) -> str:
        """Visit a QuoteBlock node."""
        pass

    @abstractmethod
    def visit_fixed_width(self, node: FixedWidth, contents: Optional[str], ctx: RenderContext) -> str:
        """Visit a FixedWidth node (always a leaf)."""
        pass

    @abstractmethod
    def visit_src_block(self, node: SrcBlock, contents: Optional[str], ctx: RenderContext) -> str:
        """Visit a SrcBlock node (always a leaf)."""
        pass

    @abstractmethod
    def visit_horizontal_rule(self, node: HorizontalRule, contents: Optional[str], ctx: RenderContext) -> str:
        """Visit a HorizontalRule node."""
        pass

    @abstractmethod
    def visit_table(self, node: Table, contents: Optional[str], ctx: RenderContext) -> str:
        """Visit a Table node."""
        pass

    @abstractmethod
    def visit_table_row(self, node: TableRow, contents: Optional[str], ctx: RenderContext) -> str:
        """Visit a TableRow node."""
        pass

    @abstractmethod
    def visit_table_cell(self, node: TableCell, contents: Optional[str], ctx: RenderContext) -> str:
        """Visit a TableCell node."""
        pass

    @abstractmethod
    def visit_comment(self, node: Comment, contents: Optional[str], ctx: RenderContext) -> str:
        """Visit a Comment node."""
        pass

    @abstractmethod
    def visit_comment_block(self, node: CommentBlock, contents: Optional[str], ctx: RenderContext) -> str:
        """Visit a CommentBlock node."""
        pass

    @abstractmethod
    def visit_footnote_definition(
        self, node: FootnoteDefinition, contents: Optional[str], ctx: RenderContext
    ) -> str:
        """Visit a FootnoteDefinition node."""
        pass

    @abstractmethod
    def visit_plain_text(self, node: PlainText, contents: Optional[str], ctx: RenderContext) -> str:
        """Visit a PlainText node."""
        pass

    @abstractmethod
    def visit_bold(self, node: Bold, contents: Optional[str], ctx: RenderContext) -> str:
        """Visit a Bold node."""
        pass

    @abstractmethod
    def visit_italic(self, node: Italic, contents: Optional[str], ctx: RenderContext) -> str:
        """Visit an Italic node."""
        pass

    @abstractmethod
    def visit_underline(self, node: Underline, contents: Optional[str], ctx: RenderContext) -> str:
        """Visit an Underline node."""
        pass

    @abstractmethod
    def visit_code(self, node: Code, contents: Optional[str], ctx: RenderContext) -> str:
        """Visit an inline Code node."""
        pass

    @abstractmethod
    def visit_verbatim(self, node: Verbatim, contents: Optional[str], ctx: RenderContext) -> str:
        """Visit an inline Verbatim node."""
        pass

    @abstractmethod
    def visit_line_break(self, node: LineBreak, contents: Optional[str], ctx: RenderContext) -> str:
        """Visit a LineBreak node."""
        pass

    @abstractmethod
    def visit_link(self, node: Link, contents: Optional[str], ctx: RenderContext) -> str:
        """Visit a Link node; ``contents`` is the rendered description, if any."""
        pass

    @abstractmethod
    def visit_footnote_reference(
        self, node: FootnoteReference, contents: Optional[str], ctx: RenderContext
    ) -> str:
        """Visit a FootnoteReference node."""
        pass

    @abstractmethod
    def visit_target(self, node: Target, contents: Optional[str], ctx: RenderContext) -> str:
        """Visit a Target node."""
        pass

    @abstractmethod
    def visit_radio_target(self, node: RadioTarget, contents: Optional[str], ctx: RenderContext) -> str:
        """Visit a RadioTarget node."""
        pass
