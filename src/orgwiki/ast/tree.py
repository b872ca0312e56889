#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgwiki/ast/tree.py
"""Arena index and read-only queries over a document tree.

Nodes do not hold references to their parents. :class:`DocumentTree` walks
the tree once, stores every node in document order together with the arena
index of its parent, and answers the contextual questions renderers ask:
ancestry, list depth, headline numbering, reference resolution and table
position classification.

The index is built once per export and never modified afterwards.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Mapping, Optional, Sequence, Union

from orgwiki.ast.nodes import (
    Code,
    FixedWidth,
    FootnoteDefinition,
    Headline,
    Link,
    Node,
    Paragraph,
    PlainList,
    PlainText,
    RadioTarget,
    SrcBlock,
    Table,
    TableCell,
    TableRow,
    Target,
    Verbatim,
    iter_nodes,
)

logger = logging.getLogger(__name__)

# Element kinds that can be referenced by name or caption
NAMEABLE_TYPES: tuple[type[Node], ...] = (Paragraph, Table, SrcBlock, FixedWidth)


@dataclass(frozen=True)
class ExternalTarget:
    """An id that lives in another document.

    Parameters
    ----------
    path : str
        Path of the file holding the id

    """

    path: str


@dataclass(frozen=True)
class InternalTarget:
    """An id that lives in the current document."""

    node: Node


ResolvedTarget = Union[ExternalTarget, InternalTarget]


def node_text(nodes: Iterable[Node]) -> str:
    """Return the literal text carried by a sequence of objects.

    Only text-bearing leaves contribute; markup is dropped. Used to match
    headline titles and radio targets against link paths.

    Parameters
    ----------
    nodes : iterable of Node
        Objects to flatten

    Returns
    -------
    str
        Concatenated text

    """
    parts: list[str] = []
    for node in nodes:
        if isinstance(node, (PlainText, Code, Verbatim)):
            parts.append(node.value)
        else:
            parts.append(node_text(node.child_nodes))
    return "".join(parts)


def _normalize_title(text: str) -> str:
    return " ".join(text.split())


def _property(properties: Mapping[str, object], name: str) -> object:
    """Look up a property case-insensitively."""
    for key, value in properties.items():
        if key.upper() == name:
            return value
    return None


def _is_truthy_property(value: object) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return value.strip().lower() not in ("", "nil", "false", "no")
    return bool(value)


class DocumentTree:
    """Arena index of an immutable document tree.

    Parameters
    ----------
    root : Node
        Root of the tree, usually a :class:`~orgwiki.ast.nodes.Document`
    id_locations : mapping of str to str, optional
        Known ids of other documents, mapped to the file that holds them.
        Ids found inside ``root`` take precedence.

    Raises
    ------
    ValueError
        If the same node object occurs twice in the tree

    """

    def __init__(self, root: Node, id_locations: Optional[Mapping[str, str]] = None):
        """Index every node of ``root`` in document order."""
        self.root = root
        self.id_locations: dict[str, str] = dict(id_locations or {})
        self._nodes: list[Node] = []
        self._parents: list[Optional[int]] = []
        self._index: dict[Node, int] = {}

        for node, parent in iter_nodes(root):
            if node in self._index:
                raise ValueError(f"{node.node_type} node appears more than once in the tree")
            self._index[node] = len(self._nodes)
            self._nodes.append(node)
            self._parents.append(None if parent is None else self._index[parent])

        headlines = [node for node in self._nodes if isinstance(node, Headline) and not node.footnote_section]
        self._min_level = min((headline.level for headline in headlines), default=1)
        self._numbers = self._number_headlines()
        logger.debug("Indexed %d nodes (%d headlines)", len(self._nodes), len(headlines))

    # ------------------------------------------------------------------
    # Arena access
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node: object) -> bool:
        return node in self._index

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def index_of(self, node: Node) -> int:
        """Return the arena index of ``node``.

        Raises
        ------
        ValueError
            If the node does not belong to this tree

        """
        try:
            return self._index[node]
        except KeyError as e:
            raise ValueError(f"{node.node_type} node is not part of this document tree") from e

    def parent(self, node: Node) -> Optional[Node]:
        """Return the parent of ``node``, or None for the root."""
        parent_index = self._parents[self.index_of(node)]
        return None if parent_index is None else self._nodes[parent_index]

    def ancestors(self, node: Node) -> Iterator[Node]:
        """Yield the ancestors of ``node``, nearest first."""
        parent_index = self._parents[self.index_of(node)]
        while parent_index is not None:
            yield self._nodes[parent_index]
            parent_index = self._parents[parent_index]

    def nearest_ancestor(self, node: Node, node_class: type[Node]) -> Optional[Node]:
        """Return the nearest ancestor of the given class, if any."""
        for ancestor in self.ancestors(node):
            if isinstance(ancestor, node_class):
                return ancestor
        return None

    def list_depth(self, node: Node) -> int:
        """Count the PlainList ancestors of ``node``."""
        return sum(1 for ancestor in self.ancestors(node) if isinstance(ancestor, PlainList))

    # ------------------------------------------------------------------
    # Headlines
    # ------------------------------------------------------------------

    @property
    def min_level(self) -> int:
        """Smallest headline level in the document (1 when there is none)."""
        return self._min_level

    def relative_level(self, headline: Headline) -> int:
        """Return the headline level relative to the shallowest headline."""
        return headline.level - self._min_level + 1

    def _is_excluded_from_numbering(self, headline: Headline) -> bool:
        if headline.footnote_section or _is_truthy_property(_property(headline.properties, "UNNUMBERED")):
            return True
        return any(
            isinstance(ancestor, Headline) and _is_truthy_property(_property(ancestor.properties, "UNNUMBERED"))
            for ancestor in self.ancestors(headline)
        )

    def _number_headlines(self) -> dict[int, tuple[int, ...]]:
        """Assign section numbers to every headline that can be numbered."""
        numbers: dict[int, tuple[int, ...]] = {}
        counters: dict[Optional[int], int] = {}
        for index, node in enumerate(self._nodes):
            if not isinstance(node, Headline) or self._is_excluded_from_numbering(node):
                continue
            parent_headline = self.nearest_ancestor(node, Headline)
            parent_index = None if parent_headline is None else self._index[parent_headline]
            if parent_index is not None and parent_index not in numbers:
                continue
            counters[parent_index] = counters.get(parent_index, 0) + 1
            prefix = () if parent_index is None else numbers[parent_index]
            numbers[index] = prefix + (counters[parent_index],)
        return numbers

    def is_numbered(self, headline: Headline, section_numbers: Union[bool, int]) -> bool:
        """Tell whether ``headline`` carries a section number.

        Parameters
        ----------
        headline : Headline
            Headline to check
        section_numbers : bool or int
            Numbering policy: all, none, or relative levels up to the given
            depth

        """
        if self.index_of(headline) not in self._numbers:
            return False
        if isinstance(section_numbers, bool):
            return section_numbers
        return self.relative_level(headline) <= section_numbers

    def headline_number(self, headline: Headline, section_numbers: Union[bool, int]) -> Optional[tuple[int, ...]]:
        """Return the section number of ``headline``, or None when unnumbered."""
        if not self.is_numbered(headline, section_numbers):
            return None
        return self._numbers[self.index_of(headline)]

    def ordinal(self, node: Node, section_numbers: Union[bool, int]) -> Optional[tuple[int, ...]]:
        """Return the reference number of a link destination.

        Headlines use their section number. Named or captioned elements are
        numbered by position among the named or captioned elements of the same
        kind. Targets take the number of their nearest numbered ancestor.

        Returns
        -------
        tuple of int or None
            Number components, or None when the destination has no number

        """
        if isinstance(node, Headline):
            return self.headline_number(node, section_numbers)
        if isinstance(node, NAMEABLE_TYPES):
            if not (node.name or getattr(node, "caption", ())):
                return None
            count = 0
            for candidate in self._nodes:
                if type(candidate) is type(node) and (candidate.name or getattr(candidate, "caption", ())):
                    count += 1
                if candidate is node:
                    return (count,)
        if isinstance(node, (Target, RadioTarget)):
            for ancestor in self.ancestors(node):
                if isinstance(ancestor, (Headline, *NAMEABLE_TYPES)):
                    number = self.ordinal(ancestor, section_numbers)
                    if number is not None:
                        return number
        return None

    # ------------------------------------------------------------------
    # Reference resolution
    # ------------------------------------------------------------------

    def resolve_id(self, link: Link) -> Optional[ResolvedTarget]:
        """Resolve an ``id`` or ``custom-id`` link.

        Returns
        -------
        ExternalTarget, InternalTarget or None
            Destination in this document, destination file of an external
            id, or None when the id is unknown

        """
        if link.link_type == "custom-id":
            key, wanted = "CUSTOM_ID", link.path.lstrip("#")
        else:
            key, wanted = "ID", link.path
        for node in self._nodes:
            if isinstance(node, Headline) and _property(node.properties, key) == wanted:
                return InternalTarget(node)
        if link.link_type == "id" and wanted in self.id_locations:
            return ExternalTarget(self.id_locations[wanted])
        return None

    def resolve_radio(self, link: Link) -> Optional[RadioTarget]:
        """Return the radio target matching a ``radio`` link, ignoring case."""
        wanted = _normalize_title(link.path).casefold()
        for node in self._nodes:
            if isinstance(node, RadioTarget) and _normalize_title(node.value).casefold() == wanted:
                return node
        return None

    def resolve_fuzzy(self, link: Link) -> Optional[Node]:
        """Resolve a fuzzy link to its destination.

        A path starting with ``*`` only matches headline titles. Otherwise a
        dedicated target wins over an element name, which wins over a
        headline title.

        """
        path = link.path
        if path.startswith("*"):
            return self._find_headline(path[1:])

        for node in self._nodes:
            if isinstance(node, Target) and node.value == path:
                return node
        for node in self._nodes:
            if isinstance(node, NAMEABLE_TYPES) and node.name == path:
                return node
        return self._find_headline(path)

    def _find_headline(self, title: str) -> Optional[Headline]:
        wanted = _normalize_title(title)
        for node in self._nodes:
            if isinstance(node, Headline) and _normalize_title(node_text(node.title)) == wanted:
                return node
        return None

    def resolve_coderef(self, label: str) -> Optional[int]:
        """Return the line number of a coderef label, searching all source blocks."""
        for node in self._nodes:
            if isinstance(node, SrcBlock) and label in node.coderefs:
                return node.coderefs[label]
        return None

    def resolve_footnote(self, label: str) -> Optional[FootnoteDefinition]:
        """Return the footnote definition with the given label."""
        for node in self._nodes:
            if isinstance(node, FootnoteDefinition) and node.label == label:
                return node
        return None

    # ------------------------------------------------------------------
    # Tables
    # ------------------------------------------------------------------

    @staticmethod
    def _header_rows(table: Table) -> Sequence[Node]:
        """Return the header rows of ``table`` (empty when it has no header)."""
        rows = table.children
        first_rule = next(
            (i for i, row in enumerate(rows) if isinstance(row, TableRow) and row.row_type == "rule"),
            None,
        )
        if first_rule is None:
            return ()

        def _standard(candidates: Sequence[Node]) -> list[Node]:
            return [row for row in candidates if isinstance(row, TableRow) and row.row_type == "standard"]

        before = _standard(rows[:first_rule])
        if not before or not _standard(rows[first_rule + 1 :]):
            return ()
        return before

    def table_has_header(self, table: Table) -> bool:
        """Tell whether ``table`` has a header section.

        A header exists when a rule row has standard rows both before and
        after it. Only column headers are recognized; row headers are not.

        """
        return bool(self._header_rows(table))

    def _owning_table(self, row: TableRow) -> Optional[Table]:
        parent = self.parent(row)
        return parent if isinstance(parent, Table) else None

    def row_starts_header(self, row: TableRow) -> bool:
        """Tell whether ``row`` is the first row of its table's header."""
        table = self._owning_table(row)
        if table is None:
            return False
        header = self._header_rows(table)
        return bool(header) and header[0] is row

    def row_ends_header(self, row: TableRow) -> bool:
        """Tell whether ``row`` is the last row of its table's header."""
        table = self._owning_table(row)
        if table is None:
            return False
        header = self._header_rows(table)
        return bool(header) and header[-1] is row

    def cell_starts_colgroup(self, cell: TableCell) -> bool:
        """Tell whether ``cell`` opens a column group.

        A column after the first opens a group when its own cookie contains
        ``<`` or the previous column's cookie contains ``>``.

        """
        row = self.parent(cell)
        if not isinstance(row, TableRow):
            return False
        table = self._owning_table(row)
        if table is None or not table.column_groups:
            return False
        column = row.children.index(cell)
        if column == 0:
            return False
        groups = table.column_groups
        current = groups[column] if column < len(groups) else ""
        previous = groups[column - 1] if column - 1 < len(groups) else ""
        return "<" in current or ">" in previous
