#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the document tree index.

Tests cover:
- Parent and ancestor queries
- Relative levels and headline numbering
- Reference resolution (id, radio, fuzzy, coderef, footnote)
- Table header and column group classification

"""

import pytest
from utils import text

from orgwiki.ast import (
    Bold,
    Document,
    DocumentTree,
    ExternalTarget,
    FootnoteDefinition,
    Headline,
    InternalTarget,
    Item,
    Link,
    Paragraph,
    PlainList,
    RadioTarget,
    Section,
    SrcBlock,
    Table,
    TableCell,
    TableRow,
    Target,
    node_text,
)


def _headline(title: str, level: int = 1, children=(), **kwargs) -> Headline:
    return Headline(level=level, title=[text(title)], children=list(children), **kwargs)


def _row(*values: str) -> TableRow:
    return TableRow(children=[TableCell(children=[text(v)]) for v in values])


@pytest.mark.unit
class TestArenaQueries:
    """Tests for parent, ancestor and depth queries."""

    def test_parent_and_ancestors(self):
        leaf = text("x")
        paragraph = Paragraph(children=[leaf])
        section = Section(children=[paragraph])
        doc = Document(children=[section])
        tree = DocumentTree(doc)

        assert tree.parent(leaf) is paragraph
        assert tree.parent(doc) is None
        assert list(tree.ancestors(leaf)) == [paragraph, section, doc]
        assert tree.nearest_ancestor(leaf, Section) is section

    def test_list_depth(self):
        inner_item = Item(children=[Paragraph(children=[text("b")])])
        inner = PlainList(children=[inner_item])
        outer_item = Item(children=[Paragraph(children=[text("a")]), inner])
        doc = Document(children=[PlainList(children=[outer_item])])
        tree = DocumentTree(doc)

        assert tree.list_depth(outer_item) == 1
        assert tree.list_depth(inner_item) == 2

    def test_duplicate_node_rejected(self):
        shared = text("x")
        doc = Document(children=[Paragraph(children=[shared]), Paragraph(children=[shared])])
        with pytest.raises(ValueError, match="more than once"):
            DocumentTree(doc)

    def test_foreign_node_rejected(self):
        tree = DocumentTree(Document())
        with pytest.raises(ValueError, match="not part"):
            tree.index_of(text("elsewhere"))

    def test_len_and_contains(self):
        leaf = text("x")
        tree = DocumentTree(Document(children=[Paragraph(children=[leaf])]))
        assert len(tree) == 3
        assert leaf in tree

    def test_node_text_drops_markup(self):
        assert node_text([text("a "), Bold(children=[text("b")])]) == "a b"


@pytest.mark.unit
class TestHeadlineNumbering:
    """Tests for relative levels and section numbers."""

    def test_relative_level(self):
        deep = _headline("Deep", level=3)
        top = _headline("Top", level=2, children=[deep])
        tree = DocumentTree(Document(children=[top]))

        assert tree.min_level == 2
        assert tree.relative_level(top) == 1
        assert tree.relative_level(deep) == 2

    def test_min_level_without_headlines(self):
        assert DocumentTree(Document()).min_level == 1

    def test_footnote_section_ignored_for_min_level(self):
        notes = _headline("Footnotes", level=1, footnote_section=True)
        body = _headline("Body", level=2)
        tree = DocumentTree(Document(children=[body, notes]))
        assert tree.min_level == 2

    def test_nested_numbers(self):
        child = _headline("Child", level=2)
        first = _headline("First")
        second = _headline("Second", children=[child])
        tree = DocumentTree(Document(children=[first, second]))

        assert tree.headline_number(first, True) == (1,)
        assert tree.headline_number(second, True) == (2,)
        assert tree.headline_number(child, True) == (2, 1)

    def test_unnumbered_subtree_skipped(self):
        """UNNUMBERED headlines and their descendants take no number."""
        hidden_child = _headline("Hidden child", level=2)
        hidden = _headline("Hidden", properties={"UNNUMBERED": "t"}, children=[hidden_child])
        first = _headline("First")
        after = _headline("After")
        tree = DocumentTree(Document(children=[first, hidden, after]))

        assert tree.headline_number(hidden, True) is None
        assert tree.headline_number(hidden_child, True) is None
        assert tree.headline_number(after, True) == (2,)

    def test_unnumbered_nil_is_numbered(self):
        headline = _headline("Shown", properties={"unnumbered": "nil"})
        tree = DocumentTree(Document(children=[headline]))
        assert tree.is_numbered(headline, True)

    def test_numbering_disabled(self):
        headline = _headline("A")
        tree = DocumentTree(Document(children=[headline]))
        assert not tree.is_numbered(headline, False)

    def test_numbering_depth_limit(self):
        child = _headline("Child", level=2)
        parent = _headline("Parent", children=[child])
        tree = DocumentTree(Document(children=[parent]))

        assert tree.is_numbered(parent, 1)
        assert not tree.is_numbered(child, 1)


@pytest.mark.unit
class TestOrdinal:
    """Tests for reference numbers of link destinations."""

    def test_named_elements_counted_by_kind(self):
        first = Table(name="first", children=[_row("a")])
        unnamed = Table(children=[_row("b")])
        captioned = Table(caption=[text("Third")], children=[_row("c")])
        block = SrcBlock(name="code", value="x")
        tree = DocumentTree(Document(children=[Section(children=[first, unnamed, block, captioned])]))

        assert tree.ordinal(first, True) == (1,)
        assert tree.ordinal(unnamed, True) is None
        assert tree.ordinal(captioned, True) == (2,)
        assert tree.ordinal(block, True) == (1,)

    def test_target_takes_headline_number(self):
        target = Target(value="here")
        child = _headline("Child", level=2, children=[Section(children=[Paragraph(children=[target])])])
        parent = _headline("Parent", children=[child])
        tree = DocumentTree(Document(children=[_headline("Other"), parent]))

        assert tree.ordinal(target, True) == (2, 1)

    def test_target_outside_headlines(self):
        target = Target(value="top")
        tree = DocumentTree(Document(children=[Section(children=[Paragraph(children=[target])])]))
        assert tree.ordinal(target, True) is None


@pytest.mark.unit
class TestResolution:
    """Tests for link and footnote resolution."""

    def test_custom_id(self):
        headline = _headline("Target", properties={"CUSTOM_ID": "sec"})
        tree = DocumentTree(Document(children=[headline]))
        result = tree.resolve_id(Link(link_type="custom-id", path="#sec"))
        assert result == InternalTarget(headline)

    def test_internal_id(self):
        headline = _headline("Target", properties={"ID": "abc-123"})
        tree = DocumentTree(Document(children=[headline]))
        assert tree.resolve_id(Link(link_type="id", path="abc-123")) == InternalTarget(headline)

    def test_external_id(self):
        tree = DocumentTree(Document(), id_locations={"abc": "other.org"})
        assert tree.resolve_id(Link(link_type="id", path="abc")) == ExternalTarget("other.org")

    def test_internal_id_wins_over_external(self):
        headline = _headline("Here", properties={"ID": "abc"})
        tree = DocumentTree(Document(children=[headline]), id_locations={"abc": "other.org"})
        assert isinstance(tree.resolve_id(Link(link_type="id", path="abc")), InternalTarget)

    def test_unknown_id(self):
        tree = DocumentTree(Document())
        assert tree.resolve_id(Link(link_type="id", path="missing")) is None
        assert tree.resolve_id(Link(link_type="custom-id", path="missing")) is None

    def test_radio_case_insensitive(self):
        radio = RadioTarget(value="Org  Mode", children=[text("Org Mode")])
        tree = DocumentTree(Document(children=[Section(children=[Paragraph(children=[radio])])]))
        assert tree.resolve_radio(Link(link_type="radio", path="org mode")) is radio

    def test_fuzzy_target_wins_over_name_and_title(self):
        target = Target(value="dest")
        named = Table(name="dest", children=[_row("a")])
        headline = _headline("dest", children=[Section(children=[named, Paragraph(children=[target])])])
        tree = DocumentTree(Document(children=[headline]))

        assert tree.resolve_fuzzy(Link(path="dest")) is target

    def test_fuzzy_name_wins_over_title(self):
        named = Table(name="dest", children=[_row("a")])
        headline = _headline("dest", children=[Section(children=[named])])
        tree = DocumentTree(Document(children=[headline]))
        assert tree.resolve_fuzzy(Link(path="dest")) is named

    def test_fuzzy_star_matches_titles_only(self):
        target = Target(value="Intro")
        headline = _headline("Intro", children=[Section(children=[Paragraph(children=[target])])])
        tree = DocumentTree(Document(children=[headline]))

        assert tree.resolve_fuzzy(Link(path="*Intro")) is headline

    def test_fuzzy_unresolved(self):
        assert DocumentTree(Document()).resolve_fuzzy(Link(path="nowhere")) is None

    def test_coderef(self):
        block = SrcBlock(value="a\nb", coderefs={"jump": 2})
        tree = DocumentTree(Document(children=[Section(children=[block])]))
        assert tree.resolve_coderef("jump") == 2
        assert tree.resolve_coderef("missing") is None

    def test_footnote(self):
        definition = FootnoteDefinition(label="1", children=[Paragraph(children=[text("note")])])
        tree = DocumentTree(Document(children=[Section(children=[definition])]))
        assert tree.resolve_footnote("1") is definition
        assert tree.resolve_footnote("2") is None


@pytest.mark.unit
class TestTableClassification:
    """Tests for header rows and column groups."""

    def test_header_detected(self):
        header = _row("h1", "h2")
        body = _row("a", "b")
        table = Table(children=[header, TableRow(row_type="rule"), body])
        tree = DocumentTree(table)

        assert tree.table_has_header(table)
        assert tree.row_starts_header(header)
        assert tree.row_ends_header(header)
        assert not tree.row_starts_header(body)

    def test_multi_row_header(self):
        first = _row("a")
        second = _row("b")
        table = Table(children=[first, second, TableRow(row_type="rule"), _row("c")])
        tree = DocumentTree(table)

        assert tree.row_starts_header(first)
        assert not tree.row_ends_header(first)
        assert tree.row_ends_header(second)
        assert not tree.row_starts_header(second)

    def test_no_rule_no_header(self):
        first = _row("a")
        table = Table(children=[first, _row("b")])
        tree = DocumentTree(table)
        assert not tree.table_has_header(table)
        assert not tree.row_starts_header(first)

    def test_trailing_rule_no_header(self):
        """A rule with no standard rows after it does not make a header."""
        table = Table(children=[_row("a"), TableRow(row_type="rule")])
        assert not DocumentTree(table).table_has_header(table)

    def test_leading_rule_no_header(self):
        table = Table(children=[TableRow(row_type="rule"), _row("a")])
        assert not DocumentTree(table).table_has_header(table)

    def test_colgroup_from_own_cookie(self):
        row = _row("a", "b", "c")
        table = Table(children=[row], column_groups=["", "<", ""])
        tree = DocumentTree(table)
        cells = row.children

        assert not tree.cell_starts_colgroup(cells[0])
        assert tree.cell_starts_colgroup(cells[1])
        assert not tree.cell_starts_colgroup(cells[2])

    def test_colgroup_from_previous_cookie(self):
        row = _row("a", "b", "c")
        table = Table(children=[row], column_groups=["", ">", ""])
        tree = DocumentTree(table)
        assert tree.cell_starts_colgroup(row.children[2])

    def test_first_column_never_starts_group(self):
        row = _row("a", "b")
        table = Table(children=[row], column_groups=["<>", ""])
        tree = DocumentTree(table)
        assert not tree.cell_starts_colgroup(row.children[0])
        assert tree.cell_starts_colgroup(row.children[1])

    def test_no_cookies(self):
        row = _row("a", "b")
        tree = DocumentTree(Table(children=[row]))
        assert not tree.cell_starts_colgroup(row.children[1])
