#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for plain list rendering."""

import pytest
from utils import document, paragraph, render, text

from orgwiki.ast import Item, PlainList


def _item(value: str, *children, **kwargs) -> Item:
    return Item(children=[paragraph(text(value)), *children], **kwargs)


def _nested(list_type: str) -> PlainList:
    inner = PlainList(list_type=list_type, children=[_item("inner")])
    return PlainList(list_type=list_type, children=[_item("outer", inner)])


@pytest.mark.unit
class TestDokuLists:
    """Tests for doku-style lists."""

    def test_unordered(self):
        doc = document(PlainList(children=[_item("a"), _item("b")]))
        assert render(doc) == '  * "a"\n  * "b"\n'

    def test_ordered(self):
        doc = document(PlainList(list_type="ordered", children=[_item("a")]))
        assert render(doc) == '  - "a"\n'

    def test_nested_ordered_indent(self):
        """Depth 2 is indented by four spaces before the bullet."""
        assert render(document(_nested("ordered"))) == '  - "outer"\n    - "inner"\n'

    def test_nested_unordered(self):
        assert render(document(_nested("unordered"))) == '  * "outer"\n    * "inner"\n'

    @pytest.mark.parametrize("state,token", [("on", "[X] "), ("off", "[ ] "), ("trans", "[-] ")])
    def test_checkbox(self, state, token):
        doc = document(PlainList(children=[_item("task", checkbox=state)]))
        assert render(doc) == f'  * {token}"task"\n'

    def test_descriptive_tag(self):
        item = Item(tag=[text("term")], children=[paragraph(text("definition"))])
        doc = document(PlainList(list_type="descriptive", children=[item]))
        assert render(doc) == '  * **"term"** "definition"\n'

    def test_item_opening_with_nested_list(self):
        """A nested list as the first element keeps its indentation."""
        inner = PlainList(children=[_item("inner")])
        doc = document(PlainList(children=[Item(children=[inner])]))
        assert render(doc) == '  *\n    * "inner"\n'

    def test_paragraph_after_nested_list_stays_in_item(self):
        inner = PlainList(children=[_item("inner")])
        outer = Item(children=[paragraph(text("first")), inner, paragraph(text("more"))])
        assert render(document(PlainList(children=[outer]))) == '  * "first"\\\\ "more"\n    * "inner"\n'


@pytest.mark.unit
class TestCreoleLists:
    """Tests for creole-style lists."""

    def test_unordered(self):
        doc = document(PlainList(children=[_item("a")]))
        assert render(doc, dialect_style="creole") == '* "a"\n'

    def test_nested_ordered_repeats_bullet(self):
        """Depth 2 repeats the bullet once."""
        assert render(document(_nested("ordered")), dialect_style="creole") == '# "outer"\n## "inner"\n'

    def test_nested_unordered(self):
        assert render(document(_nested("unordered")), dialect_style="creole") == '* "outer"\n** "inner"\n'

    def test_item_opening_with_nested_list(self):
        inner = PlainList(children=[_item("inner")])
        doc = document(PlainList(children=[Item(children=[inner])]))
        assert render(doc, dialect_style="creole") == '*\n** "inner"\n'
