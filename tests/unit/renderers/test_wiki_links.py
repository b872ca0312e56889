#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for link rendering.

Tests cover:
- id and custom-id links (internal and external)
- Inline images
- coderef, radio and fuzzy links
- External link fallbacks and .org rewriting

"""

import pytest
from utils import document, paragraph, render, text

from orgwiki.ast import (
    Bold,
    Document,
    Headline,
    Link,
    Paragraph,
    RadioTarget,
    Section,
    SrcBlock,
    Table,
    TableCell,
    TableRow,
)
from orgwiki.options import WikiRendererOptions
from orgwiki.renderers.links import format_number, rewrite_org_extension


def _headline(title: str, level: int = 1, children=(), **kwargs) -> Headline:
    return Headline(level=level, title=[text(title)], children=list(children), **kwargs)


def _with_body(headline_title: str, *body, **kwargs) -> Headline:
    return _headline(headline_title, children=[Section(children=list(body))], **kwargs)


@pytest.mark.unit
class TestHelpers:
    """Tests for module helpers."""

    def test_format_number(self):
        assert format_number((2, 3)) == "2.3"

    def test_rewrite_disabled(self):
        assert rewrite_org_extension("a.org", WikiRendererOptions()) == "a.org"

    def test_rewrite_enabled(self):
        options = WikiRendererOptions(org_links_as_target_ext=True, target_extension="html")
        assert rewrite_org_extension("a.org", options) == "a.html"
        assert rewrite_org_extension("a.org.bak", options) == "a.org.bak"


@pytest.mark.unit
class TestExternalLinks:
    """Tests for the external link fallback."""

    def test_web_link(self):
        assert render(Link(link_type="https", path="//example.com")) == "https://example.com"

    def test_web_link_with_description(self):
        link = Link(link_type="https", path="//example.com", children=[text("Example")])
        assert render(link) == '[[https://example.com|"Example"]]'

    def test_absolute_file_normalized(self):
        assert render(Link(link_type="file", path="/a/../b/notes.org")) == "file:///b/notes.org"

    def test_absolute_file_rewritten(self):
        link = Link(link_type="file", path="/b/notes.org")
        assert render(link, org_links_as_target_ext=True) == "file:///b/notes.txt"

    def test_relative_file(self):
        assert render(Link(link_type="file", path="notes.org")) == "notes.org"

    def test_relative_file_rewritten(self):
        link = Link(link_type="file", path="notes.org")
        assert render(link, org_links_as_target_ext=True, target_extension="html") == "notes.html"

    def test_other_scheme_uses_raw_link(self):
        assert render(Link(link_type="mailto", path="a@example.com")) == "mailto:a@example.com"


@pytest.mark.unit
class TestImages:
    """Tests for inline images."""

    def test_file_image(self):
        assert render(Link(link_type="file", path="img/cat.png")) == "{{img/cat.png|img/cat.png}}"

    def test_caption_from_paragraph(self):
        link = Link(link_type="file", path="cat.png")
        doc = document(Paragraph(caption=[text("A cat")], children=[link]))
        assert render(doc) == '{{cat.png|"A cat"}}\n\n'

    def test_absolute_image_normalized(self):
        assert render(Link(link_type="file", path="/x/./cat.png")) == "{{/x/cat.png|/x/./cat.png}}"

    def test_image_with_description_is_link(self):
        link = Link(link_type="file", path="cat.png", children=[text("cat")])
        assert render(link) == '[[cat.png|"cat"]]'

    def test_remote_image_disabled(self):
        assert render(Link(link_type="https", path="//ex.com/a.png")) == "https://ex.com/a.png"

    def test_remote_image_enabled(self):
        link = Link(link_type="https", path="//ex.com/a.png")
        assert render(link, inline_remote_images=True) == "{{https://ex.com/a.png|//ex.com/a.png}}"


@pytest.mark.unit
class TestIdLinks:
    """Tests for id and custom-id links."""

    def test_internal_numbered(self):
        doc = Document(
            children=[
                _with_body("Intro", paragraph(Link(link_type="id", path="abc"))),
                _headline("Target", properties={"ID": "abc"}),
            ]
        )
        assert '"See section 2"\n\n' in render(doc)

    def test_custom_id(self):
        link = Link(link_type="custom-id", path="#sec")
        doc = Document(children=[_with_body("Intro", paragraph(link), properties={"CUSTOM_ID": "sec"})])
        assert '"See section 1"\n\n' in render(doc)

    def test_internal_with_description(self):
        link = Link(link_type="id", path="abc", children=[text("there")])
        doc = Document(children=[_with_body("Intro", paragraph(link), properties={"ID": "abc"})])
        assert '"there"\n\n' in render(doc)

    def test_internal_unnumbered_uses_title(self):
        link = Link(link_type="id", path="abc")
        doc = Document(children=[_with_body("Intro", paragraph(link), properties={"ID": "abc"})])
        assert render(doc, section_numbers=False) == '====== "Intro" ======\n"Intro"\n\n'

    def test_external(self):
        doc = document(paragraph(Link(link_type="id", path="abc")))
        assert render(doc, id_locations={"abc": "other.org"}) == "<other.org>\n\n"

    def test_external_rewritten(self):
        doc = document(paragraph(Link(link_type="id", path="abc")))
        output = render(doc, id_locations={"abc": "other.org"}, org_links_as_target_ext=True)
        assert output == "<other.txt>\n\n"

    def test_external_with_description(self):
        doc = document(paragraph(Link(link_type="id", path="abc", children=[text("d")])))
        assert render(doc, id_locations={"abc": "other.org"}) == '[[other.org|"d"]]\n\n'

    def test_unresolved(self, caplog):
        assert render(document(paragraph(text("a"), Link(link_type="id", path="nope")))) == '"a"\n\n'
        assert "Unresolved id link" in caplog.text


@pytest.mark.unit
class TestCoderefLinks:
    """Tests for coderef links."""

    def _doc(self, link: Link) -> Document:
        return document(SrcBlock(value="a\nb\nc", coderefs={"jump": 3}), paragraph(link))

    def test_line_number(self):
        assert render(self._doc(Link(link_type="coderef", path="jump"))).endswith('"3"\n\n')

    def test_description_format(self):
        link = Link(link_type="coderef", path="jump", children=[text("line %s")])
        assert render(self._doc(link)).endswith('"line 3"\n\n')

    def test_description_without_placeholder_uses_option(self):
        link = Link(link_type="coderef", path="jump", children=[text("see")])
        assert render(self._doc(link), coderef_format="(%s)").endswith('"(3)"\n\n')

    def test_unresolved(self):
        assert render(document(paragraph(Link(link_type="coderef", path="missing")))) == ""


@pytest.mark.unit
class TestRadioLinks:
    """Tests for radio links."""

    def test_renders_target_objects(self):
        radio = RadioTarget(value="Org", children=[Bold(children=[text("Org")])])
        doc = document(paragraph(radio), paragraph(Link(link_type="radio", path="org")))
        assert render(doc) == '**"Org"**\n\n**"Org"**\n\n'

    def test_unresolved_uses_path(self):
        assert render(Link(link_type="radio", path="word")) == '"word"'


@pytest.mark.unit
class TestFuzzyLinks:
    """Tests for fuzzy links."""

    def test_description_wins(self):
        link = Link(path="Anything", children=[text("desc")])
        assert render(link) == '"desc"'

    def test_headline_number(self):
        """A destination numbered 2.3 renders as its number."""
        doc = Document(
            children=[
                _with_body("A", paragraph(Link(path="Target"))),
                _headline(
                    "B",
                    children=[
                        _headline("B1", level=2),
                        _headline("B2", level=2),
                        _headline("Target", level=2),
                    ],
                ),
            ]
        )
        assert '\n"2.3"\n\n' in render(doc)

    def test_named_element_number(self):
        first = Table(name="one", children=[TableRow(children=[TableCell(children=[text("x")])])])
        second = Table(name="two", children=[TableRow(children=[TableCell(children=[text("y")])])])
        doc = document(first, second, paragraph(Link(path="two")))
        assert render(doc).endswith('"2"\n\n')

    def test_unnumbered_headline_uses_title(self):
        doc = Document(children=[_with_body("Intro", paragraph(Link(path="*Intro")))])
        assert render(doc, section_numbers=False).endswith('"Intro"\n\n')

    def test_unresolved_uses_raw_link(self, caplog):
        assert render(Link(path="nowhere")) == '"nowhere"'
        assert "Unresolved link" in caplog.text
