#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Integration tests for whole-document export.

This module exercises the exporter, the renderer and output writing
together on complete document trees.
"""

from io import BytesIO, StringIO

import pytest
from utils import document, paragraph, text

from orgwiki import to_wiki
from orgwiki.api import WikiExporter, load_document
from orgwiki.ast import Document, Headline, Link, Section, ast_to_json
from orgwiki.exceptions import FileError, InvalidOptionsError, OutputWriteError, UnhandledNodeTypeError
from orgwiki.options import WikiRendererOptions

EXPECTED_DOKU = (
    '====== "TODO ""Intro" ======\n'
    '":work:"\n\n'
    '"Hello "**"world"**\n\n'
    '====== "Data" ======\n'
    '  * "outer"\n'
    '    * "inner"\n'
    '^ "Name" ^ "Value" ^\n'
    '| "a" | "1" |\n'
    '===== "Details" =====\n'
)

EXPECTED_CREOLE = (
    '= "TODO ""Intro"\n'
    '":work:"\n\n'
    '"Hello "**"world"**\n\n'
    '= "Data"\n'
    '* "outer"\n'
    '** "inner"\n'
    '|="Name"|="Value"|\n'
    '|"a"|"1"|\n'
    '== "Details"\n'
)


@pytest.mark.integration
class TestDocumentExport:
    """Tests for rendering complete documents."""

    def test_heading_with_paragraph(self):
        """A level-1 heading with one paragraph renders heading then escaped paragraph."""
        doc = Document(
            children=[
                Headline(
                    level=1,
                    title=[text("Intro")],
                    children=[Section(children=[paragraph(text("Hello *world*"))])],
                )
            ]
        )
        assert to_wiki(doc) == '====== "Intro" ======\n"Hello \\*world\\*"\n\n'

    def test_sample_document_doku(self, sample_document):
        assert to_wiki(sample_document) == EXPECTED_DOKU

    def test_sample_document_creole(self, sample_document):
        assert to_wiki(sample_document, dialect_style="creole") == EXPECTED_CREOLE

    def test_deterministic(self, sample_document):
        """Rendering the same tree twice gives identical output."""
        exporter = WikiExporter()
        first = exporter.export(sample_document)
        assert exporter.export(sample_document) == first
        assert WikiExporter().export(sample_document) == first

    def test_options_and_kwargs(self, sample_document):
        """Keyword overrides apply on top of the given options; unknown names are ignored."""
        options = WikiRendererOptions(dialect_style="creole")
        output = to_wiki(sample_document, options=options, with_tags=False, not_an_option=1)
        assert output == EXPECTED_CREOLE.replace('":work:"\n\n', "")

    def test_from_json_file(self, sample_document, tmp_path):
        source = tmp_path / "doc.json"
        source.write_text(ast_to_json(sample_document), encoding="utf-8")
        assert to_wiki(source) == EXPECTED_DOKU
        assert isinstance(load_document(str(source)), Document)

    def test_missing_json_file(self, tmp_path):
        with pytest.raises(FileError):
            load_document(tmp_path / "missing.json")

    def test_wrong_options_type(self):
        with pytest.raises(InvalidOptionsError):
            WikiExporter(options="creole")  # type: ignore[arg-type]

    def test_id_locations(self):
        doc = document(paragraph(Link(link_type="id", path="abc")))
        assert to_wiki(doc, id_locations={"abc": "other.org"}) == "<other.org>\n\n"


@pytest.mark.integration
class TestUnknownNodes:
    """Tests for the unknown node policy."""

    def test_raise_by_default(self):
        doc = document(paragraph(text("a"), object()))  # type: ignore[arg-type]
        with pytest.raises(UnhandledNodeTypeError) as exc_info:
            to_wiki(doc)
        assert exc_info.value.node_type == "object"

    def test_skip(self, caplog):
        doc = document(paragraph(text("a"), object()))  # type: ignore[arg-type]
        assert to_wiki(doc, unknown_node_policy="skip") == '"a"\n\n'
        assert "Skipping unknown node type" in caplog.text

    def test_unknown_root(self):
        with pytest.raises(UnhandledNodeTypeError):
            WikiExporter().export(object())  # type: ignore[arg-type]


@pytest.mark.integration
class TestOutputWriting:
    """Tests for writing output in the configured coding."""

    def _doc(self) -> Document:
        return document(paragraph(text("café")))

    def test_file_in_output_coding(self, tmp_path):
        target = tmp_path / "out.txt"
        assert to_wiki(self._doc(), output=target, output_coding="latin-1") is None
        assert target.read_bytes() == '"café"\n\n'.encode("latin-1")

    def test_binary_stream(self):
        buffer = BytesIO()
        WikiExporter(WikiRendererOptions(output_coding="utf-16")).export_to_file(self._doc(), buffer)
        assert buffer.getvalue().decode("utf-16") == '"café"\n\n'

    def test_text_stream(self):
        buffer = StringIO()
        to_wiki(self._doc(), output=buffer)
        assert buffer.getvalue() == '"café"\n\n'

    def test_unencodable_output(self, tmp_path):
        doc = document(paragraph(text("→")))
        with pytest.raises(OutputWriteError) as exc_info:
            to_wiki(doc, output=tmp_path / "out.txt", output_coding="ascii")
        assert isinstance(exc_info.value.original_error, UnicodeEncodeError)
