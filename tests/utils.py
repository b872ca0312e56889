"""Test utilities for orgwiki test suite.

This module provides helpers for building small document trees and
rendering them with chosen options.
"""

from typing import Any, Mapping, Optional

from orgwiki.api import WikiExporter
from orgwiki.ast import Document, Node, Paragraph, PlainText, Section
from orgwiki.options import WikiRendererOptions


def text(value: str) -> PlainText:
    """Shorthand for a plain text object."""
    return PlainText(value=value)


def paragraph(*children: Node) -> Paragraph:
    """Build a paragraph from objects."""
    return Paragraph(children=list(children))


def document(*children: Node) -> Document:
    """Build a document whose top-level section holds ``children``."""
    return Document(children=[Section(children=list(children))])


def render(root: Node, id_locations: Optional[Mapping[str, str]] = None, **options: Any) -> str:
    """Render ``root`` with default options overridden by keyword arguments."""
    return WikiExporter(WikiRendererOptions(**options), id_locations=id_locations).export(root)
