#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgwiki/renderers/context.py
"""Read-only rendering context passed to every node handler."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from orgwiki.ast.nodes import Node
from orgwiki.ast.tree import DocumentTree
from orgwiki.options.wiki import WikiRendererOptions
from orgwiki.utils.escape import escape_text


@dataclass(frozen=True)
class RenderContext:
    """Options and tree queries for one export.

    Parameters
    ----------
    options : WikiRendererOptions
        Rendering options, fixed for the whole export
    tree : DocumentTree
        Index of the document being exported
    render_nodes : callable
        Renders a sequence of nodes of the same tree with the exporter's
        post-order walk and returns the concatenated fragments. Handlers use
        it for node sequences outside their contents, such as headline
        titles, captions and radio target text.

    """

    options: WikiRendererOptions
    tree: DocumentTree
    render_nodes: Callable[[Sequence[Node]], str]

    def render(self, nodes: Sequence[Node]) -> str:
        """Render ``nodes`` and return their concatenated fragments."""
        return self.render_nodes(nodes) if nodes else ""

    def escape(self, text: str) -> str:
        """Escape and quote plain text according to the options."""
        return escape_text(text, self.options)

    @property
    def dialect(self) -> str:
        return self.options.dialect_style
