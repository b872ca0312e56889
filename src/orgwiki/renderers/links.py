#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgwiki/renderers/links.py
"""Link classification and rendering for wiki output.

Links are classified by type, in this order:

1. ``id`` and ``custom-id`` links, resolved to another document or to a
   headline of this one
2. inline images
3. ``coderef`` links, rendered as the referenced line number
4. ``radio`` links, rendered as the radio target's text
5. ``fuzzy`` links, rendered as their description or the destination's
   number
6. everything else, rendered as an external link

Unresolvable references degrade to a best-effort fragment and log a
warning; they never abort the export.

"""

from __future__ import annotations

import logging
import posixpath
from typing import Optional

from orgwiki.ast.nodes import Headline, Link, Node, Paragraph
from orgwiki.ast.tree import ExternalTarget, node_text
from orgwiki.constants import (
    CROSS_REFERENCE_TEMPLATE,
    ID_LINK_TYPES,
    IMAGE_FILE_PATTERN,
    ORG_EXTENSION_PATTERN,
    REMOTE_IMAGE_LINK_TYPES,
    WEB_LINK_TYPES,
)
from orgwiki.options.wiki import WikiRendererOptions
from orgwiki.renderers.context import RenderContext

logger = logging.getLogger(__name__)


def format_number(number: tuple[int, ...]) -> str:
    """Join number components with dots, e.g. ``(2, 3)`` -> ``"2.3"``."""
    return ".".join(str(component) for component in number)


def rewrite_org_extension(path: str, options: WikiRendererOptions) -> str:
    """Replace a trailing ``.org`` with the target extension when enabled."""
    if not options.org_links_as_target_ext:
        return path
    return ORG_EXTENSION_PATTERN.sub(f".{options.target_extension}", path)


def _is_absolute_file(path: str) -> bool:
    return path.startswith("/")


class LinkRenderingMixin:
    """Mixin rendering Link nodes for wiki renderers.

    The implementing class calls :meth:`render_link` from its ``visit_link``.

    """

    def render_link(self, node: Link, contents: Optional[str], ctx: RenderContext) -> str:
        """Render a link according to its type.

        Parameters
        ----------
        node : Link
            Link to render
        contents : str or None
            Rendered description, None when the link has none
        ctx : RenderContext
            Options and tree queries

        Returns
        -------
        str
            Rendered fragment

        """
        link_type = node.link_type
        if link_type in ID_LINK_TYPES:
            return self._render_id_link(node, contents, ctx)
        if self._is_inline_image(node, ctx.options):
            return self._render_image(node, ctx)
        if link_type == "coderef":
            return self._render_coderef(node, ctx)
        if link_type == "radio":
            return self._render_radio_link(node, contents, ctx)
        if link_type == "fuzzy":
            return self._render_fuzzy_link(node, contents, ctx)
        return self._render_external_link(node, contents, ctx)

    @staticmethod
    def _is_inline_image(node: Link, options: WikiRendererOptions) -> bool:
        """Tell whether ``node`` should be embedded as an image.

        Only links without a description qualify. File links qualify when
        the path has an image extension; http(s) links also need
        ``inline_remote_images``.

        """
        if node.children or not IMAGE_FILE_PATTERN.search(node.path):
            return False
        if node.link_type == "file":
            return True
        return node.link_type in REMOTE_IMAGE_LINK_TYPES and options.inline_remote_images

    def _render_id_link(self, node: Link, contents: Optional[str], ctx: RenderContext) -> str:
        target = ctx.tree.resolve_id(node)
        if target is None:
            logger.warning("Unresolved %s link: %s", node.link_type, node.path)
            return contents or ""

        if isinstance(target, ExternalTarget):
            path = rewrite_org_extension(target.path, ctx.options)
            return f"[[{path}|{contents}]]" if contents else f"<{path}>"

        if contents:
            return contents
        number = ctx.tree.ordinal(target.node, ctx.options.section_numbers)
        if number:
            return ctx.escape(CROSS_REFERENCE_TEMPLATE.format(number=format_number(number)))
        return self._destination_title(target.node, ctx)

    @staticmethod
    def _destination_title(destination: Node, ctx: RenderContext) -> str:
        if isinstance(destination, Headline):
            return ctx.render(destination.title)
        return ""

    def _render_image(self, node: Link, ctx: RenderContext) -> str:
        if node.link_type == "file":
            path = posixpath.normpath(node.path) if _is_absolute_file(node.path) else node.path
        else:
            path = f"{node.link_type}:{node.path}"

        paragraph = ctx.tree.nearest_ancestor(node, Paragraph)
        if isinstance(paragraph, Paragraph) and paragraph.caption:
            caption = ctx.render(paragraph.caption).strip()
        else:
            caption = node.path
        return f"{{{{{path}|{caption}}}}}"

    def _render_coderef(self, node: Link, ctx: RenderContext) -> str:
        line = ctx.tree.resolve_coderef(node.path)
        if line is None:
            logger.warning("Unresolved coderef: %s", node.path)
            return ""
        description = node_text(node.children)
        template = description if "%s" in description else ctx.options.coderef_format
        return ctx.escape(template.replace("%s", str(line)))

    def _render_radio_link(self, node: Link, contents: Optional[str], ctx: RenderContext) -> str:
        target = ctx.tree.resolve_radio(node)
        if target is None:
            logger.warning("Unresolved radio link: %s", node.path)
            return contents or ctx.escape(node.path)
        if target.children:
            return ctx.render(target.children)
        return ctx.escape(target.value)

    def _render_fuzzy_link(self, node: Link, contents: Optional[str], ctx: RenderContext) -> str:
        if contents:
            return contents
        destination = ctx.tree.resolve_fuzzy(node)
        if destination is None:
            logger.warning("Unresolved link: %s", node.raw_link)
            return ctx.escape(node.raw_link)
        number = ctx.tree.ordinal(destination, ctx.options.section_numbers)
        if number:
            return ctx.escape(format_number(number))
        if isinstance(destination, Headline):
            return ctx.render(destination.title)
        return ctx.escape(node.path)

    def _render_external_link(self, node: Link, contents: Optional[str], ctx: RenderContext) -> str:
        path = self._external_path(node, ctx.options)
        return f"[[{path}|{contents}]]" if contents else path

    @staticmethod
    def _external_path(node: Link, options: WikiRendererOptions) -> str:
        """Build the link target for web, file and other links."""
        if node.link_type in WEB_LINK_TYPES:
            return f"{node.link_type}:{node.path}"
        if node.link_type == "file":
            path = rewrite_org_extension(node.path, options)
            if _is_absolute_file(path):
                return f"file://{posixpath.normpath(path)}"
            return path
        return node.raw_link
