#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgwiki/renderers/wiki.py
"""Wiki markup rendering of Org document trees.

This module provides the WikiRenderer class, one handler per node kind.
Handlers are pure functions of the node, the rendered fragment of its
children and the read-only :class:`~orgwiki.renderers.context.RenderContext`;
the exporter in :mod:`orgwiki.api` drives the post-order walk.

Two dialects are supported. ``doku`` follows DokuWiki conventions (two
spaces of indentation per list level, ``^``/``|`` table cells, headings
framed by equals signs). ``creole`` repeats the bullet to show list depth,
uses ``=``-prefixed header cells in pipe-prefixed rows, and opens headings
with one equals sign per level.

"""

from __future__ import annotations

import logging
from typing import Optional

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
from orgwiki.ast.visitors import NodeVisitor
from orgwiki.constants import (
    BOLD_MARKER,
    CHECKBOX_TOKENS,
    CODE_BLOCK_CLOSE,
    CODE_BLOCK_OPEN,
    CODE_BLOCK_OPEN_END,
    CODE_LANGUAGE_PREFIX,
    FOOTNOTE_CLOSE,
    FOOTNOTE_OPEN,
    HARD_BREAK,
    HEADING_MARKER,
    HEADLINE_LIST_INDENT,
    HIGHLIGHT_DELIMITERS,
    HORIZONTAL_RULE,
    ITALIC_MARKER,
    LIST_BULLETS,
    MAX_HEADING_DEPTH,
    PIPE_PREFIXED_STYLES,
    QUOTE_PREFIX,
    TABLE_COLGROUP_CELL,
    TABLE_HEADER_CELL,
    TABLE_HEADER_END,
    TABLE_PLAIN_CELL,
    TABLE_ROW_END,
    TABLE_ROW_PREFIX,
    UNDERLINE_MARKER,
)
from orgwiki.options.wiki import WikiRendererOptions
from orgwiki.renderers.base import BaseRenderer
from orgwiki.renderers.context import RenderContext
from orgwiki.renderers.links import LinkRenderingMixin

logger = logging.getLogger(__name__)


def code_form(value: str, language: Optional[str], dialect: str) -> str:
    """Render literal text as a code block.

    Parameters
    ----------
    value : str
        Literal text; surrounding whitespace is trimmed
    language : str or None
        Language tag, included only when given
    dialect : str
        Dialect style

    Returns
    -------
    str
        Code block fragment

    Examples
    --------
        >>> code_form("print(1)\\n", "python", "doku")
        '<code python>\\nprint(1)\\n</code>\\n'
        >>> code_form("x", None, "creole")
        '{{{\\nx\\n}}}\\n'

    """
    tag = f"{CODE_LANGUAGE_PREFIX[dialect]}{language}" if language else ""
    return f"{CODE_BLOCK_OPEN[dialect]}{tag}{CODE_BLOCK_OPEN_END[dialect]}{value.strip()}{CODE_BLOCK_CLOSE[dialect]}"


def heading_form(level: int, text: str, dialect: str) -> str:
    """Render a heading of the given level (1 to 6)."""
    if dialect == "creole":
        return f"{HEADING_MARKER * level} {text}\n"
    marker = HEADING_MARKER * (MAX_HEADING_DEPTH + 1 - level)
    return f"{marker} {text} {marker}\n"


def paragraph_form(text: str) -> str:
    return f"{text}\n\n"


def indent_lines(text: str, prefix: str) -> str:
    """Prefix every line of ``text`` with ``prefix``."""
    return "".join(prefix + line for line in text.splitlines(keepends=True))


class WikiRenderer(NodeVisitor, LinkRenderingMixin, BaseRenderer):
    """Render Org document tree nodes to wiki markup.

    Parameters
    ----------
    options : WikiRendererOptions or None, default = None
        Wiki rendering options. Handlers read options from the context they
        receive; these are the options the exporter builds that context from.

    Examples
    --------
    Basic usage through the exporter:

        >>> from orgwiki.ast import Document, Headline, PlainText
        >>> from orgwiki.api import WikiExporter
        >>> doc = Document(children=[Headline(level=1, title=[PlainText(value="Intro")])])
        >>> print(WikiExporter().export(doc))
        ====== "Intro" ======

    """

    def __init__(self, options: WikiRendererOptions | None = None):
        """Initialize the wiki renderer with options."""
        BaseRenderer._validate_options_type(options, WikiRendererOptions, "wiki")
        options = options or WikiRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: WikiRendererOptions = options

    # ------------------------------------------------------------------
    # Transparent containers
    # ------------------------------------------------------------------

    def visit_document(self, node: Document, contents: Optional[str], ctx: RenderContext) -> str:
        return contents or ""

    def visit_section(self, node: Section, contents: Optional[str], ctx: RenderContext) -> str:
        return contents or ""

    def visit_plain_list(self, node: PlainList, contents: Optional[str], ctx: RenderContext) -> str:
        return contents or ""

    def visit_table(self, node: Table, contents: Optional[str], ctx: RenderContext) -> str:
        return contents or ""

    # ------------------------------------------------------------------
    # Inline markup
    # ------------------------------------------------------------------

    def visit_plain_text(self, node: PlainText, contents: Optional[str], ctx: RenderContext) -> str:
        return ctx.escape(node.value)

    def visit_bold(self, node: Bold, contents: Optional[str], ctx: RenderContext) -> str:
        """Render bold markup; surrounding whitespace of the contents is dropped."""
        return f"{BOLD_MARKER}{(contents or '').strip()}{BOLD_MARKER}"

    def visit_italic(self, node: Italic, contents: Optional[str], ctx: RenderContext) -> str:
        return f"{ITALIC_MARKER}{contents or ''}{ITALIC_MARKER}"

    def visit_underline(self, node: Underline, contents: Optional[str], ctx: RenderContext) -> str:
        return f"{UNDERLINE_MARKER}{contents or ''}{UNDERLINE_MARKER}"

    def visit_code(self, node: Code, contents: Optional[str], ctx: RenderContext) -> str:
        return code_form(node.value, None, ctx.dialect)

    def visit_verbatim(self, node: Verbatim, contents: Optional[str], ctx: RenderContext) -> str:
        """Render inline verbatim as a code block or highlighted text.

        ``verbatim_style="monospace"`` uses the code block form;
        ``"verbatim"`` wraps the value in the dialect's highlight delimiter.

        """
        if ctx.options.verbatim_style == "monospace":
            return code_form(node.value, None, ctx.dialect)
        delimiter = HIGHLIGHT_DELIMITERS[ctx.dialect]
        return f"{delimiter}{node.value}{delimiter}"

    def visit_line_break(self, node: LineBreak, contents: Optional[str], ctx: RenderContext) -> str:
        return HARD_BREAK

    def visit_link(self, node: Link, contents: Optional[str], ctx: RenderContext) -> str:
        return self.render_link(node, contents, ctx)

    def visit_target(self, node: Target, contents: Optional[str], ctx: RenderContext) -> str:
        return ""

    def visit_radio_target(self, node: RadioTarget, contents: Optional[str], ctx: RenderContext) -> str:
        return contents or ""

    def visit_footnote_reference(
        self, node: FootnoteReference, contents: Optional[str], ctx: RenderContext
    ) -> str:
        """Render a footnote inline, with its definition in place.

        Inline footnotes use their own definition; labelled footnotes look up
        the matching FootnoteDefinition. Unknown labels render nothing.

        """
        if node.definition:
            text = ctx.render(node.definition)
        else:
            definition = ctx.tree.resolve_footnote(node.label or "")
            if definition is None:
                logger.warning("Unresolved footnote reference: %s", node.label)
                return ""
            text = ctx.render(definition.children)
        return f"{FOOTNOTE_OPEN}{text.strip()}{FOOTNOTE_CLOSE}"

    # ------------------------------------------------------------------
    # Blocks
    # ------------------------------------------------------------------

    def visit_paragraph(self, node: Paragraph, contents: Optional[str], ctx: RenderContext) -> str:
        """Render a paragraph.

        Paragraphs directly inside a list item render as a single line so the
        item stays on its bullet line.

        """
        text = (contents or "").strip()
        if not text:
            return ""
        if isinstance(ctx.tree.parent(node), Item):
            return f"{text}\n"
        return paragraph_form(text)

    def visit_quote_block(self, node: QuoteBlock, contents: Optional[str], ctx: RenderContext) -> str:
        text = (contents or "").strip("\n")
        if not text:
            return ""
        return "".join(f"{QUOTE_PREFIX}{line}\n" for line in text.split("\n")) + "\n"

    def visit_fixed_width(self, node: FixedWidth, contents: Optional[str], ctx: RenderContext) -> str:
        return code_form(node.value, None, ctx.dialect)

    def visit_src_block(self, node: SrcBlock, contents: Optional[str], ctx: RenderContext) -> str:
        return code_form(node.value, node.language, ctx.dialect)

    def visit_horizontal_rule(self, node: HorizontalRule, contents: Optional[str], ctx: RenderContext) -> str:
        return HORIZONTAL_RULE

    def visit_comment(self, node: Comment, contents: Optional[str], ctx: RenderContext) -> str:
        return ""

    def visit_comment_block(self, node: CommentBlock, contents: Optional[str], ctx: RenderContext) -> str:
        return ""

    def visit_footnote_definition(
        self, node: FootnoteDefinition, contents: Optional[str], ctx: RenderContext
    ) -> str:
        # Rendered in place by the references
        return ""

    # ------------------------------------------------------------------
    # Lists
    # ------------------------------------------------------------------

    def visit_item(self, node: Item, contents: Optional[str], ctx: RenderContext) -> str:
        """Render a list item on its own line.

        The bullet depends on the kind of the parent list and the dialect.
        ``doku`` indents by two spaces per enclosing list; ``creole`` repeats
        the bullet once per enclosing list beyond the first.

        Parameters
        ----------
        node : Item
            Item to render
        contents : str or None
            Rendered item body
        ctx : RenderContext
            Options and tree queries

        Returns
        -------
        str
            Item line, followed by any nested lines from the body

        """
        parent = ctx.tree.parent(node)
        ordered = isinstance(parent, PlainList) and parent.list_type == "ordered"
        depth = ctx.tree.list_depth(node)
        bullet = LIST_BULLETS[(ctx.dialect, ordered)]

        if ctx.dialect == "creole":
            prefix = bullet * max(depth - 1, 0) + bullet
        else:
            prefix = "  " * depth + bullet

        checkbox = CHECKBOX_TOKENS.get(node.checkbox, "") if node.checkbox else ""
        tag = f"{BOLD_MARKER}{ctx.render(node.tag).strip()}{BOLD_MARKER} " if node.tag else ""
        if not any(isinstance(child, PlainList) for child in node.children):
            return f"{prefix} {checkbox}{tag}{(contents or '').strip()}\n"

        # Nested lists go on their own lines after the item line; the item's
        # other elements stay on the item line, joined by hard breaks.
        own: list[str] = []
        nested: list[str] = []
        for child in node.children:
            fragment = ctx.render([child])
            if isinstance(child, PlainList):
                nested.append(fragment)
            elif fragment.strip():
                own.append(fragment.strip())
        line = f"{prefix} {checkbox}{tag}{HARD_BREAK.join(own)}".rstrip()
        return f"{line}\n" + "".join(nested)

    # ------------------------------------------------------------------
    # Tables
    # ------------------------------------------------------------------

    def visit_table_row(self, node: TableRow, contents: Optional[str], ctx: RenderContext) -> str:
        if node.row_type == "rule":
            return ""
        cells = contents or ""
        if ctx.dialect in PIPE_PREFIXED_STYLES:
            return f"{TABLE_ROW_PREFIX}{cells}\n" if cells else ""
        end = TABLE_HEADER_END if ctx.tree.row_ends_header(node) else TABLE_ROW_END
        return f"{cells}{end}"

    def visit_table_cell(self, node: TableCell, contents: Optional[str], ctx: RenderContext) -> str:
        """Render a table cell.

        Cells of the first header row use the header delimiter; cells that
        open a column group use the group delimiter; every other cell uses
        the plain delimiter. Row headers are not detected.

        """
        row = ctx.tree.parent(node)
        if isinstance(row, TableRow) and ctx.tree.row_starts_header(row):
            template = TABLE_HEADER_CELL
        elif ctx.tree.cell_starts_colgroup(node):
            template = TABLE_COLGROUP_CELL
        else:
            template = TABLE_PLAIN_CELL
        return template[ctx.dialect].format(content=(contents or "").strip())

    # ------------------------------------------------------------------
    # Headlines
    # ------------------------------------------------------------------

    def _headline_title(self, node: Headline, ctx: RenderContext) -> str:
        """Render the title with its TODO keyword and priority cookie."""
        options = ctx.options
        prefix = ""
        if options.with_todo_keywords and node.todo_keyword:
            prefix += ctx.escape(f"{node.todo_keyword} ")
        if options.with_priority and node.priority:
            prefix += ctx.escape(f"[#{node.priority}] ")
        return prefix + ctx.render(node.title).strip()

    @staticmethod
    def _tag_block(node: Headline, ctx: RenderContext) -> str:
        if not (ctx.options.with_tags and node.tags):
            return ""
        return paragraph_form(ctx.escape(f":{':'.join(node.tags)}:"))

    def visit_headline(self, node: Headline, contents: Optional[str], ctx: RenderContext) -> str:
        """Render a headline with its section and sub-headlines.

        Headlines deeper than the deepest heading level become list items:
        the item line is indented, its bullet marks whether the headline is
        numbered, and every line of the tag block and children is indented by
        the same prefix.

        Parameters
        ----------
        node : Headline
            Headline to render
        contents : str or None
            Rendered section and sub-headlines
        ctx : RenderContext
            Options and tree queries

        Returns
        -------
        str
            Rendered headline, or an empty string for the footnote section

        """
        if node.footnote_section:
            return ""

        level = ctx.tree.relative_level(node)
        title = self._headline_title(node, ctx)
        body = self._tag_block(node, ctx) + (contents or "")

        if level > MAX_HEADING_DEPTH:
            numbered = ctx.tree.is_numbered(node, ctx.options.section_numbers)
            bullet = LIST_BULLETS[(ctx.dialect, numbered)]
            return f"{HEADLINE_LIST_INDENT}{bullet} {title}\n{indent_lines(body, HEADLINE_LIST_INDENT)}"

        return heading_form(level, title, ctx.dialect) + body
