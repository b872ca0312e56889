#  Copyright (c) 2025 Tom Villani, Ph.D.
# orgwiki/options/wiki.py
"""Configuration options for wiki rendering.

This module defines the options that govern how an Org document tree is
rendered as wiki markup: dialect conventions, optional headline
decorations, the text-escaping passes and link rewriting.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass, field

from orgwiki.constants import (
    DEFAULT_CODEREF_FORMAT,
    DEFAULT_DIALECT_STYLE,
    DEFAULT_INLINE_REMOTE_IMAGES,
    DEFAULT_ORG_LINKS_AS_TARGET_EXT,
    DEFAULT_OUTPUT_CODING,
    DEFAULT_PRESERVE_BREAKS,
    DEFAULT_SECTION_NUMBERS,
    DEFAULT_SMART_QUOTES_LOCALE,
    DEFAULT_TARGET_EXTENSION,
    DEFAULT_VERBATIM_STYLE,
    DEFAULT_WITH_PRIORITY,
    DEFAULT_WITH_SMART_QUOTES,
    DEFAULT_WITH_SPECIAL_STRINGS,
    DEFAULT_WITH_TAGS,
    DEFAULT_WITH_TODO_KEYWORDS,
    DIALECT_STYLES,
    VERBATIM_STYLES,
    DialectStyle,
    VerbatimStyle,
)
from orgwiki.options.base import BaseRendererOptions


@dataclass(frozen=True)
class WikiRendererOptions(BaseRendererOptions):
    """Configuration options for wiki rendering.

    Parameters
    ----------
    dialect_style : {"doku", "creole"}, default "doku"
        Delimiter and indentation conventions for lists, tables, headings
        and code. ``doku`` indents list items by two spaces per level and
        closes table rows with a pipe; ``creole`` repeats the bullet to show
        depth and prefixes table rows with a pipe.
    verbatim_style : {"monospace", "verbatim"}, default "verbatim"
        ``monospace`` renders inline verbatim like a code block;
        ``verbatim`` wraps it in the dialect's highlight delimiter.
    output_coding : str, default "utf-8"
        Character encoding of written output.
    with_todo_keywords : bool, default True
        Prefix headlines with their TODO keyword.
    with_priority : bool, default False
        Prefix headlines with their ``[#X]`` priority cookie.
    with_tags : bool, default True
        Follow headlines with a ``:tag:`` block.
    with_smart_quotes : bool, default False
        Replace straight quotes with typographic quotes.
    smart_quotes_locale : str, default "en"
        Quote glyph table: en, de, fr or sv. Other locales fall back to en.
    with_special_strings : bool, default True
        Replace ``---``, ``--`` and ``...`` with dashes and ellipsis.
    preserve_breaks : bool, default False
        Turn every source line break into a hard break.
    section_numbers : bool or int, default True
        Number all headlines, none, or those up to the given relative level.
    org_links_as_target_ext : bool, default False
        Rewrite ``.org`` link targets to ``target_extension``.
    target_extension : str, default "txt"
        Extension used by the ``.org`` rewrite, without the dot.
    inline_remote_images : bool, default False
        Render http(s) links to images as embedded images.
    coderef_format : str, default "%s"
        Format of coderef links without a ``%s`` description.

    Examples
    --------
        >>> from orgwiki.options import WikiRendererOptions
        >>> options = WikiRendererOptions(dialect_style="creole")
        >>> options.create_updated(with_tags=False).with_tags
        False

    """

    dialect_style: DialectStyle = field(
        default=DEFAULT_DIALECT_STYLE,
        metadata={
            "help": "Wiki dialect conventions for lists, tables and headings",
            "choices": DIALECT_STYLES,
            "cli_name": "style",
            "importance": "core",
        },
    )
    verbatim_style: VerbatimStyle = field(
        default=DEFAULT_VERBATIM_STYLE,
        metadata={
            "help": "Inline verbatim rendering: monospace (code form) or verbatim (highlight)",
            "choices": VERBATIM_STYLES,
            "importance": "core",
        },
    )
    output_coding: str = field(
        default=DEFAULT_OUTPUT_CODING,
        metadata={"help": "Character encoding of the output", "importance": "core"},
    )
    with_todo_keywords: bool = field(
        default=DEFAULT_WITH_TODO_KEYWORDS,
        metadata={
            "help": "Include TODO keywords in headlines",
            "cli_name": "no-todo-keywords",
            "importance": "core",
        },
    )
    with_priority: bool = field(
        default=DEFAULT_WITH_PRIORITY,
        metadata={"help": "Include priority cookies in headlines", "cli_name": "priority", "importance": "core"},
    )
    with_tags: bool = field(
        default=DEFAULT_WITH_TAGS,
        metadata={"help": "Include headline tags", "cli_name": "no-tags", "importance": "core"},
    )
    with_smart_quotes: bool = field(
        default=DEFAULT_WITH_SMART_QUOTES,
        metadata={"help": "Use typographic quotes", "cli_name": "smart-quotes", "importance": "advanced"},
    )
    smart_quotes_locale: str = field(
        default=DEFAULT_SMART_QUOTES_LOCALE,
        metadata={"help": "Locale of the typographic quotes (en, de, fr, sv)", "importance": "advanced"},
    )
    with_special_strings: bool = field(
        default=DEFAULT_WITH_SPECIAL_STRINGS,
        metadata={
            "help": "Convert ---, -- and ... to dashes and ellipsis",
            "cli_name": "no-special-strings",
            "importance": "advanced",
        },
    )
    preserve_breaks: bool = field(
        default=DEFAULT_PRESERVE_BREAKS,
        metadata={"help": "Preserve source line breaks as hard breaks", "importance": "advanced"},
    )
    section_numbers: bool | int = field(
        default=DEFAULT_SECTION_NUMBERS,
        metadata={
            "help": "Number headlines: true, false, or the deepest numbered level",
            "importance": "core",
        },
    )
    org_links_as_target_ext: bool = field(
        default=DEFAULT_ORG_LINKS_AS_TARGET_EXT,
        metadata={
            "help": "Rewrite .org link targets to the target extension",
            "cli_name": "org-links-as-target-ext",
            "importance": "advanced",
        },
    )
    target_extension: str = field(
        default=DEFAULT_TARGET_EXTENSION,
        metadata={"help": "Extension used when rewriting .org links", "importance": "advanced"},
    )
    inline_remote_images: bool = field(
        default=DEFAULT_INLINE_REMOTE_IMAGES,
        metadata={"help": "Embed http(s) links to images", "importance": "advanced"},
    )
    coderef_format: str = field(
        default=DEFAULT_CODEREF_FORMAT,
        metadata={"help": "Format string for coderef links (must contain %s)", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate wiki rendering options.

        Raises
        ------
        ValueError
            If a choice field holds an unrecognized value, the output coding
            is not a known codec, or section_numbers is negative.

        """
        super().__post_init__()

        if self.dialect_style not in DIALECT_STYLES:
            raise ValueError(f"dialect_style must be one of {DIALECT_STYLES}, got {self.dialect_style!r}")

        if self.verbatim_style not in VERBATIM_STYLES:
            raise ValueError(f"verbatim_style must be one of {VERBATIM_STYLES}, got {self.verbatim_style!r}")

        try:
            codecs.lookup(self.output_coding)
        except LookupError as e:
            raise ValueError(f"Unknown output_coding: {self.output_coding!r}") from e

        if not isinstance(self.section_numbers, (bool, int)):
            raise ValueError(f"section_numbers must be a bool or an int, got {self.section_numbers!r}")
        if not isinstance(self.section_numbers, bool) and self.section_numbers < 0:
            raise ValueError(f"section_numbers must be non-negative, got {self.section_numbers}")

        if "%s" not in self.coderef_format:
            raise ValueError(f"coderef_format must contain %s, got {self.coderef_format!r}")

        if not self.target_extension or self.target_extension.startswith("."):
            raise ValueError(f"target_extension must be a non-empty extension without a dot, got {self.target_extension!r}")
