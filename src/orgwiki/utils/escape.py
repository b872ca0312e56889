#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgwiki/utils/escape.py
r"""Plain text escaping for wiki output.

Plain text goes through one pipeline of named stages, in this order:

1. :func:`smart_quotes_stage` - typographic quotes (optional)
2. :func:`escape_structural` - escape characters the target grammar reads as
   markup
3. :func:`special_strings_stage` - dashes and ellipsis (optional)
4. :func:`preserve_breaks_stage` - hard line breaks (optional)
5. :func:`quote_literal` - wrap in the string delimiter

Each stage is usable on its own.

Examples
--------
    >>> escape_structural("a*b_c")
    'a\\*b\\_c'
    >>> escape_text("Hello *world*", WikiRendererOptions())
    '"Hello \\*world\\*"'

"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from orgwiki.constants import ESCAPE_CHAR, STRING_DELIMITER
from orgwiki.utils.typography import apply_smart_quotes, apply_special_strings

if TYPE_CHECKING:
    from orgwiki.options.wiki import WikiRendererOptions

# "#" at the start of a line, "!" before "[", and the inline markup characters
_STRUCTURAL_PATTERN = re.compile(r"(?<=\n)#|!(?=\[)|[`*_\\]")
_TRAILING_BLANKS_PATTERN = re.compile(r"[ \t]*\n")


def smart_quotes_stage(text: str, enabled: bool, locale: str) -> str:
    """Apply smart quotes when ``enabled``."""
    return apply_smart_quotes(text, locale) if enabled else text


def escape_structural(text: str) -> str:
    r"""Escape characters that would be read as markup.

    A ``#`` right after a newline, a ``!`` right before ``[``, and every
    backtick, asterisk, underscore and backslash get one escape character in
    front. The text is scanned once, so escape characters added here are
    never escaped again.

    Parameters
    ----------
    text : str
        Raw text

    Returns
    -------
    str
        Escaped text

    Examples
    --------
        >>> escape_structural("line\n#not a heading")
        'line\n\\#not a heading'
        >>> escape_structural("![x]")
        '\\![x]'

    """
    return _STRUCTURAL_PATTERN.sub(lambda match: ESCAPE_CHAR + match.group(0), text)


def special_strings_stage(text: str, enabled: bool) -> str:
    """Apply special-string substitution when ``enabled``."""
    return apply_special_strings(text) if enabled else text


def preserve_breaks_stage(text: str, enabled: bool) -> str:
    """Replace trailing blanks before each newline with two spaces when ``enabled``."""
    if not enabled:
        return text
    return _TRAILING_BLANKS_PATTERN.sub("  \n", text)


def quote_literal(text: str) -> str:
    """Wrap ``text`` in the string delimiter."""
    return f"{STRING_DELIMITER}{text}{STRING_DELIMITER}"


def escape_text(raw: str, options: WikiRendererOptions) -> str:
    """Run plain text through the whole escaping pipeline.

    Parameters
    ----------
    raw : str
        Text as found in the document
    options : WikiRendererOptions
        Provides ``with_smart_quotes``, ``smart_quotes_locale``,
        ``with_special_strings`` and ``preserve_breaks``

    Returns
    -------
    str
        Escaped, quoted text fragment

    """
    text = smart_quotes_stage(raw, options.with_smart_quotes, options.smart_quotes_locale)
    text = escape_structural(text)
    text = special_strings_stage(text, options.with_special_strings)
    text = preserve_breaks_stage(text, options.preserve_breaks)
    return quote_literal(text)
