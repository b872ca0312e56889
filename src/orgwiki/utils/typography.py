#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgwiki/utils/typography.py
"""Typographic substitutions for plain text.

Smart quotes replace straight quotes with the locale's quotation marks;
special strings replace ASCII dashes and dots with their typographic
counterparts.

"""

from __future__ import annotations

import logging
import re

from orgwiki.constants import DEFAULT_SMART_QUOTES_LOCALE, SMART_QUOTES, SPECIAL_STRINGS

logger = logging.getLogger(__name__)

# A quote opens at the start of the text or after whitespace or an opening bracket
_OPENING_CONTEXT = r"(?:^|(?<=[\s(\[{<]))"
_DOUBLE_OPEN = re.compile(_OPENING_CONTEXT + '"', re.MULTILINE)
_SINGLE_OPEN = re.compile(_OPENING_CONTEXT + "'", re.MULTILINE)
_APOSTROPHE = re.compile(r"(?<=\w)'(?=\w)")

_SPECIAL_STRINGS_PATTERN = re.compile("|".join(re.escape(source) for source, _ in SPECIAL_STRINGS))
_SPECIAL_STRINGS_MAP = dict(SPECIAL_STRINGS)


def quote_glyphs(locale: str) -> tuple[str, str, str, str, str]:
    """Return the quote glyphs for ``locale``.

    Parameters
    ----------
    locale : str
        Language code such as ``en`` or ``de-CH``; only the primary language
        is used

    Returns
    -------
    tuple of str
        Opening double, closing double, opening single, closing single and
        apostrophe glyphs. Unknown locales get the English table.

    """
    language = locale.replace("_", "-").split("-", 1)[0].lower()
    glyphs = SMART_QUOTES.get(language)
    if glyphs is None:
        logger.debug("No smart quotes for locale %r, using %r", locale, DEFAULT_SMART_QUOTES_LOCALE)
        glyphs = SMART_QUOTES[DEFAULT_SMART_QUOTES_LOCALE]
    return glyphs


def apply_smart_quotes(text: str, locale: str = DEFAULT_SMART_QUOTES_LOCALE) -> str:
    """Replace straight quotes with typographic ones.

    Apostrophes inside words are handled first, then opening quotes by
    position. Every remaining quote closes.

    Examples
    --------
        >>> apply_smart_quotes('He said "it\\'s fine"')
        'He said “it’s fine”'

    """
    open_double, close_double, open_single, close_single, apostrophe = quote_glyphs(locale)
    text = _APOSTROPHE.sub(apostrophe, text)
    text = _DOUBLE_OPEN.sub(open_double, text)
    text = _SINGLE_OPEN.sub(open_single, text)
    return text.replace('"', close_double).replace("'", close_single)


def apply_special_strings(text: str) -> str:
    """Replace ``---``, ``--`` and ``...`` with em dash, en dash and ellipsis."""
    return _SPECIAL_STRINGS_PATTERN.sub(lambda match: _SPECIAL_STRINGS_MAP[match.group(0)], text)
