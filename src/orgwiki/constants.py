#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the orgwiki library.

This module centralizes the hardcoded values, marker tokens, and default
configuration constants used across orgwiki.

Constants are organized by category:
1. Type Definitions - All Literal types and type aliases
2. Rendering Defaults - Default values for renderer options
3. Dialect Tokens - Markup delimiters for each supported dialect
4. Typography - Smart quote and special string tables
5. Link Handling - Image detection and link type groups
"""

from __future__ import annotations

import re
from typing import Literal

# =============================================================================
# Type Definitions - All Literal Types and Type Aliases
# =============================================================================

DialectStyle = Literal["doku", "creole"]
VerbatimStyle = Literal["monospace", "verbatim"]
UnknownNodePolicy = Literal["raise", "skip"]
ListType = Literal["ordered", "unordered", "descriptive"]
CheckboxState = Literal["on", "off", "trans"]
TableRowType = Literal["standard", "rule"]
TodoType = Literal["todo", "done"]

DIALECT_STYLES: list[str] = ["doku", "creole"]
VERBATIM_STYLES: list[str] = ["monospace", "verbatim"]
UNKNOWN_NODE_POLICIES: list[str] = ["raise", "skip"]
LIST_TYPES: list[str] = ["ordered", "unordered", "descriptive"]
CHECKBOX_STATES: list[str] = ["on", "off", "trans"]
TABLE_ROW_TYPES: list[str] = ["standard", "rule"]
TODO_TYPES: list[str] = ["todo", "done"]

# =============================================================================
# Rendering Defaults
# =============================================================================

DEFAULT_DIALECT_STYLE: DialectStyle = "doku"
DEFAULT_VERBATIM_STYLE: VerbatimStyle = "verbatim"
DEFAULT_OUTPUT_CODING = "utf-8"
DEFAULT_WITH_TODO_KEYWORDS = True
DEFAULT_WITH_PRIORITY = False
DEFAULT_WITH_TAGS = True
DEFAULT_WITH_SMART_QUOTES = False
DEFAULT_SMART_QUOTES_LOCALE = "en"
DEFAULT_WITH_SPECIAL_STRINGS = True
DEFAULT_PRESERVE_BREAKS = False
DEFAULT_SECTION_NUMBERS: bool | int = True
DEFAULT_ORG_LINKS_AS_TARGET_EXT = False
DEFAULT_TARGET_EXTENSION = "txt"
DEFAULT_INLINE_REMOTE_IMAGES = False
DEFAULT_CODEREF_FORMAT = "%s"
DEFAULT_UNKNOWN_NODE_POLICY: UnknownNodePolicy = "raise"

# Deepest heading the target grammars can express; deeper headlines become list items.
MAX_HEADING_DEPTH = 6

# Prefix used for headlines rendered as list items, and for their children.
HEADLINE_LIST_INDENT = "    "

# =============================================================================
# Dialect Tokens
# =============================================================================

ESCAPE_CHAR = "\\"
STRING_DELIMITER = '"'

BOLD_MARKER = "**"
ITALIC_MARKER = "//"
UNDERLINE_MARKER = "__"
HARD_BREAK = "\\\\ "
HORIZONTAL_RULE = "----\n"
QUOTE_PREFIX = "> "

CHECKBOX_TOKENS: dict[str, str] = {
    "on": "[X] ",
    "trans": "[-] ",
    "off": "[ ] ",
}

# Bullet glyphs keyed by (dialect, ordered)
LIST_BULLETS: dict[tuple[str, bool], str] = {
    ("doku", False): "*",
    ("doku", True): "-",
    ("creole", False): "*",
    ("creole", True): "#",
}

HIGHLIGHT_DELIMITERS: dict[str, str] = {
    "doku": "''",
    "creole": "##",
}

HEADING_MARKER = "="

# Code form pieces keyed by dialect: opener, language separator, opener end, closer
CODE_BLOCK_OPEN: dict[str, str] = {
    "doku": "<code",
    "creole": "{{{",
}
CODE_LANGUAGE_PREFIX: dict[str, str] = {
    "doku": " ",
    "creole": "#!",
}
CODE_BLOCK_OPEN_END: dict[str, str] = {
    "doku": ">\n",
    "creole": "\n",
}
CODE_BLOCK_CLOSE: dict[str, str] = {
    "doku": "\n</code>\n",
    "creole": "\n}}}\n",
}

FOOTNOTE_OPEN = "(("
FOOTNOTE_CLOSE = "))"

# Table cell templates keyed by dialect
TABLE_HEADER_CELL: dict[str, str] = {
    "doku": "^ {content} ",
    "creole": "={content}|",
}
TABLE_COLGROUP_CELL: dict[str, str] = {
    "doku": "|| {content} ",
    "creole": " {content}|",
}
TABLE_PLAIN_CELL: dict[str, str] = {
    "doku": "| {content} ",
    "creole": "{content}|",
}
TABLE_ROW_END = "|\n"
TABLE_HEADER_END = "^\n"
TABLE_ROW_PREFIX = "|"

# Dialects whose table rows carry a leading pipe and no closing delimiter
PIPE_PREFIXED_STYLES = frozenset({"creole"})

CROSS_REFERENCE_TEMPLATE = "See section {number}"

# =============================================================================
# Typography
# =============================================================================

# (open double, close double, open single, close single, apostrophe)
SMART_QUOTES: dict[str, tuple[str, str, str, str, str]] = {
    "en": ("“", "”", "‘", "’", "’"),
    "de": ("„", "“", "‚", "‘", "’"),
    "fr": ("« ", " »", "‹ ", " ›", "’"),
    "sv": ("”", "”", "’", "’", "’"),
}

# Ordered: longer sequences must be replaced first
SPECIAL_STRINGS: list[tuple[str, str]] = [
    ("---", "—"),
    ("--", "–"),
    ("...", "…"),
]

# =============================================================================
# Link Handling
# =============================================================================

IMAGE_FILE_PATTERN = re.compile(r"\.(png|jpe?g|gif|svg|webp|bmp|tiff?|xpm|pbm|pgm|ppm)\Z", re.IGNORECASE)

WEB_LINK_TYPES = frozenset({"http", "https", "ftp"})
ID_LINK_TYPES = frozenset({"id", "custom-id"})
REMOTE_IMAGE_LINK_TYPES = frozenset({"http", "https"})

ORG_EXTENSION_PATTERN = re.compile(r"\.org\Z")
