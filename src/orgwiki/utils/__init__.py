#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgwiki/utils/__init__.py
"""Utility modules for the orgwiki package.

This package contains the text escaping pipeline, typographic substitutions
and output writing helpers.
"""

from orgwiki.utils.escape import escape_structural, escape_text, quote_literal
from orgwiki.utils.io_utils import write_content
from orgwiki.utils.typography import apply_smart_quotes, apply_special_strings

__all__ = [
    "apply_smart_quotes",
    "apply_special_strings",
    "escape_structural",
    "escape_text",
    "quote_literal",
    "write_content",
]
