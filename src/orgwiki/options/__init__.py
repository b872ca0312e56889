#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Options classes for orgwiki rendering."""

from orgwiki.options.base import BaseRendererOptions, CloneFrozenMixin
from orgwiki.options.wiki import WikiRendererOptions

__all__ = [
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "WikiRendererOptions",
]
