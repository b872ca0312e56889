#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgwiki/renderers/__init__.py
"""Renderers turning document tree nodes into wiki markup fragments."""

from orgwiki.renderers.base import BaseRenderer
from orgwiki.renderers.context import RenderContext
from orgwiki.renderers.links import LinkRenderingMixin
from orgwiki.renderers.wiki import WikiRenderer

__all__ = [
    "BaseRenderer",
    "LinkRenderingMixin",
    "RenderContext",
    "WikiRenderer",
]
