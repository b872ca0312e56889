"""orgwiki - export Org document trees to wiki markup.

orgwiki takes a parsed Org document tree (headlines, plain lists, tables,
links, source blocks, emphasis, ...) and renders it as wiki markup in one of
two dialects, preserving structure while remapping syntax.

Key Features
------------
- DokuWiki-style (``doku``) and Creole-style (``creole``) output
- Headline numbering, TODO keywords, priorities and tags
- Headlines deeper than six levels rendered as nested list items
- Table header and column-group detection
- Resolution of id, fuzzy, radio and coderef links and of footnotes
- Configurable text escaping with smart quotes and special strings

Requirements
------------
- Python 3.10+

Examples
--------
    >>> from orgwiki import to_wiki
    >>> from orgwiki.ast import Document, Headline, Paragraph, PlainText, Section
    >>> doc = Document(children=[
    ...     Headline(level=1, title=[PlainText(value="Intro")], children=[
    ...         Section(children=[Paragraph(children=[PlainText(value="Hello *world*")])])
    ...     ])
    ... ])
    >>> print(to_wiki(doc))
    ====== "Intro" ======
    "Hello \\*world\\*"
    <BLANKLINE>

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "orgwiki requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from orgwiki.api import WikiExporter, load_document, to_wiki  # noqa: E402
from orgwiki.exceptions import (  # noqa: E402
    FileError,
    InvalidOptionsError,
    OrgWikiError,
    OutputWriteError,
    ParsingError,
    RenderingError,
    UnhandledNodeTypeError,
    ValidationError,
)
from orgwiki.options import WikiRendererOptions  # noqa: E402
from orgwiki.renderers import RenderContext, WikiRenderer  # noqa: E402

__all__ = [
    "__version__",
    "to_wiki",
    "load_document",
    "WikiExporter",
    "WikiRenderer",
    "WikiRendererOptions",
    "RenderContext",
    "OrgWikiError",
    "ValidationError",
    "InvalidOptionsError",
    "FileError",
    "ParsingError",
    "RenderingError",
    "UnhandledNodeTypeError",
    "OutputWriteError",
]
