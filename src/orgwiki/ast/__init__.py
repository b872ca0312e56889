#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgwiki/ast/__init__.py
"""Document tree representation for Org documents.

The module consists of several components:

- nodes: immutable node classes for Org elements and objects
- visitors: the renderer interface, one abstract method per node kind
- tree: arena index answering ancestry, numbering and reference queries
- serialization: JSON loading and saving of trees

Examples
--------
    >>> from orgwiki.ast import Document, Headline, PlainText, DocumentTree
    >>> doc = Document(children=[Headline(level=1, title=[PlainText(value="Intro")])])
    >>> tree = DocumentTree(doc)
    >>> tree.headline_number(doc.children[0], True)
    (1,)

"""

from __future__ import annotations

from orgwiki.ast.nodes import (
    NODE_CLASSES,
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
    Node,
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
    iter_nodes,
)
from orgwiki.ast.serialization import ast_to_dict, ast_to_json, dict_to_ast, json_to_ast
from orgwiki.ast.tree import DocumentTree, ExternalTarget, InternalTarget, ResolvedTarget, node_text
from orgwiki.ast.visitors import NodeVisitor

__all__ = [
    # Nodes
    "Node",
    "Document",
    "Section",
    "Headline",
    "Paragraph",
    "PlainList",
    "Item",
    "QuoteBlock",
    "FixedWidth",
    "SrcBlock",
    "HorizontalRule",
    "Table",
    "TableRow",
    "TableCell",
    "Comment",
    "CommentBlock",
    "FootnoteDefinition",
    "FootnoteReference",
    "PlainText",
    "Bold",
    "Italic",
    "Underline",
    "Code",
    "Verbatim",
    "LineBreak",
    "Link",
    "Target",
    "RadioTarget",
    "NODE_CLASSES",
    "iter_nodes",
    # Tree
    "DocumentTree",
    "ExternalTarget",
    "InternalTarget",
    "ResolvedTarget",
    "node_text",
    # Visitors
    "NodeVisitor",
    # Serialization
    "ast_to_dict",
    "dict_to_ast",
    "ast_to_json",
    "json_to_ast",
]
