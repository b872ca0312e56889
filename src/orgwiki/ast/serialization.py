#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgwiki/ast/serialization.py
"""JSON serialization and deserialization for document trees.

The transcoder does not parse Org text. Trees produced by an external Org
parser are exchanged as JSON, one object per node:

    {"schema_version": 1, "node_type": "Document", "children": [...]}

Node-sequence fields (``children``, ``title``, ``tag``, ``caption`` and
``definition``) hold lists of node objects; every other field holds a plain
JSON value. Fields left out take the node's default.

Examples
--------
    >>> from orgwiki.ast import Document, Paragraph, PlainText
    >>> doc = Document(children=[Paragraph(children=[PlainText(value="Hi")])])
    >>> json_to_ast(ast_to_json(doc)).children[0].children[0].value
    'Hi'

"""

from __future__ import annotations

import json
import logging
from dataclasses import MISSING, fields
from typing import Any, Optional

from orgwiki.ast.nodes import NODE_CLASSES, Node
from orgwiki.exceptions import ParsingError

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1


def _node_fields(node_class: type[Node]) -> set[str]:
    """Return the names of node-sequence fields of ``node_class``."""
    names = set(node_class.secondary_fields)
    if node_class.is_container:
        names.add("children")
    return names


def ast_to_dict(node: Node) -> dict[str, Any]:
    """Convert a node and its descendants to plain dictionaries.

    Parameters
    ----------
    node : Node
        Node to convert

    Returns
    -------
    dict
        Dictionary with a ``node_type`` key and one key per field

    """
    node_class = type(node)
    if NODE_CLASSES.get(node_class.node_type) is not node_class:
        raise ValueError(f"Unknown node type for serialization: {node_class.__name__}")

    sequence_fields = _node_fields(node_class)
    result: dict[str, Any] = {"node_type": node_class.node_type}
    for dataclass_field in fields(node):  # type: ignore[arg-type]
        value = getattr(node, dataclass_field.name)
        if dataclass_field.name in sequence_fields:
            result[dataclass_field.name] = [ast_to_dict(child) for child in value]
        elif isinstance(value, tuple):
            result[dataclass_field.name] = list(value)
        elif isinstance(value, dict):
            result[dataclass_field.name] = dict(value)
        else:
            result[dataclass_field.name] = value
    return result


def _deserialize_nodes(items: Any, field_name: str, strict_mode: bool) -> list[Node]:
    if not isinstance(items, list):
        raise ParsingError(
            f"Field '{field_name}' must be a list of nodes, got {type(items).__name__}",
            parsing_stage="deserialization",
        )
    nodes = []
    for item in items:
        node = dict_to_ast(item, strict_mode=strict_mode)
        if node is not None:
            nodes.append(node)
    return nodes


def dict_to_ast(data: dict[str, Any], strict_mode: bool = True) -> Optional[Node]:
    """Convert a dictionary representation back to a node.

    Parameters
    ----------
    data : dict
        Dictionary representation of a node
    strict_mode : bool, default True
        If True, unknown node types and unknown fields raise. If False they
        are logged and dropped.

    Returns
    -------
    Node or None
        Reconstructed node, or None when an unknown node was dropped

    Raises
    ------
    ParsingError
        If the data does not describe a valid node

    """
    if not isinstance(data, dict):
        raise ParsingError(f"Expected a node object, got {type(data).__name__}", parsing_stage="deserialization")

    node_type = data.get("node_type")
    if not node_type:
        raise ParsingError("Node object must contain a 'node_type' field", parsing_stage="deserialization")

    node_class = NODE_CLASSES.get(node_type)
    if node_class is None:
        if strict_mode:
            raise ParsingError(f"Unknown node type: {node_type}", parsing_stage="deserialization")
        logger.warning("Unknown node type '%s', skipping", node_type)
        return None

    known = {dataclass_field.name: dataclass_field for dataclass_field in fields(node_class)}  # type: ignore[arg-type]
    sequence_fields = _node_fields(node_class)
    kwargs: dict[str, Any] = {}
    for key, value in data.items():
        if key == "node_type":
            continue
        if key not in known:
            if strict_mode:
                raise ParsingError(f"Unknown field '{key}' for node type {node_type}", parsing_stage="deserialization")
            logger.warning("Unknown field '%s' for node type %s, ignoring", key, node_type)
            continue
        if key in sequence_fields:
            kwargs[key] = _deserialize_nodes(value, key, strict_mode)
        elif value is None and known[key].default is MISSING:
            # Sequence/mapping fields use default factories; null means "absent"
            continue
        else:
            kwargs[key] = value

    try:
        return node_class(**kwargs)
    except (TypeError, ValueError) as e:
        raise ParsingError(f"Invalid {node_type} node: {e}", parsing_stage="deserialization", original_error=e) from e


def ast_to_json(node: Node, indent: Optional[int] = None) -> str:
    """Serialize a node to a JSON string with a schema version.

    Parameters
    ----------
    node : Node
        Node to serialize
    indent : int or None, default None
        Indentation, None for compact output

    Returns
    -------
    str
        JSON text; non-ASCII characters are written as is

    """
    versioned = {"schema_version": SCHEMA_VERSION, **ast_to_dict(node)}
    return json.dumps(versioned, indent=indent, ensure_ascii=False)


def json_to_ast(json_str: str, validate_schema: bool = True, strict_mode: bool = True) -> Node:
    """Deserialize a JSON string to a node.

    Parameters
    ----------
    json_str : str
        JSON text
    validate_schema : bool, default True
        If True, reject schema versions other than the supported one. A
        missing version is read as version 1.
    strict_mode : bool, default True
        If True, unknown node types and fields raise

    Returns
    -------
    Node
        Reconstructed root node

    Raises
    ------
    ParsingError
        If the text is not valid JSON, uses an unsupported schema version, or
        does not describe a valid tree

    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ParsingError(f"Invalid JSON: {e}", parsing_stage="json_decode", original_error=e) from e

    if not isinstance(data, dict):
        raise ParsingError("Document tree JSON must be an object", parsing_stage="json_decode")

    schema_version = data.pop("schema_version", None)
    if validate_schema:
        if schema_version is None:
            schema_version = SCHEMA_VERSION
        if not isinstance(schema_version, int) or isinstance(schema_version, bool):
            raise ParsingError(
                f"Schema version must be an integer, got {type(schema_version).__name__}",
                parsing_stage="schema_validation",
            )
        if schema_version != SCHEMA_VERSION:
            raise ParsingError(
                f"Unsupported schema version: {schema_version}. "
                f"This version of orgwiki supports schema version {SCHEMA_VERSION} only.",
                parsing_stage="schema_validation",
            )
    elif schema_version not in (None, SCHEMA_VERSION):
        logger.warning("Loading document tree with unsupported schema version %s", schema_version)

    node = dict_to_ast(data, strict_mode=strict_mode)
    if node is None:
        raise ParsingError(f"Unknown root node type: {data.get('node_type')}", parsing_stage="deserialization")
    return node
