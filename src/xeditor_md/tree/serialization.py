#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/xeditor_md/tree/serialization.py
"""JSON serialization and deserialization for document trees.

Trees are written as nested dictionaries. Elements carry their tag,
attributes and children; text nodes carry their content:

    {"schema_version": 1, "node_type": "Element", "tag": "document",
     "attributes": {}, "children": [
        {"node_type": "Element", "tag": "p", "attributes": {},
         "children": [{"node_type": "Text", "content": "Hello"}]}]}

Examples
--------
    >>> from xeditor_md.tree.builder import build_tree, paragraph
    >>> tree = build_tree(paragraph("Hello"))
    >>> json_to_tree(tree_to_json(tree)) == tree
    True

"""

from __future__ import annotations

import json
import logging
from typing import Any

from xeditor_md.exceptions import ParsingError
from xeditor_md.tree.nodes import DocumentTree, Element, NodeId

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1


def _serialize_node(tree: DocumentTree, node_id: NodeId) -> dict[str, Any]:
    record = tree.node(node_id)
    if isinstance(record, Element):
        return {
            "node_type": "Element",
            "tag": record.tag,
            "attributes": dict(record.attributes),
            "children": [_serialize_node(tree, child) for child in record.children],
        }
    return {"node_type": "Text", "content": record.content}


def tree_to_dict(tree: DocumentTree, node_id: NodeId | None = None) -> dict[str, Any]:
    """Convert a tree, or the subtree at ``node_id``, to a dictionary.

    Parameters
    ----------
    tree : DocumentTree
        Tree to convert
    node_id : NodeId or None, default = None
        Subtree root; the tree root when omitted

    Returns
    -------
    dict
        Nested dictionary representation

    """
    return _serialize_node(tree, tree.root if node_id is None else node_id)


def _require(data: Any, key: str, expected: type, stage: str) -> Any:
    if not isinstance(data, dict):
        raise ParsingError(f"Expected an object, got {type(data).__name__}", parsing_stage=stage)
    if key not in data:
        raise ParsingError(f"Node is missing required field '{key}'", parsing_stage=stage)
    value = data[key]
    if not isinstance(value, expected):
        raise ParsingError(
            f"Field '{key}' must be {expected.__name__}, got {type(value).__name__}", parsing_stage=stage
        )
    return value


def _deserialize_children(tree: DocumentTree, parent: NodeId, children: list[Any]) -> None:
    for child in children:
        node_type = _require(child, "node_type", str, "node")
        if node_type == "Text":
            tree.append_text(parent, _require(child, "content", str, "text"))
        elif node_type == "Element":
            attributes = _deserialize_attributes(child)
            child_id = tree.append_element(parent, _require(child, "tag", str, "element"), attributes)
            _deserialize_children(tree, child_id, child.get("children", []) or [])
        else:
            raise ParsingError(f"Unknown node type: {node_type}", parsing_stage="node")


def _deserialize_attributes(data: dict[str, Any]) -> dict[str, str]:
    attributes = data.get("attributes") or {}
    if not isinstance(attributes, dict):
        raise ParsingError("Field 'attributes' must be an object", parsing_stage="element")
    return {str(name): str(value) for name, value in attributes.items()}


def dict_to_tree(data: dict[str, Any]) -> DocumentTree:
    """Build a tree from its dictionary representation.

    The top-level node must be an element; it becomes the tree root.

    Raises
    ------
    ParsingError
        If the data does not describe a valid tree

    """
    node_type = _require(data, "node_type", str, "root")
    if node_type != "Element":
        raise ParsingError(f"Tree root must be an Element, got {node_type}", parsing_stage="root")

    tree = DocumentTree(root_tag=_require(data, "tag", str, "root"), attributes=_deserialize_attributes(data))
    children = data.get("children", []) or []
    if not isinstance(children, list):
        raise ParsingError("Field 'children' must be a list", parsing_stage="root")
    _deserialize_children(tree, tree.root, children)
    return tree


def tree_to_json(tree: DocumentTree, indent: int | None = None) -> str:
    """Serialize a tree to a JSON string with a schema version.

    Unicode is preserved without escape sequences.

    Parameters
    ----------
    tree : DocumentTree
        Tree to serialize
    indent : int or None, default = None
        Indentation for pretty output, compact when None

    """
    versioned = {"schema_version": SCHEMA_VERSION, **tree_to_dict(tree)}
    return json.dumps(versioned, indent=indent, ensure_ascii=False)


def json_to_tree(json_str: str) -> DocumentTree:
    """Deserialize a JSON string produced by :func:`tree_to_json`.

    JSON without a ``schema_version`` field is read as version 1.

    Raises
    ------
    ParsingError
        If the JSON is malformed, uses an unsupported schema version, or
        does not describe a valid tree

    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ParsingError(f"Invalid JSON: {e}", parsing_stage="json", original_error=e) from e

    if not isinstance(data, dict):
        raise ParsingError("Tree JSON must be an object", parsing_stage="json")

    schema_version = data.pop("schema_version", SCHEMA_VERSION)
    if schema_version != SCHEMA_VERSION:
        raise ParsingError(
            f"Unsupported schema version: {schema_version}. Only version {SCHEMA_VERSION} is supported.",
            parsing_stage="json",
        )

    tree = dict_to_tree(data)
    logger.debug(f"Loaded tree with {len(tree)} nodes from JSON")
    return tree


__all__ = ["SCHEMA_VERSION", "dict_to_tree", "json_to_tree", "tree_to_dict", "tree_to_json"]
