#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/xeditor_md/tree/__init__.py
"""Document tree module.

The converter works on a generic document tree: elements with a tag,
ordered attributes and children, plus text leaves. The tree is stored as an
index-addressed arena so nodes can be shared with external callers by id.

The module consists of several components:

- nodes: the arena (:class:`DocumentTree`) and its node records
- builder: declarative specs for building trees in code
- serialization: dict and JSON forms of a tree

Examples
--------
    >>> from xeditor_md.tree import build_tree, heading, paragraph, strong
    >>> tree = build_tree(heading(1, "Title"), paragraph("Hello ", strong("world")))
    >>> tree.tag(tree.children(tree.root)[0])
    'h1'

"""

from __future__ import annotations

from xeditor_md.tree.builder import (
    ElementSpec,
    append_spec,
    blockquote,
    build_tree,
    code_block,
    element,
    emphasis,
    heading,
    image,
    inline_code,
    line_break,
    link,
    list_item,
    ordered_list,
    paragraph,
    strikethrough,
    strong,
    table,
    table_row,
    thematic_break,
    underline,
    unordered_list,
)
from xeditor_md.tree.nodes import DocumentTree, Element, Node, NodeId, Text
from xeditor_md.tree.serialization import dict_to_tree, json_to_tree, tree_to_dict, tree_to_json

__all__ = [
    "DocumentTree",
    "Element",
    "ElementSpec",
    "Node",
    "NodeId",
    "Text",
    "append_spec",
    "blockquote",
    "build_tree",
    "code_block",
    "dict_to_tree",
    "element",
    "emphasis",
    "heading",
    "image",
    "inline_code",
    "json_to_tree",
    "line_break",
    "link",
    "list_item",
    "ordered_list",
    "paragraph",
    "strikethrough",
    "strong",
    "table",
    "table_row",
    "thematic_break",
    "tree_to_dict",
    "tree_to_json",
    "underline",
    "unordered_list",
]
