#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/xeditor_md/tree/builder.py
"""Declarative helpers for constructing document trees.

Specs are lightweight, immutable descriptions of an element and its
children. They are materialised into a :class:`DocumentTree` with
:func:`build_tree` or :func:`append_spec`. Plain strings stand for text
nodes.

Examples
--------
    >>> tree = build_tree(paragraph("Hello ", strong("world")))
    >>> tree.text_content()
    'Hello world'

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from xeditor_md.constants import DOCUMENT_TAG, LANGUAGE_CLASS_PREFIX
from xeditor_md.tree.nodes import DocumentTree, NodeId


@dataclass(frozen=True)
class ElementSpec:
    """Description of an element to be created in a tree.

    Parameters
    ----------
    tag : str
        Element name
    children : tuple of ElementSpec or str
        Child specs; strings become text nodes
    attributes : dict[str, str]
        Attribute values in insertion order

    """

    tag: str
    children: tuple[Union["ElementSpec", str], ...] = ()
    attributes: dict[str, str] = field(default_factory=dict)


Child = Union[ElementSpec, str]


def element(tag: str, *children: Child, **attributes: str) -> ElementSpec:
    """Describe an element with children and attributes.

    A trailing underscore on an attribute keyword is dropped so reserved
    words can be used (``class_="x"`` becomes ``class="x"``).

    """
    attrs = {(name[:-1] if name.endswith("_") else name): value for name, value in attributes.items()}
    return ElementSpec(tag=tag, children=tuple(children), attributes=attrs)


def append_spec(tree: DocumentTree, parent: NodeId, spec: Child) -> NodeId:
    """Materialise ``spec`` as the last child of ``parent`` and return its id."""
    if isinstance(spec, str):
        return tree.append_text(parent, spec)

    node_id = tree.append_element(parent, spec.tag, spec.attributes)
    pending = [(node_id, spec.children)]
    while pending:
        owner, children = pending.pop()
        for child in children:
            if isinstance(child, str):
                tree.append_text(owner, child)
            else:
                child_id = tree.append_element(owner, child.tag, child.attributes)
                if child.children:
                    pending.append((child_id, child.children))
    return node_id


def build_tree(*specs: Child, root_tag: str = DOCUMENT_TAG) -> DocumentTree:
    """Build a tree whose root holds ``specs`` as children."""
    tree = DocumentTree(root_tag=root_tag)
    for spec in specs:
        append_spec(tree, tree.root, spec)
    return tree


def paragraph(*children: Child) -> ElementSpec:
    return element("p", *children)


def heading(level: int, *children: Child) -> ElementSpec:
    """Describe an ``h1``..``h6`` element.

    Raises
    ------
    ValueError
        If ``level`` is outside 1-6

    """
    if not 1 <= level <= 6:
        raise ValueError(f"Heading level must be 1-6, got {level}")
    return element(f"h{level}", *children)


def strong(*children: Child) -> ElementSpec:
    return element("strong", *children)


def emphasis(*children: Child) -> ElementSpec:
    return element("em", *children)


def strikethrough(*children: Child) -> ElementSpec:
    return element("del", *children)


def underline(*children: Child) -> ElementSpec:
    return element("u", *children)


def inline_code(code: str) -> ElementSpec:
    return element("code", code)


def code_block(code: str, language: str | None = None) -> ElementSpec:
    """Describe a ``pre > code`` block with an optional ``language-*`` class."""
    if language:
        return element("pre", element("code", code, class_=f"{LANGUAGE_CLASS_PREFIX}{language}"))
    return element("pre", element("code", code))


def blockquote(*children: Child) -> ElementSpec:
    return element("blockquote", *children)


def unordered_list(*items: Child) -> ElementSpec:
    return element("ul", *items)


def ordered_list(*items: Child) -> ElementSpec:
    return element("ol", *items)


def list_item(*children: Child) -> ElementSpec:
    return element("li", *children)


def link(href: str, *children: Child) -> ElementSpec:
    return element("a", *children, href=href)


def image(src: str, alt: str = "") -> ElementSpec:
    return element("img", src=src, alt=alt)


def table(*rows: Child) -> ElementSpec:
    """Describe a ``table`` with the sections the Markdown parser produces.

    Bare ``tr`` rows are grouped: the first goes into ``thead`` and the rest
    into ``tbody``, which is omitted when there are no body rows. Children
    that are not all ``tr`` specs, such as prebuilt sections, are kept as
    given.

    """
    if not rows or not all(isinstance(row, ElementSpec) and row.tag == "tr" for row in rows):
        return element("table", *rows)

    sections = [element("thead", rows[0])]
    if len(rows) > 1:
        sections.append(element("tbody", *rows[1:]))
    return element("table", *sections)


def table_row(*cells: Child, header: bool = False) -> ElementSpec:
    """Describe a ``tr``; string cells are wrapped in ``th`` or ``td``."""
    cell_tag = "th" if header else "td"
    wrapped = [element(cell_tag, cell) if isinstance(cell, str) else cell for cell in cells]
    return element("tr", *wrapped)


def thematic_break() -> ElementSpec:
    return element("hr")


def line_break() -> ElementSpec:
    return element("br")


__all__ = [
    "ElementSpec",
    "append_spec",
    "blockquote",
    "build_tree",
    "code_block",
    "element",
    "emphasis",
    "heading",
    "image",
    "inline_code",
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
    "underline",
    "unordered_list",
]
