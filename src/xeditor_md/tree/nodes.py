#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/xeditor_md/tree/nodes.py
"""Arena-backed document tree.

A :class:`DocumentTree` stores every node of a document in a flat list and
addresses nodes by their index (a :data:`NodeId`). Each node is either an
:class:`Element` (tag, ordered attributes, child ids) or a :class:`Text`
leaf. Both records carry the id of their parent.

Nodes can only be created under an existing element, through
:meth:`DocumentTree.append_element`, :meth:`DocumentTree.append_text` or
:meth:`DocumentTree.graft`. Every non-root node therefore has exactly one
owner and the structure can never contain a cycle.

Examples
--------
    >>> tree = DocumentTree()
    >>> p = tree.append_element(tree.root, "p")
    >>> _ = tree.append_text(p, "Hello")
    >>> tree.text_content()
    'Hello'

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Mapping, Optional, Union

from xeditor_md.constants import DOCUMENT_TAG
from xeditor_md.exceptions import TreeStructureError

NodeId = int


@dataclass
class Element:
    """An element node.

    Parameters
    ----------
    tag : str
        Element name, e.g. ``"p"`` or ``"h1"``
    attributes : dict[str, str], default = empty dict
        Attribute values in insertion order
    children : list[NodeId], default = empty list
        Child node ids in reading order
    parent : NodeId or None, default = None
        Owning element, None for the root

    """

    tag: str
    attributes: dict[str, str] = field(default_factory=dict)
    children: list[NodeId] = field(default_factory=list)
    parent: Optional[NodeId] = None


@dataclass
class Text:
    """A text leaf.

    Parameters
    ----------
    content : str
        Literal text
    parent : NodeId or None, default = None
        Owning element

    """

    content: str
    parent: Optional[NodeId] = None


Node = Union[Element, Text]


class DocumentTree:
    """A document tree rooted at a single element.

    Parameters
    ----------
    root_tag : str, default = "document"
        Tag of the root element. The virtual ``document`` root is used when
        the tree holds a fragment rather than a single element.
    attributes : Mapping[str, str] or None, default = None
        Attributes of the root element

    """

    def __init__(self, root_tag: str = DOCUMENT_TAG, attributes: Mapping[str, str] | None = None) -> None:
        """Create a tree holding only its root element."""
        self._nodes: list[Node] = [Element(tag=root_tag, attributes=dict(attributes or {}))]

    @property
    def root(self) -> NodeId:
        """Id of the root element, always 0."""
        return 0

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"DocumentTree(root_tag={self.tag(self.root)!r}, nodes={len(self._nodes)})"

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def node(self, node_id: NodeId) -> Node:
        """Return the record stored at ``node_id``.

        Raises
        ------
        TreeStructureError
            If the id does not address a node of this tree

        """
        if not isinstance(node_id, int) or isinstance(node_id, bool) or not 0 <= node_id < len(self._nodes):
            raise TreeStructureError(f"Unknown node id: {node_id!r}", node_id=node_id)
        return self._nodes[node_id]

    def _element(self, node_id: NodeId) -> Element:
        record = self.node(node_id)
        if not isinstance(record, Element):
            raise TreeStructureError(f"Node {node_id} is a text node, not an element", node_id=node_id)
        return record

    def is_element(self, node_id: NodeId) -> bool:
        return isinstance(self.node(node_id), Element)

    def is_text(self, node_id: NodeId) -> bool:
        return isinstance(self.node(node_id), Text)

    def tag(self, node_id: NodeId) -> str | None:
        """Return the element tag, or None for a text node."""
        record = self.node(node_id)
        return record.tag if isinstance(record, Element) else None

    def attribute(self, node_id: NodeId, name: str, default: str | None = None) -> str | None:
        """Return an attribute value of an element, or ``default``.

        Text nodes have no attributes and always return ``default``.

        """
        record = self.node(node_id)
        if isinstance(record, Element):
            return record.attributes.get(name, default)
        return default

    def attributes(self, node_id: NodeId) -> dict[str, str]:
        """Return a copy of the attributes of ``node_id`` (empty for text)."""
        record = self.node(node_id)
        return dict(record.attributes) if isinstance(record, Element) else {}

    def content(self, node_id: NodeId) -> str | None:
        """Return the content of a text node, or None for an element."""
        record = self.node(node_id)
        return record.content if isinstance(record, Text) else None

    def children(self, node_id: NodeId) -> tuple[NodeId, ...]:
        """Return the child ids of ``node_id`` in reading order."""
        record = self.node(node_id)
        return tuple(record.children) if isinstance(record, Element) else ()

    def parent(self, node_id: NodeId) -> NodeId | None:
        return self.node(node_id).parent

    def walk(self, node_id: NodeId | None = None) -> Iterator[NodeId]:
        """Yield ``node_id`` and all of its descendants in pre-order.

        Parameters
        ----------
        node_id : NodeId or None, default = None
            Start of the walk, the root when omitted

        """
        start = self.root if node_id is None else node_id
        self.node(start)
        stack = [start]
        while stack:
            current = stack.pop()
            yield current
            record = self._nodes[current]
            if isinstance(record, Element):
                stack.extend(reversed(record.children))

    def text_content(self, node_id: NodeId | None = None) -> str:
        """Concatenate the text of every text node under ``node_id``."""
        parts = []
        for current in self.walk(node_id):
            record = self._nodes[current]
            if isinstance(record, Text):
                parts.append(record.content)
        return "".join(parts)

    def find_all(self, node_id: NodeId, *tags: str) -> list[NodeId]:
        """Return every descendant element of ``node_id`` whose tag is in ``tags``.

        Tags are compared case-insensitively. The start node itself is not
        included. With no tags, every descendant element is returned.

        """
        wanted = {t.lower() for t in tags}
        found = []
        for current in self.walk(node_id):
            if current == node_id:
                continue
            record = self._nodes[current]
            if isinstance(record, Element) and (not wanted or record.tag.lower() in wanted):
                found.append(current)
        return found

    def find_first(self, node_id: NodeId, *tags: str) -> NodeId | None:
        """Return the first descendant of ``node_id`` (pre-order) matching ``tags``."""
        wanted = {t.lower() for t in tags}
        for current in self.walk(node_id):
            if current == node_id:
                continue
            record = self._nodes[current]
            if isinstance(record, Element) and (not wanted or record.tag.lower() in wanted):
                return current
        return None

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def append_element(
        self, parent: NodeId, tag: str, attributes: Mapping[str, str] | None = None
    ) -> NodeId:
        """Create an element as the last child of ``parent`` and return its id.

        Raises
        ------
        TreeStructureError
            If ``parent`` is unknown or is a text node

        """
        owner = self._element(parent)
        node_id = len(self._nodes)
        self._nodes.append(Element(tag=tag, attributes=dict(attributes or {}), parent=parent))
        owner.children.append(node_id)
        return node_id

    def append_text(self, parent: NodeId, content: str) -> NodeId:
        """Create a text node as the last child of ``parent`` and return its id."""
        owner = self._element(parent)
        node_id = len(self._nodes)
        self._nodes.append(Text(content=content, parent=parent))
        owner.children.append(node_id)
        return node_id

    def set_attribute(self, node_id: NodeId, name: str, value: str) -> None:
        """Set an attribute on an element, keeping the original position of existing keys."""
        self._element(node_id).attributes[name] = value

    def graft(self, parent: NodeId, other: DocumentTree, node_id: NodeId | None = None) -> NodeId:
        """Copy the subtree at ``node_id`` of ``other`` under ``parent``.

        Parameters
        ----------
        parent : NodeId
            Element of this tree that receives the copy
        other : DocumentTree
            Source tree, left untouched. May be this tree.
        node_id : NodeId or None, default = None
            Root of the copied subtree, the root of ``other`` when omitted

        Returns
        -------
        NodeId
            Id of the copied subtree root in this tree

        """
        source_root = other.root if node_id is None else node_id
        other.node(source_root)
        self._element(parent)

        # Snapshot first so grafting a tree into itself cannot see its own copies
        order = list(other.walk(source_root))
        records = {i: other._nodes[i] for i in order}

        mapping: dict[NodeId, NodeId] = {}
        for old_id in order:
            record = records[old_id]
            new_parent = parent if old_id == source_root else mapping[record.parent]  # type: ignore[index]
            if isinstance(record, Element):
                mapping[old_id] = self.append_element(new_parent, record.tag, record.attributes)
            else:
                mapping[old_id] = self.append_text(new_parent, record.content)
        return mapping[source_root]

    def copy(self) -> DocumentTree:
        """Return an independent copy of this tree with the same node ids."""
        duplicate = DocumentTree.__new__(DocumentTree)
        duplicate._nodes = [
            Element(tag=r.tag, attributes=dict(r.attributes), children=list(r.children), parent=r.parent)
            if isinstance(r, Element)
            else Text(content=r.content, parent=r.parent)
            for r in self._nodes
        ]
        return duplicate

    def __eq__(self, other: object) -> bool:
        """Compare the trees reachable from both roots, ignoring node ids."""
        if not isinstance(other, DocumentTree):
            return NotImplemented
        pending = [(self.root, other.root)]
        while pending:
            left_id, right_id = pending.pop()
            left, right = self._nodes[left_id], other._nodes[right_id]
            if type(left) is not type(right):
                return False
            if isinstance(left, Text):
                if left.content != right.content:  # type: ignore[union-attr]
                    return False
                continue
            assert isinstance(right, Element)
            if left.tag != right.tag or left.attributes != right.attributes:
                return False
            if len(left.children) != len(right.children):
                return False
            pending.extend(zip(left.children, right.children))
        return True

    __hash__ = None  # type: ignore[assignment]


__all__ = ["DocumentTree", "Element", "Node", "NodeId", "Text"]
