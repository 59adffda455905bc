#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for the arena-backed document tree."""

import pytest

from xeditor_md.exceptions import TreeStructureError
from xeditor_md.tree import DocumentTree, Element, Text


@pytest.fixture
def tree() -> DocumentTree:
    """Build ``<document><p>Hello <strong>world</strong></p><hr></document>``."""
    tree = DocumentTree()
    p = tree.append_element(tree.root, "p", {"class": "lead"})
    tree.append_text(p, "Hello ")
    strong = tree.append_element(p, "strong")
    tree.append_text(strong, "world")
    tree.append_element(tree.root, "hr")
    return tree


@pytest.mark.unit
class TestTreeConstruction:
    """Test node creation and structural invariants."""

    def test_new_tree_holds_only_root(self):
        tree = DocumentTree()
        assert len(tree) == 1
        assert tree.root == 0
        assert tree.tag(tree.root) == "document"
        assert tree.children(tree.root) == ()
        assert tree.parent(tree.root) is None

    def test_custom_root(self):
        tree = DocumentTree("article", {"id": "main"})
        assert tree.tag(tree.root) == "article"
        assert tree.attribute(tree.root, "id") == "main"

    def test_append_returns_sequential_ids(self, tree):
        assert tree.children(tree.root) == (1, 5)
        assert tree.children(1) == (2, 3)

    def test_parent_links(self, tree):
        assert tree.parent(1) == tree.root
        assert tree.parent(4) == 3

    def test_append_under_text_raises(self, tree):
        with pytest.raises(TreeStructureError):
            tree.append_element(2, "em")
        with pytest.raises(TreeStructureError):
            tree.append_text(2, "more")

    @pytest.mark.parametrize("bad_id", [-1, 99, "1", True])
    def test_unknown_ids_raise(self, tree, bad_id):
        with pytest.raises(TreeStructureError):
            tree.node(bad_id)

    def test_node_records(self, tree):
        assert isinstance(tree.node(1), Element)
        assert isinstance(tree.node(2), Text)
        assert tree.is_element(1)
        assert tree.is_text(2)


@pytest.mark.unit
class TestTreeQueries:
    """Test read-only tree accessors."""

    def test_tag_and_content(self, tree):
        assert tree.tag(1) == "p"
        assert tree.tag(2) is None
        assert tree.content(2) == "Hello "
        assert tree.content(1) is None

    def test_attributes(self, tree):
        assert tree.attribute(1, "class") == "lead"
        assert tree.attribute(1, "missing", "fallback") == "fallback"
        assert tree.attribute(2, "class") is None
        assert tree.attributes(1) == {"class": "lead"}

    def test_attributes_returns_copy(self, tree):
        tree.attributes(1)["class"] = "changed"
        assert tree.attribute(1, "class") == "lead"

    def test_set_attribute(self, tree):
        tree.set_attribute(1, "id", "intro")
        assert tree.attributes(1) == {"class": "lead", "id": "intro"}

    def test_walk_is_preorder(self, tree):
        assert list(tree.walk()) == [0, 1, 2, 3, 4, 5]
        assert list(tree.walk(3)) == [3, 4]

    def test_text_content(self, tree):
        assert tree.text_content() == "Hello world"
        assert tree.text_content(3) == "world"

    def test_find_all_excludes_start_node(self, tree):
        assert tree.find_all(tree.root, "p", "hr") == [1, 5]
        assert tree.find_all(1, "p") == []

    def test_find_is_case_insensitive(self, tree):
        assert tree.find_first(tree.root, "STRONG") == 3

    def test_find_without_tags_matches_any_element(self, tree):
        assert tree.find_all(tree.root) == [1, 3, 5]
        assert tree.find_first(3) is None

    def test_repr(self, tree):
        assert repr(tree) == "DocumentTree(root_tag='document', nodes=6)"


@pytest.mark.unit
class TestTreeCopyAndCompare:
    """Test copying, grafting and structural equality."""

    def test_copy_is_equal_and_independent(self, tree):
        duplicate = tree.copy()
        assert duplicate == tree
        duplicate.append_text(1, "!")
        assert duplicate != tree
        assert tree.text_content() == "Hello world"

    def test_equality_ignores_node_ids(self):
        first = DocumentTree()
        a1 = first.append_element(first.root, "p")
        first.append_text(a1, "x")
        a2 = first.append_element(first.root, "p")
        first.append_text(a2, "y")

        second = DocumentTree()
        b1 = second.append_element(second.root, "p")
        b2 = second.append_element(second.root, "p")
        second.append_text(b2, "y")
        second.append_text(b1, "x")

        assert list(first.walk()) != list(second.walk())
        assert first == second

    def test_attribute_difference_breaks_equality(self):
        first = DocumentTree()
        second = DocumentTree()
        first.append_element(first.root, "a", {"href": "x"})
        second.append_element(second.root, "a", {"href": "y"})
        assert first != second

    def test_not_hashable(self, tree):
        with pytest.raises(TypeError):
            hash(tree)

    def test_graft_copies_subtree(self, tree):
        target = DocumentTree()
        section = target.append_element(target.root, "section")
        new_id = target.graft(section, tree, 1)
        assert target.tag(new_id) == "p"
        assert target.parent(new_id) == section
        assert target.text_content() == "Hello world"
        assert len(tree) == 6

    def test_graft_whole_tree_into_itself(self, tree):
        new_id = tree.graft(tree.root, tree)
        assert tree.tag(new_id) == "document"
        assert tree.text_content() == "Hello worldHello world"
