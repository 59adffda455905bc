#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for document tree JSON serialization and deserialization."""

import json

import pytest

from xeditor_md.exceptions import ParsingError
from xeditor_md.tree import build_tree, dict_to_tree, json_to_tree, link, paragraph, strong, tree_to_dict, tree_to_json


@pytest.mark.unit
class TestTreeToDict:
    """Test tree to dictionary conversion."""

    def test_text_and_element_nodes(self):
        tree = build_tree(paragraph("Hello ", strong("world")))
        assert tree_to_dict(tree) == {
            "node_type": "Element",
            "tag": "document",
            "attributes": {},
            "children": [
                {
                    "node_type": "Element",
                    "tag": "p",
                    "attributes": {},
                    "children": [
                        {"node_type": "Text", "content": "Hello "},
                        {
                            "node_type": "Element",
                            "tag": "strong",
                            "attributes": {},
                            "children": [{"node_type": "Text", "content": "world"}],
                        },
                    ],
                }
            ],
        }

    def test_subtree(self):
        tree = build_tree(paragraph(link("https://example.com", "x")))
        anchor = tree.find_first(tree.root, "a")
        assert tree_to_dict(tree, anchor)["attributes"] == {"href": "https://example.com"}


@pytest.mark.unit
class TestJsonRoundTrip:
    """Test JSON encoding of trees."""

    def test_schema_version_written(self):
        data = json.loads(tree_to_json(build_tree(paragraph("x"))))
        assert data["schema_version"] == 1

    def test_round_trip_preserves_structure(self, sample_tree):
        assert json_to_tree(tree_to_json(sample_tree)) == sample_tree

    def test_unicode_not_escaped(self):
        assert "café" in tree_to_json(build_tree(paragraph("café")))

    def test_indent(self):
        assert "\n  " in tree_to_json(build_tree(paragraph("x")), indent=2)

    def test_missing_schema_version_reads_as_current(self):
        tree = json_to_tree('{"node_type": "Element", "tag": "document", "children": []}')
        assert tree.tag(tree.root) == "document"
        assert len(tree) == 1

    def test_attribute_values_become_strings(self):
        tree = dict_to_tree({"node_type": "Element", "tag": "img", "attributes": {"width": 10}})
        assert tree.attribute(tree.root, "width") == "10"


@pytest.mark.unit
class TestJsonErrors:
    """Test rejection of malformed tree JSON."""

    def test_invalid_json(self):
        with pytest.raises(ParsingError) as exc_info:
            json_to_tree("{not json")
        assert exc_info.value.parsing_stage == "json"

    def test_unsupported_schema_version(self):
        with pytest.raises(ParsingError, match="schema version"):
            json_to_tree('{"schema_version": 2, "node_type": "Element", "tag": "document"}')

    def test_non_object(self):
        with pytest.raises(ParsingError):
            json_to_tree("[1, 2]")

    def test_text_root_rejected(self):
        with pytest.raises(ParsingError, match="root must be an Element"):
            json_to_tree('{"node_type": "Text", "content": "x"}')

    def test_unknown_node_type(self):
        with pytest.raises(ParsingError, match="Unknown node type"):
            dict_to_tree({"node_type": "Element", "tag": "p", "children": [{"node_type": "Comment"}]})

    def test_missing_tag(self):
        with pytest.raises(ParsingError, match="'tag'"):
            dict_to_tree({"node_type": "Element", "children": []})

    def test_text_without_content(self):
        with pytest.raises(ParsingError, match="'content'"):
            dict_to_tree({"node_type": "Element", "tag": "p", "children": [{"node_type": "Text"}]})
