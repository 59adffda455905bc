#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/integration/test_api.py
"""Integration tests for the public export and import API.

These tests exercise the full pipelines: HTML bridge, tree, Markdown
serializer, Markdown parser and JSON persistence together.
"""

import pytest

import xeditor_md
from xeditor_md import (
    export_markdown,
    html_to_markdown,
    import_markdown,
    json_to_tree,
    markdown_to_html,
    tree_to_json,
)
from xeditor_md.options import MarkdownExportOptions
from xeditor_md.tree import (
    build_tree,
    code_block,
    element,
    emphasis,
    heading,
    image,
    link,
    list_item,
    paragraph,
    strong,
    table,
    table_row,
    unordered_list,
)


@pytest.mark.integration
class TestExportImportContract:
    """Behaviour promised by the editor's export and import paths."""

    def test_strong_paragraph_export(self):
        assert export_markdown(paragraph("Hello ", strong("world"))) == "Hello **world**"

    def test_heading_import_and_export(self):
        tree = import_markdown("# Title")
        assert tree == build_tree(heading(1, "Title"))
        assert export_markdown(tree) == "# Title"

    def test_bullet_list_round_trip(self):
        tree = import_markdown("- a\n- b")
        assert tree == build_tree(unordered_list(list_item("a"), list_item("b")))
        assert export_markdown(tree, {"bulletListMarker": "-"}) == "- a\n- b"

    def test_fenced_code_round_trip_keeps_language_and_text(self):
        code = "const s = `*_[x](y)_*` + a#b; // \\ {}"
        markdown = export_markdown(build_tree(code_block(code, language="js")))
        assert markdown.startswith("```js\n")

        tree = import_markdown(markdown)
        assert tree == build_tree(code_block(code, language="js"))

    def test_strong_contains_emphasis(self):
        tree = import_markdown("**bold *and italic* text**")
        strong_id = tree.find_first(tree.root, "strong")
        assert strong_id is not None
        assert tree.find_first(strong_id, "em") is not None
        assert tree.find_first(tree.root, "em") is not None
        assert tree == build_tree(paragraph(strong("bold ", emphasis("and italic"), " text")))

    def test_unknown_tag_passthrough(self):
        assert export_markdown(element("x-widget", "text")) == "text"

    def test_empty_inputs(self):
        assert export_markdown(build_tree()) == ""
        assert len(import_markdown("")) == 1
        assert markdown_to_html("") == ""

    def test_malformed_markdown_never_raises(self):
        tree = import_markdown("**open *nested `tick [link](")
        assert tree.text_content() == "**open *nested `tick [link]("


@pytest.mark.integration
class TestConfigurationInputs:
    """Export configuration given as options or plain mappings."""

    def test_options_instance(self):
        options = MarkdownExportOptions(heading_style="setext")
        assert export_markdown(heading(1, "Title"), options) == "Title\n====="

    def test_editor_settings_mapping(self):
        tree = build_tree(unordered_list(list_item("a")), code_block("x = 1"))
        settings = {"bulletListMarker": "+", "codeBlockStyle": "indented"}
        assert export_markdown(tree, settings) == "+ a\n\n    x = 1"

    def test_invalid_mapping_value(self):
        with pytest.raises(ValueError):
            export_markdown(paragraph("x"), {"linkStyle": "footnote"})


@pytest.mark.integration
class TestHtmlBridge:
    """Editor HTML to Markdown and back."""

    def test_html_to_markdown(self):
        assert html_to_markdown("<h1>Title</h1><p>Hello <b>world</b></p>") == "# Title\n\nHello **world**"

    def test_html_escapes_survive_export(self):
        assert html_to_markdown("<p>1. not a list &amp; *not em*</p>") == "1\\. not a list & \\*not em\\*"

    def test_markdown_to_html(self):
        assert markdown_to_html("# Title") == "<h1>Title</h1>"

    def test_markdown_to_html_escapes_markup(self):
        assert markdown_to_html("a <b> & c") == "<p>a &lt;b&gt; &amp; c</p>"

    def test_editor_round_trip(self):
        html = "<h2>Plan</h2>\n<ul><li>one</li><li><strong>two</strong></li></ul>"
        assert markdown_to_html(html_to_markdown(html)) == html


@pytest.mark.integration
class TestDocumentRoundTrip:
    """Full documents through every bridge."""

    def test_markdown_document_round_trip(self, sample_markdown):
        assert export_markdown(import_markdown(sample_markdown)) == sample_markdown

    def test_builder_tree_matches_parsed_document(self, sample_tree, sample_markdown):
        assert import_markdown(sample_markdown) == sample_tree

    def test_json_persistence(self, sample_tree):
        restored = json_to_tree(tree_to_json(sample_tree, indent=2))
        assert restored == sample_tree
        assert export_markdown(restored) == export_markdown(sample_tree)

    def test_package_exports(self):
        assert xeditor_md.__version__ == "1.0.0"
        for name in ("export_markdown", "import_markdown", "MarkdownRenderer", "MarkdownParser", "DocumentTree"):
            assert name in xeditor_md.__all__


@pytest.mark.integration
class TestStructureRoundTrip:
    """Trees whose Markdown form needs care survive export then import."""

    @pytest.mark.parametrize(
        "spec",
        [
            paragraph(strong("a"), strong("b")),
            paragraph(strong("a"), emphasis("b")),
            paragraph(emphasis("a"), emphasis("b")),
            paragraph(emphasis("a"), strong("b")),
            paragraph(strong(emphasis("x"), " y")),
        ],
    )
    def test_adjacent_formatting(self, spec):
        tree = build_tree(spec)
        assert import_markdown(export_markdown(tree)) == tree

    def test_link_containing_image(self):
        tree = build_tree(paragraph(link("http://x", image("i.png", "alt"))))
        assert export_markdown(tree) == "[![alt](i.png)](http://x)"
        assert import_markdown(export_markdown(tree)) == tree

    @pytest.mark.parametrize("href", ["http://x/a_(b)", "http://x/a)b", "http://x/a(b"])
    def test_link_destination_with_parentheses(self, href):
        tree = build_tree(paragraph(link(href, "w")))
        assert import_markdown(export_markdown(tree)) == tree

    def test_empty_list_item(self):
        tree = build_tree(unordered_list(list_item("a"), list_item(), list_item("b")))
        restored = import_markdown(export_markdown(tree))
        assert restored == tree
        assert len(restored.find_all(restored.root, "li")) == 3

    def test_table(self):
        tree = build_tree(table(table_row("H", header=True), table_row("v")))
        assert import_markdown(export_markdown(tree)) == tree

    def test_indented_code_with_leading_blank_line(self):
        markdown = export_markdown(build_tree(code_block("\nfoo")), {"codeBlockStyle": "indented"})
        assert markdown == "    \n    foo"
