"""The major exported API functions for Markdown export and import."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/xeditor_md/api.py
import logging
from typing import Any, Mapping, Optional, Union

from xeditor_md.options.html import HtmlParserOptions
from xeditor_md.options.markdown import MarkdownExportOptions
from xeditor_md.parsers.base import ParserInput
from xeditor_md.parsers.html import HtmlParser
from xeditor_md.parsers.markdown import MarkdownParser
from xeditor_md.renderers.html import HtmlRenderer
from xeditor_md.renderers.markdown import MarkdownRenderer
from xeditor_md.tree.builder import ElementSpec, build_tree
from xeditor_md.tree.nodes import DocumentTree
from xeditor_md.tree.serialization import json_to_tree as _json_to_tree
from xeditor_md.tree.serialization import tree_to_json as _tree_to_json

logger = logging.getLogger(__name__)

ExportConfigInput = Union[MarkdownExportOptions, Mapping[str, Any], None]


def _resolve_export_options(config: ExportConfigInput) -> Optional[MarkdownExportOptions]:
    """Accept export options as an options instance or a settings mapping.

    Mappings may use snake_case field names or the editor plugin's camelCase
    names.

    """
    if config is None or isinstance(config, MarkdownExportOptions):
        return config
    return MarkdownExportOptions.from_mapping(config)


def export_markdown(tree: Union[DocumentTree, ElementSpec], config: ExportConfigInput = None) -> str:
    """Serialize a document tree to Markdown.

    Parameters
    ----------
    tree : DocumentTree or ElementSpec
        Tree to serialize. A builder spec is materialised under a virtual
        ``document`` root first.
    config : MarkdownExportOptions, mapping, or None, default None
        Export configuration; defaults when omitted

    Returns
    -------
    str
        Markdown text

    Examples
    --------
    >>> from xeditor_md.tree import paragraph, strong
    >>> export_markdown(paragraph("Hello ", strong("world")))
    'Hello **world**'

    """
    if isinstance(tree, ElementSpec):
        tree = build_tree(tree)
    return MarkdownRenderer(_resolve_export_options(config)).render_to_string(tree)


def import_markdown(markdown: ParserInput) -> DocumentTree:
    """Parse Markdown into a document tree.

    Parameters
    ----------
    markdown : str, bytes, Path, IO[str], or IO[bytes]
        Markdown text, or a path or stream to read it from

    Returns
    -------
    DocumentTree
        Tree rooted at the virtual ``document`` element

    Examples
    --------
    >>> tree = import_markdown("- a\\n- b")
    >>> [tree.tag(n) for n in tree.children(tree.root)]
    ['ul']

    """
    return MarkdownParser().parse(markdown)


def html_to_markdown(
    html: ParserInput,
    config: ExportConfigInput = None,
    html_options: HtmlParserOptions | None = None,
) -> str:
    """Convert editor HTML content to Markdown.

    This is the "Export as Markdown" path of the editor: the editor's HTML
    content is parsed into a tree and serialized with ``config``.

    Parameters
    ----------
    html : str, bytes, Path, IO[str], or IO[bytes]
        Editor HTML content
    config : MarkdownExportOptions, mapping, or None, default None
        Export configuration
    html_options : HtmlParserOptions or None, default None
        HTML parser configuration

    Returns
    -------
    str
        Markdown text

    """
    tree = HtmlParser(html_options).parse(html)
    return export_markdown(tree, config)


def markdown_to_html(markdown: ParserInput) -> str:
    """Convert Markdown to HTML for loading into the editor.

    This is the "Import from Markdown" path of the editor. Blank input
    yields an empty string.

    Parameters
    ----------
    markdown : str, bytes, Path, IO[str], or IO[bytes]
        Markdown text

    Returns
    -------
    str
        HTML content

    Examples
    --------
    >>> markdown_to_html("# Title")
    '<h1>Title</h1>'

    """
    tree = import_markdown(markdown)
    if not tree.children(tree.root):
        logger.debug("Markdown input is blank; nothing to import")
        return ""
    return HtmlRenderer().render_to_string(tree)


def tree_to_json(tree: DocumentTree, indent: int | None = None) -> str:
    """Serialize a document tree to JSON."""
    return _tree_to_json(tree, indent=indent)


def json_to_tree(text: str) -> DocumentTree:
    """Deserialize a document tree from JSON produced by :func:`tree_to_json`."""
    return _json_to_tree(text)


__all__ = [
    "export_markdown",
    "html_to_markdown",
    "import_markdown",
    "json_to_tree",
    "markdown_to_html",
    "tree_to_json",
]
