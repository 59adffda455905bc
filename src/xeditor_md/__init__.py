"""xeditor-md - Markdown export and import for a structured rich-text editor.

xeditor-md converts between the editor's document tree and Markdown. The
export path serializes a tree with one production per tag, controlled by
an export configuration; the import path walks the token stream mistune
produces for the Markdown and builds the tree directly.

Key Features
------------
- Tree to Markdown serialization with atx or setext headings, configurable
  bullets, fenced or indented code blocks and inline or reference links
- Markdown to tree parsing (mistune) that never fails and degrades to
  paragraphs
- Bridge to and from the editor's HTML content (BeautifulSoup)
- JSON form of document trees
- Command-line interface with configuration file discovery

Examples
--------
Export a tree:

    >>> from xeditor_md import export_markdown
    >>> from xeditor_md.tree import build_tree, heading, paragraph
    >>> export_markdown(build_tree(heading(1, "Title"), paragraph("Body")))
    '# Title\\n\\nBody'

Import Markdown:

    >>> from xeditor_md import import_markdown
    >>> tree = import_markdown("**bold *and italic* text**")
    >>> tree.text_content()
    'bold and italic text'

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from __future__ import annotations

from xeditor_md.api import (
    export_markdown,
    html_to_markdown,
    import_markdown,
    json_to_tree,
    markdown_to_html,
    tree_to_json,
)
from xeditor_md.exceptions import (
    DependencyError,
    FileError,
    InvalidOptionsError,
    OutputWriteError,
    ParsingError,
    TreeStructureError,
    ValidationError,
    XEditorMdError,
)
from xeditor_md.options import ExportConfig, HtmlParserOptions, MarkdownExportOptions, MarkdownParserOptions
from xeditor_md.parsers import HtmlParser, MarkdownParser
from xeditor_md.renderers import HtmlRenderer, MarkdownRenderer
from xeditor_md.tree import DocumentTree, ElementSpec, NodeId, build_tree, element

__version__ = "1.0.0"

__all__ = [
    "DependencyError",
    "DocumentTree",
    "ElementSpec",
    "ExportConfig",
    "FileError",
    "HtmlParser",
    "HtmlParserOptions",
    "HtmlRenderer",
    "InvalidOptionsError",
    "MarkdownExportOptions",
    "MarkdownParser",
    "MarkdownParserOptions",
    "MarkdownRenderer",
    "NodeId",
    "OutputWriteError",
    "ParsingError",
    "TreeStructureError",
    "ValidationError",
    "XEditorMdError",
    "__version__",
    "build_tree",
    "element",
    "export_markdown",
    "html_to_markdown",
    "import_markdown",
    "json_to_tree",
    "markdown_to_html",
    "tree_to_json",
]
