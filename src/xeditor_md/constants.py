#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for xeditor-md.

This module centralizes the literal types, defaults and tag vocabularies
shared by the serializer, the parser and the HTML bridge.

Constants are organized by category:
1. Type Definitions - Literal types for export options
2. Export Defaults - Default Markdown output settings
3. Markdown Syntax - Escape sets, markers and fence sizes
4. Tag Vocabulary - Tag names recognised by the serializer and bridge
5. Configuration Files - CLI config discovery names
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

HeadingStyle = Literal["atx", "setext"]
BulletListMarker = Literal["-", "*", "+"]
CodeBlockStyle = Literal["fenced", "indented"]
LinkStyle = Literal["inline", "reference"]
HtmlParserBackend = Literal["html.parser", "lxml", "html5lib"]
TreeFormat = Literal["html", "json"]

HEADING_STYLES: tuple[str, ...] = ("atx", "setext")
BULLET_LIST_MARKERS: tuple[str, ...] = ("-", "*", "+")
CODE_BLOCK_STYLES: tuple[str, ...] = ("fenced", "indented")
LINK_STYLES: tuple[str, ...] = ("inline", "reference")
HTML_PARSER_BACKENDS: tuple[str, ...] = ("html.parser", "lxml", "html5lib")

# =============================================================================
# Export Defaults
# =============================================================================

DEFAULT_HEADING_STYLE: HeadingStyle = "atx"
DEFAULT_BULLET_LIST_MARKER: BulletListMarker = "-"
DEFAULT_CODE_BLOCK_STYLE: CodeBlockStyle = "fenced"
DEFAULT_LINK_STYLE: LinkStyle = "inline"
DEFAULT_HTML_PARSER: HtmlParserBackend = "html.parser"

# =============================================================================
# Markdown Syntax
# =============================================================================

# Characters backslash-escaped in exported text
MARKDOWN_SPECIAL_CHARS = "\\`*_{}[]()#+-.!"

LIST_INDENT = "  "
INDENTED_CODE_PREFIX = "    "
CODE_FENCE_CHAR = "`"
CODE_FENCE_MIN = 3
SETEXT_UNDERLINE_MIN = 3
HARD_LINE_BREAK = "  \n"
TABLE_SEPARATOR_CELL = "---"
LANGUAGE_CLASS_PREFIX = "language-"

# mistune plugins enabled on import; tables are also recognised in quotes and lists
MARKDOWN_PLUGINS: tuple[str, ...] = (
    "strikethrough",
    "table",
    "mistune.plugins.table.table_in_quote",
    "mistune.plugins.table.table_in_list",
)

# =============================================================================
# Tag Vocabulary
# =============================================================================

DOCUMENT_TAG = "document"

HEADING_TAGS = frozenset({"h1", "h2", "h3", "h4", "h5", "h6"})
STRONG_TAGS = frozenset({"strong", "b"})
EMPHASIS_TAGS = frozenset({"em", "i"})
STRIKETHROUGH_TAGS = frozenset({"s", "strike", "del"})
LIST_TAGS = frozenset({"ul", "ol"})
TABLE_CELL_TAGS = frozenset({"th", "td"})

# Elements whose whitespace-only text children are layout noise in editor HTML
BLOCK_CONTAINER_TAGS = frozenset(
    {
        DOCUMENT_TAG,
        "body",
        "html",
        "div",
        "section",
        "article",
        "blockquote",
        "ul",
        "ol",
        "table",
        "thead",
        "tbody",
        "tfoot",
        "tr",
    }
)

# Elements rendered without a closing tag by the HTML bridge
VOID_TAGS = frozenset(
    {"area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta", "source", "track", "wbr"}
)

# Elements the HTML bridge drops together with their content
DISCARDED_HTML_TAGS = frozenset({"script", "style", "template", "noscript"})

# =============================================================================
# Configuration Files
# =============================================================================

CONFIG_FILENAMES = (".xeditor-md.toml", ".xeditor-md.yaml", ".xeditor-md.yml", ".xeditor-md.json")
PYPROJECT_TOOL_SECTION = "xeditor-md"
