#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Markdown export and import.

This module defines the export configuration consumed by the serializer
and the (empty) option set of the Markdown parser.
"""
# src/xeditor_md/options/markdown.py


from __future__ import annotations

from dataclasses import dataclass, field

from xeditor_md.constants import (
    BULLET_LIST_MARKERS,
    CODE_BLOCK_STYLES,
    DEFAULT_BULLET_LIST_MARKER,
    DEFAULT_CODE_BLOCK_STYLE,
    DEFAULT_HEADING_STYLE,
    DEFAULT_LINK_STYLE,
    HEADING_STYLES,
    LINK_STYLES,
    BulletListMarker,
    CodeBlockStyle,
    HeadingStyle,
    LinkStyle,
)
from xeditor_md.options.base import BaseParserOptions, BaseRendererOptions


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for Markdown-to-tree parsing.

    The parser has a fixed grammar and takes no settings. The class exists
    so the parser validates its options like every other converter.

    """


@dataclass(frozen=True)
class MarkdownExportOptions(BaseRendererOptions):
    """Configuration options for tree-to-Markdown export.

    Parameters
    ----------
    heading_style : {"atx", "setext"}, default "atx"
        Heading syntax. "atx" emits ``# Heading``. "setext" underlines
        level 1 and 2 headings with ``=`` and ``-``; deeper levels always
        use atx.
    bullet_list_marker : {"-", "*", "+"}, default "-"
        Marker for unordered list items.
    code_block_style : {"fenced", "indented"}, default "fenced"
        Code block syntax. Indented blocks drop the language.
    link_style : {"inline", "reference"}, default "inline"
        Link syntax:
        - "inline": ``[text](url)``
        - "reference": ``[text][text]``, without a definitions section

    Examples
    --------
    >>> MarkdownExportOptions(heading_style="setext").bullet_list_marker
    '-'
    >>> MarkdownExportOptions.from_mapping({"bulletListMarker": "*"}).bullet_list_marker
    '*'

    """

    heading_style: HeadingStyle = field(
        default=DEFAULT_HEADING_STYLE,
        metadata={
            "help": "Heading syntax: atx (# Heading) or setext (underlined)",
            "choices": list(HEADING_STYLES),
            "importance": "core",
        },
    )
    bullet_list_marker: BulletListMarker = field(
        default=DEFAULT_BULLET_LIST_MARKER,
        metadata={
            "help": "Marker for unordered list items",
            "choices": list(BULLET_LIST_MARKERS),
            "importance": "core",
        },
    )
    code_block_style: CodeBlockStyle = field(
        default=DEFAULT_CODE_BLOCK_STYLE,
        metadata={
            "help": "Code block syntax: fenced (```) or indented (4 spaces)",
            "choices": list(CODE_BLOCK_STYLES),
            "importance": "core",
        },
    )
    link_style: LinkStyle = field(
        default=DEFAULT_LINK_STYLE,
        metadata={
            "help": "Link style: inline [text](url) or reference [text][text]",
            "choices": list(LINK_STYLES),
            "importance": "core",
        },
    )

    def __post_init__(self) -> None:
        """Validate enumerated option values.

        Raises
        ------
        ValueError
            If any field holds a value outside its allowed choices.

        """
        if self.heading_style not in HEADING_STYLES:
            raise ValueError(f"Invalid heading_style: {self.heading_style!r}. Must be one of {HEADING_STYLES}")
        if self.bullet_list_marker not in BULLET_LIST_MARKERS:
            raise ValueError(
                f"Invalid bullet_list_marker: {self.bullet_list_marker!r}. Must be one of {BULLET_LIST_MARKERS}"
            )
        if self.code_block_style not in CODE_BLOCK_STYLES:
            raise ValueError(
                f"Invalid code_block_style: {self.code_block_style!r}. Must be one of {CODE_BLOCK_STYLES}"
            )
        if self.link_style not in LINK_STYLES:
            raise ValueError(f"Invalid link_style: {self.link_style!r}. Must be one of {LINK_STYLES}")

    @classmethod
    def field_aliases(cls) -> dict[str, str]:
        """Accept the editor plugin's camelCase names and kebab-case CLI names."""
        return {
            "headingStyle": "heading_style",
            "bulletListMarker": "bullet_list_marker",
            "codeBlockStyle": "code_block_style",
            "linkStyle": "link_style",
            "heading-style": "heading_style",
            "bullet-list-marker": "bullet_list_marker",
            "code-block-style": "code_block_style",
            "link-style": "link_style",
        }


ExportConfig = MarkdownExportOptions
