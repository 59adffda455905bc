#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the HTML bridge."""

from __future__ import annotations

from dataclasses import dataclass, field

from xeditor_md.constants import DEFAULT_HTML_PARSER, HTML_PARSER_BACKENDS, HtmlParserBackend
from xeditor_md.options.base import BaseParserOptions


@dataclass(frozen=True)
class HtmlParserOptions(BaseParserOptions):
    """Configuration options for editor-HTML-to-tree parsing.

    Parameters
    ----------
    html_parser : {"html.parser", "lxml", "html5lib"}, default "html.parser"
        BeautifulSoup parser backend. "lxml" and "html5lib" must be
        installed separately.
    keep_whitespace_text : bool, default False
        Keep whitespace-only text nodes between block elements. Editor HTML
        uses them for source formatting only.

    """

    html_parser: HtmlParserBackend = field(
        default=DEFAULT_HTML_PARSER,
        metadata={
            "help": "BeautifulSoup parser backend",
            "choices": list(HTML_PARSER_BACKENDS),
            "importance": "advanced",
        },
    )
    keep_whitespace_text: bool = field(
        default=False,
        metadata={"help": "Keep whitespace-only text between block elements", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        if self.html_parser not in HTML_PARSER_BACKENDS:
            raise ValueError(f"Invalid html_parser: {self.html_parser!r}. Must be one of {HTML_PARSER_BACKENDS}")
