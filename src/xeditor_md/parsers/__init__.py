#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/xeditor_md/parsers/__init__.py
"""Parsers producing document trees from Markdown and editor HTML."""

from __future__ import annotations

from xeditor_md.parsers.base import BaseParser
from xeditor_md.parsers.html import HtmlParser, html_to_tree
from xeditor_md.parsers.markdown import MarkdownParser, parse

__all__ = [
    "BaseParser",
    "HtmlParser",
    "MarkdownParser",
    "html_to_tree",
    "parse",
]
