#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/xeditor_md/renderers/__init__.py
"""Renderers converting document trees to Markdown and HTML."""

from __future__ import annotations

from xeditor_md.renderers.base import BaseRenderer, InlineContentMixin
from xeditor_md.renderers.html import HtmlRenderer, tree_to_html
from xeditor_md.renderers.markdown import MarkdownRenderer, serialize

__all__ = [
    "BaseRenderer",
    "HtmlRenderer",
    "InlineContentMixin",
    "MarkdownRenderer",
    "serialize",
    "tree_to_html",
]
