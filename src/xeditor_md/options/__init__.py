#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for xeditor-md converters.

Options are frozen dataclasses. Use ``create_updated`` to derive a modified
copy and ``from_mapping`` to build options from configuration files or the
host editor's camelCase settings.
"""

from __future__ import annotations

from xeditor_md.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from xeditor_md.options.html import HtmlParserOptions
from xeditor_md.options.markdown import ExportConfig, MarkdownExportOptions, MarkdownParserOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "ExportConfig",
    "HtmlParserOptions",
    "MarkdownExportOptions",
    "MarkdownParserOptions",
]
