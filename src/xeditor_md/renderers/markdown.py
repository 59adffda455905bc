#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/xeditor_md/renderers/markdown.py
"""Markdown rendering from a document tree.

This module provides the MarkdownRenderer class which serializes a
:class:`~xeditor_md.tree.DocumentTree` to Markdown text. Each tag has one
production; the output shape is controlled by
:class:`~xeditor_md.options.markdown.MarkdownExportOptions`.

The renderer walks the tree recursively, dispatching on the lowercased tag
name. Tags without a production are transparent: their children are
rendered and the tag itself is dropped. Rendering never fails for a well
formed tree.

"""

from __future__ import annotations

import logging
import re
from typing import Callable

from xeditor_md.constants import (
    CODE_FENCE_CHAR,
    CODE_FENCE_MIN,
    EMPHASIS_TAGS,
    HARD_LINE_BREAK,
    HEADING_TAGS,
    INDENTED_CODE_PREFIX,
    LANGUAGE_CLASS_PREFIX,
    LIST_INDENT,
    LIST_TAGS,
    SETEXT_UNDERLINE_MIN,
    STRIKETHROUGH_TAGS,
    STRONG_TAGS,
    TABLE_CELL_TAGS,
    TABLE_SEPARATOR_CELL,
)
from xeditor_md.options.markdown import MarkdownExportOptions
from xeditor_md.renderers.base import BaseRenderer, InlineContentMixin
from xeditor_md.tree.nodes import DocumentTree, NodeId
from xeditor_md.utils.escape import escape_inline_code, escape_markdown, longest_backtick_run
from xeditor_md.utils.security import sanitize_language_identifier

logger = logging.getLogger(__name__)

_NEWLINE_RUN = re.compile(r"\s*\n\s*")
_LEADING_BLANK_LINES = re.compile(r"\A\n+")
_LANGUAGE_CLASS = re.compile(re.escape(LANGUAGE_CLASS_PREFIX) + r"(\S+)")
_BRACKETED_DESTINATION_CHARS = re.compile(r"[\s()<>]")
_DESTINATION_ENCODINGS = {"\\": "%5C", "<": "%3C", ">": "%3E", "\n": "%0A", "\r": "%0D"}


class MarkdownRenderer(InlineContentMixin, BaseRenderer):
    """Render document trees to Markdown text.

    Parameters
    ----------
    options : MarkdownExportOptions or None, default = None
        Export configuration. Defaults to atx headings, ``-`` bullets,
        fenced code blocks and inline links.

    Examples
    --------
    Basic usage:

        >>> from xeditor_md.tree import build_tree, paragraph, strong
        >>> renderer = MarkdownRenderer()
        >>> renderer.render_to_string(build_tree(paragraph("Hello ", strong("world"))))
        'Hello **world**'

    """

    def __init__(self, options: MarkdownExportOptions | None = None):
        """Initialize the Markdown renderer with options."""
        BaseRenderer._validate_options_type(options, MarkdownExportOptions, "markdown")
        options = options or MarkdownExportOptions()
        BaseRenderer.__init__(self, options)
        self.options: MarkdownExportOptions = options
        self._tree: DocumentTree = DocumentTree()
        self._output: list[str] = []
        self._list_level: int = 0
        self._passthrough_tags: set[str] = set()

        self._handlers: dict[str, Callable[[NodeId], None]] = {
            "p": self._render_paragraph,
            "u": self._render_underline,
            "code": self._render_inline_code,
            "pre": self._render_code_block,
            "blockquote": self._render_blockquote,
            "a": self._render_link,
            "img": self._render_image,
            "table": self._render_table,
            "hr": self._render_thematic_break,
            "br": self._render_line_break,
        }
        for tag in HEADING_TAGS:
            self._handlers[tag] = self._render_heading
        for tag in STRONG_TAGS:
            self._handlers[tag] = self._render_strong
        for tag in EMPHASIS_TAGS:
            self._handlers[tag] = self._render_emphasis
        for tag in STRIKETHROUGH_TAGS:
            self._handlers[tag] = self._render_strikethrough
        for tag in LIST_TAGS:
            self._handlers[tag] = self._render_list

    def render_to_string(self, tree: DocumentTree, node_id: NodeId | None = None) -> str:
        """Render a tree, or the subtree at ``node_id``, to Markdown.

        Parameters
        ----------
        tree : DocumentTree
            Tree to render
        node_id : NodeId or None, default = None
            Subtree root; the tree root when omitted

        Returns
        -------
        str
            Markdown text without leading blank lines or trailing whitespace

        """
        self._tree = tree
        self._output = []
        self._list_level = 0
        self._passthrough_tags = set()

        self._render_node(tree.root if node_id is None else node_id)

        if self._passthrough_tags:
            logger.debug(f"Rendered children only for tags: {', '.join(sorted(self._passthrough_tags))}")

        return self._cleanup_output("".join(self._output))

    @staticmethod
    def _cleanup_output(text: str) -> str:
        """Remove leading empty lines and trailing whitespace."""
        text = _LEADING_BLANK_LINES.sub("", text)
        return text.rstrip()

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _render_node(self, node_id: NodeId) -> None:
        tree = self._tree
        if tree.is_text(node_id):
            self._output.append(escape_markdown(tree.content(node_id) or ""))
            return

        tag = (tree.tag(node_id) or "").lower()
        handler = self._handlers.get(tag)
        if handler is None:
            self._passthrough_tags.add(tag)
            self._render_children(node_id)
            return
        handler(node_id)

    def _render_children(self, node_id: NodeId) -> None:
        for child in self._tree.children(node_id):
            self._render_node(child)

    def _render_single_line(self, node_id: NodeId) -> str:
        """Render the children of ``node_id`` with newline runs collapsed to one space."""
        content = self._render_inline_content(self._tree.children(node_id))
        return _NEWLINE_RUN.sub(" ", content).strip()

    # ------------------------------------------------------------------
    # Block productions
    # ------------------------------------------------------------------

    def _render_heading(self, node_id: NodeId) -> None:
        level = int((self._tree.tag(node_id) or "h1").lower()[1])
        content = self._render_single_line(node_id)

        if self.options.heading_style == "setext" and level <= 2 and content:
            underline_char = "=" if level == 1 else "-"
            underline = underline_char * max(SETEXT_UNDERLINE_MIN, len(content))
            self._output.append(f"{content}\n{underline}\n\n")
        else:
            self._output.append(f"{'#' * level} {content}\n\n")

    def _render_paragraph(self, node_id: NodeId) -> None:
        self._render_children(node_id)
        self._output.append("\n\n")

    def _render_code_block(self, node_id: NodeId) -> None:
        """Render a ``pre`` element as a fenced or indented code block.

        The code is the verbatim text of the nested ``code`` element, or of
        the ``pre`` itself when there is none. The language comes from a
        ``language-*`` class on the ``code`` element, then on the ``pre``.

        """
        tree = self._tree
        code_id = tree.find_first(node_id, "code")
        code = tree.text_content(code_id if code_id is not None else node_id)

        if self.options.code_block_style == "indented":
            lines = code.rstrip("\n").split("\n")
            self._output.append("\n".join(INDENTED_CODE_PREFIX + line for line in lines))
            self._output.append("\n\n")
            return

        language = ""
        if code_id is not None:
            language = self._extract_language(code_id)
        if not language:
            language = self._extract_language(node_id)

        fence = CODE_FENCE_CHAR * max(CODE_FENCE_MIN, longest_backtick_run(code) + 1)
        self._output.append(f"{fence}{language}\n")
        self._output.append(code)
        if not code.endswith("\n"):
            self._output.append("\n")
        self._output.append(f"{fence}\n\n")

    def _extract_language(self, node_id: NodeId) -> str:
        class_attr = self._tree.attribute(node_id, "class") or ""
        match = _LANGUAGE_CLASS.search(class_attr)
        if not match:
            return ""
        return sanitize_language_identifier(match.group(1))

    def _render_blockquote(self, node_id: NodeId) -> None:
        content = self._render_inline_content(self._tree.children(node_id))
        content = content.rstrip().lstrip("\n")
        lines = content.split("\n")
        self._output.append("\n".join(f"> {line}" for line in lines))
        self._output.append("\n\n")

    def _render_list(self, node_id: NodeId) -> None:
        """Render a ``ul`` or ``ol`` element at the current nesting level.

        Only ``li`` children are rendered. Item text is kept on a single
        line; lists nested directly in an item follow on their own lines,
        indented one more level.

        """
        tree = self._tree
        ordered = (tree.tag(node_id) or "").lower() == "ol"
        items = [child for child in tree.children(node_id) if (tree.tag(child) or "").lower() == "li"]
        if not items:
            return

        indent = LIST_INDENT * self._list_level
        lines: list[str] = []
        for position, item_id in enumerate(items, start=1):
            marker = f"{position}." if ordered else self.options.bullet_list_marker
            inline_ids = []
            nested_ids = []
            for child in tree.children(item_id):
                if (tree.tag(child) or "").lower() in LIST_TAGS:
                    nested_ids.append(child)
                else:
                    inline_ids.append(child)

            text = _NEWLINE_RUN.sub(" ", self._render_inline_content(inline_ids)).strip()
            lines.append(f"{indent}{marker} {text}")

            for nested_id in nested_ids:
                self._list_level += 1
                nested = self._render_inline_content([nested_id]).rstrip("\n")
                self._list_level -= 1
                if nested:
                    lines.append(nested)

        self._output.append("\n".join(lines))
        self._output.append("\n\n")

    def _render_table(self, node_id: NodeId) -> None:
        """Render a ``table`` element as a pipe table.

        Every ``tr`` descendant becomes a row in document order; the first
        row is the header. Columns are not padded to a common width.

        """
        tree = self._tree
        rows: list[list[str]] = []
        for row_id in tree.find_all(node_id, "tr"):
            cells = [
                self._render_single_line(cell_id).replace("|", "\\|")
                for cell_id in tree.children(row_id)
                if (tree.tag(cell_id) or "").lower() in TABLE_CELL_TAGS
            ]
            if cells:
                rows.append(cells)

        if not rows:
            return

        header = rows[0]
        lines = [self._format_table_row(header)]
        lines.append(self._format_table_row([TABLE_SEPARATOR_CELL] * len(header)))
        lines.extend(self._format_table_row(row) for row in rows[1:])
        self._output.append("\n".join(lines))
        self._output.append("\n\n")

    @staticmethod
    def _format_table_row(cells: list[str]) -> str:
        return "| " + " | ".join(cells) + " |"

    def _render_thematic_break(self, node_id: NodeId) -> None:
        self._output.append("---\n\n")

    # ------------------------------------------------------------------
    # Inline productions
    # ------------------------------------------------------------------

    def _render_wrapped(
        self, node_id: NodeId, opener: str, closer: str, alternate: tuple[str, str] | None = None
    ) -> None:
        """Wrap the rendered children in ``opener`` and ``closer``.

        The ``alternate`` delimiters are used when the output so far ends
        with the opener's character or the content starts with it, so that
        ``**a**`` followed by ``**b**`` is written ``**a**__b__`` instead of
        one run of four asterisks.

        """
        content = self._render_inline_content(self._tree.children(node_id))
        if not content:
            return
        if alternate is not None:
            previous = self._output[-1] if self._output else ""
            if previous.endswith(opener[0]) or content.startswith(opener[0]):
                opener, closer = alternate
        self._output.append(f"{opener}{content}{closer}")

    def _render_strong(self, node_id: NodeId) -> None:
        self._render_wrapped(node_id, "**", "**", ("__", "__"))

    def _render_emphasis(self, node_id: NodeId) -> None:
        self._render_wrapped(node_id, "*", "*", ("_", "_"))

    def _render_strikethrough(self, node_id: NodeId) -> None:
        self._render_wrapped(node_id, "~~", "~~")

    def _render_underline(self, node_id: NodeId) -> None:
        # No Markdown syntax for underline; passed through as raw HTML
        self._render_wrapped(node_id, "<u>", "</u>")

    def _render_inline_code(self, node_id: NodeId) -> None:
        code = self._tree.text_content(node_id)
        if not code:
            return
        code, delimiter = escape_inline_code(code)
        self._output.append(f"{delimiter}{code}{delimiter}")

    def _render_link(self, node_id: NodeId) -> None:
        text = self._render_inline_content(self._tree.children(node_id))
        href = self._tree.attribute(node_id, "href") or ""

        if self.options.link_style == "reference":
            # Definitions are not emitted
            self._output.append(f"[{text}][{text}]")
        else:
            self._output.append(f"[{text}]({_format_destination(href)})")

    def _render_image(self, node_id: NodeId) -> None:
        alt = self._tree.attribute(node_id, "alt") or ""
        src = self._tree.attribute(node_id, "src") or ""
        alt = alt.replace("\\", "\\\\").replace("[", "\\[").replace("]", "\\]")
        self._output.append(f"![{alt}]({_format_destination(src)})")

    def _render_line_break(self, node_id: NodeId) -> None:
        self._output.append(HARD_LINE_BREAK)


def _format_destination(url: str) -> str:
    """Return ``url`` as a link destination.

    A URL containing whitespace, parentheses or angle brackets is written in
    the ``<...>`` form. Characters that form cannot hold (backslashes, angle
    brackets and line breaks) are percent-encoded.

    Examples
    --------
        >>> _format_destination("http://x/a_(b)")
        '<http://x/a_(b)>'

    """
    if not _BRACKETED_DESTINATION_CHARS.search(url):
        return url
    for char, encoded in _DESTINATION_ENCODINGS.items():
        url = url.replace(char, encoded)
    return f"<{url}>"


def serialize(tree: DocumentTree, config: MarkdownExportOptions | None = None) -> str:
    """Serialize a document tree to Markdown.

    Parameters
    ----------
    tree : DocumentTree
        Tree to serialize
    config : MarkdownExportOptions or None, default = None
        Export configuration; defaults when omitted

    Returns
    -------
    str
        Markdown text

    """
    return MarkdownRenderer(config).render_to_string(tree)


__all__ = ["MarkdownRenderer", "serialize"]
