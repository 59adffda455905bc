#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/xeditor_md/parsers/markdown.py
"""Markdown to document tree parser.

This module converts Markdown into a :class:`~xeditor_md.tree.DocumentTree`
using the mistune parser. mistune produces a token stream with the
strikethrough and table plugins enabled; the parser walks that stream and
appends the matching elements directly to the tree.

Parsing never fails. Constructs that do not match the grammar, such as
unmatched emphasis markers or unterminated fences, are kept as literal
text. Link reference definitions and raw HTML are not interpreted.

"""

from __future__ import annotations

import logging
import re
from typing import Any, Callable

from xeditor_md.constants import LANGUAGE_CLASS_PREFIX, MARKDOWN_PLUGINS
from xeditor_md.options.markdown import MarkdownParserOptions
from xeditor_md.parsers.base import BaseParser, ParserInput
from xeditor_md.tree.nodes import DocumentTree, NodeId
from xeditor_md.utils.security import sanitize_language_identifier

logger = logging.getLogger(__name__)

Token = dict[str, Any]

# Block rules that would resolve reference definitions or pass raw HTML through
_DISABLED_BLOCK_RULES = ("ref_link", "raw_html")

_FENCE_OPEN = re.compile(r"^ {0,3}(`{3,}|~{3,})(.*)$")
_FENCE_CLOSE = re.compile(r"^ {0,3}(`{3,}|~{3,})[ \t]*$")
_LINE_BREAK_SPACING = re.compile(r"[ \t]*\n[ \t]*")


def _escape_unterminated_fences(markdown: str) -> tuple[str, int]:
    """Backslash-escape code fence openers that are never closed.

    An escaped opener is read as paragraph text, so an unclosed fence does
    not swallow the rest of the document.

    Parameters
    ----------
    markdown : str
        Markdown source

    Returns
    -------
    tuple[str, int]
        Source with unclosed openers escaped, and the number escaped

    """
    lines = markdown.split("\n")

    # Longest closing run of each fence character at or after each line
    longest_close = {"`": [0] * (len(lines) + 1), "~": [0] * (len(lines) + 1)}
    for index in range(len(lines) - 1, -1, -1):
        for runs in longest_close.values():
            runs[index] = runs[index + 1]
        match = _FENCE_CLOSE.match(lines[index])
        if match:
            runs = longest_close[match.group(1)[0]]
            runs[index] = max(runs[index], len(match.group(1)))

    escaped = 0
    index = 0
    while index < len(lines):
        match = _FENCE_OPEN.match(lines[index])
        if match is None:
            index += 1
            continue

        marker, info = match.group(1), match.group(2)
        char = marker[0]
        if char == "`" and "`" in info:
            index += 1
            continue

        if longest_close[char][index + 1] < len(marker):
            line = lines[index]
            lines[index] = line[: match.start(1)] + "".join("\\" + c for c in marker) + line[match.end(1) :]
            escaped += 1
            index += 1
            continue

        index += 1
        while index < len(lines):
            close = _FENCE_CLOSE.match(lines[index])
            index += 1
            if close and close.group(1)[0] == char and len(close.group(1)) >= len(marker):
                break

    return "\n".join(lines), escaped


def _flatten_text(tokens: list[Token]) -> str:
    """Return the plain text of inline tokens, ignoring markup."""
    parts: list[str] = []
    for token in tokens:
        if "raw" in token:
            parts.append(token["raw"])
        elif token.get("type") == "softbreak":
            parts.append("\n")
        children = token.get("children")
        if isinstance(children, list):
            parts.append(_flatten_text(children))
    return "".join(parts)


class MarkdownParser(BaseParser):
    """Convert Markdown text to a document tree.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration

    Examples
    --------
        >>> tree = MarkdownParser().parse("# Title")
        >>> tree.tag(tree.children(tree.root)[0])
        'h1'

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the parser with options."""
        BaseParser._validate_options_type(options, MarkdownParserOptions, "markdown")
        options = options or MarkdownParserOptions()
        super().__init__(options)
        self.options: MarkdownParserOptions = options
        self._tree: DocumentTree = DocumentTree()

        self._block_handlers: dict[str, Callable[[NodeId, Token], None]] = {
            "heading": self._process_heading,
            "paragraph": self._process_paragraph,
            "block_text": self._process_paragraph,
            "block_html": self._process_html_block,
            "block_code": self._process_code_block,
            "block_quote": self._process_block_quote,
            "table": self._process_table,
            "thematic_break": self._process_thematic_break,
        }
        self._inline_handlers: dict[str, Callable[[NodeId, Token], None]] = {
            "strong": self._handle_strong_token,
            "emphasis": self._handle_emphasis_token,
            "strikethrough": self._handle_strikethrough_token,
            "codespan": self._handle_codespan_token,
            "link": self._handle_link_token,
            "image": self._handle_image_token,
            "linebreak": self._handle_linebreak_token,
        }

    def parse(self, input_data: ParserInput) -> DocumentTree:
        """Parse Markdown input into a document tree.

        Parameters
        ----------
        input_data : str, bytes, Path, IO[str], or IO[bytes]
            Markdown text, UTF-8 bytes, a file path, or a readable stream

        Returns
        -------
        DocumentTree
            Tree rooted at the virtual ``document`` element. Blank input
            yields a tree holding only the root.

        """
        text = self._read_text(input_data)
        self._tree = DocumentTree()
        if not text.strip():
            return self._tree

        import mistune

        markdown = mistune.create_markdown(plugins=list(MARKDOWN_PLUGINS), renderer=None)
        for rules in (markdown.block.rules, markdown.block.block_quote_rules, markdown.block.list_rules):
            for rule in _DISABLED_BLOCK_RULES:
                if rule in rules:
                    rules.remove(rule)

        text, escaped = _escape_unterminated_fences(text.replace("\r\n", "\n").replace("\r", "\n"))
        if escaped:
            logger.debug(f"Kept {escaped} unterminated code fence(s) as paragraph text")

        tokens, _state = markdown.parse(text)
        if isinstance(tokens, list):
            self._process_tokens(self._tree.root, tokens)

        logger.debug(f"Parsed Markdown into {len(self._tree)} nodes")
        return self._tree

    # ------------------------------------------------------------------
    # Block tokens
    # ------------------------------------------------------------------

    def _process_tokens(self, parent: NodeId, tokens: list[Token]) -> None:
        """Append the elements for a sequence of block tokens under ``parent``.

        Directly adjacent lists of the same kind are merged, so a change of
        bullet character does not start a new list. A blank line or any
        other block between them keeps them apart.

        Parameters
        ----------
        parent : NodeId
            Element receiving the blocks
        tokens : list of dict
            Mistune block token dictionaries

        """
        open_list: tuple[NodeId, bool] | None = None
        for token in tokens:
            token_type = token.get("type", "")
            if token_type == "list":
                open_list = self._process_list(parent, token, open_list)
                continue

            open_list = None
            if token_type == "blank_line":
                continue

            handler = self._block_handlers.get(token_type)
            if handler is None:
                logger.debug(f"Skipping unsupported Markdown token: {token_type}")
                continue
            handler(parent, token)

    def _process_heading(self, parent: NodeId, token: Token) -> None:
        level = token.get("attrs", {}).get("level", 1)
        if not isinstance(level, int) or not 1 <= level <= 6:
            level = 1
        heading_id = self._tree.append_element(parent, f"h{level}")
        self._process_inline_tokens(heading_id, token.get("children", []))

    def _process_paragraph(self, parent: NodeId, token: Token) -> None:
        paragraph_id = self._tree.append_element(parent, "p")
        self._process_inline_tokens(paragraph_id, token.get("children", []))

    def _process_html_block(self, parent: NodeId, token: Token) -> None:
        """Keep an HTML block as the literal text of a paragraph."""
        raw = token.get("raw", "").strip()
        if raw:
            paragraph_id = self._tree.append_element(parent, "p")
            self._tree.append_text(paragraph_id, raw)

    def _process_code_block(self, parent: NodeId, token: Token) -> None:
        """Append ``pre > code`` for a fenced or indented code block.

        The first word of the info string, sanitized, becomes a
        ``language-*`` class on the ``code`` element. The newline before the
        closing fence is not part of the code.

        """
        code = token.get("raw", "")
        if code.endswith("\n"):
            code = code[:-1]

        info = (token.get("attrs") or {}).get("info") or ""
        words = info.split(maxsplit=1)
        language = sanitize_language_identifier(words[0]) if words else ""

        pre_id = self._tree.append_element(parent, "pre")
        attributes = {"class": f"{LANGUAGE_CLASS_PREFIX}{language}"} if language else None
        code_id = self._tree.append_element(pre_id, "code", attributes)
        if code:
            self._tree.append_text(code_id, code)

    def _process_block_quote(self, parent: NodeId, token: Token) -> None:
        quote_id = self._tree.append_element(parent, "blockquote")
        self._process_tokens(quote_id, token.get("children", []))

    def _process_list(
        self, parent: NodeId, token: Token, open_list: tuple[NodeId, bool] | None
    ) -> tuple[NodeId, bool]:
        """Append the items of a list token, continuing ``open_list`` when it has the same kind.

        Ordered start values are not kept.

        Returns
        -------
        tuple[NodeId, bool]
            The list element that received the items and whether it is ordered

        """
        ordered = bool(token.get("attrs", {}).get("ordered"))
        if open_list is not None and open_list[1] == ordered:
            list_id = open_list[0]
        else:
            list_id = self._tree.append_element(parent, "ol" if ordered else "ul")

        for item in token.get("children", []):
            if item.get("type") == "list_item":
                self._process_list_item(list_id, item)
        return list_id, ordered

    def _process_list_item(self, list_id: NodeId, token: Token) -> None:
        """Append an ``li`` holding the item's text inline.

        The paragraphs of a loose item are joined by a newline. Nested lists
        and other blocks follow the text as child elements.

        """
        item_id = self._tree.append_element(list_id, "li")
        inline_tokens: list[Token] = []
        open_list: tuple[NodeId, bool] | None = None

        for child in token.get("children", []):
            child_type = child.get("type", "")
            if child_type in ("block_text", "paragraph"):
                if inline_tokens:
                    inline_tokens.append({"type": "softbreak"})
                inline_tokens.extend(child.get("children", []))
                open_list = None
                continue
            if child_type == "blank_line":
                continue

            self._process_inline_tokens(item_id, inline_tokens)
            inline_tokens = []
            if child_type == "list":
                open_list = self._process_list(item_id, child, open_list)
            else:
                open_list = None
                self._process_tokens(item_id, [child])

        self._process_inline_tokens(item_id, inline_tokens)

    def _process_table(self, parent: NodeId, token: Token) -> None:
        """Append ``table > thead > tr > th`` and ``tbody > tr > td``.

        The ``tbody`` is omitted when the table has no body rows.

        """
        tree = self._tree
        table_id = tree.append_element(parent, "table")
        for section in token.get("children", []):
            section_type = section.get("type")
            if section_type == "table_head":
                head_id = tree.append_element(table_id, "thead")
                self._append_table_row(head_id, section.get("children", []), "th")
            elif section_type == "table_body":
                rows = [row for row in section.get("children", []) if row.get("type") == "table_row"]
                if not rows:
                    continue
                body_id = tree.append_element(table_id, "tbody")
                for row in rows:
                    self._append_table_row(body_id, row.get("children", []), "td")

    def _append_table_row(self, section_id: NodeId, cells: list[Token], cell_tag: str) -> None:
        row_id = self._tree.append_element(section_id, "tr")
        for cell in cells:
            cell_id = self._tree.append_element(row_id, cell_tag)
            self._process_inline_tokens(cell_id, cell.get("children", []))

    def _process_thematic_break(self, parent: NodeId, token: Token) -> None:
        self._tree.append_element(parent, "hr")

    # ------------------------------------------------------------------
    # Inline tokens
    # ------------------------------------------------------------------

    def _process_inline_tokens(self, parent: NodeId, tokens: list[Token]) -> None:
        """Append the nodes for a sequence of inline tokens under ``parent``.

        Adjacent text, soft breaks and raw inline HTML are merged into one
        text node, with the spacing around each newline removed.

        """
        buffer: list[str] = []

        def flush() -> None:
            if buffer:
                text = _LINE_BREAK_SPACING.sub("\n", "".join(buffer))
                if text:
                    self._tree.append_text(parent, text)
                buffer.clear()

        for token in tokens:
            token_type = token.get("type", "")
            if token_type in ("text", "inline_html"):
                buffer.append(token.get("raw", ""))
            elif token_type == "softbreak":
                buffer.append("\n")
            else:
                handler = self._inline_handlers.get(token_type)
                if handler is None:
                    logger.debug(f"Skipping unsupported inline Markdown token: {token_type}")
                    continue
                flush()
                handler(parent, token)
        flush()

    def _append_wrapped(self, parent: NodeId, tag: str, token: Token) -> None:
        element_id = self._tree.append_element(parent, tag)
        self._process_inline_tokens(element_id, token.get("children", []))

    def _handle_strong_token(self, parent: NodeId, token: Token) -> None:
        self._append_wrapped(parent, "strong", token)

    def _handle_emphasis_token(self, parent: NodeId, token: Token) -> None:
        self._append_wrapped(parent, "em", token)

    def _handle_strikethrough_token(self, parent: NodeId, token: Token) -> None:
        self._append_wrapped(parent, "del", token)

    def _handle_codespan_token(self, parent: NodeId, token: Token) -> None:
        code_id = self._tree.append_element(parent, "code")
        code = token.get("raw", "")
        if code:
            self._tree.append_text(code_id, code)

    def _handle_link_token(self, parent: NodeId, token: Token) -> None:
        href = token.get("attrs", {}).get("url", "")
        link_id = self._tree.append_element(parent, "a", {"href": href})
        self._process_inline_tokens(link_id, token.get("children", []))

    def _handle_image_token(self, parent: NodeId, token: Token) -> None:
        src = token.get("attrs", {}).get("url", "")
        alt = _flatten_text(token.get("children", []))
        self._tree.append_element(parent, "img", {"src": src, "alt": alt})

    def _handle_linebreak_token(self, parent: NodeId, token: Token) -> None:
        self._tree.append_element(parent, "br")


def parse(markdown: ParserInput) -> DocumentTree:
    r"""Parse Markdown into a document tree.

    This is a convenience function that creates a parser and parses the
    markdown in one step.

    Examples
    --------
    >>> tree = parse("# Hello\n\nWorld")
    >>> len(tree.children(tree.root))
    2

    """
    return MarkdownParser().parse(markdown)


__all__ = ["MarkdownParser", "parse"]
