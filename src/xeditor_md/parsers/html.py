#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/xeditor_md/parsers/html.py
"""Editor HTML to document tree parser.

The host editor exchanges its content as an HTML string. This module turns
that string into a :class:`~xeditor_md.tree.DocumentTree` with
BeautifulSoup so it can be serialized to Markdown. Element names are
lowercased and attribute order is preserved.

Comments, doctypes and processing instructions are dropped, as are
``script``, ``style``, ``template`` and ``noscript`` elements with their
content. Whitespace-only text between block elements is dropped unless
:attr:`HtmlParserOptions.keep_whitespace_text` is set.

"""

from __future__ import annotations

import logging
from typing import Any

from xeditor_md.constants import BLOCK_CONTAINER_TAGS, DISCARDED_HTML_TAGS
from xeditor_md.exceptions import DependencyError, ParsingError
from xeditor_md.options.html import HtmlParserOptions
from xeditor_md.parsers.base import BaseParser, ParserInput
from xeditor_md.tree.nodes import DocumentTree, NodeId

logger = logging.getLogger(__name__)


class HtmlParser(BaseParser):
    """Convert editor HTML to a document tree.

    Parameters
    ----------
    options : HtmlParserOptions or None, default = None
        Parser configuration

    Examples
    --------
        >>> tree = HtmlParser().parse("<h1>Title</h1><p>Hello <b>world</b></p>")
        >>> [tree.tag(n) for n in tree.children(tree.root)]
        ['h1', 'p']

    """

    def __init__(self, options: HtmlParserOptions | None = None):
        """Initialize the parser with options."""
        BaseParser._validate_options_type(options, HtmlParserOptions, "html")
        options = options or HtmlParserOptions()
        super().__init__(options)
        self.options: HtmlParserOptions = options
        self._dropped_whitespace = 0

    def parse(self, input_data: ParserInput) -> DocumentTree:
        """Parse HTML input into a document tree.

        The content of ``<body>`` is used when present, otherwise the whole
        fragment.

        Parameters
        ----------
        input_data : str, bytes, Path, IO[str], or IO[bytes]
            HTML text, UTF-8 bytes, a file path, or a readable stream

        Returns
        -------
        DocumentTree
            Tree rooted at the virtual ``document`` element

        Raises
        ------
        DependencyError
            If the selected BeautifulSoup parser backend is not installed
        ParsingError
            If BeautifulSoup cannot parse the input

        """
        html_content = self._read_text(input_data)

        from bs4 import BeautifulSoup, FeatureNotFound

        try:
            soup = BeautifulSoup(html_content, self.options.html_parser)
        except FeatureNotFound as e:
            raise DependencyError(
                "html",
                missing_packages=[(self.options.html_parser, "")],
                message=f"Selected HTML parser backend is not available: {self.options.html_parser}",
                original_import_error=ImportError(str(e)),
            ) from e
        except (ValueError, TypeError, AssertionError) as e:
            raise ParsingError(f"Failed to parse HTML: {e}", parsing_stage="html", original_error=e) from e

        root = soup.body if soup.body is not None else soup
        tree = DocumentTree()
        self._dropped_whitespace = 0
        self._convert_children(tree, tree.root, root)

        if self._dropped_whitespace:
            logger.debug(f"Dropped {self._dropped_whitespace} whitespace-only text nodes between blocks")
        return tree

    def _convert_children(self, tree: DocumentTree, parent: NodeId, node: Any) -> None:
        from bs4.element import Comment, Declaration, Doctype, NavigableString, ProcessingInstruction, Tag

        parent_tag = (tree.tag(parent) or "").lower()
        for child in node.children:
            if isinstance(child, (Comment, Declaration, Doctype, ProcessingInstruction)):
                continue

            if isinstance(child, NavigableString):
                text = str(child)
                if not text.strip() and parent_tag in BLOCK_CONTAINER_TAGS and not self.options.keep_whitespace_text:
                    self._dropped_whitespace += 1
                    continue
                tree.append_text(parent, text)
                continue

            if isinstance(child, Tag):
                name = child.name.lower()
                if name in DISCARDED_HTML_TAGS:
                    continue
                element_id = tree.append_element(parent, name, self._convert_attributes(child.attrs))
                self._convert_children(tree, element_id, child)

    @staticmethod
    def _convert_attributes(attrs: dict[str, Any]) -> dict[str, str]:
        # Multi-valued attributes such as class arrive as lists
        return {
            name: " ".join(value) if isinstance(value, (list, tuple)) else str(value) for name, value in attrs.items()
        }


def html_to_tree(html: ParserInput, options: HtmlParserOptions | None = None) -> DocumentTree:
    """Parse editor HTML into a document tree with a fresh :class:`HtmlParser`."""
    return HtmlParser(options).parse(html)


__all__ = ["HtmlParser", "html_to_tree"]
