#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/xeditor_md/parsers/base.py
"""Base classes for document parsers.

This module defines the abstract base class that the Markdown parser and
the HTML bridge inherit from. The BaseParser provides a consistent
interface for converting source text into a
:class:`~xeditor_md.tree.DocumentTree`.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from xeditor_md.exceptions import InvalidOptionsError
from xeditor_md.options.base import BaseParserOptions
from xeditor_md.tree.nodes import DocumentTree

logger = logging.getLogger(__name__)

ParserInput = Union[str, bytes, Path, IO[str], IO[bytes]]


class BaseParser(ABC):
    """Abstract base class for all document parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    Notes
    -----
    Unlike file-oriented converters, a ``str`` input is always treated as
    source text, never as a path. Pass a :class:`pathlib.Path` to read a
    file.

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def _read_text(input_data: ParserInput) -> str:
        """Return the source text for any supported input type.

        Parameters
        ----------
        input_data : str, bytes, Path, IO[str], or IO[bytes]
            Source text, UTF-8 bytes, a file path, or a readable stream

        Returns
        -------
        str
            Decoded source text

        Raises
        ------
        TypeError
            If the input type is not supported

        """
        if isinstance(input_data, str):
            return input_data
        if isinstance(input_data, bytes):
            return input_data.decode("utf-8", errors="replace")
        if isinstance(input_data, Path):
            return input_data.read_text(encoding="utf-8")
        if hasattr(input_data, "read"):
            content = input_data.read()
            if isinstance(content, bytes):
                return content.decode("utf-8", errors="replace")
            return content
        raise TypeError(f"Unsupported input type: {type(input_data).__name__}")

    @abstractmethod
    def parse(self, input_data: ParserInput) -> DocumentTree:
        """Parse the input into a document tree.

        Parameters
        ----------
        input_data : str, bytes, Path, IO[str], or IO[bytes]
            The input to parse

        Returns
        -------
        DocumentTree
            Tree rooted at the virtual ``document`` element

        """
        raise NotImplementedError
