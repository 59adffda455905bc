#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/xeditor_md/renderers/base.py
"""Base classes for document tree renderers.

This module defines the abstract base class that all tree renderers inherit
from, so that the Markdown serializer and the HTML bridge share one
interface for string output and for writing to files or streams.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Iterable, Union

from xeditor_md.exceptions import InvalidOptionsError
from xeditor_md.options.base import BaseRendererOptions
from xeditor_md.tree.nodes import DocumentTree, NodeId
from xeditor_md.utils.io_utils import write_content


class BaseRenderer(ABC):
    """Abstract base class for all tree renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    Examples
    --------
    Creating a custom renderer:

        >>> class PlainTextRenderer(BaseRenderer):
        ...     def render_to_string(self, tree, node_id=None):
        ...         return tree.text_content(node_id)
        ...
        ...     def render(self, tree, output):
        ...         self.write_text_output(self.render_to_string(tree), output)

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render_to_string(self, tree: DocumentTree, node_id: NodeId | None = None) -> str:
        """Render the tree, or the subtree at ``node_id``, to a string.

        Parameters
        ----------
        tree : DocumentTree
            Tree to render
        node_id : NodeId or None, default = None
            Subtree root; the tree root when omitted

        Returns
        -------
        str
            Rendered output

        """

    def render(self, tree: DocumentTree, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render the tree and write it to ``output``.

        Parameters
        ----------
        tree : DocumentTree
            Tree to render
        output : str, Path, IO[bytes], or IO[str]
            File path or file-like object

        """
        self.write_text_output(self.render_to_string(tree), output)

    @staticmethod
    def write_text_output(text: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Write text output to file or IO stream.

        Parameters
        ----------
        text : str
            Rendered text to write
        output : str, Path, IO[bytes], or IO[str]
            Output destination. Can be:
            - File path (str or Path)
            - File-like object in binary mode (IO[bytes])
            - File-like object in text mode (IO[str])

        Raises
        ------
        OSError
            If output cannot be written
        TypeError
            If output type is not supported

        Examples
        --------
        Write to StringIO:
            >>> from io import StringIO
            >>> buffer = StringIO()
            >>> BaseRenderer.write_text_output("# Hello", buffer)
            >>> print(buffer.getvalue())
            # Hello

        """
        write_content(text, output)

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )


class InlineContentMixin:
    """Mixin providing inline content rendering for text-based renderers.

    The implementing class must have:
    - A `_output` attribute (list[str]) for accumulating output
    - A `_render_node(node_id)` method that appends to `_output`

    """

    _output: list[str]

    def _render_node(self, node_id: NodeId) -> None:
        raise NotImplementedError

    def _render_inline_content(self, node_ids: Iterable[NodeId]) -> str:
        """Render a sequence of nodes to text.

        This method temporarily captures the output from rendering the nodes
        and returns it as a string, for productions that wrap or post-process
        the content of their children.

        Parameters
        ----------
        node_ids : iterable of NodeId
            Nodes to render

        Returns
        -------
        str
            Rendered content

        """
        saved_output = self._output
        self._output = []

        for node_id in node_ids:
            self._render_node(node_id)

        result = "".join(self._output)
        self._output = saved_output
        return result
