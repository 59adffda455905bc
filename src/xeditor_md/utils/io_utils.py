#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/xeditor_md/utils/io_utils.py
"""I/O utilities for handling output destinations.

Renderers and the CLI write their text results through :func:`write_content`
so that paths, text streams and binary streams are handled in one place.

"""

from __future__ import annotations

import io
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast


def write_content(content: str, output: Union[str, Path, IO[bytes], IO[str], None]) -> Union[StringIO, None]:
    """Write text content to an output destination or return it as a stream.

    Parameters
    ----------
    content : str
        Text to write.
    output : str, Path, IO[bytes], IO[str], or None
        Output destination. Can be:
        - None: Returns content as a StringIO
        - str or Path: Writes UTF-8 text to the file at that path
        - IO[bytes]: Writes UTF-8 encoded content to a binary stream
        - IO[str]: Writes content to a text stream

    Returns
    -------
    StringIO or None
        A StringIO when ``output`` is None, otherwise None

    Raises
    ------
    TypeError
        If ``content`` is not a string or ``output`` is not a supported destination

    Examples
    --------
        >>> write_content("Hello", None).read()
        'Hello'
        >>> buffer = BytesIO()
        >>> write_content("data", buffer)
        >>> buffer.getvalue()
        b'data'

    """
    if not isinstance(content, str):
        raise TypeError(f"Content must be str, got {type(content)}")

    if output is None:
        return StringIO(content)

    if isinstance(output, (str, Path)):
        Path(output).write_text(content, encoding="utf-8")
        return None

    if hasattr(output, "write"):
        if isinstance(output, BytesIO):
            is_binary_mode = True
        elif isinstance(output, StringIO):
            is_binary_mode = False
        elif isinstance(output, io.TextIOBase):
            is_binary_mode = False
        elif isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
            is_binary_mode = True
        elif hasattr(output, "mode"):
            mode = getattr(output, "mode", "")
            is_binary_mode = isinstance(mode, str) and "b" in mode
        else:
            is_binary_mode = False

        if is_binary_mode:
            cast(IO[bytes], output).write(content.encode("utf-8"))
        else:
            cast(IO[str], output).write(content)
        return None

    raise TypeError(f"Unsupported output type: {type(output)}")


__all__ = ["write_content"]
