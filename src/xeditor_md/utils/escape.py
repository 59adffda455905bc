#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/xeditor_md/utils/escape.py
"""Text escaping utilities for Markdown and HTML output.

The export path escapes text leaves with :func:`escape_markdown` so that
literal punctuation is not re-read as Markdown syntax. The HTML bridge
uses :func:`escape_markup` and :func:`escape_markup_attribute`.

"""

from __future__ import annotations

import html
import re

from xeditor_md.constants import MARKDOWN_SPECIAL_CHARS

_MARKDOWN_SPECIAL_PATTERN = re.compile("([" + re.escape(MARKDOWN_SPECIAL_CHARS) + "])")


def escape_markdown(text: str) -> str:
    r"""Backslash-escape characters with Markdown meaning.

    Every occurrence of ``\ ` * _ { } [ ] ( ) # + - . !`` is prefixed with a
    backslash. The backslash itself is escaped in the same pass, so escaping
    is applied exactly once per character.

    Parameters
    ----------
    text : str
        Plain text from a document tree text node

    Returns
    -------
    str
        Text safe to embed in Markdown output

    Examples
    --------
        >>> escape_markdown("1. item")
        '1\\. item'
        >>> escape_markdown("a*b")
        'a\\*b'

    """
    if not text:
        return text
    return _MARKDOWN_SPECIAL_PATTERN.sub(r"\\\1", text)


def escape_markup(text: str) -> str:
    """Escape ``&``, ``<`` and ``>`` for HTML text content.

    Examples
    --------
        >>> escape_markup("<b> & </b>")
        '&lt;b&gt; &amp; &lt;/b&gt;'

    """
    if not text:
        return text
    return html.escape(text, quote=False)


def escape_markup_attribute(text: str) -> str:
    """Escape text for a double-quoted HTML attribute value.

    Parameters
    ----------
    text : str
        Attribute value

    Returns
    -------
    str
        Value with markup characters and quotes escaped

    """
    if not text:
        return text
    return html.escape(text, quote=True)


def longest_backtick_run(text: str) -> int:
    """Return the length of the longest run of consecutive backticks in ``text``."""
    longest = 0
    current = 0
    for char in text:
        if char == "`":
            current += 1
            longest = max(longest, current)
        else:
            current = 0
    return longest


def escape_inline_code(code: str) -> tuple[str, str]:
    """Determine the delimiter and padding for an inline code span.

    The delimiter is one backtick longer than the longest backtick run in
    the code. Code that starts or ends with a backtick is padded with a
    space on both sides.

    Parameters
    ----------
    code : str
        Verbatim code content

    Returns
    -------
    tuple[str, str]
        (code_to_emit, delimiter)

    Examples
    --------
        >>> escape_inline_code("x = 1")
        ('x = 1', '`')
        >>> escape_inline_code("a ` b")
        ('a ` b', '``')
        >>> escape_inline_code("`tick")
        (' `tick ', '``')

    """
    delimiter = "`" * (longest_backtick_run(code) + 1)
    if code.startswith("`") or code.endswith("`"):
        code = " " + code + " "
    return code, delimiter


__all__ = [
    "escape_inline_code",
    "escape_markdown",
    "escape_markup",
    "escape_markup_attribute",
    "longest_backtick_run",
]
