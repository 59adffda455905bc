"""Utility functions for cli output."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/xeditor_md/cli/output.py
import argparse
import sys
from typing import TextIO

from xeditor_md.exceptions import DependencyError


def check_rich_available() -> bool:
    """Check if Rich library is available.

    Returns
    -------
    bool
        True if Rich is available, False otherwise

    """
    try:
        import rich  # noqa: F401

        return True
    except ImportError:
        return False


def should_use_rich_output(args: argparse.Namespace, raise_on_missing: bool = False, stream: TextIO | None = None) -> bool:
    """Determine if Rich output should be used based on TTY and args.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command line arguments
    raise_on_missing : bool, default False
        Raise DependencyError if rich is not installed
    stream : optional, default None
        Uses sys.stdout unless otherwise specified.

    Returns
    -------
    bool
        True if Rich output should be used

    Notes
    -----
    Rich output is used when:
    - The --rich flag is set
    - AND no output file is given
    - AND stdout is a TTY
    - AND Rich library is available

    """
    if not getattr(args, "rich", False) or getattr(args, "out", None):
        return False

    if not check_rich_available():
        if raise_on_missing:
            raise DependencyError(
                converter_name="rich-output",
                missing_packages=[("rich", "")],
                message="Rich output requires the optional 'rich' dependency. Install with: pip install xeditor-md[rich]",
            )
        return False

    target = stream or sys.stdout
    isatty = getattr(target, "isatty", None)
    return bool(callable(isatty) and isatty())


def print_rich_markdown(markdown_content: str, stream: TextIO | None = None) -> None:
    """Print Markdown to the terminal with Rich formatting.

    Parameters
    ----------
    markdown_content : str
        Markdown text to display
    stream : optional, default None
        Uses sys.stdout unless otherwise specified.

    """
    from rich.console import Console
    from rich.markdown import Markdown

    console = Console(file=stream or sys.stdout)
    console.print(Markdown(markdown_content))
