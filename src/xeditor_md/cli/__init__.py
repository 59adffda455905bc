"""Command-line interface for the xeditor-md Markdown bridge.

This module provides the ``xeditor-md`` tool, which runs the editor's
"Export as Markdown" and "Import from Markdown" paths outside the editor.

Configuration
-------------
Export settings are read from ``.xeditor-md.toml``, ``.xeditor-md.yaml``,
``.xeditor-md.yml`` or ``.xeditor-md.json`` (searched in the working
directory, its parents and the home directory), from a
``[tool.xeditor-md]`` table in ``pyproject.toml``, or from the file named
by the ``XEDITOR_MD_CONFIG`` environment variable. Command-line flags
always override file settings.

Examples
--------
Export editor HTML::

    $ xeditor-md export page.html --out page.md

Use setext headings and ``*`` bullets::

    $ xeditor-md export page.html --heading-style setext --bullet-list-marker "*"

Export a JSON document tree from stdin::

    $ cat tree.json | xeditor-md export - --input-format json

Import Markdown as editor HTML::

    $ xeditor-md import notes.md

"""

import argparse
import logging
import os
import sys
from pathlib import Path

from xeditor_md.api import markdown_to_html
from xeditor_md.cli.builder import (
    EXIT_ERROR,
    EXIT_SUCCESS,
    DynamicCLIBuilder,
    create_parser,
    get_exit_code_for_exception,
)
from xeditor_md.cli.config import CONFIG_ENV_VAR, get_export_section, load_config_with_priority
from xeditor_md.cli.output import print_rich_markdown, should_use_rich_output
from xeditor_md.exceptions import FileError, OutputWriteError, ParsingError, ValidationError, XEditorMdError
from xeditor_md.logging_utils import configure_logging
from xeditor_md.options.markdown import MarkdownExportOptions
from xeditor_md.parsers.html import HtmlParser
from xeditor_md.parsers.markdown import MarkdownParser
from xeditor_md.renderers.markdown import MarkdownRenderer
from xeditor_md.tree.serialization import json_to_tree, tree_to_json
from xeditor_md.utils.io_utils import write_content

logger = logging.getLogger(__name__)


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Parsed command-line arguments

    """
    # --trace takes highest precedence, then --verbose, then --log-level
    if parsed_args.trace:
        log_level = logging.DEBUG
    elif parsed_args.verbose and parsed_args.log_level == "WARNING":
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, parsed_args.log_level.upper())

    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def _read_input(source: str) -> str:
    """Read UTF-8 text from a file path, or from stdin when ``source`` is ``-``."""
    if source == "-":
        logger.debug("Reading input from stdin")
        return sys.stdin.read()

    path = Path(source)
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ParsingError(f"Input is not valid UTF-8: {source}", parsing_stage="decode", original_error=e) from e
    except OSError as e:
        raise FileError(f"Cannot read input file: {source}", file_path=source, original_error=e) from e


def _write_output(content: str, out: str | None) -> None:
    if not out:
        print(content)
        return

    try:
        write_content(content + "\n", Path(out))
    except OSError as e:
        raise OutputWriteError(out, original_error=e) from e
    logger.info(f"Wrote {out}")


def _build_export_options(parsed_args: argparse.Namespace) -> MarkdownExportOptions:
    """Merge configuration file settings with command-line overrides.

    Raises
    ------
    argparse.ArgumentTypeError
        If a configuration file cannot be loaded
    ValidationError
        If a configured value is not valid

    """
    if parsed_args.no_config:
        section = {}
    else:
        config = load_config_with_priority(parsed_args.config, os.environ.get(CONFIG_ENV_VAR))
        section = get_export_section(config)

    overrides = DynamicCLIBuilder.map_args_to_options(parsed_args, MarkdownExportOptions)
    try:
        options = MarkdownExportOptions.from_mapping(section)
        return options.create_updated(**overrides)
    except ValueError as e:
        raise ValidationError(f"Invalid export configuration: {e}", original_error=e) from e


def _run_export(parsed_args: argparse.Namespace) -> int:
    options = _build_export_options(parsed_args)
    text = _read_input(parsed_args.input)

    if parsed_args.input_format == "json":
        tree = json_to_tree(text)
    else:
        tree = HtmlParser().parse(text)

    markdown = MarkdownRenderer(options).render_to_string(tree)

    if should_use_rich_output(parsed_args, raise_on_missing=True):
        print_rich_markdown(markdown)
    else:
        _write_output(markdown, parsed_args.out)
    return EXIT_SUCCESS


def _run_import(parsed_args: argparse.Namespace) -> int:
    text = _read_input(parsed_args.input)

    if parsed_args.output_format == "json":
        result = tree_to_json(MarkdownParser().parse(text), indent=parsed_args.indent)
    else:
        result = markdown_to_html(text)

    _write_output(result, parsed_args.out)
    return EXIT_SUCCESS


def main(args: list[str] | None = None) -> int:
    """Execute the CLI and return the process exit code."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    _setup_logging_level(parsed_args)

    commands = {"export": _run_export, "import": _run_import}
    try:
        return commands[parsed_args.command](parsed_args)
    except argparse.ArgumentTypeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)
    except XEditorMdError as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)
    except Exception as e:
        logger.exception("Unexpected error")
        print(f"Unexpected error: {e}", file=sys.stderr)
        return EXIT_ERROR


__all__ = ["main"]
