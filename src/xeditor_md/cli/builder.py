#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Dynamic CLI argument builder for xeditor-md.

This module builds the command-line parser. Export option flags are
generated from :class:`~xeditor_md.options.markdown.MarkdownExportOptions`
field metadata so the CLI never drifts from the options dataclass.
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import MISSING, fields, is_dataclass
from typing import Any, Dict, Optional, Type

from xeditor_md import __version__
from xeditor_md.exceptions import DependencyError, FileError, ParsingError, ValidationError
from xeditor_md.options.markdown import MarkdownExportOptions

logger = logging.getLogger(__name__)

EXPORT_INPUT_FORMATS = ("html", "json")
IMPORT_OUTPUT_FORMATS = ("html", "json")


class DynamicCLIBuilder:
    """Builds CLI arguments dynamically from options dataclasses.

    Each dataclass field becomes a ``--kebab-case`` flag whose help text and
    choices come from the field's ``metadata``. Generated flags default to
    ``None`` so that only values given on the command line override a
    configuration file.
    """

    def __init__(self) -> None:
        """Initialize the CLI builder."""
        self.dest_to_cli_flag: Dict[str, str] = {}

    @staticmethod
    def _has_default(field: Any) -> bool:
        return field.default is not MISSING or field.default_factory is not MISSING

    @staticmethod
    def _cli_name(field_name: str) -> str:
        return "--" + field_name.replace("_", "-")

    def add_options_class_arguments(
        self, parser: argparse.ArgumentParser, options_class: Type[Any], title: str
    ) -> argparse._ArgumentGroup:
        """Add one flag per field of ``options_class`` in a new argument group.

        Parameters
        ----------
        parser : argparse.ArgumentParser
            Parser to extend
        options_class : type
            Options dataclass to introspect
        title : str
            Title of the argument group in ``--help``

        Returns
        -------
        argparse._ArgumentGroup
            The created group

        Raises
        ------
        TypeError
            If ``options_class`` is not a dataclass

        """
        if not is_dataclass(options_class):
            raise TypeError(f"{options_class!r} is not a dataclass")

        group = parser.add_argument_group(title)
        for field in fields(options_class):
            if field.metadata.get("exclude_from_cli", False):
                continue

            cli_name = self._cli_name(field.name)
            kwargs: Dict[str, Any] = {
                "dest": field.name,
                "default": None,
                "help": field.metadata.get("help", f"Set {field.name}"),
            }
            choices = field.metadata.get("choices")
            if choices:
                kwargs["choices"] = list(choices)
            if self._has_default(field) and field.default is not MISSING:
                kwargs["help"] += f" (default: {field.default})"

            group.add_argument(cli_name, **kwargs)
            self.dest_to_cli_flag[field.name] = cli_name
        return group

    @staticmethod
    def map_args_to_options(parsed_args: argparse.Namespace, options_class: Type[Any]) -> Dict[str, Any]:
        """Collect the option values that were given on the command line.

        Returns
        -------
        dict
            Field name to value, for every generated flag that is not None

        """
        overrides: Dict[str, Any] = {}
        for field in fields(options_class):
            value = getattr(parsed_args, field.name, None)
            if value is not None:
                overrides[field.name] = value
        return overrides


def _add_global_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--version", "-V", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output with detailed logging (equivalent to --log-level DEBUG)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Set logging level for debugging (default: WARNING). Overrides --verbose if both are specified.",
    )
    parser.add_argument("--log-file", help="Also write log messages to this file")
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Enable trace logging with timestamps and logger names (implies DEBUG level)",
    )


def _add_export_command(subparsers: Any, builder: DynamicCLIBuilder) -> None:
    export_parser = subparsers.add_parser(
        "export",
        help="Serialize editor content to Markdown",
        description="Convert editor HTML (or a JSON document tree) to Markdown.",
    )
    export_parser.add_argument("input", help="Input file path (use '-' for stdin)")
    export_parser.add_argument("--out", "-o", help="Output file path (default: print to stdout)")
    export_parser.add_argument(
        "--input-format",
        choices=EXPORT_INPUT_FORMATS,
        default="html",
        help="Format of the input document (default: html)",
    )
    export_parser.add_argument(
        "--config",
        help="Path to configuration file (TOML, YAML or JSON). "
        "If not specified, searches for .xeditor-md.* files in the current directory and its parents, "
        "then in the home directory.",
    )
    export_parser.add_argument(
        "--no-config",
        action="store_true",
        dest="no_config",
        help="Disable loading of configuration files. Ignores auto-discovered configs, "
        "XEDITOR_MD_CONFIG environment variable, and any --config flag.",
    )
    export_parser.add_argument(
        "--rich",
        action="store_true",
        help="Render the Markdown with rich terminal formatting when writing to a terminal",
    )
    builder.add_options_class_arguments(export_parser, MarkdownExportOptions, "Markdown export options")


def _add_import_command(subparsers: Any) -> None:
    import_parser = subparsers.add_parser(
        "import",
        help="Parse Markdown into editor content",
        description="Convert Markdown to editor HTML (or a JSON document tree).",
    )
    import_parser.add_argument("input", help="Input file path (use '-' for stdin)")
    import_parser.add_argument("--out", "-o", help="Output file path (default: print to stdout)")
    import_parser.add_argument(
        "--output-format",
        choices=IMPORT_OUTPUT_FORMATS,
        default="html",
        help="Format of the output document (default: html)",
    )
    import_parser.add_argument(
        "--indent",
        type=int,
        default=None,
        metavar="N",
        help="Indentation for JSON output (default: compact)",
    )


def create_parser(builder: Optional[DynamicCLIBuilder] = None) -> argparse.ArgumentParser:
    """Create the ``xeditor-md`` argument parser.

    Returns
    -------
    argparse.ArgumentParser
        Parser with ``export`` and ``import`` subcommands

    """
    builder = builder or DynamicCLIBuilder()
    parser = argparse.ArgumentParser(
        prog="xeditor-md",
        description="Convert rich-text editor content to and from Markdown",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Export editor HTML to Markdown
  xeditor-md export page.html -o page.md

  # Use setext headings and reference links
  xeditor-md export page.html --heading-style setext --link-style reference

  # Import Markdown as editor HTML
  xeditor-md import notes.md

  # Import Markdown as a JSON document tree
  xeditor-md import notes.md --output-format json --indent 2
        """,
    )
    _add_global_arguments(parser)

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True
    _add_export_command(subparsers, builder)
    _add_import_command(subparsers)
    return parser


EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, (DependencyError, ImportError)):
        return EXIT_DEPENDENCY_ERROR

    if isinstance(exception, (ValidationError, argparse.ArgumentTypeError)):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR

    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR

    return EXIT_ERROR
