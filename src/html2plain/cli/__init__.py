#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Command-line interface for the html2plain renderer.

Reads HTML from a file or standard input and writes the plain text
rendering to standard output or a file.

Configuration
-------------
Options may also come from a configuration file given with ``--config``,
named by the ``HTML2PLAIN_CONFIG`` environment variable, or discovered in
the working directory (``.html2plain.toml``, ``.html2plain.yaml``,
``.html2plain.json`` or a ``[tool.html2plain]`` table in
``pyproject.toml``). Command-line flags always override file values.

Examples
--------
Render a file::

    $ html2plain newsletter.html

Render from a pipe with ASCII tables and a narrower line::

    $ curl -s https://example.com | html2plain --pretty-tables --width 60

Write to a file with no link targets::

    $ html2plain page.html --text-only --omit-links --out page.txt

"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from html2plain import __version__
from html2plain.api import to_text
from html2plain.cli.config import (
    TABLE_OPTIONS_KEY,
    build_render_options,
    discover_config_file,
    load_config_file,
    merge_configs,
)
from html2plain.constants import DEFAULT_HTML_PARSER, SUPPORTED_HTML_PARSERS
from html2plain.exceptions import (
    DependencyError,
    OutputWriteError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from html2plain.logging_utils import configure_logging
from html2plain.options.tables import TableAlignment
from html2plain.utils.io_utils import write_content

logger = logging.getLogger(__name__)

__all__ = ["main", "create_parser", "get_exit_code_for_exception"]

CONFIG_ENV_VAR = "HTML2PLAIN_CONFIG"

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7

# Flag destination -> RenderOptions field
_RENDER_FLAGS = {
    "pretty_tables": "pretty_tables",
    "omit_links": "omit_links",
    "text_only": "text_only",
    "width": "line_width",
    "html_parser": "html_parser",
}

# Flag destination -> PrettyTablesOptions field
_TABLE_FLAGS = {
    "table_auto_format_header": "auto_format_header",
    "table_auto_wrap_text": "auto_wrap_text",
    "table_reflow_during_auto_wrap": "reflow_during_auto_wrap",
    "table_col_width": "col_width",
    "table_column_separator": "column_separator",
    "table_row_separator": "row_separator",
    "table_center_separator": "center_separator",
    "table_header_alignment": "header_alignment",
    "table_footer_alignment": "footer_alignment",
    "table_alignment": "alignment",
    "table_column_alignment": "column_alignment",
    "table_newline": "newline",
    "table_header_line": "header_line",
    "table_row_line": "row_line",
    "table_borders": "borders",
    "table_border_left": "border_left",
    "table_border_right": "border_right",
    "table_border_top": "border_top",
    "table_border_bottom": "border_bottom",
    "table_auto_merge_cells": "auto_merge_cells",
}


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

    # OutputWriteError is a RenderingError, so check it first
    if isinstance(exception, (OutputWriteError, OSError)):
        return EXIT_FILE_ERROR

    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR

    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR

    return EXIT_ERROR


def _alignment_list(value: str) -> list[str]:
    """Parse a comma-separated list of column alignments."""
    choices = {a.value for a in TableAlignment}
    items = [item.strip().lower() for item in value.split(",") if item.strip()]
    for item in items:
        if item not in choices:
            raise argparse.ArgumentTypeError(
                f"invalid alignment {item!r} (choose from {', '.join(sorted(choices))})"
            )
    return items


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ``html2plain`` command.

    Boolean flags default to None so that an absent flag leaves any value
    from a configuration file untouched.
    """
    parser = argparse.ArgumentParser(
        prog="html2plain",
        description="Render HTML as readable, word-wrapped plain text.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("input", nargs="?", default="-", help="HTML file to render, or '-' for stdin (default)")
    parser.add_argument("-o", "--out", help="Write the text to this file instead of stdout")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    render_group = parser.add_argument_group("rendering options")
    render_group.add_argument(
        "--pretty-tables", action="store_true", default=None, help="Draw tables as ASCII box tables"
    )
    render_group.add_argument(
        "--omit-links",
        action="store_true",
        default=None,
        help="Drop link targets (only takes effect together with --text-only)",
    )
    render_group.add_argument(
        "--text-only", action="store_true", default=None, help="Suppress heading dividers, bold and list markers"
    )
    render_group.add_argument("--width", type=int, metavar="N", help="Maximum line width (default: 78)")
    render_group.add_argument(
        "--html-parser",
        choices=SUPPORTED_HTML_PARSERS,
        help=f"BeautifulSoup tree builder (default: {DEFAULT_HTML_PARSER})",
    )

    table_group = parser.add_argument_group("table options (with --pretty-tables)")
    table_group.add_argument(
        "--table-no-auto-format-header",
        dest="table_auto_format_header",
        action="store_false",
        default=None,
        help="Keep header and footer labels as written",
    )
    table_group.add_argument(
        "--table-no-wrap",
        dest="table_auto_wrap_text",
        action="store_false",
        default=None,
        help="Never wrap cell text",
    )
    table_group.add_argument(
        "--table-no-reflow",
        dest="table_reflow_during_auto_wrap",
        action="store_false",
        default=None,
        help="Wrap each line of a cell separately instead of joining them first",
    )
    table_group.add_argument("--table-col-width", type=int, metavar="N", help="Column width for wrapping (default: 30)")
    table_group.add_argument("--table-column-separator", metavar="CHAR", help="Column separator (default: '|')")
    table_group.add_argument("--table-row-separator", metavar="CHAR", help="Row separator (default: '-')")
    table_group.add_argument("--table-center-separator", metavar="CHAR", help="Rule crossing (default: '+')")
    alignments = [a.value for a in TableAlignment]
    table_group.add_argument("--table-header-alignment", choices=alignments, help="Header label alignment")
    table_group.add_argument("--table-footer-alignment", choices=alignments, help="Footer label alignment")
    table_group.add_argument("--table-alignment", choices=alignments, help="Body cell alignment")
    table_group.add_argument(
        "--table-column-alignment",
        type=_alignment_list,
        metavar="LIST",
        help="Comma-separated per-column body alignment, e.g. 'left,right'",
    )
    table_group.add_argument(
        "--table-crlf",
        dest="table_newline",
        action="store_const",
        const="\r\n",
        help="End table lines with CRLF instead of LF",
    )
    table_group.add_argument(
        "--table-no-header-line",
        dest="table_header_line",
        action="store_false",
        default=None,
        help="Do not draw a rule under the header",
    )
    table_group.add_argument(
        "--table-row-line", action="store_true", default=None, help="Draw a rule between body rows"
    )
    table_group.add_argument(
        "--table-no-borders",
        dest="table_borders",
        action="store_false",
        default=None,
        help="Omit the outer table frame",
    )
    for side in ("left", "right", "top", "bottom"):
        table_group.add_argument(
            f"--table-no-border-{side}",
            dest=f"table_border_{side}",
            action="store_false",
            default=None,
            help=f"Omit the {side} side of the table frame",
        )
    table_group.add_argument(
        "--table-merge-cells",
        dest="table_auto_merge_cells",
        action="store_true",
        default=None,
        help="Blank body cells repeating the value above them",
    )

    config_group = parser.add_argument_group("configuration and logging")
    config_group.add_argument("--config", help=f"Configuration file (also read from ${CONFIG_ENV_VAR})")
    config_group.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    config_group.add_argument("--log-file", help="Also write log messages to this file")
    config_group.add_argument(
        "--trace", action="store_true", help="Debug logging with timestamps and logger names"
    )

    return parser


def _cli_overrides(parsed_args: argparse.Namespace) -> Dict[str, Any]:
    """Collect the option values actually given on the command line."""
    overrides: Dict[str, Any] = {}
    for dest, field_name in _RENDER_FLAGS.items():
        value = getattr(parsed_args, dest)
        if value is not None:
            overrides[field_name] = value

    table_overrides: Dict[str, Any] = {}
    for dest, field_name in _TABLE_FLAGS.items():
        value = getattr(parsed_args, dest)
        if value is not None:
            table_overrides[field_name] = value
    if table_overrides:
        overrides[TABLE_OPTIONS_KEY] = table_overrides

    return overrides


def _load_config(parsed_args: argparse.Namespace) -> Dict[str, Any]:
    """Load the explicit, environment-named or discovered configuration file."""
    config_path: Optional[str | Path] = parsed_args.config or os.environ.get(CONFIG_ENV_VAR)
    if not config_path:
        config_path = discover_config_file()
    if not config_path:
        return {}
    logger.debug("Loading configuration from %s", config_path)
    return load_config_file(config_path)


def _read_input(source: str) -> bytes:
    """Read raw HTML bytes from a file path or standard input."""
    if source == "-":
        return sys.stdin.buffer.read()
    return Path(source).read_bytes()


def main(args: Optional[list[str]] = None) -> int:
    """Run the command-line tool.

    Parameters
    ----------
    args : list of str, optional
        Command-line arguments; ``sys.argv[1:]`` when omitted

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    log_level = logging.DEBUG if parsed_args.trace else parsed_args.log_level
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)

    try:
        config = merge_configs(_load_config(parsed_args), _cli_overrides(parsed_args))
        options = build_render_options(config)
        html = _read_input(parsed_args.input)
        text = to_text(html, options=options)
        if parsed_args.out:
            try:
                write_content(text + "\n", parsed_args.out)
            except OSError as e:
                raise OutputWriteError(parsed_args.out, original_error=e) from e
            logger.info("Wrote %s", parsed_args.out)
        else:
            sys.stdout.write(text + "\n")
    except Exception as e:
        exit_code = get_exit_code_for_exception(e)
        if parsed_args.trace:
            logger.exception("Conversion failed")
        print(f"Error: {e}", file=sys.stderr)
        return exit_code

    return EXIT_SUCCESS
