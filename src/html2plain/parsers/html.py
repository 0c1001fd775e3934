#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2plain/parsers/html.py
"""HTML parsing.

Input is decoded (dropping any byte-order mark) and handed to BeautifulSoup.
Failures of the tree builder surface as ``ParsingError``; nothing here
produces partial output.
"""

from __future__ import annotations

import logging
from typing import IO, TYPE_CHECKING, Union

from html2plain.constants import DEFAULT_HTML_PARSER, DEPS_HTML
from html2plain.exceptions import DependencyError, ParsingError
from html2plain.utils.decorators import debug_timer, requires_dependencies
from html2plain.utils.encoding import read_html_input

if TYPE_CHECKING:
    from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)


@requires_dependencies("html", DEPS_HTML)
def parse_html(
    source: Union[str, bytes, IO[bytes], IO[str]],
    html_parser: str = DEFAULT_HTML_PARSER,
) -> BeautifulSoup:
    """Parse HTML into a BeautifulSoup document tree.

    Parameters
    ----------
    source : str, bytes, IO[bytes] or IO[str]
        HTML content or a stream yielding it. A leading byte-order mark is
        removed before parsing.
    html_parser : str, default "html.parser"
        Name of the BeautifulSoup tree builder to use

    Returns
    -------
    BeautifulSoup
        The document node of the parsed tree

    Raises
    ------
    DependencyError
        If the requested tree builder is not installed
    ParsingError
        If the input cannot be read or tokenized

    """
    from bs4 import BeautifulSoup, FeatureNotFound

    try:
        html_content = read_html_input(source)
    except (OSError, TypeError) as e:
        raise ParsingError(f"Could not read HTML input: {e}", parsing_stage="input", original_error=e) from e

    with debug_timer(logger, f"Parsing ({html_parser})"):
        try:
            return BeautifulSoup(html_content, html_parser)
        except FeatureNotFound as e:
            raise DependencyError(
                "html",
                missing_packages=[(html_parser, "")],
                message=f"HTML tree builder {html_parser!r} is not available: {e}",
            ) from e
        except Exception as e:
            # Tree builders signal malformed markup with assorted exception types
            raise ParsingError(f"Failed to parse HTML: {e}", parsing_stage="tokenize", original_error=e) from e
