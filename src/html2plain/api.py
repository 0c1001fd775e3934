#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2plain/api.py
"""Top-level entry points for converting HTML to plain text.

All functions return the complete rendered text; nothing is streamed. A
``ParsingError`` raised while reading the markup reaches the caller
unchanged, and no text is ever returned together with an error.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Any, Optional, Union

from html2plain.exceptions import OutputWriteError, ParsingError
from html2plain.options.render import RenderOptions
from html2plain.parsers.html import parse_html
from html2plain.renderers.plaintext import render
from html2plain.utils.decorators import debug_timer
from html2plain.utils.io_utils import write_content

logger = logging.getLogger(__name__)

HtmlSource = Union[str, bytes, Path, IO[bytes], IO[str]]


def from_html_node(node: Any, options: Optional[RenderOptions] = None) -> str:
    """Render text from a pre-parsed HTML document or subtree.

    Parameters
    ----------
    node : Any
        A BeautifulSoup document, element or text node
    options : RenderOptions, optional
        Rendering options; defaults apply when omitted

    Returns
    -------
    str
        The rendered text

    Examples
    --------
        >>> from bs4 import BeautifulSoup
        >>> soup = BeautifulSoup('<a href="https://example.com">Example.com</a>', "html.parser")
        >>> from_html_node(soup)
        'Example.com (https://example.com)'

    """
    with debug_timer(logger, "Rendering"):
        return render(node, options)


def from_reader(reader: Union[IO[bytes], IO[str]], options: Optional[RenderOptions] = None) -> str:
    """Parse HTML read from a stream, then render it as text.

    Parameters
    ----------
    reader : IO[bytes] or IO[str]
        Stream yielding HTML; byte streams are decoded as UTF-8
    options : RenderOptions, optional
        Rendering options

    Returns
    -------
    str
        The rendered text

    Raises
    ------
    ParsingError
        If the input cannot be read or parsed

    """
    options = options or RenderOptions()
    document = parse_html(reader, options.html_parser)
    return from_html_node(document, options)


def from_bytes(data: bytes, options: Optional[RenderOptions] = None) -> str:
    """Parse HTML bytes (a leading byte-order mark is ignored) and render them."""
    options = options or RenderOptions()
    return from_html_node(parse_html(data, options.html_parser), options)


def from_string(text: str, options: Optional[RenderOptions] = None) -> str:
    """Parse an HTML string and render it as text.

    Examples
    --------
        >>> from_string("<h1>Hi</h1>")
        '**\\nHi\\n**'

    """
    options = options or RenderOptions()
    return from_html_node(parse_html(text, options.html_parser), options)


def to_text(
    source: HtmlSource,
    *,
    options: Optional[RenderOptions] = None,
    output: Union[str, Path, IO[bytes], IO[str], None] = None,
    **kwargs: Any,
) -> str:
    """Convert HTML to plain text, optionally writing the result to an output.

    Parameters
    ----------
    source : str, bytes, Path, IO[bytes] or IO[str]
        HTML markup, a path to an HTML file, or a stream yielding HTML
    options : RenderOptions, optional
        Base rendering options
    output : str, Path, IO[bytes] or IO[str], optional
        Where to also write the rendered text
    **kwargs : Any
        Individual option overrides, e.g. ``pretty_tables=True``

    Returns
    -------
    str
        The rendered text

    Raises
    ------
    ParsingError
        If the input cannot be read or parsed
    OutputWriteError
        If the text cannot be written to ``output``

    Examples
    --------
        >>> to_text("<p>Hello <b>world</b></p>", text_only=True)
        'Hello world'

    """
    options = options or RenderOptions()
    if kwargs:
        options = options.create_updated(**kwargs)

    if isinstance(source, Path):
        logger.debug("Reading HTML from %s", source)
        try:
            data = source.read_bytes()
        except OSError as e:
            raise ParsingError(
                f"Could not read HTML file {source}: {e}", parsing_stage="input", original_error=e
            ) from e
        text = from_bytes(data, options)
    elif isinstance(source, bytes):
        text = from_bytes(source, options)
    elif isinstance(source, str):
        text = from_string(source, options)
    else:
        text = from_reader(source, options)

    if output is not None:
        try:
            write_content(text, output)
        except (OSError, TypeError) as e:
            raise OutputWriteError(str(output), original_error=e) from e

    return text
