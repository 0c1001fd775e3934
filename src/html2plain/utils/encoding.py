#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2plain/utils/encoding.py
"""Byte-order mark handling and decoding of HTML input."""

from __future__ import annotations

import logging
from typing import IO, Union

from html2plain.constants import UTF8_BOM

logger = logging.getLogger(__name__)


def strip_bom(data: bytes) -> bytes:
    """Remove a leading UTF-8 byte-order mark, if present.

    Examples
    --------
        >>> strip_bom(b"\\xef\\xbb\\xbf<p>x</p>")
        b'<p>x</p>'

    """
    if data.startswith(UTF8_BOM):
        logger.debug("Stripped UTF-8 byte-order mark from input")
        return data[len(UTF8_BOM) :]
    return data


def decode_html_bytes(data: bytes) -> str:
    """Decode HTML bytes as UTF-8 after stripping a byte-order mark.

    Invalid byte sequences are replaced with U+FFFD so that decoding never
    fails; malformed input is left to the parser to cope with.
    """
    return strip_bom(data).decode("utf-8", errors="replace")


def read_html_input(source: Union[str, bytes, IO[bytes], IO[str]]) -> str:
    """Return HTML text from a string, bytes or a readable stream.

    Parameters
    ----------
    source : str, bytes, IO[bytes] or IO[str]
        HTML content or a stream yielding it

    Returns
    -------
    str
        Decoded HTML with any leading byte-order mark removed

    Raises
    ------
    TypeError
        If ``source`` is neither text, bytes nor a readable stream

    """
    if isinstance(source, bytes):
        return decode_html_bytes(source)
    if isinstance(source, str):
        return source.removeprefix("\ufeff")
    if hasattr(source, "read"):
        return read_html_input(source.read())
    raise TypeError(f"Unsupported HTML input type: {type(source).__name__}")
