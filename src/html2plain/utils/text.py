#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2plain/utils/text.py
"""Text measurement and normalization helpers."""

from __future__ import annotations

import re

from rich.cells import cell_len

from html2plain.constants import MAILTO_PREFIX

_BLANK_LINE_RUN = re.compile(r"\n\n+")


def display_width(text: str) -> int:
    """Return the number of terminal columns needed to display ``text``.

    East-Asian wide and full-width characters count as two columns,
    zero-width characters as none and everything else as one.

    Parameters
    ----------
    text : str
        Text to measure

    Returns
    -------
    int
        Display width in columns

    Examples
    --------
        >>> display_width("Hello")
        5
        >>> display_width("世界")
        4

    """
    return cell_len(text)


def max_line_width(text: str) -> int:
    """Return the widest display width among the lines of ``text``.

    Trailing whitespace on each line is ignored.
    """
    return max((display_width(line.rstrip()) for line in text.split("\n")), default=0)


def normalize_href(link: str) -> str:
    """Trim surrounding whitespace and a leading ``mailto:`` scheme.

    Examples
    --------
        >>> normalize_href("  mailto:someone@example.com ")
        'someone@example.com'

    """
    link = link.strip()
    if link.startswith(MAILTO_PREFIX):
        link = link[len(MAILTO_PREFIX) :]
    return link


def normalize_output(text: str) -> str:
    """Apply the final whitespace clean-up to a rendered document.

    A newline followed by a space loses the space, runs of blank lines
    collapse to a single blank line and the result is trimmed.
    """
    return _BLANK_LINE_RUN.sub("\n\n", text.replace("\n ", "\n")).strip()
