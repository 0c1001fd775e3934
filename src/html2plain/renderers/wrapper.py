#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2plain/renderers/wrapper.py
"""Greedy word wrapping for running text.

The wrapper receives text fragments, splits them into whitespace-delimited
words and lays the words out on lines no wider than the configured width.
Widths are measured in display columns, so wide East-Asian characters take
two columns each.

It also owns blank-line bookkeeping: consecutive requests for line breaks
are capped rather than added together, so that block elements nested in
block elements never stack up extra blank lines.
"""

from __future__ import annotations

from typing import TextIO

from html2plain.constants import DEFAULT_LINE_WIDTH
from html2plain.utils.text import display_width


class LineWrapper:
    """Lay out words into lines of at most ``width`` display columns.

    Parameters
    ----------
    out : TextIO
        Stream receiving the wrapped text
    width : int, default 78
        Maximum line width in display columns

    Examples
    --------
        >>> from io import StringIO
        >>> buf = StringIO()
        >>> wrapper = LineWrapper(buf, width=11)
        >>> wrapper.write("the quick brown fox")
        >>> buf.getvalue()
        'the quick\\nbrown fox'

    """

    def __init__(self, out: TextIO, width: int = DEFAULT_LINE_WIDTH) -> None:
        """Bind the wrapper to its output stream."""
        self.out = out
        self.width = width
        # Display columns used on the current line
        self._column = 0
        # Newlines emitted since the last word
        self._newlines = 0
        self._pending_space = 0
        self._printed = False

    @property
    def column(self) -> int:
        """Display column of the cursor on the current line."""
        return self._column

    @property
    def trailing_newlines(self) -> int:
        """Number of newlines emitted since the last written word."""
        return self._newlines

    def write(self, text: str) -> None:
        """Append the words of ``text`` to the output.

        Words are separated by exactly one space. A word that would push the
        line past ``width`` starts a new line instead, unless it is the first
        word on the line.
        """
        if self._column == 0 and self._printed:
            # Blank line before a new paragraph
            self.flush()

        self._printed = True
        self._newlines = 0

        for word in text.split():
            word_width = display_width(word)
            if self._column > 0 and self._column + self._pending_space + word_width > self.width:
                self.out.write("\n")
                self._column = 0
                self._pending_space = 0
            self.out.write(" " * self._pending_space)
            self.out.write(word)
            self._column += self._pending_space + word_width
            self._pending_space = 1

    def write_preformatted(self, text: str) -> None:
        """Append ``text`` exactly as given, without splitting or wrapping.

        The cursor position is updated from the written text so that
        subsequent words and line breaks continue from where it ends.
        """
        if not text:
            return

        if self._column > 0 and self._pending_space and not text[0].isspace():
            self.out.write(" " * self._pending_space)
            self._column += self._pending_space

        self._printed = True
        self.out.write(text)

        _, newline, tail = text.rpartition("\n")
        if newline:
            self._column = display_width(tail)
            self._newlines = len(text) - len(text.rstrip("\n")) if not tail else 0
        else:
            self._column += display_width(text)
            self._newlines = 0
        self._pending_space = 0 if text[-1].isspace() else 1

    def flush(self) -> None:
        """End the current line."""
        self.flush_n(1)

    def flush_n(self, n: int) -> None:
        """Make sure at least ``n`` newlines follow the last written word.

        Newlines already emitted since the last word count towards ``n``,
        so repeated requests never add up to more than the largest one.
        """
        if self._column == 0 and self._newlines >= n:
            return

        n -= self._newlines
        if n < 1:
            return

        self.out.write("\n" * n)
        self._pending_space = 0
        self._column = 0
        self._newlines += n
