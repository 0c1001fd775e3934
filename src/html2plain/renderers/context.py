#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2plain/renderers/context.py
"""Mutable state carried through a single render traversal."""

from __future__ import annotations

from contextlib import contextmanager
from io import StringIO
from typing import Generator, Optional

from html2plain.constants import BLOCKQUOTE_MARKER, LINE_BREAK, PARAGRAPH_BREAK
from html2plain.options.render import RenderOptions
from html2plain.renderers.tables import TableAccumulator
from html2plain.renderers.wrapper import LineWrapper


class RenderContext:
    """Output buffer, line wrapper and nesting state for one traversal.

    A context is created per render call and never shared between calls.
    ``sub()`` produces an isolated context with the same options and width
    but a fresh buffer, used to pre-render a subtree before deciding how to
    frame it.

    Parameters
    ----------
    options : RenderOptions
        Options of the render call
    width : int, optional
        Wrapping width; defaults to ``options.line_width``

    Attributes
    ----------
    blockquote_depth : int
        Number of enclosing ``<blockquote>`` elements
    table_depth : int
        Number of enclosing ``<table>`` elements
    in_preformatted : bool
        True inside ``<pre>``
    just_closed_block : bool
        True right after a ``<div>`` closed, until the next element starts
    line_prefix : str
        Quote marker for the current blockquote depth. It is tracked but not
        applied to output lines.

    """

    def __init__(self, options: RenderOptions, width: Optional[int] = None) -> None:
        """Create a context with an empty buffer."""
        self.options = options
        self._buffer = StringIO()
        self.wrapper = LineWrapper(self._buffer, width or options.line_width)

        self.line_prefix = ""
        self.blockquote_depth = 0
        self.table_depth = 0
        self.in_preformatted = False
        self.just_closed_block = False
        self._tables: list[TableAccumulator] = []

    def sub(self) -> RenderContext:
        """Return an isolated context sharing only options and width."""
        return RenderContext(self.options, width=self.wrapper.width)

    def getvalue(self) -> str:
        """Return everything written to this context so far."""
        return self._buffer.getvalue()

    @property
    def in_table(self) -> bool:
        """True while traversing inside a ``<table>`` subtree."""
        return self.table_depth > 0

    @property
    def current_table(self) -> Optional[TableAccumulator]:
        """Accumulator of the innermost table being collected, if any."""
        return self._tables[-1] if self._tables else None

    def emit(self, data: str) -> None:
        """Send a fragment of output through the context.

        Inside tables the fragment is appended verbatim after ending the
        current line. Elsewhere the empty string, a single newline and a
        double newline act as break requests, and any other string is
        word-wrapped.
        """
        if self.in_table:
            self.wrapper.flush()
            self._buffer.write(data)
            return

        if data == "":
            return
        if data == LINE_BREAK:
            self.wrapper.flush()
        elif data == PARAGRAPH_BREAK:
            self.wrapper.flush_n(2)
        else:
            self.wrapper.write(data)

    def emit_preformatted(self, data: str) -> None:
        """Send preformatted text through unchanged."""
        if self.in_table:
            self.emit(data)
        else:
            self.wrapper.write_preformatted(data)

    def enter_blockquote(self) -> None:
        """Increase the quote depth and update the quote marker."""
        self.blockquote_depth += 1
        if not self.options.text_only:
            self.line_prefix = BLOCKQUOTE_MARKER * self.blockquote_depth + " "

    def leave_blockquote(self) -> None:
        """Decrease the quote depth and update the quote marker."""
        self.blockquote_depth -= 1
        if not self.options.text_only:
            self.line_prefix = BLOCKQUOTE_MARKER * self.blockquote_depth
        if self.blockquote_depth > 0:
            self.line_prefix += " "

    @contextmanager
    def preformatted(self) -> Generator[None, None, None]:
        """Switch preformatted mode on, restoring the previous mode on exit."""
        previous = self.in_preformatted
        self.in_preformatted = True
        try:
            yield
        finally:
            self.in_preformatted = previous

    @contextmanager
    def table_scope(self) -> Generator[None, None, None]:
        """Count one level of ``<table>`` nesting for the duration of the block."""
        self.table_depth += 1
        try:
            yield
        finally:
            self.table_depth -= 1

    @contextmanager
    def collecting_table(self) -> Generator[TableAccumulator, None, None]:
        """Start a fresh accumulator for a table, dropping it on exit.

        Accumulators form a stack, so a table nested directly in another
        table's rows does not clobber the outer table's rows.
        """
        accumulator = TableAccumulator()
        self._tables.append(accumulator)
        try:
            yield accumulator
        finally:
            self._tables.pop()
