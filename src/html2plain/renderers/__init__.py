#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Plain text rendering components."""

from html2plain.renderers.context import RenderContext
from html2plain.renderers.plaintext import PlainTextRenderer, render
from html2plain.renderers.tables import TableAccumulator, render_ascii_table
from html2plain.renderers.wrapper import LineWrapper

__all__ = [
    "LineWrapper",
    "PlainTextRenderer",
    "RenderContext",
    "TableAccumulator",
    "render",
    "render_ascii_table",
]
