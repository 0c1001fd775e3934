#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Option dataclasses for html2plain."""

from html2plain.options.base import CloneFrozenMixin
from html2plain.options.render import RenderOptions
from html2plain.options.tables import PrettyTablesOptions, TableAlignment

__all__ = [
    "CloneFrozenMixin",
    "PrettyTablesOptions",
    "RenderOptions",
    "TableAlignment",
]
