#  Copyright (c) 2025 Tom Villani, Ph.D.
# html2plain/options/tables.py
"""Configuration options for ASCII table rendering.

These settings are passed through untouched to the table renderer used when
``RenderOptions.pretty_tables`` is enabled.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from html2plain.constants import (
    DEFAULT_TABLE_CENTER_SEPARATOR,
    DEFAULT_TABLE_COL_WIDTH,
    DEFAULT_TABLE_COLUMN_SEPARATOR,
    DEFAULT_TABLE_NEWLINE,
    DEFAULT_TABLE_ROW_SEPARATOR,
    TABLE_NEWLINES,
)
from html2plain.options.base import CloneFrozenMixin


class TableAlignment(str, Enum):
    """Horizontal alignment of table cells."""

    DEFAULT = "default"
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass(frozen=True)
class PrettyTablesOptions(CloneFrozenMixin):
    """Configuration options for ASCII table rendering.

    Parameters
    ----------
    auto_format_header : bool, default True
        Upper-case header and footer labels, replacing ``_`` (and ``.`` that
        is not part of a number) with spaces.
    auto_wrap_text : bool, default True
        Wrap long cell text. When False cells are never wrapped.
    reflow_during_auto_wrap : bool, default True
        When wrapping a cell with several lines, join the lines into one
        paragraph first. When False each line is wrapped on its own and the
        wrapped lines are set apart by a blank line.
    col_width : int, default 30
        Maximum column width used when ``auto_wrap_text`` is enabled.
    column_separator : str, default "|"
        Character drawn between columns.
    row_separator : str, default "-"
        Character drawn for horizontal rules.
    center_separator : str, default "+"
        Character drawn where rules cross.
    header_alignment : TableAlignment, default DEFAULT
        Alignment of header labels (DEFAULT centres them).
    footer_alignment : TableAlignment, default DEFAULT
        Alignment of footer labels (DEFAULT centres them).
    alignment : TableAlignment, default DEFAULT
        Alignment of body cells (DEFAULT right-aligns numbers, left-aligns
        everything else).
    column_alignment : tuple of TableAlignment, default ()
        Per-column override of ``alignment``.
    newline : str, default "\\n"
        Line terminator of the drawn table, "\\n" or "\\r\\n".
    header_line : bool, default True
        Draw a rule under the header labels.
    row_line : bool, default False
        Draw a rule between body rows.
    borders : bool, default True
        Draw the outer frame of the table. When False no side is drawn,
        whatever the per-side flags say.
    border_left, border_right, border_top, border_bottom : bool, default True
        Draw one side of the outer frame.
    auto_merge_cells : bool, default False
        Blank out a body cell that repeats the cell directly above it.

    """

    auto_format_header: bool = field(
        default=True,
        metadata={"help": "Upper-case header and footer labels", "importance": "core"},
    )
    auto_wrap_text: bool = field(
        default=True,
        metadata={"help": "Wrap long cell text to col_width", "importance": "core"},
    )
    reflow_during_auto_wrap: bool = field(
        default=True,
        metadata={"help": "Join the lines of a cell before wrapping it", "importance": "advanced"},
    )
    col_width: int = field(
        default=DEFAULT_TABLE_COL_WIDTH,
        metadata={"help": "Maximum column width when wrapping", "type": int, "importance": "advanced"},
    )
    column_separator: str = field(
        default=DEFAULT_TABLE_COLUMN_SEPARATOR,
        metadata={"help": "Character between columns", "type": str, "importance": "advanced"},
    )
    row_separator: str = field(
        default=DEFAULT_TABLE_ROW_SEPARATOR,
        metadata={"help": "Character for horizontal rules", "type": str, "importance": "advanced"},
    )
    center_separator: str = field(
        default=DEFAULT_TABLE_CENTER_SEPARATOR,
        metadata={"help": "Character where rules cross", "type": str, "importance": "advanced"},
    )
    header_alignment: TableAlignment = field(
        default=TableAlignment.DEFAULT,
        metadata={"help": "Header label alignment", "choices": [a.value for a in TableAlignment]},
    )
    footer_alignment: TableAlignment = field(
        default=TableAlignment.DEFAULT,
        metadata={"help": "Footer label alignment", "choices": [a.value for a in TableAlignment]},
    )
    alignment: TableAlignment = field(
        default=TableAlignment.DEFAULT,
        metadata={"help": "Body cell alignment", "choices": [a.value for a in TableAlignment]},
    )
    column_alignment: tuple[TableAlignment, ...] = field(
        default=(),
        metadata={"help": "Per-column body alignment overrides", "importance": "advanced"},
    )
    newline: str = field(
        default=DEFAULT_TABLE_NEWLINE,
        metadata={
            "help": "Line terminator of the drawn table",
            "choices": list(TABLE_NEWLINES),
            "importance": "advanced",
        },
    )
    header_line: bool = field(
        default=True,
        metadata={"help": "Draw a rule under the header", "importance": "core"},
    )
    row_line: bool = field(
        default=False,
        metadata={"help": "Draw a rule between body rows", "importance": "core"},
    )
    borders: bool = field(
        default=True,
        metadata={"help": "Draw the outer table frame", "importance": "core"},
    )
    border_left: bool = field(
        default=True,
        metadata={"help": "Draw the left side of the frame", "importance": "advanced"},
    )
    border_right: bool = field(
        default=True,
        metadata={"help": "Draw the right side of the frame", "importance": "advanced"},
    )
    border_top: bool = field(
        default=True,
        metadata={"help": "Draw the top of the frame", "importance": "advanced"},
    )
    border_bottom: bool = field(
        default=True,
        metadata={"help": "Draw the bottom of the frame", "importance": "advanced"},
    )
    auto_merge_cells: bool = field(
        default=False,
        metadata={"help": "Blank cells repeating the value above them", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate and coerce option values.

        Raises
        ------
        ValueError
            If a separator is not a single character, col_width is not
            positive or newline is not a supported line terminator.

        """
        if self.col_width <= 0:
            raise ValueError(f"col_width must be positive, got {self.col_width}")

        for name in ("column_separator", "row_separator", "center_separator"):
            value = getattr(self, name)
            if not isinstance(value, str) or len(value) != 1:
                raise ValueError(f"{name} must be a single character, got {value!r}")

        if self.newline not in TABLE_NEWLINES:
            raise ValueError(f"newline must be one of {TABLE_NEWLINES!r}, got {self.newline!r}")

        # Accept plain strings (e.g. from config files) for alignment fields
        for name in ("header_alignment", "footer_alignment", "alignment"):
            object.__setattr__(self, name, TableAlignment(getattr(self, name)))
        object.__setattr__(self, "column_alignment", tuple(TableAlignment(a) for a in self.column_alignment))
