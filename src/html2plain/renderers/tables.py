#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2plain/renderers/tables.py
"""Table cell collection and ASCII table drawing.

While a ``<table>`` subtree is traversed, a ``TableAccumulator`` collects
the text of its cells. Header cells from every row are flattened into one
header list; ``<td>`` cells go into the row opened by the enclosing
``<tr>``, or into the footer while inside ``<tfoot>``. The assembled
matrix is then drawn with rich as an ASCII box table.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from io import StringIO
from typing import Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from html2plain.constants import DEPS_TABLES, TABLE_CONSOLE_WIDTH
from html2plain.options.tables import PrettyTablesOptions, TableAlignment
from html2plain.renderers.wrapper import LineWrapper
from html2plain.utils.decorators import requires_dependencies
from html2plain.utils.text import display_width

logger = logging.getLogger(__name__)

_NUMERIC_CELL = re.compile(r"^\s*[-+]?(\d+(\.\d*)?|\.\d+)\s*%?\s*$")


@dataclass
class TableAccumulator:
    """Cell text collected from one ``<table>`` element.

    Attributes
    ----------
    header : list of str
        Text of every ``<th>`` cell, in document order
    body : list of list of str
        One list of ``<td>`` texts per ``<tr>``
    footer : list of str
        Text of ``<td>`` cells inside ``<tfoot>``
    current_row_index : int
        Index into ``body`` receiving cells
    in_footer_section : bool
        True while inside ``<tfoot>``

    """

    header: list[str] = field(default_factory=list)
    body: list[list[str]] = field(default_factory=list)
    footer: list[str] = field(default_factory=list)
    current_row_index: int = 0
    in_footer_section: bool = False

    def start_row(self) -> None:
        """Open a new, empty body row."""
        self.body.append([])

    def end_row(self) -> None:
        """Move the cell target past the row that just closed."""
        self.current_row_index += 1

    def add_header_cell(self, text: str) -> None:
        """Append a header cell."""
        self.header.append(text)

    def add_cell(self, text: str) -> bool:
        """Append a data cell to the footer or the current row.

        Returns
        -------
        bool
            False when there is no open row to receive the cell, which is
            then dropped

        """
        if self.in_footer_section:
            self.footer.append(text)
            return True

        if 0 <= self.current_row_index < len(self.body):
            self.body[self.current_row_index].append(text)
            return True

        return False


def format_header_label(label: str) -> str:
    """Upper-case a header label, turning ``_`` and non-numeric ``.`` into spaces.

    Examples
    --------
        >>> format_header_label("first_name")
        'FIRST NAME'
        >>> format_header_label("v1.5")
        'V1.5'

    """
    chars = list(label)
    for i, char in enumerate(chars):
        if char == "_":
            chars[i] = " "
        elif char == ".":
            before = chars[i - 1] if i > 0 else " "
            after = chars[i + 1] if i < len(chars) - 1 else " "
            # Keep decimal points such as "0.5"
            if not (_is_num_or_space(before) and _is_num_or_space(after)):
                chars[i] = " "
    formatted = "".join(chars).strip()
    if not formatted and label:
        # Keep at least one character so multi-line labels keep their lines
        formatted = " "
    return formatted.upper()


def _is_num_or_space(char: str) -> bool:
    return char.isdigit() or char.isspace()


def _build_box(style: PrettyTablesOptions) -> box.Box:
    """Build a rich box from the configured separator characters."""
    col = style.column_separator
    row = style.row_separator
    cross = style.center_separator
    rule = f"{cross}{row}{cross}{cross}"
    cells = f"{col} {col}{col}"
    return box.Box(
        "\n".join([rule, cells, rule, cells, rule, rule, cells, rule]) + "\n",
        ascii=True,
    )


def _justify(alignment: TableAlignment, default: str) -> str:
    return default if alignment is TableAlignment.DEFAULT else alignment.value


def _cell_justify(text: str, alignment: TableAlignment) -> str:
    if alignment is TableAlignment.DEFAULT:
        return "right" if _NUMERIC_CELL.match(text) else "left"
    return alignment.value


def _merge_repeated_cells(rows: list[list[str]]) -> list[list[str]]:
    """Blank every cell that repeats the value directly above it."""
    merged: list[list[str]] = []
    previous: list[str] = []
    for row in rows:
        merged.append(
            ["" if i < len(previous) and cell and cell == previous[i] else cell for i, cell in enumerate(row)]
        )
        previous = row
    return merged


def _wrap_paragraph(paragraph: str, width: int) -> str:
    buffer = StringIO()
    LineWrapper(buffer, width).write(paragraph)
    return buffer.getvalue()


def wrap_cell_text(text: str, style: PrettyTablesOptions) -> str:
    """Lay out cell text for a column at most ``style.col_width`` wide.

    A single line that already fits is returned unchanged. Otherwise the
    wrap width is the widest line, capped at ``col_width``; words longer
    than that keep a line of their own. With ``reflow_during_auto_wrap``
    the lines are first joined into one paragraph, without it each line is
    wrapped separately and the results are set apart by blank lines.

    Examples
    --------
        >>> wrap_cell_text("aaaa bbbb", PrettyTablesOptions(col_width=7))
        'aaaa\\nbbbb'
        >>> wrap_cell_text("one\\ntwo three", PrettyTablesOptions())
        'one two\\nthree'

    """
    if not style.auto_wrap_text:
        return text

    lines = text.split("\n")
    widest = max(display_width(line) for line in lines)
    if len(lines) == 1 and widest <= style.col_width:
        return text

    width = min(widest, style.col_width)
    paragraphs = [" ".join(lines)] if style.reflow_during_auto_wrap else lines
    return "\n\n".join(_wrap_paragraph(paragraph, width) for paragraph in paragraphs)


def _trim_frame(lines: list[str], style: PrettyTablesOptions) -> list[str]:
    """Remove the sides of the outer frame that are switched off.

    Dropping the left or right side also drops the padding column next to
    it, so no line starts or ends with padding alone.
    """
    if not style.borders or not style.border_top:
        lines = lines[1:]
    if not style.borders or not style.border_bottom:
        lines = lines[:-1]
    if not style.borders or not style.border_left:
        lines = [line[2:] for line in lines]
    if not style.borders or not style.border_right:
        lines = [line[:-2] for line in lines]
    return lines


@requires_dependencies("tables", DEPS_TABLES)
def render_ascii_table(
    header: Sequence[str],
    body: Sequence[Sequence[str]],
    footer: Sequence[str],
    style: Optional[PrettyTablesOptions] = None,
) -> str:
    """Draw a header/body/footer matrix as an ASCII box table.

    Rows shorter than the widest row are padded with empty cells. Rows with
    no cells at all (such as those holding only header cells) are skipped.

    Parameters
    ----------
    header : sequence of str
        Header labels; no header line is drawn when empty
    body : sequence of sequence of str
        Body rows
    footer : sequence of str
        Footer labels; no footer line is drawn when empty
    style : PrettyTablesOptions, optional
        Table style; defaults apply when None

    Returns
    -------
    str
        The drawn table, each line ending with ``style.newline``, or an
        empty string when there are no cells at all

    """
    style = style or PrettyTablesOptions()
    rows = [list(row) for row in body if row]
    column_count = max([len(header), len(footer), *(len(row) for row in rows)])
    if column_count == 0:
        return ""

    if style.auto_merge_cells:
        rows = _merge_repeated_cells(rows)

    def label(values: Sequence[str], index: int, alignment: TableAlignment) -> Text:
        value = values[index] if index < len(values) else ""
        if style.auto_format_header:
            value = format_header_label(value)
        return Text(wrap_cell_text(value, style), justify=_justify(alignment, "center"))  # type: ignore[arg-type]

    # Without a header rule the labels are drawn as an ordinary first row
    header_as_row = bool(header) and not style.header_line

    table = Table(
        box=_build_box(style),
        show_header=bool(header) and style.header_line,
        show_footer=bool(footer),
        show_edge=True,
        header_style=None,
        footer_style=None,
        safe_box=False,
    )
    for index in range(column_count):
        table.add_column(
            header=label(header, index, style.header_alignment),
            footer=label(footer, index, style.footer_alignment),
            no_wrap=True,
            overflow="fold",
        )

    if header_as_row:
        table.add_row(*(label(header, index, style.header_alignment) for index in range(column_count)))

    for row in rows:
        cells = []
        for index in range(column_count):
            value = row[index] if index < len(row) else ""
            alignment = (
                style.column_alignment[index] if index < len(style.column_alignment) else style.alignment
            )
            cells.append(
                Text(wrap_cell_text(value, style), justify=_cell_justify(value, alignment))  # type: ignore[arg-type]
            )
        table.add_row(*cells, end_section=style.row_line)

    logger.debug(
        "Drawing table: %d columns, %d header cells, %d rows, %d footer cells",
        column_count,
        len(header),
        len(rows),
        len(footer),
    )

    buffer = StringIO()
    console = Console(
        file=buffer,
        width=TABLE_CONSOLE_WIDTH,
        color_system=None,
        force_terminal=False,
        force_jupyter=False,
        force_interactive=False,
        no_color=True,
        highlight=False,
        markup=False,
        emoji=False,
        legacy_windows=False,
    )
    console.print(table)

    lines = _trim_frame(buffer.getvalue().splitlines(), style)
    if not lines:
        return ""
    return style.newline.join(lines) + style.newline
