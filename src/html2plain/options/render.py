#  Copyright (c) 2025 Tom Villani, Ph.D.
# html2plain/options/render.py
"""Configuration options for HTML to plain text rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

from html2plain.constants import DEFAULT_HTML_PARSER, DEFAULT_LINE_WIDTH, SUPPORTED_HTML_PARSERS
from html2plain.options.base import CloneFrozenMixin
from html2plain.options.tables import PrettyTablesOptions


@dataclass(frozen=True)
class RenderOptions(CloneFrozenMixin):
    """Configuration options for rendering HTML as plain text.

    Parameters
    ----------
    pretty_tables : bool, default False
        Render ``<table>`` elements as ASCII-art tables. When False, table
        content is flattened into a paragraph.
    pretty_tables_options : PrettyTablesOptions or None, default None
        Table style passed to the ASCII table renderer. None uses the
        renderer defaults.
    omit_links : bool, default False
        Together with ``text_only``, drop the parenthesized href after links.
    text_only : bool, default False
        Suppress ``*bold*`` markers, list markers and heading dividers.
    line_width : int, default 78
        Column at which running text is wrapped.
    html_parser : str, default "html.parser"
        BeautifulSoup tree builder used to parse the input.

    Examples
    --------
        >>> from html2plain import from_string
        >>> from html2plain.options import RenderOptions
        >>> from_string("<p>Hi <b>there</b></p>", RenderOptions(text_only=True))
        'Hi there'

    """

    pretty_tables: bool = field(
        default=False,
        metadata={"help": "Render tables as ASCII-art boxes", "importance": "core"},
    )
    pretty_tables_options: PrettyTablesOptions | None = field(
        default=None,
        metadata={"help": "Style options for ASCII tables", "importance": "advanced"},
    )
    omit_links: bool = field(
        default=False,
        metadata={"help": "Omit link targets (effective together with text_only)", "importance": "core"},
    )
    text_only: bool = field(
        default=False,
        metadata={"help": "Return plain text without decorations", "importance": "core"},
    )
    line_width: int = field(
        default=DEFAULT_LINE_WIDTH,
        metadata={"help": "Column at which text is wrapped", "type": int, "importance": "advanced"},
    )
    html_parser: str = field(
        default=DEFAULT_HTML_PARSER,
        metadata={"help": "BeautifulSoup tree builder", "choices": list(SUPPORTED_HTML_PARSERS)},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If line_width is not positive or html_parser is unknown.

        """
        if self.line_width <= 0:
            raise ValueError(f"line_width must be positive, got {self.line_width}")
        if self.html_parser not in SUPPORTED_HTML_PARSERS:
            raise ValueError(
                f"html_parser must be one of {', '.join(SUPPORTED_HTML_PARSERS)}, got {self.html_parser!r}"
            )

    @property
    def table_style(self) -> PrettyTablesOptions:
        """Return the effective table style, falling back to defaults."""
        return self.pretty_tables_options or PrettyTablesOptions()
