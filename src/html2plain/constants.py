#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for html2plain.

This module centralizes the hardcoded values used across the package:
output geometry, ASCII table defaults, parser choices and the third-party
packages each stage depends on.
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

HtmlParserName = Literal["html.parser", "lxml", "html5lib"]

# =============================================================================
# Output Geometry
# =============================================================================

DEFAULT_LINE_WIDTH = 78

# Control strings understood by the render context outside tables
LINE_BREAK = "\n"
PARAGRAPH_BREAK = "\n\n"

LIST_ITEM_MARKER = "- "
STRONG_MARKER = "*"
H1_DIVIDER_CHAR = "*"
H2_DIVIDER_CHAR = "-"
BLOCKQUOTE_MARKER = ">"
MAILTO_PREFIX = "mailto:"

# =============================================================================
# Parsing
# =============================================================================

DEFAULT_HTML_PARSER: HtmlParserName = "html.parser"
SUPPORTED_HTML_PARSERS: tuple[str, ...] = ("html.parser", "lxml", "html5lib")

UTF8_BOM = b"\xef\xbb\xbf"

# =============================================================================
# Pretty Tables
# =============================================================================

DEFAULT_TABLE_COL_WIDTH = 30
DEFAULT_TABLE_COLUMN_SEPARATOR = "|"
DEFAULT_TABLE_ROW_SEPARATOR = "-"
DEFAULT_TABLE_CENTER_SEPARATOR = "+"
DEFAULT_TABLE_NEWLINE = "\n"
TABLE_NEWLINES = ("\n", "\r\n")

# Console width handed to the table renderer; tables size to their content
TABLE_CONSOLE_WIDTH = 4096

# =============================================================================
# Dependencies as (install_name, import_name, version_spec)
# =============================================================================

DEPS_HTML = [("beautifulsoup4", "bs4", ">=4.12.0")]
DEPS_TABLES = [("rich", "rich", ">=13.0.0")]
