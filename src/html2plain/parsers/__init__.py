#  Copyright (c) 2025 Tom Villani, Ph.D.
"""HTML parsing front end for html2plain."""

from html2plain.parsers.html import parse_html

__all__ = ["parse_html"]
