#  Copyright (c) 2025 Tom Villani, Ph.D.
"""html2plain - render HTML as readable plain text.

html2plain turns HTML (typically an email body) into word-wrapped plain
text, the kind used for the text part of a multipart message:

- headings framed by ``*`` or ``-`` dividers
- ``*bold*`` markers for ``<b>`` and ``<strong>``
- link targets in parentheses after the link text
- ``- `` markers for list items
- tables either flattened or drawn as ASCII box tables

Examples
--------
    >>> from html2plain import from_string
    >>> print(from_string('<h2>News</h2><p>See <a href="https://example.com">the site</a></p>'))
    News
    ----
    <BLANKLINE>
    See the site (https://example.com)

"""

from html2plain.utils.packages import get_package_version

__version__ = get_package_version("html2plain") or "0.0.0"

from html2plain.api import from_bytes, from_html_node, from_reader, from_string, to_text  # noqa: E402
from html2plain.exceptions import (  # noqa: E402
    DependencyError,
    Html2PlainError,
    OutputWriteError,
    ParseError,
    ParsingError,
    RenderError,
    RenderingError,
    ValidationError,
)
from html2plain.options import PrettyTablesOptions, RenderOptions, TableAlignment  # noqa: E402

__all__ = [
    "__version__",
    "DependencyError",
    "Html2PlainError",
    "OutputWriteError",
    "ParseError",
    "ParsingError",
    "PrettyTablesOptions",
    "RenderError",
    "RenderOptions",
    "RenderingError",
    "TableAlignment",
    "ValidationError",
    "from_bytes",
    "from_html_node",
    "from_reader",
    "from_string",
    "to_text",
]
