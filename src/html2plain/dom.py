#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2plain/dom.py
"""Classification of parsed HTML nodes.

BeautifulSoup trees mix several Python classes: the ``BeautifulSoup`` root,
``Tag`` elements and a family of ``NavigableString`` subclasses, only some
of which are real text. This module reduces them to the three node kinds
and the closed tag vocabulary the renderer dispatches on.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterator

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString, Tag


class NodeKind(Enum):
    """Kind of a node in the parsed tree."""

    DOCUMENT = "document"
    ELEMENT = "element"
    TEXT = "text"
    # Comments, doctypes, CDATA and processing instructions
    OTHER = "other"


class HtmlTag(str, Enum):
    """Tags that carry formatting rules; everything else is ``OTHER``."""

    HTML = "html"
    HEAD = "head"
    BODY = "body"
    DIV = "div"
    P = "p"
    UL = "ul"
    LI = "li"
    A = "a"
    IMG = "img"
    B = "b"
    STRONG = "strong"
    H1 = "h1"
    H2 = "h2"
    H3 = "h3"
    BLOCKQUOTE = "blockquote"
    BR = "br"
    PRE = "pre"
    STYLE = "style"
    SCRIPT = "script"
    TABLE = "table"
    THEAD = "thead"
    TBODY = "tbody"
    TFOOT = "tfoot"
    TR = "tr"
    TH = "th"
    TD = "td"
    OTHER = "other"

    @classmethod
    def from_name(cls, name: str | None) -> HtmlTag:
        """Map a tag name to its vocabulary member.

        Examples
        --------
            >>> HtmlTag.from_name("H1")
            <HtmlTag.H1: 'h1'>
            >>> HtmlTag.from_name("section")
            <HtmlTag.OTHER: 'other'>

        """
        if not name:
            return cls.OTHER
        member = cls._value2member_map_.get(name.lower())
        if member is None or member is cls.OTHER:
            return cls.OTHER
        return member  # type: ignore[return-value]


def node_kind(node: Any) -> NodeKind:
    """Return the kind of a BeautifulSoup node."""
    # BeautifulSoup subclasses Tag, so test it first
    if isinstance(node, BeautifulSoup):
        return NodeKind.DOCUMENT
    if isinstance(node, Tag):
        return NodeKind.ELEMENT
    if isinstance(node, NavigableString) and not isinstance(node, PreformattedString):
        return NodeKind.TEXT
    return NodeKind.OTHER


def tag_of(node: Any) -> HtmlTag:
    """Return the vocabulary tag of an element node."""
    return HtmlTag.from_name(getattr(node, "name", None))


def get_attr(node: Any, name: str) -> str:
    """Return an attribute value, or an empty string when it is absent.

    Multi-valued attributes (such as ``class``) are joined with spaces.
    """
    attrs = getattr(node, "attrs", None) or {}
    value = attrs.get(name, "")
    if isinstance(value, (list, tuple)):
        return " ".join(value)
    return str(value)


def iter_children(node: Any) -> Iterator[Any]:
    """Iterate over the direct children of a node in document order."""
    # Snapshot the list; traversal never mutates the tree, but callers may
    yield from list(getattr(node, "contents", ()))


def only_child(node: Any) -> Any | None:
    """Return the single child of ``node``, or None if it has zero or several."""
    contents = getattr(node, "contents", ())
    if len(contents) == 1:
        return contents[0]
    return None


def text_of(node: Any) -> str:
    """Return the raw text of a text node."""
    return str(node)
