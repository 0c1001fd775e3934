#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2plain/renderers/plaintext.py
"""Plain text rendering of parsed HTML.

This module provides the PlainTextRenderer class, which walks a parsed HTML
tree and produces readable, fixed-width plain text such as the text part of
a multipart email. Rendering is driven by the element's tag:

- headings are framed by ``*`` (``h1``) or ``-`` (``h2``, ``h3``) dividers
  as wide as their text
- ``<b>``/``<strong>`` become ``*bold*``
- links are followed by their target in parentheses
- list items get a ``- `` marker
- paragraphs, lists and tables are separated by blank lines
- ``<style>``, ``<script>`` and ``<head>`` are dropped entirely

Running text is word-wrapped by a LineWrapper; table content bypasses the
wrapper and is either flattened or drawn as an ASCII table.

"""

from __future__ import annotations

import logging
from typing import Any, Callable, Generator, Iterable, Iterator, Optional, Tuple

from html2plain.constants import (
    H1_DIVIDER_CHAR,
    H2_DIVIDER_CHAR,
    LINE_BREAK,
    LIST_ITEM_MARKER,
    PARAGRAPH_BREAK,
    STRONG_MARKER,
)
from html2plain.dom import HtmlTag, NodeKind, get_attr, iter_children, node_kind, only_child, tag_of, text_of
from html2plain.options.render import RenderOptions
from html2plain.renderers.context import RenderContext
from html2plain.renderers.tables import render_ascii_table
from html2plain.utils.text import max_line_width, normalize_href, normalize_output

logger = logging.getLogger(__name__)

# A request from a visit to render some nodes into a context
Request = Tuple[RenderContext, Iterable[Any]]
Visit = Generator[Request, None, None]
ElementHandler = Callable[[RenderContext, Any, HtmlTag], Optional[Visit]]

_EXHAUSTED = object()


class PlainTextRenderer:
    """Render a parsed HTML tree as plain text.

    The renderer itself holds only options; all traversal state lives in a
    RenderContext created per call, so one renderer may be used for many
    documents.

    Parameters
    ----------
    options : RenderOptions or None, default None
        Rendering options

    Examples
    --------
        >>> from bs4 import BeautifulSoup
        >>> soup = BeautifulSoup("<h1>Hi</h1>", "html.parser")
        >>> print(PlainTextRenderer().render_to_string(soup))
        **
        Hi
        **

    """

    # Tags rendered by visiting their children with no added formatting
    PASSTHROUGH_TAGS = frozenset(
        {
            HtmlTag.HTML,
            HtmlTag.BODY,
            HtmlTag.IMG,
            HtmlTag.THEAD,
            HtmlTag.TBODY,
            HtmlTag.OTHER,
        }
    )

    def __init__(self, options: RenderOptions | None = None):
        """Initialize the renderer with options."""
        self.options: RenderOptions = options or RenderOptions()
        self._handlers: dict[HtmlTag, ElementHandler] = {
            HtmlTag.BR: self._visit_break,
            HtmlTag.H1: self._visit_heading,
            HtmlTag.H2: self._visit_heading,
            HtmlTag.H3: self._visit_heading,
            HtmlTag.BLOCKQUOTE: self._visit_blockquote,
            HtmlTag.DIV: self._visit_div,
            HtmlTag.LI: self._visit_list_item,
            HtmlTag.B: self._visit_strong,
            HtmlTag.STRONG: self._visit_strong,
            HtmlTag.A: self._visit_link,
            HtmlTag.P: self._visit_paragraph,
            HtmlTag.UL: self._visit_paragraph,
            HtmlTag.TABLE: self._visit_table,
            HtmlTag.TFOOT: self._visit_table_part,
            HtmlTag.TH: self._visit_table_part,
            HtmlTag.TR: self._visit_table_part,
            HtmlTag.TD: self._visit_table_part,
            HtmlTag.PRE: self._visit_preformatted,
            HtmlTag.STYLE: self._visit_skipped,
            HtmlTag.SCRIPT: self._visit_skipped,
            HtmlTag.HEAD: self._visit_skipped,
        }

    @property
    def handled_tags(self) -> frozenset[HtmlTag]:
        """Tags with a dedicated formatting rule."""
        return frozenset(self._handlers)

    def render_to_string(self, node: Any) -> str:
        """Render a node and its subtree to normalized plain text.

        Parameters
        ----------
        node : Any
            A BeautifulSoup document, element or text node

        Returns
        -------
        str
            Rendered text with blank-line runs collapsed and ends trimmed

        """
        context = RenderContext(self.options)
        self.traverse(context, node)
        return normalize_output(context.getvalue())

    def traverse(self, context: RenderContext, node: Any) -> None:
        """Render ``node`` into ``context``.

        The walk keeps its own stack of suspended visits instead of using
        Python recursion, so nesting depth is limited only by memory. A visit
        is a generator: it runs the element's opening actions, yields a
        ``(context, nodes)`` request for the driver to render ``nodes`` into
        ``context``, and runs its closing actions when resumed.
        """
        stack: list[_Frame] = [_Frame(_visit_nodes(context, (node,)))]
        try:
            while stack:
                frame = stack[-1]
                if frame.pending is not None:
                    child = next(frame.pending, _EXHAUSTED)
                    if child is not _EXHAUSTED:
                        visit = self._visit(frame.context, child)
                        if visit is not None:
                            stack.append(_Frame(visit))
                        continue
                    frame.pending = None
                try:
                    frame.context, nodes = next(frame.visit)
                except StopIteration:
                    stack.pop()
                else:
                    frame.pending = iter(nodes)
        finally:
            # Unwind suspended visits so their context managers restore state
            while stack:
                stack.pop().visit.close()

    def _visit(self, context: RenderContext, node: Any) -> Optional[Visit]:
        """Start visiting ``node``; return the suspended visit, if any."""
        kind = node_kind(node)
        if kind is NodeKind.TEXT:
            self._visit_text(context, node)
            return None
        if kind is NodeKind.DOCUMENT:
            return _visit_children(context, node)
        if kind is not NodeKind.ELEMENT:
            return None

        context.just_closed_block = False
        tag = tag_of(node)
        handler = self._handlers.get(tag)
        if handler is None:
            return _visit_children(context, node)
        return handler(context, node, tag)

    def _visit_text(self, context: RenderContext, node: Any) -> None:
        if context.in_preformatted:
            context.emit_preformatted(text_of(node))
        else:
            context.emit(text_of(node).strip())

    def _visit_break(self, context: RenderContext, node: Any, tag: HtmlTag) -> None:
        context.emit(PARAGRAPH_BREAK)

    def _visit_heading(self, context: RenderContext, node: Any, tag: HtmlTag) -> Visit:
        """Render a heading, framed by dividers as wide as its widest line."""
        sub_context = context.sub()
        yield sub_context, iter_children(node)
        text = sub_context.getvalue()

        if self.options.text_only:
            context.emit(text)
            context.emit(PARAGRAPH_BREAK)
            return

        divider_char = H1_DIVIDER_CHAR if tag is HtmlTag.H1 else H2_DIVIDER_CHAR
        divider = divider_char * max_line_width(text)

        context.emit(PARAGRAPH_BREAK)
        if tag is HtmlTag.H1:
            context.emit(divider)
            context.emit(LINE_BREAK)
        context.emit(text)
        context.emit(LINE_BREAK)
        context.emit(divider)
        context.emit(PARAGRAPH_BREAK)

    def _visit_blockquote(self, context: RenderContext, node: Any, tag: HtmlTag) -> Visit:
        context.enter_blockquote()
        context.emit(LINE_BREAK)
        if context.blockquote_depth == 1:
            context.emit(LINE_BREAK)
        yield context, iter_children(node)
        context.leave_blockquote()
        context.emit(PARAGRAPH_BREAK)

    def _visit_div(self, context: RenderContext, node: Any, tag: HtmlTag) -> Visit:
        """Render a div on its own line(s).

        A div that closes right after a nested div closed does not add a
        second line break.
        """
        context.wrapper.flush()
        yield context, iter_children(node)
        if not context.just_closed_block:
            context.emit(LINE_BREAK)
        context.just_closed_block = True

    def _visit_list_item(self, context: RenderContext, node: Any, tag: HtmlTag) -> Visit:
        if not self.options.text_only:
            context.emit(LIST_ITEM_MARKER)
        yield context, iter_children(node)
        context.emit(LINE_BREAK)

    def _visit_strong(self, context: RenderContext, node: Any, tag: HtmlTag) -> Visit:
        sub_context = context.sub()
        yield sub_context, iter_children(node)
        text = sub_context.getvalue()
        if self.options.text_only:
            context.emit(text)
        else:
            context.emit(f"{STRONG_MARKER}{text}{STRONG_MARKER}")

    def _visit_link(self, context: RenderContext, node: Any, tag: HtmlTag) -> Visit:
        """Render link content followed by its target in parentheses.

        A link wrapping nothing but an image shows the image's alt text.
        """
        link_text = ""
        child = only_child(node)
        if child is not None and node_kind(child) is NodeKind.TEXT:
            link_text = text_of(child).strip()

        if child is not None and node_kind(child) is NodeKind.ELEMENT and tag_of(child) is HtmlTag.IMG:
            alt_text = get_attr(child, "alt")
            if alt_text:
                context.emit(alt_text)
        else:
            yield context, iter_children(node)

        href_link = ""
        raw_href = get_attr(node, "href")
        if raw_href:
            href = normalize_href(raw_href)
            if self._should_show_href(href, link_text):
                href_link = f"({href})"

        context.emit(href_link)

    def _should_show_href(self, href: str, link_text: str) -> bool:
        """Decide whether a link target is printed after the link text.

        Empty targets and targets identical to the visible text are never
        printed. Otherwise the target is dropped only when both
        ``omit_links`` and ``text_only`` are set.
        """
        if not href or href == link_text:
            return False
        return not self.options.omit_links or not self.options.text_only

    def _visit_paragraph(self, context: RenderContext, node: Any, tag: HtmlTag) -> Visit:
        """Render children surrounded by blank lines."""
        context.emit(PARAGRAPH_BREAK)
        yield context, iter_children(node)
        context.emit(PARAGRAPH_BREAK)

    def _visit_table(self, context: RenderContext, node: Any, tag: HtmlTag) -> Visit:
        with context.table_scope():
            context.emit(PARAGRAPH_BREAK)
            if self.options.pretty_tables:
                with context.collecting_table() as table:
                    yield context, iter_children(node)
                    drawn = render_ascii_table(
                        table.header, table.body, table.footer, self.options.pretty_tables_options
                    )
                context.emit(drawn)
            else:
                yield context, iter_children(node)
            context.emit(PARAGRAPH_BREAK)

    def _visit_table_part(self, context: RenderContext, node: Any, tag: HtmlTag) -> Visit:
        """Collect ``tfoot``/``tr``/``th``/``td`` content into the open table.

        Without pretty tables these elements carry no formatting. Cells
        found outside any table, or outside any row, are dropped.
        """
        if not self.options.pretty_tables:
            yield context, iter_children(node)
            return

        table = context.current_table

        if tag is HtmlTag.TFOOT:
            if table is not None:
                table.in_footer_section = True
            yield context, iter_children(node)
            if table is not None:
                table.in_footer_section = False

        elif tag is HtmlTag.TR:
            if table is not None:
                table.start_row()
            yield context, iter_children(node)
            if table is not None:
                table.end_row()

        elif table is None:
            logger.debug("Dropping <%s> cell found outside of a table", tag.value)

        else:
            text = yield from self._render_each_child(node)
            if tag is HtmlTag.TH:
                table.add_header_cell(text)
            elif not table.add_cell(text):
                logger.debug("Dropping table cell outside of any row: %r", text[:40])

    def _render_each_child(self, node: Any) -> Generator[Request, None, str]:
        """Render each direct child independently and join them with newlines.

        Every child gets a complete render pass of its own, with a fresh
        context and wrapper state, exactly as if it were a document by itself.
        """
        parts = []
        for child in iter_children(node):
            cell_context = RenderContext(self.options)
            yield cell_context, (child,)
            parts.append(normalize_output(cell_context.getvalue()))
        return LINE_BREAK.join(parts)

    def _visit_preformatted(self, context: RenderContext, node: Any, tag: HtmlTag) -> Visit:
        with context.preformatted():
            yield context, iter_children(node)

    def _visit_skipped(self, context: RenderContext, node: Any, tag: HtmlTag) -> None:
        logger.debug("Skipping <%s> subtree", tag.value)


class _Frame:
    """A suspended visit and the nodes it is waiting on."""

    __slots__ = ("visit", "context", "pending")

    def __init__(self, visit: Visit) -> None:
        self.visit = visit
        self.context: Optional[RenderContext] = None
        self.pending: Optional[Iterator[Any]] = None


def _visit_nodes(context: RenderContext, nodes: Iterable[Any]) -> Visit:
    yield context, nodes


def _visit_children(context: RenderContext, node: Any) -> Visit:
    yield context, iter_children(node)


def render(node: Any, options: Optional[RenderOptions] = None) -> str:
    """Render a parsed HTML node to plain text.

    Each call builds its own context, so calls may run concurrently on
    different threads.
    """
    return PlainTextRenderer(options).render_to_string(node)
