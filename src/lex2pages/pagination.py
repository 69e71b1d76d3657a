#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/lex2pages/pagination.py
"""Group rendered top-level nodes into pages.

Two policies decide where page boundaries fall, and only the document's
top-level children are considered; anything nested is rendered as part of
its top-level ancestor.

- ``dividers``: top-level horizontal rules are invisible page breaks.
- ``headings``: every top-level heading starts a new page, and dividers are
  rendered inline as ``<hr />``.

Pages whose HTML is blank are never emitted, and page ids (``block-0``,
``block-1``, ...) count emitted pages only, starting fresh on every call.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from lex2pages.ast.nodes import Document, Heading, HorizontalRule, Node
from lex2pages.options.pagination import PaginationOptions
from lex2pages.renderers.html import HtmlFragmentRenderer
from lex2pages.utils.decorators import debug_timer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Page:
    """One page of render-ready HTML.

    Parameters
    ----------
    id : str
        Identifier unique within one segmentation call (``block-<index>``)
    html : str
        Tag-balanced HTML fragment

    """

    id: str
    html: str

    def to_dict(self) -> dict[str, str]:
        """Return the page as a plain ``{"id", "html"}`` mapping."""
        return {"id": self.id, "html": self.html}


class _PageCollector:
    """Accumulate pages and hand out sequential ids."""

    def __init__(self, id_prefix: str):
        self.id_prefix = id_prefix
        self.pages: list[Page] = []

    def emit(self, html: str) -> None:
        if not html.strip():
            return
        self.pages.append(Page(id=f"{self.id_prefix}{len(self.pages)}", html=html))


class PageSegmenter:
    """Split a document's top-level nodes into pages.

    Parameters
    ----------
    options : PaginationOptions
        Segmentation policy and id settings
    renderer : HtmlFragmentRenderer or None, default None
        Renderer for each top-level node; a default one is created if omitted

    Examples
    --------
        >>> segmenter = PageSegmenter(PaginationOptions(policy="dividers"))
        >>> pages = segmenter.segment(doc.children)
        >>> [page.id for page in pages]
        ['block-0', 'block-1']

    """

    def __init__(self, options: PaginationOptions, renderer: Optional[HtmlFragmentRenderer] = None):
        """Initialize the segmenter."""
        self.options = options
        self.renderer = renderer or HtmlFragmentRenderer()

    def segment(self, root_children: Optional[Iterable[Optional[Node]]]) -> list[Page]:
        """Render top-level nodes and group them into pages.

        Parameters
        ----------
        root_children : iterable of Node or None
            The document root's children, in order

        Returns
        -------
        list of Page
            Pages in document order; empty for empty or blank input

        """
        children = [node for node in (root_children or ()) if node is not None]
        if not children:
            return []

        with debug_timer(logger, f"Segmenting {len(children)} node(s) by {self.options.policy}"):
            if self.options.policy == "headings":
                pages = self._segment_by_headings(children)
            else:
                pages = self._segment_by_dividers(children)

        logger.debug("Produced %d page(s) from %d top-level node(s)", len(pages), len(children))
        return pages

    def segment_document(self, doc: Document) -> list[Page]:
        """Segment a whole Document."""
        return self.segment(doc.children)

    def _segment_by_dividers(self, children: list[Node]) -> list[Page]:
        collector = _PageCollector(self.options.id_prefix)
        current_html = ""

        for node in children:
            if isinstance(node, HorizontalRule):
                collector.emit(current_html)
                current_html = ""
                continue

            html = self.renderer.render_node(node)
            if html.strip():
                current_html += html

        collector.emit(current_html)
        return collector.pages

    def _segment_by_headings(self, children: list[Node]) -> list[Page]:
        collector = _PageCollector(self.options.id_prefix)
        heading_html = ""
        body_html = ""
        seen_heading = False

        for node in children:
            html = self.renderer.render_node(node)

            if isinstance(node, Heading):
                if seen_heading:
                    collector.emit(heading_html + body_html)
                    heading_html = html
                else:
                    heading_html = self._start_first_heading(collector, body_html, html)
                    seen_heading = True
                body_html = ""
                continue

            if html.strip():
                body_html += html

        collector.emit(heading_html + body_html)
        return collector.pages

    def _start_first_heading(self, collector: _PageCollector, leading_html: str, heading_html: str) -> str:
        """Dispose of content before the first heading; return the new heading buffer."""
        if not leading_html.strip():
            return heading_html

        mode = self.options.leading_content
        if mode == "merge":
            return leading_html + heading_html
        if mode == "drop":
            logger.debug("Dropping content before the first heading (%d chars)", len(leading_html))
            return heading_html

        collector.emit(leading_html)
        return heading_html


def paginate(
    document: Document,
    options: PaginationOptions,
    renderer: Optional[HtmlFragmentRenderer] = None,
) -> list[Page]:
    """Segment a document into pages.

    Parameters
    ----------
    document : Document
        Document to paginate
    options : PaginationOptions
        Segmentation policy and id settings
    renderer : HtmlFragmentRenderer or None, default None
        Renderer for each top-level node

    Returns
    -------
    list of Page
        Pages in document order

    """
    return PageSegmenter(options, renderer).segment_document(document)


__all__ = ["Page", "PageSegmenter", "paginate"]
