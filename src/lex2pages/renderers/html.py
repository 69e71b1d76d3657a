#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/lex2pages/renderers/html.py
"""HTML fragment rendering from AST.

This module provides the HtmlFragmentRenderer class which converts AST
nodes to compact HTML fragments for an HTML-in-view reader: no document
wrapper, no whitespace between tags, and every raw text value escaped.

Rendering never fails on document content. Missing or malformed fields were
already replaced with defaults by the loader; unknown nodes render as the
empty string; blocks that cannot be shown become a visible placeholder so
content is never silently lost.

"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from lex2pages.ast.nodes import (
    Block,
    Document,
    Heading,
    HorizontalRule,
    Link,
    List,
    ListItem,
    MediaObject,
    Node,
    Paragraph,
    ResolvedMedia,
    Text,
    UnknownNode,
)
from lex2pages.ast.visitors import NodeVisitor
from lex2pages.constants import (
    DEFAULT_BLOCK_TYPE,
    DEFAULT_HEADING_LEVEL,
    DEFAULT_LINK_HREF,
    MAX_HEADING_LEVEL,
    MIN_HEADING_LEVEL,
    NEW_TAB_ATTRIBUTES,
)
from lex2pages.options.html import HtmlFragmentRendererOptions
from lex2pages.renderers.base import BaseRenderer, InlineContentMixin
from lex2pages.utils.html_utils import apply_text_format, escape_html, wrap_tag
from lex2pages.utils.media import coerce_media_object, format_media_url

logger = logging.getLogger(__name__)


class HtmlFragmentRenderer(NodeVisitor, InlineContentMixin, BaseRenderer):
    """Render AST nodes to HTML fragments.

    ``render_node`` and ``render_children`` form a mutually recursive pair:
    container visitors render their children through the same capture
    mechanism, bottoming out at text and the other leaf nodes.

    Parameters
    ----------
    options : HtmlFragmentRendererOptions or None, default = None
        HTML rendering options

    Examples
    --------
        >>> from lex2pages.ast import Paragraph, Text
        >>> renderer = HtmlFragmentRenderer()
        >>> renderer.render_node(Paragraph(children=[Text(content="hi", format=3)]))
        '<p><em><strong>hi</strong></em></p>'

    """

    def __init__(self, options: HtmlFragmentRendererOptions | None = None):
        """Initialize the HTML fragment renderer with options."""
        BaseRenderer._validate_options_type(options, HtmlFragmentRendererOptions, "html-fragment")
        options = options or HtmlFragmentRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: HtmlFragmentRendererOptions = options
        self._output: list[str] = []

    def render_node(self, node: Optional[Node]) -> str:
        """Render a single node to an HTML fragment.

        Parameters
        ----------
        node : Node or None
            Node to render

        Returns
        -------
        str
            HTML fragment; empty for None and unknown nodes

        """
        return self._render_inline_content((node,))

    def render_children(self, nodes: Optional[Iterable[Optional[Node]]]) -> str:
        """Render a sequence of nodes in order and concatenate the fragments.

        Parameters
        ----------
        nodes : iterable of Node or None
            Nodes to render; None is treated as an empty sequence

        Returns
        -------
        str
            Fragments joined with no separator

        """
        return self._render_inline_content(nodes)

    def render_to_string(self, doc: Document) -> str:
        """Render a whole document as one fragment, without pagination.

        Top-level horizontal rules are rendered as ``<hr />`` here; use
        ``lex2pages.pagination`` to treat them as page boundaries.

        """
        return self.render_node(doc)

    def visit_document(self, node: Document) -> None:
        """Render a Document node."""
        self._output.append(self._render_inline_content(node.children))

    def visit_text(self, node: Text) -> None:
        """Render a Text node.

        The payload is escaped first, then wrapped in formatting tags.
        """
        content = node.content if isinstance(node.content, str) else ""
        format_bits = node.format if isinstance(node.format, int) and node.format >= 0 else 0
        self._output.append(apply_text_format(escape_html(content), format_bits))

    def visit_paragraph(self, node: Paragraph) -> None:
        """Render a Paragraph node. Blank paragraphs produce nothing."""
        content = self._render_inline_content(node.children)
        if content.strip():
            self._output.append(wrap_tag("p", content))

    def visit_heading(self, node: Heading) -> None:
        """Render a Heading node. Headings render even when empty."""
        level = node.level if isinstance(node.level, int) else DEFAULT_HEADING_LEVEL
        level = min(MAX_HEADING_LEVEL, max(MIN_HEADING_LEVEL, level))
        content = self._render_inline_content(node.children)
        self._output.append(wrap_tag(f"h{level}", content))

    def visit_link(self, node: Link) -> None:
        """Render a Link node."""
        url = node.url if isinstance(node.url, str) and node.url.strip() else DEFAULT_LINK_HREF
        attributes = f' href="{escape_html(url)}"'
        if node.new_tab:
            attributes += NEW_TAB_ATTRIBUTES
        content = self._render_inline_content(node.children)
        self._output.append(wrap_tag("a", content, attributes))

    def visit_list(self, node: List) -> None:
        """Render a List node."""
        tag = "ol" if node.ordered else "ul"
        self._output.append(wrap_tag(tag, self._render_inline_content(node.children)))

    def visit_list_item(self, node: ListItem) -> None:
        """Render a ListItem node."""
        self._output.append(wrap_tag("li", self._render_inline_content(node.children)))

    def visit_horizontal_rule(self, node: HorizontalRule) -> None:
        """Render a HorizontalRule node."""
        self._output.append("<hr />")

    def visit_block(self, node: Block) -> None:
        """Render a Block node as an image or a placeholder.

        Media block types with a resolved media object render as ``<img>``.
        Unresolved ids and every other block type render as a placeholder
        ``<div>`` carrying the block type and id.
        """
        block_type = node.block_type if isinstance(node.block_type, str) and node.block_type else DEFAULT_BLOCK_TYPE
        block_id = node.block_id if isinstance(node.block_id, str) else ""

        if block_type in self.options.media_block_types and isinstance(node.media, ResolvedMedia):
            media = coerce_media_object(node.media.media)
            if media is not None:
                self._output.append(self._render_image(media))
                return

        if block_type in self.options.media_block_types:
            logger.debug("Media block %r has no resolved media; rendering placeholder", block_id)
        self._output.append(self._render_placeholder(block_type, block_id))

    def visit_unknown(self, node: UnknownNode) -> None:
        """Render an UnknownNode as nothing."""
        pass

    def _render_image(self, media: MediaObject) -> str:
        """Build an ``<img>`` tag for a resolved media object.

        Parameters
        ----------
        media : MediaObject
            Normalized media with a non-blank URL

        Returns
        -------
        str
            Self-closing image tag

        """
        src = format_media_url(media.url, self.options.default_url_scheme, self.options.media_base_url)
        alt = media.alt or media.filename or ""

        attributes = f'src="{escape_html(src)}" alt="{escape_html(alt)}"'
        if media.width:
            attributes += f' width="{media.width}"'
        if media.height:
            attributes += f' height="{media.height}"'
        if self.options.image_style:
            attributes += f' style="{escape_html(self.options.image_style)}"'
        return f"<img {attributes} />"

    def _render_placeholder(self, block_type: str, block_id: str) -> str:
        """Build the visible marker for a block that cannot be rendered."""
        escaped_type = escape_html(block_type)
        attributes = f' data-block-type="{escaped_type}" data-block-id="{escape_html(block_id)}"'
        if self.options.placeholder_class:
            attributes += f' class="{escape_html(self.options.placeholder_class)}"'
        return wrap_tag("div", f"[{escaped_type}]", attributes)


__all__ = ["HtmlFragmentRenderer"]
