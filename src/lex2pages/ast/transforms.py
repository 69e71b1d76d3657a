#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/lex2pages/ast/transforms.py
"""AST transformation utilities.

Transformers build a new tree and never mutate the input. The main use is
media hydration: a CMS response often carries uploads as bare numeric ids,
and ``MediaResolver`` swaps those for full ``MediaObject`` values taken from
a caller-supplied lookup so the renderer can emit ``<img>`` tags.

Examples
--------
Resolve media from a dict fetched ahead of time:

    >>> ids = collect_media_ids(doc)
    >>> uploads = {m["id"]: m for m in fetch_uploads(ids)}
    >>> doc = resolve_media(doc, uploads)

"""

from __future__ import annotations

import copy
import logging
from typing import Any, Callable, Mapping, Optional, Union

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
    UnresolvedMedia,
)
from lex2pages.ast.visitors import NodeVisitor
from lex2pages.utils.media import coerce_media_object

logger = logging.getLogger(__name__)

MediaLookup = Union[Mapping[Any, Any], Callable[[int], Any]]


class NodeTransformer(NodeVisitor):
    """Base class for transforming AST nodes.

    Subclasses override ``visit_*`` methods and return a replacement node,
    or None to remove the node from its parent.

    Examples
    --------
    >>> class UppercaseTransformer(NodeTransformer):
    ...     def visit_text(self, node):
    ...         return Text(content=node.content.upper(), format=node.format)
    >>>
    >>> new_doc = UppercaseTransformer().transform(doc)

    """

    def transform(self, node: Node) -> Node | None:
        """Transform an AST node.

        Parameters
        ----------
        node : Node
            Node to transform

        Returns
        -------
        Node or None
            Transformed node or None to remove

        """
        return node.accept(self)

    def _transform_children(self, children: list[Node]) -> list[Node]:
        """Transform a list of child nodes, dropping removed ones."""
        result = []
        for child in children:
            transformed = self.transform(child)
            if transformed is not None:
                result.append(transformed)
        return result

    def visit_document(self, node: Document) -> Document:
        """Transform a Document node."""
        return Document(children=self._transform_children(node.children))

    def visit_paragraph(self, node: Paragraph) -> Paragraph:
        """Transform a Paragraph node."""
        return Paragraph(children=self._transform_children(node.children))

    def visit_heading(self, node: Heading) -> Heading:
        """Transform a Heading node."""
        return Heading(level=node.level, children=self._transform_children(node.children))

    def visit_list(self, node: List) -> List:
        """Transform a List node."""
        return List(ordered=node.ordered, children=self._transform_children(node.children))

    def visit_list_item(self, node: ListItem) -> ListItem:
        """Transform a ListItem node."""
        return ListItem(children=self._transform_children(node.children))

    def visit_link(self, node: Link) -> Link:
        """Transform a Link node."""
        return Link(url=node.url, new_tab=node.new_tab, children=self._transform_children(node.children))

    def visit_text(self, node: Text) -> Text:
        """Transform a Text node."""
        return copy.copy(node)

    def visit_horizontal_rule(self, node: HorizontalRule) -> HorizontalRule:
        """Transform a HorizontalRule node."""
        return HorizontalRule()

    def visit_block(self, node: Block) -> Block:
        """Transform a Block node."""
        return Block(
            block_type=node.block_type,
            block_id=node.block_id,
            media=node.media,
            fields=dict(node.fields),
        )

    def visit_unknown(self, node: UnknownNode) -> UnknownNode:
        """Transform an UnknownNode."""
        return copy.copy(node)


class MediaResolver(NodeTransformer):
    """Replace unresolved media ids with hydrated media objects.

    Parameters
    ----------
    lookup : Mapping or Callable
        Either a mapping from media id to a ``MediaObject`` or upload mapping,
        or a callable taking the id and returning one of those (or None).
        Ids the lookup does not know are left unresolved.

    """

    def __init__(self, lookup: MediaLookup):
        """Initialize the resolver with a media lookup."""
        self.lookup = lookup
        self.resolved_count = 0
        self.missing_ids: list[int] = []

    def _lookup(self, media_id: int) -> Optional[MediaObject]:
        if callable(self.lookup):
            raw = self.lookup(media_id)
        else:
            raw = self.lookup.get(media_id)
            if raw is None:
                # JSON object keys arrive as strings
                raw = self.lookup.get(str(media_id))
        return coerce_media_object(raw)

    def visit_block(self, node: Block) -> Block:
        """Resolve the block's media reference when it is a bare id."""
        block = super().visit_block(node)
        if not isinstance(block.media, UnresolvedMedia):
            return block

        media = self._lookup(block.media.media_id)
        if media is None:
            logger.debug("No media found for id %s in block %r", block.media.media_id, block.block_id)
            self.missing_ids.append(block.media.media_id)
            return block

        self.resolved_count += 1
        return block.with_media(ResolvedMedia(media=media))


class _MediaIdCollector(NodeVisitor):
    """Collect unresolved media ids in document order."""

    def __init__(self) -> None:
        self.ids: list[int] = []

    def _visit_children(self, children: list[Node]) -> None:
        for child in children:
            child.accept(self)

    def visit_document(self, node: Document) -> None:
        self._visit_children(node.children)

    def visit_paragraph(self, node: Paragraph) -> None:
        self._visit_children(node.children)

    def visit_heading(self, node: Heading) -> None:
        self._visit_children(node.children)

    def visit_list(self, node: List) -> None:
        self._visit_children(node.children)

    def visit_list_item(self, node: ListItem) -> None:
        self._visit_children(node.children)

    def visit_link(self, node: Link) -> None:
        self._visit_children(node.children)

    def visit_text(self, node: Text) -> None:
        pass

    def visit_horizontal_rule(self, node: HorizontalRule) -> None:
        pass

    def visit_block(self, node: Block) -> None:
        if isinstance(node.media, UnresolvedMedia) and node.media.media_id not in self.ids:
            self.ids.append(node.media.media_id)


def collect_media_ids(document: Node) -> list[int]:
    """Return the unresolved media ids in a tree, deduplicated, in document order.

    Parameters
    ----------
    document : Node
        Tree to inspect (usually a Document)

    Returns
    -------
    list of int
        Media ids a caller needs to fetch before calling ``resolve_media``

    """
    collector = _MediaIdCollector()
    document.accept(collector)
    return collector.ids


def resolve_media(document: Document, lookup: MediaLookup) -> Document:
    """Return a copy of the document with media ids hydrated from ``lookup``.

    Parameters
    ----------
    document : Document
        Document to resolve; it is not modified
    lookup : Mapping or Callable
        Media lookup, see ``MediaResolver``

    Returns
    -------
    Document
        New document with resolvable media references replaced

    """
    resolver = MediaResolver(lookup)
    result = resolver.transform(document)
    if resolver.missing_ids:
        logger.info("Left %d media reference(s) unresolved: %s", len(resolver.missing_ids), resolver.missing_ids)
    assert isinstance(result, Document)
    return result


__all__ = [
    "MediaLookup",
    "NodeTransformer",
    "MediaResolver",
    "collect_media_ids",
    "resolve_media",
]
