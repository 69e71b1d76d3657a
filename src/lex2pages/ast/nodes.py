#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/lex2pages/ast/nodes.py
"""AST node classes for Lexical document representation.

This module defines the closed node hierarchy that a serialized Lexical
editor state is loaded into. Each node supports the visitor pattern so that
rendering and transformation are kept separate from the node structure.

Node Hierarchy
--------------
Container nodes hold an ordered list of children:
    - Document, Paragraph, Heading, List, ListItem, Link

Leaf nodes:
    - Text (string payload plus an inline format bitmask)
    - HorizontalRule (divider, also used as a page boundary marker)
    - Block (embedded non-text content such as a media upload)
    - UnknownNode (any ``type`` this library does not recognize)

Media references on a Block are a tagged variant: either
``UnresolvedMedia`` (a bare numeric id) or ``ResolvedMedia`` wrapping a
``MediaObject``.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from typing import Any, Optional, Union

from lex2pages.constants import (
    DEFAULT_BLOCK_TYPE,
    DEFAULT_HEADING_LEVEL,
    DEFAULT_LINK_HREF,
)


# ============================================================================
# Media references
# ============================================================================


@dataclass(frozen=True)
class MediaObject:
    """A hydrated media upload.

    Parameters
    ----------
    url : str
        Location of the media file, possibly without a scheme
    width : int or None, default = None
        Intrinsic width in pixels
    height : int or None, default = None
        Intrinsic height in pixels
    alt : str or None, default = None
        Alternative text
    filename : str or None, default = None
        Original upload filename, used as alt text fallback

    """

    url: str
    width: Optional[int] = None
    height: Optional[int] = None
    alt: Optional[str] = None
    filename: Optional[str] = None


@dataclass(frozen=True)
class UnresolvedMedia:
    """Media reference that is still a bare numeric id."""

    media_id: int


@dataclass(frozen=True)
class ResolvedMedia:
    """Media reference that carries a full ``MediaObject``."""

    media: MediaObject


MediaReference = Union[UnresolvedMedia, ResolvedMedia]


class Node(ABC):
    """Base class for all AST nodes.

    All document nodes inherit from this base class and support the visitor
    pattern for traversal and rendering.

    """

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


# ============================================================================
# Container nodes
# ============================================================================


@dataclass
class Document(Node):
    """Root document node; its children are the top-level blocks.

    Parameters
    ----------
    children : list of Node, default = empty list
        Top-level nodes in document order

    """

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this document."""
        return visitor.visit_document(self)


@dataclass
class Paragraph(Node):
    """Paragraph node holding inline children."""

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this paragraph."""
        return visitor.visit_paragraph(self)


@dataclass
class Heading(Node):
    """Heading node.

    Parameters
    ----------
    level : int, default = 1
        Heading level (1-6)
    children : list of Node, default = empty list
        Inline content of the heading

    """

    level: int = DEFAULT_HEADING_LEVEL
    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this heading."""
        return visitor.visit_heading(self)


@dataclass
class List(Node):
    """Ordered or unordered list node.

    Parameters
    ----------
    ordered : bool, default = False
        True renders as ``<ol>``, False as ``<ul>``
    children : list of Node, default = empty list
        List items (any node is accepted and rendered in place)

    """

    ordered: bool = False
    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list."""
        return visitor.visit_list(self)


@dataclass
class ListItem(Node):
    """List item node."""

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list item."""
        return visitor.visit_list_item(self)


@dataclass
class Link(Node):
    """Hyperlink node.

    Parameters
    ----------
    url : str, default = "#"
        Link target (unescaped)
    new_tab : bool, default = False
        Open the link in a new browsing context
    children : list of Node, default = empty list
        Link text content

    """

    url: str = DEFAULT_LINK_HREF
    new_tab: bool = False
    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this link."""
        return visitor.visit_link(self)


# ============================================================================
# Leaf nodes
# ============================================================================


@dataclass
class Text(Node):
    """Text run with an inline format bitmask.

    Parameters
    ----------
    content : str, default = ""
        Raw (unescaped) text
    format : int, default = 0
        Bitmask of ``FORMAT_*`` constants; unknown bits are ignored

    """

    content: str = ""
    format: int = 0

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this text run."""
        return visitor.visit_text(self)

    def has_format(self, bit: int) -> bool:
        """Return True if the given format bit is set."""
        return bool(self.format & bit)


@dataclass
class HorizontalRule(Node):
    """Horizontal divider."""

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this divider."""
        return visitor.visit_horizontal_rule(self)


@dataclass
class Block(Node):
    """Embedded non-text content.

    Parameters
    ----------
    block_type : str, default = "custom-block"
        Block discriminator from the field bag (``blockType``)
    block_id : str, default = ""
        Block instance id from the field bag (``id``)
    media : MediaReference or None, default = None
        Media reference, when the field bag carries one
    fields : dict, default = empty dict
        The remaining raw field bag, kept for custom visitors

    """

    block_type: str = DEFAULT_BLOCK_TYPE
    block_id: str = ""
    media: Optional[MediaReference] = None
    fields: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this block."""
        return visitor.visit_block(self)

    def with_media(self, media: MediaReference) -> Block:
        """Return a copy of this block with a different media reference."""
        return replace(self, media=media)


@dataclass
class UnknownNode(Node):
    """Placeholder for a node type this library does not recognize.

    Parameters
    ----------
    node_type : str, default = ""
        The unrecognized ``type`` value, kept for diagnostics

    """

    node_type: str = ""

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node."""
        return visitor.visit_unknown(self)


CONTAINER_TYPES: tuple[type[Node], ...] = (Document, Paragraph, Heading, List, ListItem, Link)


def get_node_children(node: Node) -> list[Node]:
    """Return the children of a container node, or an empty list for leaves."""
    if isinstance(node, CONTAINER_TYPES):
        return node.children  # type: ignore[attr-defined]
    return []


__all__ = [
    "MediaObject",
    "UnresolvedMedia",
    "ResolvedMedia",
    "MediaReference",
    "Node",
    "Document",
    "Paragraph",
    "Heading",
    "List",
    "ListItem",
    "Link",
    "Text",
    "HorizontalRule",
    "Block",
    "UnknownNode",
    "CONTAINER_TYPES",
    "get_node_children",
]
