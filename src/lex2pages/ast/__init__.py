#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/lex2pages/ast/__init__.py
"""Typed document model for Lexical editor content.

The module consists of:

- nodes: the closed set of node classes a Lexical tree is loaded into
- visitors: visitor pattern base class used by renderers and transforms
- transforms: tree-rebuilding transformers, including media resolution
  (import ``lex2pages.ast.transforms`` directly)

Examples
--------
    >>> from lex2pages.ast import Document, Heading, Paragraph, Text
    >>> doc = Document(children=[
    ...     Heading(level=1, children=[Text(content="Title")]),
    ...     Paragraph(children=[Text(content="Hello", format=1)]),
    ... ])

"""

from __future__ import annotations

from lex2pages.ast.nodes import (
    CONTAINER_TYPES,
    Block,
    Document,
    Heading,
    HorizontalRule,
    Link,
    List,
    ListItem,
    MediaObject,
    MediaReference,
    Node,
    Paragraph,
    ResolvedMedia,
    Text,
    UnknownNode,
    UnresolvedMedia,
    get_node_children,
)
from lex2pages.ast.visitors import NodeVisitor

__all__ = [
    "CONTAINER_TYPES",
    "Block",
    "Document",
    "Heading",
    "HorizontalRule",
    "Link",
    "List",
    "ListItem",
    "MediaObject",
    "MediaReference",
    "Node",
    "NodeVisitor",
    "Paragraph",
    "ResolvedMedia",
    "Text",
    "UnknownNode",
    "UnresolvedMedia",
    "get_node_children",
]
