#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/lex2pages/ast/visitors.py
"""Visitor pattern implementation for AST traversal.

Visitors keep algorithms (rendering, media resolution, inspection) separate
from the node classes. Every node class in ``lex2pages.ast.nodes`` has a
matching ``visit_*`` method here.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from lex2pages.ast.nodes import (
    Block,
    Document,
    Heading,
    HorizontalRule,
    Link,
    List,
    ListItem,
    Paragraph,
    Text,
    UnknownNode,
)


class NodeVisitor(ABC):
    """Abstract base class for AST node visitors.

    Subclasses implement one ``visit_*`` method per node class. Unknown
    nodes get a concrete ``visit_unknown`` that returns None, so visitors
    only override it when they care about unrecognized content.

    Examples
    --------
    Count text runs:

        >>> class TextCounter(NodeVisitor):
        ...     def __init__(self):
        ...         self.count = 0
        ...     def visit_text(self, node):
        ...         self.count += 1
        ...     # remaining visit_* methods recurse into children

    """

    @abstractmethod
    def visit_document(self, node: Document) -> Any:
        """Visit a Document node."""
        pass

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node."""
        pass

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any:
        """Visit a Heading node."""
        pass

    @abstractmethod
    def visit_list(self, node: List) -> Any:
        """Visit a List node."""
        pass

    @abstractmethod
    def visit_list_item(self, node: ListItem) -> Any:
        """Visit a ListItem node."""
        pass

    @abstractmethod
    def visit_link(self, node: Link) -> Any:
        """Visit a Link node."""
        pass

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node."""
        pass

    @abstractmethod
    def visit_horizontal_rule(self, node: HorizontalRule) -> Any:
        """Visit a HorizontalRule node."""
        pass

    @abstractmethod
    def visit_block(self, node: Block) -> Any:
        """Visit a Block node."""
        pass

    def visit_unknown(self, node: UnknownNode) -> Any:
        """Visit an UnknownNode. Does nothing by default."""
        return None


__all__ = ["NodeVisitor"]
