#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/lex2pages/renderers/base.py
"""Base classes for AST renderers.

This module defines the abstract base class renderers inherit from, plus the
mixin that captures the output of a run of child nodes as a string.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Iterable, Optional, Union

from lex2pages.ast import Document
from lex2pages.ast.nodes import Node
from lex2pages.exceptions import InvalidOptionsError
from lex2pages.options.base import BaseRendererOptions
from lex2pages.utils.io_utils import write_text


class BaseRenderer(ABC):
    """Abstract base class for all AST renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render_to_string(self, doc: Document) -> str:
        """Render the AST to a string.

        Parameters
        ----------
        doc : Document
            AST Document node to render

        Returns
        -------
        str
            Rendered document

        """
        pass

    def render(self, doc: Document, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render the AST and write it to a file path or stream.

        Parameters
        ----------
        doc : Document
            AST Document node to render
        output : str, Path, IO[bytes], or IO[str]
            Output destination

        """
        write_text(self.render_to_string(doc), output)

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )


class InlineContentMixin:
    """Mixin providing the capture-children-as-string pattern.

    The implementing class must have:
    - A `_output` attribute (list[str]) for accumulating output
    - Visitor methods that append to `_output`

    Examples
    --------
        >>> class MyRenderer(NodeVisitor, InlineContentMixin, BaseRenderer):
        ...     def visit_paragraph(self, node):
        ...         content = self._render_inline_content(node.children)
        ...         self._output.append(f"<p>{content}</p>")

    """

    _output: list[str]  # Type hint for the required attribute

    def _render_inline_content(self, content: Optional[Iterable[Optional[Node]]]) -> str:
        """Render a sequence of nodes to a string.

        Output is captured in a fresh buffer and the caller's buffer is
        restored afterwards. ``None`` (for the sequence or an entry in it)
        and anything that is not a Node render as nothing.

        Parameters
        ----------
        content : iterable of Node or None
            Nodes to render, in order

        Returns
        -------
        str
            Concatenated output with no separator

        """
        saved_output = self._output
        self._output = []

        for node in content or ():
            if isinstance(node, Node):
                node.accept(self)

        result = "".join(self._output)
        self._output = saved_output
        return result
