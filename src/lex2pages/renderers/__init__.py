#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderers that turn the lex2pages AST into output formats."""

from lex2pages.renderers.base import BaseRenderer, InlineContentMixin
from lex2pages.renderers.html import HtmlFragmentRenderer

__all__ = ["BaseRenderer", "InlineContentMixin", "HtmlFragmentRenderer"]
