#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the lex2pages pipeline.

Each stage has its own frozen Options dataclass: loading
(``LexicalParserOptions``), rendering (``HtmlFragmentRendererOptions``) and
page segmentation (``PaginationOptions``).
"""

from __future__ import annotations

from lex2pages.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from lex2pages.options.html import HtmlFragmentRendererOptions
from lex2pages.options.lexical import LexicalParserOptions
from lex2pages.options.pagination import PaginationOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "HtmlFragmentRendererOptions",
    "LexicalParserOptions",
    "PaginationOptions",
]
