#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Parsers that load serialized editor state into the lex2pages AST."""

from lex2pages.parsers.base import BaseParser
from lex2pages.parsers.lexical import LexicalParser

__all__ = ["BaseParser", "LexicalParser"]
