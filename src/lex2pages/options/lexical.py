#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for loading serialized Lexical editor state."""

from __future__ import annotations

from dataclasses import dataclass, field

from lex2pages.constants import DEFAULT_MAX_DEPTH
from lex2pages.exceptions import ValidationError
from lex2pages.options.base import BaseParserOptions


# src/lex2pages/options/lexical.py
@dataclass(frozen=True)
class LexicalParserOptions(BaseParserOptions):
    """Configuration options for converting a Lexical tree into the AST.

    Parameters
    ----------
    max_depth : int, default 100
        Maximum nesting depth below the root. Nodes nested deeper are dropped
        (with a warning) so adversarial input cannot exhaust the call stack
        during loading or rendering.

    """

    max_depth: int = field(
        default=DEFAULT_MAX_DEPTH,
        metadata={
            "help": "Maximum node nesting depth; deeper nodes are dropped",
            "type": int,
            "importance": "security",
        },
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges.

        Raises
        ------
        ValidationError
            If max_depth is not a positive integer.

        """
        super().__post_init__()
        if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int) or self.max_depth <= 0:
            raise ValidationError(
                f"max_depth must be a positive integer, got {self.max_depth!r}",
                parameter_name="max_depth",
                parameter_value=self.max_depth,
            )
