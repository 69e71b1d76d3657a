#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/lex2pages/options/base.py
"""Base classes for parser, renderer and pagination options.

This module defines the foundation classes for the option dataclasses used
throughout the lex2pages pipeline.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities.

    Adds the ability to create modified copies of frozen dataclass
    instances, which is useful for immutable configuration objects.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for all parser options.

    Parsers load serialized input into the typed AST.

    Notes
    -----
    Subclasses define format-specific options as frozen dataclass fields and
    validate them in ``__post_init__``.

    """

    def __post_init__(self) -> None:
        """Validate field values. Nothing to check at this level."""
        pass


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options.

    Renderers convert AST nodes into an output format.

    """

    def __post_init__(self) -> None:
        """Validate field values. Nothing to check at this level."""
        pass
