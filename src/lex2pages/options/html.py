#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for rendering AST nodes to HTML fragments."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from lex2pages.constants import (
    DEFAULT_IMAGE_STYLE,
    DEFAULT_MEDIA_BLOCK_TYPES,
    DEFAULT_PLACEHOLDER_CLASS,
    DEFAULT_URL_SCHEME,
)
from lex2pages.exceptions import ValidationError
from lex2pages.options.base import BaseRendererOptions


# src/lex2pages/options/html.py
@dataclass(frozen=True)
class HtmlFragmentRendererOptions(BaseRendererOptions):
    """Configuration options for rendering AST nodes to HTML fragments.

    Parameters
    ----------
    media_block_types : tuple of str, default ("mediaBlock",)
        Block types treated as image embeds when their media is resolved.
    default_url_scheme : str, default "https"
        Scheme prefixed to media URLs that have none.
    media_base_url : str or None, default None
        Origin joined to root-relative media URLs (``/media/x.png``).
        When None, root-relative URLs get the default scheme prefix like
        any other scheme-less URL.
    image_style : str, default "display:block;max-width:100%;height:auto;"
        Inline style applied to ``<img>`` so images never overflow their
        container. An empty string omits the attribute.
    placeholder_class : str, default "block-placeholder"
        CSS class on the ``<div>`` emitted for unsupported blocks. An empty
        string omits the attribute.

    Examples
    --------
        >>> options = HtmlFragmentRendererOptions(
        ...     media_block_types=("mediaBlock", "imageBlock"),
        ...     media_base_url="https://cms.example.com",
        ... )

    """

    media_block_types: tuple[str, ...] = field(
        default=DEFAULT_MEDIA_BLOCK_TYPES,
        metadata={"help": "Block types rendered as <img> when media is resolved", "importance": "core"},
    )
    default_url_scheme: str = field(
        default=DEFAULT_URL_SCHEME,
        metadata={"help": "Scheme prefixed to media URLs without one", "importance": "advanced"},
    )
    media_base_url: Optional[str] = field(
        default=None,
        metadata={"help": "Origin joined to root-relative media URLs", "importance": "core"},
    )
    image_style: str = field(
        default=DEFAULT_IMAGE_STYLE,
        metadata={"help": "Inline style attribute for <img> tags", "importance": "advanced"},
    )
    placeholder_class: str = field(
        default=DEFAULT_PLACEHOLDER_CLASS,
        metadata={"help": "CSS class for unsupported block placeholders", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate and normalize field values.

        Raises
        ------
        ValidationError
            If the URL scheme is empty or contains separators.

        """
        super().__post_init__()
        # Accept any iterable of names (lists come from CLI/JSON config)
        if isinstance(self.media_block_types, str):
            object.__setattr__(self, "media_block_types", (self.media_block_types,))
        elif not isinstance(self.media_block_types, tuple):
            object.__setattr__(self, "media_block_types", tuple(self.media_block_types))

        scheme = self.default_url_scheme
        if not scheme or not scheme.isalnum():
            raise ValidationError(
                f"default_url_scheme must be a bare scheme name such as 'https', got {scheme!r}",
                parameter_name="default_url_scheme",
                parameter_value=scheme,
            )
