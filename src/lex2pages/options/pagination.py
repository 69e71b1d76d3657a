#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for page segmentation."""

from __future__ import annotations

from dataclasses import dataclass, field

from lex2pages.constants import (
    DEFAULT_LEADING_CONTENT,
    DEFAULT_PAGE_ID_PREFIX,
    LEADING_CONTENT_MODES,
    PAGINATION_POLICIES,
    LeadingContentMode,
    PaginationPolicy,
)
from lex2pages.exceptions import ValidationError
from lex2pages.options.base import CloneFrozenMixin


# src/lex2pages/options/pagination.py
@dataclass(frozen=True)
class PaginationOptions(CloneFrozenMixin):
    """Configuration options for grouping rendered nodes into pages.

    The policy has no default: dividers and headings produce different page
    sets for the same document, so the embedding application chooses.

    Parameters
    ----------
    policy : {"dividers", "headings"}
        - "dividers": top-level horizontal rules are invisible page breaks
        - "headings": every top-level heading starts a new page
    id_prefix : str, default "block-"
        Prefix for generated page ids (``block-0``, ``block-1``, ...)
    leading_content : {"own_page", "merge", "drop"}, default "own_page"
        Headings policy only. What happens to body content that precedes
        the first heading:
        - "own_page": it becomes a page of its own
        - "merge": it is prepended to the first heading's page
        - "drop": it is discarded

    """

    policy: PaginationPolicy = field(
        metadata={"help": "Page boundary policy: dividers or headings", "importance": "core"},
    )
    id_prefix: str = field(
        default=DEFAULT_PAGE_ID_PREFIX,
        metadata={"help": "Prefix for generated page ids", "importance": "advanced"},
    )
    leading_content: LeadingContentMode = field(
        default=DEFAULT_LEADING_CONTENT,
        metadata={
            "help": "Headings policy: handling of content before the first heading",
            "choices": list(LEADING_CONTENT_MODES),
            "importance": "advanced",
        },
    )

    def __post_init__(self) -> None:
        """Validate enumerated fields.

        Raises
        ------
        ValidationError
            If policy or leading_content is not a recognized value.

        """
        if self.policy not in PAGINATION_POLICIES:
            raise ValidationError(
                f"Unknown pagination policy {self.policy!r}; expected one of {', '.join(PAGINATION_POLICIES)}",
                parameter_name="policy",
                parameter_value=self.policy,
            )
        if self.leading_content not in LEADING_CONTENT_MODES:
            raise ValidationError(
                f"Unknown leading_content mode {self.leading_content!r}; "
                f"expected one of {', '.join(LEADING_CONTENT_MODES)}",
                parameter_name="leading_content",
                parameter_value=self.leading_content,
            )
