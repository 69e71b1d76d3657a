#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the lex2pages library.

This module centralizes hardcoded values, magic numbers, and default
configuration constants used across the library.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Text Formatting - Lexical inline format bitmask
3. Rendering Defaults - Fallback values used when node fields are missing
4. Pagination Defaults - Page segmentation settings
5. Parsing Defaults - Input loading and hardening limits
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

PaginationPolicy = Literal["dividers", "headings"]
LeadingContentMode = Literal["own_page", "merge", "drop"]
OutputFormat = Literal["json", "html"]

PAGINATION_POLICIES: tuple[str, ...] = ("dividers", "headings")
LEADING_CONTENT_MODES: tuple[str, ...] = ("own_page", "merge", "drop")

# =============================================================================
# Text Formatting
# =============================================================================

# Lexical stores inline formatting as a bitmask on text nodes
FORMAT_BOLD = 1
FORMAT_ITALIC = 2
FORMAT_UNDERLINE = 4
FORMAT_STRIKETHROUGH = 8
FORMAT_CODE = 16

# Innermost tag first; the order is fixed so output is stable for any bit combination
FORMAT_TAG_ORDER: tuple[tuple[int, str], ...] = (
    (FORMAT_CODE, "code"),
    (FORMAT_BOLD, "strong"),
    (FORMAT_ITALIC, "em"),
    (FORMAT_UNDERLINE, "u"),
    (FORMAT_STRIKETHROUGH, "s"),
)

# =============================================================================
# Rendering Defaults
# =============================================================================

DEFAULT_LINK_HREF = "#"
DEFAULT_BLOCK_TYPE = "custom-block"
DEFAULT_HEADING_LEVEL = 1
MIN_HEADING_LEVEL = 1
MAX_HEADING_LEVEL = 6
DEFAULT_MEDIA_BLOCK_TYPES: tuple[str, ...] = ("mediaBlock",)
DEFAULT_URL_SCHEME = "https"
DEFAULT_IMAGE_STYLE = "display:block;max-width:100%;height:auto;"
DEFAULT_PLACEHOLDER_CLASS = "block-placeholder"
NEW_TAB_ATTRIBUTES = ' target="_blank" rel="noopener noreferrer"'

# =============================================================================
# Pagination Defaults
# =============================================================================

DEFAULT_PAGE_ID_PREFIX = "block-"
DEFAULT_LEADING_CONTENT: LeadingContentMode = "own_page"

# =============================================================================
# Parsing Defaults
# =============================================================================

DEFAULT_MAX_DEPTH = 100

# Longest digit run accepted for numeric ids and image dimensions
MAX_NUMERIC_DIGITS = 18

# Node type discriminators as they appear in serialized Lexical state
NODE_TYPE_TEXT = "text"
NODE_TYPE_PARAGRAPH = "paragraph"
NODE_TYPE_HEADING = "heading"
NODE_TYPE_LIST = "list"
NODE_TYPE_LIST_ITEM = "listitem"
NODE_TYPE_LINK = "link"
NODE_TYPE_HORIZONTAL_RULE = "horizontalrule"
NODE_TYPE_BLOCK = "block"

# =============================================================================
# Environment Variables (CLI only)
# =============================================================================

ENV_POLICY = "LEX2PAGES_POLICY"
ENV_LOG_LEVEL = "LEX2PAGES_LOG_LEVEL"
