#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/lex2pages/utils/__init__.py
"""Utility modules for the lex2pages package.

This package contains HTML escaping and formatting helpers, media reference
coercion and URL formatting, and small decorators shared by the pipeline.
"""

from lex2pages.utils.html_utils import apply_text_format, escape_html, wrap_tag
from lex2pages.utils.media import coerce_media_object, coerce_media_reference, format_media_url, has_url_scheme

__all__ = [
    "apply_text_format",
    "escape_html",
    "wrap_tag",
    "coerce_media_object",
    "coerce_media_reference",
    "format_media_url",
    "has_url_scheme",
]
