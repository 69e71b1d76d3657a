#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/lex2pages/utils/html_utils.py
"""HTML-related utility helpers."""

from __future__ import annotations

from lex2pages.constants import FORMAT_TAG_ORDER

_ESCAPE_TABLE = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&#39;",
    }
)


def escape_html(text: str, *, enabled: bool = True) -> str:
    """Escape ``& < > " '`` when enabled.

    Single quotes become ``&#39;`` so the output is identical to what the
    CMS preview produces.
    """
    if not enabled:
        return text
    return text.translate(_ESCAPE_TABLE)


def wrap_tag(tag: str, content: str, attributes: str = "") -> str:
    """Wrap content in an open/close tag pair."""
    return f"<{tag}{attributes}>{content}</{tag}>"


def apply_text_format(html: str, format_bits: int) -> str:
    """Wrap already-escaped text in inline formatting tags.

    Tags nest in a fixed order, innermost first: code, strong, em, u, s.
    Bits outside the known set are ignored.

    >>> apply_text_format("hi", 3)
    '<em><strong>hi</strong></em>'

    """
    for bit, tag in FORMAT_TAG_ORDER:
        if format_bits & bit:
            html = wrap_tag(tag, html)
    return html


__all__ = ["escape_html", "wrap_tag", "apply_text_format"]
