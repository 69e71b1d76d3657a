#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Builders for raw Lexical editor state used across the test suite."""


def text(value, fmt=0):
    """Build a raw Lexical text node."""
    return {"type": "text", "text": value, "format": fmt}


def paragraph(*children):
    """Build a raw Lexical paragraph node."""
    return {"type": "paragraph", "children": list(children)}


def heading(tag, *children):
    """Build a raw Lexical heading node."""
    return {"type": "heading", "tag": tag, "children": list(children)}


def divider():
    """Build a raw Lexical horizontal rule."""
    return {"type": "horizontalrule"}


def media_block(block_id, media, block_type="mediaBlock"):
    """Build a raw Lexical block node carrying a media field."""
    return {"type": "block", "fields": {"id": block_id, "blockType": block_type, "media": media}}


def editor_state(*children):
    """Wrap top-level nodes in a serialized editor state."""
    return {"root": {"type": "root", "children": list(children)}}
