#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/lex2pages/utils/media.py
"""Media reference helpers.

Upload fields in a Lexical block arrive in one of two shapes depending on
how deeply the CMS populated the response: a bare numeric id, or a full
upload document. These helpers turn either shape into the typed
``MediaReference`` variant and format media URLs for output.

"""

from __future__ import annotations

import logging
import math
import re
from typing import Any, Mapping, Optional

from lex2pages.ast.nodes import MediaObject, MediaReference, ResolvedMedia, UnresolvedMedia
from lex2pages.constants import DEFAULT_URL_SCHEME, MAX_NUMERIC_DIGITS

logger = logging.getLogger(__name__)

_SCHEME_RE = re.compile(r"^(?:[a-zA-Z][a-zA-Z0-9+.\-]*://|data:|blob:)", re.IGNORECASE)
_NUMERIC_CEILING = 10**MAX_NUMERIC_DIGITS


def _parse_decimal(value: str) -> Optional[int]:
    """Parse a digit-only string, rejecting runs too long to be a real id or size."""
    stripped = value.strip()
    if not stripped.isdecimal() or len(stripped) > MAX_NUMERIC_DIGITS:
        return None
    return int(stripped)


def _bounded_int(value: int) -> Optional[int]:
    return value if 0 < value < _NUMERIC_CEILING else None


def coerce_dimension(value: Any) -> Optional[int]:
    """Coerce a width/height value to a positive int, or None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return _bounded_int(value)
    if isinstance(value, float):
        return _bounded_int(int(value)) if math.isfinite(value) and value >= 1 else None
    if isinstance(value, str):
        number = _parse_decimal(value)
        return _bounded_int(number) if number is not None else None
    return None


def _coerce_optional_str(value: Any) -> Optional[str]:
    if isinstance(value, str) and value:
        return value
    return None


def _build_media_object(url: Any, width: Any, height: Any, alt: Any, filename: Any) -> Optional[MediaObject]:
    if not isinstance(url, str) or not url.strip():
        return None
    return MediaObject(
        url=url.strip(),
        width=coerce_dimension(width),
        height=coerce_dimension(height),
        alt=_coerce_optional_str(alt),
        filename=_coerce_optional_str(filename),
    )


def coerce_media_object(value: Any) -> Optional[MediaObject]:
    """Build a clean ``MediaObject`` from a mapping or an existing instance.

    Existing instances are rebuilt field by field, so a hand-made
    ``MediaObject`` with mistyped fields is normalized the same way as a
    mapping from the CMS.

    Parameters
    ----------
    value : Any
        A ``MediaObject``, or a mapping with ``url`` and optional
        ``width``, ``height``, ``alt`` and ``filename`` keys

    Returns
    -------
    MediaObject or None
        None when the value is not a mapping or has no usable URL

    """
    if isinstance(value, MediaObject):
        return _build_media_object(value.url, value.width, value.height, value.alt, value.filename)
    if not isinstance(value, Mapping):
        return None
    return _build_media_object(
        value.get("url"), value.get("width"), value.get("height"), value.get("alt"), value.get("filename")
    )


def _coerce_media_id(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if 0 <= value < _NUMERIC_CEILING else None
    if isinstance(value, str):
        return _parse_decimal(value)
    return None


def coerce_media_reference(value: Any) -> Optional[MediaReference]:
    """Turn a raw ``media`` field into a typed media reference.

    Numeric ids (and digit-only strings) become ``UnresolvedMedia``; mappings
    with a URL become ``ResolvedMedia``. Anything else, including ids too
    long to be real, yields None.

    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (UnresolvedMedia, ResolvedMedia)):
        return value
    if isinstance(value, (int, str)):
        media_id = _coerce_media_id(value)
        if media_id is not None:
            return UnresolvedMedia(media_id=media_id)
        logger.debug("Ignoring media id that is not a usable number")
        return None

    media = coerce_media_object(value)
    if media is not None:
        return ResolvedMedia(media=media)

    raw_id = value.get("id") if isinstance(value, Mapping) else None
    if isinstance(raw_id, int):
        media_id = _coerce_media_id(raw_id)
        if media_id is not None:
            # Populated object without a URL, e.g. an upload that is still processing
            return UnresolvedMedia(media_id=media_id)

    logger.debug("Ignoring unrecognized media reference of type %s", type(value).__name__)
    return None


def has_url_scheme(url: str) -> bool:
    """Return True if the URL starts with ``scheme://`` or is a data/blob URL."""
    return bool(_SCHEME_RE.match(url))


def format_media_url(url: str, scheme: str = DEFAULT_URL_SCHEME, base_url: Optional[str] = None) -> str:
    """Produce an absolute media URL.

    Parameters
    ----------
    url : str
        Raw media URL
    scheme : str, default "https"
        Scheme prefixed when the URL has none
    base_url : str or None, default None
        Origin joined to root-relative URLs (``/media/x.png``)

    Returns
    -------
    str
        The URL with a scheme. The result is not HTML-escaped.

    Examples
    --------
    >>> format_media_url("cdn.example.com/x.png")
    'https://cdn.example.com/x.png'
    >>> format_media_url("//cdn.example.com/x.png")
    'https://cdn.example.com/x.png'
    >>> format_media_url("/media/x.png", base_url="https://cms.example.com/")
    'https://cms.example.com/media/x.png'

    """
    url = url.strip()
    if has_url_scheme(url):
        return url
    if url.startswith("//"):
        return f"{scheme}:{url}"
    if base_url and url.startswith("/"):
        return f"{base_url.rstrip('/')}{url}"
    return f"{scheme}://{url}"


__all__ = [
    "coerce_dimension",
    "coerce_media_object",
    "coerce_media_reference",
    "has_url_scheme",
    "format_media_url",
]
