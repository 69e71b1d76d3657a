#  Copyright (c) 2025 Tom Villani, Ph.D.
"""High-level entry points for the lex2pages library.

These functions wire the loader, the optional media resolution step, the
HTML fragment renderer and the page segmenter together. They accept raw
editor state (a decoded mapping, JSON bytes, or a path to a JSON file) as
well as already-built AST nodes.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any, Optional

from lex2pages.ast.nodes import Document, Node
from lex2pages.ast.transforms import MediaLookup, resolve_media
from lex2pages.constants import PaginationPolicy
from lex2pages.exceptions import ValidationError
from lex2pages.options.html import HtmlFragmentRendererOptions
from lex2pages.options.lexical import LexicalParserOptions
from lex2pages.options.pagination import PaginationOptions
from lex2pages.pagination import Page, PageSegmenter
from lex2pages.parsers.lexical import LexicalParser
from lex2pages.renderers.html import HtmlFragmentRenderer
from lex2pages.utils.decorators import debug_timer

logger = logging.getLogger(__name__)


def to_ast(source: Any, parser_options: Optional[LexicalParserOptions] = None) -> Document:
    """Load editor state into a Document.

    Parameters
    ----------
    source : Document, Mapping, str, Path, IO, or bytes
        A Document is returned unchanged; anything else goes through
        ``LexicalParser.parse``
    parser_options : LexicalParserOptions, optional
        Loader options

    Returns
    -------
    Document
        AST Document node

    Raises
    ------
    ParsingError
        If the source cannot be read or is not valid JSON

    """
    if isinstance(source, Document):
        return source
    return LexicalParser(parser_options).parse(source)


def _coerce_node(node: Any, parser: LexicalParser) -> Optional[Node]:
    if node is None or isinstance(node, Node):
        return node
    return parser.convert_node(node)


def render_node(
    node: Any,
    options: Optional[HtmlFragmentRendererOptions] = None,
    parser_options: Optional[LexicalParserOptions] = None,
) -> str:
    """Render one node, typed or raw, to an HTML fragment.

    Parameters
    ----------
    node : Node, Mapping, or None
        A typed AST node or a raw Lexical node mapping
    options : HtmlFragmentRendererOptions, optional
        Rendering options
    parser_options : LexicalParserOptions, optional
        Loader options applied to raw mappings

    Returns
    -------
    str
        HTML fragment; empty for None, unknown types and non-node values

    Examples
    --------
    >>> render_node({"type": "text", "text": "hi", "format": 3})
    '<em><strong>hi</strong></em>'

    """
    parser = LexicalParser(parser_options)
    return HtmlFragmentRenderer(options).render_node(_coerce_node(node, parser))


def render_children(
    nodes: Any,
    options: Optional[HtmlFragmentRendererOptions] = None,
    parser_options: Optional[LexicalParserOptions] = None,
) -> str:
    """Render a sequence of nodes, typed or raw, and concatenate the fragments.

    Parameters
    ----------
    nodes : iterable of Node or Mapping, or None
        Nodes in document order; None or a non-sequence renders as ""
    options : HtmlFragmentRendererOptions, optional
        Rendering options
    parser_options : LexicalParserOptions, optional
        Loader options applied to raw mappings

    Returns
    -------
    str
        Fragments joined with no separator

    """
    if not isinstance(nodes, Iterable) or isinstance(nodes, (str, bytes, Mapping)):
        return ""
    parser = LexicalParser(parser_options)
    return HtmlFragmentRenderer(options).render_children([_coerce_node(node, parser) for node in nodes])


def _resolve_pagination_options(
    policy: Optional[PaginationPolicy], pagination_options: Optional[PaginationOptions]
) -> PaginationOptions:
    if pagination_options is None:
        if policy is None:
            raise ValidationError(
                "A pagination policy is required: pass policy='dividers' or policy='headings'",
                parameter_name="policy",
            )
        return PaginationOptions(policy=policy)
    if policy is not None and policy != pagination_options.policy:
        return pagination_options.create_updated(policy=policy)
    return pagination_options


def parse_to_pages(
    source: Any,
    *,
    policy: Optional[PaginationPolicy] = None,
    parser_options: Optional[LexicalParserOptions] = None,
    renderer_options: Optional[HtmlFragmentRendererOptions] = None,
    pagination_options: Optional[PaginationOptions] = None,
    media_lookup: Optional[MediaLookup] = None,
) -> list[Page]:
    """Convert Lexical editor state into an ordered list of HTML pages.

    Parameters
    ----------
    source : Document, Mapping, str, Path, IO, or bytes
        Editor state (``{"root": {"children": [...]}}``) or a JSON source
    policy : {"dividers", "headings"}, optional
        Page boundary policy. Required unless ``pagination_options`` is
        given; when both are given, ``policy`` wins.
    parser_options : LexicalParserOptions, optional
        Loader options
    renderer_options : HtmlFragmentRendererOptions, optional
        Rendering options
    pagination_options : PaginationOptions, optional
        Segmentation options
    media_lookup : Mapping or Callable, optional
        Used to hydrate numeric media ids before rendering, see
        ``lex2pages.ast.transforms.MediaResolver``

    Returns
    -------
    list of Page
        Pages in document order

    Raises
    ------
    ValidationError
        If no pagination policy was selected
    ParsingError
        If the source cannot be read or is not valid JSON

    Examples
    --------
    >>> content = {"root": {"children": [
    ...     {"type": "paragraph", "children": [{"type": "text", "text": "Hello"}]},
    ...     {"type": "horizontalrule"},
    ...     {"type": "paragraph", "children": [{"type": "text", "text": "World"}]},
    ... ]}}
    >>> [page.html for page in parse_to_pages(content, policy="dividers")]
    ['<p>Hello</p>', '<p>World</p>']

    """
    options = _resolve_pagination_options(policy, pagination_options)

    with debug_timer(logger, "Converting editor state to pages"):
        document = to_ast(source, parser_options)
        if media_lookup is not None:
            document = resolve_media(document, media_lookup)

        segmenter = PageSegmenter(options, HtmlFragmentRenderer(renderer_options))
        return segmenter.segment_document(document)


__all__ = ["to_ast", "render_node", "render_children", "parse_to_pages"]
