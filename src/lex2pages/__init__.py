#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/lex2pages/__init__.py
"""lex2pages - Lexical rich-text content to paginated HTML fragments.

lex2pages converts the editor state a headless CMS stores for a Lexical
rich-text field into flat, render-ready HTML fragments grouped into pages
for a paginated reading experience.

The pipeline has three layers:

- A tolerant loader turns the JSON tree into a typed AST; malformed nodes
  degrade to safe defaults instead of raising.
- An HTML fragment renderer maps each node to escaped, tag-balanced HTML,
  composing inline formats in a fixed order and resolving media embeds.
- A page segmenter groups the rendered top-level nodes into pages, split
  either at horizontal rules or at headings.

Requirements
------------
- Python 3.10+

Examples
--------
Paginate an article body at its dividers:

    >>> from lex2pages import parse_to_pages
    >>> pages = parse_to_pages(article["content"], policy="dividers")
    >>> pages[0].id, pages[0].html
    ('block-0', '<h1>Title</h1><p>Hello</p>')

Hydrate numeric media ids before rendering:

    >>> from lex2pages import collect_media_ids, to_ast
    >>> doc = to_ast(article["content"])
    >>> uploads = fetch_uploads(collect_media_ids(doc))
    >>> pages = parse_to_pages(doc, policy="headings", media_lookup=uploads)

See Also
--------
lex2pages.ast : AST node definitions and transforms
lex2pages.pagination : Page segmentation policies

"""

import logging

from lex2pages.api import parse_to_pages, render_children, render_node, to_ast
from lex2pages.ast.transforms import MediaResolver, collect_media_ids, resolve_media
from lex2pages.exceptions import InvalidOptionsError, Lex2PagesError, ParsingError, ValidationError
from lex2pages.options import HtmlFragmentRendererOptions, LexicalParserOptions, PaginationOptions
from lex2pages.pagination import Page, PageSegmenter, paginate
from lex2pages.parsers.lexical import LexicalParser
from lex2pages.renderers.html import HtmlFragmentRenderer

__version__ = "0.1.0"

# Library code never configures handlers; applications do
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "parse_to_pages",
    "render_node",
    "render_children",
    "to_ast",
    "paginate",
    "Page",
    "PageSegmenter",
    "LexicalParser",
    "HtmlFragmentRenderer",
    "MediaResolver",
    "collect_media_ids",
    "resolve_media",
    "HtmlFragmentRendererOptions",
    "LexicalParserOptions",
    "PaginationOptions",
    "Lex2PagesError",
    "ValidationError",
    "InvalidOptionsError",
    "ParsingError",
]
