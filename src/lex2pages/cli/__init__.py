#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/lex2pages/cli/__init__.py
"""Command-line interface for the lex2pages library.

Reads serialized Lexical editor state (a JSON file, or ``-`` for stdin) and
writes the resulting pages.

Environment Variable Support
----------------------------
``LEX2PAGES_POLICY`` and ``LEX2PAGES_LOG_LEVEL`` provide defaults for
``--policy`` and ``--log-level``. CLI arguments always override them.

Examples
--------
Paginate at dividers and print JSON::

    $ lex2pages article.json --policy dividers

Paginate at headings and write HTML sections to a file::

    $ lex2pages article.json --policy headings --format html --out pages.html

Preview pages in the terminal::

    $ cat article.json | lex2pages - --policy dividers --rich

"""

import argparse
import logging
import os
import sys

from lex2pages.api import parse_to_pages
from lex2pages.cli.output import format_pages, print_pages_table
from lex2pages.constants import (
    DEFAULT_LEADING_CONTENT,
    DEFAULT_MAX_DEPTH,
    DEFAULT_MEDIA_BLOCK_TYPES,
    ENV_LOG_LEVEL,
    ENV_POLICY,
    LEADING_CONTENT_MODES,
    PAGINATION_POLICIES,
)
from lex2pages.exceptions import Lex2PagesError
from lex2pages.logging_utils import configure_logging
from lex2pages.options import HtmlFragmentRendererOptions, LexicalParserOptions, PaginationOptions
from lex2pages.utils.io_utils import write_text

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 2

LOG_LEVEL_CHOICES = ("DEBUG", "INFO", "WARNING", "ERROR")


def _env_log_level() -> str:
    """Read the default log level from the environment, ignoring unknown names."""
    level = (os.environ.get(ENV_LOG_LEVEL) or "").strip().upper()
    return level if level in LOG_LEVEL_CHOICES else "WARNING"


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value!r}") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value!r}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser.

    Returns
    -------
    argparse.ArgumentParser
        Parser for the ``lex2pages`` command

    """
    parser = argparse.ArgumentParser(
        prog="lex2pages",
        description="Convert Lexical rich-text JSON into paginated HTML fragments.",
    )
    parser.add_argument("input", help="Path to a JSON file with the editor state, or '-' for stdin")
    parser.add_argument(
        "--policy",
        choices=PAGINATION_POLICIES,
        default=os.environ.get(ENV_POLICY),
        help=f"Page boundary policy (required; env: {ENV_POLICY})",
    )
    parser.add_argument("--out", "-o", help="Write output to this file instead of stdout")
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=("json", "html"),
        default="json",
        help="Output format (default: json)",
    )
    parser.add_argument("--rich", action="store_true", help="Print a page preview table instead of raw output")

    render_group = parser.add_argument_group("rendering options")
    render_group.add_argument("--media-base-url", help="Origin joined to root-relative media URLs")
    render_group.add_argument(
        "--media-block-type",
        dest="media_block_types",
        action="append",
        metavar="TYPE",
        help=f"Block type rendered as an image; repeatable (default: {', '.join(DEFAULT_MEDIA_BLOCK_TYPES)})",
    )

    page_group = parser.add_argument_group("pagination options")
    page_group.add_argument(
        "--leading-content",
        choices=LEADING_CONTENT_MODES,
        default=DEFAULT_LEADING_CONTENT,
        help="Headings policy: handling of content before the first heading",
    )
    page_group.add_argument(
        "--max-depth",
        type=_positive_int,
        default=DEFAULT_MAX_DEPTH,
        help=f"Maximum node nesting depth (default: {DEFAULT_MAX_DEPTH})",
    )

    log_group = parser.add_argument_group("logging")
    log_group.add_argument(
        "--log-level",
        choices=LOG_LEVEL_CHOICES,
        default=_env_log_level(),
        help=f"Logging level (default: WARNING; env: {ENV_LOG_LEVEL})",
    )
    log_group.add_argument("--log-file", help="Also write log output to this file")
    log_group.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")
    return parser


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging from command-line arguments; --trace wins over --log-level."""
    log_level = logging.DEBUG if parsed_args.trace else getattr(logging, parsed_args.log_level, logging.WARNING)
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def _build_options(
    parsed_args: argparse.Namespace,
) -> tuple[LexicalParserOptions, HtmlFragmentRendererOptions, PaginationOptions]:
    parser_options = LexicalParserOptions(max_depth=parsed_args.max_depth)

    renderer_kwargs = {}
    if parsed_args.media_base_url:
        renderer_kwargs["media_base_url"] = parsed_args.media_base_url
    if parsed_args.media_block_types:
        renderer_kwargs["media_block_types"] = tuple(parsed_args.media_block_types)
    renderer_options = HtmlFragmentRendererOptions(**renderer_kwargs)

    pagination_options = PaginationOptions(policy=parsed_args.policy, leading_content=parsed_args.leading_content)
    return parser_options, renderer_options, pagination_options


def main(args: list[str] | None = None) -> int:
    """Execute the CLI entry point.

    Parameters
    ----------
    args : list of str, optional
        Arguments to parse instead of ``sys.argv[1:]``

    Returns
    -------
    int
        Exit code: 0 on success, 1 on a conversion error, 2 on bad usage

    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if parsed_args.policy is None:
        print(f"Error: --policy is required (or set {ENV_POLICY})", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    _setup_logging_level(parsed_args)

    try:
        parser_options, renderer_options, pagination_options = _build_options(parsed_args)
        source = sys.stdin.buffer.read() if parsed_args.input == "-" else parsed_args.input
        pages = parse_to_pages(
            source,
            parser_options=parser_options,
            renderer_options=renderer_options,
            pagination_options=pagination_options,
        )
    except Lex2PagesError as e:
        logger.debug("Conversion failed", exc_info=True)
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_ERROR

    logger.info("Converted %s into %d page(s)", parsed_args.input, len(pages))

    if parsed_args.rich and not parsed_args.out:
        print_pages_table(pages)
        return EXIT_SUCCESS

    content = format_pages(pages, parsed_args.output_format)
    if parsed_args.out:
        try:
            write_text(content, parsed_args.out)
        except OSError as e:
            print(f"Error: could not write {parsed_args.out}: {e}", file=sys.stderr)
            return EXIT_ERROR
    else:
        sys.stdout.write(content)
    return EXIT_SUCCESS


__all__ = ["create_parser", "main"]
