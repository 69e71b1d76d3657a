#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/lex2pages/cli/output.py
"""Output formatting for the lex2pages command-line interface."""

from __future__ import annotations

import json
from typing import Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from lex2pages.constants import OutputFormat
from lex2pages.pagination import Page
from lex2pages.utils.html_utils import escape_html

PREVIEW_LENGTH = 120


def format_pages(pages: Sequence[Page], output_format: OutputFormat) -> str:
    """Serialize pages for writing to a file or stdout.

    Parameters
    ----------
    pages : sequence of Page
        Pages to serialize
    output_format : {"json", "html"}
        - "json": a JSON array of ``{"id", "html"}`` objects
        - "html": one ``<section>`` per page, newline separated

    Returns
    -------
    str
        Serialized pages, ending with a newline

    """
    if output_format == "html":
        sections = [f'<section id="{escape_html(page.id)}">{page.html}</section>' for page in pages]
        return "\n".join(sections) + "\n"
    return json.dumps([page.to_dict() for page in pages], indent=2, ensure_ascii=False) + "\n"


def print_pages_table(pages: Sequence[Page], console: Console | None = None) -> None:
    """Print a preview table of pages to the terminal.

    Parameters
    ----------
    pages : sequence of Page
        Pages to preview
    console : rich.console.Console, optional
        Console to print to; defaults to stdout

    """
    console = console or Console()

    table = Table(title=f"{len(pages)} page(s)")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Chars", style="magenta", justify="right")
    table.add_column("HTML", style="white", no_wrap=False)

    for page in pages:
        preview = page.html if len(page.html) <= PREVIEW_LENGTH else page.html[: PREVIEW_LENGTH - 3] + "..."
        # Text cells are not parsed as markup, so [blockType] markers survive
        table.add_row(Text(page.id), str(len(page.html)), Text(preview))

    console.print(table)
