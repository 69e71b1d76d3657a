#!/usr/bin/env python3
#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/lex2pages/__main__.py
"""Run the lex2pages command line with ``python -m lex2pages``.

Reading the editor state from stdin works the same way as the installed
script::

    curl -s "$CMS/api/posts/1" | jq .content | python -m lex2pages - --policy headings
"""

import sys

from lex2pages.cli import main

if __name__ == "__main__":
    sys.exit(main())
