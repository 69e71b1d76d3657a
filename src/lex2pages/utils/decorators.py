#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/lex2pages/utils/decorators.py
"""Timing helpers shared by the loading and pagination pipeline."""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import Generator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Log how long a block takes, at DEBUG level.

    The clock is only read when ``logger`` has DEBUG enabled.

    Parameters
    ----------
    logger : logging.Logger
        Logger that receives the timing record
    operation : str
        Label for the timed block, e.g. "Converting Lexical tree"

    Examples
    --------
        >>> with debug_timer(logger, "Segmenting pages"):
        ...     pages = segmenter.segment(doc.children)
        # DEBUG: Segmenting pages took 1.3 ms

    """
    if not logger.isEnabledFor(logging.DEBUG):
        yield
        return

    start = time.perf_counter()
    try:
        yield
    finally:
        logger.debug("%s took %.1f ms", operation, (time.perf_counter() - start) * 1000)
