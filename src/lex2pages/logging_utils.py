#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/lex2pages/logging_utils.py
"""Logging setup for the lex2pages command-line interface.

Library modules only create module-level loggers; handlers are attached here
when the CLI starts, never on import.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
PLAIN_FORMAT = "%(levelname)s: %(message)s"


def _resolve_level(log_level: int | str) -> int:
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).upper())
    return level if isinstance(level, int) else logging.WARNING


def _make_formatter(trace_mode: bool) -> logging.Formatter:
    if trace_mode:
        return logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT)
    return logging.Formatter(PLAIN_FORMAT)


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Route log records to stderr, and optionally to a file.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name (e.g., "INFO"). Unknown names
        fall back to WARNING.
    log_file : str, optional
        Path of a file that receives a copy of every record.
    trace_mode : bool, default False
        Include timestamps and logger names, for following a conversion
        through the loader, renderer and segmenter.

    Returns
    -------
    logging.Logger
        The configured root logger.

    """
    level = _resolve_level(log_level)
    formatter = _make_formatter(trace_mode)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    file_error: Optional[OSError] = None
    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))
        except OSError as exc:
            file_error = exc

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    if file_error is not None:
        root_logger.warning("Could not open log file %s: %s", log_file, file_error)
    elif log_file:
        root_logger.info("Logging to file: %s", log_file)

    return root_logger
