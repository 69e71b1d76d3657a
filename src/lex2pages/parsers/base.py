#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/lex2pages/parsers/base.py
"""Base classes for document parsers.

This module defines the abstract base class that parsers inherit from. A
parser turns serialized input into the lex2pages AST.

"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Any, Union

from lex2pages.ast import Document
from lex2pages.exceptions import InvalidOptionsError, ParsingError
from lex2pages.options.base import BaseParserOptions

logger = logging.getLogger(__name__)

ParserInput = Union[str, Path, IO[bytes], IO[str], bytes, bytearray]


class BaseParser(ABC):
    """Abstract base class for all document parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    Notes
    -----
    ``parse`` accepts:
    - str or Path: file path to read (a str starting with ``{`` is taken as
      inline JSON text)
    - IO[bytes] or IO[str]: file-like object
    - bytes: raw UTF-8 JSON

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, input_data: Any) -> Document:
        """Parse the input into a Document AST.

        Raises
        ------
        ParsingError
            If the input cannot be read or deserialized

        """
        pass

    @staticmethod
    def _read_json(input_data: ParserInput) -> Any:
        """Read and decode JSON from any supported input type.

        Raises
        ------
        ParsingError
            If the input cannot be read or is not valid JSON

        """
        try:
            if isinstance(input_data, (bytes, bytearray)):
                text = bytes(input_data).decode("utf-8-sig")
            elif isinstance(input_data, str) and input_data.lstrip().startswith("{"):
                text = input_data
            elif isinstance(input_data, (str, Path)):
                text = Path(input_data).read_text(encoding="utf-8-sig")
            elif hasattr(input_data, "read"):
                raw = input_data.read()
                text = raw.decode("utf-8-sig") if isinstance(raw, bytes) else str(raw)
            else:
                raise ParsingError(
                    f"Unsupported input type: {type(input_data).__name__}", parsing_stage="input_processing"
                )
        except ParsingError:
            raise
        except (OSError, UnicodeDecodeError) as e:
            raise ParsingError(f"Failed to read input: {e}", parsing_stage="read", original_error=e) from e

        try:
            return json.loads(text)
        except (ValueError, RecursionError) as e:
            # ValueError covers JSONDecodeError and over-long integer literals
            raise ParsingError(f"Invalid JSON: {e}", parsing_stage="json_decoding", original_error=e) from e
