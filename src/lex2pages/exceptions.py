#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the lex2pages library.

Document content never raises: malformed nodes degrade to safe defaults
during loading and rendering. The exceptions below cover the remaining
failure modes, namely bad configuration and input that cannot be
deserialized at all.

Exception Hierarchy
-------------------
- Lex2PagesError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for parser or renderer)

  - ParsingError (input could not be deserialized)

"""

from typing import Any


class Lex2PagesError(Exception):
    """Base exception class for all lex2pages-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(Lex2PagesError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when an incorrect options class is provided.

    For example, passing ``PaginationOptions`` to the HTML fragment renderer.

    Parameters
    ----------
    converter_name : str
        Name of the component that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        converter_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{converter_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.converter_name = converter_name
        self.expected_type = expected_type
        self.received_type = received_type


class ParsingError(Lex2PagesError):
    """Exception raised when input cannot be read or deserialized.

    Parameters
    ----------
    message : str
        Description of the parsing error
    parsing_stage : str, optional
        Stage where parsing failed (e.g., "read", "json_decoding")
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error=original_error)
        self.parsing_stage = parsing_stage


__all__ = [
    "Lex2PagesError",
    "ValidationError",
    "InvalidOptionsError",
    "ParsingError",
]
