#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdfmt/exceptions.py
"""Custom exception classes for the mdfmt library.

This module defines the exception hierarchy used across the formatter. Every
exception carries a human readable message and, where relevant, the error that
triggered it so callers can inspect the root cause.

Exception Hierarchy
-------------------
- MdfmtError (base exception)
  - ValidationError
    - InvalidOptionsError
  - FileError
    - FileAccessError
  - ParsingError
  - RenderingError
    - OutputWriteError

"""

from __future__ import annotations

from typing import Any


class MdfmtError(Exception):
    """Base exception class for all mdfmt-specific errors.

    Parameters
    ----------
    message : str
        Human-readable error message describing the failure
    original_error : Exception, optional
        The original exception that caused this error, if any

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The underlying exception that triggered this error

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the exception with message and optional original error."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(MdfmtError):
    """Exception raised when input parameters or options fail validation.

    Parameters
    ----------
    message : str
        Description of the validation failure
    parameter_name : str, optional
        Name of the parameter that failed validation
    parameter_value : Any, optional
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
        super().__init__(message, original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when a render or parse option has an invalid value.

    Parameters
    ----------
    option_name : str
        Name of the offending option field
    option_value : Any
        The rejected value
    message : str, optional
        Custom message. If not provided one is built from the option details.
    choices : sequence of Any, optional
        Accepted values, included in the default message when given

    """

    def __init__(
        self,
        option_name: str,
        option_value: Any,
        message: str | None = None,
        choices: tuple[Any, ...] | list[Any] | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = f"Invalid value for option '{option_name}': {option_value!r}"
            if choices:
                message += f" (expected one of: {', '.join(repr(c) for c in choices)})"
        super().__init__(message, parameter_name=option_name, parameter_value=option_value)
        self.choices = tuple(choices) if choices else ()


class FileError(MdfmtError):
    """Base exception for file access and I/O errors.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path to the problematic file
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error with path and message."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class FileAccessError(FileError):
    """Exception raised when a file cannot be read or decoded."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file access error."""
        if message is None:
            message = f"Cannot access file: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class ParsingError(MdfmtError):
    """Exception raised when the Markdown token stream cannot be converted.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        The stage of parsing where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the parsing failure

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class RenderingError(MdfmtError):
    """Exception raised when output rendering fails.

    Rendering errors signal a contract mismatch between the tree handed to the
    renderer and the shapes it knows how to print, such as:
    - A node kind with no visitor
    - A table subtree containing something other than rows and cells
    - A table without a header row

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the rendering failure

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class OutputWriteError(RenderingError):
    """Exception raised when writing rendered output to a file fails.

    Parameters
    ----------
    file_path : str
        Destination that could not be written
    message : str, optional
        Custom error message
    original_error : Exception, optional
        The underlying I/O error

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the output write error."""
        if message is None:
            message = f"Failed to write output to: {file_path}"
        super().__init__(message, rendering_stage="output", original_error=original_error)
        self.file_path = file_path


__all__ = [
    "MdfmtError",
    "ValidationError",
    "InvalidOptionsError",
    "FileError",
    "FileAccessError",
    "ParsingError",
    "RenderingError",
    "OutputWriteError",
]
