#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdfmt/parsers/base.py
"""Base classes for document parsers.

This module defines the abstract base class that parsers inherit from. The
BaseParser owns input loading, so concrete parsers only deal with text.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from mdfmt.ast import Document
from mdfmt.exceptions import FileAccessError, InvalidOptionsError, ParsingError
from mdfmt.options.base import BaseParserOptions

logger = logging.getLogger(__name__)

ParserInput = Union[str, bytes, Path, IO[bytes], IO[str]]


class BaseParser(ABC):
    """Abstract base class for document parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    Notes
    -----
    The parse() method accepts:
    - str: document text (never interpreted as a path)
    - Path: file to read as UTF-8
    - bytes: raw UTF-8 document bytes
    - IO: binary or text file-like object

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
                "options",
                type(options).__name__,
                message=f"{parser_name} expected {expected_type.__name__} options, got {type(options).__name__}",
            )

    @abstractmethod
    def parse(self, input_data: ParserInput) -> Document:
        """Parse the input document into an AST.

        Parameters
        ----------
        input_data : str, bytes, Path or IO
            Document to parse

        Returns
        -------
        Document
            AST document node

        Raises
        ------
        ParsingError
            If the input cannot be decoded or parsed
        FileAccessError
            If a file path cannot be read

        """

    @staticmethod
    def _decode(data: bytes, source: str) -> str:
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ParsingError(
                f"{source} is not valid UTF-8: {e.reason} at byte {e.start}",
                parsing_stage="decoding",
                original_error=e,
            ) from e

    @classmethod
    def _load_text_content(cls, input_data: ParserInput) -> str:
        """Load document text from any supported input type.

        Parameters
        ----------
        input_data : str, bytes, Path or IO
            Input data to load

        Returns
        -------
        str
            Document text

        """
        if isinstance(input_data, str):
            return input_data
        if isinstance(input_data, bytes):
            return cls._decode(input_data, "input")
        if isinstance(input_data, Path):
            try:
                data = input_data.read_bytes()
            except OSError as e:
                raise FileAccessError(str(input_data), message=e.strerror or str(e), original_error=e) from e
            logger.debug("Read %d bytes from %s", len(data), input_data)
            return cls._decode(data, str(input_data))

        content = input_data.read()
        if isinstance(content, bytes):
            return cls._decode(content, getattr(input_data, "name", "stream"))
        return content
