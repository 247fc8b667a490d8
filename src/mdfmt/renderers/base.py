#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdfmt/renderers/base.py
"""Base classes for AST renderers.

This module defines the abstract base class that renderers inherit from. The
BaseRenderer provides the output plumbing (paths, text and binary streams,
strings, bytes) so concrete renderers only implement ``render_to_string``.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from mdfmt.ast import Document
from mdfmt.exceptions import InvalidOptionsError, OutputWriteError
from mdfmt.options.base import BaseRendererOptions

logger = logging.getLogger(__name__)

OutputTarget = Union[str, Path, IO[bytes], IO[str]]


class BaseRenderer(ABC):
    """Abstract base class for AST renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    Examples
    --------
    Creating a custom renderer:

        >>> from mdfmt.renderers.base import BaseRenderer
        >>>
        >>> class NullRenderer(BaseRenderer):
        ...     def render_to_string(self, doc):
        ...         return "\\n"

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration.

        Parameters
        ----------
        options : BaseRendererOptions or None, default = None
            Format-specific rendering options. If None, default options will be used.

        """
        self.options = options

    @abstractmethod
    def render_to_string(self, doc: Document) -> str:
        """Render the AST to a string.

        Parameters
        ----------
        doc : Document
            AST Document node to render

        Returns
        -------
        str
            Rendered document

        Raises
        ------
        RenderingError
            If the tree cannot be rendered

        """

    def render(self, doc: Document, output: OutputTarget) -> None:
        """Render the AST and write it to ``output``.

        The whole document is rendered before anything is written, so a
        failed render never leaves partial output behind.

        Parameters
        ----------
        doc : Document
            AST Document node to render
        output : str, Path, IO[bytes] or IO[str]
            Output destination. Can be:
            - File path (str or Path), written as UTF-8
            - File-like object in binary mode
            - File-like object in text mode

        Raises
        ------
        RenderingError
            If rendering fails
        OutputWriteError
            If a file path cannot be written

        """
        text = self.render_to_string(doc)
        self.write_text_output(text, output)

    def render_to_bytes(self, doc: Document) -> bytes:
        """Render the AST to UTF-8 encoded bytes.

        Parameters
        ----------
        doc : Document
            AST Document node to render

        Returns
        -------
        bytes
            Rendered document as bytes

        """
        return self.render_to_string(doc).encode("utf-8")

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Parameters
        ----------
        options : BaseRendererOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        renderer_name : str
            Name of the renderer (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                "options",
                type(options).__name__,
                message=(
                    f"{renderer_name} expected {expected_type.__name__} options, "
                    f"got {type(options).__name__}"
                ),
            )

    @staticmethod
    def write_text_output(text: str, output: OutputTarget) -> None:
        """Write text output to a file path or IO stream.

        Parameters
        ----------
        text : str
            Rendered text to write
        output : str, Path, IO[bytes], or IO[str]
            Output destination

        Raises
        ------
        OutputWriteError
            If a file path cannot be written

        Examples
        --------
        Write to StringIO:
            >>> from io import StringIO
            >>> buffer = StringIO()
            >>> BaseRenderer.write_text_output("# Hello\\n", buffer)
            >>> buffer.getvalue()
            '# Hello\\n'

        """
        if isinstance(output, (str, Path)):
            path = Path(output)
            try:
                path.write_text(text, encoding="utf-8", newline="")
            except OSError as e:
                raise OutputWriteError(str(path), original_error=e) from e
            logger.debug("Wrote %d characters to %s", len(text), path)
            return

        if hasattr(output, "mode") and "b" in getattr(output, "mode", ""):
            output.write(text.encode("utf-8"))  # type: ignore[arg-type]
            return

        try:
            output.write(text)  # type: ignore[arg-type]
        except TypeError:
            output.write(text.encode("utf-8"))  # type: ignore[arg-type]
