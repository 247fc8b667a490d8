#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdfmt/cli/processors.py
"""File discovery and per-file processing for the mdfmt command line."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO, Iterator, Optional, TextIO

from rich.console import Console

from mdfmt.constants import MARKDOWN_EXTENSIONS, STDIN_LABEL
from mdfmt.diff import UnifiedDiffRenderer, unified_diff
from mdfmt.exceptions import FileAccessError, MdfmtError, OutputWriteError
from mdfmt.options import MarkdownRendererOptions
from mdfmt.parsers.markdown import MarkdownToAstConverter
from mdfmt.renderers.markdown import MarkdownRenderer

logger = logging.getLogger(__name__)


def is_markdown_file(path: Path) -> bool:
    """Return True for visible files with a Markdown extension.

        >>> is_markdown_file(Path("docs/intro.md"))
        True
        >>> is_markdown_file(Path("docs/.draft.md"))
        False

    """
    return not path.name.startswith(".") and path.suffix.lower() in MARKDOWN_EXTENSIONS


def iter_markdown_files(directory: Path) -> Iterator[Path]:
    """Yield Markdown files under ``directory`` in sorted walk order.

    Raises
    ------
    FileAccessError
        If a directory in the tree cannot be listed

    """

    def _raise(error: OSError) -> None:
        raise FileAccessError(
            error.filename or str(directory), message=error.strerror or str(error), original_error=error
        )

    for root, dirnames, filenames in os.walk(directory, onerror=_raise):
        dirnames.sort()
        for name in sorted(filenames):
            candidate = Path(root, name)
            if is_markdown_file(candidate) and candidate.is_file():
                yield candidate


def _color_console(stream: TextIO, color: str) -> Console:
    if color == "always":
        return Console(file=stream, force_terminal=True, color_system="standard", highlight=False, soft_wrap=True)
    if color == "never":
        return Console(file=stream, color_system=None, no_color=True, highlight=False, soft_wrap=True)
    return Console(file=stream, highlight=False, soft_wrap=True)


@dataclass
class FormatRun:
    """Settings and output streams shared by every file of one invocation.

    Parameters
    ----------
    options : MarkdownRendererOptions
        Renderer options built from the flags
    list_only : bool
        Print names of files that would change
    write : bool
        Rewrite changed files in place
    show_diff : bool
        Print a unified diff for changed files
    color : {"auto", "always", "never"}
        Diff colouring mode

    """

    options: MarkdownRendererOptions
    list_only: bool = False
    write: bool = False
    show_diff: bool = False
    color: str = "auto"
    stdout: TextIO = field(default_factory=lambda: sys.stdout)
    stderr: TextIO = field(default_factory=lambda: sys.stderr)
    errors: int = 0

    def __post_init__(self) -> None:
        self._parser = MarkdownToAstConverter()
        self._renderer = MarkdownRenderer(self.options)
        self._console: Optional[Console] = None

    @classmethod
    def from_args(
        cls,
        parsed_args: argparse.Namespace,
        options: MarkdownRendererOptions,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ) -> FormatRun:
        """Create a run from parsed command line arguments."""
        return cls(
            options=options,
            list_only=parsed_args.list,
            write=parsed_args.write,
            show_diff=parsed_args.diff,
            color=parsed_args.color,
            stdout=stdout or sys.stdout,
            stderr=stderr or sys.stderr,
        )

    @property
    def console(self) -> Console:
        if self._console is None:
            self._console = _color_console(self.stdout, self.color)
        return self._console

    def report_error(self, label: str, error: Exception) -> None:
        """Print ``label: message`` to stderr and count the failure."""
        message = error.message if isinstance(error, MdfmtError) else str(error)
        print(f"{label}: {message}", file=self.stderr)
        logger.debug("Failed to process %s", label, exc_info=error)
        self.errors += 1

    def format_source(self, src: bytes) -> bytes:
        """Return the canonical form of ``src``."""
        doc = self._parser.parse(src)
        return self._renderer.render_to_bytes(doc)

    def process_source(self, label: str, src: bytes, path: Optional[Path] = None) -> None:
        """Format ``src`` and act on the result according to the output mode.

        Parameters
        ----------
        label : str
            Name used in listings, diffs and error messages
        src : bytes
            Original file contents
        path : Path, optional
            File to rewrite in ``--write`` mode

        """
        result = self.format_source(src)
        changed = result != src

        if changed:
            logger.info("%s needs formatting", label)
            if self.list_only:
                print(label, file=self.stdout)
            if self.write and path is not None:
                try:
                    path.write_bytes(result)
                except OSError as e:
                    raise OutputWriteError(str(path), message=e.strerror or str(e), original_error=e) from e
            if self.show_diff:
                print(f"diff {label} mdfmt/{label}", file=self.stderr)
                lines = unified_diff(src.decode("utf-8"), result.decode("utf-8"), label)
                UnifiedDiffRenderer().write(lines, self.console)

        if not (self.list_only or self.write or self.show_diff):
            self.stdout.write(result.decode("utf-8"))
            self.stdout.flush()

    def process_file(self, path: Path) -> None:
        """Read, format and report one file, recording any failure."""
        label = str(path)
        try:
            try:
                src = path.read_bytes()
            except OSError as e:
                raise FileAccessError(label, message=e.strerror or str(e), original_error=e) from e
            self.process_source(label, src, path)
        except MdfmtError as e:
            self.report_error(label, e)

    def process_stdin(self, stream: Optional[BinaryIO] = None) -> None:
        """Format standard input to standard output."""
        if self.write:
            self.report_error(STDIN_LABEL, ValueError("cannot use -w with standard input"))
            return
        stream = stream or sys.stdin.buffer
        try:
            self.process_source(STDIN_LABEL, stream.read())
        except MdfmtError as e:
            self.report_error(STDIN_LABEL, e)

    def process_path(self, raw_path: str) -> None:
        """Format a file, or every Markdown file below a directory."""
        path = Path(raw_path)
        try:
            if path.is_dir():
                for candidate in iter_markdown_files(path):
                    self.process_file(candidate)
                return
        except MdfmtError as e:
            self.report_error(raw_path, e)
            return

        self.process_file(path)
