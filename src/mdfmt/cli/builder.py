#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdfmt/cli/builder.py
"""Argument parser and option construction for the mdfmt command line."""

from __future__ import annotations

import argparse
from dataclasses import fields
from typing import Any

from mdfmt.constants import EMPHASIS_TOKENS, LIST_INDENT_STYLES, STRONG_TOKENS
from mdfmt.formatters import GO_CODE_FORMATTERS, CodeFormatterRegistry
from mdfmt.options import MarkdownRendererOptions

EXIT_SUCCESS = 0
EXIT_ERROR = 2

COLOR_MODES = ("auto", "always", "never")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _option_help(name: str) -> str:
    """Return the help text declared in a MarkdownRendererOptions field's metadata."""
    for field in fields(MarkdownRendererOptions):
        if field.name == name:
            return str(field.metadata.get("help", ""))
    raise KeyError(name)


def _get_version() -> str:
    from mdfmt import __version__

    return __version__


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser.

    Returns
    -------
    argparse.ArgumentParser
        Parser for ``mdfmt [flags] [path ...]``

    """
    parser = argparse.ArgumentParser(
        prog="mdfmt",
        usage="mdfmt [flags] [path ...]",
        description="Reformat Markdown documents into a canonical form.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
With no paths, mdfmt reads standard input and writes the result to standard
output. Directories are searched recursively for .md and .markdown files.

Examples:
  mdfmt README.md
  mdfmt -w docs/
  mdfmt -d -u --list-indent-style uniform notes.md
  cat notes.md | mdfmt --soft-wraps
""",
    )

    parser.add_argument("paths", nargs="*", metavar="path", help="Files or directories to format")

    mode = parser.add_argument_group("output mode")
    mode.add_argument(
        "-l", "--list", action="store_true", help="List files whose formatting differs from mdfmt's"
    )
    mode.add_argument(
        "-w", "--write", action="store_true", help="Write result to (source) file instead of stdout"
    )
    mode.add_argument("-d", "--diff", action="store_true", help="Display diffs instead of rewriting files")
    mode.add_argument(
        "--color",
        choices=COLOR_MODES,
        default="auto",
        help="Colour diff output: auto (when stdout is a terminal), always or never (default: auto)",
    )

    style = parser.add_argument_group("formatting")
    style.add_argument(
        "-u",
        "--underline-headings",
        action="store_true",
        help="Write setext (underlined) headings for levels 1 and 2",
    )
    style.add_argument(
        "--soft-wraps",
        action="store_true",
        help="Preserve soft line breaks instead of joining lines with a space",
    )
    style.add_argument(
        "--gofmt",
        action="store_true",
        help="Reformat Go code blocks with gofmt",
    )
    style.add_argument(
        "--list-indent-style",
        choices=LIST_INDENT_STYLES,
        default="aligned",
        help=_option_help("list_indent_style") + " (default: aligned)",
    )
    style.add_argument(
        "--emphasis-token",
        choices=EMPHASIS_TOKENS,
        default="*",
        help=_option_help("emphasis_token") + " (default: *)",
    )
    style.add_argument(
        "--strong-token",
        choices=STRONG_TOKENS,
        default=None,
        help=_option_help("strong_token"),
    )

    logging_group = parser.add_argument_group("logging")
    logging_group.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default="WARNING",
        help="Set logging level (default: WARNING)",
    )
    logging_group.add_argument("--log-file", type=str, help="Also write log records to this file")
    logging_group.add_argument(
        "--trace", action="store_true", help="Debug logging with timestamps and logger names"
    )

    parser.add_argument("--version", "-V", action="version", version=f"mdfmt {_get_version()}")

    return parser


def build_renderer_options(parsed_args: argparse.Namespace) -> MarkdownRendererOptions:
    """Translate parsed flags into renderer options.

    The code formatter registry starts empty; ``--gofmt`` adds the Go
    formatter.

    Raises
    ------
    InvalidOptionsError
        If the flag combination yields invalid options

    """
    registry = CodeFormatterRegistry()
    if parsed_args.gofmt:
        registry.update(GO_CODE_FORMATTERS)

    kwargs: dict[str, Any] = {
        "heading_style": "setext" if parsed_args.underline_headings else "atx",
        "soft_wraps": "preserve" if parsed_args.soft_wraps else "collapse",
        "emphasis_token": parsed_args.emphasis_token,
        "strong_token": parsed_args.strong_token,
        "list_indent_style": parsed_args.list_indent_style,
        "code_formatters": registry.as_mapping(),
    }
    return MarkdownRendererOptions(**kwargs)
