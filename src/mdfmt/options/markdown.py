#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Markdown parsing and rendering.

This module defines the option objects for the mistune-backed parser and
the canonicalizing Markdown renderer.
"""
# src/mdfmt/options/markdown.py


from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from mdfmt.constants import (
    DEFAULT_EMPHASIS_TOKEN,
    DEFAULT_HEADING_STYLE,
    DEFAULT_LIST_INDENT_STYLE,
    DEFAULT_SOFT_WRAPS,
    DEFAULT_UNIFORM_INDENT_WIDTH,
    EMPHASIS_TOKENS,
    HEADING_STYLES,
    LIST_INDENT_STYLES,
    SOFT_WRAP_MODES,
    STRONG_TOKENS,
    EmphasisToken,
    HeadingStyle,
    ListIndentStyle,
    SoftWrapMode,
)
from mdfmt.exceptions import InvalidOptionsError
from mdfmt.formatters import CodeFormatter, default_code_formatters
from mdfmt.options.base import BaseParserOptions, BaseRendererOptions, validate_choice


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for Markdown-to-AST parsing.

    Parameters
    ----------
    parse_tables : bool, default True
        Whether to parse table syntax (GFM pipe tables).
    parse_strikethrough : bool, default True
        Whether to parse strikethrough syntax (~~text~~).
    parse_task_lists : bool, default True
        Whether to parse task list checkboxes (- [ ] and - [x]).

    """

    parse_tables: bool = field(
        default=True,
        metadata={"help": "Parse table syntax (GFM pipe tables)", "cli_name": "no-parse-tables"},
    )
    parse_strikethrough: bool = field(
        default=True,
        metadata={"help": "Parse strikethrough syntax (~~text~~)", "cli_name": "no-parse-strikethrough"},
    )
    parse_task_lists: bool = field(
        default=True,
        metadata={"help": "Parse task list checkboxes (- [ ] and - [x])", "cli_name": "no-parse-task-lists"},
    )


@dataclass(frozen=True)
class MarkdownRendererOptions(BaseRendererOptions):
    r"""Markdown rendering options controlling the canonical output form.

    Parameters
    ----------
    heading_style : {"atx", "setext"}, default "atx"
        ``atx`` writes ``#`` prefixed headings. ``setext`` underlines level 1
        and 2 headings with ``=`` and ``-``; deeper levels stay ATX.
    soft_wraps : {"collapse", "preserve"}, default "collapse"
        ``collapse`` joins soft line breaks into a single space, ``preserve``
        keeps them as newlines.
    emphasis_token : {"\*", "\_"}, default "\*"
        Delimiter for emphasis.
    strong_token : {"\*\*", "\_\_"} or None, default None
        Delimiter for strong emphasis. None means ``emphasis_token`` doubled.
    list_indent_style : {"aligned", "uniform"}, default "aligned"
        ``aligned`` indents list item children by the width of the item's
        marker. ``uniform`` indents them by ``uniform_indent_width`` (or the
        marker width when the marker is wider).
    uniform_indent_width : int, default 4
        Child indentation used by the ``uniform`` list style.
    code_formatters : Mapping[str, CodeFormatter]
        Language name to formatter map applied to fenced code blocks. Defaults
        to the Go formatter registered as ``go`` and ``Go``. Pass an empty
        mapping to disable reformatting.

    Examples
    --------
        >>> options = MarkdownRendererOptions(heading_style="setext", emphasis_token="_")
        >>> options.effective_strong_token
        '__'

    """

    heading_style: HeadingStyle = field(
        default=DEFAULT_HEADING_STYLE,
        metadata={"help": "Heading style for levels 1-2", "choices": list(HEADING_STYLES)},
    )
    soft_wraps: SoftWrapMode = field(
        default=DEFAULT_SOFT_WRAPS,
        metadata={"help": "Soft line break handling", "choices": list(SOFT_WRAP_MODES)},
    )
    emphasis_token: EmphasisToken = field(
        default=DEFAULT_EMPHASIS_TOKEN,  # type: ignore[arg-type]
        metadata={"help": "Delimiter to use for emphasis", "choices": list(EMPHASIS_TOKENS)},
    )
    strong_token: Optional[str] = field(
        default=None,
        metadata={
            "help": "Delimiter to use for strong emphasis (default: emphasis token doubled)",
            "choices": list(STRONG_TOKENS),
        },
    )
    list_indent_style: ListIndentStyle = field(
        default=DEFAULT_LIST_INDENT_STYLE,
        metadata={"help": "Indentation convention for list item children", "choices": list(LIST_INDENT_STYLES)},
    )
    uniform_indent_width: int = field(
        default=DEFAULT_UNIFORM_INDENT_WIDTH,
        metadata={"help": "Child indentation width for the uniform list style", "type": int},
    )
    code_formatters: Mapping[str, CodeFormatter] = field(
        default_factory=default_code_formatters,
        hash=False,
        metadata={"help": "Language name to code formatter map for fenced code blocks"},
    )

    def __post_init__(self) -> None:
        """Validate option values and freeze the formatter map.

        Raises
        ------
        InvalidOptionsError
            If any field value is outside its accepted set.

        """
        super().__post_init__()

        validate_choice("heading_style", self.heading_style, HEADING_STYLES)
        validate_choice("soft_wraps", self.soft_wraps, SOFT_WRAP_MODES)
        validate_choice("emphasis_token", self.emphasis_token, EMPHASIS_TOKENS)
        validate_choice("list_indent_style", self.list_indent_style, LIST_INDENT_STYLES)
        if self.strong_token is not None:
            validate_choice("strong_token", self.strong_token, STRONG_TOKENS)

        if isinstance(self.uniform_indent_width, bool) or not isinstance(self.uniform_indent_width, int):
            raise InvalidOptionsError("uniform_indent_width", self.uniform_indent_width)
        if not 1 <= self.uniform_indent_width <= 8:
            raise InvalidOptionsError(
                "uniform_indent_width",
                self.uniform_indent_width,
                message=f"uniform_indent_width must be between 1 and 8, got {self.uniform_indent_width}",
            )

        formatters = self.code_formatters if self.code_formatters is not None else {}
        for name, formatter in formatters.items():
            if not callable(formatter):
                raise InvalidOptionsError(
                    "code_formatters", formatter, message=f"Code formatter for {name!r} is not callable"
                )
        object.__setattr__(self, "code_formatters", MappingProxyType(dict(formatters)))

    @property
    def effective_strong_token(self) -> str:
        """Strong delimiter actually written: ``strong_token`` or the emphasis token doubled."""
        return self.strong_token if self.strong_token is not None else self.emphasis_token * 2
