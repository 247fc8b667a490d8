#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the mdfmt library.

Constants are organized by category:
1. Type Definitions - Literal types used by the option classes
2. Markdown Output - Default rendering choices and literal markers
3. CLI and File Discovery
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

HeadingStyle = Literal["atx", "setext"]
SoftWrapMode = Literal["collapse", "preserve"]
EmphasisToken = Literal["*", "_"]
StrongToken = Literal["**", "__"]
ListIndentStyle = Literal["aligned", "uniform"]

# =============================================================================
# Markdown Output
# =============================================================================

DEFAULT_HEADING_STYLE: HeadingStyle = "atx"
DEFAULT_SOFT_WRAPS: SoftWrapMode = "collapse"
DEFAULT_EMPHASIS_TOKEN: EmphasisToken = "*"
DEFAULT_LIST_INDENT_STYLE: ListIndentStyle = "aligned"
DEFAULT_UNIFORM_INDENT_WIDTH = 4

HEADING_STYLES: tuple[str, ...] = ("atx", "setext")
SOFT_WRAP_MODES: tuple[str, ...] = ("collapse", "preserve")
EMPHASIS_TOKENS: tuple[str, ...] = ("*", "_")
STRONG_TOKENS: tuple[str, ...] = ("**", "__")
LIST_INDENT_STYLES: tuple[str, ...] = ("aligned", "uniform")

THEMATIC_BREAK = "---"
BLOCKQUOTE_MARKER = "> "
STRIKETHROUGH_TOKEN = "~~"
HARD_BREAK = "  \n"
MIN_CODE_FENCE_LENGTH = 3
SETEXT_UNDERLINE_CHARS = {1: "=", 2: "-"}

# Characters escaped wherever they appear in text
ALWAYS_ESCAPED_CHARS = frozenset("\\`*[]<{}~")

# Characters escaped only at the start of a line
LINE_START_ESCAPED_CHARS = frozenset("+-=>")

# Characters escaped when emitted as their own text node
SINGLE_CHAR_ESCAPED = frozenset("\\`*_{}[]()#+-<>")

# =============================================================================
# CLI and File Discovery
# =============================================================================

MARKDOWN_EXTENSIONS: tuple[str, ...] = (".md", ".markdown")
STDIN_LABEL = "<standard input>"
GOFMT_EXECUTABLE = "gofmt"
GOFMT_TIMEOUT_SECONDS = 30.0
DIFF_CONTEXT_LINES = 3
