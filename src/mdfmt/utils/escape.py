#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdfmt/utils/escape.py
"""Markdown escaping utilities.

This module decides which characters of literal text must be backslash
escaped so that the rendered Markdown parses back to the same text, and
how code spans, link destinations and link titles are delimited.

"""

from __future__ import annotations

import re

from mdfmt.constants import (
    ALWAYS_ESCAPED_CHARS,
    LINE_START_ESCAPED_CHARS,
    SINGLE_CHAR_ESCAPED,
)
from mdfmt.utils.text import longest_run

# Characters that end a run of "normal" text for the numeric-tail check
_SPECIAL_CHARS = frozenset("\\`*_{}[]()#+-<>.!|~=")

_ASCII_DIGITS = re.compile(r"[0-9]+")


def _is_numeric(text: str) -> bool:
    return _ASCII_DIGITS.fullmatch(text) is not None


def escape_markdown_text(
    text: str,
    *,
    at_line_start: bool = False,
    normal_tail: str = "",
    in_table: bool = False,
) -> tuple[str, str]:
    r"""Escape literal text so it cannot be re-read as Markdown syntax.

    Parameters
    ----------
    text : str
        Whitespace-cleaned literal text
    at_line_start : bool, default False
        Whether the first character lands at the start of a line, where list,
        heading, blockquote and setext markers would be recognised
    normal_tail : str, default ""
        Plain text emitted since the last special character, carried over
        from the previous text span
    in_table : bool, default False
        Whether the text is emitted inside a table cell (``|`` is escaped)

    Returns
    -------
    tuple[str, str]
        The escaped text and the updated normal-text tail

    Notes
    -----
    A text span made of a single special character is always escaped. Inside
    longer spans the rules are positional:

    - ``\ ` * [ ] < { } ~`` are always escaped.
    - ``_`` is escaped unless it sits between two alphanumeric characters.
    - ``#`` is escaped at line start or when it ends the span.
    - ``+ - = >`` are escaped at line start only.
    - ``.`` is escaped when the preceding plain text is purely numeric, so
      ``1986.`` becomes ``1986\.``; ``)`` only when that number opens the line.
    - ``!`` and ``(`` are never escaped.

    Examples
    --------
        >>> escape_markdown_text("*literal*")
        ('\\*literal\\*', '')
        >>> escape_markdown_text("1986. A great year", at_line_start=True)[0]
        '1986\\. A great year'

    """
    if not text:
        return text, normal_tail

    if len(text) == 1 and text in SINGLE_CHAR_ESCAPED:
        return "\\" + text, ""

    out: list[str] = []
    tail = normal_tail
    last = len(text) - 1

    for i, ch in enumerate(text):
        escape = False
        if ch in ALWAYS_ESCAPED_CHARS:
            escape = True
        elif ch == "_":
            intra_word = 0 < i < last and text[i - 1].isalnum() and text[i + 1].isalnum()
            escape = not intra_word
        elif ch == "#":
            escape = (i == 0 and at_line_start) or i == last
        elif ch in LINE_START_ESCAPED_CHARS:
            escape = i == 0 and at_line_start
        elif ch == ".":
            escape = _is_numeric(tail)
        elif ch == ")":
            escape = at_line_start and i > 0 and _is_numeric(text[:i])
        elif ch == "|":
            escape = in_table

        if escape:
            out.append("\\")
        out.append(ch)

        if ch in _SPECIAL_CHARS:
            tail = ""
        else:
            tail += ch

    return "".join(out), tail


def escape_inline_code(code: str, delimiter: str = "`") -> tuple[str, str]:
    """Prepare code span content and choose its delimiter.

    Parameters
    ----------
    code : str
        Code span content
    delimiter : str, default = '`'
        Delimiter character

    Returns
    -------
    tuple[str, str]
        (content_to_emit, delimiter_run)

    Examples
    --------
        >>> escape_inline_code("simple code")
        ('simple code', '`')
        >>> escape_inline_code("a `` b")
        ('a `` b', '```')
        >>> escape_inline_code("`tick")
        (' `tick ', '``')

    """
    code = code.replace("\n", " ")
    fence = delimiter * (longest_run(code, delimiter) + 1)

    needs_padding = code.startswith(delimiter) or code.endswith(delimiter)
    if code.strip(" ") and code.startswith(" ") and code.endswith(" "):
        needs_padding = True
    if needs_padding:
        code = " " + code + " "

    return code, fence


def _parens_balanced(url: str) -> bool:
    depth = 0
    escaped = False
    for ch in url:
        if escaped:
            escaped = False
        elif ch == "\\":
            escaped = True
        elif ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth < 0:
                return False
    return depth == 0


def format_link_destination(url: str) -> str:
    """Return ``url`` in a form usable inside ``(...)`` of an inline link.

    Destinations with whitespace, angle brackets or unbalanced parentheses
    are wrapped in ``<...>``.
    """
    if not url:
        return ""
    if any(ch.isspace() for ch in url) or "<" in url or ">" in url or not _parens_balanced(url):
        return "<" + url.replace("<", "\\<").replace(">", "\\>") + ">"
    return url


def format_link_title(title: str) -> str:
    """Return ``title`` double-quoted with backslashes and quotes escaped."""
    return '"' + title.replace("\\", "\\\\").replace('"', '\\"') + '"'
