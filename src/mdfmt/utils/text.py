#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdfmt/utils/text.py
"""Text processing utilities shared by the renderers.

Functions
---------
clean_whitespace : Collapse newlines, tabs and space runs into single spaces
display_width : Terminal column width of a string (wide characters count 2)
longest_run : Length of the longest run of a character in a string

Examples
--------
    >>> clean_whitespace("foo\\n\\t\\r\\nbar")
    'foo bar'
    >>> display_width("日本")
    4

"""

from __future__ import annotations

import re
from typing import overload

from rich.cells import cell_len

_WHITESPACE_RUN = re.compile(r"[ \t\r\n]+")
_WHITESPACE_RUN_BYTES = re.compile(rb"[ \t\r\n]+")


@overload
def clean_whitespace(text: str) -> str: ...


@overload
def clean_whitespace(text: bytes) -> bytes: ...


def clean_whitespace(text: str | bytes) -> str | bytes:
    """Normalize inline whitespace.

    Each ``\\n``, ``\\r`` and ``\\t`` becomes a space and consecutive spaces
    collapse into one. Leading and trailing whitespace is kept (as a single
    space) so adjacent spans still join correctly.

    Parameters
    ----------
    text : str or bytes
        Raw text

    Returns
    -------
    str or bytes
        Cleaned text of the same type as the input

    """
    if isinstance(text, bytes):
        return _WHITESPACE_RUN_BYTES.sub(b" ", text)
    return _WHITESPACE_RUN.sub(" ", text)


def display_width(text: str) -> int:
    """Return the number of terminal cells ``text`` occupies.

    East Asian wide and full-width characters count as two cells.
    """
    return cell_len(text)


def longest_run(text: str, char: str) -> int:
    """Return the length of the longest consecutive run of ``char`` in ``text``."""
    longest = 0
    current = 0
    for c in text:
        if c == char:
            current += 1
            longest = max(longest, current)
        else:
            current = 0
    return longest
