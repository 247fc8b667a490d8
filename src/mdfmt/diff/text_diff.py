#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdfmt/diff/text_diff.py
"""Line diff between a document and its formatted form, using difflib."""

from __future__ import annotations

import difflib
from typing import Iterator

from mdfmt.constants import DIFF_CONTEXT_LINES


def diff_labels(path: str) -> tuple[str, str]:
    """Return the ``a/`` and ``b/`` header labels used for ``path``.

        >>> diff_labels("docs/readme.md")
        ('a/docs/readme.md', 'b/docs/readme.md')

    """
    path = path.lstrip("/")
    return f"a/{path}", f"b/{path}"


def unified_diff(
    original: str,
    formatted: str,
    path: str,
    context_lines: int = DIFF_CONTEXT_LINES,
) -> Iterator[str]:
    """Yield unified diff lines from ``original`` to ``formatted``.

    Parameters
    ----------
    original : str
        Text before formatting
    formatted : str
        Text after formatting
    path : str
        Name shown in the ``---``/``+++`` headers
    context_lines : int, default 3
        Unchanged lines shown around each change

    Yields
    ------
    str
        Diff lines without line terminators; nothing if the texts are equal

    """
    old_label, new_label = diff_labels(path)
    yield from difflib.unified_diff(
        original.splitlines(),
        formatted.splitlines(),
        fromfile=old_label,
        tofile=new_label,
        n=context_lines,
        lineterm="",
    )
