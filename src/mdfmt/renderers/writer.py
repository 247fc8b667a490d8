#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdfmt/renderers/writer.py
"""Indent-tracking output stream used by the Markdown renderer.

Nested blocks (block quotes, list items) prefix every line they own. Rather
than threading prefixes through every visitor, the renderer writes plain
text into an :class:`IndentWriter`, which injects the current prefix after
each newline it passes through.

The prefix is split in two:

- the *indent*: everything up to the last non-space character, such as
  ``"  >"``. It is written after every newline, even for blank lines, so
  blank lines inside a block quote keep their ``>``.
- the *whitespace*: the trailing spaces. It is only written once real
  content follows, so blank lines never carry trailing spaces.

A pending prefix supports markers that must disappear when the span they
open turns out to be empty, such as emphasis delimiters. The marker is
staged, written in front of the first real content, and dropped if the span
closes without any.

"""

from __future__ import annotations

import io
from typing import TextIO


def trailing_space_index(text: str) -> int:
    """Return the index where the trailing run of spaces in ``text`` starts.

        >>> trailing_space_index("> ")
        1
        >>> trailing_space_index("    ")
        0

    """
    return len(text.rstrip(" "))


class Indentation:
    """Stack of line prefix fragments.

    Each nested block quote pushes ``"> "`` and each list item pushes spaces
    matching its marker width. Popping an empty stack is a programming error
    and raises IndexError.
    """

    def __init__(self) -> None:
        """Initialize an empty indentation stack."""
        self._levels: list[str] = []
        self._indent = ""
        self._whitespace = ""

    def push(self, prefix: str) -> None:
        """Push a prefix fragment for a newly entered block."""
        self._levels.append(prefix)
        self._recompute()

    def pop(self) -> str:
        """Pop the innermost prefix fragment."""
        if not self._levels:
            raise IndexError("pop from empty indentation stack")
        prefix = self._levels.pop()
        self._recompute()
        return prefix

    @property
    def depth(self) -> int:
        """Number of fragments on the stack."""
        return len(self._levels)

    @property
    def indent(self) -> str:
        """Hard part of the prefix, without trailing spaces."""
        return self._indent

    @property
    def whitespace(self) -> str:
        """Trailing spaces of the prefix."""
        return self._whitespace

    def _recompute(self) -> None:
        joined = "".join(self._levels)
        cut = trailing_space_index(joined)
        self._indent = joined[:cut]
        self._whitespace = joined[cut:]


class IndentWriter:
    """Text stream wrapper that re-applies the block prefix on every line.

    Parameters
    ----------
    sink : TextIO, optional
        Destination stream. An in-memory buffer is used when omitted; read
        it back with :meth:`getvalue`.

    """

    def __init__(self, sink: TextIO | None = None) -> None:
        """Initialize the writer at the start of a line."""
        self._sink: TextIO = sink if sink is not None else io.StringIO()
        self._indentation = Indentation()
        self._pending = ""
        self._previous_newline = True
        self._last_char = ""

    @property
    def indentation(self) -> Indentation:
        """The prefix stack applied after each newline."""
        return self._indentation

    @property
    def at_line_start(self) -> bool:
        """True if the previous character written was a newline (or nothing was written)."""
        return self._previous_newline

    @property
    def last_char(self) -> str:
        """Last character written to the sink, or an empty string."""
        return self._last_char

    def push_indent(self, prefix: str) -> None:
        """Enter a nested block owning ``prefix`` on each of its lines."""
        self._indentation.push(prefix)

    def pop_indent(self) -> str:
        """Leave the innermost nested block."""
        return self._indentation.pop()

    def add_pending(self, prefix: str) -> None:
        """Stage ``prefix`` to be written before the next real content."""
        self._pending += prefix

    def discard_pending(self, prefix: str) -> None:
        """Drop a staged ``prefix`` that was never committed."""
        if not self._pending.endswith(prefix):
            raise ValueError(f"{prefix!r} is not the most recently staged prefix")
        self._pending = self._pending[: len(self._pending) - len(prefix)]

    @property
    def pending_committed(self) -> bool:
        """True once every staged prefix has been written out."""
        return not self._pending

    def write(self, text: str) -> None:
        """Write ``text``, injecting the prefix after every newline.

        Parameters
        ----------
        text : str
            Text to write. May span several lines.

        """
        if not text:
            return

        indentation = self._indentation
        pieces: list[str] = []
        segment_start = 0

        for i, ch in enumerate(text):
            if self._previous_newline:
                pieces.append(indentation.indent)

            if ch == "\n":
                if self._pending:
                    pieces.append(self._pending)
                    self._pending = ""
                pieces.append(text[segment_start : i + 1])
                segment_start = i + 1
                self._previous_newline = True
                continue

            if self._previous_newline and indentation.whitespace:
                pieces.append(indentation.whitespace)
            self._previous_newline = False

        if segment_start < len(text):
            if self._pending:
                pieces.append(self._pending)
                self._pending = ""
            pieces.append(text[segment_start:])

        output = "".join(pieces)
        if output:
            self._last_char = output[-1]
            self._sink.write(output)

    def getvalue(self) -> str:
        """Return everything written so far when backed by an in-memory buffer."""
        if not isinstance(self._sink, io.StringIO):
            raise TypeError("getvalue() is only available for in-memory writers")
        return self._sink.getvalue()
