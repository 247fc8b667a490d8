#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdfmt/renderers/state.py
"""Per-call render state for the Markdown renderer.

A fresh :class:`RenderState` is created for every render invocation and
dropped afterwards. Nothing in it is ever stored on the renderer, so one
configured renderer can serve concurrent calls.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator, Optional

from mdfmt.ast import Alignment, Node
from mdfmt.renderers.writer import IndentWriter


@dataclass
class ListLevel:
    """Counter and spacing flags for one level of list nesting."""

    ordered: bool
    start: int = 1
    index: int = 0
    tight: bool = True
    bullet: str = "-"

    def next_marker(self) -> str:
        """Return the marker for the next item and advance the counter."""
        if self.ordered:
            marker = f"{self.start + self.index}{self.bullet} "
        else:
            marker = f"{self.bullet} "
        self.index += 1
        return marker


@dataclass
class TableAccumulator:
    """Column widths and alignments gathered while measuring a table."""

    widths: list[int] = field(default_factory=list)
    alignments: list[Optional[Alignment]] = field(default_factory=list)
    active: bool = False

    def measure(self, column: int, width: int) -> None:
        """Widen ``column`` to at least ``width`` cells."""
        while len(self.widths) <= column:
            self.widths.append(1)
        self.widths[column] = max(self.widths[column], width)

    def clear(self) -> None:
        """Forget the measurements of the previous table."""
        self.widths.clear()
        self.alignments.clear()
        self.active = False


@dataclass
class RenderState:
    """Mutable state scoped to a single render call.

    Parameters
    ----------
    writer : IndentWriter
        Destination for everything rendered so far
    list_levels : list[ListLevel]
        One entry per enclosing list, outermost first
    normal_tail : str
        Plain text emitted since the last special character, used to decide
        whether a ``.`` could be read as an ordered list marker
    at_line_start : bool
        Whether the next inline text lands where block markers are recognised
    in_table_cell : bool
        Whether inline content is being rendered into a table cell
    in_heading : bool
        Whether inline content is being rendered into a heading
    table : TableAccumulator
        Measurements for the table being rendered
    next_inline : Node or None
        Sibling that follows the inline node being rendered

    """

    writer: IndentWriter = field(default_factory=IndentWriter)
    list_levels: list[ListLevel] = field(default_factory=list)
    normal_tail: str = ""
    at_line_start: bool = False
    in_table_cell: bool = False
    in_heading: bool = False
    table: TableAccumulator = field(default_factory=TableAccumulator)
    next_inline: Optional[Node] = None

    @property
    def in_list(self) -> bool:
        """True while rendering inside at least one list."""
        return bool(self.list_levels)

    @contextmanager
    def scratch(self, *, at_line_start: bool = False, **flags: bool) -> Iterator[IndentWriter]:
        """Redirect output into a fresh writer for the duration of the block.

        Inline flags (``in_table_cell``, ``in_heading``) given as keyword
        arguments are set while the scratch writer is active and restored
        afterwards, together with the escaping state.
        """
        saved_writer = self.writer
        saved_tail = self.normal_tail
        saved_line_start = self.at_line_start
        saved_flags = {name: getattr(self, name) for name in flags}

        scratch = IndentWriter()
        self.writer = scratch
        self.normal_tail = ""
        self.at_line_start = at_line_start
        for name, value in flags.items():
            setattr(self, name, value)
        try:
            yield scratch
        finally:
            self.writer = saved_writer
            self.normal_tail = saved_tail
            self.at_line_start = saved_line_start
            for name, value in saved_flags.items():
                setattr(self, name, value)
