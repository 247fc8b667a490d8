#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdfmt/renderers/table.py
"""GFM pipe table rendering.

Tables are rendered in two passes. The first pass renders every cell into a
scratch buffer and records the widest display width per column together
with the header alignments. The second pass writes the rows, padding each
cell to its column width so the pipes line up, counting wide (CJK)
characters as two columns.

"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Sequence

from mdfmt.ast import Alignment, Node, Table, TableCell, TableRow
from mdfmt.exceptions import RenderingError
from mdfmt.utils.text import display_width

if TYPE_CHECKING:
    from mdfmt.renderers.state import RenderState, TableAccumulator

logger = logging.getLogger(__name__)


def pad_cell(text: str, width: int, alignment: Optional[Alignment]) -> str:
    """Pad rendered cell ``text`` to ``width`` display columns.

    Parameters
    ----------
    text : str
        Rendered cell content
    width : int
        Column width in display cells
    alignment : {"left", "center", "right"} or None
        Column alignment; None pads like ``left``

    Returns
    -------
    str
        The padded text

    Examples
    --------
        >>> pad_cell("ab", 5, "center")
        ' ab  '
        >>> pad_cell("ab", 5, "right")
        '   ab'

    """
    space = max(width - display_width(text), 0)
    if alignment == "right":
        return " " * space + text
    if alignment == "center":
        first = space // 2
        return " " * first + text + " " * (space - first)
    return text + " " * space


def delimiter_cell(width: int, alignment: Optional[Alignment]) -> str:
    """Return the delimiter row segment for a column, without pipes.

        >>> delimiter_cell(3, "center")
        ':---:'

    """
    left = ":" if alignment in ("left", "center") else "-"
    right = ":" if alignment in ("right", "center") else "-"
    return left + "-" * width + right


class TableRenderingMixin:
    """Mixin rendering Table nodes for the Markdown walker.

    The implementing class must provide ``state`` and
    ``_render_inline_content``.
    """

    state: RenderState

    def _render_inline_content(self, content: Sequence[Node], **flags: bool) -> str:  # pragma: no cover
        raise NotImplementedError

    def _render_cell(self, cell: object) -> str:
        if not isinstance(cell, TableCell):
            raise RenderingError(
                f"Unexpected {type(cell).__name__} inside a table row; expected TableCell",
                rendering_stage="table",
            )
        return self._render_inline_content(cell.content, in_table_cell=True)

    def _table_rows(self, node: Table) -> list[TableRow]:
        if node.header is None:
            raise RenderingError("Table has no header row", rendering_stage="table")
        rows = [node.header, *node.rows]
        for row in rows:
            if not isinstance(row, TableRow):
                raise RenderingError(
                    f"Unexpected {type(row).__name__} inside a table; expected TableRow",
                    rendering_stage="table",
                )
        return rows

    def _measure_table(self, rows: list[TableRow], acc: TableAccumulator) -> list[list[str]]:
        rendered: list[list[str]] = []
        for row in rows:
            texts = [self._render_cell(cell) for cell in row.cells]
            for column, text in enumerate(texts):
                acc.measure(column, display_width(text))
            rendered.append(texts)

        header = rows[0]
        acc.alignments.extend(cell.alignment for cell in header.cells)
        while len(acc.alignments) < len(acc.widths):
            acc.alignments.append(None)
        return rendered

    def _write_row(self, texts: list[str], acc: TableAccumulator, header: bool) -> None:
        writer = self.state.writer
        for column, width in enumerate(acc.widths):
            text = texts[column] if column < len(texts) else ""
            alignment = None if header else acc.alignments[column]
            writer.write("| " + pad_cell(text, width, alignment) + " ")
        writer.write("|")

    def visit_table(self, node: Table) -> None:
        """Render a table with aligned pipes and a delimiter row."""
        rows = self._table_rows(node)
        acc = self.state.table
        if acc.active:
            raise RenderingError("Nested tables are not supported", rendering_stage="table")

        acc.active = True
        try:
            rendered = self._measure_table(rows, acc)
            writer = self.state.writer

            self._write_row(rendered[0], acc, header=True)
            writer.write("\n|")
            for width, alignment in zip(acc.widths, acc.alignments):
                writer.write(delimiter_cell(width, alignment) + "|")
            for texts in rendered[1:]:
                writer.write("\n")
                self._write_row(texts, acc, header=False)
            logger.debug("Rendered table with %d columns and %d body rows", len(acc.widths), len(rendered) - 1)
        finally:
            acc.clear()

    def visit_table_row(self, node: TableRow) -> None:
        """Table rows are only rendered through their table."""
        raise RenderingError("TableRow encountered outside of a table", rendering_stage="table")

    def visit_table_cell(self, node: TableCell) -> None:
        """Table cells are only rendered through their table."""
        raise RenderingError("TableCell encountered outside of a table", rendering_stage="table")
