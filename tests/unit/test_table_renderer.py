#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_table_renderer.py
"""Unit tests for pipe table rendering."""

import pytest

from mdfmt.ast import Code, Document, Emphasis, Table, TableCell, TableRow, Text
from mdfmt.exceptions import RenderingError
from mdfmt.renderers.table import delimiter_cell, pad_cell


def row(*values, alignments=None, header=False):
    alignments = alignments or [None] * len(values)
    cells = [
        TableCell(content=[Text(content=v)] if isinstance(v, str) else [v], alignment=a)
        for v, a in zip(values, alignments)
    ]
    return TableRow(cells=cells, is_header=header)


@pytest.mark.unit
class TestCellHelpers:
    """Tests for padding and delimiter segments."""

    def test_pad_left_and_none(self):
        """Test left and unaligned cells pad on the right."""
        assert pad_cell("ab", 5, "left") == "ab   "
        assert pad_cell("ab", 5, None) == "ab   "

    def test_pad_right(self):
        """Test right aligned cells pad on the left."""
        assert pad_cell("ab", 5, "right") == "   ab"

    def test_pad_center_favours_leading_side(self):
        """Test odd padding puts the smaller half first."""
        assert pad_cell("ab", 5, "center") == " ab  "
        assert pad_cell("ab", 6, "center") == "  ab  "

    def test_pad_wide_characters(self):
        """Test padding counts display cells."""
        assert pad_cell("日本", 6, None) == "日本  "

    def test_pad_never_truncates(self):
        """Test text wider than the column is left alone."""
        assert pad_cell("abcdef", 3, "right") == "abcdef"

    @pytest.mark.parametrize(
        "alignment,expected",
        [(None, "-----"), ("left", ":----"), ("right", "----:"), ("center", ":---:")],
    )
    def test_delimiter_cell(self, alignment, expected):
        """Test colons mark the alignment."""
        assert delimiter_cell(3, alignment) == expected


@pytest.mark.unit
class TestTableRendering:
    """Tests for whole tables."""

    def test_simple_table(self, render):
        """Test columns are padded to the widest cell."""
        table = Table(
            header=row("Name", "Qty", alignments=[None, "right"], header=True),
            rows=[row("apple", "3", alignments=[None, "right"])],
        )
        expected = "| Name  | Qty |\n|-------|----:|\n| apple |   3 |\n"
        assert render(Document(children=[table])) == expected

    def test_header_always_left_aligned(self, render):
        """Test header text ignores the column alignment."""
        table = Table(
            header=row("H", alignments=["right"], header=True),
            rows=[row("long", alignments=["right"])],
        )
        assert render(Document(children=[table])) == "| H    |\n|-----:|\n| long |\n"

    def test_center_alignment(self, render):
        """Test centred body cells."""
        table = Table(
            header=row("Center", alignments=["center"], header=True),
            rows=[row("b", alignments=["center"])],
        )
        assert render(Document(children=[table])) == "| Center |\n|:------:|\n|   b    |\n"

    def test_wide_characters(self, render):
        """Test CJK cells are measured in display cells."""
        table = Table(header=row("名前", header=True), rows=[row("ab")])
        assert render(Document(children=[table])) == "| 名前 |\n|------|\n| ab   |\n"

    def test_minimum_width(self, render):
        """Test empty columns still get a one-character delimiter body."""
        table = Table(header=row("", header=True), rows=[])
        assert render(Document(children=[table])) == "|   |\n|---|\n"

    def test_ragged_rows_padded(self, render):
        """Test rows with fewer cells are filled with empty cells."""
        table = Table(header=row("a", "b", header=True), rows=[row("x")])
        assert render(Document(children=[table])) == "| a | b |\n|---|---|\n| x |   |\n"

    def test_pipes_escaped(self, render):
        """Test pipes in text and code are escaped inside cells."""
        table = Table(header=row("a|b", header=True), rows=[row(Code(content="x|y"))])
        assert render(Document(children=[table])) == "| a\\|b   |\n|--------|\n| `x\\|y` |\n"

    def test_inline_formatting_in_cells(self, render):
        """Test cells render inline markup and measure it."""
        table = Table(header=row("h", header=True), rows=[row(Emphasis(content=[Text(content="e")]))])
        assert render(Document(children=[table])) == "| h   |\n|-----|\n| *e* |\n"

    def test_table_between_paragraphs(self, fmt):
        """Test tables are separated like other blocks."""
        source = "before\n\n| a |\n|---|\n| b |\n\nafter\n"
        assert fmt(source) == source

    def test_table_state_reset(self, render):
        """Test measurements do not leak from one table to the next."""
        wide = Table(header=row("wide column", header=True), rows=[])
        narrow = Table(header=row("n", header=True), rows=[])
        result = render(Document(children=[wide, narrow]))
        assert result.endswith("| n |\n|---|\n")


@pytest.mark.unit
class TestTableErrors:
    """Tests for malformed tables."""

    def test_missing_header(self, render):
        """Test tables need a header row."""
        with pytest.raises(RenderingError, match="no header"):
            render(Document(children=[Table(rows=[row("x")])]))

    def test_non_row(self, render):
        """Test table rows must be TableRow nodes."""
        table = Table(header=row("a", header=True), rows=[TableCell()])
        with pytest.raises(RenderingError):
            render(Document(children=[table]))

    def test_non_cell(self, render):
        """Test row cells must be TableCell nodes."""
        table = Table(header=TableRow(cells=[Text(content="x")]))
        with pytest.raises(RenderingError):
            render(Document(children=[table]))

    def test_nested_table(self, render):
        """Test tables inside table cells are rejected."""
        inner = Table(header=row("i", header=True))
        outer = Table(header=TableRow(cells=[TableCell(content=[inner])]))
        with pytest.raises(RenderingError, match="Nested tables"):
            render(Document(children=[outer]))
