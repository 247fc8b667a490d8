"""Unit tests for AST node classes."""

import pytest

from mdfmt.ast import (
    NODE_TYPES,
    BlockQuote,
    CodeBlock,
    Document,
    Emphasis,
    Heading,
    List,
    ListItem,
    Paragraph,
    Table,
    TableCell,
    TableRow,
    Text,
    get_node_children,
)


@pytest.mark.unit
class TestNodeValidation:
    """Tests for constructor checks."""

    @pytest.mark.parametrize("level", [0, 7])
    def test_heading_level_range(self, level):
        """Test heading levels outside 1-6 are rejected."""
        with pytest.raises(ValueError):
            Heading(level=level)

    def test_code_block_fence_char(self):
        """Test only backtick and tilde fences exist."""
        with pytest.raises(ValueError):
            CodeBlock(content="x", fence_char="'")

    def test_code_block_language(self):
        """Test the language is the first word of the info string."""
        assert CodeBlock(content="", info="python title=x").language == "python"
        assert CodeBlock(content="").language is None

    def test_ordered_list_default_delimiter(self):
        """Test ordered lists default to a period delimiter."""
        assert List(ordered=True).bullet == "."
        assert List(ordered=False).bullet == "-"

    def test_list_bullet_validation(self):
        """Test bullets must match the list kind."""
        with pytest.raises(ValueError):
            List(ordered=False, bullet=".")
        with pytest.raises(ValueError):
            List(ordered=True, bullet="*")

    def test_negative_start(self):
        """Test negative start numbers are rejected."""
        with pytest.raises(ValueError):
            List(ordered=True, start=-1)


@pytest.mark.unit
class TestNodeChildren:
    """Tests for generic child access."""

    def test_document_children(self):
        """Test block containers expose children."""
        para = Paragraph(content=[Text(content="x")])
        assert get_node_children(Document(children=[para])) == [para]
        assert get_node_children(BlockQuote(children=[para])) == [para]

    def test_inline_container(self):
        """Test inline containers expose content."""
        text = Text(content="x")
        assert get_node_children(Emphasis(content=[text])) == [text]

    def test_list_items(self):
        """Test lists expose their items."""
        item = ListItem()
        assert get_node_children(List(ordered=False, items=[item])) == [item]

    def test_table_rows(self):
        """Test tables expose header then body rows."""
        header = TableRow(cells=[TableCell()], is_header=True)
        row = TableRow(cells=[TableCell()])
        assert get_node_children(Table(header=header, rows=[row])) == [header, row]

    def test_leaf(self):
        """Test leaves have no children."""
        assert get_node_children(Text(content="x")) == []

    def test_sealed_set(self):
        """Test the node kind registry has every concrete kind once."""
        assert len(NODE_TYPES) == len(set(NODE_TYPES)) == 22
