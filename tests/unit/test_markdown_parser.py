#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_markdown_parser.py
"""Unit tests for the mistune-backed Markdown to AST converter."""

import io

import pytest

from mdfmt.ast import (
    AutoLink,
    BlockQuote,
    Code,
    CodeBlock,
    Emphasis,
    Heading,
    HTMLBlock,
    HTMLInline,
    Image,
    LineBreak,
    Link,
    List,
    Paragraph,
    Strikethrough,
    Strong,
    Table,
    Text,
    ThematicBreak,
)
from mdfmt.exceptions import FileAccessError, InvalidOptionsError, ParsingError
from mdfmt.options import MarkdownParserOptions, MarkdownRendererOptions
from mdfmt.parsers.markdown import MarkdownToAstConverter, is_autolink, markdown_to_ast


def first_block(source, **options):
    parser = MarkdownToAstConverter(MarkdownParserOptions(**options) if options else None)
    doc = parser.parse(source)
    assert doc.children, "document has no blocks"
    return doc.children[0]


@pytest.mark.unit
class TestBlockParsing:
    """Tests for block level tokens."""

    def test_heading(self):
        """Test ATX headings."""
        heading = first_block("# Hello")
        assert isinstance(heading, Heading)
        assert heading.level == 1
        assert heading.content == [Text(content="Hello")]
        assert heading.identifier is None

    def test_setext_heading(self):
        """Test setext headings become ordinary headings."""
        heading = first_block("Title\n-----\n")
        assert isinstance(heading, Heading)
        assert heading.level == 2

    def test_heading_identifier(self):
        """Test a trailing {#id} is split off."""
        heading = first_block("## Intro {#intro}")
        assert heading.identifier == "intro"
        assert heading.content == [Text(content="Intro")]

    def test_paragraph(self):
        """Test a simple paragraph."""
        para = first_block("Hello world")
        assert isinstance(para, Paragraph)
        assert para.content == [Text(content="Hello world")]

    def test_fenced_code(self):
        """Test fenced code keeps info string and fence character."""
        block = first_block("~~~python title=x\nprint(1)\n~~~\n")
        assert isinstance(block, CodeBlock)
        assert block.content == "print(1)\n"
        assert block.info == "python title=x"
        assert block.fence_char == "~"
        assert block.fenced

    def test_fenced_code_without_info(self):
        """Test a fence without info string."""
        block = first_block("```\nx\n```\n")
        assert block.info is None
        assert block.fence_char == "`"

    def test_indented_code(self):
        """Test indented code is marked as unfenced."""
        block = first_block("    code here\n")
        assert isinstance(block, CodeBlock)
        assert not block.fenced
        assert "code here" in block.content

    def test_block_quote(self):
        """Test quotes contain blocks."""
        quote = first_block("> a\n>\n> b\n")
        assert isinstance(quote, BlockQuote)
        assert [type(child) for child in quote.children] == [Paragraph, Paragraph]

    def test_thematic_break(self):
        """Test any thematic break spelling."""
        assert isinstance(first_block("***"), ThematicBreak)
        assert isinstance(first_block("_ _ _"), ThematicBreak)

    def test_html_block(self):
        """Test raw HTML blocks keep their source."""
        block = first_block("<div>\nhi\n</div>\n")
        assert isinstance(block, HTMLBlock)
        assert block.content.startswith("<div>\nhi\n</div>")

    def test_reference_links_resolved(self):
        """Test reference links become inline links."""
        doc = markdown_to_ast("[text][ref]\n\n[ref]: https://example.com \"T\"\n")
        assert len(doc.children) == 1
        link = doc.children[0].content[0]
        assert isinstance(link, Link)
        assert link.url == "https://example.com"
        assert link.title == "T"


@pytest.mark.unit
class TestListParsing:
    """Tests for list tokens."""

    def test_bullet_list(self):
        """Test bullet character and tightness."""
        lst = first_block("* a\n* b\n")
        assert isinstance(lst, List)
        assert not lst.ordered
        assert lst.bullet == "*"
        assert lst.tight
        assert len(lst.items) == 2

    def test_ordered_start(self):
        """Test ordered lists record their start number."""
        lst = first_block("3. a\n4. b\n")
        assert lst.ordered
        assert lst.start == 3
        assert lst.bullet == "."

    def test_ordered_paren(self):
        """Test the parenthesis delimiter."""
        assert first_block("1) a\n").bullet == ")"

    def test_loose_list(self):
        """Test blank lines between items make the list loose."""
        lst = first_block("- a\n\n- b\n")
        assert not lst.tight
        assert not lst.items[0].blank_previous_lines
        assert lst.items[1].blank_previous_lines

    def test_task_items(self):
        """Test task list checkboxes."""
        lst = first_block("- [x] done\n- [ ] todo\n- plain\n")
        assert [i.task_status for i in lst.items] == ["checked", "unchecked", None]
        assert lst.items[0].children[0].content == [Text(content="done")]

    def test_task_lists_disabled(self):
        """Test checkboxes stay text without the task list extension."""
        lst = first_block("- [x] done\n", parse_task_lists=False)
        assert lst.items[0].task_status is None

    def test_nested_list(self):
        """Test nested lists live inside items."""
        lst = first_block("- foo\n  - bar\n- baz\n")
        first_item = lst.items[0]
        assert isinstance(first_item.children[0], Paragraph)
        assert isinstance(first_item.children[1], List)
        assert not first_item.children[1].blank_previous_lines

    def test_blank_line_before_list(self):
        """Test the blank line before a list is recorded."""
        doc = markdown_to_ast("para\n\n- a\n")
        assert doc.children[1].blank_previous_lines

    def test_list_interrupting_paragraph(self):
        """Test a list directly after a paragraph has no blank line."""
        doc = markdown_to_ast("para\n- a\n")
        assert isinstance(doc.children[1], List)
        assert not doc.children[1].blank_previous_lines

    def test_block_after_list_is_separated(self):
        """Test lists and HTML following a list count as blank-separated."""
        doc = markdown_to_ast("- a\n\n1. b\n\n<div>\nx\n</div>\n")
        assert [type(child) for child in doc.children] == [List, List, HTMLBlock]
        assert doc.children[1].blank_previous_lines
        assert doc.children[2].blank_previous_lines

    def test_html_in_item_dedented(self):
        """Test HTML blocks inside an item lose the indentation past the item's content column."""
        lst = first_block("- a\n\n    <div>\n    x\n    </div>\n")
        html = lst.items[0].children[1]
        assert isinstance(html, HTMLBlock)
        assert html.content.startswith("<div>\nx\n</div>")

    def test_html_in_item_keeps_relative_indent(self):
        """Test continuation lines keep indentation deeper than the first line."""
        lst = first_block("- a\n\n    <div>\n        x\n    </div>\n")
        assert lst.items[0].children[1].content.startswith("<div>\n    x\n</div>")


@pytest.mark.unit
class TestTableParsing:
    """Tests for GFM tables."""

    def test_table(self):
        """Test header, alignments and body rows."""
        table = first_block("| a | b |\n|:--|--:|\n| 1 | 2 |\n")
        assert isinstance(table, Table)
        assert [c.alignment for c in table.header.cells] == ["left", "right"]
        assert len(table.rows) == 1
        assert table.rows[0].cells[1].content == [Text(content="2")]

    def test_tables_disabled(self):
        """Test table syntax is a paragraph without the extension."""
        assert isinstance(first_block("| a |\n|---|\n", parse_tables=False), Paragraph)

    def test_table_in_quote(self):
        """Test tables nested in block quotes."""
        quote = first_block("> | a |\n> |---|\n> | b |\n")
        assert isinstance(quote.children[0], Table)


@pytest.mark.unit
class TestInlineParsing:
    """Tests for inline tokens."""

    def test_emphasis_and_strong(self):
        """Test emphasis kinds."""
        para = first_block("Hello **bold** and *em*")
        assert para.content == [
            Text(content="Hello "),
            Strong(content=[Text(content="bold")]),
            Text(content=" and "),
            Emphasis(content=[Text(content="em")]),
        ]

    def test_soft_break(self):
        """Test newlines inside paragraphs become soft breaks."""
        para = first_block("line one\nline two")
        assert para.content == [Text(content="line one"), LineBreak(soft=True), Text(content="line two")]

    def test_hard_break(self):
        """Test trailing double space makes a hard break."""
        para = first_block("a  \nb")
        assert LineBreak(soft=False) in para.content

    def test_code_span(self):
        """Test code spans."""
        para = first_block("use `x = 1` here")
        assert Code(content="x = 1") in para.content

    def test_escapes_merged_into_text(self):
        """Test escaped characters join the surrounding text."""
        para = first_block("1986\\. A great year")
        assert para.content == [Text(content="1986. A great year")]

    def test_intra_word_underscore_single_text(self):
        """Test unmatched delimiters do not split text."""
        para = first_block("a snake_case name")
        assert para.content == [Text(content="a snake_case name")]

    def test_link(self):
        """Test inline links."""
        para = first_block('[site](https://example.com "Title")')
        link = para.content[0]
        assert isinstance(link, Link)
        assert link.url == "https://example.com"
        assert link.title == "Title"
        assert link.content == [Text(content="site")]

    def test_autolinks(self):
        """Test angle bracket links become autolinks."""
        para = first_block("<https://example.com> <me@example.com>")
        autolinks = [node for node in para.content if isinstance(node, AutoLink)]
        assert [a.label for a in autolinks] == ["https://example.com", "me@example.com"]
        assert autolinks[1].url == "mailto:me@example.com"

    def test_link_with_url_text_is_not_autolink(self):
        """Test a titled link is kept as a link."""
        para = first_block('[https://example.com](https://example.com "t")')
        assert isinstance(para.content[0], Link)

    def test_image(self):
        """Test images keep alt text as content."""
        para = first_block('![alt text](img.png "T")')
        image = para.content[0]
        assert isinstance(image, Image)
        assert image.url == "img.png"
        assert image.title == "T"
        assert image.content == [Text(content="alt text")]

    def test_strikethrough(self):
        """Test GFM strikethrough."""
        para = first_block("~~gone~~")
        assert para.content == [Strikethrough(content=[Text(content="gone")])]

    def test_strikethrough_disabled(self):
        """Test tildes stay text without the extension."""
        para = first_block("~~gone~~", parse_strikethrough=False)
        assert para.content == [Text(content="~~gone~~")]

    def test_inline_html(self):
        """Test inline HTML."""
        para = first_block("a <b>x</b>")
        assert HTMLInline(content="<b>") in para.content


@pytest.mark.unit
class TestInputHandling:
    """Tests for the accepted input types."""

    def test_bytes(self):
        """Test UTF-8 bytes."""
        assert isinstance(MarkdownToAstConverter().parse("# é".encode("utf-8")).children[0], Heading)

    def test_invalid_utf8(self):
        """Test undecodable bytes raise a parsing error."""
        with pytest.raises(ParsingError) as exc_info:
            MarkdownToAstConverter().parse(b"\xff\xfe bad")
        assert exc_info.value.parsing_stage == "decoding"

    def test_path(self, tmp_path):
        """Test reading from a path."""
        source = tmp_path / "doc.md"
        source.write_text("# Title\n", encoding="utf-8")
        assert isinstance(MarkdownToAstConverter().parse(source).children[0], Heading)

    def test_missing_path(self, tmp_path):
        """Test unreadable paths raise a file access error."""
        with pytest.raises(FileAccessError):
            MarkdownToAstConverter().parse(tmp_path / "missing.md")

    def test_streams(self):
        """Test text and binary streams."""
        assert MarkdownToAstConverter().parse(io.StringIO("x")).children
        assert MarkdownToAstConverter().parse(io.BytesIO(b"x")).children

    def test_string_never_treated_as_path(self, tmp_path):
        """Test a string naming an existing file is still parsed as text."""
        source = tmp_path / "doc.md"
        source.write_text("# Title\n", encoding="utf-8")
        para = MarkdownToAstConverter().parse(str(source)).children[0]
        assert isinstance(para, Paragraph)

    def test_empty_input(self):
        """Test an empty document has no children."""
        assert MarkdownToAstConverter().parse("").children == []

    def test_wrong_options_type(self):
        """Test parser options must be parser options."""
        with pytest.raises(InvalidOptionsError):
            MarkdownToAstConverter(MarkdownRendererOptions())


@pytest.mark.unit
@pytest.mark.parametrize(
    "url,label,expected",
    [
        ("https://example.com", "https://example.com", True),
        ("mailto:me@example.com", "me@example.com", True),
        ("page.html", "page.html", False),
        ("https://example.com", "example", False),
    ],
)
def test_is_autolink(url, label, expected):
    """Test autolink detection from url and label."""
    assert is_autolink(url, label) is expected
