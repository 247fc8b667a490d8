#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_escape.py
"""Unit tests for Markdown escaping helpers."""

import pytest

from mdfmt.utils.escape import (
    escape_inline_code,
    escape_markdown_text,
    format_link_destination,
    format_link_title,
)


def escaped(text, **kwargs):
    return escape_markdown_text(text, **kwargs)[0]


@pytest.mark.unit
class TestEscapeMarkdownText:
    """Tests for literal text escaping."""

    def test_plain_text_unchanged(self):
        """Test ordinary prose passes through."""
        assert escaped("Hello world") == "Hello world"

    def test_asterisks(self):
        """Test asterisks are always escaped."""
        assert escape_markdown_text("*literal*") == ("\\*literal\\*", "")

    def test_numbered_period_at_line_start(self):
        """Test a number followed by a period is not read as a list marker."""
        assert escaped("1986. A great year", at_line_start=True) == "1986\\. A great year"

    def test_version_number_period(self):
        """Test a period after mixed text is left alone."""
        assert escaped("v1.2") == "v1.2"

    def test_numeric_tail_carried_over(self):
        """Test the numeric tail from a previous span triggers escaping."""
        assert escaped(". next", normal_tail="42") == "\\. next"

    def test_tail_returned(self):
        """Test the updated normal tail is handed back."""
        assert escape_markdown_text("see 12")[1] == "see 12"
        assert escape_markdown_text("a*b")[1] == "b"

    def test_intra_word_underscore(self):
        """Test underscores inside words are kept."""
        assert escaped("snake_case") == "snake_case"

    def test_leading_underscore(self):
        """Test underscores at word boundaries are escaped."""
        assert escaped("_private") == "\\_private"
        assert escaped("trailing_") == "trailing\\_"

    def test_hash_at_line_start(self):
        """Test a hash opening a line is escaped."""
        assert escaped("# not heading", at_line_start=True) == "\\# not heading"
        assert escaped("# not heading") == "# not heading"

    def test_hash_at_end(self):
        """Test a trailing hash is escaped."""
        assert escaped("C#") == "C\\#"

    @pytest.mark.parametrize("char", ["-", "+", "=", ">"])
    def test_line_start_markers(self, char):
        """Test block markers are only escaped at line start."""
        assert escaped(f"{char} item", at_line_start=True) == f"\\{char} item"
        assert escaped(f"a {char} b") == f"a {char} b"

    def test_paren_after_number_at_line_start(self):
        """Test 1) at line start is not read as an ordered list."""
        assert escaped("1) x", at_line_start=True) == "1\\) x"
        assert escaped("1) x") == "1) x"

    @pytest.mark.parametrize("char", ["\\", "`", "*", "_", "{", "}", "[", "]", "(", ")", "#", "+", "-", "<", ">"])
    def test_single_special_character(self, char):
        """Test a lone special character is always escaped."""
        assert escaped(char) == "\\" + char

    def test_bang_never_escaped(self):
        """Test exclamation marks stay literal."""
        assert escaped("!") == "!"
        assert escaped("wow!") == "wow!"

    @pytest.mark.parametrize("char", ["[", "]", "<", "{", "}", "~", "`"])
    def test_always_escaped(self, char):
        """Test characters escaped wherever they appear."""
        assert escaped(f"a{char}b") == f"a\\{char}b"

    def test_pipe_only_in_table(self):
        """Test pipes are escaped inside table cells only."""
        assert escaped("a|b", in_table=True) == "a\\|b"
        assert escaped("a|b") == "a|b"

    def test_empty(self):
        """Test empty text keeps the incoming tail."""
        assert escape_markdown_text("", normal_tail="7") == ("", "7")


@pytest.mark.unit
class TestEscapeInlineCode:
    """Tests for code span delimiters."""

    def test_simple(self):
        """Test plain code uses a single backtick."""
        assert escape_inline_code("simple code") == ("simple code", "`")

    def test_longer_fence_than_content_run(self):
        """Test the fence outgrows backtick runs in the code."""
        assert escape_inline_code("a `` b") == ("a `` b", "```")

    def test_padding_for_edge_backtick(self):
        """Test content starting with a backtick is padded."""
        assert escape_inline_code("`tick") == (" `tick ", "``")

    def test_padding_for_surrounding_spaces(self):
        """Test content wrapped in spaces keeps them after stripping."""
        assert escape_inline_code(" a ") == ("  a  ", "`")

    def test_all_spaces_not_padded(self):
        """Test whitespace-only content is emitted as is."""
        assert escape_inline_code("  ") == ("  ", "`")

    def test_newlines_become_spaces(self):
        """Test line endings inside code spans."""
        assert escape_inline_code("a\nb") == ("a b", "`")


@pytest.mark.unit
class TestLinkParts:
    """Tests for link destinations and titles."""

    def test_plain_destination(self):
        """Test ordinary URLs are not wrapped."""
        assert format_link_destination("https://example.com/a_(b)") == "https://example.com/a_(b)"

    def test_empty_destination(self):
        """Test empty destination."""
        assert format_link_destination("") == ""

    def test_destination_with_space(self):
        """Test whitespace forces angle brackets."""
        assert format_link_destination("my file.md") == "<my file.md>"

    def test_unbalanced_parentheses(self):
        """Test unbalanced parentheses force angle brackets."""
        assert format_link_destination("a(b") == "<a(b>"

    def test_title_quoting(self):
        """Test titles are double quoted with escapes."""
        assert format_link_title('say "hi"') == '"say \\"hi\\""'
        assert format_link_title("back\\slash") == '"back\\\\slash"'
