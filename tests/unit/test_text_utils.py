"""Unit tests for mdfmt.utils.text."""

import pytest

from mdfmt.utils.text import clean_whitespace, display_width, longest_run


@pytest.mark.unit
class TestCleanWhitespace:
    """Tests for inline whitespace normalization."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("foo\n\t\r\nbar", "foo bar"),
            ("a  b", "a b"),
            ("  lead", " lead"),
            ("trail \n", "trail "),
            ("", ""),
            ("\t", " "),
        ],
    )
    def test_cases(self, raw, expected):
        """Test newlines, tabs and space runs collapse to single spaces."""
        assert clean_whitespace(raw) == expected

    @pytest.mark.parametrize("raw", ["foo\n\t\r\nbar", "  a  b  ", "x", "\n\n\n"])
    def test_idempotent(self, raw):
        """Test cleaning twice equals cleaning once."""
        once = clean_whitespace(raw)
        assert clean_whitespace(once) == once

    def test_bytes(self):
        """Test bytes input yields bytes."""
        assert clean_whitespace(b"a\r\n\tb") == b"a b"

    def test_non_ascii_whitespace_untouched(self):
        """Test only space, tab, CR and LF are collapsed."""
        assert clean_whitespace("a\u00a0\u00a0b") == "a\u00a0\u00a0b"


@pytest.mark.unit
class TestDisplayWidth:
    """Tests for terminal cell width."""

    def test_ascii(self):
        """Test one cell per ASCII character."""
        assert display_width("abc") == 3

    def test_wide_characters(self):
        """Test CJK characters occupy two cells."""
        assert display_width("日本") == 4
        assert display_width("a中b") == 4

    def test_empty(self):
        """Test the empty string has no width."""
        assert display_width("") == 0


@pytest.mark.unit
def test_longest_run():
    """Test longest consecutive run detection."""
    assert longest_run("a``b```c", "`") == 3
    assert longest_run("none", "`") == 0
    assert longest_run("~~~~", "~") == 4
