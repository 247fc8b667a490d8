#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/integration/test_cli_integration.py
"""Integration tests for the mdfmt command line."""

import io
import sys

import pytest

from mdfmt.cli import EXIT_ERROR, EXIT_SUCCESS, main

MESSY = "Title\n=====\nsome text\n"
CANONICAL = "# Title\n\nsome text\n"


def run(args, stdin_bytes=None, monkeypatch=None):
    stdout = io.StringIO()
    stderr = io.StringIO()
    if stdin_bytes is not None:
        monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(stdin_bytes), encoding="utf-8"))
    code = main(args, stdout=stdout, stderr=stderr)
    return code, stdout.getvalue(), stderr.getvalue()


@pytest.fixture
def messy_file(tmp_path):
    path = tmp_path / "messy.md"
    path.write_text(MESSY, encoding="utf-8")
    return path


@pytest.mark.integration
@pytest.mark.cli
class TestCliOutputModes:
    """Tests for the default, list, write and diff modes."""

    def test_prints_formatted_file(self, messy_file):
        """Test the default mode prints the result."""
        code, out, err = run([str(messy_file)])
        assert code == EXIT_SUCCESS
        assert out == CANONICAL
        assert err == ""
        assert messy_file.read_text(encoding="utf-8") == MESSY

    def test_list_changed_files(self, tmp_path, messy_file):
        """Test -l names only files that would change."""
        clean = tmp_path / "clean.md"
        clean.write_text(CANONICAL, encoding="utf-8")
        code, out, _ = run(["-l", str(tmp_path)])
        assert code == EXIT_SUCCESS
        assert out.splitlines() == [str(messy_file)]

    def test_write_in_place(self, messy_file):
        """Test -w rewrites the file and prints nothing."""
        code, out, _ = run(["-w", str(messy_file)])
        assert code == EXIT_SUCCESS
        assert out == ""
        assert messy_file.read_text(encoding="utf-8") == CANONICAL

    def test_write_leaves_canonical_file_alone(self, tmp_path):
        """Test -w does not touch files already formatted."""
        path = tmp_path / "clean.md"
        path.write_text(CANONICAL, encoding="utf-8")
        before = path.stat().st_mtime_ns
        run(["-w", str(path)])
        assert path.stat().st_mtime_ns == before

    def test_diff(self, messy_file):
        """Test -d prints a unified diff with a header on stderr."""
        code, out, err = run(["-d", "--color", "never", str(messy_file)])
        assert code == EXIT_SUCCESS
        assert f"diff {messy_file} mdfmt/{messy_file}" in err
        lines = out.splitlines()
        assert "-Title" in lines
        assert "+# Title" in lines
        assert "\x1b[" not in out

    def test_diff_color_always(self, messy_file):
        """Test --color always forces ANSI colours."""
        _, out, _ = run(["-d", "--color", "always", str(messy_file)])
        assert "\x1b[" in out

    def test_style_flags(self, tmp_path):
        """Test formatting flags change the output."""
        path = tmp_path / "doc.md"
        path.write_text("# T\n\n- a\n  - b\n", encoding="utf-8")
        _, out, _ = run(["-u", "--list-indent-style", "uniform", str(path)])
        assert out == "T\n=\n\n- a\n    - b\n"


@pytest.mark.integration
@pytest.mark.cli
class TestCliStdin:
    """Tests for standard input handling."""

    def test_stdin_to_stdout(self, monkeypatch):
        """Test formatting standard input."""
        code, out, _ = run([], stdin_bytes=MESSY.encode("utf-8"), monkeypatch=monkeypatch)
        assert code == EXIT_SUCCESS
        assert out == CANONICAL

    def test_write_with_stdin_rejected(self, monkeypatch):
        """Test -w cannot be combined with standard input."""
        code, out, err = run(["-w"], stdin_bytes=b"x", monkeypatch=monkeypatch)
        assert code == EXIT_ERROR
        assert out == ""
        assert "<standard input>: cannot use -w with standard input" in err


@pytest.mark.integration
@pytest.mark.cli
class TestCliErrors:
    """Tests for exit codes and error reporting."""

    def test_missing_file(self, tmp_path, messy_file):
        """Test a missing path is reported and the rest still processed."""
        missing = tmp_path / "missing.md"
        code, out, err = run([str(missing), str(messy_file)])
        assert code == EXIT_ERROR
        assert err.startswith(f"{missing}: ")
        assert out == CANONICAL

    def test_invalid_utf8(self, tmp_path):
        """Test undecodable files are reported."""
        path = tmp_path / "bad.md"
        path.write_bytes(b"\xff\xfe")
        code, _, err = run([str(path)])
        assert code == EXIT_ERROR
        assert str(path) in err

    def test_usage_error(self):
        """Test bad flags exit with the usage error code."""
        code, _, _ = run(["--no-such-flag"])
        assert code == EXIT_ERROR

    @pytest.mark.parametrize("flag", ["--version", "-h"])
    def test_informational_flags(self, flag):
        """Test --version and -h exit successfully."""
        code, _, _ = run([flag])
        assert code == EXIT_SUCCESS
