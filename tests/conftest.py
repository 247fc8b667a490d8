"""Pytest configuration and shared fixtures for the mdfmt test suite.

This module provides shared fixtures, test configuration, and helpers
that are used across the entire test suite.
"""

import logging
import shutil
from pathlib import Path
from typing import Callable, Generator

import pytest

from mdfmt.options import MarkdownRendererOptions
from mdfmt.parsers.markdown import MarkdownToAstConverter
from mdfmt.renderers.markdown import MarkdownRenderer

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "gofmt: Tests that need the gofmt executable on PATH")


def pytest_collection_modifyitems(config, items):
    """Skip gofmt tests when gofmt is not installed."""
    if shutil.which("gofmt"):
        return
    skip_gofmt = pytest.mark.skip(reason="gofmt not installed")
    for item in items:
        if "gofmt" in item.keywords:
            item.add_marker(skip_gofmt)


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding sample Markdown documents."""
    return FIXTURES_DIR


@pytest.fixture
def fmt() -> Callable[..., str]:
    """Return a helper that parses and renders Markdown in one call.

    Keyword arguments are renderer options. Code formatters default to an
    empty map so results do not depend on tools installed on the machine.
    """

    def _fmt(source: str, **options) -> str:
        options.setdefault("code_formatters", {})
        doc = MarkdownToAstConverter().parse(source)
        return MarkdownRenderer(MarkdownRendererOptions(**options)).render_to_string(doc)

    return _fmt


@pytest.fixture
def render() -> Callable[..., str]:
    """Return a helper rendering a hand-built Document with renderer options."""

    def _render(doc, **options) -> str:
        options.setdefault("code_formatters", {})
        return MarkdownRenderer(MarkdownRendererOptions(**options)).render_to_string(doc)

    return _render


@pytest.fixture(autouse=True)
def reset_root_logger() -> Generator[None, None, None]:
    """Restore root logger handlers and level changed by the CLI."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
