#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdfmt/utils/__init__.py
"""Utility modules for the mdfmt package."""

from mdfmt.utils.escape import (
    escape_inline_code,
    escape_markdown_text,
    format_link_destination,
    format_link_title,
)
from mdfmt.utils.text import clean_whitespace, display_width, longest_run

__all__ = [
    "clean_whitespace",
    "display_width",
    "escape_inline_code",
    "escape_markdown_text",
    "format_link_destination",
    "format_link_title",
    "longest_run",
]
