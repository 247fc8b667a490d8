#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdfmt/parsers/__init__.py
"""Parsers turning Markdown text into the mdfmt AST."""

from mdfmt.parsers.base import BaseParser
from mdfmt.parsers.markdown import MarkdownToAstConverter, markdown_to_ast

__all__ = ["BaseParser", "MarkdownToAstConverter", "markdown_to_ast"]
