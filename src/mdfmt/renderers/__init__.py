#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/mdfmt/renderers/__init__.py
"""AST renderers for writing documents back out as Markdown.

This package provides the canonical Markdown renderer and the pieces it is
built from:
- MarkdownRenderer: Render an AST to canonical Markdown text
- IndentWriter: Output stream that re-applies block prefixes on every line
- RenderState: Mutable state scoped to a single render call

Examples
--------
Convert AST to Markdown:

    >>> from mdfmt.ast import Document, Heading, Text
    >>> from mdfmt.renderers import MarkdownRenderer
    >>> from mdfmt.options import MarkdownRendererOptions
    >>> doc = Document(children=[
    ...     Heading(level=1, content=[Text(content="Title")])
    ... ])
    >>> renderer = MarkdownRenderer(MarkdownRendererOptions())
    >>> renderer.render_to_string(doc)
    '# Title\\n'

"""

from mdfmt.renderers.base import BaseRenderer
from mdfmt.renderers.markdown import MarkdownRenderer
from mdfmt.renderers.state import ListLevel, RenderState
from mdfmt.renderers.writer import Indentation, IndentWriter

__all__ = [
    "BaseRenderer",
    "IndentWriter",
    "Indentation",
    "ListLevel",
    "MarkdownRenderer",
    "RenderState",
]
