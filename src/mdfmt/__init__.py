"""mdfmt - a canonical formatter for Markdown documents.

mdfmt parses Markdown with mistune and renders the resulting AST back into a
single canonical form, in the spirit of ``gofmt``: stable heading and list
styles, normalized emphasis delimiters, pipe-aligned tables, fenced code
blocks and minimal escaping. Formatting is idempotent, so running the
formatter over its own output changes nothing.

Key Features
------------
- ATX or setext headings, collapsed or preserved soft wraps
- Configurable emphasis and strong delimiters
- Aligned or uniform list item indentation
- Width-aware table alignment (wide CJK characters count as two columns)
- Pluggable code block formatters, with a ``gofmt`` bridge for Go

Examples
--------
Format a string:

    >>> from mdfmt import format_markdown
    >>> format_markdown("# hello\\nworld")
    '# hello\\n\\nworld\\n'

Work with the AST directly:

    >>> from mdfmt import MarkdownRenderer, markdown_to_ast
    >>> doc = markdown_to_ast("Some *text*")
    >>> MarkdownRenderer().render_to_string(doc)
    'Some *text*\\n'

"""

from __future__ import annotations

from mdfmt.api import format_bytes, format_markdown, from_ast, process, to_ast
from mdfmt.exceptions import (
    FileAccessError,
    FileError,
    InvalidOptionsError,
    MdfmtError,
    OutputWriteError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from mdfmt.formatters import GO_CODE_FORMATTERS, CodeFormatter, CodeFormatterRegistry, format_go
from mdfmt.options import MarkdownParserOptions, MarkdownRendererOptions
from mdfmt.parsers import MarkdownToAstConverter, markdown_to_ast
from mdfmt.renderers import MarkdownRenderer
from mdfmt.utils.text import clean_whitespace

__version__ = "0.1.0"

__all__ = [
    "CodeFormatter",
    "CodeFormatterRegistry",
    "FileAccessError",
    "FileError",
    "GO_CODE_FORMATTERS",
    "InvalidOptionsError",
    "MarkdownParserOptions",
    "MarkdownRenderer",
    "MarkdownRendererOptions",
    "MarkdownToAstConverter",
    "MdfmtError",
    "OutputWriteError",
    "ParsingError",
    "RenderingError",
    "ValidationError",
    "__version__",
    "clean_whitespace",
    "format_bytes",
    "format_go",
    "format_markdown",
    "from_ast",
    "markdown_to_ast",
    "process",
    "to_ast",
]
