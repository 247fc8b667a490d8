#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdfmt/api.py
"""High-level formatting API.

These functions tie the mistune-backed parser and the canonical renderer
together. Renderer options can be passed as an options object, as keyword
arguments, or both (keyword arguments override fields of the object).

Examples
--------
    >>> format_markdown("# hello\\nworld")
    '# hello\\n\\nworld\\n'
    >>> format_markdown("- foo\\n  - bar\\n- baz\\n", list_indent_style="uniform")
    '- foo\\n    - bar\\n- baz\\n'

"""

from __future__ import annotations

import logging
from dataclasses import fields
from pathlib import Path
from typing import Any, Optional, Union

from mdfmt.ast import Document
from mdfmt.exceptions import InvalidOptionsError
from mdfmt.options import MarkdownParserOptions, MarkdownRendererOptions
from mdfmt.parsers.base import ParserInput
from mdfmt.parsers.markdown import MarkdownToAstConverter
from mdfmt.renderers.base import OutputTarget
from mdfmt.renderers.markdown import MarkdownRenderer

logger = logging.getLogger(__name__)


def _resolve_renderer_options(
    renderer_options: Optional[MarkdownRendererOptions], **kwargs: Any
) -> MarkdownRendererOptions:
    """Merge keyword overrides into renderer options.

    Raises
    ------
    InvalidOptionsError
        If a keyword does not name a renderer option

    """
    option_names = {field.name for field in fields(MarkdownRendererOptions)}
    unknown = sorted(set(kwargs) - option_names)
    if unknown:
        raise InvalidOptionsError(
            unknown[0],
            kwargs[unknown[0]],
            message=f"Unknown renderer option(s): {', '.join(unknown)}",
            choices=sorted(option_names),
        )

    if renderer_options is None:
        return MarkdownRendererOptions(**kwargs)
    if kwargs:
        return renderer_options.create_updated(**kwargs)
    return renderer_options


def to_ast(source: ParserInput, *, parser_options: Optional[MarkdownParserOptions] = None) -> Document:
    """Parse Markdown into an AST document.

    Parameters
    ----------
    source : str, bytes, Path or IO
        Markdown text, UTF-8 bytes, a file path or a stream
    parser_options : MarkdownParserOptions, optional
        Parser configuration

    Returns
    -------
    Document
        AST document node

    """
    return MarkdownToAstConverter(parser_options).parse(source)


def from_ast(
    ast_doc: Document,
    output: Union[OutputTarget, None] = None,
    *,
    renderer_options: Optional[MarkdownRendererOptions] = None,
    **kwargs: Any,
) -> Optional[str]:
    """Render an AST document to canonical Markdown.

    Parameters
    ----------
    ast_doc : Document
        AST Document node to render
    output : str, Path, IO[bytes], IO[str], or None, optional
        Output destination. If None, the rendered text is returned.
    renderer_options : MarkdownRendererOptions, optional
        Rendering options
    kwargs : Any
        Renderer options that override ``renderer_options``

    Returns
    -------
    str or None
        The Markdown text if ``output`` is None, otherwise None

    """
    options = _resolve_renderer_options(renderer_options, **kwargs)
    renderer = MarkdownRenderer(options)
    if output is None:
        return renderer.render_to_string(ast_doc)
    renderer.render(ast_doc, output)
    return None


def format_markdown(
    source: str,
    *,
    parser_options: Optional[MarkdownParserOptions] = None,
    renderer_options: Optional[MarkdownRendererOptions] = None,
    **kwargs: Any,
) -> str:
    """Reformat Markdown text into canonical form.

    Parameters
    ----------
    source : str
        Markdown text
    parser_options : MarkdownParserOptions, optional
        Parser configuration
    renderer_options : MarkdownRendererOptions, optional
        Rendering options
    kwargs : Any
        Renderer options that override ``renderer_options``

    Returns
    -------
    str
        Canonical Markdown ending in exactly one newline

    """
    options = _resolve_renderer_options(renderer_options, **kwargs)
    doc = to_ast(source, parser_options=parser_options)
    return MarkdownRenderer(options).render_to_string(doc)


def format_bytes(
    data: bytes,
    *,
    parser_options: Optional[MarkdownParserOptions] = None,
    renderer_options: Optional[MarkdownRendererOptions] = None,
    **kwargs: Any,
) -> bytes:
    """Reformat UTF-8 encoded Markdown, returning UTF-8 bytes.

    Raises
    ------
    ParsingError
        If ``data`` is not valid UTF-8

    """
    options = _resolve_renderer_options(renderer_options, **kwargs)
    doc = to_ast(data, parser_options=parser_options)
    return MarkdownRenderer(options).render_to_bytes(doc)


def process(
    filename: Union[str, Path],
    src: Optional[bytes] = None,
    *,
    parser_options: Optional[MarkdownParserOptions] = None,
    renderer_options: Optional[MarkdownRendererOptions] = None,
    **kwargs: Any,
) -> bytes:
    """Format the file ``filename``, or ``src`` if given, and return the result.

    Parameters
    ----------
    filename : str or Path
        File to read when ``src`` is None; otherwise only used in messages
    src : bytes, optional
        Source bytes to format instead of reading ``filename``
    parser_options : MarkdownParserOptions, optional
        Parser configuration
    renderer_options : MarkdownRendererOptions, optional
        Rendering options
    kwargs : Any
        Renderer options that override ``renderer_options``

    Returns
    -------
    bytes
        Formatted Markdown as UTF-8

    Raises
    ------
    FileAccessError
        If ``src`` is None and the file cannot be read
    ParsingError
        If the source is not valid UTF-8

    """
    if src is None:
        logger.debug("Reading %s", filename)
        source: ParserInput = Path(filename)
    else:
        source = src
    options = _resolve_renderer_options(renderer_options, **kwargs)
    doc = to_ast(source, parser_options=parser_options)
    return MarkdownRenderer(options).render_to_bytes(doc)


__all__ = ["format_bytes", "format_markdown", "from_ast", "process", "to_ast"]
