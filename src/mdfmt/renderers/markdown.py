#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdfmt/renderers/markdown.py
"""Canonical Markdown rendering from AST.

This module provides the MarkdownRenderer class which converts an mdfmt AST
back into Markdown text in a single canonical form: ATX (or setext)
headings, ``---`` thematic breaks, fenced code blocks, pipe-aligned tables,
normalized emphasis tokens and list indentation, and escaping that keeps
literal text literal.

The renderer itself only holds immutable options. Each call creates a
:class:`MarkdownWalker` bound to a fresh :class:`RenderState`, so a single
renderer instance may be shared between threads.

"""

from __future__ import annotations

import logging
from typing import Sequence

from mdfmt.ast import (
    NODE_TYPES,
    BlockQuote,
    CodeBlock,
    Document,
    Heading,
    HTMLBlock,
    LineBreak,
    List,
    ListItem,
    Node,
    NodeVisitor,
    Paragraph,
    ThematicBreak,
)
from mdfmt.constants import BLOCKQUOTE_MARKER, MIN_CODE_FENCE_LENGTH, SETEXT_UNDERLINE_CHARS, THEMATIC_BREAK
from mdfmt.exceptions import RenderingError
from mdfmt.formatters import apply_code_formatter
from mdfmt.options.markdown import MarkdownRendererOptions
from mdfmt.renderers.base import BaseRenderer
from mdfmt.renderers.inline import InlineRenderingMixin, is_blank_inline
from mdfmt.renderers.state import ListLevel, RenderState
from mdfmt.renderers.table import TableRenderingMixin
from mdfmt.utils.text import display_width, longest_run

logger = logging.getLogger(__name__)


def is_blank_block(node: Node) -> bool:
    """Return True if ``node`` is a block that renders to no text at all."""
    if isinstance(node, Paragraph):
        return all(is_blank_inline(child) for child in node.content)
    if isinstance(node, List):
        return not node.items
    if isinstance(node, HTMLBlock):
        return not node.content.strip("\n")
    return False


class MarkdownWalker(InlineRenderingMixin, TableRenderingMixin, NodeVisitor):
    """Depth-first walker rendering one document into a RenderState.

    Parameters
    ----------
    options : MarkdownRendererOptions
        Active rendering options
    state : RenderState
        State of this render call

    """

    def __init__(self, options: MarkdownRendererOptions, state: RenderState) -> None:
        """Bind the walker to its options and per-call state."""
        self.options = options
        self.state = state

    def _dispatch(self, node: Node) -> None:
        if not isinstance(node, NODE_TYPES):
            raise RenderingError(
                f"Unknown node kind: {type(node).__name__}",
                rendering_stage="dispatch",
            )
        node.accept(self)

    def _separator(self, node: Node, tight: bool) -> str:
        if isinstance(node, List):
            return "\n\n" if node.blank_previous_lines else "\n"
        if isinstance(node, HTMLBlock):
            return "\n\n" if node.blank_previous_lines else "\n"
        if tight:
            return "\n"
        return "\n\n"

    def _render_blocks(self, children: Sequence[Node], tight: bool = False) -> None:
        """Render block children, writing the separator before each non-first child.

        Blocks that would render to nothing are skipped so separators never
        stack up into runs of blank lines.
        """
        writer = self.state.writer
        visible = [child for child in children if not is_blank_block(child)]
        for i, child in enumerate(visible):
            if i > 0:
                writer.write(self._separator(child, tight))
            self._dispatch(child)

    def _start_block_inlines(self, at_line_start: bool = True) -> None:
        self.state.at_line_start = at_line_start
        self.state.normal_tail = ""

    # ------------------------------------------------------------------
    # Block nodes
    # ------------------------------------------------------------------

    def visit_document(self, node: Document) -> None:
        """Render all blocks and terminate the output with one newline."""
        self._render_blocks(node.children)
        self.state.writer.write("\n")

    def visit_paragraph(self, node: Paragraph) -> None:
        """Render a paragraph's inline content."""
        content = list(node.content)
        while content and isinstance(content[-1], LineBreak):
            content.pop()
        self._start_block_inlines()
        self._render_inlines(content)

    def visit_heading(self, node: Heading) -> None:
        """Render a heading in ATX or setext style.

        Setext style applies to levels 1 and 2 only; an empty heading is
        always ATX since an empty setext underline would be a thematic break.
        """
        setext = self.options.heading_style == "setext" and node.level in SETEXT_UNDERLINE_CHARS
        text = self._render_inline_content(node.content, at_line_start=setext, in_heading=True).strip(" ")
        identifier = f"{{#{node.identifier}}}" if node.identifier else ""

        writer = self.state.writer
        if setext and text:
            line = f"{text} {identifier}" if identifier else text
            writer.write(line)
            writer.write("\n" + SETEXT_UNDERLINE_CHARS[node.level] * display_width(line))
            return

        parts = ["#" * node.level]
        if text:
            parts.append(text)
        if identifier:
            parts.append(identifier)
        writer.write(" ".join(parts))

    def visit_thematic_break(self, node: ThematicBreak) -> None:
        """Render a thematic break as ``---``."""
        self.state.writer.write(THEMATIC_BREAK)

    def visit_html_block(self, node: HTMLBlock) -> None:
        """Write a raw HTML block verbatim, minus trailing newlines."""
        self.state.writer.write(node.content.rstrip("\n"))

    def visit_code_block(self, node: CodeBlock) -> None:
        """Render a code block as a fenced block.

        Indented code blocks are converted to backtick fences. Content is
        passed through the code formatter registered for the info string.
        """
        code = node.content
        info = (node.info or "").strip()
        if node.fenced and info:
            code = apply_code_formatter(self.options.code_formatters, info, code)
        if code and not code.endswith("\n"):
            code += "\n"

        fence_char = node.fence_char if node.fenced else "`"
        if fence_char == "`" and "`" in info:
            fence_char = "~"
        fence = fence_char * max(MIN_CODE_FENCE_LENGTH, longest_run(code, fence_char) + 1)

        writer = self.state.writer
        writer.write(fence + info + "\n")
        writer.write(code)
        writer.write(fence)

    def visit_block_quote(self, node: BlockQuote) -> None:
        """Render a block quote, prefixing each of its lines with ``>``."""
        writer = self.state.writer
        if not node.children:
            writer.write(BLOCKQUOTE_MARKER.rstrip())
            return

        if not writer.at_line_start:
            writer.write(BLOCKQUOTE_MARKER)
        writer.push_indent(BLOCKQUOTE_MARKER)
        try:
            self._render_blocks(node.children)
        finally:
            writer.pop_indent()

    def visit_list(self, node: List) -> None:
        """Render list items with counters kept per nesting level."""
        level = ListLevel(
            ordered=node.ordered,
            start=node.start,
            tight=node.tight,
            bullet=node.bullet,
        )
        state = self.state
        state.list_levels.append(level)
        try:
            for i, item in enumerate(node.items):
                if not isinstance(item, ListItem):
                    raise RenderingError(
                        f"Unexpected {type(item).__name__} inside a list; expected ListItem",
                        rendering_stage="list",
                    )
                if i > 0:
                    blank = not node.tight or item.blank_previous_lines
                    state.writer.write("\n\n" if blank else "\n")
                self._dispatch(item)
        finally:
            state.list_levels.pop()

    def _child_indent(self, marker: str, first_child: Node) -> str:
        """Return the prefix for an item's continuation lines.

        Uniform indentation applies when the first child is a paragraph or
        heading. Other first blocks (code, HTML, nested lists) keep lines that
        are significant relative to the marker, so they stay aligned. The
        extra indentation is capped at three spaces beyond the marker so the
        children never turn into an indented code block.
        """
        width = len(marker)
        if self.options.list_indent_style == "uniform" and isinstance(first_child, (Paragraph, Heading)):
            width = min(max(self.options.uniform_indent_width, width), width + 3)
        return " " * width

    def visit_list_item(self, node: ListItem) -> None:
        """Render one list item: marker, optional task box, then children.

        The task box is written only before a paragraph, the one place a
        ``[X]`` is read back as a checkbox.
        """
        state = self.state
        if not state.in_list:
            raise RenderingError("ListItem encountered outside of a list", rendering_stage="list")
        level = state.list_levels[-1]
        marker = level.next_marker()
        writer = state.writer

        children = [child for child in node.children if not is_blank_block(child)]
        if not children:
            writer.write(marker.rstrip())
            return

        checkbox = ""
        if node.task_status is not None:
            if isinstance(children[0], Paragraph):
                checkbox = "[X] " if node.task_status == "checked" else "[ ] "
            else:
                logger.debug("Dropping task box of a list item starting with %s", type(children[0]).__name__)

        writer.write(marker + checkbox)

        writer.push_indent(self._child_indent(marker, children[0]))
        try:
            self._render_blocks(children, tight=level.tight)
        finally:
            writer.pop_indent()


class MarkdownRenderer(BaseRenderer):
    """Render AST to canonical Markdown text.

    Parameters
    ----------
    options : MarkdownRendererOptions or None, default = None
        Markdown rendering options

    Examples
    --------
    Basic usage:

        >>> from mdfmt.ast import Document, Heading, Text
        >>> doc = Document(children=[Heading(level=1, content=[Text(content="Title")])])
        >>> MarkdownRenderer().render_to_string(doc)
        '# Title\\n'

    """

    def __init__(self, options: MarkdownRendererOptions | None = None):
        """Initialize the Markdown renderer with options."""
        BaseRenderer._validate_options_type(options, MarkdownRendererOptions, "markdown")
        options = options or MarkdownRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: MarkdownRendererOptions = options

    def render_to_string(self, doc: Document) -> str:
        """Render a document to a Markdown string.

        Parameters
        ----------
        doc : Document
            Document to render

        Returns
        -------
        str
            Markdown text ending in exactly one newline

        Raises
        ------
        RenderingError
            If the tree contains a node kind the renderer does not handle or
            a table or list has an unexpected shape

        """
        if not isinstance(doc, Document):
            raise RenderingError(
                f"Expected a Document, got {type(doc).__name__}",
                rendering_stage="dispatch",
            )

        state = RenderState()
        walker = MarkdownWalker(self.options, state)
        walker.visit_document(doc)

        output = state.writer.getvalue()
        if output.strip("\n") == "":
            return "\n"
        return output


__all__ = ["MarkdownRenderer", "MarkdownWalker"]
