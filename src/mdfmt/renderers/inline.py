#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdfmt/renderers/inline.py
"""Inline span rendering for the Markdown renderer.

The :class:`InlineRenderingMixin` implements the ``visit_*`` methods for
inline nodes. It writes into ``self.state.writer`` and reads the active
options from ``self.options``; the block walker in
:mod:`mdfmt.renderers.markdown` supplies both.

Delimiters that wrap content (emphasis, strikethrough, link brackets) are
staged on the writer as pending prefixes so an empty span leaves no stray
markers behind.

"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Sequence

from mdfmt.ast import (
    AutoLink,
    Code,
    Emphasis,
    HTMLInline,
    Image,
    LineBreak,
    Link,
    Node,
    Strikethrough,
    Strong,
    Text,
)
from mdfmt.constants import HARD_BREAK, STRIKETHROUGH_TOKEN
from mdfmt.utils.escape import (
    escape_inline_code,
    escape_markdown_text,
    format_link_destination,
    format_link_title,
)
from mdfmt.utils.text import clean_whitespace

if TYPE_CHECKING:
    from mdfmt.options.markdown import MarkdownRendererOptions
    from mdfmt.renderers.state import RenderState

logger = logging.getLogger(__name__)

_UNESCAPED_PIPE = re.compile(r"(?<!\\)\|")


def is_blank_inline(node: Node) -> bool:
    """Return True if ``node`` renders to nothing but whitespace."""
    if isinstance(node, LineBreak):
        return True
    if isinstance(node, Text):
        return not clean_whitespace(node.content).strip()
    if isinstance(node, Code):
        return not node.content
    if isinstance(node, (Emphasis, Strong, Strikethrough)):
        return all(is_blank_inline(child) for child in node.content)
    return False


def starts_alphanumeric(node: Node | None) -> bool:
    """Return True if ``node`` is text whose first rendered character is a letter or digit."""
    if not isinstance(node, Text):
        return False
    return clean_whitespace(node.content)[:1].isalnum()


class InlineRenderingMixin:
    """Mixin providing inline node rendering.

    The implementing class must have:
    - ``options``: the active MarkdownRendererOptions
    - ``state``: the RenderState of the current call
    - ``_dispatch(node)``: sealed-set dispatch for child nodes

    """

    options: MarkdownRendererOptions
    state: RenderState

    def _dispatch(self, node: Node) -> None:  # pragma: no cover - provided by the walker
        raise NotImplementedError

    def _render_inlines(self, content: Sequence[Node]) -> None:
        for i, child in enumerate(content):
            self.state.next_inline = content[i + 1] if i + 1 < len(content) else None
            self._dispatch(child)

    def _render_inline_content(self, content: Sequence[Node], **flags: bool) -> str:
        """Render inline nodes to a string using a scratch writer.

        Parameters
        ----------
        content : sequence of Node
            Inline nodes to render
        **flags : bool
            Render state flags to set while rendering (``at_line_start``,
            ``in_table_cell``, ``in_heading``)

        Returns
        -------
        str
            Rendered inline content

        """
        with self.state.scratch(**flags) as writer:
            self._render_inlines(content)
            return writer.getvalue()

    def _leave_line_start(self) -> None:
        self.state.at_line_start = False
        self.state.normal_tail = ""

    def _wrap(self, token: str, content: Sequence[Node]) -> None:
        """Write ``content`` between ``token`` delimiters.

        Delimiters are dropped when the content renders empty or only as
        whitespace, since neither parses back as emphasis.
        """
        writer = self.state.writer
        if all(is_blank_inline(child) for child in content):
            self._render_inlines(content)
            return
        if "_" in token and (writer.last_char.isalnum() or starts_alphanumeric(self.state.next_inline)):
            # `_` cannot open or close emphasis inside a word
            token = token.replace("_", "*")
        self._leave_line_start()
        writer.add_pending(token)
        self._render_inlines(content)
        if writer.pending_committed:
            writer.write(token)
        else:
            writer.discard_pending(token)

    def visit_text(self, node: Text) -> None:
        """Render plain text with whitespace collapsed and syntax escaped."""
        state = self.state
        text = clean_whitespace(node.content)
        if text.startswith(" ") and state.writer.last_char in (" ", "\n") and state.writer.pending_committed:
            text = text[1:]
        if not text:
            return

        escaped, state.normal_tail = escape_markdown_text(
            text,
            at_line_start=state.at_line_start,
            normal_tail=state.normal_tail,
            in_table=state.in_table_cell,
        )
        if escaped.endswith("!") and isinstance(state.next_inline, Link):
            escaped = escaped[:-1] + "\\!"
        state.at_line_start = False
        state.writer.write(escaped)

    def visit_emphasis(self, node: Emphasis) -> None:
        """Render emphasis with the configured token."""
        self._wrap(self.options.emphasis_token, node.content)

    def visit_strong(self, node: Strong) -> None:
        """Render strong emphasis with the configured strong token."""
        self._wrap(self.options.effective_strong_token, node.content)

    def visit_strikethrough(self, node: Strikethrough) -> None:
        """Render strikethrough between ``~~`` delimiters."""
        self._wrap(STRIKETHROUGH_TOKEN, node.content)

    def visit_code(self, node: Code) -> None:
        """Render a code span with a backtick run longer than any inside it."""
        if not node.content:
            return
        self._leave_line_start()
        content, fence = escape_inline_code(node.content)
        if self.state.in_table_cell:
            content = _UNESCAPED_PIPE.sub(r"\\|", content)
        self.state.writer.write(f"{fence}{content}{fence}")

    def _write_link_tail(self, url: str, title: str | None) -> None:
        tail = "](" + format_link_destination(url)
        if title:
            tail += " " + format_link_title(title)
        self.state.writer.write(tail + ")")

    def visit_link(self, node: Link) -> None:
        """Render an inline link ``[content](url "title")``."""
        self._leave_line_start()
        self.state.writer.add_pending("[")
        self._render_inlines(node.content)
        self._write_link_tail(node.url, node.title)

    def visit_image(self, node: Image) -> None:
        """Render an image ``![alt](url "title")``."""
        self._leave_line_start()
        self.state.writer.add_pending("![")
        self._render_inlines(node.content)
        self._write_link_tail(node.url, node.title)

    def visit_autolink(self, node: AutoLink) -> None:
        """Render an autolink as ``<label>``."""
        self._leave_line_start()
        self.state.writer.write(f"<{node.label}>")

    def visit_html_inline(self, node: HTMLInline) -> None:
        """Write raw inline HTML verbatim."""
        self._leave_line_start()
        self.state.writer.write(node.content)

    def visit_line_break(self, node: LineBreak) -> None:
        """Render soft and hard line breaks.

        Inside headings and table cells, where a newline would end the
        construct, every break becomes a single space.
        """
        state = self.state
        writer = state.writer
        single_line = state.in_heading or state.in_table_cell

        if node.soft and self.options.soft_wraps == "preserve" and not single_line:
            writer.write("\n")
            state.at_line_start = True
            state.normal_tail = ""
            return

        if node.soft or single_line:
            if writer.last_char != " ":
                writer.write(" ")
            # mid-line space, not a line start
            state.normal_tail = " "
            return

        writer.write(HARD_BREAK)
        state.at_line_start = True
        state.normal_tail = ""
