#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdfmt/parsers/markdown.py
"""Markdown to AST converter.

This module provides conversion from Markdown text to the mdfmt AST using
the mistune parser. Besides the document structure it records the source
details the canonical renderer needs to reproduce the document faithfully:
blank lines before lists and HTML blocks, list tightness and bullet
characters, task list state, code fence characters and heading identifiers.

Reference-style links are resolved by mistune and come out as inline links.

"""

from __future__ import annotations

import logging
import re
from typing import Any, Literal

import mistune
from mistune.util import escape_url

from mdfmt.ast import (
    AutoLink,
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    Heading,
    HTMLBlock,
    HTMLInline,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    Strikethrough,
    Strong,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
)
from mdfmt.exceptions import ParsingError
from mdfmt.options.markdown import MarkdownParserOptions
from mdfmt.parsers.base import BaseParser, ParserInput

logger = logging.getLogger(__name__)

_HEADING_ID = re.compile(r"\s*\{#([^}\s]+)\}\s*$")
_SOFT_BREAK = re.compile(r"[ \t]*\n[ \t]*")
_URI_AUTOLINK = re.compile(r"[A-Za-z][A-Za-z0-9.+-]{1,31}:[^<>\x00-\x20]*")
_EMAIL_AUTOLINK = re.compile(
    r"[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*"
)
_TABLE_PLUGINS = (
    "table",
    "mistune.plugins.table.table_in_quote",
    "mistune.plugins.table.table_in_list",
)


def _dedent_html(raw: str) -> str:
    """Remove the first line's leading spaces from every line of ``raw``.

    HTML blocks keep their source indentation relative to the enclosing list
    item. Continuation lines lose at most as many spaces as the first line.
    """
    first, sep, rest = raw.partition("\n")
    width = len(first) - len(first.lstrip(" "))
    if not width:
        return raw
    lines = [line[min(width, len(line) - len(line.lstrip(" "))) :] for line in rest.split("\n")] if sep else []
    return "\n".join([first[width:], *lines])


def is_autolink(url: str, label: str) -> bool:
    """Return True if a link with this url and single text label came from ``<...>``.

        >>> is_autolink("https://example.com", "https://example.com")
        True
        >>> is_autolink("mailto:me@example.com", "me@example.com")
        True
        >>> is_autolink("page.html", "page.html")
        False

    """
    if _URI_AUTOLINK.fullmatch(label) and url == escape_url(label):
        return True
    return bool(_EMAIL_AUTOLINK.fullmatch(label)) and url == escape_url("mailto:" + label)


class MarkdownToAstConverter(BaseParser):
    r"""Convert Markdown to AST representation.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
    Basic parsing:

        >>> converter = MarkdownToAstConverter()
        >>> doc = converter.parse("# Hello\\n\\nThis is **bold**.")

    Without GFM tables:

        >>> options = MarkdownParserOptions(parse_tables=False)
        >>> doc = MarkdownToAstConverter(options).parse("| a |\\n|---|")

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the Markdown parser with options."""
        BaseParser._validate_options_type(options, MarkdownParserOptions, "markdown")
        options = options or MarkdownParserOptions()
        super().__init__(options)
        self.options: MarkdownParserOptions = options

    def _plugins(self) -> list[str]:
        plugins: list[str] = []
        if self.options.parse_strikethrough:
            plugins.append("strikethrough")
        if self.options.parse_tables:
            plugins.extend(_TABLE_PLUGINS)
        if self.options.parse_task_lists:
            plugins.append("task_lists")
        return plugins

    def parse(self, input_data: ParserInput) -> Document:
        """Parse Markdown input into AST Document.

        Parameters
        ----------
        input_data : str, bytes, Path or IO
            Markdown input to parse

        Returns
        -------
        Document
            AST document node

        Raises
        ------
        ParsingError
            If the input cannot be decoded or mistune yields a block token
            with no AST counterpart

        """
        markdown_content = self._load_text_content(input_data)

        markdown = mistune.create_markdown(plugins=self._plugins(), renderer=None)
        try:
            tokens, _state = markdown.parse(markdown_content)
        except RecursionError as e:
            raise ParsingError("Document is nested too deeply", parsing_stage="block", original_error=e) from e

        if not isinstance(tokens, list):
            raise ParsingError("mistune returned rendered output instead of tokens", parsing_stage="block")

        children = self._process_tokens(tokens)
        logger.debug("Parsed %d top-level blocks", len(children))
        return Document(children=children)

    # ------------------------------------------------------------------
    # Block tokens
    # ------------------------------------------------------------------

    def _process_tokens(self, tokens: list[dict[str, Any]], in_list_item: bool = False) -> list[Node]:
        """Process a list of mistune block tokens into AST nodes.

        ``blank_line`` tokens are not kept as nodes; they only mark the
        following block as preceded by a blank line. mistune folds the blank
        lines after a list into its last item, so outside list items a block
        following a list is always treated as blank-separated.
        """
        nodes: list[Node] = []
        blank_before = False

        for token in tokens:
            if token.get("type") == "blank_line":
                blank_before = True
                continue
            node = self._process_token(token, blank_before)
            if in_list_item and isinstance(node, HTMLBlock):
                node.content = _dedent_html(node.content)
            blank_before = not in_list_item and token.get("type") == "list"
            if node is not None:
                nodes.append(node)

        return nodes

    def _process_token(self, token: dict[str, Any], blank_before: bool = False) -> Node | None:
        """Process a single mistune block token into an AST node.

        Parameters
        ----------
        token : dict
            Mistune token dictionary with 'type' and other fields
        blank_before : bool, default False
            Whether a blank line preceded the token in the source

        Returns
        -------
        Node or None
            Resulting AST node, None for blocks that carry no content

        Raises
        ------
        ParsingError
            If the token type is unknown

        """
        token_type = token.get("type", "")

        if token_type == "heading":
            return self._process_heading(token)
        elif token_type in ("paragraph", "block_text"):
            # block_text is used for tight list items
            return self._process_paragraph(token)
        elif token_type == "block_code":
            return self._process_code_block(token)
        elif token_type == "block_quote":
            return BlockQuote(children=self._process_tokens(token.get("children", [])))
        elif token_type == "list":
            return self._process_list(token, blank_before)
        elif token_type == "table":
            return self._process_table(token)
        elif token_type == "thematic_break":
            return ThematicBreak()
        elif token_type == "block_html":
            return HTMLBlock(content=token.get("raw", ""), blank_previous_lines=blank_before)

        raise ParsingError(f"Unsupported block token: {token_type!r}", parsing_stage="block")

    def _process_heading(self, token: dict[str, Any]) -> Heading:
        """Process heading token, splitting off a trailing ``{#id}`` attribute."""
        attrs = token.get("attrs", {})
        level = attrs.get("level", 1)
        content = self._process_inline_tokens(token.get("children", []))

        identifier = None
        if content and isinstance(content[-1], Text):
            match = _HEADING_ID.search(content[-1].content)
            if match:
                identifier = match.group(1)
                remaining = content[-1].content[: match.start()]
                if remaining:
                    content[-1] = Text(content=remaining)
                else:
                    content.pop()

        return Heading(level=level, content=content, identifier=identifier)

    def _process_paragraph(self, token: dict[str, Any]) -> Paragraph | None:
        content = self._process_inline_tokens(token.get("children", []))
        if not content:
            return None
        return Paragraph(content=content)

    def _process_code_block(self, token: dict[str, Any]) -> CodeBlock:
        """Process fenced and indented code block tokens.

        Parameters
        ----------
        token : dict
            Code block token with 'raw', 'style', 'marker' and optional 'attrs'

        Returns
        -------
        CodeBlock
            Code block AST node

        """
        code_content = token.get("raw", "")
        if token.get("style") == "indent":
            return CodeBlock(content=code_content, fenced=False)

        marker = token.get("marker") or "```"
        info = (token.get("attrs") or {}).get("info") or None
        return CodeBlock(content=code_content, info=info, fence_char=marker[0])

    def _process_list(self, token: dict[str, Any], blank_before: bool) -> List:
        """Process list token.

        Parameters
        ----------
        token : dict
            List token with 'children', 'tight', 'bullet' and 'attrs'
            (ordered, start)
        blank_before : bool
            Whether a blank line preceded the list

        Returns
        -------
        List
            List AST node

        """
        attrs = token.get("attrs", {})
        ordered = bool(attrs.get("ordered", False))
        tight = bool(token.get("tight", True))
        bullet = token.get("bullet") or ("." if ordered else "-")

        items = [
            self._process_list_item(child, blank_before=not tight and i > 0)
            for i, child in enumerate(token.get("children", []))
        ]
        return List(
            ordered=ordered,
            items=items,
            start=attrs.get("start", 1),
            tight=tight,
            bullet=bullet,
            blank_previous_lines=blank_before,
        )

    def _process_list_item(self, token: dict[str, Any], blank_before: bool) -> ListItem:
        token_type = token.get("type")
        if token_type not in ("list_item", "task_list_item"):
            raise ParsingError(f"Unexpected {token_type!r} token inside a list", parsing_stage="block")

        task_status: Literal["checked", "unchecked"] | None = None
        if token_type == "task_list_item":
            task_status = "checked" if token.get("attrs", {}).get("checked") else "unchecked"

        return ListItem(
            children=self._process_tokens(token.get("children", []), in_list_item=True),
            task_status=task_status,
            blank_previous_lines=blank_before,
        )

    def _process_table(self, token: dict[str, Any]) -> Table:
        """Process table token.

        Parameters
        ----------
        token : dict
            Table token with 'table_head' and 'table_body' children

        Returns
        -------
        Table
            Table AST node

        """
        header = None
        rows: list[TableRow] = []

        for part in token.get("children", []):
            part_type = part.get("type", "")
            if part_type == "table_head":
                # Cells are direct children of table_head
                header = TableRow(cells=self._process_table_cells(part), is_header=True)
            elif part_type == "table_body":
                for row_token in part.get("children", []):
                    rows.append(TableRow(cells=self._process_table_cells(row_token)))

        return Table(header=header, rows=rows)

    def _process_table_cells(self, row_token: dict[str, Any]) -> list[TableCell]:
        cells = []
        for cell_token in row_token.get("children", []):
            alignment = cell_token.get("attrs", {}).get("align")
            content = self._process_inline_tokens(cell_token.get("children", []))
            cells.append(TableCell(content=content, alignment=alignment))
        return cells

    # ------------------------------------------------------------------
    # Inline tokens
    # ------------------------------------------------------------------

    @staticmethod
    def _merge_text_tokens(tokens: list[dict[str, Any]]) -> list[dict[str, Any]]:
        """Join runs of adjacent text tokens.

        mistune emits unmatched emphasis delimiters and backslash escapes as
        separate text tokens; joined, the escaper sees the characters around
        them (``snake_case`` stays unescaped).
        """
        merged: list[dict[str, Any]] = []
        for token in tokens:
            if token.get("type") == "text" and merged and merged[-1].get("type") == "text":
                merged[-1] = {"type": "text", "raw": merged[-1].get("raw", "") + token.get("raw", "")}
            else:
                merged.append(token)
        return merged

    def _process_inline_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process inline tokens.

        Parameters
        ----------
        tokens : list of dict
            Inline token dictionaries

        Returns
        -------
        list of Node
            Inline AST nodes

        """
        nodes: list[Node] = []
        for token in self._merge_text_tokens(tokens):
            node = self._process_inline_token(token)
            if isinstance(node, list):
                nodes.extend(node)
            elif node is not None:
                nodes.append(node)
        return nodes

    def _handle_text_token(self, token: dict[str, Any]) -> list[Node]:
        """Handle text token, turning embedded newlines into soft breaks."""
        raw = token.get("raw", "")
        nodes: list[Node] = []
        for i, part in enumerate(_SOFT_BREAK.split(raw)):
            if i > 0:
                nodes.append(LineBreak(soft=True))
            if part:
                nodes.append(Text(content=part))
        return nodes

    def _handle_strong_token(self, token: dict[str, Any]) -> Strong:
        """Handle strong token."""
        return Strong(content=self._process_inline_tokens(token.get("children", [])))

    def _handle_emphasis_token(self, token: dict[str, Any]) -> Emphasis:
        """Handle emphasis token."""
        return Emphasis(content=self._process_inline_tokens(token.get("children", [])))

    def _handle_codespan_token(self, token: dict[str, Any]) -> Code:
        """Handle codespan token."""
        return Code(content=token.get("raw", ""))

    def _handle_link_token(self, token: dict[str, Any]) -> Link | AutoLink:
        """Handle link token, recognising autolinks."""
        attrs = token.get("attrs", {})
        url = attrs.get("url", "")
        title = attrs.get("title", None)
        children = token.get("children", [])

        if not title and len(children) == 1 and children[0].get("type") == "text":
            label = children[0].get("raw", "")
            if is_autolink(url, label):
                return AutoLink(url=url, label=label)

        return Link(url=url, content=self._process_inline_tokens(children), title=title)

    def _handle_image_token(self, token: dict[str, Any]) -> Image:
        """Handle image token. The alt text is in children."""
        attrs = token.get("attrs", {})
        return Image(
            url=attrs.get("url", ""),
            content=self._process_inline_tokens(token.get("children", [])),
            title=attrs.get("title", None),
        )

    def _handle_linebreak_token(self, token: dict[str, Any]) -> LineBreak:
        """Handle hard linebreak token."""
        return LineBreak(soft=False)

    def _handle_softbreak_token(self, token: dict[str, Any]) -> LineBreak:
        """Handle softbreak token."""
        return LineBreak(soft=True)

    def _handle_strikethrough_token(self, token: dict[str, Any]) -> Strikethrough:
        """Handle strikethrough token."""
        return Strikethrough(content=self._process_inline_tokens(token.get("children", [])))

    def _handle_inline_html_token(self, token: dict[str, Any]) -> HTMLInline:
        """Handle inline_html token."""
        return HTMLInline(content=token.get("raw", ""))

    def _process_inline_token(self, token: dict[str, Any]) -> Node | list[Node] | None:
        """Process a single inline token.

        Tokens without a handler keep their raw source as plain text.
        """
        token_type = token.get("type", "")

        handler_map: dict[str, Any] = {
            "text": self._handle_text_token,
            "strong": self._handle_strong_token,
            "emphasis": self._handle_emphasis_token,
            "codespan": self._handle_codespan_token,
            "link": self._handle_link_token,
            "image": self._handle_image_token,
            "linebreak": self._handle_linebreak_token,
            "softbreak": self._handle_softbreak_token,
            "strikethrough": self._handle_strikethrough_token,
            "inline_html": self._handle_inline_html_token,
        }

        handler = handler_map.get(token_type)
        if handler:
            return handler(token)

        raw = token.get("raw")
        if raw:
            logger.debug("No handler for inline token %r, keeping its raw text", token_type)
            return Text(content=raw)
        return None


def markdown_to_ast(markdown_content: str, options: MarkdownParserOptions | None = None) -> Document:
    r"""Convert Markdown string to AST.

    This is a convenience function that creates a converter and parses
    the markdown in one step.

    Parameters
    ----------
    markdown_content : str
        Markdown text to parse
    options : MarkdownParserOptions or None, default = None
        Parser configuration

    Returns
    -------
    Document
        AST document node

    Examples
    --------
        >>> doc = markdown_to_ast("# Hello\\nworld")
        >>> [type(child).__name__ for child in doc.children]
        ['Heading', 'Paragraph']

    """
    return MarkdownToAstConverter(options).parse(markdown_content)
