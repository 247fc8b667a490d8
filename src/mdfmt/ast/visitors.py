#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdfmt/ast/visitors.py
"""Visitor pattern base class for AST traversal.

Every node kind in :mod:`mdfmt.ast.nodes` dispatches to one ``visit_*``
method. The methods are abstract so a visitor that forgets a node kind fails
at instantiation instead of silently skipping part of a document.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from mdfmt.ast.nodes import (
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
    Paragraph,
    Strikethrough,
    Strong,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
)


class NodeVisitor(ABC):
    """Abstract base class for AST node visitors.

    Subclasses implement a visit_* method for each node kind. Nodes call back
    into the visitor through ``node.accept(visitor)``.

    Examples
    --------
    Rendering a document through a concrete visitor:

        >>> from mdfmt.renderers.markdown import MarkdownRenderer
        >>> MarkdownRenderer().render_to_string(document)

    """

    @abstractmethod
    def visit_document(self, node: Document) -> Any:
        """Visit a Document node."""
        pass

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any:
        """Visit a Heading node."""
        pass

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node."""
        pass

    @abstractmethod
    def visit_code_block(self, node: CodeBlock) -> Any:
        """Visit a CodeBlock node."""
        pass

    @abstractmethod
    def visit_block_quote(self, node: BlockQuote) -> Any:
        """Visit a BlockQuote node."""
        pass

    @abstractmethod
    def visit_list(self, node: List) -> Any:
        """Visit a List node."""
        pass

    @abstractmethod
    def visit_list_item(self, node: ListItem) -> Any:
        """Visit a ListItem node."""
        pass

    @abstractmethod
    def visit_table(self, node: Table) -> Any:
        """Visit a Table node."""
        pass

    @abstractmethod
    def visit_table_row(self, node: TableRow) -> Any:
        """Visit a TableRow node."""
        pass

    @abstractmethod
    def visit_table_cell(self, node: TableCell) -> Any:
        """Visit a TableCell node."""
        pass

    @abstractmethod
    def visit_thematic_break(self, node: ThematicBreak) -> Any:
        """Visit a ThematicBreak node."""
        pass

    @abstractmethod
    def visit_html_block(self, node: HTMLBlock) -> Any:
        """Visit a HTMLBlock node."""
        pass

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node."""
        pass

    @abstractmethod
    def visit_emphasis(self, node: Emphasis) -> Any:
        """Visit a Emphasis node."""
        pass

    @abstractmethod
    def visit_strong(self, node: Strong) -> Any:
        """Visit a Strong node."""
        pass

    @abstractmethod
    def visit_code(self, node: Code) -> Any:
        """Visit a Code node."""
        pass

    @abstractmethod
    def visit_link(self, node: Link) -> Any:
        """Visit a Link node."""
        pass

    @abstractmethod
    def visit_image(self, node: Image) -> Any:
        """Visit a Image node."""
        pass

    @abstractmethod
    def visit_autolink(self, node: AutoLink) -> Any:
        """Visit a AutoLink node."""
        pass

    @abstractmethod
    def visit_line_break(self, node: LineBreak) -> Any:
        """Visit a LineBreak node."""
        pass

    @abstractmethod
    def visit_strikethrough(self, node: Strikethrough) -> Any:
        """Visit a Strikethrough node."""
        pass

    @abstractmethod
    def visit_html_inline(self, node: HTMLInline) -> Any:
        """Visit a HTMLInline node."""
        pass
