#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdfmt/ast/__init__.py
r"""Abstract Syntax Tree (AST) module for Markdown documents.

The formatter works in two halves joined by this tree: the parser adapter
turns Markdown source into nodes, and the renderer prints nodes back as
canonical Markdown. Trees can also be built by hand.

Examples
--------
    >>> from mdfmt.ast import Document, Heading, Paragraph, Text
    >>> from mdfmt.renderers.markdown import MarkdownRenderer
    >>>
    >>> doc = Document(children=[
    ...     Heading(level=1, content=[Text(content="Title")]),
    ...     Paragraph(content=[Text(content="Hello world")])
    ... ])
    >>> MarkdownRenderer().render_to_string(doc)
    '# Title\n\nHello world\n'

"""

from __future__ import annotations

from mdfmt.ast.nodes import (
    BLOCK_NODE_TYPES,
    INLINE_NODE_TYPES,
    NODE_TYPES,
    Alignment,
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
    TaskStatus,
    Text,
    ThematicBreak,
    get_node_children,
)
from mdfmt.ast.visitors import NodeVisitor

__all__ = [
    "BLOCK_NODE_TYPES",
    "INLINE_NODE_TYPES",
    "NODE_TYPES",
    "Alignment",
    "AutoLink",
    "BlockQuote",
    "Code",
    "CodeBlock",
    "Document",
    "Emphasis",
    "HTMLBlock",
    "HTMLInline",
    "Heading",
    "Image",
    "LineBreak",
    "Link",
    "List",
    "ListItem",
    "Node",
    "NodeVisitor",
    "Paragraph",
    "Strikethrough",
    "Strong",
    "Table",
    "TableCell",
    "TableRow",
    "TaskStatus",
    "Text",
    "ThematicBreak",
    "get_node_children",
]
