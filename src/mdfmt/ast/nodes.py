#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdfmt/ast/nodes.py
"""AST node classes for Markdown document representation.

This module defines the closed set of node kinds the formatter understands.
The parser adapter builds trees out of these classes and the renderer prints
them back. Nodes are plain dataclasses. The renderer never mutates them, so
one tree can be rendered any number of times with different options.

Node Hierarchy
--------------
All nodes inherit from the base Node class and support the visitor pattern.

Block-level nodes represent structural document elements:
    - Document, Heading, Paragraph, CodeBlock, BlockQuote
    - List, ListItem, Table, TableRow, TableCell
    - ThematicBreak, HTMLBlock

Inline nodes represent text formatting:
    - Text, Emphasis, Strong, Code, Strikethrough
    - Link, Image, AutoLink, LineBreak, HTMLInline

Source facts that influence canonical spacing (blank lines before a list,
the bullet character, list tightness) are recorded on the nodes by the
parser so the renderer can reproduce them.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Literal, Optional

Alignment = Literal["left", "center", "right"]
TaskStatus = Literal["checked", "unchecked"]


class Node(ABC):
    """Base class for all AST nodes.

    All document nodes inherit from this base class and support the visitor
    pattern for traversal and rendering.
    """

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Document(Node):
    """Root document node containing block-level children.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the document

    """

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_document``."""
        return visitor.visit_document(self)


@dataclass
class Heading(Node):
    """Heading node (h1-h6).

    Parameters
    ----------
    level : int
        Heading level (1-6, where 1 is most important)
    content : list of Node, default = empty list
        Inline nodes representing heading text
    identifier : str or None, default = None
        Custom heading id, written back as a `` {#id}`` suffix

    """

    level: int
    content: list[Node] = field(default_factory=list)
    identifier: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate heading level is between 1 and 6."""
        if not 1 <= self.level <= 6:
            raise ValueError(f"Heading level must be 1-6, got {self.level}")

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_heading``."""
        return visitor.visit_heading(self)


@dataclass
class Paragraph(Node):
    """Paragraph node containing inline content."""

    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_paragraph``."""
        return visitor.visit_paragraph(self)


@dataclass
class CodeBlock(Node):
    """Code block node.

    Represents a fenced or indented code block. Both are rendered as fenced
    blocks.

    Parameters
    ----------
    content : str
        Literal code, normally ending with a newline
    info : str or None, default = None
        Full info string of a fenced block (language plus any attributes)
    fence_char : str, default = '`'
        Character used for fencing (` or ~)
    fenced : bool, default = True
        False when the source used an indented code block

    """

    content: str
    info: Optional[str] = None
    fence_char: str = "`"
    fenced: bool = True

    def __post_init__(self) -> None:
        """Validate the fence character."""
        if self.fence_char not in ("`", "~"):
            raise ValueError(f"fence_char must be '`' or '~', got {self.fence_char!r}")

    @property
    def language(self) -> Optional[str]:
        """First word of the info string, if any."""
        if not self.info:
            return None
        parts = self.info.split(maxsplit=1)
        return parts[0] if parts else None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_code_block``."""
        return visitor.visit_code_block(self)


@dataclass
class BlockQuote(Node):
    """Block quote node containing other block elements."""

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_block_quote``."""
        return visitor.visit_block_quote(self)


@dataclass
class List(Node):
    """List node (ordered or unordered).

    Parameters
    ----------
    ordered : bool
        True for ordered lists, False for unordered
    items : list of ListItem, default = empty list
        List items
    start : int, default = 1
        Starting number for ordered lists
    tight : bool, default = True
        Whether the list is tight (no blank lines between items)
    bullet : str, default = '-'
        Bullet character (``-``, ``*``, ``+``) for unordered lists, or the
        delimiter after the number (``.`` or ``)``) for ordered lists
    blank_previous_lines : bool, default = False
        Whether the source had a blank line between this list and its
        previous sibling

    """

    ordered: bool
    items: list[ListItem] = field(default_factory=list)
    start: int = 1
    tight: bool = True
    bullet: str = "-"
    blank_previous_lines: bool = False

    def __post_init__(self) -> None:
        """Default the bullet to ``.`` for ordered lists and validate it."""
        if self.ordered and self.bullet == "-":
            self.bullet = "."
        allowed = (".", ")") if self.ordered else ("-", "*", "+")
        if self.bullet not in allowed:
            raise ValueError(f"Invalid bullet {self.bullet!r} for {'ordered' if self.ordered else 'unordered'} list")
        if self.start < 0:
            raise ValueError(f"List start must be non-negative, got {self.start}")

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_list``."""
        return visitor.visit_list(self)


@dataclass
class ListItem(Node):
    """List item node containing block content.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the list item
    task_status : {'checked', 'unchecked'} or None, default = None
        Task list checkbox state (GFM extension)
    blank_previous_lines : bool, default = False
        Whether the source had a blank line before this item

    """

    children: list[Node] = field(default_factory=list)
    task_status: Optional[TaskStatus] = None
    blank_previous_lines: bool = False

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_list_item``."""
        return visitor.visit_list_item(self)


@dataclass
class Table(Node):
    """Table node (GFM pipe table).

    Parameters
    ----------
    header : TableRow or None, default = None
        Header row. The renderer requires one.
    rows : list of TableRow, default = empty list
        Body rows

    """

    header: Optional[TableRow] = None
    rows: list[TableRow] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_table``."""
        return visitor.visit_table(self)


@dataclass
class TableRow(Node):
    """Table row node."""

    cells: list[TableCell] = field(default_factory=list)
    is_header: bool = False

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_table_row``."""
        return visitor.visit_table_row(self)


@dataclass
class TableCell(Node):
    """Table cell node.

    Parameters
    ----------
    content : list of Node, default = empty list
        Inline content of the cell
    alignment : {'left', 'center', 'right'} or None, default = None
        Column alignment declared in the delimiter row

    """

    content: list[Node] = field(default_factory=list)
    alignment: Optional[Alignment] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_table_cell``."""
        return visitor.visit_table_cell(self)


@dataclass
class ThematicBreak(Node):
    """Thematic break (horizontal rule) node."""

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_thematic_break``."""
        return visitor.visit_thematic_break(self)


@dataclass
class HTMLBlock(Node):
    """Raw HTML block, emitted verbatim.

    Parameters
    ----------
    content : str
        Literal HTML source lines
    blank_previous_lines : bool, default = False
        Whether the source had a blank line before this block

    """

    content: str
    blank_previous_lines: bool = False

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_html_block``."""
        return visitor.visit_html_block(self)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class Text(Node):
    """Plain text node. Content is literal (unescaped) text."""

    content: str

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_text``."""
        return visitor.visit_text(self)


@dataclass
class Emphasis(Node):
    """Emphasis (italic) node."""

    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_emphasis``."""
        return visitor.visit_emphasis(self)


@dataclass
class Strong(Node):
    """Strong emphasis (bold) node."""

    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_strong``."""
        return visitor.visit_strong(self)


@dataclass
class Code(Node):
    """Inline code span. Content is literal."""

    content: str

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_code``."""
        return visitor.visit_code(self)


@dataclass
class Link(Node):
    """Inline link node.

    Parameters
    ----------
    url : str
        Link destination
    content : list of Node, default = empty list
        Inline nodes for the link text
    title : str or None, default = None
        Optional link title

    """

    url: str
    content: list[Node] = field(default_factory=list)
    title: Optional[str] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_link``."""
        return visitor.visit_link(self)


@dataclass
class Image(Node):
    """Image node.

    Parameters
    ----------
    url : str
        Image source
    content : list of Node, default = empty list
        Inline nodes for the alt text
    title : str or None, default = None
        Optional image title

    """

    url: str
    content: list[Node] = field(default_factory=list)
    title: Optional[str] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_image``."""
        return visitor.visit_image(self)


@dataclass
class AutoLink(Node):
    """Autolink written as ``<url>`` in the source.

    Parameters
    ----------
    url : str
        Link destination (``mailto:`` prefixed for e-mail autolinks)
    label : str
        Text between the angle brackets

    """

    url: str
    label: str

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_autolink``."""
        return visitor.visit_autolink(self)


@dataclass
class LineBreak(Node):
    """Line break node.

    Parameters
    ----------
    soft : bool, default = False
        True for a soft break (a plain newline in the source), False for a
        hard break (two trailing spaces or a backslash)

    """

    soft: bool = False

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_line_break``."""
        return visitor.visit_line_break(self)


@dataclass
class Strikethrough(Node):
    """Strikethrough node (GFM extension)."""

    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_strikethrough``."""
        return visitor.visit_strikethrough(self)


@dataclass
class HTMLInline(Node):
    """Raw inline HTML, emitted verbatim."""

    content: str

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_html_inline``."""
        return visitor.visit_html_inline(self)


BLOCK_NODE_TYPES: tuple[type[Node], ...] = (
    Document,
    Heading,
    Paragraph,
    CodeBlock,
    BlockQuote,
    List,
    ListItem,
    Table,
    TableRow,
    TableCell,
    ThematicBreak,
    HTMLBlock,
)

INLINE_NODE_TYPES: tuple[type[Node], ...] = (
    Text,
    Emphasis,
    Strong,
    Code,
    Link,
    Image,
    AutoLink,
    LineBreak,
    Strikethrough,
    HTMLInline,
)

NODE_TYPES: tuple[type[Node], ...] = BLOCK_NODE_TYPES + INLINE_NODE_TYPES


def get_node_children(node: Node) -> list[Node]:
    """Get all child nodes from a node.

    Parameters
    ----------
    node : Node
        The node to get children from

    Returns
    -------
    list of Node
        List of child nodes (empty list if node has no children)

    Examples
    --------
    >>> heading = Heading(level=1, content=[Text("Hello"), Strong(content=[Text("world")])])
    >>> len(get_node_children(heading))
    2

    """
    if isinstance(node, (Document, BlockQuote, ListItem)):
        return list(node.children)

    if isinstance(node, (Heading, Paragraph, Emphasis, Strong, Strikethrough, Link, Image, TableCell)):
        return list(node.content)

    if isinstance(node, List):
        return list(node.items)

    if isinstance(node, Table):
        children: list[Node] = []
        if node.header:
            children.append(node.header)
        children.extend(node.rows)
        return children

    if isinstance(node, TableRow):
        return list(node.cells)

    return []

