"""Typed Markdown syntax tree.

The node set follows mdast (https://github.com/syntax-tree/mdast) with the
GitHub-flavored and math extensions.  Nodes are frozen dataclasses; each
class carries its mdast name in ``type`` so translators can dispatch on it.

Two families exist:

Flow (block) nodes:
    root, paragraph, heading, blockquote, list, listItem, code, table,
    tableRow, tableCell, thematicBreak, math, html

Phrasing (inline) nodes:
    text, emphasis, strong, delete, inlineCode, link, image, break,
    inlineMath, inlineHtml

The lower-case helpers at the bottom of the module build trees directly::

    root(paragraph(text("hello "), emphasis(text("world"))))
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Union

# ---------------------------------------------------------------------------
# Phrasing nodes
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Text:
    type: ClassVar[str] = "text"
    value: str


@dataclass(frozen=True)
class Emphasis:
    type: ClassVar[str] = "emphasis"
    children: list[PhrasingContent] = field(default_factory=list)


@dataclass(frozen=True)
class Strong:
    type: ClassVar[str] = "strong"
    children: list[PhrasingContent] = field(default_factory=list)


@dataclass(frozen=True)
class Delete:
    """GFM strikethrough (``~~text~~``)."""

    type: ClassVar[str] = "delete"
    children: list[PhrasingContent] = field(default_factory=list)


@dataclass(frozen=True)
class InlineCode:
    type: ClassVar[str] = "inlineCode"
    value: str


@dataclass(frozen=True)
class Link:
    type: ClassVar[str] = "link"
    url: str
    children: list[PhrasingContent] = field(default_factory=list)
    title: str | None = None


@dataclass(frozen=True)
class Image:
    type: ClassVar[str] = "image"
    url: str
    title: str | None = None
    alt: str = ""


@dataclass(frozen=True)
class Break:
    """Hard line break (two trailing spaces or a trailing backslash)."""

    type: ClassVar[str] = "break"


@dataclass(frozen=True)
class InlineMath:
    type: ClassVar[str] = "inlineMath"
    value: str


@dataclass(frozen=True)
class InlineHtml:
    type: ClassVar[str] = "inlineHtml"
    value: str


PhrasingContent = Union[
    Text, Emphasis, Strong, Delete, InlineCode, Link, Image, Break,
    InlineMath, InlineHtml,
]


# ---------------------------------------------------------------------------
# Flow nodes
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Paragraph:
    type: ClassVar[str] = "paragraph"
    children: list[PhrasingContent] = field(default_factory=list)


@dataclass(frozen=True)
class Heading:
    type: ClassVar[str] = "heading"
    depth: int
    children: list[PhrasingContent] = field(default_factory=list)


@dataclass(frozen=True)
class Blockquote:
    type: ClassVar[str] = "blockquote"
    children: list[FlowContent] = field(default_factory=list)


@dataclass(frozen=True)
class ListItem:
    """A list item; ``checked`` is ``None`` unless the item is a GFM task."""

    type: ClassVar[str] = "listItem"
    children: list[FlowContent] = field(default_factory=list)
    checked: bool | None = None


@dataclass(frozen=True)
class List:
    """A list; ``start`` is set for ordered lists and ``None`` otherwise."""

    type: ClassVar[str] = "list"
    children: list[ListItem] = field(default_factory=list)
    ordered: bool = False
    start: int | None = None


@dataclass(frozen=True)
class Code:
    type: ClassVar[str] = "code"
    value: str
    lang: str | None = None
    meta: str | None = None


@dataclass(frozen=True)
class TableCell:
    type: ClassVar[str] = "tableCell"
    children: list[PhrasingContent] = field(default_factory=list)


@dataclass(frozen=True)
class TableRow:
    type: ClassVar[str] = "tableRow"
    children: list[TableCell] = field(default_factory=list)


@dataclass(frozen=True)
class Table:
    type: ClassVar[str] = "table"
    children: list[TableRow] = field(default_factory=list)


@dataclass(frozen=True)
class ThematicBreak:
    type: ClassVar[str] = "thematicBreak"


@dataclass(frozen=True)
class Math:
    type: ClassVar[str] = "math"
    value: str


@dataclass(frozen=True)
class Html:
    type: ClassVar[str] = "html"
    value: str


FlowContent = Union[
    Paragraph, Heading, Blockquote, List, Code, Table, ThematicBreak, Math,
    Html,
]


@dataclass(frozen=True)
class Root:
    type: ClassVar[str] = "root"
    children: list[FlowContent] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------

def root(*children: FlowContent) -> Root:
    return Root(children=list(children))


def paragraph(*children: PhrasingContent) -> Paragraph:
    return Paragraph(children=list(children))


def text(value: str) -> Text:
    return Text(value=value)


def emphasis(*children: PhrasingContent) -> Emphasis:
    return Emphasis(children=list(children))


def strong(*children: PhrasingContent) -> Strong:
    return Strong(children=list(children))


def strikethrough(*children: PhrasingContent) -> Delete:
    return Delete(children=list(children))


def inline_code(value: str) -> InlineCode:
    return InlineCode(value=value)


def link(url: str, *children: PhrasingContent) -> Link:
    return Link(url=url, children=list(children))


def image(url: str, title: str | None = None, alt: str = "") -> Image:
    return Image(url=url, title=title, alt=alt)


def line_break() -> Break:
    return Break()


def inline_math(value: str) -> InlineMath:
    return InlineMath(value=value)


def heading(depth: int, *children: PhrasingContent) -> Heading:
    return Heading(depth=depth, children=list(children))


def blockquote(*children: FlowContent) -> Blockquote:
    return Blockquote(children=list(children))


def unordered_list(*items: ListItem) -> List:
    return List(children=list(items), ordered=False, start=None)


def ordered_list(*items: ListItem, start: int = 1) -> List:
    return List(children=list(items), ordered=True, start=start)


def list_item(*children: FlowContent) -> ListItem:
    return ListItem(children=list(children))


def checked_list_item(checked: bool, *children: FlowContent) -> ListItem:
    return ListItem(children=list(children), checked=checked)


def code(value: str, lang: str | None = None) -> Code:
    return Code(value=value, lang=lang)


def table(*rows: TableRow) -> Table:
    return Table(children=list(rows))


def table_row(*cells: TableCell) -> TableRow:
    return TableRow(children=list(cells))


def table_cell(*children: PhrasingContent) -> TableCell:
    return TableCell(children=list(children))


def thematic_break() -> ThematicBreak:
    return ThematicBreak()


def math(value: str) -> Math:
    return Math(value=value)
