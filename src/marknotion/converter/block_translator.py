"""Translate flow (block) nodes into Notion block payloads.

Node handling:

- paragraph -> paragraph block(s); ``[[_TOC_]]`` -> table_of_contents;
  images lifted out into image blocks; hard breaks start a new paragraph
- heading -> heading_1 / heading_2; depths 3-6 -> heading_3
- blockquote -> callout (GFM alert or, when enabled, emoji prefix) or quote
- list -> numbered_list_item / to_do / bulleted_list_item with nesting
- code -> code block with a Notion language
- table -> table with one table_row per row
- math -> equation block
- thematicBreak -> divider
- html and anything unrecognised -> nothing

Every handler returns a list so that a node may produce zero, one or
several blocks.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from marknotion.config import ConversionOptions
from marknotion.converter.callouts import emoji_color, match_gfm_alert, split_leading_emoji
from marknotion.converter.images import InvalidImageUrl, parse_image_url
from marknotion.converter.inline import resolve_inline, resolve_inlines, text_runs
from marknotion.markdown import ast
from marknotion.notion import blocks as notion
from marknotion.notion.languages import parse_code_language
from marknotion.observability import get_logger, log_fields

log = get_logger("marknotion.converter")

Block = dict[str, Any]

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def translate_nodes(nodes: Iterable[Any], options: ConversionOptions) -> list[Block]:
    """Translate sibling flow nodes, concatenating their blocks in order."""
    produced: list[Block] = []
    for node in nodes:
        produced.extend(translate_node(node, options))
    return produced


def translate_node(node: Any, options: ConversionOptions) -> list[Block]:
    """Translate a single flow node into zero or more Notion blocks."""
    handler = _BLOCK_HANDLERS.get(getattr(node, "type", ""))
    if handler is not None:
        return handler(node, options)
    log.debug(
        "flow node dropped",
        extra=log_fields(node_type=getattr(node, "type", type(node).__name__)),
    )
    return []


# ---------------------------------------------------------------------------
# Paragraphs
# ---------------------------------------------------------------------------

def _is_table_of_contents(node: ast.Paragraph) -> bool:
    """Detect the legacy ``[[_TOC_]]`` marker (text ``[[`` then emphasis ``TOC``)."""
    children = node.children
    if len(children) < 2:
        return False
    first, second = children[0], children[1]
    if not isinstance(first, ast.Text) or first.value != "[[":
        return False
    if not isinstance(second, ast.Emphasis) or len(second.children) != 1:
        return False
    inner = second.children[0]
    return isinstance(inner, ast.Text) and inner.value == "TOC"


def _build_paragraph(node: ast.Paragraph, options: ConversionOptions) -> list[Block]:
    """Build paragraph blocks, lifting images out and splitting on hard breaks.

    Blocks are emitted in source order: text before an image, the image,
    then the text after it.  Paragraphs with no runs are never emitted.
    """
    if _is_table_of_contents(node):
        return [notion.table_of_contents()]

    produced: list[Block] = []
    current: list[dict[str, Any]] = []

    def flush() -> None:
        if current:
            produced.append(notion.paragraph(list(current)))
            current.clear()

    for child in node.children:
        if isinstance(child, ast.Image):
            result = parse_image_url(child.url, strict=options.strict_image_urls)
            if isinstance(result, InvalidImageUrl):
                log.debug(
                    "image rendered as text",
                    extra=log_fields(url=result.url, reason=result.reason),
                )
                current.extend(text_runs(child.url))
            else:
                flush()
                produced.append(notion.image(result.url))
        elif isinstance(child, ast.Break):
            flush()
        else:
            current.extend(resolve_inline(child))

    flush()
    return produced


# ---------------------------------------------------------------------------
# Headings, code, math, dividers
# ---------------------------------------------------------------------------

def _build_heading(node: ast.Heading, options: ConversionOptions) -> list[Block]:
    rich_text = resolve_inlines(node.children)
    if node.depth == 1:
        return [notion.heading_one(rich_text)]
    if node.depth == 2:
        return [notion.heading_two(rich_text)]
    # Notion only has three heading levels
    return [notion.heading_three(rich_text)]


def _build_code(node: ast.Code, options: ConversionOptions) -> list[Block]:
    return [notion.code(text_runs(node.value), parse_code_language(node.lang))]


def _build_math(node: ast.Math, options: ConversionOptions) -> list[Block]:
    # KaTeX needs an explicit "\\" to keep line breaks
    return [notion.equation(node.value.replace("\n", "\\\\\n"))]


def _build_divider(node: ast.ThematicBreak, options: ConversionOptions) -> list[Block]:
    return [notion.divider()]


# ---------------------------------------------------------------------------
# Blockquotes and callouts
# ---------------------------------------------------------------------------

def _build_blockquote(node: ast.Blockquote, options: ConversionOptions) -> list[Block]:
    """Build a callout for GFM alerts and emoji-led quotes, a quote otherwise."""
    first = node.children[0] if node.children else None
    rest = node.children[1:]

    if isinstance(first, ast.Paragraph) and first.children:
        lead = first.children[0]
        if isinstance(lead, ast.Text):
            alert = match_gfm_alert(lead.value)
            if alert is not None:
                body_inlines = _replace_lead_text(first.children, alert.remainder)
                children: list[Block] = []
                if body_inlines:
                    children.extend(_build_paragraph(ast.Paragraph(children=body_inlines), options))
                children.extend(translate_nodes(rest, options))
                return [notion.callout(
                    text_runs(alert.label),
                    alert.style.emoji,
                    alert.style.color,
                    children,
                )]

            if options.enable_emoji_callouts:
                split = split_leading_emoji(lead.value)
                if split is not None:
                    emoji, remainder = split
                    rich_text = resolve_inlines(_replace_lead_text(first.children, remainder))
                    return [notion.callout(
                        rich_text,
                        emoji,
                        emoji_color(emoji),
                        translate_nodes(rest, options),
                    )]

    return [notion.quote([], translate_nodes(node.children, options))]


def _replace_lead_text(children: list[Any], lead: str) -> list[Any]:
    """Return *children* with the first text node's value replaced by *lead*.

    The text node is dropped entirely when *lead* is empty.
    """
    replaced: list[Any] = [ast.Text(value=lead)] if lead else []
    replaced.extend(children[1:])
    return replaced


# ---------------------------------------------------------------------------
# Lists
# ---------------------------------------------------------------------------

def _build_list(node: ast.List, options: ConversionOptions) -> list[Block]:
    """Build one block per item; nested content becomes the item's children.

    Numbered items win over to-dos: an ordered list never yields to_do
    blocks even when its items carry a checkbox.
    """
    produced: list[Block] = []
    for item in node.children:
        label = item.children[0] if item.children else None
        if isinstance(label, ast.Paragraph):
            rich_text = resolve_inlines(label.children)
            nested = item.children[1:]
        else:
            rich_text = []
            nested = item.children
        children = translate_nodes(nested, options)

        if node.start is not None:
            produced.append(notion.numbered_list_item(rich_text, children))
        elif item.checked is not None:
            produced.append(notion.to_do(item.checked, rich_text, children))
        else:
            produced.append(notion.bulleted_list_item(rich_text, children))
    return produced


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------

def _build_table(node: ast.Table, options: ConversionOptions) -> list[Block]:
    """Build a table block; the width is the first row's cell count."""
    if not node.children:
        return []
    table_width = len(node.children[0].children)
    rows = [
        notion.table_row([resolve_inlines(cell.children) for cell in row.children])
        for row in node.children
    ]
    return [notion.table(rows, table_width)]


# ---------------------------------------------------------------------------
# Block handler dispatch table
# ---------------------------------------------------------------------------

_BlockHandler = Callable[[Any, ConversionOptions], list[Block]]

_BLOCK_HANDLERS: dict[str, _BlockHandler] = {
    "paragraph": _build_paragraph,
    "heading": _build_heading,
    "blockquote": _build_blockquote,
    "list": _build_list,
    "code": _build_code,
    "table": _build_table,
    "math": _build_math,
    "thematicBreak": _build_divider,
}
