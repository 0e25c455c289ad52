"""Constructors for Notion block request payloads.

Every function returns a dict of the shape::

    {"object": "block", "type": T, T: {...}}

Optional ``children`` keys are only present when there is at least one
child block, matching what the Notion API accepts on create/append.
"""

from __future__ import annotations

from typing import Any

RichText = list[dict[str, Any]]


def _block(block_type: str, body: dict[str, Any]) -> dict[str, Any]:
    return {"object": "block", "type": block_type, block_type: body}


def _with_children(body: dict[str, Any], children: list[dict[str, Any]] | None) -> dict[str, Any]:
    if children:
        body["children"] = children
    return body


def paragraph(rich_text: RichText) -> dict[str, Any]:
    return _block("paragraph", {"rich_text": rich_text})


def heading_one(rich_text: RichText) -> dict[str, Any]:
    return _block("heading_1", {"rich_text": rich_text})


def heading_two(rich_text: RichText) -> dict[str, Any]:
    return _block("heading_2", {"rich_text": rich_text})


def heading_three(rich_text: RichText) -> dict[str, Any]:
    return _block("heading_3", {"rich_text": rich_text})


def bulleted_list_item(
    rich_text: RichText, children: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    return _block("bulleted_list_item", _with_children({"rich_text": rich_text}, children))


def numbered_list_item(
    rich_text: RichText, children: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    return _block("numbered_list_item", _with_children({"rich_text": rich_text}, children))


def to_do(
    checked: bool, rich_text: RichText, children: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    return _block(
        "to_do",
        _with_children({"rich_text": rich_text, "checked": checked}, children),
    )


def quote(
    rich_text: RichText, children: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    return _block("quote", _with_children({"rich_text": rich_text}, children))


def callout(
    rich_text: RichText,
    emoji: str,
    color: str = "default",
    children: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    body = {
        "rich_text": rich_text,
        "icon": {"type": "emoji", "emoji": emoji},
        "color": color,
    }
    return _block("callout", _with_children(body, children))


def code(rich_text: RichText, language: str = "plain text") -> dict[str, Any]:
    return _block("code", {"rich_text": rich_text, "language": language})


def image(url: str) -> dict[str, Any]:
    return _block("image", {"type": "external", "external": {"url": url}})


def table_row(cells: list[RichText]) -> dict[str, Any]:
    return _block("table_row", {"cells": cells})


def table(rows: list[dict[str, Any]], table_width: int) -> dict[str, Any]:
    return _block("table", {
        "table_width": table_width,
        "has_column_header": True,
        "has_row_header": False,
        "children": rows,
    })


def equation(expression: str) -> dict[str, Any]:
    return _block("equation", {"expression": expression})


def divider() -> dict[str, Any]:
    return _block("divider", {})


def table_of_contents() -> dict[str, Any]:
    return _block("table_of_contents", {})
