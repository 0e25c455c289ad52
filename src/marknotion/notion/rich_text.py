"""Constructors for Notion rich_text objects.

A text run::

    {
        "type": "text",
        "annotations": {"bold": false, "italic": false, "strikethrough": false,
                        "underline": false, "code": false, "color": "default"},
        "text": {"content": "hello", "link": {"url": "https://..."}}
    }

``text.link`` is omitted when the run carries no hyperlink.  An equation run
replaces ``text`` with ``"equation": {"expression": "E=mc^2"}``.

These functions only pack already-resolved fields; all decisions happen in
:mod:`marknotion.converter`.
"""

from __future__ import annotations

from typing import Any


def default_annotations() -> dict[str, Any]:
    """Return a fresh all-default annotations dict."""
    return {
        "bold": False,
        "italic": False,
        "strikethrough": False,
        "underline": False,
        "code": False,
        "color": "default",
    }


def text_run(
    content: str,
    annotations: dict[str, Any] | None = None,
    link: str | None = None,
) -> dict[str, Any]:
    """Build a text rich_text object."""
    text: dict[str, Any] = {"content": content}
    if link:
        text["link"] = {"url": link}
    return {
        "type": "text",
        "annotations": {**default_annotations(), **(annotations or {})},
        "text": text,
    }


def equation_run(
    expression: str,
    annotations: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Build an inline equation rich_text object."""
    return {
        "type": "equation",
        "annotations": {**default_annotations(), **(annotations or {})},
        "equation": {"expression": expression},
    }
