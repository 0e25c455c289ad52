"""marknotion — Markdown to Notion blocks and rich text.

Public re-exports
-----------------

* **Entry points:** :func:`markdown_to_blocks`, :func:`markdown_to_rich_text`,
  :func:`parse_blocks`, :func:`parse_rich_text`
* **Converter:** :class:`MarkdownToNotionConverter`
* **Configuration:** :class:`ConversionOptions`, :class:`NotionLimits`
* **Errors:** Every :class:`MarknotionError` subclass and :class:`ErrorCode`

Usage::

    from marknotion import ConversionOptions, markdown_to_blocks

    blocks = markdown_to_blocks(
        "# Hello\\n\\n> [!TIP]\\n> Use callouts",
        ConversionOptions(enable_emoji_callouts=True),
    )
"""

from __future__ import annotations

# ── Configuration ───────────────────────────────────────────────────────
from marknotion.config import ConversionOptions, NotionLimits

# ── Conversion ─────────────────────────────────────────────────────────
from marknotion.converter import (
    MarkdownToNotionConverter,
    markdown_to_blocks,
    markdown_to_rich_text,
    parse_blocks,
    parse_rich_text,
)

# ── Errors ──────────────────────────────────────────────────────────────
from marknotion.errors import (
    ErrorCode,
    MarknotionConversionError,
    MarknotionError,
    MarknotionLimitError,
    MarknotionUnsupportedNodeError,
)

__version__ = "0.1.0"

__all__ = [
    "ConversionOptions",
    "ErrorCode",
    "MarkdownToNotionConverter",
    "MarknotionConversionError",
    "MarknotionError",
    "MarknotionLimitError",
    "MarknotionUnsupportedNodeError",
    "NotionLimits",
    "__version__",
    "markdown_to_blocks",
    "markdown_to_rich_text",
    "parse_blocks",
    "parse_rich_text",
]
