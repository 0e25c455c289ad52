"""Markdown -> Notion conversion pipeline.

Public API:

- :class:`MarkdownToNotionConverter` — Markdown text -> Notion blocks / rich text.
- :func:`markdown_to_blocks` / :func:`markdown_to_rich_text` — one-shot helpers.
- :func:`parse_blocks` / :func:`parse_rich_text` — the same from a built AST.
- :func:`translate_nodes` — flow nodes -> blocks, without limit enforcement.
- :func:`resolve_inlines` — phrasing nodes -> rich_text runs.
- :class:`AnnotationContext` — formatting state carried down inline nodes.
"""

from marknotion.converter.annotations import DEFAULT_CONTEXT, AnnotationContext
from marknotion.converter.block_translator import translate_node, translate_nodes
from marknotion.converter.inline import resolve_inline, resolve_inlines
from marknotion.converter.limits import (
    LIMITS,
    NotionApiLimits,
    enforce_block_limits,
    enforce_rich_text_limits,
)
from marknotion.converter.md_to_notion import (
    MarkdownToNotionConverter,
    markdown_to_blocks,
    markdown_to_rich_text,
    parse_blocks,
    parse_rich_text,
)

__all__ = [
    "DEFAULT_CONTEXT",
    "LIMITS",
    "AnnotationContext",
    "MarkdownToNotionConverter",
    "NotionApiLimits",
    "enforce_block_limits",
    "enforce_rich_text_limits",
    "markdown_to_blocks",
    "markdown_to_rich_text",
    "parse_blocks",
    "parse_rich_text",
    "resolve_inline",
    "resolve_inlines",
    "translate_node",
    "translate_nodes",
]
