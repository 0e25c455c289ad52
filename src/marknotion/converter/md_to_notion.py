"""Markdown-to-Notion conversion entry points.

Two operations are offered, each at two levels:

* Blocks — :func:`markdown_to_blocks` parses Markdown text, :func:`parse_blocks`
  starts from an already-built :class:`~marknotion.markdown.ast.Root`.
* Rich text — :func:`markdown_to_rich_text` / :func:`parse_rich_text` turn
  an inline fragment into a single rich_text array.

Both run the limits enforcer on their result before returning it.
:class:`MarkdownToNotionConverter` bundles a parser and an options object
for callers converting many documents with the same settings.
"""

from __future__ import annotations

import dataclasses
import json
from typing import Any

from marknotion.config import ConversionOptions
from marknotion.converter.block_translator import translate_nodes
from marknotion.converter.inline import resolve_inlines
from marknotion.converter.limits import enforce_block_limits, enforce_rich_text_limits
from marknotion.errors import MarknotionUnsupportedNodeError
from marknotion.markdown import ast
from marknotion.markdown.parser import MarkdownParser
from marknotion.observability import get_logger, log_fields

log = get_logger("marknotion.converter")


class MarkdownToNotionConverter:
    """Convert Markdown text to Notion API payloads.

    Parameters
    ----------
    options:
        Conversion options.  Defaults to ``ConversionOptions()``.

    Examples
    --------
    >>> converter = MarkdownToNotionConverter()
    >>> blocks = converter.to_blocks("# Hello\\n\\nWorld")
    >>> [b["type"] for b in blocks]
    ['heading_1', 'paragraph']
    """

    def __init__(self, options: ConversionOptions | None = None) -> None:
        self._options = options or ConversionOptions()
        self._parser = MarkdownParser()

    @property
    def options(self) -> ConversionOptions:
        return self._options

    def to_blocks(self, markdown: str) -> list[dict[str, Any]]:
        """Parse *markdown* and convert it to a list of Notion blocks."""
        root = self._parse(markdown)
        return parse_blocks(root, self._options)

    def to_rich_text(self, markdown: str) -> list[dict[str, Any]]:
        """Parse an inline *markdown* fragment into one rich_text array."""
        root = self._parse(markdown)
        return parse_rich_text(root, self._options)

    def _parse(self, markdown: str) -> ast.Root:
        root = self._parser.parse(markdown)
        if self._options.debug_dump_ast:
            log.debug(
                "normalized AST",
                extra=log_fields(ast=_dump(dataclasses.asdict(root))),
            )
        return root


# ---------------------------------------------------------------------------
# AST entry points
# ---------------------------------------------------------------------------

def parse_blocks(
    root: ast.Root,
    options: ConversionOptions | None = None,
) -> list[dict[str, Any]]:
    """Convert a Markdown tree to Notion blocks.

    Parameters
    ----------
    root:
        The document tree.
    options:
        Conversion options.  Defaults to ``ConversionOptions()``.

    Returns
    -------
    list[dict]
        Top-level blocks in document order, after limit enforcement.
    """
    options = options or ConversionOptions()
    blocks = translate_nodes(root.children, options)
    blocks = enforce_block_limits(blocks, options.notion_limits)
    _dump_payload(blocks, options)
    return blocks


def parse_rich_text(
    root: ast.Root,
    options: ConversionOptions | None = None,
) -> list[dict[str, Any]]:
    """Convert the top-level paragraphs of a Markdown tree to rich_text.

    Runs of consecutive paragraphs are concatenated without any separator.

    Raises
    ------
    MarknotionUnsupportedNodeError
        When a top-level node is not a paragraph and ``non_inline`` is
        ``"throw"``.
    """
    options = options or ConversionOptions()
    runs: list[dict[str, Any]] = []
    for node in root.children:
        if isinstance(node, ast.Paragraph):
            runs.extend(resolve_inlines(node.children))
            continue
        if options.non_inline == "throw":
            raise MarknotionUnsupportedNodeError(
                message=f"Unsupported markdown element: {node.type}",
                context={"node_type": node.type},
            )
        log.debug("non-inline node skipped", extra=log_fields(node_type=node.type))

    runs = enforce_rich_text_limits(runs, options.notion_limits)
    _dump_payload(runs, options)
    return runs


# ---------------------------------------------------------------------------
# Markdown entry points
# ---------------------------------------------------------------------------

def markdown_to_blocks(
    body: str,
    options: ConversionOptions | None = None,
) -> list[dict[str, Any]]:
    """Parse Markdown *body* and convert it to Notion blocks."""
    return MarkdownToNotionConverter(options).to_blocks(body)


def markdown_to_rich_text(
    text: str,
    options: ConversionOptions | None = None,
) -> list[dict[str, Any]]:
    """Parse an inline Markdown fragment and convert it to a rich_text array."""
    return MarkdownToNotionConverter(options).to_rich_text(text)


def _dump_payload(payload: list[dict[str, Any]], options: ConversionOptions) -> None:
    if options.debug_dump_payload:
        log.debug("notion payload", extra=log_fields(payload=_dump(payload)))


def _dump(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False, default=str)
