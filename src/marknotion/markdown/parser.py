"""Parse Markdown and normalize mistune tokens into the typed AST.

This module wraps mistune v3's AST renderer and maps its raw token dicts
onto the dataclasses of :mod:`marknotion.markdown.ast`.

Mistune-to-mdast mapping:

==================  ===================================================
mistune token       AST node
==================  ===================================================
paragraph           Paragraph (``block_text`` in tight lists too)
heading             Heading (``attrs.level`` -> ``depth``)
block_quote         Blockquote
list                List (``start`` defaults to 1 for ordered lists)
list_item           ListItem
task_list_item      ListItem with ``checked``
block_code          Code (info string split into ``lang`` and ``meta``)
table               Table; ``table_head`` becomes the first TableRow
thematic_break      ThematicBreak
block_math          Math (InlineMath when found inside a paragraph)
block_html          Html
text / softbreak    Text (adjacent runs merged, softbreak -> ``"\\n"``)
linebreak           Break
strikethrough       Delete
codespan            InlineCode
inline_html         InlineHtml
==================  ===================================================

Unknown tokens (footnotes, blank lines, plugin extras) are dropped.
"""

from __future__ import annotations

from typing import Any

import mistune

from marknotion.markdown import ast
from marknotion.observability import get_logger, log_fields

log = get_logger("marknotion.parser")

_PLUGINS: tuple[str, ...] = (
    "strikethrough",
    "table",
    "task_lists",
    "url",
    "math",
)

# Types that carry no content and are skipped without logging
_SKIP_TYPES: frozenset[str] = frozenset({"blank_line"})


class MarkdownParser:
    """Parse Markdown text into an :class:`~marknotion.markdown.ast.Root`."""

    def __init__(self) -> None:
        self._parser = mistune.create_markdown(renderer="ast", plugins=list(_PLUGINS))

    def parse(self, markdown: str) -> ast.Root:
        """Parse *markdown* and return the normalized syntax tree."""
        raw_tokens = self._parser(markdown)
        if isinstance(raw_tokens, str):
            return ast.Root()
        return ast.Root(children=self._flow_children(raw_tokens))

    # ------------------------------------------------------------------
    # Flow content
    # ------------------------------------------------------------------

    def _flow_children(self, tokens: list[dict[str, Any]]) -> list[Any]:
        result: list[Any] = []
        for token in tokens:
            node = self._flow_node(token)
            if node is not None:
                result.append(node)
        return result

    def _flow_node(self, token: dict[str, Any]) -> Any | None:
        token_type = token.get("type", "")
        attrs = token.get("attrs") or {}

        if token_type in ("paragraph", "block_text"):
            return ast.Paragraph(children=self._inline_children(token.get("children", [])))

        if token_type == "heading":
            return ast.Heading(
                depth=int(attrs.get("level", 1)),
                children=self._inline_children(token.get("children", [])),
            )

        if token_type == "block_quote":
            return ast.Blockquote(children=self._flow_children(token.get("children", [])))

        if token_type == "list":
            ordered = bool(attrs.get("ordered", False))
            items = [
                self._list_item(child)
                for child in token.get("children", [])
                if child.get("type") in ("list_item", "task_list_item")
            ]
            return ast.List(
                children=items,
                ordered=ordered,
                start=int(attrs.get("start", 1)) if ordered else None,
            )

        if token_type == "block_code":
            return self._code(token)

        if token_type == "table":
            return self._table(token)

        if token_type == "thematic_break":
            return ast.ThematicBreak()

        if token_type == "block_math":
            return ast.Math(value=token.get("raw", ""))

        if token_type == "block_html":
            return ast.Html(value=token.get("raw", ""))

        if token_type and token_type not in _SKIP_TYPES:
            log.debug("mistune token dropped", extra=log_fields(token_type=token_type))
        return None

    def _list_item(self, token: dict[str, Any]) -> ast.ListItem:
        checked = None
        if token.get("type") == "task_list_item":
            checked = bool((token.get("attrs") or {}).get("checked", False))
        return ast.ListItem(
            children=self._flow_children(token.get("children", [])),
            checked=checked,
        )

    def _code(self, token: dict[str, Any]) -> ast.Code:
        raw = token.get("raw", "")
        # mistune keeps the newline before the closing fence
        if raw.endswith("\n"):
            raw = raw[:-1]
        info = ((token.get("attrs") or {}).get("info") or "").strip()
        lang, _, meta = info.partition(" ")
        return ast.Code(value=raw, lang=lang or None, meta=meta.strip() or None)

    def _table(self, token: dict[str, Any]) -> ast.Table:
        rows: list[ast.TableRow] = []
        for part in token.get("children", []):
            part_type = part.get("type", "")
            if part_type == "table_head":
                rows.append(self._table_row(part))
            elif part_type == "table_body":
                rows.extend(
                    self._table_row(row)
                    for row in part.get("children", [])
                    if row.get("type") == "table_row"
                )
        return ast.Table(children=rows)

    def _table_row(self, token: dict[str, Any]) -> ast.TableRow:
        return ast.TableRow(children=[
            ast.TableCell(children=self._inline_children(cell.get("children", [])))
            for cell in token.get("children", [])
            if cell.get("type") == "table_cell"
        ])

    # ------------------------------------------------------------------
    # Phrasing content
    # ------------------------------------------------------------------

    def _inline_children(self, tokens: list[dict[str, Any]]) -> list[Any]:
        """Normalize inline tokens, merging adjacent text runs as mdast does."""
        result: list[Any] = []
        for token in tokens:
            node = self._inline_node(token)
            if node is None:
                continue
            if isinstance(node, ast.Text) and result and isinstance(result[-1], ast.Text):
                result[-1] = ast.Text(value=result[-1].value + node.value)
            else:
                result.append(node)
        return result

    def _inline_node(self, token: dict[str, Any]) -> Any | None:
        token_type = token.get("type", "")
        attrs = token.get("attrs") or {}

        if token_type in ("text", "raw"):
            return ast.Text(value=token.get("raw", ""))

        if token_type == "softbreak":
            return ast.Text(value="\n")

        if token_type == "linebreak":
            return ast.Break()

        if token_type == "emphasis":
            return ast.Emphasis(children=self._inline_children(token.get("children", [])))

        if token_type == "strong":
            return ast.Strong(children=self._inline_children(token.get("children", [])))

        if token_type == "strikethrough":
            return ast.Delete(children=self._inline_children(token.get("children", [])))

        if token_type == "codespan":
            return ast.InlineCode(value=token.get("raw", ""))

        if token_type == "link":
            return ast.Link(
                url=attrs.get("url", ""),
                children=self._inline_children(token.get("children", [])),
                title=attrs.get("title"),
            )

        if token_type == "image":
            return ast.Image(
                url=attrs.get("url", ""),
                title=attrs.get("title"),
                alt=_plain_text(token.get("children", [])),
            )

        # ``$$...$$`` written inside a paragraph is reported as block_math
        if token_type in ("inline_math", "block_math"):
            return ast.InlineMath(value=token.get("raw", ""))

        if token_type == "inline_html":
            return ast.InlineHtml(value=token.get("raw", ""))

        if token_type:
            log.debug("mistune inline token dropped", extra=log_fields(token_type=token_type))
        return None


def _plain_text(tokens: list[dict[str, Any]]) -> str:
    """Recursively extract plain text from raw mistune inline tokens."""
    parts: list[str] = []
    for token in tokens:
        if "children" in token:
            parts.append(_plain_text(token["children"]))
        elif "raw" in token:
            parts.append(token["raw"])
    return "".join(parts)
