"""Notion request limits and the post-conversion enforcement pass.

Checks, in order:

1. Payload size — at most 1000 top-level blocks (block entry point) or at
   most 100 runs in the rich_text array (rich-text entry point).  Reported,
   then truncated when ``truncate`` is on.
2. Text content — every text run still present, including runs nested in
   children and table cells, holds at most 2000 characters.  Reported, then
   cut to 1997 characters plus ``"..."`` when ``truncate`` is on.
3. Link URL — at most 1000 characters.  Reported only; a shortened URL is
   not a working link.

Equation runs are exempt from checks 2 and 3.

The enforcer edits the payload produced by the current conversion in place;
callers never share that payload with anyone before it is returned.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from marknotion.config import NotionLimits
from marknotion.errors import ErrorCode, MarknotionLimitError
from marknotion.observability import get_logger, log_fields
from marknotion.utils.text_split import truncate_with_ellipsis

log = get_logger("marknotion.limits")


@dataclass(frozen=True)
class NotionApiLimits:
    """Numeric request limits enforced by the Notion API."""

    payload_blocks: int = 1000
    rich_text_array: int = 100
    text_content: int = 2000
    link_url: int = 1000


LIMITS = NotionApiLimits()

_PREVIEW_CHARS = 40


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def enforce_block_limits(
    blocks: list[dict[str, Any]],
    policy: NotionLimits,
) -> list[dict[str, Any]]:
    """Apply the block-count and per-run checks to a converted block list."""
    if len(blocks) > LIMITS.payload_blocks:
        _report(
            policy,
            ErrorCode.PAYLOAD_BLOCKS_EXCEEDED,
            f"Resulting blocks array exceeds Notion limit ({LIMITS.payload_blocks})",
            limit=LIMITS.payload_blocks,
            actual=len(blocks),
        )
        if policy.truncate:
            blocks = blocks[: LIMITS.payload_blocks]

    for run in iter_block_runs(blocks):
        _check_run(run, policy)
    return blocks


def enforce_rich_text_limits(
    runs: list[dict[str, Any]],
    policy: NotionLimits,
) -> list[dict[str, Any]]:
    """Apply the array-length and per-run checks to a rich_text array."""
    if len(runs) > LIMITS.rich_text_array:
        _report(
            policy,
            ErrorCode.RICH_TEXT_ARRAY_EXCEEDED,
            f"Resulting richTexts array exceeds Notion limit ({LIMITS.rich_text_array})",
            limit=LIMITS.rich_text_array,
            actual=len(runs),
        )
        if policy.truncate:
            runs = runs[: LIMITS.rich_text_array]

    for run in runs:
        _check_run(run, policy)
    return runs


def iter_block_runs(blocks: list[dict[str, Any]]) -> Iterator[dict[str, Any]]:
    """Yield every rich_text run in *blocks*, depth first.

    Covers ``rich_text`` arrays, table row ``cells`` and nested ``children``.
    """
    for block in blocks:
        body = block.get(block.get("type", ""), {})
        yield from body.get("rich_text", [])
        for cell in body.get("cells", []):
            yield from cell
        yield from iter_block_runs(body.get("children", []))


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _check_run(run: dict[str, Any], policy: NotionLimits) -> None:
    if run.get("type") != "text":
        return

    text = run.get("text", {})
    content = text.get("content", "")
    if len(content) > LIMITS.text_content:
        _report(
            policy,
            ErrorCode.TEXT_CONTENT_EXCEEDED,
            f"Text content exceeds Notion limit ({LIMITS.text_content})",
            limit=LIMITS.text_content,
            actual=len(content),
            content_preview=content[:_PREVIEW_CHARS],
        )
        if policy.truncate:
            text["content"] = truncate_with_ellipsis(content, LIMITS.text_content)

    url = (text.get("link") or {}).get("url")
    if url and len(url) > LIMITS.link_url:
        _report(
            policy,
            ErrorCode.LINK_URL_EXCEEDED,
            f"Link URL exceeds Notion limit ({LIMITS.link_url})",
            limit=LIMITS.link_url,
            actual=len(url),
            url=url,
        )


def _report(
    policy: NotionLimits,
    code: ErrorCode,
    message: str,
    **context: Any,
) -> None:
    log.warning(message, extra=log_fields(code=code.value, truncate=policy.truncate, **context))
    policy.report(MarknotionLimitError(code=code, message=message, context=context))
