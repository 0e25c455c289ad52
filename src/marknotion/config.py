"""Conversion options for marknotion.

:class:`ConversionOptions` captures every knob exposed by the two entry
points.  It is frozen: one instance is created by the caller and passed,
unchanged, down every recursive call of the translator.

:class:`NotionLimits` groups the truncate-or-report policy applied by the
limits enforcer after a conversion finishes.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from marknotion.errors import MarknotionLimitError

LimitCallback = Callable[["MarknotionLimitError"], None]

_NON_INLINE_POLICIES: frozenset[str] = frozenset({"ignore", "throw"})


@dataclass(frozen=True)
class NotionLimits:
    """Policy for payloads that exceed the Notion API request limits.

    Parameters
    ----------
    truncate:
        Cut oversized payloads down to the limit (block and rich-text array
        counts, text run content).  Link URLs are never truncated.
    on_error:
        Called once per violation with a :class:`MarknotionLimitError`.
        ``None`` means violations are only logged.
    """

    truncate: bool = True

    on_error: LimitCallback | None = None

    def __post_init__(self) -> None:
        if self.on_error is not None and not callable(self.on_error):
            raise ValueError(f"on_error must be callable, got {self.on_error!r}")

    def report(self, error: MarknotionLimitError) -> None:
        """Forward *error* to the caller's callback, if any."""
        if self.on_error is not None:
            self.on_error(error)


@dataclass(frozen=True)
class ConversionOptions:
    """Complete option set for a Markdown-to-Notion conversion.

    Parameters
    ----------
    strict_image_urls:
        Only emit image blocks for absolute http(s) URLs whose path ends in
        an extension Notion accepts.  Other images are rendered as their URL
        text inside the surrounding paragraph.
    enable_emoji_callouts:
        Turn blockquotes whose first paragraph starts with an emoji into
        callout blocks using that emoji as icon.
    non_inline:
        What the rich-text entry point does with a top-level node that is
        not a paragraph.

        * ``"ignore"`` — skip it.
        * ``"throw"`` — raise :class:`MarknotionUnsupportedNodeError`.
    notion_limits:
        Truncate-or-report policy shared by both entry points.
    debug_dump_ast:
        Log the normalized Markdown AST at DEBUG level on each conversion.
    debug_dump_payload:
        Log the resulting Notion payload at DEBUG level.
    """

    # ── Blocks ──────────────────────────────────────────────────────────
    strict_image_urls: bool = True

    enable_emoji_callouts: bool = False

    # ── Rich text ───────────────────────────────────────────────────────
    non_inline: Literal["ignore", "throw"] = "ignore"

    # ── Limits ──────────────────────────────────────────────────────────
    notion_limits: NotionLimits = field(default_factory=NotionLimits)

    # ── Debug ───────────────────────────────────────────────────────────
    debug_dump_ast: bool = False

    debug_dump_payload: bool = False

    def __post_init__(self) -> None:
        """Validate options after initialization."""
        if self.non_inline not in _NON_INLINE_POLICIES:
            raise ValueError(
                f"non_inline must be one of {sorted(_NON_INLINE_POLICIES)}, "
                f"got {self.non_inline!r}"
            )
        if not isinstance(self.notion_limits, NotionLimits):
            raise ValueError(
                f"notion_limits must be a NotionLimits instance, got {self.notion_limits!r}"
            )
