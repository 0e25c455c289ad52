"""Formatting state threaded through inline recursion.

:class:`AnnotationContext` is immutable.  Each formatting container
(``strong``, ``emphasis``, ``delete``, ``inlineCode``, ``link``) derives a new
context before descending, so sibling subtrees never see each other's state
and every flag set by an ancestor is present on all runs below it.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class AnnotationContext:
    """Annotations and hyperlink applied to the runs of an inline subtree."""

    bold: bool = False
    italic: bool = False
    strikethrough: bool = False
    underline: bool = False
    code: bool = False
    color: str = "default"
    link: str | None = None

    def derive(self, **changes: Any) -> AnnotationContext:
        """Return a copy with *changes* applied; ``self`` is left untouched."""
        return dataclasses.replace(self, **changes)

    def annotations(self) -> dict[str, Any]:
        """The Notion ``annotations`` object for runs in this context."""
        return {
            "bold": self.bold,
            "italic": self.italic,
            "strikethrough": self.strikethrough,
            "underline": self.underline,
            "code": self.code,
            "color": self.color,
        }


DEFAULT_CONTEXT = AnnotationContext()
