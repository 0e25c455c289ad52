"""Error hierarchy for marknotion.

Every public error class inherits from :class:`MarknotionError`. Each carries a
machine-readable ``code`` (from :class:`ErrorCode`), a human-readable
``message``, an optional structured ``context`` dict, and an optional
``cause`` (chained exception).

Only :class:`MarknotionUnsupportedNodeError` is ever *raised* by the
conversion pipeline.  :class:`MarknotionLimitError` instances are built by the
limits enforcer and handed to the caller's ``on_error`` callback instead.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

# ---------------------------------------------------------------------------
# Error code enum
# ---------------------------------------------------------------------------

class ErrorCode(str, Enum):
    """Machine-readable error codes for every error the package can report."""

    CONVERSION_ERROR = "CONVERSION_ERROR"
    UNSUPPORTED_NODE = "UNSUPPORTED_NODE"
    PAYLOAD_BLOCKS_EXCEEDED = "PAYLOAD_BLOCKS_EXCEEDED"
    RICH_TEXT_ARRAY_EXCEEDED = "RICH_TEXT_ARRAY_EXCEEDED"
    TEXT_CONTENT_EXCEEDED = "TEXT_CONTENT_EXCEEDED"
    LINK_URL_EXCEEDED = "LINK_URL_EXCEEDED"


# ---------------------------------------------------------------------------
# Base error
# ---------------------------------------------------------------------------

class MarknotionError(Exception):
    """Base exception for all marknotion errors.

    Parameters
    ----------
    code:
        A value from :class:`ErrorCode` (or any string) identifying the
        error category.
    message:
        A developer-friendly description of what went wrong.
    context:
        Arbitrary structured data providing extra diagnostic detail.
        Keys and expected types are documented per subclass.
    cause:
        The underlying exception, if this error wraps another.
    """

    def __init__(
        self,
        code: str,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.code: str = code
        self.message: str = message
        self.context: dict[str, Any] = context or {}
        self.cause: Exception | None = cause
        super().__init__(message)
        if cause is not None:
            self.__cause__ = cause

    def __repr__(self) -> str:
        ctx = f", context={self.context!r}" if self.context else ""
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r}{ctx})"


# ---------------------------------------------------------------------------
# Conversion errors
# ---------------------------------------------------------------------------

class MarknotionConversionError(MarknotionError):
    """Base class for errors raised while converting Markdown.

    Context varies by subclass.
    """

    def __init__(
        self,
        code: str = ErrorCode.CONVERSION_ERROR,
        message: str = "Conversion error",
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=code,
            message=message,
            context=context,
            cause=cause,
        )


class MarknotionUnsupportedNodeError(MarknotionConversionError):
    """A top-level Markdown node cannot be expressed as rich text and the
    ``non_inline`` policy is ``"throw"``.

    Context keys: ``node_type``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.UNSUPPORTED_NODE,
            message=message,
            context=context,
            cause=cause,
        )


# ---------------------------------------------------------------------------
# Limit errors
# ---------------------------------------------------------------------------

class MarknotionLimitError(MarknotionError):
    """A converted payload violates one of the Notion API request limits.

    Passed to ``NotionLimits.on_error``; never raised by the library.

    Context keys: ``limit``, ``actual``; text-content violations add
    ``content_preview`` and link violations add ``url``.
    """

    def __init__(
        self,
        code: str,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=code,
            message=message,
            context=context,
            cause=cause,
        )
