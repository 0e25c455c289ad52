"""Image URL validation for image blocks.

:func:`parse_image_url` returns a typed result instead of raising, so the
paragraph translator can pick between an image block and a text fallback
with a plain ``isinstance`` check.
"""

from __future__ import annotations

import posixpath
from dataclasses import dataclass
from urllib.parse import urlparse

# Extensions accepted by Notion for external image blocks
ALLOWED_IMAGE_EXTENSIONS: frozenset[str] = frozenset({
    ".png", ".jpg", ".jpeg", ".gif", ".tif", ".tiff", ".bmp", ".svg",
    ".heic", ".webp",
})

_WEB_SCHEMES: frozenset[str] = frozenset({"http", "https"})


@dataclass(frozen=True)
class ValidImageUrl:
    url: str
    extension: str = ""


@dataclass(frozen=True)
class InvalidImageUrl:
    url: str
    reason: str


ImageUrlResult = ValidImageUrl | InvalidImageUrl


def parse_image_url(url: str, *, strict: bool = True) -> ImageUrlResult:
    """Decide whether *url* can back a Notion external image block.

    In strict mode the URL must be absolute http(s) and its path must end in
    one of :data:`ALLOWED_IMAGE_EXTENSIONS` (case-insensitive).  Otherwise any
    non-empty URL is accepted as is.
    """
    if not url or not url.strip():
        return InvalidImageUrl(url=url, reason="empty url")
    if not strict:
        return ValidImageUrl(url=url)

    try:
        parsed = urlparse(url)
    except ValueError as exc:
        return InvalidImageUrl(url=url, reason=f"unparseable url: {exc}")

    # Notion external files must be fetchable over http(s).
    if parsed.scheme.lower() not in _WEB_SCHEMES or not parsed.netloc:
        return InvalidImageUrl(url=url, reason="not an absolute http(s) url")

    extension = posixpath.splitext(parsed.path)[1].lower()
    if extension not in ALLOWED_IMAGE_EXTENSIONS:
        return InvalidImageUrl(url=url, reason=f"unsupported extension {extension!r}")
    return ValidImageUrl(url=url, extension=extension)
