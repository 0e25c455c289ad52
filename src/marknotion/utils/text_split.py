"""Code-point safe string chunking and truncation.

Notion caps ``rich_text[].text.content`` at 2 000 characters.  Python ``str``
indexing is code-point based, so plain slicing never produces half a
character; both helpers here rely on that.
"""

from __future__ import annotations

ELLIPSIS = "..."


def split_string(text: str, limit: int = 2000) -> list[str]:
    """Split *text* into consecutive chunks of at most *limit* characters.

    The concatenation of the returned chunks is always *text*.  An empty
    string yields an empty list.

    Raises
    ------
    ValueError
        If *limit* is less than 1.

    Examples
    --------
    >>> split_string("hello world", 5)
    ['hello', ' worl', 'd']
    >>> split_string("", 100)
    []
    """
    if limit < 1:
        raise ValueError(f"limit must be >= 1, got {limit}")

    return [text[i : i + limit] for i in range(0, len(text), limit)]


def truncate_with_ellipsis(text: str, limit: int) -> str:
    """Cut *text* so that it fits in *limit* characters, marking the cut.

    Text already within the limit is returned unchanged.  Otherwise the
    result is the first ``limit - 3`` characters followed by ``"..."``.

    >>> truncate_with_ellipsis("abcdefgh", 6)
    'abc...'
    """
    if limit <= len(ELLIPSIS):
        raise ValueError(f"limit must be > {len(ELLIPSIS)}, got {limit}")
    if len(text) <= limit:
        return text
    return text[: limit - len(ELLIPSIS)] + ELLIPSIS
