from .text_split import split_string, truncate_with_ellipsis

__all__ = [
    "split_string",
    "truncate_with_ellipsis",
]
