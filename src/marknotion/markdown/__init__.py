"""Markdown side of the pipeline: the typed syntax tree and its parser.

- :mod:`marknotion.markdown.ast` — node dataclasses and builder helpers.
- :class:`MarkdownParser` — mistune-backed parser producing that tree.
"""

from marknotion.markdown import ast
from marknotion.markdown.parser import MarkdownParser

__all__ = [
    "MarkdownParser",
    "ast",
]
