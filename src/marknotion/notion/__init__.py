"""Notion side of the pipeline: payload constructors and lookup tables.

- :mod:`marknotion.notion.blocks` — block payload constructors.
- :mod:`marknotion.notion.rich_text` — rich_text object constructors.
- :func:`parse_code_language` — fence info string to Notion language.
"""

from marknotion.notion import blocks, rich_text
from marknotion.notion.languages import PLAIN_TEXT, parse_code_language

__all__ = [
    "PLAIN_TEXT",
    "blocks",
    "parse_code_language",
    "rich_text",
]
