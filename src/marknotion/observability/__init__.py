"""Observability: structured JSON logging for marknotion."""

from __future__ import annotations

from .logger import StructuredFormatter, get_logger, log_fields

__all__ = [
    "StructuredFormatter",
    "get_logger",
    "log_fields",
]
