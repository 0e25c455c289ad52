"""Shared test fixtures for the marknotion test suite."""

from __future__ import annotations

import json
import logging

import pytest

from marknotion.config import ConversionOptions, NotionLimits
from marknotion.converter.md_to_notion import MarkdownToNotionConverter
from marknotion.observability import StructuredFormatter, get_logger


@pytest.fixture
def options() -> ConversionOptions:
    """Default conversion options."""
    return ConversionOptions()


@pytest.fixture
def converter(options: ConversionOptions) -> MarkdownToNotionConverter:
    """Markdown-to-Notion converter using the default options."""
    return MarkdownToNotionConverter(options)


@pytest.fixture
def limit_errors() -> list:
    """List that collects every limit error reported through ``on_error``."""
    return []


@pytest.fixture
def reporting_options(limit_errors: list) -> ConversionOptions:
    """Options whose limit callback appends to ``limit_errors``."""
    return ConversionOptions(notion_limits=NotionLimits(on_error=limit_errors.append))


@pytest.fixture
def capture_log():
    """Attach a JSON-formatted in-memory handler to a marknotion logger.

    Usage: ``records = capture_log("marknotion.limits")`` returns a list that
    fills with one decoded dict per record.  The logger is lowered to DEBUG
    for the duration of the test.
    """
    attached: list[tuple[logging.Logger, logging.Handler, int]] = []

    def attach(name: str) -> list[dict]:
        records: list[dict] = []
        formatter = StructuredFormatter()

        class _ListHandler(logging.Handler):
            def emit(self, record: logging.LogRecord) -> None:
                records.append(json.loads(formatter.format(record)))

        logger = get_logger(name)
        handler = _ListHandler()
        attached.append((logger, handler, logger.level))
        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG)
        return records

    yield attach

    for logger, handler, level in attached:
        logger.removeHandler(handler)
        logger.setLevel(level)
