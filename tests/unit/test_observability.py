"""Tests for observability/logger.py"""
import io
import json
import logging
import sys


class TestStructuredFormatter:
    def _get_record(self, msg, level=logging.INFO, exc_info=None, stack_info=None, extra_fields=None):
        record = logging.LogRecord(
            name="marknotion.test",
            level=level,
            pathname="",
            lineno=0,
            msg=msg,
            args=(),
            exc_info=exc_info,
        )
        if extra_fields is not None:
            record.extra_fields = extra_fields
        if stack_info is not None:
            record.stack_info = stack_info
        return record

    def test_basic_format(self):
        from marknotion.observability.logger import StructuredFormatter

        result = json.loads(StructuredFormatter().format(self._get_record("hello world")))
        assert result["message"] == "hello world"
        assert result["level"] == "INFO"
        assert result["logger"] == "marknotion.test"
        assert "ts" in result

    def test_extra_fields_merged(self):
        from marknotion.observability.logger import StructuredFormatter

        record = self._get_record("msg", extra_fields={"node_type": "html", "limit": 100})
        result = json.loads(StructuredFormatter().format(record))
        assert result["node_type"] == "html"
        assert result["limit"] == 100

    def test_non_ascii_preserved(self):
        from marknotion.observability.logger import StructuredFormatter

        record = self._get_record("msg", extra_fields={"emoji": "\U0001F4D8"})
        assert "\U0001F4D8" in StructuredFormatter().format(record)

    def test_exception_info_included(self):
        from marknotion.observability.logger import StructuredFormatter

        try:
            raise ValueError("test error")
        except ValueError:
            exc_info = sys.exc_info()
        result = json.loads(StructuredFormatter().format(self._get_record("err", exc_info=exc_info)))
        assert "ValueError" in result["exception"]

    def test_stack_info_included(self):
        from marknotion.observability.logger import StructuredFormatter

        record = self._get_record("msg", stack_info="Stack Trace Here")
        result = json.loads(StructuredFormatter().format(record))
        assert result["stack_info"] == "Stack Trace Here"


class TestLogFields:
    def test_wraps_fields(self):
        from marknotion.observability import log_fields

        assert log_fields(a=1, b="x") == {"extra_fields": {"a": 1, "b": "x"}}


class TestGetLogger:
    def test_returns_logger_with_handler(self):
        from marknotion.observability.logger import get_logger

        logger = get_logger("marknotion.test.unique1")
        assert isinstance(logger, logging.Logger)
        assert len(logger.handlers) == 1
        assert logger.propagate is False

    def test_default_level_warning(self):
        from marknotion.observability.logger import get_logger

        assert get_logger("marknotion.test.unique2").level == logging.WARNING

    def test_string_level(self):
        from marknotion.observability.logger import get_logger

        assert get_logger("marknotion.test.unique3", level="debug").level == logging.DEBUG

    def test_idempotent_no_duplicate_handlers(self):
        from marknotion.observability.logger import get_logger

        name = "marknotion.test.unique4"
        assert len(get_logger(name).handlers) == len(get_logger(name).handlers) == 1

    def test_custom_stream(self):
        from marknotion.observability import log_fields
        from marknotion.observability.logger import get_logger

        stream = io.StringIO()
        logger = get_logger("marknotion.test.stream_unique", stream=stream)
        logger.warning("limit hit", extra=log_fields(limit=100))
        entry = json.loads(stream.getvalue().strip())
        assert entry["message"] == "limit hit"
        assert entry["limit"] == 100

    def test_below_level_not_emitted(self):
        from marknotion.observability.logger import get_logger

        stream = io.StringIO()
        logger = get_logger("marknotion.test.quiet_unique", stream=stream)
        logger.debug("hidden")
        assert stream.getvalue() == ""
