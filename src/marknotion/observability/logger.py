"""Structured JSON logging for marknotion.

The converter is side-effect free apart from the caller's limit callback, so
logging is its only diagnostic channel: dropped nodes and image fallbacks are
reported at ``DEBUG``, limit violations at ``WARNING``.  Records are emitted
as single-line JSON objects::

    {"ts": "2026-10-18T09:30:00.000000+00:00", "level": "WARNING",
     "logger": "marknotion.limits", "message": "rich text array exceeds limit",
     "limit": 100, "actual": 140}

Usage::

    from marknotion.observability import get_logger, log_fields

    log = get_logger("marknotion.converter")
    log.debug("node dropped", extra=log_fields(node_type="html"))
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

ROOT_LOGGER_NAME = "marknotion"


class StructuredFormatter(logging.Formatter):
    """Render log records as one JSON object per line.

    Guaranteed keys are ``ts`` (ISO-8601 UTC), ``level``, ``logger`` and
    ``message``.  Structured fields passed through :func:`log_fields` are
    merged at the top level; exception and stack info are serialised when
    present.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        fields: dict[str, Any] | None = getattr(record, "extra_fields", None)
        if fields:
            entry.update(fields)

        if record.exc_info and record.exc_info[1] is not None:
            entry["exception"] = self.formatException(record.exc_info)

        if record.stack_info:
            entry["stack_info"] = self.formatStack(record.stack_info)

        return json.dumps(entry, default=str, ensure_ascii=False)


def log_fields(**fields: Any) -> dict[str, dict[str, Any]]:
    """Wrap *fields* for the ``extra=`` argument of a logging call."""
    return {"extra_fields": fields}


# One handler per configured logger name, so repeated get_logger calls from
# different modules never stack duplicate handlers.
_configured_loggers: set[str] = set()


def get_logger(
    name: str = ROOT_LOGGER_NAME,
    *,
    level: int | str = logging.WARNING,
    stream: Any | None = None,
) -> logging.Logger:
    """Return the structured logger called *name*.

    Parameters
    ----------
    name:
        Logger name.  Child names such as ``"marknotion.converter"`` get
        their own handler the first time they are requested.
    level:
        Level set on first configuration, as an ``int`` or a
        case-insensitive level name.  Defaults to ``WARNING`` so that a
        library caller only sees limit violations unless they lower it.
    stream:
        Output stream for the handler.  Defaults to ``sys.stderr``.

    Returns
    -------
    logging.Logger
        The logger, with a :class:`StructuredFormatter` handler attached
        exactly once.
    """
    logger = logging.getLogger(name)

    if name not in _configured_loggers:
        resolved = logging.getLevelName(level.upper()) if isinstance(level, str) else level
        logger.setLevel(resolved)

        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)
        logger.propagate = False

        _configured_loggers.add(name)

    return logger
