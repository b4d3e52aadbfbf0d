"""Logging setup for driftcha.

Every module logs through its own ``logging.getLogger(__name__)``. This
module configures the root handler once per process (text or JSON lines,
stdout or a file) and hands out loggers that carry challenge context.
"""

from __future__ import annotations

import functools
import json
import logging
import sys
import time
from datetime import UTC, datetime
from typing import Any

SAMPLER_LOGGER_NAME = "driftcha.sampler"
LOG_FORMATS = ("text", "json")
DEFAULT_TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Attributes every LogRecord has; anything else arrived through `extra`
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class StructuredJSONFormatter(logging.Formatter):
    """One JSON object per record.

    Keys are ``time``, ``level``, ``logger`` and ``message``, then any
    context passed through ``extra`` or a context logger (for example
    ``challenge_id``). Failures add ``error_type``, ``error`` and
    ``traceback``.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "time": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(
            (key, value)
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRS and not key.startswith("_")
        )

        if record.exc_info and record.exc_info[0] is not None:
            entry["error_type"] = record.exc_info[0].__name__
            entry["error"] = str(record.exc_info[1])
            entry["traceback"] = record.exc_text or self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


def configure_logging(
    level: str = "WARNING",
    log_format: str = "text",
    filename: str | None = None,
) -> None:
    """Configure the root logger; later calls replace earlier handlers.

    Args:
        level: Level name, case-insensitive (DEBUG, INFO, WARNING, ...).
        log_format: "text" for human-readable lines, "json" for JSON lines.
        filename: Log file path. Logs go to stdout when None.

    Raises:
        ValueError: If the level or format is unknown.

    Examples:
        >>> configure_logging(level="INFO")
        >>> configure_logging(level="DEBUG", log_format="json", filename="driftcha.jsonl")
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level!r}")
    if log_format not in LOG_FORMATS:
        raise ValueError(f"Unknown log format {log_format!r}, expected one of {LOG_FORMATS}")

    handler: logging.Handler
    if filename:
        handler = logging.FileHandler(filename, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stdout)

    if log_format == "json":
        handler.setFormatter(StructuredJSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(DEFAULT_TEXT_FORMAT))

    logging.basicConfig(level=numeric_level, handlers=[handler], force=True)


def get_logger(name: str, **context: Any) -> logging.Logger | logging.LoggerAdapter:
    """Logger for name, wrapped in a LoggerAdapter when context is given.

    Context keys land on every record as attributes, so the JSON formatter
    emits them as top-level fields.
    """
    base = logging.getLogger(name)
    if context:
        return logging.LoggerAdapter(base, context)
    return base


def get_sampler_logger() -> logging.Logger:
    return logging.getLogger(SAMPLER_LOGGER_NAME)


def log_performance(func):
    """Log how long each call takes on the sampler logger (DEBUG)."""

    @functools.wraps(func)
    def wrapper_timer(*args, **kwargs):
        start_time = time.perf_counter()
        result = func(*args, **kwargs)
        elapsed_ms = (time.perf_counter() - start_time) * 1000
        get_sampler_logger().debug(f"{func.__qualname__} took {elapsed_ms:.3f} ms")
        return result

    return wrapper_timer
