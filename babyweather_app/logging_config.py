"""JSON logging, correlation ids and log redaction for the wardrobe advisor."""

from __future__ import annotations

import contextlib
import contextvars
import json
import logging
import os
import re
import sys
import time
import uuid
from typing import IO, Any, Dict, FrozenSet, Iterator

CORRELATION_ID: contextvars.ContextVar[str | None] = contextvars.ContextVar("correlation_id", default=None)

# attributes every LogRecord carries; anything else arrived through ``extra``
_RECORD_ATTRS: FrozenSet[str] = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {
    "message",
    "asctime",
    "taskName",
}
SENSITIVE_KEYS: FrozenSet[str] = frozenset(
    {
        "baby_id",
        "baby_name",
        "birth_date",
        "email",
        "user_id",
        "location",
        "city",
        "zip_code",
        "latitude",
        "longitude",
    }
)
REDACTED = "[redacted]"
_EMAIL = re.compile(r"[\w.\-+]+@[\w\-]+(\.[\w\-]+)+")


class JsonFormatter(logging.Formatter):
    """One JSON object per line: level, logger, event, correlation id and extras."""

    def __init__(self, sensitive_keys: FrozenSet[str] = SENSITIVE_KEYS) -> None:
        super().__init__()
        self.sensitive_keys = sensitive_keys

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        payload: Dict[str, Any] = {
            "timestamp": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%S%z"),
            "level": record.levelname,
            "logger": record.name,
            "event": getattr(record, "event", message),
            "message": message,
            "correlation_id": getattr(record, "correlation_id", None) or CORRELATION_ID.get(),
        }
        extras = {key: value for key, value in vars(record).items() if key not in _RECORD_ATTRS}
        for key, value in extras.items():
            payload.setdefault(key, _scrub(key, value, self.sensitive_keys))
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def configure_logging(level: int | str | None = None, stream: IO[str] | None = None) -> None:
    """Send all records through a single JSON handler on the root logger."""

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(JsonFormatter())
    root.addHandler(handler)
    root.setLevel(level or os.getenv("LOG_LEVEL", "INFO"))


def _scrub(key: Any, value: Any, sensitive_keys: FrozenSet[str] = SENSITIVE_KEYS) -> Any:
    if key in sensitive_keys:
        return REDACTED
    return redact_for_log(value, sensitive_keys)


def redact_for_log(value: Any, sensitive_keys: FrozenSet[str] = SENSITIVE_KEYS) -> Any:
    """Copy ``value`` with location data, identifiers, emails and URLs masked.

    Dict entries whose key is sensitive are replaced wholesale; strings are
    checked for email addresses and links. Anything that is not plain JSON
    data is logged as its ``str``.
    """

    if value is None or isinstance(value, (bool, int, float)):
        return value
    if isinstance(value, str):
        if value.lower().startswith(("http://", "https://")):
            return "[redacted-url]"
        return _EMAIL.sub("[redacted-email]", value)
    if isinstance(value, dict):
        return {key: _scrub(key, item, sensitive_keys) for key, item in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [redact_for_log(item, sensitive_keys) for item in value]
    return str(value)


def get_logger(name: str) -> logging.Logger:
    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name)


def current_correlation_id(correlation_id: str | None = None) -> str:
    """Return ``correlation_id``, the scoped one, or a fresh id.

    Never writes the context variable; only :func:`correlation_context` does.
    """

    return correlation_id or CORRELATION_ID.get() or uuid.uuid4().hex


@contextlib.contextmanager
def correlation_context(correlation_id: str | None = None) -> Iterator[str]:
    """Set a correlation id for the duration of the block and restore it afterwards."""

    token = CORRELATION_ID.set(correlation_id or CORRELATION_ID.get() or uuid.uuid4().hex)
    try:
        yield CORRELATION_ID.get()
    finally:
        CORRELATION_ID.reset(token)


def log_event(logger: logging.Logger, level: int, event: str, **fields: Any) -> None:
    """Log ``event`` with redacted keyword fields attached as record extras."""

    correlation_id = current_correlation_id(fields.pop("correlation_id", None))
    exc_info = fields.pop("exc_info", None)
    extra = {key: _scrub(key, value) for key, value in fields.items() if key not in _RECORD_ATTRS}
    extra.update(event=event, correlation_id=correlation_id)
    logger.log(level, event, exc_info=exc_info, extra=extra)


@contextlib.contextmanager
def operation_context(name: str, correlation_id: str | None = None) -> Iterator[str]:
    """Scope one named operation: shared correlation id plus a timing line at DEBUG."""

    logger = logging.getLogger(__name__)
    started = time.perf_counter()
    with correlation_context(correlation_id) as scoped_id:
        try:
            yield scoped_id
        finally:
            logger.debug(
                "operation %s finished",
                name,
                extra={"operation": name, "duration_ms": round((time.perf_counter() - started) * 1000, 2)},
            )


__all__ = [
    "CORRELATION_ID",
    "JsonFormatter",
    "REDACTED",
    "SENSITIVE_KEYS",
    "configure_logging",
    "correlation_context",
    "current_correlation_id",
    "get_logger",
    "log_event",
    "operation_context",
    "redact_for_log",
]
