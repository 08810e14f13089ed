"""Logging configuration: JSON output and API key redaction."""

from __future__ import annotations

import json
import logging
import re
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

_API_KEY_PATTERN = re.compile(r"(apiKey=)[^&\s\"']+", re.IGNORECASE)
REDACTED = "***"


def redact(text: str) -> str:
    """Mask every ``apiKey=<value>`` query parameter in ``text``."""
    return _API_KEY_PATTERN.sub(rf"\g<1>{REDACTED}", text)


class RedactApiKeyFilter(logging.Filter):
    """Rewrite log records so the news API key never reaches a handler.

    httpx logs full request URLs at INFO, and those carry ``apiKey``.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = redact(message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True


class JSONFormatter(logging.Formatter):
    """Format log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info and record.exc_info[1] is not None:
            log_entry["exception"] = redact(self.formatException(record.exc_info))
        extra_data = getattr(record, "extra_data", None)
        if extra_data is not None:
            log_entry["data"] = extra_data
        return json.dumps(log_entry, default=str)


def _install(handler: logging.Handler, formatter: logging.Formatter) -> logging.Handler:
    handler.setFormatter(formatter)
    handler.addFilter(RedactApiKeyFilter())
    return handler


def setup_logging(*, level: int | str = logging.INFO) -> None:
    """Configure the root logger with plain text output and API key redaction."""
    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    root.addHandler(_install(logging.StreamHandler(), logging.Formatter("%(asctime)s %(levelname)s %(message)s")))


def setup_structured_logging(
    *,
    log_file: Path | None = None,
    level: int | str = logging.INFO,
) -> None:
    """Configure the root logger with structured JSON output.

    Args:
        log_file: If provided, also write JSON logs to this file.
        level: Logging level (default INFO).
    """
    root = logging.getLogger()
    root.setLevel(level)

    # Remove existing handlers to avoid duplicate output
    root.handlers.clear()

    formatter = JSONFormatter()
    root.addHandler(_install(logging.StreamHandler(), formatter))

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        root.addHandler(_install(logging.FileHandler(str(log_file)), formatter))
