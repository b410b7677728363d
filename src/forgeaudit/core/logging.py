# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Logging setup for forgeaudit.

Audit messages are written by callers and may quote the credential being
added or removed, so every formatter scrubs forge tokens, bearer headers
and private-key bodies before anything reaches a stream.
"""

from __future__ import annotations

import json
import logging
import re
import sys
from datetime import UTC, datetime
from typing import Any

from forgeaudit.core.exceptions import ConfigurationError

REDACTED = "[REDACTED]"

# Each pattern keeps a short recognizable prefix in group 1.
REDACT_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"(gta_[a-f0-9]{4})[a-f0-9]{36}"),
    re.compile(r"(gh[pous]_[A-Za-z0-9]{4})[A-Za-z0-9_]{32,}"),
    re.compile(r"(gto_[a-z0-9]{4})[a-z0-9]{20,}"),
    re.compile(r"(Bearer\s+[A-Za-z0-9\-._~+/]{10})[A-Za-z0-9\-._~+/]*=*"),
    re.compile(r"(-----BEGIN [A-Z ]*PRIVATE KEY-----)[\s\S]*?(?=-----END|$)"),
)

TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def redact_sensitive(text: str) -> str:
    for pattern in REDACT_PATTERNS:
        text = pattern.sub(rf"\1{REDACTED}", text)
    return text


def redact_value(value: Any) -> Any:
    """Redact strings inside *value*, descending into dicts and lists."""
    if isinstance(value, str):
        return redact_sensitive(value)
    if isinstance(value, dict):
        return {key: redact_value(item) for key, item in value.items()}
    if isinstance(value, list | tuple):
        return [redact_value(item) for item in value]
    return value


class JsonFormatter(logging.Formatter):
    """One JSON object per line, with the ``audit`` payload attached when present."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": redact_sensitive(record.getMessage()),
        }
        audit = getattr(record, "audit", None)
        if isinstance(audit, dict):
            entry["audit"] = redact_value(audit)
        if record.exc_info:
            entry["exception"] = redact_sensitive(self.formatException(record.exc_info))
        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    def __init__(self, fmt: str | None = TEXT_FORMAT) -> None:
        super().__init__(fmt)

    def format(self, record: logging.LogRecord) -> str:
        return redact_sensitive(super().format(record))


_FORMATTERS: dict[str, type[logging.Formatter]] = {
    "json": JsonFormatter,
    "text": TextFormatter,
}


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Logger:
    """Send ``forgeaudit.*`` records to stderr in *fmt* (``json`` or ``text``).

    Replaces any handlers installed by an earlier call and returns the
    package logger.
    """
    formatter_cls = _FORMATTERS.get(fmt.lower())
    if formatter_cls is None:
        raise ConfigurationError(f"unknown log format: {fmt!r}")

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter_cls())

    package_logger = logging.getLogger("forgeaudit")
    package_logger.setLevel(logging.getLevelNamesMapping().get(level.upper(), logging.INFO))
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    return package_logger
