# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Durable destinations for audit events drained by the queued recorder."""

from __future__ import annotations

import abc
import asyncio
import json
import logging
from pathlib import Path

from forgeaudit.audit.events import Event

_logger = logging.getLogger("forgeaudit.audit")

_AUDIT_LINE = "audit action=%s doer=%s/%s scope=%s/%s target=%s/%s ip=%s"


def audit_log_record(logger: logging.Logger, event: Event) -> logging.LogRecord:
    """Build the structured ``LogRecord`` for *event* without emitting it."""
    return logger.makeRecord(
        logger.name,
        logging.INFO,
        __file__,
        0,
        _AUDIT_LINE,
        (
            event.action,
            event.doer.type,
            event.doer.primary_key,
            event.scope.type,
            event.scope.primary_key,
            event.target.type,
            event.target.primary_key,
            event.ip_address or "-",
        ),
        None,
        extra={"audit": event.to_record()},
    )


def log_event(logger: logging.Logger, event: Event) -> None:
    """Emit the one-line structured log entry for *event*."""
    if logger.isEnabledFor(logging.INFO):
        logger.handle(audit_log_record(logger, event))


class AuditSink(abc.ABC):
    """Base class for audit event destinations."""

    @property
    @abc.abstractmethod
    def name(self) -> str:
        """Short sink name used in log messages (e.g. ``'jsonl'``)."""

    @abc.abstractmethod
    async def write(self, event: Event) -> None:
        """Persist a single event.  May raise; callers log and continue."""


class LoggingSink(AuditSink):
    """Writes events to the ``forgeaudit.audit`` logger."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or _logger

    @property
    def name(self) -> str:
        return "log"

    async def write(self, event: Event) -> None:
        log_event(self._logger, event)


class JsonlFileSink(AuditSink):
    """Appends events as JSON lines to a daily ``audit-YYYY-MM-DD.jsonl`` file.

    The day is taken from the event timestamp, not the write time, so a
    backlog drained after midnight still lands in the right file.
    """

    def __init__(self, log_dir: Path) -> None:
        self._log_dir = log_dir
        self._log_dir.mkdir(parents=True, exist_ok=True)

    @property
    def name(self) -> str:
        return "jsonl"

    def path_for(self, event: Event) -> Path:
        return self._log_dir / f"audit-{event.time.strftime('%Y-%m-%d')}.jsonl"

    async def write(self, event: Event) -> None:
        line = json.dumps(event.to_record(), default=str)
        await asyncio.to_thread(self._append, self.path_for(event), line)

    @staticmethod
    def _append(path: Path, line: str) -> None:
        with path.open("a", encoding="utf-8") as fh:
            fh.write(line + "\n")
