# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Recorders hand finished audit events to their sinks.

Recording is fire-and-forget: ``record()`` never blocks on I/O and never
lets a sink failure propagate into the business operation being audited.
Both concrete recorders accept events from any thread.
"""

from __future__ import annotations

import abc
import asyncio
import atexit
import contextlib
import logging
import queue
from collections.abc import Iterable
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path
from typing import Any

from forgeaudit.audit.actions import Action
from forgeaudit.audit.context import AuditContext
from forgeaudit.audit.events import Event, build_event
from forgeaudit.audit.sinks import AuditSink, JsonlFileSink, LoggingSink, audit_log_record
from forgeaudit.core.config import Settings, get_settings
from forgeaudit.core.exceptions import ConfigurationError
from forgeaudit.core.logging import setup_logging

_logger = logging.getLogger("forgeaudit.audit.recorder")

# Module-level singleton
_recorder: AuditRecorder | None = None


class AuditRecorder(abc.ABC):
    """Accepts fully built events.

    Implementations must return quickly (at most a constant-time enqueue)
    and must not raise because a destination is unavailable.
    """

    @abc.abstractmethod
    def record(self, ctx: AuditContext | None, event: Event) -> None:
        """Accept *event* for storage."""

    def close(self) -> None:
        """Release background resources.  Safe to call more than once."""


class NullRecorder(AuditRecorder):
    """Discards events; used when auditing is disabled."""

    def record(self, ctx: AuditContext | None, event: Event) -> None:
        return None


class _ForwardHandler(logging.Handler):
    """Replays records dequeued by the listener through the target logger."""

    def __init__(self, logger: logging.Logger) -> None:
        super().__init__()
        self._target = logger

    def emit(self, record: logging.LogRecord) -> None:
        self._target.handle(record)


class LogRecorder(AuditRecorder):
    """Logs each event on the ``forgeaudit.audit`` logger from a listener thread.

    ``record()`` only builds the ``LogRecord`` and puts it on an in-memory
    queue; a :class:`~logging.handlers.QueueListener` thread passes it to the
    logger's handlers.  After :meth:`close` records are logged inline.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger("forgeaudit.audit")
        self._queue: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
        self._handler = QueueHandler(self._queue)
        self._listener: QueueListener | None = QueueListener(
            self._queue, _ForwardHandler(self._logger)
        )
        self._listener.start()
        atexit.register(self.close)

    def record(self, ctx: AuditContext | None, event: Event) -> None:
        if not self._logger.isEnabledFor(logging.INFO):
            return
        try:
            entry = audit_log_record(self._logger, event)
            if self._listener is None:
                self._logger.handle(entry)
            else:
                self._handler.handle(entry)
        except Exception:
            _logger.exception("Failed to log audit event action=%s", event.action)

    def close(self) -> None:
        """Log everything still queued and stop the listener thread."""
        listener, self._listener = self._listener, None
        if listener is None:
            return
        listener.stop()
        atexit.unregister(self.close)


def _running_loop() -> asyncio.AbstractEventLoop | None:
    try:
        return asyncio.get_running_loop()
    except RuntimeError:
        return None


class QueuedRecorder(AuditRecorder):
    """Buffers events in a bounded queue drained by a background task.

    ``record()`` may be called from any thread.  On the event loop that
    runs the drain task (or before :meth:`start`) it is a ``put_nowait``;
    from other threads the put is scheduled on that loop with
    ``call_soon_threadsafe``.  When the queue is full the event is dropped
    and counted.  Each drained event is written to every sink in order; a
    failing sink is logged and skipped.
    """

    def __init__(self, sinks: Iterable[AuditSink], *, maxsize: int = 1000) -> None:
        self._sinks = list(sinks)
        self._queue: asyncio.Queue[Event] = asyncio.Queue(maxsize=maxsize)
        self._task: asyncio.Task[None] | None = None
        self._loop: asyncio.AbstractEventLoop | None = None
        self._dropped = 0

    @property
    def sinks(self) -> list[AuditSink]:
        return list(self._sinks)

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def pending(self) -> int:
        return self._queue.qsize()

    @property
    def dropped(self) -> int:
        return self._dropped

    def record(self, ctx: AuditContext | None, event: Event) -> None:
        loop = self._loop
        if loop is None or _running_loop() is loop:
            self._enqueue(event)
            return
        try:
            loop.call_soon_threadsafe(self._enqueue, event)
        except RuntimeError:
            # Loop closed without stop(); nothing will drain the queue.
            _logger.warning("Audit loop is closed; dropped event action=%s", event.action)

    def _enqueue(self, event: Event) -> None:
        try:
            self._queue.put_nowait(event)
        except asyncio.QueueFull:
            self._dropped += 1
            _logger.warning(
                "Audit queue full (maxsize=%d); dropped event action=%s",
                self._queue.maxsize,
                event.action,
            )

    async def start(self) -> None:
        """Start the background drain task on the running loop."""
        if self.running:
            return
        self._loop = asyncio.get_running_loop()
        self._task = asyncio.create_task(self._run())
        _logger.info("Audit recorder started (sinks=%s)", ",".join(s.name for s in self._sinks))

    async def flush(self) -> None:
        """Wait until every queued event has been delivered."""
        # Let puts scheduled from other threads land first.
        await asyncio.sleep(0)
        if self.running:
            await self._queue.join()
        else:
            while not self._queue.empty():
                await self._deliver(self._queue.get_nowait())
                self._queue.task_done()

    async def stop(self) -> None:
        """Deliver what is queued, then stop the background task."""
        await self.flush()
        if self._task is not None:
            self._task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._task
            self._task = None
        self._loop = None
        _logger.info("Audit recorder stopped (dropped=%d)", self._dropped)

    async def _run(self) -> None:
        while True:
            event = await self._queue.get()
            try:
                await self._deliver(event)
            finally:
                self._queue.task_done()

    async def _deliver(self, event: Event) -> None:
        for sink in self._sinks:
            try:
                await sink.write(event)
            except Exception:
                _logger.exception(
                    "Audit sink %s failed for action=%s", sink.name, event.action
                )


def build_recorder(settings: Settings) -> AuditRecorder:
    """Create the recorder described by *settings*.

    Raises:
        ConfigurationError: if file output is requested without the queued
            recorder, which is the only one that writes files.
    """
    if not settings.audit_enabled:
        return NullRecorder()

    if settings.audit_recorder == "queue":
        sinks: list[AuditSink] = [LoggingSink()]
        if settings.audit_log_dir:
            sinks.append(JsonlFileSink(Path(settings.audit_log_dir)))
        return QueuedRecorder(sinks, maxsize=settings.audit_queue_size)

    if settings.audit_log_dir:
        raise ConfigurationError(
            "audit_log_dir requires audit_recorder=queue"
        )
    return LogRecorder()


def get_recorder() -> AuditRecorder:
    """Return the module-level recorder, a :class:`LogRecorder` by default."""
    global _recorder
    if _recorder is None:
        _recorder = LogRecorder()
    return _recorder


def set_recorder(recorder: AuditRecorder | None) -> None:
    """Replace the module-level recorder (``None`` restores the default)."""
    global _recorder
    _recorder = recorder


def configure(settings: Settings | None = None) -> AuditRecorder:
    """Set up logging and install the recorder described by *settings*.

    Reads :func:`~forgeaudit.core.config.get_settings` when no settings are
    given.  The previously installed recorder is closed.  A queued recorder
    is returned unstarted; the caller awaits ``start()`` from its event loop.
    """
    if settings is None:
        settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    recorder = build_recorder(settings)
    if _recorder is not None:
        _recorder.close()
    set_recorder(recorder)
    _logger.debug(
        "Audit configured (enabled=%s recorder=%s)",
        settings.audit_enabled,
        type(recorder).__name__,
    )
    return recorder


def record(
    ctx: AuditContext | None,
    action: Action,
    doer: Any,
    scope: Any,
    target: Any,
    message: str = "",
    *args: Any,
) -> Event:
    """Build an event and hand it to the current recorder.

    Returns the event.  Unsupported entity references raise
    :class:`~forgeaudit.core.exceptions.UnsupportedEntityError`; recorder
    failures are logged and never raised.
    """
    event = build_event(ctx, action, doer, scope, target, message, *args)
    try:
        get_recorder().record(ctx, event)
    except Exception:
        _logger.exception("Audit recorder failed for action=%s", action)
    return event
