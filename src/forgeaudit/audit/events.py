# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Audit event data model and construction."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from forgeaudit.audit.actions import Action
from forgeaudit.audit.context import AuditContext
from forgeaudit.audit.descriptors import TypeDescriptor, describe_scope, describe_target

_logger = logging.getLogger("forgeaudit.audit.events")


class Event(BaseModel):
    """A single audited operation: who did what, where, and to which entity.

    Events are immutable once built.  ``scope`` is the System descriptor
    when the action has no owning entity.
    """

    model_config = ConfigDict(frozen=True)

    action: Action
    doer: TypeDescriptor
    scope: TypeDescriptor
    target: TypeDescriptor
    message: str = ""
    time: datetime = Field(default_factory=lambda: datetime.now(UTC))
    ip_address: str = Field(
        default="",
        description="Origin IP of the triggering request, without port",
    )

    def to_record(self) -> dict[str, Any]:
        """Flatten the event into a JSON-safe dict for sinks."""
        record: dict[str, Any] = {"action": str(self.action)}
        for role in ("doer", "scope", "target"):
            descriptor: TypeDescriptor = getattr(self, role)
            record[f"{role}_type"] = str(descriptor.type)
            record[f"{role}_id"] = descriptor.primary_key
            record[f"{role}_name"] = descriptor.friendly_name
        record["message"] = self.message
        record["time"] = self.time.isoformat()
        record["ip_address"] = self.ip_address
        return record


def format_message(template: str, *args: Any) -> str:
    """printf-style formatting that never raises.

    Without arguments the template is used verbatim.
    """
    if not args:
        return template
    try:
        return template % args
    except (TypeError, ValueError):
        _logger.warning("Audit message %r does not match %d argument(s)", template, len(args))
        return template


def build_event(
    ctx: AuditContext | None,
    action: Action,
    doer: Any,
    scope: Any,
    target: Any,
    message: str = "",
    *args: Any,
) -> Event:
    """Assemble an :class:`Event` for an audited operation.

    *doer* and *target* must be supported entities; *scope* may also be
    ``None`` for system-wide actions.  *message* is a printf-style template
    formatted with *args*.

    Raises:
        UnsupportedEntityError: for unsupported doer, scope or target
            references.  This signals a bug in the caller and is not caught.
    """
    return Event(
        action=action,
        doer=describe_target(doer),
        scope=describe_scope(scope),
        target=describe_target(target),
        message=format_message(message, *args),
        time=datetime.now(UTC),
        ip_address=ctx.ip_address if ctx is not None else "",
    )
