# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Audit event construction and recording for security-relevant changes."""

from forgeaudit.audit.actions import Action, actions_in_namespace
from forgeaudit.audit.context import AuditContext, RequestMetadata, context_from_request
from forgeaudit.audit.descriptors import (
    EntityType,
    TypeDescriptor,
    describe_scope,
    describe_target,
)
from forgeaudit.audit.events import Event, build_event
from forgeaudit.audit.recorder import (
    AuditRecorder,
    LogRecorder,
    NullRecorder,
    QueuedRecorder,
    build_recorder,
    configure,
    get_recorder,
    record,
    set_recorder,
)
from forgeaudit.audit.scopes import owned_action, owner_scope
from forgeaudit.audit.sinks import AuditSink, JsonlFileSink, LoggingSink

__all__ = [
    "Action",
    "AuditContext",
    "AuditRecorder",
    "AuditSink",
    "EntityType",
    "Event",
    "JsonlFileSink",
    "LogRecorder",
    "LoggingSink",
    "NullRecorder",
    "QueuedRecorder",
    "RequestMetadata",
    "TypeDescriptor",
    "actions_in_namespace",
    "build_event",
    "build_recorder",
    "configure",
    "context_from_request",
    "describe_scope",
    "describe_target",
    "get_recorder",
    "owned_action",
    "owner_scope",
    "record",
    "set_recorder",
]
