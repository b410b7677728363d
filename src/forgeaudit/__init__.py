# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""forgeaudit - Audit events for source-forge security and compliance changes."""

__version__ = "0.1.0"

from forgeaudit.audit import (
    Action,
    AuditContext,
    Event,
    TypeDescriptor,
    build_event,
    record,
)
from forgeaudit.core.exceptions import ForgeAuditError, UnsupportedEntityError

__all__ = [
    "Action",
    "AuditContext",
    "Event",
    "ForgeAuditError",
    "TypeDescriptor",
    "UnsupportedEntityError",
    "__version__",
    "build_event",
    "record",
]
