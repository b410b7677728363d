# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Custom exception hierarchy for forgeaudit."""


class ForgeAuditError(Exception):
    """Base exception for all forgeaudit errors."""


class ConfigurationError(ForgeAuditError):
    """Invalid or missing configuration."""


class UnsupportedEntityError(ForgeAuditError, TypeError):
    """An entity reference outside the supported set was passed for auditing.

    This is a programming error in the caller, never a data error, and is
    not caught anywhere inside forgeaudit.
    """

    def __init__(self, role: str, ref: object) -> None:
        self.role = role
        self.ref = ref
        super().__init__(f"unsupported {role} type: {type(ref).__name__}")
