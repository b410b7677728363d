# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Entity models that can be described in audit events."""

from forgeaudit.models.asymkey import GPGKey, PublicKey
from forgeaudit.models.auth import (
    AccessToken,
    AuthenticationSource,
    OAuth2Application,
    OAuth2Grant,
    TwoFactor,
    WebAuthnCredential,
)
from forgeaudit.models.organization import Team
from forgeaudit.models.repo import PushMirror, RepoTransfer, Repository
from forgeaudit.models.settings import ProtectedBranch, ProtectedTag, Secret, Webhook
from forgeaudit.models.user import (
    EmailAddress,
    ExternalLoginUser,
    Organization,
    User,
    UserOpenID,
)

__all__ = [
    "AccessToken",
    "AuthenticationSource",
    "EmailAddress",
    "ExternalLoginUser",
    "GPGKey",
    "OAuth2Application",
    "OAuth2Grant",
    "Organization",
    "ProtectedBranch",
    "ProtectedTag",
    "PublicKey",
    "PushMirror",
    "RepoTransfer",
    "Repository",
    "Secret",
    "Team",
    "TwoFactor",
    "User",
    "UserOpenID",
    "WebAuthnCredential",
    "Webhook",
]
