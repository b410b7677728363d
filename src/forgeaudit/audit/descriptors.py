# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Normalized descriptions of the entities referenced by audit events.

Every supported entity class maps to exactly one :class:`EntityType` and a
pair of extractors for its primary key and a human-readable name.  The
table is closed: passing anything else is a programming error and raises
:class:`~forgeaudit.core.exceptions.UnsupportedEntityError` instead of
producing a placeholder description.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from operator import attrgetter
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from forgeaudit.core.exceptions import UnsupportedEntityError
from forgeaudit.models import (
    AccessToken,
    AuthenticationSource,
    EmailAddress,
    ExternalLoginUser,
    GPGKey,
    OAuth2Application,
    OAuth2Grant,
    Organization,
    ProtectedBranch,
    ProtectedTag,
    PublicKey,
    PushMirror,
    RepoTransfer,
    Repository,
    Secret,
    Team,
    TwoFactor,
    User,
    UserOpenID,
    WebAuthnCredential,
    Webhook,
)


class EntityType(StrEnum):
    """Kinds of entities an audit event can refer to."""

    SYSTEM = "system"
    USER = "user"
    ORGANIZATION = "organization"
    EMAIL_ADDRESS = "email_address"
    REPOSITORY = "repository"
    TEAM = "team"
    TWO_FACTOR = "two_factor"
    WEBAUTHN_CREDENTIAL = "webauthn_credential"
    OPENID = "openid"
    ACCESS_TOKEN = "access_token"
    OAUTH2_APPLICATION = "oauth2_application"
    OAUTH2_GRANT = "oauth2_grant"
    AUTHENTICATION_SOURCE = "authentication_source"
    EXTERNAL_LOGIN = "external_login"
    PUBLIC_KEY = "public_key"
    GPG_KEY = "gpg_key"
    SECRET = "secret"
    WEBHOOK = "webhook"
    PROTECTED_TAG = "protected_tag"
    PROTECTED_BRANCH = "protected_branch"
    PUSH_MIRROR = "push_mirror"
    REPO_TRANSFER = "repo_transfer"


class TypeDescriptor(BaseModel):
    """Normalized ``{type, primary_key, friendly_name}`` view of an entity.

    ``target`` keeps the original reference for renderers; it is excluded
    from serialization, equality and hashing, so descriptors (and events
    built from them) are hashable even though entity models are mutable.
    """

    model_config = ConfigDict(frozen=True)

    type: EntityType
    primary_key: int | None = None
    friendly_name: str = Field(
        default="",
        description="Best-effort display label; empty for entities without a name",
    )
    target: Any = Field(default=None, exclude=True, repr=False)

    def _identity(self) -> tuple[EntityType, int | None, str]:
        return (self.type, self.primary_key, self.friendly_name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypeDescriptor):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash(self._identity())


SYSTEM_NAME = "System"


def _primary_id(ref: Any) -> int:
    return ref.id


def _no_name(_ref: Any) -> str:
    return ""


def _repository_name(repo: Repository) -> str:
    return repo.full_name


@dataclass(frozen=True, slots=True)
class _Describer:
    type: EntityType
    name: Callable[[Any], str]
    key: Callable[[Any], int] = _primary_id

    def describe(self, ref: Any) -> TypeDescriptor:
        return TypeDescriptor(
            type=self.type,
            primary_key=self.key(ref),
            friendly_name=self.name(ref),
            target=ref,
        )


_TARGETS: dict[type, _Describer] = {
    User: _Describer(EntityType.USER, attrgetter("name")),
    Organization: _Describer(EntityType.ORGANIZATION, attrgetter("name")),
    EmailAddress: _Describer(EntityType.EMAIL_ADDRESS, attrgetter("email")),
    Repository: _Describer(EntityType.REPOSITORY, _repository_name),
    Team: _Describer(EntityType.TEAM, attrgetter("name")),
    TwoFactor: _Describer(EntityType.TWO_FACTOR, _no_name),
    WebAuthnCredential: _Describer(EntityType.WEBAUTHN_CREDENTIAL, attrgetter("name")),
    UserOpenID: _Describer(EntityType.OPENID, attrgetter("uri")),
    AccessToken: _Describer(EntityType.ACCESS_TOKEN, attrgetter("name")),
    OAuth2Application: _Describer(EntityType.OAUTH2_APPLICATION, attrgetter("name")),
    OAuth2Grant: _Describer(EntityType.OAUTH2_GRANT, _no_name),
    AuthenticationSource: _Describer(EntityType.AUTHENTICATION_SOURCE, attrgetter("name")),
    ExternalLoginUser: _Describer(
        EntityType.EXTERNAL_LOGIN,
        attrgetter("external_id"),
        key=attrgetter("login_source_id"),
    ),
    PublicKey: _Describer(EntityType.PUBLIC_KEY, attrgetter("fingerprint")),
    GPGKey: _Describer(EntityType.GPG_KEY, attrgetter("key_id")),
    Secret: _Describer(EntityType.SECRET, attrgetter("name")),
    Webhook: _Describer(EntityType.WEBHOOK, attrgetter("url")),
    ProtectedTag: _Describer(EntityType.PROTECTED_TAG, attrgetter("name_pattern")),
    ProtectedBranch: _Describer(EntityType.PROTECTED_BRANCH, attrgetter("rule_name")),
    PushMirror: _Describer(EntityType.PUSH_MIRROR, _no_name),
    RepoTransfer: _Describer(EntityType.REPO_TRANSFER, _no_name),
}

# Only owners of other entities may act as a scope.
_SCOPES: frozenset[type] = frozenset({User, Organization, Repository})


def supported_target_types() -> frozenset[type]:
    """Return the entity classes accepted by :func:`describe_target`."""
    return frozenset(_TARGETS)


def supported_scope_types() -> frozenset[type]:
    """Return the entity classes accepted by :func:`describe_scope` (besides ``None``)."""
    return _SCOPES


def system_descriptor() -> TypeDescriptor:
    """Descriptor used when an action has no owning entity."""
    return TypeDescriptor(type=EntityType.SYSTEM, primary_key=0, friendly_name=SYSTEM_NAME)


def describe_scope(ref: Any) -> TypeDescriptor:
    """Describe the owning context of an audited change.

    ``None`` is the System scope.  Only users, organizations and
    repositories are valid scopes; anything else raises
    :class:`UnsupportedEntityError`.
    """
    if ref is None:
        return system_descriptor()
    if type(ref) not in _SCOPES:
        raise UnsupportedEntityError("scope", ref)
    return _TARGETS[type(ref)].describe(ref)


def describe_target(ref: Any) -> TypeDescriptor:
    """Describe the doer or target entity of an audited change.

    Raises:
        UnsupportedEntityError: if *ref* is ``None`` or not a supported entity.
    """
    describer = _TARGETS.get(type(ref))
    if describer is None:
        raise UnsupportedEntityError("target", ref)
    return describer.describe(ref)
