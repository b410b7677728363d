# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Audited action vocabulary.

Values are persisted with every event and compared by equality, so the set
is append-only: never rename or remove a member once released.  Values are
colon-separated namespaces (``subject:object:operation``).
"""

from __future__ import annotations

from enum import StrEnum, unique


def _split(value: str) -> tuple[str, ...]:
    return tuple(value.split(":"))


@unique
class Action(StrEnum):
    """Kinds of audited operations."""

    USER_IMPERSONATION = "user:impersonation"
    USER_CREATE = "user:create"
    USER_UPDATE = "user:update"
    USER_DELETE = "user:delete"
    USER_AUTHENTICATION_FAIL_TWO_FACTOR = "user:authentication:fail:twofactor"
    USER_AUTHENTICATION_SOURCE = "user:authentication:source"
    USER_ACTIVE = "user:active"
    USER_RESTRICTED = "user:restricted"
    USER_ADMIN = "user:admin"
    USER_NAME = "user:name"
    USER_PASSWORD = "user:password"
    USER_PASSWORD_RESET = "user:password:reset"
    USER_VISIBILITY = "user:visibility"
    USER_EMAIL_PRIMARY_CHANGE = "user:email:primary"
    USER_EMAIL_ADD = "user:email:add"
    USER_EMAIL_ACTIVATE = "user:email:activate"
    USER_EMAIL_REMOVE = "user:email:remove"
    USER_TWO_FACTOR_ENABLE = "user:twofactor:enable"
    USER_TWO_FACTOR_REGENERATE = "user:twofactor:regenerate"
    USER_TWO_FACTOR_DISABLE = "user:twofactor:disable"
    USER_WEBAUTH_ADD = "user:webauth:add"
    USER_WEBAUTH_REMOVE = "user:webauth:remove"
    USER_EXTERNAL_LOGIN_ADD = "user:externallogin:add"
    USER_EXTERNAL_LOGIN_REMOVE = "user:externallogin:remove"
    USER_OPENID_ADD = "user:openid:add"
    USER_OPENID_REMOVE = "user:openid:remove"
    USER_ACCESS_TOKEN_ADD = "user:accesstoken:add"
    USER_ACCESS_TOKEN_REMOVE = "user:accesstoken:remove"
    USER_OAUTH2_APPLICATION_ADD = "user:oauth2application:add"
    USER_OAUTH2_APPLICATION_UPDATE = "user:oauth2application:update"
    USER_OAUTH2_APPLICATION_SECRET = "user:oauth2application:secret"
    USER_OAUTH2_APPLICATION_GRANT = "user:oauth2application:grant"
    USER_OAUTH2_APPLICATION_REVOKE = "user:oauth2application:revoke"
    USER_OAUTH2_APPLICATION_REMOVE = "user:oauth2application:remove"
    USER_KEY_SSH_ADD = "user:key:ssh:add"
    USER_KEY_SSH_REMOVE = "user:key:ssh:remove"
    USER_KEY_PRINCIPAL_ADD = "user:key:principal:add"
    USER_KEY_PRINCIPAL_REMOVE = "user:key:principal:remove"
    USER_KEY_GPG_ADD = "user:key:gpg:add"
    USER_KEY_GPG_REMOVE = "user:key:gpg:remove"
    USER_SECRET_ADD = "user:secret:add"
    USER_SECRET_UPDATE = "user:secret:update"
    USER_SECRET_REMOVE = "user:secret:remove"
    USER_WEBHOOK_ADD = "user:webhook:add"
    USER_WEBHOOK_UPDATE = "user:webhook:update"
    USER_WEBHOOK_REMOVE = "user:webhook:remove"

    ORGANIZATION_CREATE = "organization:create"
    ORGANIZATION_UPDATE = "organization:update"
    ORGANIZATION_DELETE = "organization:delete"
    ORGANIZATION_NAME = "organization:name"
    ORGANIZATION_VISIBILITY = "organization:visibility"
    ORGANIZATION_TEAM_ADD = "organization:team:add"
    ORGANIZATION_TEAM_UPDATE = "organization:team:update"
    ORGANIZATION_TEAM_REMOVE = "organization:team:remove"
    ORGANIZATION_TEAM_PERMISSION = "organization:team:permission"
    ORGANIZATION_TEAM_MEMBER_ADD = "organization:team:member:add"
    ORGANIZATION_TEAM_MEMBER_REMOVE = "organization:team:member:remove"
    ORGANIZATION_OAUTH2_APPLICATION_ADD = "organization:oauth2application:add"
    ORGANIZATION_OAUTH2_APPLICATION_UPDATE = "organization:oauth2application:update"
    ORGANIZATION_OAUTH2_APPLICATION_SECRET = "organization:oauth2application:secret"
    ORGANIZATION_OAUTH2_APPLICATION_REMOVE = "organization:oauth2application:remove"
    ORGANIZATION_SECRET_ADD = "organization:secret:add"
    ORGANIZATION_SECRET_UPDATE = "organization:secret:update"
    ORGANIZATION_SECRET_REMOVE = "organization:secret:remove"
    ORGANIZATION_WEBHOOK_ADD = "organization:webhook:add"
    ORGANIZATION_WEBHOOK_UPDATE = "organization:webhook:update"
    ORGANIZATION_WEBHOOK_REMOVE = "organization:webhook:remove"

    REPOSITORY_CREATE = "repository:create"
    REPOSITORY_CREATE_FORK = "repository:create:fork"
    REPOSITORY_UPDATE = "repository:update"
    REPOSITORY_ARCHIVE = "repository:archive"
    REPOSITORY_UNARCHIVE = "repository:unarchive"
    REPOSITORY_DELETE = "repository:delete"
    REPOSITORY_NAME = "repository:name"
    REPOSITORY_VISIBILITY = "repository:visibility"
    REPOSITORY_CONVERT_FORK = "repository:convert:fork"
    REPOSITORY_CONVERT_MIRROR = "repository:convert:mirror"
    REPOSITORY_MIRROR_PUSH_ADD = "repository:mirror:push:add"
    REPOSITORY_MIRROR_PUSH_REMOVE = "repository:mirror:push:remove"
    REPOSITORY_SIGNING_VERIFICATION = "repository:signingverification"
    REPOSITORY_TRANSFER_START = "repository:transfer:start"
    REPOSITORY_TRANSFER_ACCEPT = "repository:transfer:accept"
    REPOSITORY_TRANSFER_REJECT = "repository:transfer:reject"
    REPOSITORY_WIKI_DELETE = "repository:wiki:delete"
    REPOSITORY_COLLABORATOR_ADD = "repository:collaborator:add"
    REPOSITORY_COLLABORATOR_ACCESS = "repository:collaborator:access"
    REPOSITORY_COLLABORATOR_REMOVE = "repository:collaborator:remove"
    REPOSITORY_COLLABORATOR_TEAM_ADD = "repository:collaborator:team:add"
    REPOSITORY_COLLABORATOR_TEAM_REMOVE = "repository:collaborator:team:remove"
    REPOSITORY_BRANCH_DEFAULT = "repository:branch:default"
    REPOSITORY_BRANCH_PROTECTION_ADD = "repository:branch:protection:add"
    REPOSITORY_BRANCH_PROTECTION_UPDATE = "repository:branch:protection:update"
    REPOSITORY_BRANCH_PROTECTION_REMOVE = "repository:branch:protection:remove"
    REPOSITORY_TAG_PROTECTION_ADD = "repository:tag:protection:add"
    REPOSITORY_TAG_PROTECTION_UPDATE = "repository:tag:protection:update"
    REPOSITORY_TAG_PROTECTION_REMOVE = "repository:tag:protection:remove"
    REPOSITORY_WEBHOOK_ADD = "repository:webhook:add"
    REPOSITORY_WEBHOOK_UPDATE = "repository:webhook:update"
    REPOSITORY_WEBHOOK_REMOVE = "repository:webhook:remove"
    REPOSITORY_DEPLOY_KEY_ADD = "repository:deploykey:add"
    REPOSITORY_DEPLOY_KEY_REMOVE = "repository:deploykey:remove"
    REPOSITORY_SECRET_ADD = "repository:secret:add"
    REPOSITORY_SECRET_UPDATE = "repository:secret:update"
    REPOSITORY_SECRET_REMOVE = "repository:secret:remove"

    SYSTEM_WEBHOOK_ADD = "system:webhook:add"
    SYSTEM_WEBHOOK_UPDATE = "system:webhook:update"
    SYSTEM_WEBHOOK_REMOVE = "system:webhook:remove"
    SYSTEM_AUTHENTICATION_SOURCE_ADD = "system:authenticationsource:add"
    SYSTEM_AUTHENTICATION_SOURCE_UPDATE = "system:authenticationsource:update"
    SYSTEM_AUTHENTICATION_SOURCE_REMOVE = "system:authenticationsource:remove"
    SYSTEM_OAUTH2_APPLICATION_ADD = "system:oauth2application:add"
    SYSTEM_OAUTH2_APPLICATION_UPDATE = "system:oauth2application:update"
    SYSTEM_OAUTH2_APPLICATION_SECRET = "system:oauth2application:secret"
    SYSTEM_OAUTH2_APPLICATION_REMOVE = "system:oauth2application:remove"

    @property
    def segments(self) -> tuple[str, ...]:
        """Return the colon-separated parts of the action value."""
        return _split(self.value)

    @property
    def namespace(self) -> str:
        """Return the top-level namespace (``user``, ``repository``, ...)."""
        return self.segments[0]

    def in_namespace(self, prefix: str) -> bool:
        """Return True if the action lives under *prefix*.

        Matching is done on whole segments: ``repository:webhook`` matches
        ``repository:webhook:add`` but ``repo`` matches nothing.
        """
        wanted = _split(prefix.strip(":"))
        return self.segments[: len(wanted)] == wanted


def actions_in_namespace(prefix: str) -> list[Action]:
    """Return all actions under *prefix*, in declaration order."""
    return [action for action in Action if action.in_namespace(prefix)]
