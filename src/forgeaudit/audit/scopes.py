# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Helpers for resources owned by either an account or a repository.

Secrets, webhooks and OAuth2 applications can belong to a user, an
organization, or a repository.  Services that manage them pick the audit
action and scope with these helpers instead of branching at every call site.
"""

from __future__ import annotations

from forgeaudit.audit.actions import Action
from forgeaudit.models import Organization, Repository, User


def owner_scope(
    owner: User | Organization | None, repo: Repository | None
) -> User | Organization | Repository | None:
    """Return the owning account if set, otherwise the repository."""
    if owner is not None:
        return owner
    return repo


def owned_action(
    owner: User | Organization | None,
    repo: Repository | None,
    *,
    user_action: Action,
    org_action: Action,
    repo_action: Action,
) -> Action:
    """Pick the user-, organization- or repository-level variant of an action."""
    if owner is None:
        return repo_action
    if isinstance(owner, Organization):
        return org_action
    return user_action
