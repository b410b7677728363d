# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Repository, organization, and system settings models: protection rules, secrets, webhooks."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ProtectedTag(BaseModel):
    """A tag protection rule matched by glob or regex."""

    id: int
    repo_id: int = 0
    name_pattern: str


class ProtectedBranch(BaseModel):
    """A branch protection rule."""

    id: int
    repo_id: int = 0
    rule_name: str
    enable_push: bool = False
    required_approvals: int = 0


class Secret(BaseModel):
    """An actions secret. The value itself is never part of the model."""

    id: int
    owner_id: int = 0
    repo_id: int = 0
    name: str


class Webhook(BaseModel):
    """A webhook bound to a user, organization, repository, or the whole system."""

    id: int
    owner_id: int = 0
    repo_id: int = 0
    url: str
    events: list[str] = Field(default_factory=list)
    is_active: bool = True
