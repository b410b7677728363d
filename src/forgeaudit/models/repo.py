# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Repository models."""

from __future__ import annotations

from pydantic import BaseModel


class Repository(BaseModel):
    """A repository owned by a user or an organization."""

    id: int
    owner_id: int = 0
    owner_name: str
    name: str
    is_private: bool = False
    is_archived: bool = False

    @property
    def full_name(self) -> str:
        """Return ``owner/name``."""
        return f"{self.owner_name}/{self.name}"


class PushMirror(BaseModel):
    id: int
    repo_id: int = 0
    remote_name: str = ""


class RepoTransfer(BaseModel):
    """A pending ownership transfer of a repository."""

    id: int
    doer_id: int = 0
    recipient_id: int = 0
    repo_id: int = 0
