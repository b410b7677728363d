# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""SSH and GPG key models."""

from __future__ import annotations

from pydantic import BaseModel


class PublicKey(BaseModel):
    """An SSH public key, user key or deploy key."""

    id: int
    owner_id: int = 0
    name: str = ""
    fingerprint: str
    key_type: str = "user"


class GPGKey(BaseModel):
    id: int
    owner_id: int = 0
    key_id: str
    primary_key_id: str = ""
