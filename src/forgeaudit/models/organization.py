# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Organization team model."""

from __future__ import annotations

from pydantic import BaseModel


class Team(BaseModel):
    id: int
    org_id: int = 0
    name: str
    access_mode: str = "read"
