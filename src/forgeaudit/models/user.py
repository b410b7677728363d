# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Account models: users, organizations, and per-user identities."""

from __future__ import annotations

from pydantic import BaseModel


class User(BaseModel):
    """An individual account."""

    id: int
    name: str
    full_name: str = ""
    email: str = ""
    is_admin: bool = False
    is_active: bool = True


class Organization(BaseModel):
    """An organization account owning teams and repositories."""

    id: int
    name: str
    full_name: str = ""
    visibility: str = "public"


class EmailAddress(BaseModel):
    """A secondary or primary email address attached to a user."""

    id: int
    uid: int = 0
    email: str
    is_activated: bool = False
    is_primary: bool = False


class UserOpenID(BaseModel):
    """An OpenID URI linked to a user."""

    id: int
    uid: int = 0
    uri: str
    show: bool = False


class ExternalLoginUser(BaseModel):
    """A link between a local user and an account at an external login source."""

    external_id: str
    user_id: int = 0
    login_source_id: int
    provider: str = ""
