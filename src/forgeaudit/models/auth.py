# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Credential and authentication models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class TwoFactor(BaseModel):
    """A TOTP enrollment. Has no natural display name."""

    id: int
    uid: int = 0


class WebAuthnCredential(BaseModel):
    id: int
    user_id: int = 0
    name: str = ""


class AccessToken(BaseModel):
    """A personal access token. Only the name is ever exposed."""

    id: int
    uid: int = 0
    name: str
    scope: str = ""


class OAuth2Application(BaseModel):
    id: int
    uid: int = 0
    name: str
    redirect_uris: list[str] = Field(default_factory=list)


class OAuth2Grant(BaseModel):
    """Consent granted by a user to an OAuth2 application."""

    id: int
    user_id: int = 0
    application_id: int = 0


class AuthenticationSource(BaseModel):
    """A configured login source (LDAP, OAuth2 provider, SMTP, ...)."""

    id: int
    name: str
    type: str = ""
    is_active: bool = True
