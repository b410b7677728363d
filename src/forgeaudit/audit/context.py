# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Explicit call context handed to the event builder.

The context optionally carries metadata about the inbound request that
triggered the audited operation.  Background jobs pass a context without
request metadata (or ``None``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from starlette.requests import Request


class RequestMetadata(BaseModel):
    """What the audit subsystem needs to know about an inbound request."""

    model_config = ConfigDict(frozen=True)

    remote_addr: str = ""  # "host:port", IPv6 hosts in brackets
    method: str = ""
    path: str = ""


class AuditContext(BaseModel):
    model_config = ConfigDict(frozen=True)

    request: RequestMetadata | None = None

    @classmethod
    def background(cls) -> AuditContext:
        """Context for work not triggered by a request (jobs, CLI, migrations)."""
        return cls()

    @property
    def ip_address(self) -> str:
        """Origin IP of the request without port, or ``""``."""
        if self.request is None:
            return ""
        return ip_from_remote_addr(self.request.remote_addr)


def ip_from_remote_addr(remote_addr: str) -> str:
    """Strip the port from a ``host:port`` address.

    Malformed input (missing port, unbracketed IPv6, unbalanced brackets)
    yields ``""`` rather than an error.
    """
    if not remote_addr:
        return ""
    host, sep, _port = remote_addr.rpartition(":")
    if not sep:
        return ""
    if host.startswith("["):
        if not host.endswith("]"):
            return ""
        host = host[1:-1]
        if "[" in host or "]" in host:
            return ""
        return host
    if ":" in host or "[" in host or "]" in host:
        return ""
    return host


def format_remote_addr(host: str, port: int | None) -> str:
    """Inverse of :func:`ip_from_remote_addr`: join a host and port."""
    if not host:
        return ""
    if ":" in host:
        host = f"[{host}]"
    return f"{host}:{port if port is not None else 0}"


def context_from_request(request: Request) -> AuditContext:
    """Build an :class:`AuditContext` from a Starlette request."""
    client = request.client
    remote_addr = format_remote_addr(client.host, client.port) if client else ""
    return AuditContext(
        request=RequestMetadata(
            remote_addr=remote_addr,
            method=request.method,
            path=request.url.path,
        )
    )
