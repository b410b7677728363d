# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Starlette middleware that attaches an audit context to every request."""

from __future__ import annotations

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from forgeaudit.audit.context import AuditContext, context_from_request

_STATE_KEY = "audit_context"


class AuditContextMiddleware(BaseHTTPMiddleware):
    """Stores an :class:`AuditContext` on ``request.state.audit_context``.

    Handlers pass that context to ``record()`` / ``build_event()`` so events
    carry the client address without any global request state.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        setattr(request.state, _STATE_KEY, context_from_request(request))
        return await call_next(request)


def get_audit_context(request: Request) -> AuditContext:
    """Return the request's audit context, building it if the middleware is absent."""
    ctx = getattr(request.state, _STATE_KEY, None)
    if isinstance(ctx, AuditContext):
        return ctx
    return context_from_request(request)
