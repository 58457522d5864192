"""Audit logging middleware — logs every state-changing request."""


import logging
import time
from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("aviary.audit")

# Methods that mutate state
_WRITE_METHODS = {"POST", "PUT", "PATCH", "DELETE"}


def _session_actor(request: Request) -> str | None:
    session = request.scope.get("session") or {}
    return (session.get("admin") or {}).get("username")


class AuditMiddleware(BaseHTTPMiddleware):
    """Logs all write operations with the acting admin, if any.

    Must sit inside SessionMiddleware so the session is already decoded.
    The actor is taken before the request runs (logout clears it) and, for
    anonymous requests, after it (login sets it).
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        actor = _session_actor(request)
        start = time.monotonic()
        response = await call_next(request)
        duration_ms = round((time.monotonic() - start) * 1000)

        if request.method in _WRITE_METHODS:
            actor = actor or _session_actor(request) or "anonymous"
            logger.info(
                "%s %s -> %s (%dms) by %s",
                request.method, request.url.path, response.status_code, duration_ms, actor,
            )

        return response
