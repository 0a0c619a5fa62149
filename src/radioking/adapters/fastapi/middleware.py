"""FastAPI adapter – ASGI middleware implementations.

FastAPICorrelationIdMiddleware
FastAPISecurityMiddleware
"""
from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any, Awaitable, Callable

import structlog

from radioking.kernel.errors import UnauthorizedError
from radioking.kernel.security import Principal, SecurityContext
from radioking.observability.correlation import CorrelationContext

if TYPE_CHECKING:
    from starlette.types import ASGIApp, Receive, Scope, Send

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Correlation-ID middleware
# ---------------------------------------------------------------------------

class FastAPICorrelationIdMiddleware:
    """Resolve the request's correlation id and echo it on the response.

    Resolution order: ``X-Correlation-ID``, ``X-Request-ID``, then a fresh
    UUID v4. A W3C ``traceparent`` header contributes the trace id.
    """

    def __init__(self, app: "ASGIApp", header_name: str = "X-Correlation-ID") -> None:
        self.app = app
        self._response_header = header_name.lower().encode()

    async def __call__(self, scope: "Scope", receive: "Receive", send: "Send") -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        headers = {k.decode("latin-1"): v.decode("latin-1") for k, v in scope.get("headers", [])}
        ctx = CorrelationContext.from_headers(headers)
        token = CorrelationContext.set(ctx)

        response_header = self._response_header
        encoded_id = ctx.correlation_id.encode()

        async def send_with_header(message: Any) -> None:
            if message["type"] == "http.response.start":
                headers_list: list[tuple[bytes, bytes]] = list(message.get("headers", []))
                headers_list.append((response_header, encoded_id))
                message = {**message, "headers": headers_list}
            await send(message)

        try:
            with structlog.contextvars.bound_contextvars(correlation_id=ctx.correlation_id):
                await self.app(scope, receive, send_with_header)
        finally:
            CorrelationContext.reset(token)


# ---------------------------------------------------------------------------
# Security (Keycloak bearer token) middleware
# ---------------------------------------------------------------------------

class FastAPISecurityMiddleware:
    """Require a verified Bearer JWT and populate :class:`SecurityContext`.

    Parameters
    ----------
    app:
        The inner ASGI application.
    verifier:
        ``async (token: str) -> Principal``, raising
        :class:`UnauthorizedError` on failure. Pass
        ``OIDCTokenVerifier.verify`` here.
    exempt_paths:
        Path prefixes served without authentication (ops probes).
    """

    def __init__(
        self,
        app: "ASGIApp",
        verifier: Callable[[str], Awaitable[Principal]],
        exempt_paths: tuple[str, ...] = ("/health",),
    ) -> None:
        self.app = app
        self._verifier = verifier
        self._exempt_paths = exempt_paths

    async def __call__(self, scope: "Scope", receive: "Receive", send: "Send") -> None:
        if scope["type"] != "http" or self._is_exempt(scope.get("path", "")):
            await self.app(scope, receive, send)
            return

        headers = dict(scope.get("headers", []))
        try:
            token = self._extract_bearer_token(headers.get(b"authorization", b"").decode("latin-1"))
            principal = await self._verifier(token)
        except UnauthorizedError as exc:
            logger.info("auth.rejected path=%s reason=%s", scope.get("path", ""), exc)
            await self._send_unauthorized(send, str(exc))
            return

        SecurityContext.set_current(principal)
        try:
            with structlog.contextvars.bound_contextvars(user_id=principal.subject):
                await self.app(scope, receive, send)
        finally:
            SecurityContext.clear()

    def _is_exempt(self, path: str) -> bool:
        return any(path == p or path.startswith(p.rstrip("/") + "/") for p in self._exempt_paths)

    @staticmethod
    def _extract_bearer_token(auth_value: str) -> str:
        auth_value = auth_value.strip()
        if not auth_value:
            raise UnauthorizedError("missing authorization header")
        scheme, _, token = auth_value.partition(" ")
        if scheme.lower() != "bearer":
            raise UnauthorizedError("invalid authorization header format")
        token = token.strip()
        if not token:
            raise UnauthorizedError("empty bearer token")
        return token

    @staticmethod
    async def _send_unauthorized(send: "Send", message: str) -> None:
        body = json.dumps({"error": message}).encode()
        await send({"type": "http.response.start", "status": 401, "headers": [
            (b"content-type", b"application/json"),
            (b"content-length", str(len(body)).encode()),
            (b"www-authenticate", b"Bearer"),
        ]})
        await send({"type": "http.response.body", "body": body})


__all__ = ["FastAPICorrelationIdMiddleware", "FastAPISecurityMiddleware"]
