"""Observability – RequestContext, CorrelationContext."""
from __future__ import annotations

import dataclasses
from contextvars import ContextVar, Token
from uuid import uuid4


@dataclasses.dataclass(frozen=True)
class RequestContext:
    """Ambient context for one HTTP request or one consumed delivery."""
    correlation_id: str
    trace_id: str | None = None
    user_id: str | None = None

    @classmethod
    def new(cls) -> "RequestContext":
        return cls(correlation_id=str(uuid4()))


_CTX_VAR: ContextVar[RequestContext | None] = ContextVar("_radioking_request_ctx", default=None)


class CorrelationContext:
    """Ambient correlation context stored in a ``ContextVar``."""

    @staticmethod
    def set(ctx: RequestContext) -> Token[RequestContext | None]:
        return _CTX_VAR.set(ctx)

    @staticmethod
    def reset(token: Token[RequestContext | None]) -> None:
        _CTX_VAR.reset(token)

    @staticmethod
    def get() -> RequestContext | None:
        return _CTX_VAR.get()

    @staticmethod
    def correlation_id() -> str | None:
        ctx = _CTX_VAR.get()
        return ctx.correlation_id if ctx is not None else None

    @staticmethod
    def clear() -> None:
        _CTX_VAR.set(None)

    @staticmethod
    def from_headers(headers: dict[str, str]) -> RequestContext:
        """Build a context from HTTP headers (names matched case-insensitively).

        Correlation id priority: ``X-Correlation-ID`` → ``X-Request-ID`` →
        trace id of a W3C ``traceparent`` (``ver-trace_id-parent_id-flags``) →
        generated UUID.
        """
        norm: dict[str, str] = {k.lower(): v.strip() for k, v in headers.items()}

        trace_id: str | None = None
        traceparent = norm.get("traceparent")
        if traceparent:
            parts = traceparent.split("-")
            if len(parts) >= 2 and parts[1]:
                trace_id = parts[1]

        correlation_id = (
            norm.get("x-correlation-id")
            or norm.get("x-request-id")
            or trace_id
            or str(uuid4())
        )
        return RequestContext(correlation_id=correlation_id, trace_id=trace_id)


__all__ = ["CorrelationContext", "RequestContext"]
