"""Kernel security – SecurityContext."""

from __future__ import annotations

import contextvars

from radioking.kernel.errors import UnauthorizedError
from radioking.kernel.security.principal import Principal

_PRINCIPAL: contextvars.ContextVar[Principal | None] = contextvars.ContextVar(
    "_radioking_principal", default=None
)


class SecurityContext:
    """The principal of the request being served.

    Set by the bearer-auth middleware and cleared once the response is sent;
    every asyncio task sees its own value.
    """

    @staticmethod
    def get_current() -> Principal | None:
        return _PRINCIPAL.get()

    @staticmethod
    def set_current(principal: Principal) -> contextvars.Token[Principal | None]:
        return _PRINCIPAL.set(principal)

    @staticmethod
    def clear() -> None:
        _PRINCIPAL.set(None)

    @staticmethod
    def require() -> Principal:
        """Raises :class:`UnauthorizedError` outside an authenticated request."""
        principal = _PRINCIPAL.get()
        if principal is None:
            raise UnauthorizedError("no authenticated principal")
        return principal


__all__ = ["SecurityContext"]
