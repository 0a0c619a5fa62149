"""Application-layer errors – use-case failures and access control."""

from __future__ import annotations

from radioking.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class InternalError(ApplicationError):
    """Unexpected failure of a collaborator (store, broker).

    The wrapped ``cause`` is logged; API callers only see a generic message.
    """

    default_code = "internal_error"


class UnauthorizedError(ApplicationError):
    """Missing or invalid credentials."""

    default_code = "unauthorized"


__all__ = [
    "ApplicationError",
    "InternalError",
    "UnauthorizedError",
]
