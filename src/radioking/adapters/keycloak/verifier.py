"""Keycloak adapter – OIDCTokenVerifier using PyJWT."""
from __future__ import annotations

from typing import Any, Protocol

import jwt

from radioking.kernel.errors import UnauthorizedError
from radioking.kernel.security import Principal


class SigningKeyProvider(Protocol):
    async def get_signing_key(self, token: str) -> Any: ...


class OIDCTokenVerifier:
    """Verify a Bearer JWT and extract a :class:`Principal`.

    Parameters
    ----------
    jwks_client:
        A :class:`~radioking.adapters.keycloak.JWKSClient` or any object
        with an async ``get_signing_key(token)``.
    audience:
        Expected ``aud`` claim. Empty means the audience is not checked.
    algorithms:
        Allowed signature algorithms. Defaults to ``["RS256"]``.
    """

    def __init__(
        self,
        jwks_client: SigningKeyProvider,
        audience: str = "",
        algorithms: list[str] | None = None,
    ) -> None:
        self._jwks = jwks_client
        self._audience = audience
        self._algorithms = algorithms or ["RS256"]

    async def verify(self, token: str) -> Principal:
        """Raises :class:`UnauthorizedError` on any verification failure."""
        options = {"verify_aud": bool(self._audience)}
        try:
            signing_key = await self._jwks.get_signing_key(token)
            claims: dict[str, Any] = jwt.decode(
                token,
                signing_key.key,
                algorithms=self._algorithms,
                audience=self._audience or None,
                options=options,
            )
        except jwt.InvalidTokenError as exc:
            raise UnauthorizedError(f"Invalid token: {exc}") from exc
        except Exception as exc:  # JWKS fetch failures
            raise UnauthorizedError(f"Token verification failed: {exc}") from exc

        return Principal(
            subject=claims.get("sub", ""),
            username=claims.get("preferred_username"),
            email=claims.get("email"),
            roles=frozenset(self._realm_roles(claims)),
            claims=dict(claims),
        )

    @staticmethod
    def _realm_roles(claims: dict[str, Any]) -> list[str]:
        realm_access = claims.get("realm_access")
        if not isinstance(realm_access, dict):
            return []
        roles = realm_access.get("roles")
        if not isinstance(roles, list):
            return []
        return [r for r in roles if isinstance(r, str)]


__all__ = ["OIDCTokenVerifier"]
