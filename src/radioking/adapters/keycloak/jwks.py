"""Keycloak adapter – JWKSClient backed by PyJWT."""
from __future__ import annotations

import asyncio
from typing import Any

import jwt


def realm_jwks_uri(keycloak_url: str, realm: str) -> str:
    """JWKS endpoint of *realm* on the Keycloak server at *keycloak_url*."""
    return f"{keycloak_url.rstrip('/')}/realms/{realm}/protocol/openid-connect/certs"


class JWKSClient:
    """Fetches and caches a realm's JWKS through :class:`jwt.PyJWKClient`.

    Parameters
    ----------
    jwks_uri:
        Full URL of the JWKS endpoint, see :func:`realm_jwks_uri`.
    cache_ttl:
        Seconds the key set stays cached. Defaults to 300 s.
    """

    def __init__(self, jwks_uri: str, cache_ttl: float = 300.0) -> None:
        self._jwks_uri = jwks_uri
        self._cache_ttl = cache_ttl
        self._client: jwt.PyJWKClient | None = None

    @property
    def jwks_uri(self) -> str:
        return self._jwks_uri

    def _get_client(self) -> jwt.PyJWKClient:
        if self._client is None:
            self._client = jwt.PyJWKClient(self._jwks_uri, lifespan=int(self._cache_ttl))
        return self._client

    async def get_signing_key(self, token: str) -> Any:
        """Return the :class:`jwt.PyJWK` that signed *token*.

        ``PyJWKClient`` fetches over blocking HTTP on a cache miss, so the
        lookup runs in a worker thread.
        """
        client = self._get_client()
        return await asyncio.to_thread(client.get_signing_key_from_jwt, token)

    def invalidate(self) -> None:
        """Force a fresh JWKS fetch on the next lookup."""
        self._client = None


__all__ = ["JWKSClient", "realm_jwks_uri"]
