"""Tests for JWKSClient + OIDCTokenVerifier."""
from __future__ import annotations

import asyncio
import time
from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from radioking.adapters.keycloak import JWKSClient, OIDCTokenVerifier, realm_jwks_uri
from radioking.kernel.errors import UnauthorizedError

# ---------------------------------------------------------------------------
# Helpers – RSA key pair + JWT factories
# ---------------------------------------------------------------------------


def _make_rsa_key_pair():
    """Return (private_key, public_key) using `cryptography`."""
    from cryptography.hazmat.primitives.asymmetric import rsa

    private_key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    return private_key, private_key.public_key()


_PRIVATE_KEY, _PUBLIC_KEY = _make_rsa_key_pair()


def _make_token(
    private_key: Any = _PRIVATE_KEY,
    *,
    sub: str = "user-1",
    aud: str | None = "radioking-api",
    roles: list[str] | None = None,
    username: str | None = "dj-alice",
    email: str | None = "alice@example.com",
    exp_offset: int = 3600,
) -> str:
    import jwt

    claims: dict[str, Any] = {
        "sub": sub,
        "iat": int(time.time()),
        "exp": int(time.time()) + exp_offset,
    }
    if aud is not None:
        claims["aud"] = aud
    if username is not None:
        claims["preferred_username"] = username
    if email is not None:
        claims["email"] = email
    if roles:
        claims["realm_access"] = {"roles": roles}

    return jwt.encode(claims, private_key, algorithm="RS256")


def _mock_jwks_client(public_key: Any = _PUBLIC_KEY) -> Any:
    """Return a JWKSClient mock whose get_signing_key returns `public_key`."""
    mock = MagicMock(spec=JWKSClient)
    signing_key = MagicMock()
    signing_key.key = public_key
    mock.get_signing_key = AsyncMock(return_value=signing_key)
    return mock


# ---------------------------------------------------------------------------
# realm_jwks_uri / JWKSClient
# ---------------------------------------------------------------------------


class TestRealmJwksUri:
    def test_builds_certs_url(self) -> None:
        uri = realm_jwks_uri("http://localhost:8180", "radioking")
        assert uri == "http://localhost:8180/realms/radioking/protocol/openid-connect/certs"

    def test_trailing_slash_ignored(self) -> None:
        uri = realm_jwks_uri("https://sso.example.com/", "radio")
        assert uri == "https://sso.example.com/realms/radio/protocol/openid-connect/certs"


class TestJWKSClient:
    def test_instantiation_is_lazy(self) -> None:
        client = JWKSClient("https://example.com/certs")
        assert client.jwks_uri == "https://example.com/certs"
        assert client._client is None

    def test_invalidate_clears_internal_client(self) -> None:
        client = JWKSClient("https://example.com/certs")
        client._client = MagicMock()
        client.invalidate()
        assert client._client is None

    def test_get_signing_key_delegates_to_pyjwk_client(self) -> None:
        client = JWKSClient("https://example.com/certs", cache_ttl=60)
        fake = MagicMock()
        fake.get_signing_key_from_jwt.return_value = "the-key"
        with patch("radioking.adapters.keycloak.jwks.jwt.PyJWKClient", return_value=fake) as ctor:
            result = asyncio.run(client.get_signing_key("tok"))
        assert result == "the-key"
        fake.get_signing_key_from_jwt.assert_called_once_with("tok")
        ctor.assert_called_once_with("https://example.com/certs", lifespan=60)


# ---------------------------------------------------------------------------
# OIDCTokenVerifier
# ---------------------------------------------------------------------------


class TestOIDCTokenVerifier:
    def test_valid_token_yields_principal(self) -> None:
        verifier = OIDCTokenVerifier(_mock_jwks_client(), audience="radioking-api")
        principal = asyncio.run(verifier.verify(_make_token(roles=["dj", "admin"])))
        assert principal.subject == "user-1"
        assert principal.username == "dj-alice"
        assert principal.email == "alice@example.com"
        assert principal.roles == frozenset({"dj", "admin"})
        assert principal.has_role("dj")
        assert principal.claims["aud"] == "radioking-api"

    def test_audience_not_checked_when_empty(self) -> None:
        verifier = OIDCTokenVerifier(_mock_jwks_client())
        principal = asyncio.run(verifier.verify(_make_token(aud="some-other-client")))
        assert principal.subject == "user-1"

    def test_token_without_optional_claims(self) -> None:
        verifier = OIDCTokenVerifier(_mock_jwks_client())
        principal = asyncio.run(verifier.verify(_make_token(aud=None, username=None, email=None)))
        assert principal.username is None
        assert principal.email is None
        assert principal.roles == frozenset()

    def test_wrong_audience_rejected(self) -> None:
        verifier = OIDCTokenVerifier(_mock_jwks_client(), audience="radioking-api")
        with pytest.raises(UnauthorizedError, match="Invalid token"):
            asyncio.run(verifier.verify(_make_token(aud="someone-else")))

    def test_expired_token_rejected(self) -> None:
        verifier = OIDCTokenVerifier(_mock_jwks_client())
        with pytest.raises(UnauthorizedError, match="Invalid token"):
            asyncio.run(verifier.verify(_make_token(exp_offset=-60)))

    def test_token_signed_by_other_key_rejected(self) -> None:
        other_private, _ = _make_rsa_key_pair()
        verifier = OIDCTokenVerifier(_mock_jwks_client())
        with pytest.raises(UnauthorizedError, match="Invalid token"):
            asyncio.run(verifier.verify(_make_token(other_private)))

    def test_garbage_token_rejected(self) -> None:
        verifier = OIDCTokenVerifier(_mock_jwks_client())
        with pytest.raises(UnauthorizedError):
            asyncio.run(verifier.verify("not-a-jwt"))

    def test_jwks_failure_is_unauthorized(self) -> None:
        jwks = _mock_jwks_client()
        jwks.get_signing_key = AsyncMock(side_effect=ConnectionError("keycloak down"))
        verifier = OIDCTokenVerifier(jwks)
        with pytest.raises(UnauthorizedError, match="Token verification failed: keycloak down"):
            asyncio.run(verifier.verify(_make_token()))

    def test_malformed_realm_access_yields_no_roles(self) -> None:
        import jwt

        token = jwt.encode(
            {"sub": "u", "exp": int(time.time()) + 60, "realm_access": {"roles": "admin"}},
            _PRIVATE_KEY,
            algorithm="RS256",
        )
        principal = asyncio.run(OIDCTokenVerifier(_mock_jwks_client()).verify(token))
        assert principal.roles == frozenset()
