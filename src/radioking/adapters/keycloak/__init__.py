"""Keycloak adapter – JWKS lookup and OIDC bearer-token verification."""
from radioking.adapters.keycloak.jwks import JWKSClient, realm_jwks_uri
from radioking.adapters.keycloak.verifier import OIDCTokenVerifier

__all__ = ["JWKSClient", "OIDCTokenVerifier", "realm_jwks_uri"]
