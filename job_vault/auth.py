"""
Bearer-token identity.

Tokens are HS256 JWTs issued by the auth provider: ``sub`` is the user id,
``aud`` the configured audience. Only verification lives here; sign-in and
password flows belong to the provider.
"""

from __future__ import annotations

import time

import jwt
from pydantic import BaseModel

from job_vault.errors import unauthenticated

ALGORITHM = "HS256"
DEFAULT_TOKEN_TTL_SECONDS = 3600


class AuthUser(BaseModel):
    id: str
    email: str | None = None


def parse_bearer(authorization: str | None) -> str:
    """Extract the token from an ``Authorization: Bearer <token>`` header value."""
    if not authorization:
        raise unauthenticated("Unauthorized - No token provided")
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise unauthenticated("Unauthorized - Malformed authorization header")
    return token.strip()


def decode_token(token: str, secret: str, audience: str) -> AuthUser:
    """Verify a token and return the user it identifies."""
    if not secret:
        raise unauthenticated("JWT_SECRET not configured")
    try:
        claims = jwt.decode(token, secret, algorithms=[ALGORITHM], audience=audience)
    except jwt.PyJWTError as e:
        raise unauthenticated(f"Unauthorized - Invalid token: {e}") from e

    user_id = claims.get("sub")
    if not user_id:
        raise unauthenticated("Unauthorized - Token has no subject")
    return AuthUser(id=user_id, email=claims.get("email"))


def issue_token(
    user_id: str,
    secret: str,
    audience: str = "authenticated",
    email: str | None = None,
    ttl_seconds: int = DEFAULT_TOKEN_TTL_SECONDS,
) -> str:
    """Mint a token the way the auth provider does. Used by scripts and tests."""
    now = int(time.time())
    claims = {"sub": user_id, "aud": audience, "iat": now, "exp": now + ttl_seconds}
    if email:
        claims["email"] = email
    return jwt.encode(claims, secret, algorithm=ALGORITHM)
