# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20261018v1
# ---------------------------------------------------------------------------
"""
Central security module.  All cryptographic primitives and the bearer-token
dependency live here.  No other module should touch raw crypto directly.

Responsibilities
----------------
1. Password hashing / verification          (passlib pbkdf2_sha256)
2. Token issuance / validation              (PyJWT, HMAC family only)
3. FastAPI dependency                       (get_current_claims)
4. Client IP extraction for request logging
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt as _jwt        # PyJWT
from fastapi import Depends, Request
from fastapi.security import OAuth2PasswordBearer
from passlib.hash import pbkdf2_sha256 as _pbkdf2  # pure Python, no binary deps
from pydantic import BaseModel, ValidationError

from core.config import settings
from core.errors import InvalidToken, Unauthenticated
from core.logger import logger

# ---------------------------------------------------------------------------
# 1.  pbkdf2_sha256 – password hashing
# ---------------------------------------------------------------------------
# The salt is generated per hash and embedded in the passlib hash string.
# Work factor comes from settings (600 000 rounds by default).
# ---------------------------------------------------------------------------


def hash_password(plain: str) -> str:
    """Hash a plaintext password.  Returns the full ``$pbkdf2-sha256$...`` string."""
    return _pbkdf2.using(rounds=settings.password_hash_rounds).hash(plain)


def verify_password(plain: str, stored_hash: str) -> bool:
    """
    Constant-time verification of a plaintext password against a hash
    produced by :func:`hash_password`.
    """
    return _pbkdf2.verify(plain, stored_hash)


# ---------------------------------------------------------------------------
# 2.  JWT – access tokens
# ---------------------------------------------------------------------------

_SIGNING_ALGORITHM = "HS256"

# Anything outside the HMAC family (RS*, ES*, "none" …) is rejected on decode,
# which closes the algorithm-substitution hole.
_ACCEPTED_ALGORITHMS = ["HS256", "HS384", "HS512"]

_REQUIRED_CLAIMS = ["exp", "iat", "nbf", "iss", "sub"]


class TokenClaims(BaseModel):
    """Decoded claim set of a validated bearer token."""

    user_id: int
    email: str
    role: str
    iat: int
    nbf: int
    exp: int
    iss: str
    sub: str


def issue_token(account, expires_delta: Optional[timedelta] = None) -> str:
    """
    Sign a token for *account* (a ``User`` row).

    Nothing is persisted: the token is self-contained and only becomes
    invalid when it expires.
    """
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(hours=settings.jwt_expiration_hours))
    claims = {
        "user_id": account.id,
        "email": account.email,
        "role": account.role,
        "iat": int(now.timestamp()),
        "nbf": int(now.timestamp()),
        "exp": int(expire.timestamp()),
        "iss": settings.jwt_issuer,
        "sub": str(account.id),
    }
    return _jwt.encode(claims, settings.jwt_secret, algorithm=_SIGNING_ALGORITHM)


def validate_token(token: str) -> TokenClaims:
    """
    Verify signature, algorithm family, issuer and the temporal window.
    Raises :class:`InvalidToken` on any failure (expired, not yet valid,
    bad signature, foreign algorithm, malformed).
    """
    try:
        payload = _jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=_ACCEPTED_ALGORITHMS,
            issuer=settings.jwt_issuer,
            options={"require": _REQUIRED_CLAIMS},
        )
    except _jwt.InvalidTokenError as exc:
        logger.info("Bearer token rejected: %s", exc)
        raise InvalidToken() from exc

    try:
        return TokenClaims(**payload)
    except ValidationError as exc:
        # Correctly signed but missing our own claims
        logger.warning("Bearer token with incomplete claim set: sub=%s", payload.get("sub"))
        raise InvalidToken() from exc


# ---------------------------------------------------------------------------
# 3.  FastAPI dependency
# ---------------------------------------------------------------------------

# auto_error=False so a missing header surfaces as our own Unauthenticated.
# The tokenUrl is only used by the generated OpenAPI docs.
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login", auto_error=False)


def get_current_claims(token: Optional[str] = Depends(oauth2_scheme)) -> TokenClaims:
    """
    Dependency: read ``Authorization: Bearer <token>`` and validate it.

    The claim set is handed to the handler as an argument; handlers pass it
    on explicitly to the ownership guard.
    """
    if not token:
        raise Unauthenticated("authorization header required")
    return validate_token(token)


# -- IP Address extraction ----------------------------------------------------


def get_client_ip(request: Request) -> str:
    """Caller address for the request log: proxy headers first, then the socket peer."""
    for header in ("X-Forwarded-For", "X-Real-IP"):
        value = request.headers.get(header, "")
        # First hop in a forwarded chain is the originating client
        first = value.split(",")[0].strip()
        if first:
            return first
    return request.client.host if request.client else "-"
