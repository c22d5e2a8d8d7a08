"""Cryptographic utilities - password hashing and JWT credentials."""

from datetime import UTC, datetime, timedelta
from typing import Any
from uuid import UUID, uuid4

import argon2
from jose import JWTError, jwt

from src.fieldops.core.config import get_settings


class TokenType:
    """Token type constants carried in the ``type`` claim."""

    ACCESS = "access"
    REFRESH = "refresh"


def _create_password_hasher() -> argon2.PasswordHasher:
    """Create password hasher with settings from config."""
    settings = get_settings()
    return argon2.PasswordHasher(
        time_cost=settings.argon2_time_cost,
        memory_cost=settings.argon2_memory_cost,
        parallelism=settings.argon2_parallelism,
    )


_password_hasher = _create_password_hasher()

# Verified against when the email is unknown so login timing does not leak accounts
DUMMY_PASSWORD_HASH = _password_hasher.hash("dummy-password-for-timing")


def hash_password(password: str) -> str:
    """Hash password using Argon2id."""
    return _password_hasher.hash(password)


def verify_password(password: str, hashed: str) -> bool:
    """Verify password against hash. Returns False on any error."""
    try:
        _password_hasher.verify(hashed, password)
        return True
    except argon2.exceptions.VerifyMismatchError:
        return False
    except argon2.exceptions.InvalidHashError:
        return False


def _encode(claims: dict[str, Any], expires_delta: timedelta) -> str:
    settings = get_settings()
    to_encode = {**claims, "exp": datetime.now(UTC) + expires_delta}
    return jwt.encode(  # type: ignore[no-any-return]
        to_encode,
        settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
    )


def _principal_claims(
    user_id: str | UUID, tenant_id: str | UUID, role: str, email: str
) -> dict[str, Any]:
    return {
        "sub": str(user_id),
        "tenant_id": str(tenant_id),
        "role": role,
        "email": email,
    }


def create_access_token(
    user_id: str | UUID,
    tenant_id: str | UUID,
    role: str,
    email: str,
    expires_delta: timedelta | None = None,
) -> str:
    """Create a short-lived JWT access credential."""
    settings = get_settings()
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)

    claims = _principal_claims(user_id, tenant_id, role, email)
    claims["type"] = TokenType.ACCESS
    return _encode(claims, expires_delta)


def create_refresh_token(
    user_id: str | UUID,
    tenant_id: str | UUID,
    role: str,
    email: str,
) -> str:
    """Create a long-lived JWT refresh credential.

    Includes a unique JWT ID (jti) so two tokens minted in the same second differ.
    """
    settings = get_settings()
    claims = _principal_claims(user_id, tenant_id, role, email)
    claims["type"] = TokenType.REFRESH
    claims["jti"] = str(uuid4())
    return _encode(claims, timedelta(days=settings.refresh_token_expire_days))


def decode_token(token: str) -> dict[str, Any] | None:
    """Decode and validate JWT token. Returns None on any error."""
    settings = get_settings()
    try:
        return jwt.decode(  # type: ignore[no-any-return]
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
        )
    except JWTError:
        return None
