"""Security utilities - password hashing, credentials, and the request principal."""

from src.fieldops.core.security.crypto import (
    DUMMY_PASSWORD_HASH,
    TokenType,
    create_access_token,
    create_refresh_token,
    decode_token,
    hash_password,
    verify_password,
)
from src.fieldops.core.security.principal import Principal, principal_from_claims

__all__ = [
    # Crypto
    "DUMMY_PASSWORD_HASH",
    "TokenType",
    "create_access_token",
    "create_refresh_token",
    "decode_token",
    "hash_password",
    "verify_password",
    # Principal
    "Principal",
    "principal_from_claims",
]
