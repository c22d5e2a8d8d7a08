"""Tests for password hashing, credentials and principal resolution."""

from datetime import timedelta
from uuid import uuid4

import pytest
from jose import jwt

from src.fieldops.api.dependencies import resolve_access_token
from src.fieldops.core.config import get_settings
from src.fieldops.core.exceptions import Unauthenticated
from src.fieldops.core.security import (
    TokenType,
    create_access_token,
    create_refresh_token,
    decode_token,
    hash_password,
    principal_from_claims,
    verify_password,
)
from src.fieldops.models import UserRole

pytestmark = pytest.mark.unit


class TestPasswords:
    def test_hash_verifies(self):
        hashed = hash_password("correct horse")
        assert hashed != "correct horse"
        assert verify_password("correct horse", hashed)
        assert not verify_password("wrong horse", hashed)

    def test_garbage_hash_does_not_raise(self):
        assert not verify_password("anything", "not-an-argon2-hash")


class TestTokens:
    def test_access_token_round_trip(self):
        user_id, tenant_id = uuid4(), uuid4()
        token = create_access_token(user_id, tenant_id, "admin", "a@example.com")

        principal = principal_from_claims(decode_token(token), TokenType.ACCESS)

        assert principal is not None
        assert principal.user_id == user_id
        assert principal.tenant_id == tenant_id
        assert principal.role is UserRole.ADMIN
        assert principal.is_admin and not principal.is_worker

    def test_token_types_are_not_interchangeable(self):
        user_id, tenant_id = uuid4(), uuid4()
        access = decode_token(create_access_token(user_id, tenant_id, "worker", "w@example.com"))
        refresh = decode_token(create_refresh_token(user_id, tenant_id, "worker", "w@example.com"))

        assert principal_from_claims(access, TokenType.REFRESH) is None
        assert principal_from_claims(refresh, TokenType.ACCESS) is None
        assert principal_from_claims(refresh, TokenType.REFRESH) is not None

    def test_refresh_tokens_are_unique(self):
        user_id, tenant_id = uuid4(), uuid4()
        first = create_refresh_token(user_id, tenant_id, "worker", "w@example.com")
        second = create_refresh_token(user_id, tenant_id, "worker", "w@example.com")
        assert first != second

    def test_expired_token(self):
        token = create_access_token(
            uuid4(), uuid4(), "admin", "a@example.com", expires_delta=timedelta(seconds=-1)
        )
        assert decode_token(token) is None

    def test_tampered_signature(self):
        token = create_access_token(uuid4(), uuid4(), "admin", "a@example.com")
        header, payload, signature = token.split(".")
        tampered = f"{header}.{payload}.{signature[::-1]}"
        assert decode_token(tampered) is None

    def test_foreign_secret(self):
        token = jwt.encode(
            {"sub": str(uuid4()), "type": "access"},
            "some-other-secret-that-is-long-enough-to-use",
            algorithm=get_settings().jwt_algorithm,
        )
        assert decode_token(token) is None


class TestPrincipalFromClaims:
    @pytest.mark.parametrize(
        "claims",
        [
            {"type": "access"},
            {"type": "access", "sub": "not-a-uuid", "tenant_id": str(uuid4()), "role": "admin"},
            {"type": "access", "sub": str(uuid4()), "tenant_id": str(uuid4()), "role": "root"},
            {"type": "access", "sub": str(uuid4()), "role": "admin"},
        ],
    )
    def test_malformed_claims(self, claims):
        assert principal_from_claims(claims, TokenType.ACCESS) is None

    def test_missing_email_defaults_to_empty(self):
        claims = {"type": "access", "sub": str(uuid4()), "tenant_id": str(uuid4()), "role": "worker"}
        principal = principal_from_claims(claims, TokenType.ACCESS)
        assert principal is not None
        assert principal.email == ""


class TestResolveAccessToken:
    def test_missing(self):
        with pytest.raises(Unauthenticated, match="Authentication required"):
            resolve_access_token(None)

    def test_undecodable(self):
        with pytest.raises(Unauthenticated, match="Invalid or expired token"):
            resolve_access_token("abc.def.ghi")

    def test_refresh_token_rejected(self):
        token = create_refresh_token(uuid4(), uuid4(), "admin", "a@example.com")
        with pytest.raises(Unauthenticated, match="Invalid token"):
            resolve_access_token(token)

    def test_customer_role_resolves(self):
        """The role gate is separate; resolution only checks the credential."""
        token = create_access_token(uuid4(), uuid4(), "customer", "c@example.com")
        assert resolve_access_token(token).role is UserRole.CUSTOMER
