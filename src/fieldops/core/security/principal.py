"""The authenticated caller as resolved from a verified credential."""

from dataclasses import dataclass
from typing import Any
from uuid import UUID

from src.fieldops.models.enums import UserRole


@dataclass(frozen=True, slots=True)
class Principal:
    """Identity and tenant context attached to every authenticated request."""

    user_id: UUID
    tenant_id: UUID
    role: UserRole
    email: str

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    @property
    def is_worker(self) -> bool:
        return self.role == UserRole.WORKER


def principal_from_claims(claims: dict[str, Any], expected_type: str) -> Principal | None:
    """Build a principal from decoded JWT claims.

    Returns None when the token type does not match or any claim is missing
    or malformed, so callers can map every failure onto one error.
    """
    if claims.get("type") != expected_type:
        return None
    try:
        return Principal(
            user_id=UUID(claims["sub"]),
            tenant_id=UUID(claims["tenant_id"]),
            role=UserRole(claims["role"]),
            email=str(claims.get("email", "")),
        )
    except (KeyError, ValueError, TypeError):
        return None
