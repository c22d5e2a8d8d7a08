"""Authentication and authorization dependencies.

The principal is resolved from the access credential alone; the database is
not consulted. A user or tenant that vanished after the credential was issued
surfaces as NotFound in the lookups that follow.
"""

from typing import Annotated

from fastapi import Depends, Header

from src.fieldops.core.exceptions import Forbidden, Unauthenticated
from src.fieldops.core.logging import bind_user_context
from src.fieldops.core.security import Principal, TokenType, decode_token, principal_from_claims
from src.fieldops.services.access_policy import is_staff


def resolve_access_token(token: str | None) -> Principal:
    """Turn a raw access credential into a principal.

    Raises:
        Unauthenticated: Missing, malformed, expired, badly signed, or not an
            access credential.
    """
    if not token:
        raise Unauthenticated("Authentication required")
    claims = decode_token(token)
    if claims is None:
        raise Unauthenticated("Invalid or expired token")
    principal = principal_from_claims(claims, TokenType.ACCESS)
    if principal is None:
        raise Unauthenticated("Invalid token")
    return principal


async def get_current_principal(
    authorization: Annotated[str | None, Header()] = None,
) -> Principal:
    """Validate the Bearer access credential and bind it to the log context."""
    if not authorization or not authorization.startswith("Bearer "):
        raise Unauthenticated("Missing or invalid authorization header")

    principal = resolve_access_token(authorization[7:])
    bind_user_context(principal.user_id, principal.tenant_id, principal.role.value, principal.email)
    return principal


CurrentPrincipal = Annotated[Principal, Depends(get_current_principal)]


async def require_staff(principal: CurrentPrincipal) -> Principal:
    """Admins and workers only; the customer role has no API access."""
    if not is_staff(principal):
        raise Forbidden("Access denied")
    return principal


StaffPrincipal = Annotated[Principal, Depends(require_staff)]


async def require_admin(principal: CurrentPrincipal) -> Principal:
    if not principal.is_admin:
        raise Forbidden("Admin role required for this operation")
    return principal


AdminPrincipal = Annotated[Principal, Depends(require_admin)]
