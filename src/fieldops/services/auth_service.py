"""Authentication service - login, credential refresh and the current user."""

from dataclasses import dataclass

from src.fieldops.core.exceptions import Unauthenticated
from src.fieldops.core.logging import get_logger
from src.fieldops.core.security import (
    DUMMY_PASSWORD_HASH,
    Principal,
    TokenType,
    create_access_token,
    create_refresh_token,
    decode_token,
    principal_from_claims,
    verify_password,
)
from src.fieldops.models.public import User
from src.fieldops.repositories import TenantRepository, UserRepository

logger = get_logger(__name__)


@dataclass(slots=True)
class IssuedCredentials:
    user: User
    access_token: str
    refresh_token: str


def issue_credentials(user: User) -> IssuedCredentials:
    """Mint an access/refresh pair carrying the user's current role."""
    return IssuedCredentials(
        user=user,
        access_token=create_access_token(user.id, user.tenant_id, user.role, user.email),
        refresh_token=create_refresh_token(user.id, user.tenant_id, user.role, user.email),
    )


class AuthService:
    """Stateless JWT authentication.

    Refresh credentials are not persisted; every refresh re-reads the user so a
    role change or deletion takes effect on the next refresh.
    """

    def __init__(self, user_repo: UserRepository, tenant_repo: TenantRepository):
        self.user_repo = user_repo
        self.tenant_repo = tenant_repo

    async def authenticate(self, email: str, password: str) -> IssuedCredentials:
        """Verify an email/password pair and issue credentials.

        Raises:
            Unauthenticated: Unknown email, wrong password, or inactive tenant.
        """
        user = await self.user_repo.get_by_email(email)

        # Always verify so response timing does not reveal whether the email exists
        password_hash = user.hashed_password if user else DUMMY_PASSWORD_HASH
        password_valid = verify_password(password, password_hash)

        if user is None or not password_valid:
            raise Unauthenticated("Invalid email or password")

        if await self.tenant_repo.get_active(user.tenant_id) is None:
            raise Unauthenticated("Invalid email or password")

        logger.info("User logged in", user_id=str(user.id), tenant_id=str(user.tenant_id))
        return issue_credentials(user)

    async def refresh(self, refresh_token: str | None) -> IssuedCredentials:
        """Exchange a refresh credential for a fresh pair."""
        if not refresh_token:
            raise Unauthenticated("Refresh token required")

        claims = decode_token(refresh_token)
        principal = principal_from_claims(claims, TokenType.REFRESH) if claims else None
        if principal is None:
            raise Unauthenticated("Invalid refresh token")

        user = await self._load_user(principal)
        return issue_credentials(user)

    async def current_user(self, principal: Principal) -> User:
        return await self._load_user(principal)

    async def _load_user(self, principal: Principal) -> User:
        user = await self.user_repo.get_in_tenant(principal.tenant_id, principal.user_id)
        if user is None or await self.tenant_repo.get_active(user.tenant_id) is None:
            raise Unauthenticated("User no longer exists")
        return user
