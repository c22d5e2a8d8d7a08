"""User management within one tenant."""

from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.fieldops.core.exceptions import Conflict, Forbidden, NotFound
from src.fieldops.core.logging import get_logger
from src.fieldops.core.security import Principal, hash_password
from src.fieldops.models.public import User
from src.fieldops.repositories import UserRepository
from src.fieldops.schemas.user import UserCreate, UserUpdate

logger = get_logger(__name__)


class UserService:
    """User management service. Every method is admin-only at the route layer."""

    def __init__(self, user_repo: UserRepository, session: AsyncSession):
        self.user_repo = user_repo
        self.session = session

    async def list_users(self, principal: Principal) -> list[User]:
        return await self.user_repo.list_for_tenant(principal.tenant_id)

    async def list_workers(self, principal: Principal) -> list[User]:
        return await self.user_repo.list_workers(principal.tenant_id)

    async def get_user(self, principal: Principal, user_id: UUID) -> User:
        user = await self.user_repo.get_in_tenant(principal.tenant_id, user_id)
        if user is None:
            raise NotFound("User not found")
        return user

    async def create_user(self, principal: Principal, data: UserCreate) -> User:
        """Create a user in the caller's tenant.

        Raises:
            Conflict: The email is already registered (in any tenant).
        """
        email = data.email.lower()
        if await self.user_repo.email_taken(email):
            raise Conflict("Email already registered")

        user = User(
            tenant_id=principal.tenant_id,
            email=email,
            hashed_password=hash_password(data.password),
            name=data.name,
            role=data.role.value,
        )
        self.user_repo.add(user)
        await self._commit_unique_email()
        await self.session.refresh(user)

        logger.info("User created", created_user_id=str(user.id), role=user.role)
        return user

    async def update_user(self, principal: Principal, user_id: UUID, data: UserUpdate) -> User:
        """Apply the present fields.

        Raises:
            Forbidden: An admin tried to change their own role.
            Conflict: The new email is already registered.
        """
        user = await self.get_user(principal, user_id)
        changes = data.changes()

        if "role" in changes:
            if user.id == principal.user_id and changes["role"].value != user.role:
                raise Forbidden("Cannot change your own role")
            user.role = changes.pop("role").value

        if "password" in changes:
            user.hashed_password = hash_password(changes.pop("password"))

        if "email" in changes:
            email = changes.pop("email").lower()
            if email != user.email and await self.user_repo.email_taken(email):
                raise Conflict("Email already registered")
            user.email = email

        for field, value in changes.items():
            setattr(user, field, value)

        self.user_repo.touch(user)
        await self._commit_unique_email()
        await self.session.refresh(user)

        logger.info("User updated", updated_user_id=str(user.id))
        return user

    async def delete_user(self, principal: Principal, user_id: UUID) -> None:
        if user_id == principal.user_id:
            raise Forbidden("Cannot delete your own account")

        user = await self.get_user(principal, user_id)
        self.user_repo.soft_delete(user)
        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info("User deleted", deleted_user_id=str(user_id))

    async def _commit_unique_email(self) -> None:
        try:
            await self.session.commit()
        except IntegrityError as e:
            # Lost a race with a concurrent registration of the same email
            await self.session.rollback()
            raise Conflict("Email already registered") from e
        except Exception:
            await self.session.rollback()
            raise
