"""Repository for User entity."""

from uuid import UUID

from sqlmodel import col, select

from src.fieldops.models.enums import UserRole
from src.fieldops.models.public import User
from src.fieldops.repositories.base import TenantScopedRepository


class UserRepository(TenantScopedRepository[User]):
    model = User

    async def get_by_email(self, email: str) -> User | None:
        """Get a live user by email address, case-insensitively."""
        result = await self.session.execute(
            select(User).where(
                User.email == email.strip().lower(),
                User.is_deleted == False,  # noqa: E712
            )
        )
        return result.scalar_one_or_none()

    async def email_taken(self, email: str) -> bool:
        """Check the unique index, which also covers soft-deleted rows."""
        result = await self.session.execute(
            select(User.id).where(User.email == email.strip().lower())
        )
        return result.first() is not None

    async def list_for_tenant(self, tenant_id: UUID) -> list[User]:
        """All live users of a tenant, newest first."""
        result = await self.session.execute(
            select(User)
            .where(
                User.tenant_id == tenant_id,
                User.is_deleted == False,  # noqa: E712
            )
            .order_by(col(User.created_at).desc())
        )
        return list(result.scalars().all())

    async def list_workers(self, tenant_id: UUID) -> list[User]:
        """Live workers of a tenant, by name."""
        result = await self.session.execute(
            select(User)
            .where(
                User.tenant_id == tenant_id,
                User.role == UserRole.WORKER.value,
                User.is_deleted == False,  # noqa: E712
            )
            .order_by(col(User.name))
        )
        return list(result.scalars().all())

    async def get_worker(self, tenant_id: UUID, user_id: UUID) -> User | None:
        """Get a live user with the worker role in the given tenant."""
        result = await self.session.execute(
            select(User).where(
                User.id == user_id,
                User.tenant_id == tenant_id,
                User.role == UserRole.WORKER.value,
                User.is_deleted == False,  # noqa: E712
            )
        )
        return result.scalar_one_or_none()
