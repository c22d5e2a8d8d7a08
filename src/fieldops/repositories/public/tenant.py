"""Repository for Tenant entity."""

from uuid import UUID

from sqlmodel import select

from src.fieldops.models.public import Tenant
from src.fieldops.repositories.base import BaseRepository


class TenantRepository(BaseRepository[Tenant]):
    model = Tenant

    async def get_active(self, tenant_id: UUID) -> Tenant | None:
        """Get a tenant that is live and allowed to log in."""
        result = await self.session.execute(
            select(Tenant).where(
                Tenant.id == tenant_id,
                Tenant.is_active == True,  # noqa: E712
                Tenant.is_deleted == False,  # noqa: E712
            )
        )
        return result.scalar_one_or_none()
