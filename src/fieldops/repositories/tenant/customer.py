"""Repository for Customer entity."""

from uuid import UUID

from sqlmodel import col, or_, select

from src.fieldops.models.tenant import Customer
from src.fieldops.repositories.base import LIKE_ESCAPE, TenantScopedRepository, contains_pattern


class CustomerRepository(TenantScopedRepository[Customer]):
    model = Customer

    async def list_for_tenant(self, tenant_id: UUID, search: str | None = None) -> list[Customer]:
        """Live customers by name, optionally matching name or email."""
        query = select(Customer).where(
            Customer.tenant_id == tenant_id,
            Customer.is_deleted == False,  # noqa: E712
        )
        if search:
            pattern = contains_pattern(search)
            query = query.where(
                or_(
                    col(Customer.name).ilike(pattern, escape=LIKE_ESCAPE),
                    col(Customer.email).ilike(pattern, escape=LIKE_ESCAPE),
                )
            )
        result = await self.session.execute(query.order_by(col(Customer.name)))
        return list(result.scalars().all())
