"""Customer (business contact) management."""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.fieldops.core.exceptions import NotFound
from src.fieldops.core.logging import get_logger
from src.fieldops.core.security import Principal
from src.fieldops.models.tenant import Customer
from src.fieldops.repositories import CustomerRepository
from src.fieldops.schemas.customer import CustomerCreate, CustomerUpdate

logger = get_logger(__name__)


class CustomerService:
    def __init__(self, customer_repo: CustomerRepository, session: AsyncSession):
        self.customer_repo = customer_repo
        self.session = session

    async def list_customers(self, principal: Principal, search: str | None = None) -> list[Customer]:
        return await self.customer_repo.list_for_tenant(principal.tenant_id, search)

    async def get_customer(self, principal: Principal, customer_id: UUID) -> Customer:
        customer = await self.customer_repo.get_in_tenant(principal.tenant_id, customer_id)
        if customer is None:
            raise NotFound("Customer not found")
        return customer

    async def create_customer(self, principal: Principal, data: CustomerCreate) -> Customer:
        customer = Customer(
            tenant_id=principal.tenant_id,
            name=data.name,
            email=str(data.email) if data.email else None,
            phone=data.phone,
            address=data.address,
        )
        self.customer_repo.add(customer)
        await self._commit()
        await self.session.refresh(customer)

        logger.info("Customer created", customer_id=str(customer.id))
        return customer

    async def update_customer(
        self, principal: Principal, customer_id: UUID, data: CustomerUpdate
    ) -> Customer:
        customer = await self.get_customer(principal, customer_id)
        for field, value in data.changes().items():
            setattr(customer, field, str(value) if field == "email" and value else value)

        self.customer_repo.touch(customer)
        await self._commit()
        await self.session.refresh(customer)

        logger.info("Customer updated", customer_id=str(customer.id))
        return customer

    async def delete_customer(self, principal: Principal, customer_id: UUID) -> None:
        customer = await self.get_customer(principal, customer_id)
        self.customer_repo.soft_delete(customer)
        await self._commit()

        logger.info("Customer deleted", customer_id=str(customer_id))

    async def _commit(self) -> None:
        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
