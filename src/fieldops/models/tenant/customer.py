"""Customer model - a business contact, distinct from the customer role."""

from uuid import UUID

from sqlalchemy import Text
from sqlmodel import Field

from src.fieldops.models.base import EntityBase


class Customer(EntityBase, table=True):
    __tablename__ = "customers"

    tenant_id: UUID = Field(foreign_key="tenants.id", index=True)
    name: str = Field(max_length=255, index=True)
    email: str | None = Field(default=None, max_length=255)
    phone: str | None = Field(default=None, max_length=50)
    address: str | None = Field(default=None, sa_type=Text)
