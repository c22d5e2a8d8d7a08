"""Tenant model - the isolation boundary for one company's account."""

from sqlmodel import Field

from src.fieldops.models.base import EntityBase


class Tenant(EntityBase, table=True):
    __tablename__ = "tenants"

    name: str = Field(max_length=255)
    is_active: bool = Field(default=True)
