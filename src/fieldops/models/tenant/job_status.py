"""JobStatus model - tenant-defined workflow labels."""

from uuid import UUID

from sqlmodel import Field

from src.fieldops.models.base import EntityBase


class JobStatus(EntityBase, table=True):
    """An ordered workflow label.

    ``order_index`` is dense and zero-based; the reorder operation keeps it
    that way, no constraint does.
    """

    __tablename__ = "job_statuses"

    tenant_id: UUID = Field(foreign_key="tenants.id", index=True)
    name: str = Field(max_length=100)
    color: str = Field(max_length=20)
    order_index: int = Field(default=0)
