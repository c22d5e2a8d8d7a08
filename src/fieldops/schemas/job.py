"""Job schemas for API request/response."""

from datetime import date, datetime
from typing import Any, ClassVar, Self
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.fieldops.repositories.tenant.job import JobView
from src.fieldops.schemas.common import (
    PartialUpdate,
    RequestModel,
    strip_or_none,
    strip_required,
)
from src.fieldops.schemas.task import TaskRead


class JobCreate(RequestModel):
    customer_id: UUID
    status_id: UUID
    title: str = Field(min_length=1, max_length=255)
    assigned_worker_id: UUID | None = None
    description: str | None = None
    scheduled_date: date | None = None

    strip_title = field_validator("title", mode="before")(strip_required)
    strip_description = field_validator("description")(strip_or_none)


class JobUpdate(PartialUpdate):
    """Unknown keys fail validation once the role check on raw keys has passed."""

    model_config = ConfigDict(extra="forbid")
    nullable_fields: ClassVar[frozenset[str]] = frozenset(
        {"assigned_worker_id", "scheduled_date", "description"}
    )

    customer_id: UUID | None = None
    status_id: UUID | None = None
    title: str | None = Field(default=None, min_length=1, max_length=255)
    assigned_worker_id: UUID | None = None
    description: str | None = None
    scheduled_date: date | None = None

    strip_title = field_validator("title", mode="before")(strip_required)
    strip_description = field_validator("description")(strip_or_none)


class JobFields(BaseModel):
    """Joined job shape shared by every read model."""

    id: UUID
    tenant_id: UUID
    customer_id: UUID
    assigned_worker_id: UUID | None
    status_id: UUID
    title: str
    description: str | None
    scheduled_date: date | None
    is_archived: bool
    created_at: datetime
    updated_at: datetime
    customer_name: str | None = None
    worker_name: str | None = None
    status_name: str | None = None
    status_color: str | None = None

    @classmethod
    def from_view(cls, view: JobView, **extra: Any) -> Self:
        return cls.model_validate(
            {
                **view.job.model_dump(),
                "customer_name": view.customer_name,
                "worker_name": view.worker_name,
                "status_name": view.status_name,
                "status_color": view.status_color,
                **extra,
            }
        )


class JobRead(JobFields):
    customer_access_token: str


class JobDetail(JobRead):
    tasks: list[TaskRead] = []


class CustomerJobView(JobFields):
    """What the anonymous token holder sees: no token, read-only tasks."""

    tasks: list[TaskRead] = []
