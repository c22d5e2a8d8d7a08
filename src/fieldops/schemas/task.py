"""Task schemas for API request/response."""

from datetime import datetime
from typing import ClassVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.fieldops.schemas.common import PartialUpdate, RequestModel, strip_or_none, strip_required


class TaskCreate(RequestModel):
    title: str = Field(min_length=1, max_length=255)
    description: str | None = None

    strip_title = field_validator("title", mode="before")(strip_required)
    strip_description = field_validator("description")(strip_or_none)


class TaskUpdate(PartialUpdate):
    """Raw task fields. Completion is only changed through TaskComplete."""

    model_config = ConfigDict(extra="forbid")
    nullable_fields: ClassVar[frozenset[str]] = frozenset({"description"})

    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None

    strip_title = field_validator("title", mode="before")(strip_required)
    strip_description = field_validator("description")(strip_or_none)


class TaskComplete(RequestModel):
    complete: bool = True


class TaskRead(BaseModel):
    id: UUID
    job_id: UUID
    title: str
    description: str | None
    is_completed: bool
    completed_at: datetime | None
    completed_by: UUID | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
