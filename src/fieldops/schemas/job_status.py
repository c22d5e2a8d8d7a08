"""Job status schemas for API request/response."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from src.fieldops.schemas.common import PartialUpdate, RequestModel, strip_required

HEX_COLOR_PATTERN = r"^#[0-9a-fA-F]{6}$"


class JobStatusCreate(RequestModel):
    name: str = Field(min_length=1, max_length=100)
    color: str | None = Field(default=None, pattern=HEX_COLOR_PATTERN)

    strip_name = field_validator("name", mode="before")(strip_required)


class JobStatusUpdate(PartialUpdate):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    color: str | None = Field(default=None, pattern=HEX_COLOR_PATTERN)

    strip_name = field_validator("name", mode="before")(strip_required)


class JobStatusReorder(RequestModel):
    """Full list of status ids in their new display order."""

    status_ids: list[UUID] = Field(min_length=1)


class JobStatusRead(BaseModel):
    id: UUID
    tenant_id: UUID
    name: str
    color: str
    order_index: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
