"""Customer schemas for API request/response."""

from datetime import datetime
from typing import ClassVar
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field, field_validator

from src.fieldops.schemas.common import PartialUpdate, RequestModel, strip_or_none, strip_required


class CustomerCreate(RequestModel):
    name: str = Field(min_length=1, max_length=255)
    email: EmailStr | None = None
    phone: str | None = Field(default=None, max_length=50)
    address: str | None = None

    strip_name = field_validator("name", mode="before")(strip_required)
    strip_optional = field_validator("phone", "address")(strip_or_none)


class CustomerUpdate(PartialUpdate):
    nullable_fields: ClassVar[frozenset[str]] = frozenset({"email", "phone", "address"})

    name: str | None = Field(default=None, min_length=1, max_length=255)
    email: EmailStr | None = None
    phone: str | None = Field(default=None, max_length=50)
    address: str | None = None

    strip_name = field_validator("name", mode="before")(strip_required)
    strip_optional = field_validator("phone", "address")(strip_or_none)


class CustomerRead(BaseModel):
    id: UUID
    tenant_id: UUID
    name: str
    email: str | None
    phone: str | None
    address: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
