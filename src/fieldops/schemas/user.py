from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field, field_validator

from src.fieldops.models.enums import UserRole
from src.fieldops.schemas.common import PartialUpdate, RequestModel, strip_required


class UserCreate(RequestModel):
    email: EmailStr
    password: str = Field(min_length=6, max_length=100)
    name: str = Field(min_length=1, max_length=255)
    role: UserRole

    strip_name = field_validator("name", mode="before")(strip_required)


class UserUpdate(PartialUpdate):
    email: EmailStr | None = None
    password: str | None = Field(None, min_length=6, max_length=100)
    name: str | None = Field(None, min_length=1, max_length=255)
    role: UserRole | None = None

    strip_name = field_validator("name", mode="before")(strip_required)


class UserRead(BaseModel):
    """Public view of a user; never carries the password hash."""

    id: UUID
    tenant_id: UUID
    email: str
    name: str
    role: UserRole
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
