"""User model - email is unique across every tenant."""

from uuid import UUID

from sqlmodel import Field

from src.fieldops.models.base import EntityBase
from src.fieldops.models.enums import UserRole


class User(EntityBase, table=True):
    """A login belonging to exactly one tenant.

    Emails are stored lower-cased so the unique index is case-insensitive.
    """

    __tablename__ = "users"

    tenant_id: UUID = Field(foreign_key="tenants.id", index=True)
    email: str = Field(max_length=255, unique=True, index=True)
    hashed_password: str = Field(max_length=255)
    name: str = Field(max_length=255)
    role: str = Field(default=UserRole.WORKER.value, max_length=20)

    @property
    def role_enum(self) -> UserRole:
        return UserRole(self.role)
