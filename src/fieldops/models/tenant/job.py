"""Job aggregate models: the job and the records hanging off it.

Tasks, attachments and signatures carry no tenant_id; they are scoped through
their parent job, and every query over them joins a live (non-deleted) job.
"""

from datetime import date, datetime
from uuid import UUID, uuid4

from sqlalchemy import Text
from sqlmodel import Field

from src.fieldops.models.base import EntityBase, utc_now
from src.fieldops.models.enums import SignerType


def new_access_token() -> str:
    """Random capability token for the anonymous customer view."""
    return str(uuid4())


class Job(EntityBase, table=True):
    __tablename__ = "jobs"

    tenant_id: UUID = Field(foreign_key="tenants.id", index=True)
    customer_id: UUID = Field(foreign_key="customers.id", index=True)
    assigned_worker_id: UUID | None = Field(default=None, foreign_key="users.id", index=True)
    status_id: UUID = Field(foreign_key="job_statuses.id", index=True)
    title: str = Field(max_length=255)
    description: str | None = Field(default=None, sa_type=Text)
    scheduled_date: date | None = Field(default=None)
    is_archived: bool = Field(default=False)
    customer_access_token: str = Field(
        default_factory=new_access_token,
        max_length=36,
        unique=True,
        index=True,
    )


class Task(EntityBase, table=True):
    """Checklist item.

    ``completed_at`` and ``completed_by`` are set together and cleared
    together, always in step with ``is_completed``.
    """

    __tablename__ = "tasks"

    job_id: UUID = Field(foreign_key="jobs.id", index=True)
    title: str = Field(max_length=255)
    description: str | None = Field(default=None, sa_type=Text)
    is_completed: bool = Field(default=False)
    completed_at: datetime | None = Field(default=None)
    completed_by: UUID | None = Field(default=None, foreign_key="users.id")


class Attachment(EntityBase, table=True):
    __tablename__ = "job_attachments"

    job_id: UUID = Field(foreign_key="jobs.id", index=True)
    uploaded_by: UUID = Field(foreign_key="users.id")
    file_name: str = Field(max_length=255)
    file_path: str = Field(max_length=500)
    file_size: int
    mime_type: str = Field(max_length=100)


class Signature(EntityBase, table=True):
    """Immutable once captured; only create and delete exist."""

    __tablename__ = "job_signatures"

    job_id: UUID = Field(foreign_key="jobs.id", index=True)
    signer_type: str = Field(default=SignerType.CUSTOMER.value, max_length=20)
    signer_id: UUID | None = Field(default=None, foreign_key="users.id")
    signer_name: str = Field(max_length=255)
    signature_data: str = Field(sa_type=Text)
    signed_at: datetime = Field(default_factory=utc_now)
