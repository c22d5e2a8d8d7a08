"""Repositories for records scoped through their parent job.

Every query joins the parent job and requires it to be live and inside the
caller's tenant, so soft-deleting a job hides its children without touching
their rows.
"""

from dataclasses import dataclass
from typing import Any
from uuid import UUID

from sqlmodel import col, select

from src.fieldops.models.base import EntityBase
from src.fieldops.models.public import User
from src.fieldops.models.tenant import Attachment, Job, Signature, Task
from src.fieldops.repositories.base import BaseRepository


def _live_job_predicate(tenant_id: UUID) -> tuple[Any, ...]:
    return (
        col(Job.tenant_id) == tenant_id,
        col(Job.is_deleted) == False,  # noqa: E712
    )


class JobChildRepository[ModelType: EntityBase](BaseRepository[ModelType]):
    """Common lookups for models carrying ``job_id``."""

    order_by: Any = None

    async def list_for_job(self, tenant_id: UUID, job_id: UUID) -> list[ModelType]:
        query = (
            select(self.model)
            .join(Job, col(Job.id) == self.model.job_id)  # type: ignore[attr-defined]
            .where(
                self.model.job_id == job_id,  # type: ignore[attr-defined]
                self.model.is_deleted == False,  # noqa: E712
                *_live_job_predicate(tenant_id),
            )
        )
        if self.order_by is not None:
            query = query.order_by(self.order_by)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def get_with_job(self, tenant_id: UUID, id: UUID) -> tuple[ModelType, Job] | None:
        """Load a child together with its live parent job."""
        result = await self.session.execute(
            select(self.model, Job)
            .join(Job, col(Job.id) == self.model.job_id)  # type: ignore[attr-defined]
            .where(
                self.model.id == id,
                self.model.is_deleted == False,  # noqa: E712
                *_live_job_predicate(tenant_id),
            )
        )
        row = result.first()
        if row is None:
            return None
        return row[0], row[1]


class TaskRepository(JobChildRepository[Task]):
    model = Task
    order_by = col(Task.created_at).asc()


@dataclass(slots=True)
class AttachmentView:
    attachment: Attachment
    uploader_name: str | None


class AttachmentRepository(JobChildRepository[Attachment]):
    model = Attachment
    order_by = col(Attachment.created_at).desc()

    async def list_views_for_job(self, tenant_id: UUID, job_id: UUID) -> list[AttachmentView]:
        """Attachments with the uploader's display name, newest first."""
        result = await self.session.execute(
            select(Attachment, col(User.name).label("uploader_name"))
            .join(Job, col(Job.id) == col(Attachment.job_id))
            .outerjoin(User, col(User.id) == col(Attachment.uploaded_by))
            .where(
                Attachment.job_id == job_id,
                Attachment.is_deleted == False,  # noqa: E712
                *_live_job_predicate(tenant_id),
            )
            .order_by(self.order_by)
        )
        return [AttachmentView(row[0], row.uploader_name) for row in result.all()]

    async def get_uploader_name(self, user_id: UUID) -> str | None:
        result = await self.session.execute(select(User.name).where(User.id == user_id))
        return result.scalar_one_or_none()


class SignatureRepository(JobChildRepository[Signature]):
    model = Signature
    order_by = col(Signature.signed_at).desc()
