"""File attachments on a job.

Metadata lives in ``job_attachments``; contents live in the byte store. The
row is authoritative: a failed byte write rolls nothing forward, and a failed
byte delete after the row is soft-deleted only leaves an orphaned blob.
"""

from pathlib import PurePath
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.fieldops.core.config import Settings
from src.fieldops.core.exceptions import NotFound, ValidationFailed
from src.fieldops.core.logging import get_logger
from src.fieldops.core.security import Principal
from src.fieldops.models.tenant import Attachment, Job
from src.fieldops.repositories import AttachmentRepository, JobRepository
from src.fieldops.repositories.tenant.job_children import AttachmentView
from src.fieldops.schemas.attachment import AttachmentRead
from src.fieldops.services.access_policy import (
    Action,
    Resource,
    authorize,
    authorize_attachment_delete,
)
from src.fieldops.services.job_service import load_live_job
from src.fieldops.storage import ByteStore

logger = get_logger(__name__)


def _suffix(file_name: str) -> str:
    suffix = PurePath(file_name).suffix.lower()
    return suffix if suffix[1:].isalnum() and len(suffix) <= 10 else ""


class AttachmentService:
    def __init__(
        self,
        attachment_repo: AttachmentRepository,
        job_repo: JobRepository,
        byte_store: ByteStore,
        session: AsyncSession,
        settings: Settings,
    ):
        self.attachment_repo = attachment_repo
        self.job_repo = job_repo
        self.byte_store = byte_store
        self.session = session
        self.max_bytes = settings.max_upload_bytes
        self.allowed_mime_types = frozenset(settings.allowed_upload_mime_types)

    async def list_attachments(self, principal: Principal, job_id: UUID) -> list[AttachmentRead]:
        job = await load_live_job(self.job_repo, principal, job_id)
        authorize(principal, Resource.ATTACHMENT, Action.VIEW, job=job)

        views = await self.attachment_repo.list_views_for_job(principal.tenant_id, job_id)
        return [AttachmentRead.from_view(v) for v in views]

    async def upload(
        self,
        principal: Principal,
        job_id: UUID,
        file_name: str,
        mime_type: str,
        data: bytes,
    ) -> AttachmentRead:
        """Store an upload and record its metadata.

        ``data`` may be truncated by the caller at ``max_upload_bytes + 1``;
        anything longer than the limit is rejected before reaching the store.

        Raises:
            ValidationFailed: Disallowed MIME type or oversized file.
        """
        job = await load_live_job(self.job_repo, principal, job_id)
        authorize(principal, Resource.ATTACHMENT, Action.CREATE, job=job)

        if mime_type not in self.allowed_mime_types:
            raise ValidationFailed.for_field("file", f"File type {mime_type} is not allowed")
        if len(data) > self.max_bytes:
            raise ValidationFailed.for_field(
                "file", f"File exceeds the {self.max_bytes // (1024 * 1024)} MB limit"
            )

        locator = await self.byte_store.put(data, suffix=_suffix(file_name))
        attachment = Attachment(
            job_id=job.id,
            uploaded_by=principal.user_id,
            file_name=file_name,
            file_path=locator,
            file_size=len(data),
            mime_type=mime_type,
        )
        self.attachment_repo.add(attachment)
        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            await self._discard_bytes(locator)
            raise
        await self.session.refresh(attachment)

        logger.info(
            "Attachment uploaded",
            attachment_id=str(attachment.id),
            job_id=str(job_id),
            size=attachment.file_size,
        )
        uploader = await self.attachment_repo.get_uploader_name(principal.user_id)
        return AttachmentRead.from_view(AttachmentView(attachment, uploader))

    async def download(self, principal: Principal, attachment_id: UUID) -> tuple[Attachment, bytes]:
        attachment, job = await self._load(principal, attachment_id)
        authorize(principal, Resource.ATTACHMENT, Action.VIEW, job=job)
        try:
            data = await self.byte_store.get(attachment.file_path)
        except FileNotFoundError as e:
            raise NotFound("File not found") from e
        return attachment, data

    async def delete(self, principal: Principal, attachment_id: UUID) -> Attachment:
        """Soft-delete the row, then remove the bytes best-effort."""
        attachment, job = await self._load(principal, attachment_id)
        authorize_attachment_delete(principal, job, attachment)

        self.attachment_repo.soft_delete(attachment)
        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        await self._discard_bytes(attachment.file_path)
        logger.info("Attachment deleted", attachment_id=str(attachment_id), job_id=str(job.id))
        return attachment

    async def _load(self, principal: Principal, attachment_id: UUID) -> tuple[Attachment, Job]:
        found = await self.attachment_repo.get_with_job(principal.tenant_id, attachment_id)
        if found is None:
            raise NotFound("Attachment not found")
        return found

    async def _discard_bytes(self, locator: str) -> None:
        try:
            await self.byte_store.delete(locator)
        except Exception as e:
            logger.warning("Failed to remove attachment bytes", locator=locator, error=str(e))
