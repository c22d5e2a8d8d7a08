from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from src.fieldops.repositories.tenant.job_children import AttachmentView


class AttachmentRead(BaseModel):
    """Attachment metadata. The storage locator stays server-side."""

    id: UUID
    job_id: UUID
    uploaded_by: UUID
    uploader_name: str | None = None
    file_name: str
    file_size: int
    mime_type: str
    created_at: datetime

    @classmethod
    def from_view(cls, view: AttachmentView) -> "AttachmentRead":
        return cls.model_validate(
            {**view.attachment.model_dump(), "uploader_name": view.uploader_name}
        )
