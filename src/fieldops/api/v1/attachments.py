"""Attachment endpoints addressed by attachment id."""

from urllib.parse import quote
from uuid import UUID

from fastapi import APIRouter, Response

from src.fieldops.api.dependencies import AttachmentServiceDep, BroadcasterDep, StaffPrincipal
from src.fieldops.schemas.common import ApiResponse, DeletedRead

router = APIRouter(prefix="/attachments", tags=["attachments"])


@router.get(
    "/{attachment_id}/download",
    response_class=Response,
    responses={404: {"description": "Attachment or file not found"}},
)
async def download_attachment(
    attachment_id: UUID, principal: StaffPrincipal, service: AttachmentServiceDep
) -> Response:
    attachment, data = await service.download(principal, attachment_id)
    return Response(
        content=data,
        media_type=attachment.mime_type,
        headers={
            "Content-Disposition": f"attachment; filename*=UTF-8''{quote(attachment.file_name)}"
        },
    )


@router.delete(
    "/{attachment_id}",
    response_model=ApiResponse[DeletedRead],
    responses={403: {"description": "Not the uploader"}, 404: {"description": "Attachment not found"}},
)
async def delete_attachment(
    attachment_id: UUID,
    principal: StaffPrincipal,
    service: AttachmentServiceDep,
    broadcaster: BroadcasterDep,
) -> ApiResponse[DeletedRead]:
    """Admins may delete any attachment; workers only their own uploads."""
    attachment = await service.delete(principal, attachment_id)
    await broadcaster.attachment_deleted(attachment.job_id, attachment.id)
    return ApiResponse(data=DeletedRead(id=attachment.id), message="Attachment deleted successfully")
