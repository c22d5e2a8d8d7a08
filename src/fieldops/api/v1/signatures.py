from uuid import UUID

from fastapi import APIRouter

from src.fieldops.api.dependencies import AdminPrincipal, BroadcasterDep, SignatureServiceDep
from src.fieldops.schemas.common import ApiResponse, DeletedRead

router = APIRouter(prefix="/signatures", tags=["signatures"])


@router.delete(
    "/{signature_id}",
    response_model=ApiResponse[DeletedRead],
    responses={404: {"description": "Signature not found"}},
)
async def delete_signature(
    signature_id: UUID,
    principal: AdminPrincipal,
    service: SignatureServiceDep,
    broadcaster: BroadcasterDep,
) -> ApiResponse[DeletedRead]:
    signature = await service.delete_signature(principal, signature_id)
    await broadcaster.signature_deleted(signature.job_id, signature.id)
    return ApiResponse(data=DeletedRead(id=signature.id), message="Signature deleted successfully")
