"""Signatures captured on a job. Immutable: create and delete only."""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.fieldops.core.exceptions import NotFound
from src.fieldops.core.logging import get_logger
from src.fieldops.core.security import Principal
from src.fieldops.models.tenant import Signature
from src.fieldops.repositories import JobRepository, SignatureRepository
from src.fieldops.schemas.signature import SignatureCreate, SignatureRead
from src.fieldops.services.access_policy import Action, Resource, authorize
from src.fieldops.services.job_service import load_live_job

logger = get_logger(__name__)


class SignatureService:
    def __init__(
        self,
        signature_repo: SignatureRepository,
        job_repo: JobRepository,
        session: AsyncSession,
    ):
        self.signature_repo = signature_repo
        self.job_repo = job_repo
        self.session = session

    async def list_signatures(self, principal: Principal, job_id: UUID) -> list[SignatureRead]:
        job = await load_live_job(self.job_repo, principal, job_id)
        authorize(principal, Resource.SIGNATURE, Action.VIEW, job=job)

        signatures = await self.signature_repo.list_for_job(principal.tenant_id, job_id)
        return [SignatureRead.model_validate(s) for s in signatures]

    async def create_signature(
        self, principal: Principal, job_id: UUID, data: SignatureCreate
    ) -> SignatureRead:
        """Record a signature; the capturing user is stored as ``signer_id``."""
        job = await load_live_job(self.job_repo, principal, job_id)
        authorize(principal, Resource.SIGNATURE, Action.CREATE, job=job)

        signature = Signature(
            job_id=job.id,
            signer_type=data.signer_type.value,
            signer_id=principal.user_id,
            signer_name=data.signer_name,
            signature_data=data.signature_data,
        )
        self.signature_repo.add(signature)
        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        await self.session.refresh(signature)

        logger.info(
            "Signature captured",
            signature_id=str(signature.id),
            job_id=str(job_id),
            signer_type=signature.signer_type,
        )
        return SignatureRead.model_validate(signature)

    async def delete_signature(self, principal: Principal, signature_id: UUID) -> Signature:
        found = await self.signature_repo.get_with_job(principal.tenant_id, signature_id)
        if found is None:
            raise NotFound("Signature not found")
        signature, job = found
        authorize(principal, Resource.SIGNATURE, Action.DELETE, job=job)

        self.signature_repo.soft_delete(signature)
        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info("Signature deleted", signature_id=str(signature_id), job_id=str(job.id))
        return signature
