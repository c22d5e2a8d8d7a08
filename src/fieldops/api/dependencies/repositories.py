"""Repository factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.fieldops.api.dependencies.db import DBSession
from src.fieldops.repositories import (
    AttachmentRepository,
    CustomerRepository,
    JobRepository,
    JobStatusRepository,
    SignatureRepository,
    TaskRepository,
    TenantRepository,
    UserRepository,
)


def get_tenant_repository(session: DBSession) -> TenantRepository:
    return TenantRepository(session)


def get_user_repository(session: DBSession) -> UserRepository:
    return UserRepository(session)


def get_customer_repository(session: DBSession) -> CustomerRepository:
    return CustomerRepository(session)


def get_job_status_repository(session: DBSession) -> JobStatusRepository:
    return JobStatusRepository(session)


def get_job_repository(session: DBSession) -> JobRepository:
    return JobRepository(session)


def get_task_repository(session: DBSession) -> TaskRepository:
    return TaskRepository(session)


def get_attachment_repository(session: DBSession) -> AttachmentRepository:
    return AttachmentRepository(session)


def get_signature_repository(session: DBSession) -> SignatureRepository:
    return SignatureRepository(session)


TenantRepo = Annotated[TenantRepository, Depends(get_tenant_repository)]
UserRepo = Annotated[UserRepository, Depends(get_user_repository)]
CustomerRepo = Annotated[CustomerRepository, Depends(get_customer_repository)]
JobStatusRepo = Annotated[JobStatusRepository, Depends(get_job_status_repository)]
JobRepo = Annotated[JobRepository, Depends(get_job_repository)]
TaskRepo = Annotated[TaskRepository, Depends(get_task_repository)]
AttachmentRepo = Annotated[AttachmentRepository, Depends(get_attachment_repository)]
SignatureRepo = Annotated[SignatureRepository, Depends(get_signature_repository)]
