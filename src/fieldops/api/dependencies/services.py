"""Service factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.fieldops.api.dependencies.db import DBSession
from src.fieldops.api.dependencies.repositories import (
    AttachmentRepo,
    CustomerRepo,
    JobRepo,
    JobStatusRepo,
    SignatureRepo,
    TaskRepo,
    TenantRepo,
    UserRepo,
)
from src.fieldops.core.config import get_settings
from src.fieldops.realtime import Broadcaster, get_broadcaster
from src.fieldops.services.attachment_service import AttachmentService
from src.fieldops.services.auth_service import AuthService
from src.fieldops.services.customer_access import CustomerAccessService
from src.fieldops.services.customer_service import CustomerService
from src.fieldops.services.job_service import JobService
from src.fieldops.services.job_status_service import JobStatusService
from src.fieldops.services.signature_service import SignatureService
from src.fieldops.services.task_service import TaskService
from src.fieldops.services.user_service import UserService
from src.fieldops.storage import ByteStore, get_byte_store


def get_auth_service(user_repo: UserRepo, tenant_repo: TenantRepo) -> AuthService:
    return AuthService(user_repo, tenant_repo)


def get_user_service(user_repo: UserRepo, session: DBSession) -> UserService:
    return UserService(user_repo, session)


def get_customer_service(customer_repo: CustomerRepo, session: DBSession) -> CustomerService:
    return CustomerService(customer_repo, session)


def get_job_status_service(status_repo: JobStatusRepo, session: DBSession) -> JobStatusService:
    return JobStatusService(status_repo, session, get_settings().default_status_color)


def get_job_service(
    job_repo: JobRepo,
    customer_repo: CustomerRepo,
    status_repo: JobStatusRepo,
    user_repo: UserRepo,
    task_repo: TaskRepo,
    session: DBSession,
) -> JobService:
    return JobService(job_repo, customer_repo, status_repo, user_repo, task_repo, session)


def get_task_service(task_repo: TaskRepo, job_repo: JobRepo, session: DBSession) -> TaskService:
    return TaskService(task_repo, job_repo, session)


def get_attachment_service(
    attachment_repo: AttachmentRepo,
    job_repo: JobRepo,
    byte_store: Annotated[ByteStore, Depends(get_byte_store)],
    session: DBSession,
) -> AttachmentService:
    return AttachmentService(attachment_repo, job_repo, byte_store, session, get_settings())


def get_signature_service(
    signature_repo: SignatureRepo, job_repo: JobRepo, session: DBSession
) -> SignatureService:
    return SignatureService(signature_repo, job_repo, session)


def get_customer_access_service(job_repo: JobRepo, task_repo: TaskRepo) -> CustomerAccessService:
    return CustomerAccessService(job_repo, task_repo)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
CustomerServiceDep = Annotated[CustomerService, Depends(get_customer_service)]
JobStatusServiceDep = Annotated[JobStatusService, Depends(get_job_status_service)]
JobServiceDep = Annotated[JobService, Depends(get_job_service)]
TaskServiceDep = Annotated[TaskService, Depends(get_task_service)]
AttachmentServiceDep = Annotated[AttachmentService, Depends(get_attachment_service)]
SignatureServiceDep = Annotated[SignatureService, Depends(get_signature_service)]
CustomerAccessServiceDep = Annotated[CustomerAccessService, Depends(get_customer_access_service)]
BroadcasterDep = Annotated[Broadcaster, Depends(get_broadcaster)]
