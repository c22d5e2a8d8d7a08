"""Repositories for tenant-scoped models."""

from src.fieldops.repositories.tenant.customer import CustomerRepository
from src.fieldops.repositories.tenant.job import JobFilters, JobRepository, JobView
from src.fieldops.repositories.tenant.job_children import (
    AttachmentRepository,
    AttachmentView,
    SignatureRepository,
    TaskRepository,
)
from src.fieldops.repositories.tenant.job_status import JobStatusRepository

__all__ = [
    "AttachmentRepository",
    "AttachmentView",
    "CustomerRepository",
    "JobFilters",
    "JobRepository",
    "JobStatusRepository",
    "JobView",
    "SignatureRepository",
    "TaskRepository",
]
