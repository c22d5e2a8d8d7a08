"""Repository layer - data access abstraction."""

from src.fieldops.repositories.base import BaseRepository, TenantScopedRepository
from src.fieldops.repositories.public import TenantRepository, UserRepository
from src.fieldops.repositories.tenant import (
    AttachmentRepository,
    AttachmentView,
    CustomerRepository,
    JobFilters,
    JobRepository,
    JobStatusRepository,
    JobView,
    SignatureRepository,
    TaskRepository,
)

__all__ = [
    # Base
    "BaseRepository",
    "TenantScopedRepository",
    # System-wide
    "TenantRepository",
    "UserRepository",
    # Tenant-scoped
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
