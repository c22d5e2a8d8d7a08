"""Model exports.

Import from here: `from src.fieldops.models import Job, User`
"""

# Enums
from src.fieldops.models.enums import SignerType, UserRole

# System-wide models
from src.fieldops.models.public import Tenant, User

# Tenant-scoped models
from src.fieldops.models.tenant import (
    Attachment,
    Customer,
    Job,
    JobStatus,
    Signature,
    Task,
)

__all__ = [
    # Enums
    "SignerType",
    "UserRole",
    # System-wide models
    "Tenant",
    "User",
    # Tenant-scoped models
    "Attachment",
    "Customer",
    "Job",
    "JobStatus",
    "Signature",
    "Task",
]
