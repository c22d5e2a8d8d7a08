"""Tenant-scoped business data.

Customers, statuses and jobs carry ``tenant_id``; job children are scoped
through their parent job.
"""

from src.fieldops.models.tenant.customer import Customer
from src.fieldops.models.tenant.job import Attachment, Job, Signature, Task, new_access_token
from src.fieldops.models.tenant.job_status import JobStatus

__all__ = [
    "Attachment",
    "Customer",
    "Job",
    "JobStatus",
    "Signature",
    "Task",
    "new_access_token",
]
