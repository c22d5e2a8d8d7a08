from src.fieldops.services.attachment_service import AttachmentService
from src.fieldops.services.auth_service import AuthService
from src.fieldops.services.customer_access import CustomerAccessService
from src.fieldops.services.customer_service import CustomerService
from src.fieldops.services.job_service import JobService
from src.fieldops.services.job_status_service import JobStatusService
from src.fieldops.services.signature_service import SignatureService
from src.fieldops.services.task_service import TaskService
from src.fieldops.services.user_service import UserService

__all__ = [
    "AttachmentService",
    "AuthService",
    "CustomerAccessService",
    "CustomerService",
    "JobService",
    "JobStatusService",
    "SignatureService",
    "TaskService",
    "UserService",
]
