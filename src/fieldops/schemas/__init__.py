from src.fieldops.schemas.attachment import AttachmentRead
from src.fieldops.schemas.auth import LoginRequest, LoginResponse, TokenResponse
from src.fieldops.schemas.common import ApiResponse, DeletedRead, PartialUpdate, RequestModel
from src.fieldops.schemas.customer import CustomerCreate, CustomerRead, CustomerUpdate
from src.fieldops.schemas.job import (
    CustomerJobView,
    JobCreate,
    JobDetail,
    JobRead,
    JobUpdate,
)
from src.fieldops.schemas.job_status import (
    JobStatusCreate,
    JobStatusRead,
    JobStatusReorder,
    JobStatusUpdate,
)
from src.fieldops.schemas.signature import SignatureCreate, SignatureRead
from src.fieldops.schemas.task import TaskComplete, TaskCreate, TaskRead, TaskUpdate
from src.fieldops.schemas.user import UserCreate, UserRead, UserUpdate

__all__ = [
    # Common
    "ApiResponse",
    "DeletedRead",
    "PartialUpdate",
    "RequestModel",
    # Attachment
    "AttachmentRead",
    # Auth
    "LoginRequest",
    "LoginResponse",
    "TokenResponse",
    # Customer
    "CustomerCreate",
    "CustomerRead",
    "CustomerUpdate",
    # Job
    "CustomerJobView",
    "JobCreate",
    "JobDetail",
    "JobRead",
    "JobUpdate",
    # Job status
    "JobStatusCreate",
    "JobStatusRead",
    "JobStatusReorder",
    "JobStatusUpdate",
    # Signature
    "SignatureCreate",
    "SignatureRead",
    # Task
    "TaskComplete",
    "TaskCreate",
    "TaskRead",
    "TaskUpdate",
    # User
    "UserCreate",
    "UserRead",
    "UserUpdate",
]
