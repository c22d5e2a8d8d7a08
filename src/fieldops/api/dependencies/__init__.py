"""FastAPI dependency injection definitions.

Re-exports all dependencies for convenience.
"""

# Auth
from src.fieldops.api.dependencies.auth import (
    AdminPrincipal,
    CurrentPrincipal,
    StaffPrincipal,
    get_current_principal,
    require_admin,
    require_staff,
    resolve_access_token,
)

# Database
from src.fieldops.api.dependencies.db import (
    DBSession,
    SessionFactory,
    get_db_session,
    get_session_factory,
)

# Repositories
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

# Services
from src.fieldops.api.dependencies.services import (
    AttachmentServiceDep,
    AuthServiceDep,
    BroadcasterDep,
    CustomerAccessServiceDep,
    CustomerServiceDep,
    JobServiceDep,
    JobStatusServiceDep,
    SignatureServiceDep,
    TaskServiceDep,
    UserServiceDep,
)

__all__ = [
    # Database
    "DBSession",
    "SessionFactory",
    "get_db_session",
    "get_session_factory",
    # Auth
    "AdminPrincipal",
    "CurrentPrincipal",
    "StaffPrincipal",
    "get_current_principal",
    "require_admin",
    "require_staff",
    "resolve_access_token",
    # Repositories
    "AttachmentRepo",
    "CustomerRepo",
    "JobRepo",
    "JobStatusRepo",
    "SignatureRepo",
    "TaskRepo",
    "TenantRepo",
    "UserRepo",
    # Services
    "AttachmentServiceDep",
    "AuthServiceDep",
    "BroadcasterDep",
    "CustomerAccessServiceDep",
    "CustomerServiceDep",
    "JobServiceDep",
    "JobStatusServiceDep",
    "SignatureServiceDep",
    "TaskServiceDep",
    "UserServiceDep",
]
