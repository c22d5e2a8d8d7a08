"""Repositories for system-wide models."""

from src.fieldops.repositories.public.tenant import TenantRepository
from src.fieldops.repositories.public.user import UserRepository

__all__ = [
    "TenantRepository",
    "UserRepository",
]
