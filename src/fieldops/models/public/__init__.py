"""System-wide models: tenants and the users that log into them."""

from src.fieldops.models.public.tenant import Tenant
from src.fieldops.models.public.user import User

__all__ = [
    "Tenant",
    "User",
]
