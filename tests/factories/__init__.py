"""Test factories for generating test data.

Re-exports all factories for convenient imports:
    from tests.factories import UserFactory, TenantFactory, ...
"""

from tests.factories.base import BaseFactory, generate_uuid, utc_now
from tests.factories.job import CustomerFactory, JobFactory, JobStatusFactory, TaskFactory
from tests.factories.user import DEFAULT_TEST_PASSWORD, TenantFactory, UserFactory

__all__ = [
    # Base
    "BaseFactory",
    "generate_uuid",
    "utc_now",
    # Tenant and users
    "TenantFactory",
    "UserFactory",
    "DEFAULT_TEST_PASSWORD",
    # Job aggregate
    "CustomerFactory",
    "JobFactory",
    "JobStatusFactory",
    "TaskFactory",
]
