"""Factories for the tenant-scoped job aggregate.

Foreign keys (``tenant_id``, ``customer_id``, ``status_id``, ``job_id``) are
never generated and must be passed to ``build``.
"""

from polyfactory import Use

from src.fieldops.models import Customer, Job, JobStatus, Task
from src.fieldops.models.tenant.job import new_access_token
from tests.factories.base import BaseFactory, generate_uuid, utc_now


class CustomerFactory(BaseFactory):
    __model__ = Customer

    id = Use(generate_uuid)
    tenant_id = None
    name = Use(lambda: f"Customer {generate_uuid().hex[-6:]}")
    email = None
    phone = None
    address = None
    is_deleted = False
    created_at = Use(utc_now)
    updated_at = Use(utc_now)


class JobStatusFactory(BaseFactory):
    __model__ = JobStatus

    id = Use(generate_uuid)
    tenant_id = None
    name = "New"
    color = "#6366f1"
    order_index = 0
    is_deleted = False
    created_at = Use(utc_now)
    updated_at = Use(utc_now)


class JobFactory(BaseFactory):
    __model__ = Job

    id = Use(generate_uuid)
    tenant_id = None
    customer_id = None
    status_id = None
    assigned_worker_id = None
    title = "Test Job"
    description = None
    scheduled_date = None
    is_archived = False
    customer_access_token = Use(new_access_token)
    is_deleted = False
    created_at = Use(utc_now)
    updated_at = Use(utc_now)


class TaskFactory(BaseFactory):
    __model__ = Task

    id = Use(generate_uuid)
    job_id = None
    title = "Test Task"
    description = None
    is_completed = False
    completed_at = None
    completed_by = None
    is_deleted = False
    created_at = Use(utc_now)
    updated_at = Use(utc_now)
