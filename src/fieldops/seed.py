"""Demo data loader.

Creates one tenant with an admin, a worker, the four default job statuses,
a customer and a scheduled job. Running it twice is a no-op.

Usage:
    python -m src.fieldops.seed [--migrate]
"""

import argparse
import asyncio
from datetime import timedelta

from sqlmodel import select

from src.fieldops.core.config import get_settings
from src.fieldops.core.db import dispose_engine, get_session, run_migrations_async
from src.fieldops.core.logging import get_logger, setup_logging
from src.fieldops.core.security import hash_password
from src.fieldops.models import Customer, Job, JobStatus, Tenant, User, UserRole
from src.fieldops.models.base import utc_now

logger = get_logger(__name__)

DEMO_TENANT_NAME = "Default Company"

DEFAULT_STATUSES = [
    ("New", "#6366f1"),
    ("In Progress", "#f59e0b"),
    ("On Hold", "#ef4444"),
    ("Completed", "#22c55e"),
]

DEMO_USERS = [
    ("admin@fieldservice.com", "admin123", "Admin User", UserRole.ADMIN),
    ("worker@fieldservice.com", "worker123", "John Worker", UserRole.WORKER),
]


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Load demo data")
    parser.add_argument(
        "--migrate",
        action="store_true",
        help="Apply migrations before seeding",
    )
    return parser.parse_args()


async def seed() -> bool:
    """Insert the demo data set. Returns False if it already exists."""
    async with get_session() as session:
        existing = await session.execute(
            select(Tenant).where(Tenant.name == DEMO_TENANT_NAME).limit(1)
        )
        if existing.scalar_one_or_none() is not None:
            return False

        tenant = Tenant(name=DEMO_TENANT_NAME)
        session.add(tenant)
        await session.flush()

        users: dict[UserRole, User] = {}
        for email, password, name, role in DEMO_USERS:
            user = User(
                tenant_id=tenant.id,
                email=email,
                hashed_password=hash_password(password),
                name=name,
                role=role.value,
            )
            session.add(user)
            users[role] = user

        statuses = [
            JobStatus(tenant_id=tenant.id, name=name, color=color, order_index=index)
            for index, (name, color) in enumerate(DEFAULT_STATUSES)
        ]
        session.add_all(statuses)

        customer = Customer(
            tenant_id=tenant.id,
            name="Acme Corporation",
            email="contact@acme.com",
            phone="+1-555-123-4567",
            address="123 Main St, City, State 12345",
        )
        session.add(customer)
        # No relationships are mapped, so parents are flushed before the job row
        await session.flush()

        session.add(
            Job(
                tenant_id=tenant.id,
                customer_id=customer.id,
                assigned_worker_id=users[UserRole.WORKER].id,
                status_id=statuses[0].id,
                title="Initial Equipment Setup",
                description="Install and configure equipment at customer site.",
                scheduled_date=(utc_now() + timedelta(days=7)).date(),
            )
        )

        try:
            await session.commit()
        except Exception:
            await session.rollback()
            raise

        logger.info("Demo data created", tenant_id=str(tenant.id))
        return True


async def main() -> None:
    args = parse_args()
    settings = get_settings()
    setup_logging(settings.debug)

    if args.migrate:
        await run_migrations_async()

    try:
        if await seed():
            for email, password, _, role in DEMO_USERS:
                logger.info("Demo login", role=role.value, email=email, password=password)
        else:
            logger.info("Demo data already present, skipping")
    finally:
        await dispose_engine()


if __name__ == "__main__":
    asyncio.run(main())
