"""Initial migration

Revision ID: 001
Revises:
Create Date: 2026-01-05 00:00:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa
import sqlmodel

from alembic import op

revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _entity_columns() -> list[sa.Column]:
    return [
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.Column("is_deleted", sa.Boolean(), nullable=False, server_default=sa.text("false")),
    ]


def _string(length: int) -> sqlmodel.sql.sqltypes.AutoString:
    return sqlmodel.sql.sqltypes.AutoString(length=length)


def upgrade() -> None:
    # 1. Tenants
    op.create_table(
        "tenants",
        *_entity_columns(),
        sa.Column("name", _string(255), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_tenants_is_deleted", "tenants", ["is_deleted"])

    # 2. Users (email unique across all tenants)
    op.create_table(
        "users",
        *_entity_columns(),
        sa.Column("tenant_id", sa.Uuid(), nullable=False),
        sa.Column("email", _string(255), nullable=False),
        sa.Column("hashed_password", _string(255), nullable=False),
        sa.Column("name", _string(255), nullable=False),
        sa.Column("role", _string(20), nullable=False, server_default="worker"),
        sa.ForeignKeyConstraint(["tenant_id"], ["tenants.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)
    op.create_index("ix_users_tenant_id", "users", ["tenant_id"])
    op.create_index("ix_users_is_deleted", "users", ["is_deleted"])

    # 3. Customers
    op.create_table(
        "customers",
        *_entity_columns(),
        sa.Column("tenant_id", sa.Uuid(), nullable=False),
        sa.Column("name", _string(255), nullable=False),
        sa.Column("email", _string(255), nullable=True),
        sa.Column("phone", _string(50), nullable=True),
        sa.Column("address", sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(["tenant_id"], ["tenants.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_customers_tenant_id", "customers", ["tenant_id"])
    op.create_index("ix_customers_name", "customers", ["name"])
    op.create_index("ix_customers_is_deleted", "customers", ["is_deleted"])

    # 4. Job statuses
    op.create_table(
        "job_statuses",
        *_entity_columns(),
        sa.Column("tenant_id", sa.Uuid(), nullable=False),
        sa.Column("name", _string(100), nullable=False),
        sa.Column("color", _string(20), nullable=False),
        sa.Column("order_index", sa.Integer(), nullable=False, server_default="0"),
        sa.ForeignKeyConstraint(["tenant_id"], ["tenants.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_job_statuses_tenant_id", "job_statuses", ["tenant_id"])
    op.create_index("ix_job_statuses_is_deleted", "job_statuses", ["is_deleted"])

    # 5. Jobs
    op.create_table(
        "jobs",
        *_entity_columns(),
        sa.Column("tenant_id", sa.Uuid(), nullable=False),
        sa.Column("customer_id", sa.Uuid(), nullable=False),
        sa.Column("assigned_worker_id", sa.Uuid(), nullable=True),
        sa.Column("status_id", sa.Uuid(), nullable=False),
        sa.Column("title", _string(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("scheduled_date", sa.Date(), nullable=True),
        sa.Column("is_archived", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("customer_access_token", _string(36), nullable=False),
        sa.ForeignKeyConstraint(["tenant_id"], ["tenants.id"]),
        sa.ForeignKeyConstraint(["customer_id"], ["customers.id"]),
        sa.ForeignKeyConstraint(["assigned_worker_id"], ["users.id"]),
        sa.ForeignKeyConstraint(["status_id"], ["job_statuses.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_jobs_tenant_id", "jobs", ["tenant_id"])
    op.create_index("ix_jobs_customer_id", "jobs", ["customer_id"])
    op.create_index("ix_jobs_assigned_worker_id", "jobs", ["assigned_worker_id"])
    op.create_index("ix_jobs_status_id", "jobs", ["status_id"])
    op.create_index("ix_jobs_is_deleted", "jobs", ["is_deleted"])
    op.create_index(
        "ix_jobs_customer_access_token", "jobs", ["customer_access_token"], unique=True
    )

    # 6. Tasks
    op.create_table(
        "tasks",
        *_entity_columns(),
        sa.Column("job_id", sa.Uuid(), nullable=False),
        sa.Column("title", _string(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("is_completed", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("completed_at", sa.DateTime(), nullable=True),
        sa.Column("completed_by", sa.Uuid(), nullable=True),
        sa.ForeignKeyConstraint(["job_id"], ["jobs.id"]),
        sa.ForeignKeyConstraint(["completed_by"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_tasks_job_id", "tasks", ["job_id"])
    op.create_index("ix_tasks_is_deleted", "tasks", ["is_deleted"])

    # 7. Attachments
    op.create_table(
        "job_attachments",
        *_entity_columns(),
        sa.Column("job_id", sa.Uuid(), nullable=False),
        sa.Column("uploaded_by", sa.Uuid(), nullable=False),
        sa.Column("file_name", _string(255), nullable=False),
        sa.Column("file_path", _string(500), nullable=False),
        sa.Column("file_size", sa.Integer(), nullable=False),
        sa.Column("mime_type", _string(100), nullable=False),
        sa.ForeignKeyConstraint(["job_id"], ["jobs.id"]),
        sa.ForeignKeyConstraint(["uploaded_by"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_job_attachments_job_id", "job_attachments", ["job_id"])
    op.create_index("ix_job_attachments_is_deleted", "job_attachments", ["is_deleted"])

    # 8. Signatures
    op.create_table(
        "job_signatures",
        *_entity_columns(),
        sa.Column("job_id", sa.Uuid(), nullable=False),
        sa.Column("signer_type", _string(20), nullable=False, server_default="customer"),
        sa.Column("signer_id", sa.Uuid(), nullable=True),
        sa.Column("signer_name", _string(255), nullable=False),
        sa.Column("signature_data", sa.Text(), nullable=False),
        sa.Column("signed_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["job_id"], ["jobs.id"]),
        sa.ForeignKeyConstraint(["signer_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_job_signatures_job_id", "job_signatures", ["job_id"])
    op.create_index("ix_job_signatures_is_deleted", "job_signatures", ["is_deleted"])


def downgrade() -> None:
    op.drop_table("job_signatures")
    op.drop_table("job_attachments")
    op.drop_table("tasks")
    op.drop_table("jobs")
    op.drop_table("job_statuses")
    op.drop_table("customers")
    op.drop_table("users")
    op.drop_table("tenants")
