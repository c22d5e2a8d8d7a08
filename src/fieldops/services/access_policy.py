"""Role-based access decisions for the job aggregate.

Everything here is a pure function of the caller and freshly loaded resource
state. Tenant scoping is not decided here: repositories put the tenant
predicate into every lookup, so a resource from another tenant never reaches
these checks and surfaces as NotFound instead.
"""

from collections.abc import Collection
from enum import Enum
from uuid import UUID

from src.fieldops.core.exceptions import Forbidden
from src.fieldops.core.security.principal import Principal
from src.fieldops.models.enums import UserRole
from src.fieldops.models.tenant import Attachment, Job


class Resource(str, Enum):
    JOB = "job"
    TASK = "task"
    ATTACHMENT = "attachment"
    SIGNATURE = "signature"


class Action(str, Enum):
    VIEW = "view"
    CREATE = "create"
    UPDATE = "update"
    COMPLETE = "complete"
    ARCHIVE = "archive"
    DELETE = "delete"


class Scope(str, Enum):
    """How much of the tenant a role reaches for one operation."""

    TENANT = "tenant"  # anything in the caller's tenant
    ASSIGNED = "assigned"  # only jobs assigned to the caller
    ASSIGNED_OWN = "assigned_own"  # assigned jobs, and only records the caller created


# Absent entries deny. The customer role has no entries at all.
RULES: dict[tuple[Resource, Action], dict[UserRole, Scope]] = {
    (Resource.JOB, Action.VIEW): {UserRole.ADMIN: Scope.TENANT, UserRole.WORKER: Scope.ASSIGNED},
    (Resource.JOB, Action.CREATE): {UserRole.ADMIN: Scope.TENANT},
    (Resource.JOB, Action.UPDATE): {UserRole.ADMIN: Scope.TENANT, UserRole.WORKER: Scope.ASSIGNED},
    (Resource.JOB, Action.ARCHIVE): {UserRole.ADMIN: Scope.TENANT},
    (Resource.JOB, Action.DELETE): {UserRole.ADMIN: Scope.TENANT},
    (Resource.TASK, Action.VIEW): {UserRole.ADMIN: Scope.TENANT, UserRole.WORKER: Scope.ASSIGNED},
    (Resource.TASK, Action.CREATE): {UserRole.ADMIN: Scope.TENANT},
    (Resource.TASK, Action.UPDATE): {UserRole.ADMIN: Scope.TENANT},
    (Resource.TASK, Action.COMPLETE): {
        UserRole.ADMIN: Scope.TENANT,
        UserRole.WORKER: Scope.ASSIGNED,
    },
    (Resource.TASK, Action.DELETE): {UserRole.ADMIN: Scope.TENANT},
    (Resource.ATTACHMENT, Action.VIEW): {
        UserRole.ADMIN: Scope.TENANT,
        UserRole.WORKER: Scope.ASSIGNED,
    },
    (Resource.ATTACHMENT, Action.CREATE): {
        UserRole.ADMIN: Scope.TENANT,
        UserRole.WORKER: Scope.ASSIGNED,
    },
    (Resource.ATTACHMENT, Action.DELETE): {
        UserRole.ADMIN: Scope.TENANT,
        UserRole.WORKER: Scope.ASSIGNED_OWN,
    },
    (Resource.SIGNATURE, Action.VIEW): {
        UserRole.ADMIN: Scope.TENANT,
        UserRole.WORKER: Scope.ASSIGNED,
    },
    (Resource.SIGNATURE, Action.CREATE): {
        UserRole.ADMIN: Scope.TENANT,
        UserRole.WORKER: Scope.ASSIGNED,
    },
    (Resource.SIGNATURE, Action.DELETE): {UserRole.ADMIN: Scope.TENANT},
}

# Fields each role may carry in an update payload, per resource
UPDATABLE_FIELDS: dict[Resource, dict[UserRole, frozenset[str]]] = {
    Resource.JOB: {
        UserRole.ADMIN: frozenset(
            {
                "customer_id",
                "status_id",
                "title",
                "assigned_worker_id",
                "description",
                "scheduled_date",
            }
        ),
        UserRole.WORKER: frozenset({"status_id"}),
    },
    Resource.TASK: {
        UserRole.ADMIN: frozenset({"title", "description"}),
    },
}


def is_staff(principal: Principal) -> bool:
    """Admins and workers use the API; the customer role does not."""
    return principal.role in (UserRole.ADMIN, UserRole.WORKER)


def is_allowed(
    principal: Principal,
    resource: Resource,
    action: Action,
    job: Job | None = None,
    created_by: UUID | None = None,
) -> bool:
    """Decide one operation.

    Args:
        principal: The caller.
        resource: Kind of record being acted on.
        action: What the caller wants to do.
        job: The (parent) job, required for any scope narrower than the tenant.
        created_by: Creator of the record, required for ASSIGNED_OWN.
    """
    scope = RULES.get((resource, action), {}).get(principal.role)
    if scope is None:
        return False
    if scope is Scope.TENANT:
        return True

    assigned = job is not None and job.assigned_worker_id == principal.user_id
    if scope is Scope.ASSIGNED:
        return assigned
    return assigned and created_by == principal.user_id


def authorize(
    principal: Principal,
    resource: Resource,
    action: Action,
    job: Job | None = None,
    created_by: UUID | None = None,
) -> None:
    """Raise Forbidden unless the operation is allowed."""
    if not is_allowed(principal, resource, action, job=job, created_by=created_by):
        raise Forbidden()


def authorize_update_fields(
    principal: Principal,
    resource: Resource,
    fields: set[str],
    known: Collection[str] | None = None,
) -> None:
    """Reject the whole update if any present field is outside the role's allow-list.

    Runs on the raw payload keys, before the payload is validated. A role
    allowed only some fields is refused whatever else it sent. When ``known``
    names the updatable fields and the role may change all of them, keys
    outside ``known`` are left for validation to reject.
    """
    allowed = UPDATABLE_FIELDS.get(resource, {}).get(principal.role, frozenset())
    denied = fields - allowed
    if known is not None and allowed.issuperset(known):
        denied &= set(known)
    if denied:
        raise Forbidden(f"Not allowed to update: {', '.join(sorted(denied))}")


def authorize_attachment_delete(principal: Principal, job: Job, attachment: Attachment) -> None:
    authorize(
        principal,
        Resource.ATTACHMENT,
        Action.DELETE,
        job=job,
        created_by=attachment.uploaded_by,
    )
