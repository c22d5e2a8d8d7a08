"""Typed realtime events emitted after successful mutations.

Payloads are the fresh, fully joined resource, never a diff. Job snapshots
leave out the customer access token, which only admins hand out. Emission never
raises: a failure is logged and the HTTP response that triggered it is
unaffected. There is no replay; clients reconcile by refetching.
"""

from typing import Any
from uuid import UUID

from fastapi.encoders import jsonable_encoder
from pydantic import BaseModel

from src.fieldops.core.logging import get_logger
from src.fieldops.realtime.hub import RoomHub, job_room, tenant_room
from src.fieldops.realtime.relay import RedisRelay
from src.fieldops.schemas.attachment import AttachmentRead
from src.fieldops.schemas.job import JobFields, JobRead
from src.fieldops.schemas.signature import SignatureRead
from src.fieldops.schemas.task import TaskRead

logger = get_logger(__name__)


def _snapshot(job: JobRead) -> JobFields:
    return JobFields.model_validate(job.model_dump(exclude={"customer_access_token"}))


class Events:
    JOB_CREATED = "job:created"
    JOB_UPDATED = "job:updated"
    JOB_DELETED = "job:deleted"
    TASK_CREATED = "task:created"
    TASK_UPDATED = "task:updated"
    TASK_DELETED = "task:deleted"
    ATTACHMENT_CREATED = "attachment:created"
    ATTACHMENT_DELETED = "attachment:deleted"
    SIGNATURE_CREATED = "signature:created"
    SIGNATURE_DELETED = "signature:deleted"


class Broadcaster:
    def __init__(self, hub: RoomHub, relay: RedisRelay | None = None):
        self.hub = hub
        self.relay = relay

    async def emit(self, rooms: list[str], event: str, payload: BaseModel | dict[str, Any]) -> None:
        """Publish one event into each room, in order."""
        if isinstance(payload, BaseModel):
            data = payload.model_dump(mode="json")
        else:
            data = jsonable_encoder(payload)

        for room in rooms:
            try:
                if self.relay is not None:
                    await self.relay.publish(room, event, data)
                else:
                    await self.hub.publish(room, event, data)
            except Exception as e:
                logger.warning("Realtime broadcast failed", room=room, event=event, error=str(e))

    async def job_created(self, job: JobRead) -> None:
        await self.emit([tenant_room(job.tenant_id)], Events.JOB_CREATED, _snapshot(job))

    async def job_updated(self, job: JobRead) -> None:
        await self.emit(
            [tenant_room(job.tenant_id), job_room(job.id)], Events.JOB_UPDATED, _snapshot(job)
        )

    async def job_deleted(self, tenant_id: UUID, job_id: UUID) -> None:
        await self.emit(
            [tenant_room(tenant_id), job_room(job_id)], Events.JOB_DELETED, {"id": job_id}
        )

    async def task_created(self, task: TaskRead) -> None:
        await self.emit([job_room(task.job_id)], Events.TASK_CREATED, task)

    async def task_updated(self, task: TaskRead) -> None:
        await self.emit([job_room(task.job_id)], Events.TASK_UPDATED, task)

    async def task_deleted(self, job_id: UUID, task_id: UUID) -> None:
        await self.emit([job_room(job_id)], Events.TASK_DELETED, {"id": task_id})

    async def attachment_created(self, attachment: AttachmentRead) -> None:
        await self.emit([job_room(attachment.job_id)], Events.ATTACHMENT_CREATED, attachment)

    async def attachment_deleted(self, job_id: UUID, attachment_id: UUID) -> None:
        await self.emit([job_room(job_id)], Events.ATTACHMENT_DELETED, {"id": attachment_id})

    async def signature_created(self, signature: SignatureRead) -> None:
        await self.emit([job_room(signature.job_id)], Events.SIGNATURE_CREATED, signature)

    async def signature_deleted(self, job_id: UUID, signature_id: UUID) -> None:
        await self.emit([job_room(job_id)], Events.SIGNATURE_DELETED, {"id": signature_id})
