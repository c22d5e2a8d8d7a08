"""Websocket endpoint for room-scoped live updates.

A connection authenticates with its access credential in the ``token`` query
parameter, joins its tenant room immediately, and then sends
``{"event": ..., "data": ...}`` messages to enter or leave job rooms::

    {"event": "join-job", "data": "<job id>"}
    {"event": "leave-job", "data": {"jobId": "<job id>"}}
    {"event": "ping"}

Joining a job room applies the same visibility rules as reading the job.
"""

import json
from typing import Any
from uuid import UUID

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from src.fieldops.api.dependencies import BroadcasterDep, SessionFactory, resolve_access_token
from src.fieldops.core.exceptions import AppError
from src.fieldops.core.logging import get_logger
from src.fieldops.core.security import Principal
from src.fieldops.realtime import Connection, PrincipalConnection, RoomHub, job_room, tenant_room
from src.fieldops.repositories.tenant import JobRepository
from src.fieldops.services.access_policy import Action, Resource, is_allowed, is_staff
from src.fieldops.services.job_service import load_live_job

logger = get_logger(__name__)

router = APIRouter(tags=["realtime"])

# Application-defined close codes mirroring 401 and 403
CLOSE_UNAUTHENTICATED = 4401
CLOSE_FORBIDDEN = 4403


def _job_id_from(data: Any) -> UUID | None:
    if isinstance(data, dict):
        data = data.get("jobId") or data.get("job_id")
    try:
        return UUID(str(data))
    except ValueError:
        return None


async def _can_view_job(
    session_factory: SessionFactory, principal: Principal, job_id: UUID
) -> bool:
    async with session_factory() as session:
        try:
            job = await load_live_job(JobRepository(session), principal, job_id)
        except AppError:
            return False
        return is_allowed(principal, Resource.JOB, Action.VIEW, job=job)


async def _handle_message(
    conn: Connection,
    hub: RoomHub,
    session_factory: SessionFactory,
    principal: Principal,
    raw: str,
) -> None:
    try:
        message = json.loads(raw)
    except json.JSONDecodeError:
        message = None
    if not isinstance(message, dict):
        await conn.send_json({"event": "error", "data": {"message": "Malformed message"}})
        return

    event = message.get("event")
    data = message.get("data")

    if event == "ping":
        await conn.send_json({"event": "pong", "data": None})
    elif event == "join-tenant":
        room = tenant_room(principal.tenant_id)
        await hub.join(room, conn)
        await conn.send_json({"event": "joined", "data": {"room": room}})
    elif event in ("join-job", "leave-job"):
        job_id = _job_id_from(data)
        if job_id is None:
            await conn.send_json({"event": "error", "data": {"message": "Invalid job id"}})
            return
        room = job_room(job_id)
        if event == "leave-job":
            await hub.leave(room, conn)
            await conn.send_json({"event": "left", "data": {"room": room}})
        elif await _can_view_job(session_factory, principal, job_id):
            await hub.join(room, conn)
            await conn.send_json({"event": "joined", "data": {"room": room}})
        else:
            await conn.send_json({"event": "error", "data": {"message": "Job not found"}})
    else:
        await conn.send_json({"event": "error", "data": {"message": "Unknown event"}})


@router.websocket("/ws")
async def realtime_socket(
    websocket: WebSocket,
    broadcaster: BroadcasterDep,
    session_factory: SessionFactory,
    token: str | None = None,
) -> None:
    await websocket.accept()
    try:
        principal = resolve_access_token(token)
    except AppError:
        await websocket.close(code=CLOSE_UNAUTHENTICATED)
        return
    if not is_staff(principal):
        await websocket.close(code=CLOSE_FORBIDDEN)
        return

    hub = broadcaster.hub
    conn = PrincipalConnection(websocket, principal)
    await hub.join(tenant_room(principal.tenant_id), conn)
    logger.info("Realtime connection opened", user_id=str(principal.user_id))

    try:
        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                break
            # Binary frames carry nothing this protocol understands
            if message.get("text") is None:
                continue
            await _handle_message(conn, hub, session_factory, principal, message["text"])
    except WebSocketDisconnect:
        pass
    finally:
        await hub.disconnect(conn)
        logger.info("Realtime connection closed", user_id=str(principal.user_id))
