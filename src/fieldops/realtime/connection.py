"""Live sockets bound to the principal that opened them."""

from typing import Any

from fastapi import WebSocket

from src.fieldops.core.security import Principal
from src.fieldops.models.enums import UserRole
from src.fieldops.realtime.broadcaster import Events

JOB_SNAPSHOT_EVENTS = frozenset({Events.JOB_CREATED, Events.JOB_UPDATED})


def admits_event(principal: Principal, event: str, data: Any) -> bool:
    """Whether ``principal`` may receive one event.

    Workers only see jobs assigned to them, so job snapshots of other jobs
    are withheld from them. Everything else reaches every member of the room.
    """
    if principal.role != UserRole.WORKER or event not in JOB_SNAPSHOT_EVENTS:
        return True
    return isinstance(data, dict) and data.get("assigned_worker_id") == str(principal.user_id)


class PrincipalConnection:
    def __init__(self, websocket: WebSocket, principal: Principal):
        self.websocket = websocket
        self.principal = principal

    async def send_json(self, data: Any) -> None:
        await self.websocket.send_json(data)

    def admits(self, event: str, data: Any) -> bool:
        return admits_event(self.principal, event, data)
