"""Process-local room registry for live connections."""

import asyncio
from typing import Any, Protocol
from uuid import UUID

from src.fieldops.core.logging import get_logger

logger = get_logger(__name__)


class Connection(Protocol):
    """A room member: receives JSON messages and may refuse individual events."""

    async def send_json(self, data: Any) -> None: ...

    def admits(self, event: str, data: Any) -> bool: ...


def tenant_room(tenant_id: UUID | str) -> str:
    return f"tenant:{tenant_id}"


def job_room(job_id: UUID | str) -> str:
    return f"job:{job_id}"


class RoomHub:
    """Maps room names to the connections currently in them.

    A connection may sit in any number of rooms. Delivery is best-effort:
    a failing send is logged and that connection is skipped. Each member is
    asked whether it admits an event before it is sent; a member refusing the
    snapshot of a job room's own job has lost access to that job and is
    removed from the room.
    """

    def __init__(self) -> None:
        self._rooms: dict[str, set[Connection]] = {}
        self._lock = asyncio.Lock()

    async def join(self, room: str, conn: Connection) -> None:
        async with self._lock:
            self._rooms.setdefault(room, set()).add(conn)

    async def leave(self, room: str, conn: Connection) -> None:
        async with self._lock:
            members = self._rooms.get(room)
            if members is not None:
                members.discard(conn)
                if not members:
                    self._rooms.pop(room, None)

    async def disconnect(self, conn: Connection) -> None:
        """Remove a connection from every room it joined."""
        async with self._lock:
            for room in [r for r, members in self._rooms.items() if conn in members]:
                self._rooms[room].discard(conn)
                if not self._rooms[room]:
                    del self._rooms[room]

    async def publish(self, room: str, event: str, data: Any) -> int:
        """Send ``{"event", "data"}`` to every member of ``room``.

        Returns the number of connections the message reached.
        """
        message = {"event": event, "data": data}
        async with self._lock:
            targets = list(self._rooms.get(room, ()))

        delivered = 0
        for conn in targets:
            if not conn.admits(event, data):
                if isinstance(data, dict) and room == job_room(data.get("id", "")):
                    await self.leave(room, conn)
                continue
            try:
                await conn.send_json(message)
                delivered += 1
            except Exception as e:
                logger.warning("Realtime send failed", room=room, event=event, error=str(e))
        return delivered

    def members(self, room: str) -> set[Connection]:
        return set(self._rooms.get(room, ()))

    def rooms(self) -> list[str]:
        return list(self._rooms)


# Global singleton hub
hub = RoomHub()
