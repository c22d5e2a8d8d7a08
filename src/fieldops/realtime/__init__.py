"""Room-scoped realtime fan-out of job changes."""

from src.fieldops.realtime.broadcaster import Broadcaster, Events
from src.fieldops.realtime.connection import PrincipalConnection, admits_event
from src.fieldops.realtime.hub import Connection, RoomHub, hub, job_room, tenant_room
from src.fieldops.realtime.relay import RedisRelay

# Process-wide broadcaster; the lifespan attaches a relay when Redis is available
broadcaster = Broadcaster(hub)


def get_broadcaster() -> Broadcaster:
    return broadcaster


__all__ = [
    "Broadcaster",
    "Connection",
    "Events",
    "PrincipalConnection",
    "RedisRelay",
    "RoomHub",
    "admits_event",
    "broadcaster",
    "get_broadcaster",
    "hub",
    "job_room",
    "tenant_room",
]
