"""Redis pub/sub relay so every process delivers to its own connections."""

import asyncio
import json
from contextlib import suppress
from typing import Any

from redis.asyncio import Redis
from redis.asyncio.client import PubSub

from src.fieldops.core.logging import get_logger
from src.fieldops.realtime.hub import RoomHub

logger = get_logger(__name__)


class RedisRelay:
    """Fans published events out through one Redis channel.

    Publishing does not touch the local hub directly: the event comes back
    through the subscription like it does for every other process, which
    keeps per-room delivery order identical everywhere.
    """

    def __init__(self, hub: RoomHub, redis: Redis, channel: str):
        self.hub = hub
        self.redis = redis
        self.channel = channel
        self._pubsub: PubSub | None = None
        self._task: asyncio.Task[None] | None = None

    async def publish(self, room: str, event: str, data: Any) -> None:
        await self.redis.publish(
            self.channel,
            json.dumps({"room": room, "event": event, "data": data}),
        )

    async def start(self) -> None:
        self._pubsub = self.redis.pubsub(ignore_subscribe_messages=True)
        await self._pubsub.subscribe(self.channel)
        self._task = asyncio.create_task(self._listen(self._pubsub))
        logger.info("Realtime relay subscribed", channel=self.channel)

    async def stop(self) -> None:
        if self._task is not None:
            self._task.cancel()
            with suppress(asyncio.CancelledError):
                await self._task
            self._task = None
        if self._pubsub is not None:
            await self._pubsub.unsubscribe(self.channel)
            await self._pubsub.aclose()
            self._pubsub = None

    async def handle_message(self, raw: str | bytes) -> None:
        """Deliver one relayed message to local connections."""
        try:
            message = json.loads(raw)
            room, event, data = message["room"], message["event"], message["data"]
        except (ValueError, KeyError, TypeError) as e:
            logger.warning("Dropping malformed realtime message", error=str(e))
            return
        await self.hub.publish(room, event, data)

    async def _listen(self, pubsub: PubSub) -> None:
        while True:
            try:
                message = await pubsub.get_message(timeout=1.0)
                if message is not None and message.get("type") == "message":
                    await self.handle_message(message["data"])
            except asyncio.CancelledError:
                raise
            except Exception as e:
                logger.warning("Realtime relay receive failed", error=str(e))
                await asyncio.sleep(1.0)
