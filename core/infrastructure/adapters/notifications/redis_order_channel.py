"""
Redis Pub/Sub Order Channel.

Publishes order messages on Redis channels so every API instance (and the
socket gateway in front of the kitchen screens) sees them.
"""
import json
import logging
from typing import Any, Dict, Optional

import redis.asyncio as aioredis

from core.application.interfaces import IOrderChannel


logger = logging.getLogger(__name__)


class RedisOrderChannel(IOrderChannel):
    """
    Publishes JSON messages with Redis ``PUBLISH``.

    Pub/sub is fire-and-forget on the Redis side too: listeners that are
    not connected at publish time never see the message.
    """

    def __init__(
        self,
        redis_url: str = "redis://localhost:6379/0",
        client: Optional[aioredis.Redis] = None,
    ):
        """
        Initialize Redis Order Channel.

        Args:
            redis_url: Redis connection URL
            client: Pre-built client (tests, shared pools)
        """
        self.redis_url = redis_url
        self._redis_client: Optional[aioredis.Redis] = client

    async def connect(self) -> None:
        """Establish Redis connection."""
        if self._redis_client is None:
            try:
                self._redis_client = aioredis.from_url(
                    self.redis_url,
                    encoding="utf-8",
                    decode_responses=True,
                )
                await self._redis_client.ping()
                logger.info(f"✅ Connected to Redis: {self.redis_url}")
            except Exception as e:
                logger.error(f"Failed to connect to Redis: {e}")
                self._redis_client = None
                raise

    async def publish(self, channel: str, message: Dict[str, Any]) -> None:
        """
        Publish a message.

        Args:
            channel: Redis channel name
            message: JSON-ready payload
        """
        if self._redis_client is None:
            await self.connect()

        payload = json.dumps(message, default=str)
        receivers = await self._redis_client.publish(channel, payload)
        logger.debug(f"Published on {channel} to {receivers} receiver(s)")

    async def close(self) -> None:
        """Close Redis connection."""
        if self._redis_client is not None:
            await self._redis_client.aclose()
            self._redis_client = None
            logger.info("✅ Disconnected from Redis")
