"""Notification adapters.

Keep this package import-light: the Redis-backed channel is imported lazily
by ``build_order_channel`` so the in-memory backend works without a Redis
server around.
"""
import logging

from core.application.interfaces import IOrderChannel
from core.settings.modules import NotificationSettings

from .in_memory_order_channel import InMemoryOrderChannel


logger = logging.getLogger(__name__)


def build_order_channel(settings: NotificationSettings) -> IOrderChannel:
    """Create the channel selected by ``NOTIFY_BACKEND``."""
    if settings.backend == "redis":
        from .redis_order_channel import RedisOrderChannel

        logger.info(f"Using RedisOrderChannel ({settings.redis_url})")
        return RedisOrderChannel(redis_url=settings.redis_url)

    logger.info("Using InMemoryOrderChannel")
    return InMemoryOrderChannel()


__all__ = ["InMemoryOrderChannel", "build_order_channel"]
