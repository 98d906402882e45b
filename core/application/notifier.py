"""
Fire-and-forget order announcements.

Publishing runs in a background task so a slow or broken channel never
delays or fails the operation that produced the event.
"""
import asyncio
import logging
from typing import Set

from core.domain.events.base import DomainEvent

from .interfaces import IOrderChannel


logger = logging.getLogger(__name__)


class OrderNotifier:
    """Best-effort, non-blocking publisher of domain events to tenant channels."""

    def __init__(self, channel: IOrderChannel, channel_prefix: str = "orders") -> None:
        self._channel = channel
        self._prefix = channel_prefix
        self._pending: Set[asyncio.Task] = set()

    def channel_for(self, organization_id: str) -> str:
        """Channel name scoped to a tenant."""
        return f"{self._prefix}:{organization_id}"

    def announce(self, event: DomainEvent) -> None:
        """Schedule delivery of ``event`` on its tenant's channel and return at once."""
        channel = self.channel_for(event.organization_id)
        message = {"event": "order", "data": event.to_dict()}

        try:
            task = asyncio.get_running_loop().create_task(self._deliver(channel, message))
        except RuntimeError:
            logger.error(f"No running event loop, dropping {event.event_type} for {channel}")
            return

        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _deliver(self, channel: str, message: dict) -> None:
        try:
            await self._channel.publish(channel, message)
            logger.info(f"🔔 Published {message['data']['event_type']} on {channel}")
        except Exception as e:
            logger.error(f"Failed to publish on {channel}: {e}", exc_info=True)

    async def drain(self) -> None:
        """Wait for deliveries still in flight (shutdown, tests)."""
        if self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    @property
    def pending(self) -> int:
        return len(self._pending)
