"""Application layer interfaces."""
from abc import ABC, abstractmethod
from typing import Any, Dict


class IOrderChannel(ABC):
    """
    Interface for the real-time order channel.

    Delivers messages to listeners of a tenant-scoped channel (kitchen
    screens, waiter apps). Delivery is best-effort.
    """

    @abstractmethod
    async def publish(self, channel: str, message: Dict[str, Any]) -> None:
        """
        Publish a message on a channel.

        Args:
            channel: Channel name, e.g. "orders:<organization_id>"
            message: JSON-ready payload
        """
        pass

    async def close(self) -> None:
        """Release connections held by the channel."""
        # Default implementation - can be overridden
        pass


__all__ = ["IOrderChannel"]
