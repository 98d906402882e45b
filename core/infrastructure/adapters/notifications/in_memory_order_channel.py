"""
In-Memory Order Channel.

Process-local implementation of the real-time order channel, used in
development and tests.
"""
import inspect
import logging
from collections import defaultdict
from typing import Any, Callable, DefaultDict, Dict, List, Tuple

from core.application.interfaces import IOrderChannel


logger = logging.getLogger(__name__)

Subscriber = Callable[[Dict[str, Any]], Any]


class InMemoryOrderChannel(IOrderChannel):
    """
    In-memory publish/subscribe keyed by channel name.

    Subscribers may be plain callables or coroutine functions. A failing
    subscriber is logged and does not stop delivery to the others.
    """

    def __init__(self):
        """Initialize channel with no subscribers."""
        self._subscribers: DefaultDict[str, List[Subscriber]] = defaultdict(list)
        self.published: List[Tuple[str, Dict[str, Any]]] = []

    def subscribe(self, channel: str, handler: Subscriber) -> None:
        """
        Subscribe to one channel.

        Args:
            channel: Channel name
            handler: Callback receiving each message
        """
        self._subscribers[channel].append(handler)
        logger.info(f"Registered subscriber {getattr(handler, '__name__', handler)!s} on {channel}")

    def unsubscribe(self, channel: str, handler: Subscriber) -> None:
        if handler in self._subscribers.get(channel, []):
            self._subscribers[channel].remove(handler)

    async def publish(self, channel: str, message: Dict[str, Any]) -> None:
        """Record the message and hand it to every subscriber of ``channel``."""
        self.published.append((channel, message))

        for subscriber in list(self._subscribers.get(channel, [])):
            try:
                if inspect.iscoroutinefunction(subscriber):
                    await subscriber(message)
                else:
                    subscriber(message)
            except Exception as e:
                logger.error(
                    f"Subscriber {getattr(subscriber, '__name__', subscriber)!s} failed: {e}",
                    exc_info=True,
                )

    def messages_for(self, channel: str) -> List[Dict[str, Any]]:
        """Messages published on one channel (for testing)."""
        return [message for name, message in self.published if name == channel]

    def clear(self) -> None:
        """Forget recorded messages (for testing)."""
        self.published.clear()
