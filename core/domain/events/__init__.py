"""Domain events."""
from .base import DomainEvent
from .order_events import OrderCreatedEvent

__all__ = [
    "DomainEvent",
    "OrderCreatedEvent",
]
