"""
Order Domain Events.

Events broadcast on the tenant's real-time channel.
"""
from dataclasses import dataclass, field
from typing import Any, Dict

from .base import DomainEvent


@dataclass
class OrderCreatedEvent(DomainEvent):
    """
    A new order was placed.

    Carries the serialized order so listeners (kitchen screens, waiters)
    can render it without a second fetch.
    """

    action: str = "create"
    order: Dict[str, Any] = field(default_factory=dict)
