"""
Base Domain Event.

All domain events inherit from this base class.
"""
from dataclasses import dataclass, field, fields
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Dict
import uuid


_METADATA_FIELDS = (
    "event_id",
    "event_type",
    "aggregate_id",
    "aggregate_type",
    "organization_id",
    "occurred_at",
)


def _serialize(value: Any) -> Any:
    if isinstance(value, Decimal):
        # Decimal as string keeps JSON payloads exact
        return str(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, dict):
        return {k: _serialize(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_serialize(v) for v in value]
    return value


@dataclass
class DomainEvent:
    """
    Base class for all domain events.

    Events are immutable records of things that have happened to an
    aggregate. They are what the notification channel broadcasts.
    """

    event_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    event_type: str = field(init=False, default="")

    aggregate_id: str = ""
    aggregate_type: str = field(init=False, default="")

    # Tenant the event is scoped to
    organization_id: str = ""

    occurred_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        """Set event type and aggregate type from class name."""
        self.event_type = self.__class__.__name__
        self.aggregate_type = self._get_aggregate_type()

    def _get_aggregate_type(self) -> str:
        """
        Extract aggregate type from event type.

        Example: OrderCreatedEvent -> Order
        """
        event_name = self.__class__.__name__
        if event_name.endswith("Event"):
            event_name = event_name[:-5]

        for i, char in enumerate(event_name):
            if i > 0 and char.isupper():
                return event_name[:i]

        return event_name

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert event to a JSON-ready dictionary.

        Returns:
            Dictionary representation of event
        """
        return {
            "event_id": self.event_id,
            "event_type": self.event_type,
            "aggregate_id": self.aggregate_id,
            "aggregate_type": self.aggregate_type,
            "organization_id": self.organization_id,
            "occurred_at": self.occurred_at.isoformat(),
            "data": self._get_event_data(),
        }

    def _get_event_data(self) -> Dict[str, Any]:
        """Event-specific payload (every non-metadata field)."""
        return {
            f.name: _serialize(getattr(self, f.name))
            for f in fields(self)
            if f.name not in _METADATA_FIELDS
        }
