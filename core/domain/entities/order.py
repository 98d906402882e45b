"""
Order aggregate root.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
- fastapi
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Tuple
import uuid

from ..enums import OrderStatus
from ..events.base import DomainEvent
from ..value_objects import Money


@dataclass(frozen=True)
class ProductSnapshot:
    """
    Catalog data frozen into an order at creation time.

    Later catalog edits (price, discount, rename, category move, deletion)
    never reach an existing snapshot.
    """
    name: str
    image_url: str
    category_label: str
    unit_price: Money
    discount_applied: bool
    quantity: int

    def line_total(self) -> Money:
        """unit_price x quantity."""
        return self.unit_price * self.quantity

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "image_url": self.image_url,
            "category_label": self.category_label,
            "unit_price": str(self.unit_price.amount),
            "currency": self.unit_price.currency,
            "discount_applied": self.discount_applied,
            "quantity": self.quantity,
        }


@dataclass
class Order:
    """
    Order aggregate root.

    ``items``, ``quantity``, ``total_price``, ``organization_id``,
    ``user_id`` and ``created_at`` are fixed once the order is persisted.
    Only ``status`` and ``deleted_at`` move afterwards.
    """
    id: str
    organization_id: str
    user_id: str
    table_label: str
    quantity: int
    total_price: Money
    created_at: datetime
    items: Tuple[ProductSnapshot, ...] = ()
    status: OrderStatus = OrderStatus.WAITING
    deleted_at: Optional[datetime] = None

    _domain_events: List[DomainEvent] = field(default_factory=list, init=False, repr=False, compare=False)

    def __post_init__(self):
        # Items are stored as a tuple so the snapshot list cannot be mutated in place
        if not isinstance(self.items, tuple):
            self.items = tuple(self.items)

    @property
    def is_active(self) -> bool:
        """True while the order has not been canceled."""
        return self.deleted_at is None

    @property
    def is_canceled(self) -> bool:
        return self.status is OrderStatus.CANCELED

    @staticmethod
    def totals(items: Iterable[ProductSnapshot], currency: str = "BRL") -> Tuple[int, Money]:
        """
        Sum quantities and line totals.

        Returns:
            (quantity, total_price)
        """
        quantity = 0
        total_price = Money.zero(currency)
        for item in items:
            quantity += item.quantity
            total_price = total_price + item.line_total()
        return quantity, total_price

    @classmethod
    def create(
        cls,
        organization_id: str,
        user_id: str,
        table_label: str,
        items: Iterable[ProductSnapshot],
        created_at: datetime,
        currency: str = "BRL",
    ) -> "Order":
        """
        Factory method to create a new Order in WAITING.

        Totals are derived from the snapshots here and never recomputed.
        Records OrderCreatedEvent.
        """
        from ..events.order_events import OrderCreatedEvent

        snapshot = tuple(items)
        quantity, total_price = cls.totals(snapshot, currency)

        order = cls(
            id=str(uuid.uuid4()),
            organization_id=organization_id,
            user_id=user_id,
            table_label=table_label,
            quantity=quantity,
            total_price=total_price,
            created_at=created_at,
            items=snapshot,
            status=OrderStatus.WAITING,
            deleted_at=None,
        )
        order._record_event(
            OrderCreatedEvent(
                aggregate_id=order.id,
                organization_id=organization_id,
                order=order.to_dict(),
            )
        )
        return order

    # =========================================================================
    # EVENT COLLECTION
    # =========================================================================

    def get_domain_events(self) -> List[DomainEvent]:
        """Copy of events collected by this aggregate."""
        return list(self._domain_events)

    def clear_domain_events(self) -> None:
        """Clear collected events (after publishing)."""
        self._domain_events.clear()

    def _record_event(self, event: DomainEvent) -> None:
        self._domain_events.append(event)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize order state for notification payloads."""
        return {
            "id": self.id,
            "organization_id": self.organization_id,
            "user_id": self.user_id,
            "table_label": self.table_label,
            "status": self.status.value,
            "quantity": self.quantity,
            "total_price": str(self.total_price.amount),
            "currency": self.total_price.currency,
            "created_at": self.created_at.isoformat(),
            "deleted_at": self.deleted_at.isoformat() if self.deleted_at else None,
            "items": [item.to_dict() for item in self.items],
        }
