"""
Order Status Enum.

Single closed set of order states shared by domain, persistence and API.
"""
from enum import Enum
from typing import Dict, FrozenSet, Tuple


class OrderStatus(str, Enum):
    """Order lifecycle states."""

    WAITING = "WAITING"
    IN_PRODUCTION = "IN_PRODUCTION"
    DONE = "DONE"
    CANCELED = "CANCELED"

    @classmethod
    def progress_states(cls) -> Tuple["OrderStatus", ...]:
        """States reachable through the generic status update."""
        return (cls.WAITING, cls.IN_PRODUCTION, cls.DONE)

    @property
    def is_terminal(self) -> bool:
        return self is OrderStatus.CANCELED


def _progress_targets(current: OrderStatus) -> FrozenSet[OrderStatus]:
    return frozenset(s for s in OrderStatus.progress_states() if s is not current)


# Progress states may move freely between each other; CANCELED is terminal.
ORDER_STATUS_TRANSITIONS: Dict[OrderStatus, FrozenSet[OrderStatus]] = {
    OrderStatus.WAITING: _progress_targets(OrderStatus.WAITING),
    OrderStatus.IN_PRODUCTION: _progress_targets(OrderStatus.IN_PRODUCTION),
    OrderStatus.DONE: _progress_targets(OrderStatus.DONE),
    OrderStatus.CANCELED: frozenset(),
}


def can_transition(current: OrderStatus, target: OrderStatus) -> bool:
    """Check the transition table for ``current -> target``."""
    return target in ORDER_STATUS_TRANSITIONS[current]
