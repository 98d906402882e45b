"""Domain enums."""

from .order_status import ORDER_STATUS_TRANSITIONS, OrderStatus, can_transition
from .user_role import UserRole

__all__ = [
    "ORDER_STATUS_TRANSITIONS",
    "OrderStatus",
    "UserRole",
    "can_transition",
]
