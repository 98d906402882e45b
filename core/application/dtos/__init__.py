"""Application DTOs."""

from .order_dto import (
    CreateOrderRequest,
    MessageDTO,
    OrderDTO,
    OrderPageDTO,
    OrderProductRequest,
    ProductSnapshotDTO,
    UpdateOrderStatusRequest,
)

__all__ = [
    "CreateOrderRequest",
    "MessageDTO",
    "OrderDTO",
    "OrderPageDTO",
    "OrderProductRequest",
    "ProductSnapshotDTO",
    "UpdateOrderStatusRequest",
]
