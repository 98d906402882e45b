"""Application layer - services, policies, interfaces, and DTOs."""

from .dtos import (
    CreateOrderRequest,
    OrderDTO,
    OrderPageDTO,
    OrderProductRequest,
    UpdateOrderStatusRequest,
)
from .interfaces import IOrderChannel
from .notifier import OrderNotifier
from .pagination import Page, PaginationPolicy
from .policies import OrderScopePolicy, ProductSnapshotBuilder, RequestedProduct
from .services import OrderApplicationService

__all__ = [
    # DTOs
    "CreateOrderRequest",
    "OrderDTO",
    "OrderPageDTO",
    "OrderProductRequest",
    "UpdateOrderStatusRequest",
    # Services
    "OrderApplicationService",
    "OrderNotifier",
    # Policies
    "OrderScopePolicy",
    "Page",
    "PaginationPolicy",
    "ProductSnapshotBuilder",
    "RequestedProduct",
    # Interfaces
    "IOrderChannel",
]
