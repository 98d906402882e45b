"""Domain layer - pure domain models and interfaces."""

from .entities import CatalogProduct, Order, Organization, ProductSnapshot
from .enums import OrderStatus, UserRole
from .exceptions import ConflictError, DomainError, NotFoundError, OrderValidationError
from .repositories import CatalogRepository, OrderRepository, OrganizationRepository
from .value_objects import Actor, ExecutionID, Money

__all__ = [
    "Actor",
    "CatalogProduct",
    "CatalogRepository",
    "ConflictError",
    "DomainError",
    "ExecutionID",
    "Money",
    "NotFoundError",
    "Order",
    "OrderRepository",
    "OrderStatus",
    "OrderValidationError",
    "Organization",
    "OrganizationRepository",
    "ProductSnapshot",
    "UserRole",
]
