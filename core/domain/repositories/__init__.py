"""Repository interfaces."""

from .catalog_repository import CatalogRepository
from .order_repository import OrderRepository
from .organization_repository import OrganizationRepository

__all__ = [
    "CatalogRepository",
    "OrderRepository",
    "OrganizationRepository",
]
