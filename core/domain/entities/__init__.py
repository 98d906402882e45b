"""Domain entities."""

from .catalog import CatalogProduct, Organization
from .order import Order, ProductSnapshot

__all__ = [
    "CatalogProduct",
    "Order",
    "Organization",
    "ProductSnapshot",
]
