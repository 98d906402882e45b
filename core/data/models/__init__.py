"""Database models."""

from .base import Base
from .catalog_model import CategoryModel, OrganizationModel, ProductModel
from .order_model import OrderModel

__all__ = ["Base", "CategoryModel", "OrderModel", "OrganizationModel", "ProductModel"]
