"""Data layer - infrastructure persistence and mapping."""

from .mappers import CatalogProductMapper, OrderMapper, OrganizationMapper, ProductSnapshotMapper
from .models import Base, CategoryModel, OrderModel, OrganizationModel, ProductModel
from .repositories import (
    SqlAlchemyCatalogRepository,
    SqlAlchemyOrderRepository,
    SqlAlchemyOrganizationRepository,
)
from .uow import UnitOfWork, create_uow

__all__ = [
    "Base",
    "CatalogProductMapper",
    "CategoryModel",
    "create_uow",
    "OrderMapper",
    "OrderModel",
    "OrganizationMapper",
    "OrganizationModel",
    "ProductModel",
    "ProductSnapshotMapper",
    "SqlAlchemyCatalogRepository",
    "SqlAlchemyOrderRepository",
    "SqlAlchemyOrganizationRepository",
    "UnitOfWork",
]
