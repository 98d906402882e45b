"""SQLAlchemy repository implementations."""

from .catalog_repository_impl import SqlAlchemyCatalogRepository
from .order_repository_impl import SqlAlchemyOrderRepository
from .organization_repository_impl import SqlAlchemyOrganizationRepository

__all__ = [
    "SqlAlchemyCatalogRepository",
    "SqlAlchemyOrderRepository",
    "SqlAlchemyOrganizationRepository",
]
