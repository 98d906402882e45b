"""Repository interface for catalog lookups used by order creation."""

from abc import ABC, abstractmethod
from typing import Iterable, List

from ..entities.catalog import CatalogProduct


class CatalogRepository(ABC):
    """Read-only access to a tenant's current product catalog."""

    @abstractmethod
    async def find_products(self, organization_id: str, product_ids: Iterable[str]) -> List[CatalogProduct]:
        """Batch lookup of products within one tenant.

        Ids that do not resolve inside the tenant are simply missing from
        the result; the caller decides how to react.
        """
        pass
