"""
Product Snapshot Builder.

Turns a cart of (product id, quantity) pairs into snapshot records frozen
from the tenant's current catalog.
"""
from collections import OrderedDict
from dataclasses import dataclass
import logging
from typing import Dict, List, Sequence

from core.domain.entities import CatalogProduct, ProductSnapshot
from core.domain.exceptions import OrderValidationError
from core.domain.repositories import CatalogRepository
from core.domain.value_objects import Money


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequestedProduct:
    """One cart line as sent by the caller."""
    product_id: str
    quantity: int


class ProductSnapshotBuilder:
    """
    Resolves requested products against the catalog and freezes them.

    Rules:
    - the cart must not be empty
    - every quantity must be positive
    - repeated product ids are merged into one line (quantities summed)
    - every id must resolve inside the tenant, otherwise the whole
      request is rejected
    - lines come back in the caller's order, matched by id
    """

    def __init__(self, catalog: CatalogRepository, currency: str = "BRL") -> None:
        self._catalog = catalog
        self._currency = currency

    async def build(
        self,
        organization_id: str,
        requested: Sequence[RequestedProduct],
    ) -> List[ProductSnapshot]:
        """
        Resolve and snapshot the requested products.

        Raises:
            OrderValidationError: empty cart, bad quantity or unresolved ids
        """
        quantities = self.merge_quantities(requested)

        products = await self._catalog.find_products(organization_id, list(quantities))
        by_id: Dict[str, CatalogProduct] = {p.id: p for p in products}

        missing = [product_id for product_id in quantities if product_id not in by_id]
        if missing:
            logger.info(
                f"Rejecting order for org {organization_id}: "
                f"{len(missing)} of {len(quantities)} product(s) not in catalog"
            )
            raise OrderValidationError(
                f"Products not found in organization catalog: {', '.join(missing)}"
            )

        return [
            self.snapshot(by_id[product_id], quantity)
            for product_id, quantity in quantities.items()
        ]

    @staticmethod
    def merge_quantities(requested: Sequence[RequestedProduct]) -> "OrderedDict[str, int]":
        """Validate the cart and collapse repeated ids, keeping first-seen order."""
        if not requested:
            raise OrderValidationError("Products are required")

        quantities: "OrderedDict[str, int]" = OrderedDict()
        for line in requested:
            if line.quantity <= 0:
                raise OrderValidationError(
                    f"Quantity must be positive for product {line.product_id}"
                )
            quantities[line.product_id] = quantities.get(line.product_id, 0) + line.quantity
        return quantities

    def snapshot(self, product: CatalogProduct, quantity: int) -> ProductSnapshot:
        """Freeze one catalog product."""
        return ProductSnapshot(
            name=product.name,
            image_url=product.image_url,
            category_label=product.category_label(),
            unit_price=Money(amount=product.effective_price(), currency=self._currency),
            discount_applied=product.discount,
            quantity=quantity,
        )
