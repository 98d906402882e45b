"""
Catalog read models.

What the order core needs to know about tenants and products. Catalog
management itself lives outside the order core.
"""
from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Organization:
    """Tenant (restaurant account) and its owning actor."""
    id: str
    owner_id: str
    name: str


@dataclass(frozen=True)
class CatalogProduct:
    """Current catalog state of a product, joined with its category."""
    id: str
    organization_id: str
    name: str
    image_url: str
    price: Decimal
    discounted_price: Decimal
    discount: bool
    category_name: str
    category_icon: str

    def effective_price(self) -> Decimal:
        """Discounted price while the discount flag is on, base price otherwise."""
        return self.discounted_price if self.discount else self.price

    def category_label(self) -> str:
        """Category icon and name, e.g. "🍕 Pizzas"."""
        return f"{self.category_icon} {self.category_name}".strip()
