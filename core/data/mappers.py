"""Static mappers for domain entities ↔ database models."""

from decimal import Decimal
from typing import Any, Dict

from core.domain.entities import CatalogProduct, Order, Organization, ProductSnapshot
from core.domain.enums import OrderStatus
from core.domain.value_objects import Money

from .models import OrderModel, OrganizationModel, ProductModel


class ProductSnapshotMapper:
    """Static mapper for ProductSnapshot ↔ JSON element of ``orders.items``."""

    @staticmethod
    def to_domain(data: Dict[str, Any]) -> ProductSnapshot:
        """Convert a stored JSON element to a snapshot.

        Args:
            data: One element of OrderModel.items

        Returns:
            ProductSnapshot value object
        """
        return ProductSnapshot(
            name=data["name"],
            image_url=data.get("image_url", ""),
            category_label=data.get("category_label", ""),
            unit_price=Money(
                amount=Decimal(data["unit_price"]),
                currency=data.get("currency", "BRL"),
            ),
            discount_applied=bool(data.get("discount_applied", False)),
            quantity=int(data["quantity"]),
        )

    @staticmethod
    def to_persistence(entity: ProductSnapshot) -> Dict[str, Any]:
        """Convert a snapshot to a JSON element (money kept as string)."""
        return entity.to_dict()


class OrderMapper:
    """Static mapper for Order ↔ OrderModel transformation."""

    @staticmethod
    def to_domain(model: OrderModel) -> Order:
        """Convert ORM model to domain aggregate.

        Args:
            model: OrderModel instance

        Returns:
            Order domain aggregate
        """
        return Order(
            id=model.id,
            organization_id=model.organization_id,
            user_id=model.user_id,
            table_label=model.table_label,
            quantity=model.quantity,
            total_price=Money(
                amount=Decimal(str(model.total_price)),
                currency=model.currency,
            ),
            created_at=model.created_at,
            items=tuple(ProductSnapshotMapper.to_domain(item) for item in (model.items or [])),
            status=OrderStatus(model.status),
            deleted_at=model.deleted_at,
        )

    @staticmethod
    def to_persistence(entity: Order) -> OrderModel:
        """Convert domain aggregate to ORM model.

        Args:
            entity: Order domain aggregate

        Returns:
            OrderModel instance
        """
        return OrderModel(
            id=entity.id,
            organization_id=entity.organization_id,
            user_id=entity.user_id,
            table_label=entity.table_label,
            status=entity.status.value,
            quantity=entity.quantity,
            total_price=entity.total_price.amount,
            currency=entity.total_price.currency,
            items=[ProductSnapshotMapper.to_persistence(item) for item in entity.items],
            created_at=entity.created_at,
            deleted_at=entity.deleted_at,
        )


class CatalogProductMapper:
    """Static mapper for ProductModel (joined with its category) → CatalogProduct."""

    @staticmethod
    def to_domain(model: ProductModel) -> CatalogProduct:
        category = model.category
        return CatalogProduct(
            id=model.id,
            organization_id=model.organization_id,
            name=model.name,
            image_url=model.image_url or "",
            price=Decimal(str(model.price)),
            discounted_price=Decimal(str(model.discounted_price or 0)),
            discount=bool(model.discount),
            category_name=category.name if category else "",
            category_icon=category.icon if category else "",
        )


class OrganizationMapper:
    """Static mapper for OrganizationModel → Organization."""

    @staticmethod
    def to_domain(model: OrganizationModel) -> Organization:
        return Organization(id=model.id, owner_id=model.owner_id, name=model.name)
