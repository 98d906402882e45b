"""Application DTOs for Order operations."""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from core.domain.entities import Order, ProductSnapshot
from core.domain.enums import OrderStatus


class OrderProductRequest(BaseModel):
    """DTO for one cart line."""

    product_id: str = Field(..., min_length=1, description="Catalog product ID")
    quantity: int = Field(..., gt=0, description="Quantity ordered")

    model_config = {"frozen": True}


class CreateOrderRequest(BaseModel):
    """Request DTO for placing an order."""

    table: str = Field(..., min_length=1, description="Table label")
    products: List[OrderProductRequest] = Field(..., description="Cart lines")
    user_id: Optional[str] = Field(
        None, description="Customer placing the order; defaults to the calling actor"
    )

    model_config = {"frozen": True}


class UpdateOrderStatusRequest(BaseModel):
    """Request DTO for the generic status update."""

    status: OrderStatus = Field(..., description="Target status")

    model_config = {"frozen": True}

    @field_validator("status")
    @classmethod
    def status_must_be_progress_state(cls, value: OrderStatus) -> OrderStatus:
        if value not in OrderStatus.progress_states():
            raise ValueError("Use the cancel operation to cancel an order")
        return value


class ProductSnapshotDTO(BaseModel):
    """DTO for a frozen order line."""

    name: str = Field(..., description="Product name at order time")
    image_url: str = Field(..., description="Product image at order time")
    category_label: str = Field(..., description="Category icon and name at order time")
    unit_price: Decimal = Field(..., ge=0, description="Effective unit price")
    currency: str = Field(default="BRL", description="Currency code")
    discount_applied: bool = Field(..., description="Whether the discounted price was used")
    quantity: int = Field(..., gt=0, description="Quantity ordered")

    model_config = {"frozen": True}

    @classmethod
    def from_domain(cls, item: ProductSnapshot) -> "ProductSnapshotDTO":
        return cls(
            name=item.name,
            image_url=item.image_url,
            category_label=item.category_label,
            unit_price=item.unit_price.amount,
            currency=item.unit_price.currency,
            discount_applied=item.discount_applied,
            quantity=item.quantity,
        )


class OrderDTO(BaseModel):
    """Response DTO for order details."""

    id: str = Field(..., description="Order ID")
    organization_id: str = Field(..., description="Owning organization")
    user_id: str = Field(..., description="User who placed the order")
    table: str = Field(..., description="Table label")
    status: OrderStatus = Field(..., description="Order status")
    quantity: int = Field(..., ge=0, description="Total items")
    total_price: Decimal = Field(..., ge=0, description="Total order amount")
    currency: str = Field(default="BRL", description="Currency code")
    created_at: datetime = Field(..., description="Creation time")
    deleted_at: Optional[datetime] = Field(None, description="Cancellation time")
    products: List[ProductSnapshotDTO] = Field(default_factory=list, description="Frozen lines")

    model_config = {"frozen": True}

    @classmethod
    def from_domain(cls, order: Order) -> "OrderDTO":
        return cls(
            id=order.id,
            organization_id=order.organization_id,
            user_id=order.user_id,
            table=order.table_label,
            status=order.status,
            quantity=order.quantity,
            total_price=order.total_price.amount,
            currency=order.total_price.currency,
            created_at=order.created_at,
            deleted_at=order.deleted_at,
            products=[ProductSnapshotDTO.from_domain(item) for item in order.items],
        )


class OrderPageDTO(BaseModel):
    """DTO for a page of orders."""

    orders: List[OrderDTO] = Field(default_factory=list, description="Orders on this page")
    has_next: bool = Field(..., description="Whether another page exists")

    model_config = {"frozen": True}


class MessageDTO(BaseModel):
    """Plain acknowledgement."""

    message: str

    model_config = {"frozen": True}
