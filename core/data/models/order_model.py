"""SQLAlchemy ORM model for Order aggregate."""

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Index, Integer, Numeric, String

from core.domain.enums import OrderStatus

from .base import Base


class OrderModel(Base):
    """
    SQLAlchemy ORM model for orders table.

    Product snapshots live in the ``items`` JSON column rather than a join
    table: they are copies, not references to catalog rows.
    """

    __tablename__ = "orders"

    id = Column(String(36), primary_key=True)
    organization_id = Column(String(36), ForeignKey("organizations.id"), nullable=False)
    user_id = Column(String(36), nullable=False)
    table_label = Column(String(100), nullable=False)
    status = Column(String(20), nullable=False, default=OrderStatus.WAITING.value, index=True)
    quantity = Column(Integer, nullable=False)
    total_price = Column(Numeric(12, 2), nullable=False)
    currency = Column(String(3), nullable=False, default="BRL")
    items = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime, nullable=False)
    deleted_at = Column(DateTime, nullable=True)

    __table_args__ = (
        Index("ix_orders_organization_created", "organization_id", "created_at"),
        Index("ix_orders_user_created", "user_id", "created_at"),
    )
