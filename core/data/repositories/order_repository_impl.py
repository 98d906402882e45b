"""SQLAlchemy implementation of OrderRepository."""

from datetime import datetime
import logging
from typing import List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from core.domain.entities import Order
from core.domain.enums import OrderStatus
from core.domain.repositories import OrderRepository

from ..mappers import OrderMapper
from ..models import OrderModel


logger = logging.getLogger(__name__)


class SqlAlchemyOrderRepository(OrderRepository):
    """Concrete implementation of OrderRepository using SQLAlchemy.

    Listings are ordered by ``created_at`` then ``id`` so page boundaries
    stay put between calls.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with SQLAlchemy session.

        Args:
            session: SQLAlchemy async session
        """
        self._session = session

    async def add(self, order: Order) -> None:
        """Insert a new order row."""
        self._session.add(OrderMapper.to_persistence(order))
        await self._session.flush()  # Propagate to DB without committing

    async def find_by_id(self, order_id: str) -> Optional[Order]:
        """Retrieve order by unique identifier.

        Args:
            order_id: Order identifier

        Returns:
            Order if found, None otherwise
        """
        result = await self._session.execute(
            select(OrderModel)
            .where(OrderModel.id == order_id)
            .execution_options(populate_existing=True)
        )
        model = result.scalar_one_or_none()

        if not model:
            return None

        return OrderMapper.to_domain(model)

    async def find_by_organization(self, organization_id: str, offset: int, limit: int) -> List[Order]:
        result = await self._session.execute(
            select(OrderModel)
            .where(OrderModel.organization_id == organization_id)
            .order_by(OrderModel.created_at, OrderModel.id)
            .offset(offset)
            .limit(limit)
        )
        return [OrderMapper.to_domain(model) for model in result.scalars().all()]

    async def find_by_user(self, user_id: str, offset: int, limit: int) -> List[Order]:
        result = await self._session.execute(
            select(OrderModel)
            .where(OrderModel.user_id == user_id)
            .order_by(OrderModel.created_at, OrderModel.id)
            .offset(offset)
            .limit(limit)
        )
        return [OrderMapper.to_domain(model) for model in result.scalars().all()]

    async def find_created_since(
        self,
        organization_id: str,
        since: datetime,
        include_canceled: bool = False,
    ) -> List[Order]:
        stmt = select(OrderModel).where(
            OrderModel.organization_id == organization_id,
            OrderModel.created_at >= since,
        )
        if not include_canceled:
            stmt = stmt.where(OrderModel.deleted_at.is_(None))

        result = await self._session.execute(
            stmt.order_by(OrderModel.created_at, OrderModel.id)
        )
        return [OrderMapper.to_domain(model) for model in result.scalars().all()]

    async def update_status_if_changed(
        self,
        order_id: str,
        organization_id: str,
        status: OrderStatus,
    ) -> bool:
        """Conditional UPDATE; the WHERE clause re-checks state at write time."""
        result = await self._session.execute(
            update(OrderModel)
            .where(
                OrderModel.id == order_id,
                OrderModel.organization_id == organization_id,
                OrderModel.status != status.value,
                OrderModel.status != OrderStatus.CANCELED.value,
                OrderModel.deleted_at.is_(None),
            )
            .values(status=status.value)
            .execution_options(synchronize_session=False)
        )
        updated = result.rowcount > 0
        logger.debug(f"Status update {order_id} -> {status.value}: {'applied' if updated else 'skipped'}")
        return updated

    async def soft_cancel(self, order_id: str, canceled_at: datetime) -> None:
        await self._session.execute(
            update(OrderModel)
            .where(OrderModel.id == order_id)
            .values(status=OrderStatus.CANCELED.value, deleted_at=canceled_at)
            .execution_options(synchronize_session=False)
        )

    async def delete(self, order_id: str) -> None:
        await self._session.execute(
            delete(OrderModel)
            .where(OrderModel.id == order_id)
            .execution_options(synchronize_session=False)
        )

    async def soft_cancel_created_since(
        self,
        organization_id: str,
        since: datetime,
        canceled_at: datetime,
    ) -> int:
        result = await self._session.execute(
            update(OrderModel)
            .where(
                OrderModel.organization_id == organization_id,
                OrderModel.created_at >= since,
                OrderModel.deleted_at.is_(None),
            )
            .values(status=OrderStatus.CANCELED.value, deleted_at=canceled_at)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount
