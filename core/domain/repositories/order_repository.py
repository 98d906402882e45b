"""Repository interfaces for Order aggregate."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from ..entities.order import Order
from ..enums import OrderStatus


class OrderRepository(ABC):
    """Abstract repository for Order aggregate persistence."""

    @abstractmethod
    async def add(self, order: Order) -> None:
        """Persist a newly created order."""
        pass

    @abstractmethod
    async def find_by_id(self, order_id: str) -> Optional[Order]:
        """Retrieve order by identifier, canceled orders included.

        Returns:
            Order if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_organization(self, organization_id: str, offset: int, limit: int) -> List[Order]:
        """Orders of a tenant in creation order, ``limit`` rows from ``offset``."""
        pass

    @abstractmethod
    async def find_by_user(self, user_id: str, offset: int, limit: int) -> List[Order]:
        """Orders placed by a user in creation order, ``limit`` rows from ``offset``."""
        pass

    @abstractmethod
    async def find_created_since(
        self,
        organization_id: str,
        since: datetime,
        include_canceled: bool = False,
    ) -> List[Order]:
        """Orders of a tenant created at or after ``since``.

        Args:
            organization_id: Tenant identifier
            since: Lower bound on ``created_at`` (no upper bound)
            include_canceled: Also return soft-canceled orders
        """
        pass

    @abstractmethod
    async def update_status_if_changed(
        self,
        order_id: str,
        organization_id: str,
        status: OrderStatus,
    ) -> bool:
        """Single conditional write of ``status``.

        Only touches an active, non-canceled order of the tenant whose
        current status differs from ``status``.

        Returns:
            True if a row was updated
        """
        pass

    @abstractmethod
    async def soft_cancel(self, order_id: str, canceled_at: datetime) -> None:
        """Set CANCELED and stamp ``deleted_at``; the row is kept."""
        pass

    @abstractmethod
    async def delete(self, order_id: str) -> None:
        """Remove the order permanently."""
        pass

    @abstractmethod
    async def soft_cancel_created_since(
        self,
        organization_id: str,
        since: datetime,
        canceled_at: datetime,
    ) -> int:
        """Set-based soft cancel of every active order created since ``since``.

        Returns:
            Number of orders canceled
        """
        pass
