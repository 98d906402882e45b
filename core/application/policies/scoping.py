"""
Tenant/User scoping checks.

Every order operation goes through these before reading or mutating
anything, so the not-found/conflict distinction stays the same everywhere.
An order of another tenant is reported exactly like a missing order.
"""
import logging

from core.domain.entities import Order, Organization
from core.domain.exceptions import ConflictError, NotFoundError
from core.domain.repositories import OrderRepository, OrganizationRepository
from core.domain.value_objects import Actor


logger = logging.getLogger(__name__)


class OrderScopePolicy:
    """Ownership verification for tenants, orders and actors."""

    def __init__(self, orders: OrderRepository, organizations: OrganizationRepository) -> None:
        self._orders = orders
        self._organizations = organizations

    async def require_organization(self, organization_id: str) -> Organization:
        """
        Raises:
            NotFoundError: tenant does not exist
        """
        organization = await self._organizations.get(organization_id)
        if organization is None:
            raise NotFoundError("Organization not found")
        return organization

    async def require_order_in_organization(self, order_id: str, organization_id: str) -> Order:
        """
        Raises:
            NotFoundError: order missing or scoped to another tenant
        """
        order = await self._orders.find_by_id(order_id)
        if order is None or order.organization_id != organization_id:
            if order is not None:
                logger.warning(f"Order {order_id} requested under foreign org {organization_id}")
            raise NotFoundError("Order not found")
        return order

    async def require_order_for_deletion(self, order_id: str, organization_id: str) -> Order:
        """
        Deletion names the tenant explicitly, so a foreign order is a conflict.

        Raises:
            NotFoundError: order missing
            ConflictError: order belongs to another tenant
        """
        order = await self._orders.find_by_id(order_id)
        if order is None:
            raise NotFoundError("Order not found")
        if order.organization_id != organization_id:
            raise ConflictError("Order is not linked with the organization")
        return order

    async def require_owner_standing(self, actor: Actor, organization_id: str) -> None:
        """
        OWNER actors may only act on tenants they own; other roles pass.

        Raises:
            ConflictError: OWNER actor does not own the tenant
        """
        if not actor.is_owner:
            return
        if not await self._organizations.is_owned_by(organization_id, actor.user_id):
            raise ConflictError("Owner is invalid")

    @staticmethod
    def ensure_placed_by(order: Order, user_id: str) -> Order:
        """
        Order-to-user check on an already loaded order.

        Raises:
            NotFoundError: order was placed by someone else
        """
        if order.user_id != user_id:
            raise NotFoundError("Order not found")
        return order
