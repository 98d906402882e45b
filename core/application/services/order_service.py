"""Application service for Order operations."""

from dataclasses import replace
from datetime import datetime
import logging
from typing import Callable, List, Optional, Sequence

from sqlalchemy.ext.asyncio import async_sessionmaker

from core.application.notifier import OrderNotifier
from core.application.pagination import Page, PaginationPolicy
from core.application.policies import OrderScopePolicy, ProductSnapshotBuilder, RequestedProduct
from core.data.uow import UnitOfWork, create_uow
from core.domain.entities import Order
from core.domain.enums import OrderStatus, can_transition
from core.domain.exceptions import ConflictError, OrderValidationError
from core.domain.value_objects import Actor


logger = logging.getLogger(__name__)


def start_of_day(now: datetime) -> datetime:
    """Local midnight of the day containing ``now``."""
    return now.replace(hour=0, minute=0, second=0, microsecond=0)


class OrderApplicationService:
    """
    Application service for the order lifecycle.

    Responsibilities:
    - Run scoping checks before any read or mutation
    - Snapshot the catalog when an order is created
    - Drive the status state machine
    - Handle transactions via UoW (one atomic write per operation)
    - Announce new orders on the tenant channel, best-effort
    """

    def __init__(
        self,
        session_factory: async_sessionmaker,
        notifier: OrderNotifier,
        pagination: Optional[PaginationPolicy] = None,
        currency: str = "BRL",
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """Initialize order application service.

        Args:
            session_factory: SQLAlchemy async session factory
            notifier: Publisher for the tenant real-time channel
            pagination: Paging policy for order listings (25 per page by default)
            currency: Currency of catalog prices
            clock: Source of "now" (server local time)
        """
        self._session_factory = session_factory
        self._notifier = notifier
        self._pagination = pagination or PaginationPolicy()
        self._currency = currency
        self._clock = clock

    def _scope(self, uow: UnitOfWork) -> OrderScopePolicy:
        return OrderScopePolicy(uow.orders, uow.organizations)

    # =========================================================================
    # CREATE
    # =========================================================================

    async def create_order(
        self,
        organization_id: str,
        user_id: str,
        table: str,
        products: Sequence[RequestedProduct],
    ) -> Order:
        """Place a new order from a cart of product references.

        Args:
            organization_id: Tenant receiving the order
            user_id: Actor placing the order
            table: Table label
            products: Cart lines (product id, quantity)

        Returns:
            The persisted order in WAITING

        Raises:
            OrderValidationError: empty cart or products outside the tenant catalog
            NotFoundError: tenant does not exist
        """
        if not products:
            raise OrderValidationError("Products are required")

        uow = create_uow(self._session_factory)
        async with uow:
            await self._scope(uow).require_organization(organization_id)

            builder = ProductSnapshotBuilder(uow.catalog, currency=self._currency)
            items = await builder.build(organization_id, products)

            order = Order.create(
                organization_id=organization_id,
                user_id=user_id,
                table_label=table,
                items=items,
                created_at=self._clock(),
                currency=self._currency,
            )
            await uow.orders.add(order)
            await uow.commit()

            logger.info(
                f"[{uow.execution_id}] Created order {order.id} for org {organization_id} "
                f"({order.quantity} item(s), total {order.total_price})"
            )

        for event in order.get_domain_events():
            self._notifier.announce(event)
        order.clear_domain_events()

        return order

    # =========================================================================
    # READ
    # =========================================================================

    async def get_order(
        self,
        order_id: str,
        organization_id: str,
        actor: Optional[Actor] = None,
    ) -> Order:
        """Get one order of the tenant.

        A CLIENT actor only sees orders they placed.

        Raises:
            NotFoundError: order missing, foreign to the tenant, or to the client
        """
        uow = create_uow(self._session_factory)
        async with uow:
            scope = self._scope(uow)
            order = await scope.require_order_in_organization(order_id, organization_id)
            if actor is not None and actor.is_client:
                scope.ensure_placed_by(order, actor.user_id)
            return order

    async def list_organization_orders(self, organization_id: str, page: Optional[int] = 0) -> Page[Order]:
        """Paginated order history of a tenant.

        Raises:
            NotFoundError: tenant does not exist
        """
        offset, limit = self._pagination.window(page)
        uow = create_uow(self._session_factory)
        async with uow:
            await self._scope(uow).require_organization(organization_id)
            rows = await uow.orders.find_by_organization(organization_id, offset, limit)
        return self._pagination.build_page(rows)

    async def list_user_orders(self, user_id: str, page: Optional[int] = 0) -> Page[Order]:
        """Paginated order history of a user."""
        offset, limit = self._pagination.window(page)
        uow = create_uow(self._session_factory)
        async with uow:
            rows = await uow.orders.find_by_user(user_id, offset, limit)
        return self._pagination.build_page(rows)

    async def list_today_orders(
        self,
        actor: Actor,
        organization_id: str,
        include_canceled: bool = False,
    ) -> List[Order]:
        """Orders created since local midnight.

        Args:
            actor: Caller; an OWNER must own the tenant
            organization_id: Tenant
            include_canceled: Also return soft-canceled orders

        Raises:
            NotFoundError: tenant does not exist
            ConflictError: OWNER actor does not own the tenant
        """
        uow = create_uow(self._session_factory)
        async with uow:
            scope = self._scope(uow)
            await scope.require_organization(organization_id)
            await scope.require_owner_standing(actor, organization_id)

            since = start_of_day(self._clock())
            return await uow.orders.find_created_since(
                organization_id, since, include_canceled=include_canceled
            )

    # =========================================================================
    # MUTATIONS
    # =========================================================================

    async def update_order_status(
        self,
        order_id: str,
        organization_id: str,
        status: OrderStatus,
    ) -> Order:
        """Move an order to another progress state.

        Raises:
            OrderValidationError: target is CANCELED (use cancel_order)
            NotFoundError: order missing or foreign to the tenant
            ConflictError: target equals current status, order is canceled,
                or the order changed between the check and the write
        """
        status = OrderStatus(status)
        if status not in OrderStatus.progress_states():
            raise OrderValidationError("Use the cancel operation to cancel an order")

        uow = create_uow(self._session_factory)
        async with uow:
            order = await self._scope(uow).require_order_in_organization(order_id, organization_id)

            if order.status is status:
                raise ConflictError("The new status must be different from the actual status")
            if not can_transition(order.status, status):
                raise ConflictError(f"Order in {order.status.value} cannot move to {status.value}")

            applied = await uow.orders.update_status_if_changed(order_id, organization_id, status)
            if not applied:
                # Lost a race; re-read to report what actually happened
                current = await self._scope(uow).require_order_in_organization(order_id, organization_id)
                raise ConflictError(
                    f"Order is {current.status.value}, status {status.value} not applied"
                )
            await uow.commit()

            logger.info(
                f"[{uow.execution_id}] Order {order_id}: {order.status.value} -> {status.value}"
            )
        return replace(order, status=status)

    async def cancel_order(
        self,
        order_id: str,
        organization_id: str,
        actor: Optional[Actor] = None,
    ) -> None:
        """Soft-cancel: status CANCELED and ``deleted_at`` stamped, row kept.

        A CLIENT actor may only cancel orders they placed.

        Raises:
            NotFoundError: order missing, foreign to the tenant, or to the client
            ConflictError: order already canceled
        """
        uow = create_uow(self._session_factory)
        async with uow:
            scope = self._scope(uow)
            order = await scope.require_order_in_organization(order_id, organization_id)
            if actor is not None and actor.is_client:
                scope.ensure_placed_by(order, actor.user_id)
            if order.is_canceled:
                raise ConflictError("Order is already canceled")

            await uow.orders.soft_cancel(order_id, self._clock())
            await uow.commit()
            logger.info(f"[{uow.execution_id}] Canceled order {order_id}")

    async def delete_order(self, order_id: str, organization_id: str) -> None:
        """Hard delete, regardless of status.

        Raises:
            NotFoundError: tenant or order does not exist
            ConflictError: order belongs to another tenant
        """
        uow = create_uow(self._session_factory)
        async with uow:
            scope = self._scope(uow)
            await scope.require_organization(organization_id)
            await scope.require_order_for_deletion(order_id, organization_id)

            await uow.orders.delete(order_id)
            await uow.commit()
            logger.info(f"[{uow.execution_id}] Deleted order {order_id}")

    async def restart_day(self, organization_id: str) -> int:
        """End-of-day reset: soft-cancel every active order created today.

        Returns:
            Number of orders canceled

        Raises:
            NotFoundError: tenant does not exist
        """
        uow = create_uow(self._session_factory)
        async with uow:
            await self._scope(uow).require_organization(organization_id)

            now = self._clock()
            canceled = await uow.orders.soft_cancel_created_since(
                organization_id, start_of_day(now), now
            )
            await uow.commit()
            logger.info(f"[{uow.execution_id}] Restarted day for org {organization_id}: {canceled} order(s) canceled")
        return canceled
