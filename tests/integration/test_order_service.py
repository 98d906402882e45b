"""Integration tests for OrderApplicationService over an in-memory database."""
from datetime import datetime, timedelta
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest
from sqlalchemy import update

from core.application.notifier import OrderNotifier
from core.application.policies import RequestedProduct
from core.application.services.order_service import OrderApplicationService
from core.data.models import ProductModel
from core.domain.enums import OrderStatus, UserRole
from core.domain.exceptions import ConflictError, NotFoundError, OrderValidationError
from core.domain.value_objects import Actor, Money


OWNER = Actor("owner-1", UserRole.OWNER)
ADMIN = Actor("admin-1", UserRole.ADMIN)


async def _place(order_service, user_id="client-1", products=None, org_id="org-1"):
    if products is None:
        products = [RequestedProduct("prod-a", 2), RequestedProduct("prod-b", 1)]
    return await order_service.create_order(
        organization_id=org_id,
        user_id=user_id,
        table="T4",
        products=products,
    )


# =============================================================================
# CREATE
# =============================================================================

@pytest.mark.asyncio
async def test_create_order_snapshots_catalog(order_service, clock):
    """2 x A (10.00) + 1 x B (discounted 15.00) totals 35.00."""
    order = await _place(order_service)

    assert order.status is OrderStatus.WAITING
    assert order.quantity == 3
    assert order.total_price == Money(Decimal("35.00"))
    assert order.created_at == clock.now
    assert [(i.name, i.quantity, i.discount_applied) for i in order.items] == [
        ("Margherita", 2, False),
        ("Pepperoni", 1, True),
    ]

    stored = await order_service.get_order(order.id, "org-1")
    assert stored.total_price == Money(Decimal("35.00"))
    assert stored.items == order.items


@pytest.mark.asyncio
async def test_snapshot_survives_catalog_changes(order_service, seeded_catalog):
    order = await _place(order_service)

    async with seeded_catalog() as session:
        await session.execute(
            update(ProductModel)
            .where(ProductModel.id == "prod-b")
            .values(name="Pepperoni XL", price=Decimal("99.00"), discount=False)
        )
        await session.commit()

    stored = await order_service.get_order(order.id, "org-1")
    assert stored.items[1].name == "Pepperoni"
    assert stored.items[1].unit_price == Money(Decimal("15.00"))
    assert stored.total_price == Money(Decimal("35.00"))


@pytest.mark.asyncio
async def test_create_order_announces_on_tenant_channel(order_service, notifier, order_channel):
    order = await _place(order_service)
    await notifier.drain()

    messages = order_channel.messages_for("orders:org-1")
    assert len(messages) == 1
    assert messages[0]["event"] == "order"
    assert messages[0]["data"]["data"]["order"]["id"] == order.id
    assert order_channel.messages_for("orders:org-2") == []


@pytest.mark.asyncio
async def test_create_order_survives_broken_channel(seeded_catalog, clock):
    channel = AsyncMock()
    channel.publish.side_effect = ConnectionError("redis down")
    notifier = OrderNotifier(channel)
    service = OrderApplicationService(
        session_factory=seeded_catalog,
        notifier=notifier,
        clock=clock,
    )

    order = await _place(service)
    await notifier.drain()

    channel.publish.assert_awaited_once()
    stored = await service.get_order(order.id, "org-1")
    assert stored.status is OrderStatus.WAITING
    assert stored.total_price == Money(Decimal("35.00"))


@pytest.mark.asyncio
async def test_create_order_rejects_foreign_product(order_service, clock):
    with pytest.raises(OrderValidationError):
        await _place(order_service, products=[RequestedProduct("prod-a", 1), RequestedProduct("prod-z", 1)])

    assert await order_service.list_today_orders(OWNER, "org-1") == []


@pytest.mark.asyncio
async def test_create_order_requires_products(order_service):
    with pytest.raises(OrderValidationError):
        await _place(order_service, products=[])


@pytest.mark.asyncio
async def test_create_order_for_unknown_organization(order_service):
    with pytest.raises(NotFoundError):
        await _place(order_service, org_id="org-x", products=[RequestedProduct("prod-a", 1)])


@pytest.mark.asyncio
async def test_create_order_merges_duplicate_products(order_service):
    order = await _place(
        order_service,
        products=[RequestedProduct("prod-a", 1), RequestedProduct("prod-a", 1)],
    )

    assert len(order.items) == 1
    assert order.items[0].quantity == 2
    assert order.total_price == Money(Decimal("20.00"))


# =============================================================================
# READ
# =============================================================================

@pytest.mark.asyncio
async def test_get_order_is_tenant_scoped(order_service):
    order = await _place(order_service)

    with pytest.raises(NotFoundError):
        await order_service.get_order(order.id, "org-2")
    with pytest.raises(NotFoundError):
        await order_service.get_order("missing", "org-1")


@pytest.mark.asyncio
async def test_client_only_sees_own_orders(order_service):
    order = await _place(order_service, user_id="client-1")

    mine = await order_service.get_order(order.id, "org-1", actor=Actor("client-1", UserRole.CLIENT))
    assert mine.id == order.id

    with pytest.raises(NotFoundError):
        await order_service.get_order(order.id, "org-1", actor=Actor("client-2", UserRole.CLIENT))

    # Staff are not bound to the placing user
    staff = await order_service.get_order(order.id, "org-1", actor=Actor("waiter-1", UserRole.WAITER))
    assert staff.id == order.id


@pytest.mark.asyncio
async def test_history_pages_of_25(order_service, make_order, store_orders):
    """67 orders give pages of 25, 25, 17 and then an empty page, per user and per tenant."""
    start = datetime(2026, 10, 1, 8, 0)
    await store_orders([
        make_order(user_id="client-1", created_at=start + timedelta(minutes=i))
        for i in range(67)
    ])

    pages = [await order_service.list_user_orders("client-1", page) for page in range(4)]

    assert [len(p.items) for p in pages] == [25, 25, 17, 0]
    assert [p.has_next for p in pages] == [True, True, False, False]

    seen = [order.id for p in pages for order in p.items]
    assert len(set(seen)) == 67

    first = await order_service.list_user_orders("client-1", -1)
    assert [o.id for o in first.items] == [o.id for o in pages[0].items]

    tenant_pages = [await order_service.list_organization_orders("org-1", page) for page in range(4)]
    assert [len(p.items) for p in tenant_pages] == [25, 25, 17, 0]
    assert [p.has_next for p in tenant_pages] == [True, True, False, False]


@pytest.mark.asyncio
async def test_exact_page_boundary_has_no_next(order_service, make_order, store_orders):
    start = datetime(2026, 10, 1, 8, 0)
    await store_orders([
        make_order(created_at=start + timedelta(minutes=i)) for i in range(25)
    ])

    page = await order_service.list_organization_orders("org-1", 0)
    assert len(page.items) == 25
    assert page.has_next is False


@pytest.mark.asyncio
async def test_organization_history_excludes_other_tenants(order_service, make_order, store_orders):
    await store_orders([
        make_order(organization_id="org-1"),
        make_order(organization_id="org-2"),
    ])

    page = await order_service.list_organization_orders("org-1")
    assert [o.organization_id for o in page.items] == ["org-1"]

    with pytest.raises(NotFoundError):
        await order_service.list_organization_orders("org-x")


@pytest.mark.asyncio
async def test_today_orders(order_service, make_order, store_orders, clock):
    yesterday = make_order(created_at=clock.now - timedelta(days=1))
    early = make_order(created_at=clock.now.replace(hour=0, minute=0))
    later = make_order(created_at=clock.now - timedelta(hours=1))
    await store_orders([yesterday, early, later])

    await order_service.cancel_order(later.id, "org-1")

    active = await order_service.list_today_orders(OWNER, "org-1")
    assert [o.id for o in active] == [early.id]

    with_canceled = await order_service.list_today_orders(OWNER, "org-1", include_canceled=True)
    assert {o.id for o in with_canceled} == {early.id, later.id}


@pytest.mark.asyncio
async def test_today_orders_owner_standing(order_service):
    with pytest.raises(ConflictError):
        await order_service.list_today_orders(Actor("owner-2", UserRole.OWNER), "org-1")

    assert await order_service.list_today_orders(ADMIN, "org-1") == []

    with pytest.raises(NotFoundError):
        await order_service.list_today_orders(ADMIN, "org-x")


# =============================================================================
# MUTATIONS
# =============================================================================

@pytest.mark.asyncio
async def test_update_status_moves_between_progress_states(order_service):
    order = await _place(order_service)

    updated = await order_service.update_order_status(order.id, "org-1", OrderStatus.IN_PRODUCTION)
    assert updated.status is OrderStatus.IN_PRODUCTION

    done = await order_service.update_order_status(order.id, "org-1", OrderStatus.DONE)
    assert done.status is OrderStatus.DONE
    assert (await order_service.get_order(order.id, "org-1")).status is OrderStatus.DONE


@pytest.mark.asyncio
async def test_update_to_same_status_is_conflict(order_service):
    order = await _place(order_service)

    with pytest.raises(ConflictError):
        await order_service.update_order_status(order.id, "org-1", OrderStatus.WAITING)


@pytest.mark.asyncio
async def test_update_to_canceled_is_rejected(order_service):
    order = await _place(order_service)

    with pytest.raises(OrderValidationError):
        await order_service.update_order_status(order.id, "org-1", OrderStatus.CANCELED)


@pytest.mark.asyncio
async def test_update_of_canceled_order_is_conflict(order_service):
    order = await _place(order_service)
    await order_service.cancel_order(order.id, "org-1")

    with pytest.raises(ConflictError):
        await order_service.update_order_status(order.id, "org-1", OrderStatus.DONE)


@pytest.mark.asyncio
async def test_update_in_other_tenant_is_not_found(order_service):
    order = await _place(order_service)

    with pytest.raises(NotFoundError):
        await order_service.update_order_status(order.id, "org-2", OrderStatus.DONE)


@pytest.mark.asyncio
async def test_cancel_keeps_row_and_stamps_deleted_at(order_service, clock):
    order = await _place(order_service)
    clock.now = clock.now + timedelta(minutes=5)

    await order_service.cancel_order(order.id, "org-1")

    canceled = await order_service.get_order(order.id, "org-1")
    assert canceled.status is OrderStatus.CANCELED
    assert canceled.deleted_at == clock.now
    assert canceled.total_price == Money(Decimal("35.00"))

    with pytest.raises(ConflictError):
        await order_service.cancel_order(order.id, "org-1")


@pytest.mark.asyncio
async def test_client_cannot_cancel_someone_elses_order(order_service):
    order = await _place(order_service, user_id="client-1")

    with pytest.raises(NotFoundError):
        await order_service.cancel_order(order.id, "org-1", actor=Actor("client-2", UserRole.CLIENT))

    await order_service.cancel_order(order.id, "org-1", actor=Actor("client-1", UserRole.CLIENT))


@pytest.mark.asyncio
async def test_delete_removes_row(order_service):
    order = await _place(order_service)

    await order_service.delete_order(order.id, "org-1")

    with pytest.raises(NotFoundError):
        await order_service.get_order(order.id, "org-1")
    with pytest.raises(NotFoundError):
        await order_service.delete_order(order.id, "org-1")


@pytest.mark.asyncio
async def test_cancel_from_other_tenant_leaves_order_untouched(order_service):
    order = await _place(order_service)

    with pytest.raises(NotFoundError):
        await order_service.cancel_order(order.id, "org-2")

    stored = await order_service.get_order(order.id, "org-1")
    assert stored.status is OrderStatus.WAITING
    assert stored.deleted_at is None


@pytest.mark.asyncio
async def test_delete_from_other_tenant_is_conflict(order_service):
    order = await _place(order_service)

    with pytest.raises(ConflictError):
        await order_service.delete_order(order.id, "org-2")

    assert (await order_service.get_order(order.id, "org-1")).id == order.id


@pytest.mark.asyncio
async def test_restart_day_cancels_only_todays_active_orders(
    order_service, make_order, store_orders, clock
):
    yesterday = make_order(created_at=clock.now - timedelta(days=1))
    today_a = make_order(created_at=clock.now - timedelta(hours=2))
    today_b = make_order(created_at=clock.now - timedelta(hours=1))
    other_tenant = make_order(organization_id="org-2", created_at=clock.now - timedelta(hours=1))
    await store_orders([yesterday, today_a, today_b, other_tenant])
    await order_service.cancel_order(today_b.id, "org-1")

    canceled = await order_service.restart_day("org-1")

    assert canceled == 1
    assert (await order_service.get_order(today_a.id, "org-1")).status is OrderStatus.CANCELED
    assert (await order_service.get_order(yesterday.id, "org-1")).status is OrderStatus.WAITING
    assert (await order_service.get_order(other_tenant.id, "org-2")).status is OrderStatus.WAITING
    assert await order_service.list_today_orders(OWNER, "org-1") == []

    assert await order_service.restart_day("org-1") == 0


@pytest.mark.asyncio
async def test_restart_day_unknown_organization(order_service):
    with pytest.raises(NotFoundError):
        await order_service.restart_day("org-x")
