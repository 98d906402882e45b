"""Unit tests for the Order aggregate and its status table."""
from datetime import datetime
from decimal import Decimal

import pytest

from core.domain.entities import CatalogProduct, Order, ProductSnapshot
from core.domain.enums import OrderStatus, UserRole, can_transition
from core.domain.events import OrderCreatedEvent
from core.domain.value_objects import Actor, Money


def _snapshot(price: str, quantity: int, name: str = "Item") -> ProductSnapshot:
    return ProductSnapshot(
        name=name,
        image_url="",
        category_label="🍕 Pizzas",
        unit_price=Money(Decimal(price)),
        discount_applied=False,
        quantity=quantity,
    )


def test_create_derives_totals_from_snapshots():
    """2 x 10.00 + 1 x 15.00 gives quantity 3 and total 35.00."""
    order = Order.create(
        organization_id="org-1",
        user_id="client-1",
        table_label="T4",
        items=[_snapshot("10.00", 2, "A"), _snapshot("15.00", 1, "B")],
        created_at=datetime(2026, 10, 19, 12, 0),
    )

    assert order.quantity == 3
    assert order.total_price == Money(Decimal("35.00"))
    assert order.status is OrderStatus.WAITING
    assert order.deleted_at is None
    assert order.is_active
    assert isinstance(order.items, tuple)


def test_create_records_order_created_event():
    order = Order.create(
        organization_id="org-1",
        user_id="client-1",
        table_label="T1",
        items=[_snapshot("10.00", 1)],
        created_at=datetime(2026, 10, 19, 12, 0),
    )

    events = order.get_domain_events()
    assert len(events) == 1
    event = events[0]
    assert isinstance(event, OrderCreatedEvent)
    assert event.aggregate_id == order.id
    assert event.organization_id == "org-1"

    payload = event.to_dict()
    assert payload["event_type"] == "OrderCreatedEvent"
    assert payload["aggregate_type"] == "Order"
    assert payload["data"]["action"] == "create"
    assert payload["data"]["order"]["total_price"] == "10.00"

    order.clear_domain_events()
    assert order.get_domain_events() == []


def test_create_assigns_unique_ids():
    kwargs = dict(
        organization_id="org-1",
        user_id="client-1",
        table_label="T1",
        items=[_snapshot("10.00", 1)],
        created_at=datetime(2026, 10, 19, 12, 0),
    )
    assert Order.create(**kwargs).id != Order.create(**kwargs).id


def test_catalog_product_effective_price_follows_discount_flag():
    product = CatalogProduct(
        id="p",
        organization_id="org-1",
        name="Pepperoni",
        image_url="",
        price=Decimal("20.00"),
        discounted_price=Decimal("15.00"),
        discount=True,
        category_name="Pizzas",
        category_icon="🍕",
    )
    assert product.effective_price() == Decimal("15.00")
    assert product.category_label() == "🍕 Pizzas"


@pytest.mark.parametrize(
    "current,target,allowed",
    [
        (OrderStatus.WAITING, OrderStatus.IN_PRODUCTION, True),
        (OrderStatus.IN_PRODUCTION, OrderStatus.DONE, True),
        (OrderStatus.DONE, OrderStatus.WAITING, True),
        (OrderStatus.WAITING, OrderStatus.WAITING, False),
        (OrderStatus.CANCELED, OrderStatus.WAITING, False),
        (OrderStatus.WAITING, OrderStatus.CANCELED, False),
    ],
)
def test_status_transition_table(current, target, allowed):
    assert can_transition(current, target) is allowed


def test_canceled_is_the_only_terminal_status():
    assert [s for s in OrderStatus if s.is_terminal] == [OrderStatus.CANCELED]
    assert OrderStatus.CANCELED not in OrderStatus.progress_states()


def test_actor_coerces_role_from_string():
    actor = Actor(user_id="u-1", role="OWNER")
    assert actor.role is UserRole.OWNER
    assert actor.is_owner
    assert not actor.is_client

    with pytest.raises(ValueError):
        Actor(user_id="", role=UserRole.CLIENT)
