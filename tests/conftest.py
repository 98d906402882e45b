"""Shared fixtures: in-memory database, seeded catalog, clock and order service."""

from datetime import datetime
from decimal import Decimal
from typing import AsyncGenerator, List, Optional

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from core.application.notifier import OrderNotifier
from core.application.services.order_service import OrderApplicationService
from core.data.models import Base, CategoryModel, OrganizationModel, ProductModel
from core.data.uow import create_uow
from core.domain.entities import Order, ProductSnapshot
from core.domain.value_objects import Money
from core.infrastructure.adapters.notifications import InMemoryOrderChannel


# Use in-memory SQLite for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

ORG_ID = "org-1"
OWNER_ID = "owner-1"
OTHER_ORG_ID = "org-2"
OTHER_OWNER_ID = "owner-2"

PRODUCT_A = "prod-a"  # 10.00, no discount
PRODUCT_B = "prod-b"  # 20.00, discounted to 15.00
FOREIGN_PRODUCT = "prod-z"  # belongs to org-2


class FakeClock:
    """Settable "now" for the order service."""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2026, 10, 19, 12, 0, 0))


@pytest_asyncio.fixture(scope="function")
async def test_engine():
    """Create test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    # Cleanup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def test_session_factory(test_engine) -> AsyncGenerator[async_sessionmaker, None]:
    """Create test session factory."""
    session_factory = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False
    )
    yield session_factory


@pytest_asyncio.fixture
async def seeded_catalog(test_session_factory) -> async_sessionmaker:
    """Two tenants, one category each, two products in org-1 and one in org-2."""
    async with test_session_factory() as session:
        session.add_all([
            OrganizationModel(id=ORG_ID, owner_id=OWNER_ID, name="Cantina"),
            OrganizationModel(id=OTHER_ORG_ID, owner_id=OTHER_OWNER_ID, name="Bistro"),
        ])
        await session.flush()
        session.add_all([
            CategoryModel(id="cat-1", organization_id=ORG_ID, name="Pizzas", icon="🍕"),
            CategoryModel(id="cat-2", organization_id=OTHER_ORG_ID, name="Drinks", icon="🥤"),
        ])
        await session.flush()
        session.add_all([
            ProductModel(
                id=PRODUCT_A,
                organization_id=ORG_ID,
                category_id="cat-1",
                name="Margherita",
                image_url="https://img.example/a.png",
                price=Decimal("10.00"),
                discounted_price=Decimal("0"),
                discount=False,
            ),
            ProductModel(
                id=PRODUCT_B,
                organization_id=ORG_ID,
                category_id="cat-1",
                name="Pepperoni",
                image_url="https://img.example/b.png",
                price=Decimal("20.00"),
                discounted_price=Decimal("15.00"),
                discount=True,
            ),
            ProductModel(
                id=FOREIGN_PRODUCT,
                organization_id=OTHER_ORG_ID,
                category_id="cat-2",
                name="Lemonade",
                image_url="https://img.example/z.png",
                price=Decimal("5.00"),
                discounted_price=Decimal("0"),
                discount=False,
            ),
        ])
        await session.commit()
    return test_session_factory


@pytest.fixture
def order_channel() -> InMemoryOrderChannel:
    return InMemoryOrderChannel()


@pytest.fixture
def notifier(order_channel) -> OrderNotifier:
    return OrderNotifier(order_channel)


@pytest.fixture
def order_service(seeded_catalog, notifier, clock) -> OrderApplicationService:
    """Order service over the seeded in-memory database."""
    return OrderApplicationService(
        session_factory=seeded_catalog,
        notifier=notifier,
        clock=clock,
    )


def _make_order(
    organization_id: str = ORG_ID,
    user_id: str = "client-1",
    created_at: Optional[datetime] = None,
    table: str = "T1",
) -> Order:
    """Order with one 10.00 line, bypassing the catalog."""
    item = ProductSnapshot(
        name="Margherita",
        image_url="",
        category_label="🍕 Pizzas",
        unit_price=Money(Decimal("10.00")),
        discount_applied=False,
        quantity=1,
    )
    return Order.create(
        organization_id=organization_id,
        user_id=user_id,
        table_label=table,
        items=[item],
        created_at=created_at or datetime(2026, 10, 19, 9, 0, 0),
    )


async def _store_orders(session_factory: async_sessionmaker, orders: List[Order]) -> None:
    async with create_uow(session_factory) as uow:
        for order in orders:
            await uow.orders.add(order)
        await uow.commit()


@pytest.fixture
def make_order():
    """Factory for orders that skip the catalog lookup."""
    return _make_order


@pytest.fixture
def store_orders(seeded_catalog):
    """Persist prebuilt orders straight through the repository."""

    async def _store(orders: List[Order]) -> None:
        await _store_orders(seeded_catalog, orders)

    return _store
