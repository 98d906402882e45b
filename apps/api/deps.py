"""FastAPI dependencies for dependency injection."""

import logging
from typing import Optional

from dotenv import load_dotenv
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.application.interfaces import IOrderChannel
from core.application.notifier import OrderNotifier
from core.application.pagination import PaginationPolicy
from core.application.services.order_service import OrderApplicationService
from core.infrastructure.adapters.notifications import build_order_channel
from core.infrastructure.database import Database
from core.settings import AppSettings, get_app_settings

# Load .env before any settings object is built
load_dotenv()

logger = logging.getLogger(__name__)

# =============================================================================
# SINGLETONS (built on first use)
# =============================================================================

_database: Optional[Database] = None
_order_channel: Optional[IOrderChannel] = None
_notifier: Optional[OrderNotifier] = None
_order_service: Optional[OrderApplicationService] = None


def get_settings() -> AppSettings:
    """Get application settings.

    Returns:
        Cached AppSettings instance
    """
    return get_app_settings()


def get_database() -> Database:
    """Get the process-wide Database.

    Returns:
        Database instance
    """
    global _database
    if _database is None:
        _database = Database(get_settings().database)
    return _database


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Get SQLAlchemy session factory.

    Returns:
        async_sessionmaker instance
    """
    return get_database().session_factory


def get_order_channel() -> IOrderChannel:
    global _order_channel
    if _order_channel is None:
        _order_channel = build_order_channel(get_settings().notifications)
    return _order_channel


def get_notifier() -> OrderNotifier:
    """Get the tenant-channel notifier."""
    global _notifier
    if _notifier is None:
        _notifier = OrderNotifier(
            get_order_channel(),
            channel_prefix=get_settings().notifications.channel_prefix,
        )
    return _notifier


def get_order_service() -> OrderApplicationService:
    """Get OrderApplicationService instance.

    Returns:
        OrderApplicationService instance
    """
    global _order_service
    if _order_service is None:
        settings = get_settings()
        _order_service = OrderApplicationService(
            session_factory=get_session_factory(),
            notifier=get_notifier(),
            pagination=PaginationPolicy(settings.orders.page_size),
            currency=settings.orders.currency,
        )
    return _order_service


async def shutdown_dependencies() -> None:
    """Flush pending notifications, then release the channel and the database."""
    if _notifier is not None:
        await _notifier.drain()
    if _order_channel is not None:
        await _order_channel.close()
    if _database is not None:
        await _database.close()
    reset_dependencies()


def reset_dependencies() -> None:
    """Forget every singleton (tests, settings reload)."""
    global _database, _order_channel, _notifier, _order_service
    _database = None
    _order_channel = None
    _notifier = None
    _order_service = None
