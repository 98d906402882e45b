"""Unit of Work pattern for atomic transactions."""

import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.domain.value_objects import ExecutionID

from .repositories import (
    SqlAlchemyCatalogRepository,
    SqlAlchemyOrderRepository,
    SqlAlchemyOrganizationRepository,
)


logger = logging.getLogger(__name__)


class UnitOfWork:
    """
    Unit of Work pattern for atomic transactions.

    Responsibilities:
    1. Manage SQLAlchemy session lifecycle
    2. Tag every unit with an ExecutionID for log tracing
    3. Atomic commit/rollback of all repository operations
    4. Lazy initialization of repositories

    Usage:
        async with create_uow(session_factory) as uow:
            order = await uow.orders.find_by_id(order_id)
            await uow.orders.soft_cancel(order.id, now)
            await uow.commit()
    """

    def __init__(self, session_factory: async_sessionmaker) -> None:
        """Initialize Unit of Work.

        Args:
            session_factory: SQLAlchemy async session factory
        """
        self._session_factory = session_factory
        self._session: Optional[AsyncSession] = None
        self._execution_id: Optional[ExecutionID] = None

        # Lazy-loaded repositories
        self._order_repository: Optional[SqlAlchemyOrderRepository] = None
        self._catalog_repository: Optional[SqlAlchemyCatalogRepository] = None
        self._organization_repository: Optional[SqlAlchemyOrganizationRepository] = None

    async def __aenter__(self) -> "UnitOfWork":
        """Start transaction scope."""
        self._session = self._session_factory()
        self._execution_id = ExecutionID.generate()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Rollback on exception, always close the session."""
        try:
            if exc_type is not None:
                logger.warning(f"[{self._execution_id}] Transaction rolled back: {exc_val!r}")
                await self._session.rollback()
        finally:
            await self._session.close()

    def _require_session(self) -> AsyncSession:
        if self._session is None:
            raise RuntimeError("UnitOfWork not initialized. Use async context manager.")
        return self._session

    @property
    def execution_id(self) -> ExecutionID:
        """Get current execution ID for tracing."""
        if self._execution_id is None:
            raise RuntimeError("UnitOfWork not initialized. Use async context manager.")
        return self._execution_id

    @property
    def orders(self) -> SqlAlchemyOrderRepository:
        """Lazy-load order repository."""
        if self._order_repository is None:
            self._order_repository = SqlAlchemyOrderRepository(self._require_session())
        return self._order_repository

    @property
    def catalog(self) -> SqlAlchemyCatalogRepository:
        """Lazy-load catalog repository."""
        if self._catalog_repository is None:
            self._catalog_repository = SqlAlchemyCatalogRepository(self._require_session())
        return self._catalog_repository

    @property
    def organizations(self) -> SqlAlchemyOrganizationRepository:
        """Lazy-load organization repository."""
        if self._organization_repository is None:
            self._organization_repository = SqlAlchemyOrganizationRepository(self._require_session())
        return self._organization_repository

    async def commit(self) -> None:
        """Commit all pending changes."""
        await self._require_session().commit()
        logger.debug(f"[{self._execution_id}] Transaction committed")

    async def rollback(self) -> None:
        """Rollback all pending changes."""
        await self._require_session().rollback()


def create_uow(session_factory: async_sessionmaker) -> UnitOfWork:
    """Create a new Unit of Work instance.

    Args:
        session_factory: SQLAlchemy async session factory

    Returns:
        UnitOfWork instance
    """
    return UnitOfWork(session_factory)
