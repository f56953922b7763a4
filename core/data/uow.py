"""Unit of Work pattern for atomic transactions."""

import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.domain.exceptions import OrderStorageError
from core.domain.value_objects import new_short_id

from .mappers import IdFactory
from .repositories.order_repository_impl import SqlAlchemyOrderRepository

logger = logging.getLogger(__name__)


class UnitOfWork:
    """
    Unit of Work pattern for atomic transactions.

    Responsibilities:
    1. Manage SQLAlchemy session lifecycle
    2. Atomic commit/rollback of all repository operations
    3. Lazy initialization of repositories

    Usage:
        async with create_uow(session_factory) as uow:
            await uow.orders.add(order)
            await uow.commit()
    """

    def __init__(
        self, session_factory: async_sessionmaker, id_factory: IdFactory = new_short_id
    ) -> None:
        """Initialize Unit of Work.

        Args:
            session_factory: SQLAlchemy async session factory
            id_factory: Identifier generator handed to repositories
        """
        self._session_factory = session_factory
        self._id_factory = id_factory
        self._session: Optional[AsyncSession] = None

        # Lazy-loaded repositories
        self._order_repository: Optional[SqlAlchemyOrderRepository] = None

    async def __aenter__(self) -> "UnitOfWork":
        """Start transaction scope."""
        self._session = self._session_factory()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Rollback on exception, always close the session."""
        try:
            if exc_type is not None:
                logger.warning(f"Transaction rolled back: {exc_val}")
                await self._session.rollback()
        finally:
            await self._session.close()
            self._session = None
            self._order_repository = None

    @property
    def orders(self) -> SqlAlchemyOrderRepository:
        """Lazy-load order repository.

        Returns:
            SqlAlchemyOrderRepository instance
        """
        if self._session is None:
            raise RuntimeError("UnitOfWork not initialized. Use async context manager.")
        if self._order_repository is None:
            self._order_repository = SqlAlchemyOrderRepository(self._session, self._id_factory)
        return self._order_repository

    async def commit(self) -> None:
        """Commit all pending changes.

        Raises:
            OrderStorageError: If the commit fails (changes are rolled back)
        """
        if self._session is None:
            raise RuntimeError("UnitOfWork not initialized. Use async context manager.")
        try:
            await self._session.commit()
        except SQLAlchemyError as e:
            logger.error(f"Commit failed: {e}")
            await self._session.rollback()
            raise OrderStorageError("Failed to commit transaction") from e

    async def rollback(self) -> None:
        """Rollback all pending changes."""
        if self._session is None:
            raise RuntimeError("UnitOfWork not initialized. Use async context manager.")
        await self._session.rollback()


def create_uow(session_factory: async_sessionmaker, id_factory: IdFactory = new_short_id) -> UnitOfWork:
    """Create a new Unit of Work instance.

    Args:
        session_factory: SQLAlchemy async session factory
        id_factory: Identifier generator

    Returns:
        UnitOfWork instance
    """
    return UnitOfWork(session_factory, id_factory)
