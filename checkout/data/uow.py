"""Unit of Work pattern for atomic transactions."""

import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from checkout.domain.exceptions import StorageError


logger = logging.getLogger(__name__)

# Drivers raise OverflowError directly for integers outside the column range
STORAGE_ERRORS = (SQLAlchemyError, OverflowError)


class UnitOfWork:
    """
    Unit of Work pattern for atomic transactions.

    Responsibilities:
    1. Manage SQLAlchemy session lifecycle
    2. Commit when the block exits cleanly, rollback on any exception
    3. Always close the session
    4. Surface database failures as StorageError, chained to the driver error

    Usage:
        async with UnitOfWork(session_factory) as uow:
            uow.session.add(model)
    """

    def __init__(self, session_factory: async_sessionmaker) -> None:
        """Initialize Unit of Work.

        Args:
            session_factory: SQLAlchemy async session factory
        """
        self._session_factory = session_factory
        self._session: Optional[AsyncSession] = None

    async def __aenter__(self) -> "UnitOfWork":
        """Start transaction scope."""
        self._session = self._session_factory()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Commit or rollback based on exception."""
        try:
            if exc_type is not None:
                logger.warning(f"Transaction failed: {exc_val!r}")
                await self.rollback()
                if isinstance(exc_val, STORAGE_ERRORS):
                    raise StorageError(f"Storage operation failed: {exc_val}") from exc_val
                return
            await self.commit()
        finally:
            await self._session.close()
            self._session = None

    @property
    def session(self) -> AsyncSession:
        """Get the session bound to this transaction.

        Returns:
            AsyncSession instance
        """
        if self._session is None:
            raise RuntimeError("UnitOfWork not initialized. Use async context manager.")
        return self._session

    async def commit(self) -> None:
        """Commit all pending changes."""
        try:
            await self.session.commit()
        except STORAGE_ERRORS as e:
            logger.error(f"❌ Commit failed: {e}")
            await self.rollback()
            raise StorageError(f"Commit failed: {e}") from e

    async def rollback(self) -> None:
        """Rollback all pending changes."""
        try:
            await self.session.rollback()
        except SQLAlchemyError as e:
            logger.error(f"❌ Rollback failed: {e}")
            raise StorageError(f"Rollback failed: {e}") from e
        logger.warning("Transaction rolled back")


def create_uow(session_factory: async_sessionmaker) -> UnitOfWork:
    """Create a new Unit of Work instance.

    Args:
        session_factory: SQLAlchemy async session factory

    Returns:
        UnitOfWork instance
    """
    return UnitOfWork(session_factory)
