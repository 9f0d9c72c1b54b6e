"""SQLAlchemy Unit of Work implementation."""

from typing import Any, Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from domain.repositories.unit_of_work import IsolationLevel
from infrastructure.database.repositories.sqlalchemy_name_change_repo import (
    SQLAlchemyNameChangeRecordRepository,
)
from infrastructure.database.repositories.sqlalchemy_user_profile_repo import (
    SQLAlchemyUserProfileRepository,
)
from infrastructure.database.repositories.sqlalchemy_user_repo import SQLAlchemyUserRepository


class SQLAlchemyUnitOfWork:
    """Unit of Work implementation using SQLAlchemy.

    One instance wraps one session, and therefore one transaction. When an
    isolation level is given it is pinned on the session's connection before
    any statement runs. Leaving the context with an exception rolls back;
    leaving it without ``commit()`` discards pending writes when the session
    closes.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        isolation_level: Optional[IsolationLevel] = None,
    ) -> None:
        self._session_factory = session_factory
        self._isolation_level = isolation_level
        self._session: Optional[AsyncSession] = None

    @property
    def isolation_level(self) -> Optional[IsolationLevel]:
        return self._isolation_level

    @property
    def users(self) -> SQLAlchemyUserRepository:
        """Get user repository."""
        if not self._session:
            raise RuntimeError("UnitOfWork not initialized. Use as context manager.")
        return SQLAlchemyUserRepository(self._session)

    @property
    def profiles(self) -> SQLAlchemyUserProfileRepository:
        """Get user profile repository."""
        if not self._session:
            raise RuntimeError("UnitOfWork not initialized. Use as context manager.")
        return SQLAlchemyUserProfileRepository(self._session)

    @property
    def name_changes(self) -> SQLAlchemyNameChangeRecordRepository:
        """Get name change record repository."""
        if not self._session:
            raise RuntimeError("UnitOfWork not initialized. Use as context manager.")
        return SQLAlchemyNameChangeRecordRepository(self._session)

    async def commit(self) -> None:
        """Commit the current transaction."""
        if self._session:
            await self._session.commit()

    async def rollback(self) -> None:
        """Rollback the current transaction."""
        if self._session:
            await self._session.rollback()

    async def __aenter__(self) -> "SQLAlchemyUnitOfWork":
        """Enter the context manager and create session."""
        self._session = self._session_factory()
        if self._isolation_level is not None:
            try:
                await self._session.connection(
                    execution_options={"isolation_level": self._isolation_level.value}
                )
            except BaseException:
                await self._session.close()
                self._session = None
                raise
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type],
        exc_val: Optional[Exception],
        exc_tb: Any,
    ) -> None:
        """Exit the context manager and cleanup."""
        if self._session:
            if exc_type:
                await self.rollback()
            await self._session.close()
            self._session = None
