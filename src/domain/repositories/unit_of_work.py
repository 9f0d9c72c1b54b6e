"""Unit of Work protocol."""

from enum import StrEnum
from typing import Optional, Protocol

from domain.repositories.name_change_repository import INameChangeRecordRepository
from domain.repositories.user_profile_repository import IUserProfileRepository
from domain.repositories.user_repository import IUserRepository


class IsolationLevel(StrEnum):
    """Transaction isolation levels, valued by their SQL names."""

    READ_UNCOMMITTED = "READ UNCOMMITTED"
    READ_COMMITTED = "READ COMMITTED"
    REPEATABLE_READ = "REPEATABLE READ"
    SERIALIZABLE = "SERIALIZABLE"


class IUnitOfWork(Protocol):
    """Unit of Work interface for managing transactions."""

    users: IUserRepository
    profiles: IUserProfileRepository
    name_changes: INameChangeRecordRepository

    async def commit(self) -> None:
        """Commit the current transaction."""
        ...

    async def rollback(self) -> None:
        """Rollback the current transaction."""
        ...

    async def __aenter__(self) -> "IUnitOfWork":
        """Enter the context manager."""
        ...

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # type: ignore
        """Exit the context manager."""
        ...


class UnitOfWorkFactory(Protocol):
    """Callable producing a fresh Unit of Work, optionally at a fixed isolation level."""

    def __call__(self, isolation_level: Optional[IsolationLevel] = None) -> IUnitOfWork:
        ...
