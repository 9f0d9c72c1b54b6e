"""Shared fixtures for unit tests."""

from typing import Any, Optional
from unittest.mock import AsyncMock
from uuid import UUID, uuid4

import pytest

from domain.repositories.unit_of_work import IsolationLevel


class FakeUnitOfWork:
    """Fake Unit of Work with repository mocks for unit testing."""

    def __init__(self) -> None:
        self.users = AsyncMock()
        self.profiles = AsyncMock()
        self.name_changes = AsyncMock()
        self.committed = False
        self.rolled_back = False
        self.isolation_levels: list[Optional[IsolationLevel]] = []

    def factory(self, isolation_level: Optional[IsolationLevel] = None) -> "FakeUnitOfWork":
        """Stand-in for the Unit of Work factory; records requested isolation."""
        self.isolation_levels.append(isolation_level)
        return self

    async def commit(self) -> None:
        self.committed = True

    async def rollback(self) -> None:
        self.rolled_back = True

    async def __aenter__(self) -> "FakeUnitOfWork":
        return self

    async def __aexit__(self, exc_type: Any, *args: Any) -> None:
        if exc_type:
            await self.rollback()


class FakePasswordHasher:
    """Reversible stand-in for bcrypt so unit tests stay fast."""

    async def hash(self, password: str) -> str:
        return f"hashed:{password}"

    async def verify(self, password: str, password_hash: str) -> bool:
        return password_hash == f"hashed:{password}"


@pytest.fixture
def uow() -> FakeUnitOfWork:
    """Create a fresh FakeUnitOfWork."""
    return FakeUnitOfWork()


@pytest.fixture
def hasher() -> FakePasswordHasher:
    return FakePasswordHasher()


@pytest.fixture
def user_id() -> UUID:
    """A random user ID."""
    return uuid4()
