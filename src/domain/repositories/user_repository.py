"""User repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.user import User, UserWithProfile


class IUserRepository(Protocol):
    """Repository interface for User entities."""

    async def get_by_email(self, email: str) -> User | None:
        """Get a user by email address."""
        ...

    async def get_with_profile(self, id: UUID) -> UserWithProfile | None:
        """Get a user joined with its profile attributes."""
        ...

    async def create(self, user: User) -> User:
        """Create a new user."""
        ...
