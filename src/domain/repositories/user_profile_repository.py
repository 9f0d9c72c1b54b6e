"""User profile repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.user import UserProfile


class IUserProfileRepository(Protocol):
    """Repository interface for UserProfile entities."""

    async def get(self, user_id: UUID) -> UserProfile | None:
        """Get the profile belonging to a user."""
        ...

    async def create(self, profile: UserProfile) -> UserProfile:
        """Create a profile for an existing user."""
        ...

    async def get_for_update(self, user_id: UUID) -> UserProfile | None:
        """Get a profile and lock its row until the transaction ends."""
        ...

    async def update_name(self, user_id: UUID, name: str) -> UserProfile:
        """Set the display name of a user's profile."""
        ...
