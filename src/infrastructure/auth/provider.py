"""Authentication provider protocols."""

from dataclasses import dataclass
from typing import Optional, Protocol
from uuid import UUID


@dataclass
class TokenUser:
    """Represents a user extracted from an auth token."""

    id: UUID


class IAuthProvider(Protocol):
    """Protocol for authentication providers."""

    @property
    def expire_minutes(self) -> int:
        """Lifetime of issued tokens in minutes."""
        ...

    async def validate_token(self, token: str) -> Optional[TokenUser]:
        """
        Validate an authentication token.

        Args:
            token: The bearer token to validate

        Returns:
            TokenUser if valid, None if invalid
        """
        ...

    def create_token(self, user: TokenUser) -> str:
        """
        Create an authentication token for a user.

        Args:
            user: The user to create a token for

        Returns:
            The generated token string
        """
        ...


class IPasswordHasher(Protocol):
    """Protocol for one-way salted password hashing."""

    async def hash(self, password: str) -> str:
        """Hash a plaintext password with a fresh salt."""
        ...

    async def verify(self, password: str, password_hash: str) -> bool:
        """Check a plaintext password against a stored hash."""
        ...
