"""JWT authentication provider implementation.

Tokens are HS256-signed (algorithm configurable) and carry only the user
identifier plus issue and expiry times:

    {
        "sub": "user-uuid",
        "iat": 1234567000,
        "exp": 1234567890
    }

``exp`` is mandatory; tokens without it are rejected.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import UUID

from jose import JWTError, jwt

from core.config import settings
from infrastructure.auth.provider import TokenUser

logger = logging.getLogger(__name__)


class JWTAuthProvider:
    """JWT-based authentication provider."""

    def __init__(
        self,
        secret_key: str = settings.jwt_secret_key,
        algorithm: str = settings.jwt_algorithm,
        expire_minutes: int = settings.jwt_expire_minutes,
    ) -> None:
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expire_minutes = expire_minutes

    @property
    def expire_minutes(self) -> int:
        return self._expire_minutes

    async def validate_token(self, token: str) -> Optional[TokenUser]:
        """
        Validate a JWT token and extract the user it was issued for.

        Args:
            token: The JWT to validate

        Returns:
            TokenUser if valid, None if invalid, expired or malformed
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require_exp": True, "require_sub": True},
            )
        except JWTError as exc:
            logger.debug("Rejected token: %s", exc)
            return None

        try:
            return TokenUser(id=UUID(payload["sub"]))
        except (KeyError, TypeError, ValueError):
            return None

    def create_token(self, user: TokenUser) -> str:
        """
        Create a signed JWT for a user.

        Args:
            user: The user to create a token for

        Returns:
            The generated JWT string
        """
        issued_at = datetime.now(timezone.utc)
        payload = {
            "sub": str(user.id),
            "iat": issued_at,
            "exp": issued_at + timedelta(minutes=self._expire_minutes),
        }
        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
