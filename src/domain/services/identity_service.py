"""Identity service: registration and credential authentication."""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

import structlog
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from core.exceptions import (
    EmailAlreadyExistsError,
    InvalidPasswordError,
    RegistrationFailedError,
    UnknownEmailError,
)
from domain.entities.user import User, UserProfile
from domain.repositories.unit_of_work import IsolationLevel, UnitOfWorkFactory
from infrastructure.auth.provider import IAuthProvider, IPasswordHasher, TokenUser

logger = structlog.get_logger()


@dataclass(frozen=True, slots=True)
class IssuedToken:
    """A freshly signed session token."""

    user_id: UUID
    access_token: str
    expires_in: int  # seconds


def _is_unique_violation(exc: IntegrityError) -> bool:
    orig = str(exc.orig).lower() if exc.orig else ""
    return "unique" in orig or "duplicate" in orig


class IdentityService:
    """Service layer for account registration and login."""

    def __init__(
        self,
        uow_factory: UnitOfWorkFactory,
        auth_provider: IAuthProvider,
        password_hasher: IPasswordHasher,
    ) -> None:
        self._uow_factory = uow_factory
        self._auth = auth_provider
        self._hasher = password_hasher

    async def register(
        self,
        email: str,
        password: str,
        name: str,
        age: int,
        gender: str,
        profile_image: Optional[str] = None,
    ) -> User:
        """Create a user and its profile in one READ COMMITTED transaction.

        Raises:
            EmailAlreadyExistsError: the email is taken, including when a
                concurrent registration wins the unique constraint.
            RegistrationFailedError: any other write failure; nothing is kept.
        """
        async with self._uow_factory() as uow:
            existing = await uow.users.get_by_email(email)
        if existing:
            raise EmailAlreadyExistsError(email)

        password_hash = await self._hasher.hash(password)

        async with self._uow_factory(IsolationLevel.READ_COMMITTED) as uow:
            try:
                user = await uow.users.create(User(email=email, password_hash=password_hash))
                await uow.profiles.create(
                    UserProfile(
                        user_id=user.id,
                        name=name,
                        age=age,
                        gender=gender,
                        profile_image=profile_image,
                    )
                )
                await uow.commit()
            except IntegrityError as exc:
                await uow.rollback()
                if _is_unique_violation(exc):
                    logger.info("registration_conflict", email=email)
                    raise EmailAlreadyExistsError(email) from exc
                logger.error("registration_failed", error=str(exc.orig))
                raise RegistrationFailedError() from exc
            except SQLAlchemyError as exc:
                await uow.rollback()
                logger.error("registration_failed", error=str(exc))
                raise RegistrationFailedError() from exc

        logger.info("user_registered", user_id=str(user.id))
        return user

    async def authenticate(self, email: str, password: str) -> IssuedToken:
        """Verify credentials and issue a signed, expiring session token.

        Raises:
            UnknownEmailError: no account for ``email``.
            InvalidPasswordError: the password does not match.
        """
        async with self._uow_factory() as uow:
            user = await uow.users.get_by_email(email)

        if not user:
            logger.info("login_failed", reason="unknown_email")
            raise UnknownEmailError()

        if not await self._hasher.verify(password, user.password_hash):
            logger.info("login_failed", reason="invalid_password", user_id=str(user.id))
            raise InvalidPasswordError()

        token = self._auth.create_token(TokenUser(id=user.id))
        logger.info("login_succeeded", user_id=str(user.id))
        return IssuedToken(
            user_id=user.id,
            access_token=token,
            expires_in=self._auth.expire_minutes * 60,
        )
