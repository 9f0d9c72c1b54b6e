"""Profile service: profile lookup and audited name changes."""

from typing import List, Optional
from uuid import UUID

import structlog
from sqlalchemy.exc import SQLAlchemyError

from core.exceptions import NameChangeFailedError, ProfileNotFoundError
from domain.entities.user import NameChangeRecord, UserWithProfile
from domain.repositories.unit_of_work import IsolationLevel, UnitOfWorkFactory

logger = structlog.get_logger()


class ProfileService:
    """Service layer for user profiles."""

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    async def get_profile(self, user_id: UUID) -> Optional[UserWithProfile]:
        """Get a user joined with its profile, or None if there is no such user."""
        async with self._uow_factory() as uow:
            return await uow.users.get_with_profile(user_id)

    async def change_name(self, user_id: UUID, new_name: str) -> NameChangeRecord:
        """Rename a profile and append the audit record in one transaction.

        The profile row is locked for the duration so ``before_name`` is the
        value actually replaced.
        """
        async with self._uow_factory(IsolationLevel.READ_COMMITTED) as uow:
            try:
                profile = await uow.profiles.get_for_update(user_id)
                if not profile:
                    raise ProfileNotFoundError(str(user_id))

                await uow.profiles.update_name(user_id, new_name)
                record = await uow.name_changes.create(
                    NameChangeRecord(
                        user_id=user_id,
                        before_name=profile.name,
                        after_name=new_name,
                    )
                )
                await uow.commit()
            except SQLAlchemyError as exc:
                await uow.rollback()
                logger.error("name_change_failed", user_id=str(user_id), error=str(exc))
                raise NameChangeFailedError() from exc

        logger.info("name_changed", user_id=str(user_id))
        return record

    async def get_name_history(self, user_id: UUID) -> List[NameChangeRecord]:
        """Get a user's name changes, oldest first."""
        async with self._uow_factory() as uow:
            return await uow.name_changes.get_all_for_user(user_id)  # type: ignore[no-any-return]
