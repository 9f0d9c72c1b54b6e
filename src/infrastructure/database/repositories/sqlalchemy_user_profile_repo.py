"""SQLAlchemy implementation of UserProfile repository."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.user import UserProfile
from infrastructure.database.models import UserProfileModel


class SQLAlchemyUserProfileRepository:
    """SQLAlchemy implementation of IUserProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, user_id: UUID) -> UserProfile | None:
        """Get the profile belonging to a user."""
        model = await self._get_model(user_id)
        return self._to_entity(model) if model else None

    async def get_for_update(self, user_id: UUID) -> UserProfile | None:
        """Get a profile and lock its row until the transaction ends.

        Dialects without row locks (SQLite) ignore FOR UPDATE.
        """
        model = await self._get_model(user_id, for_update=True)
        return self._to_entity(model) if model else None

    async def create(self, profile: UserProfile) -> UserProfile:
        """Create a profile for an existing user."""
        model = self._to_model(profile)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def update_name(self, user_id: UUID, name: str) -> UserProfile:
        """Set the display name of a user's profile."""
        model = await self._get_model(user_id)

        if not model:
            raise ValueError(f"Profile for user {user_id} not found")

        model.name = name
        model.updated_at = datetime.utcnow()

        await self._session.flush()
        return self._to_entity(model)

    async def _get_model(
        self, user_id: UUID, for_update: bool = False
    ) -> UserProfileModel | None:
        stmt = select(UserProfileModel).where(UserProfileModel.user_id == user_id)
        if for_update:
            stmt = stmt.with_for_update()
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _to_entity(self, model: UserProfileModel) -> UserProfile:
        """Convert ORM model to domain entity."""
        return UserProfile(
            user_id=model.user_id,
            name=model.name,
            age=model.age,
            gender=model.gender,
            profile_image=model.profile_image,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: UserProfile) -> UserProfileModel:
        """Convert domain entity to ORM model."""
        return UserProfileModel(
            user_id=entity.user_id,
            name=entity.name,
            age=entity.age,
            gender=entity.gender,
            profile_image=entity.profile_image,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
