"""SQLAlchemy implementation of User repository."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.user import User, UserWithProfile
from infrastructure.database.models import UserModel, UserProfileModel


class SQLAlchemyUserRepository:
    """SQLAlchemy implementation of IUserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_email(self, email: str) -> User | None:
        """Get a user by email address."""
        stmt = select(UserModel).where(UserModel.email == email)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_with_profile(self, id: UUID) -> UserWithProfile | None:
        """Get a user left-joined with its profile attributes."""
        stmt = (
            select(UserModel, UserProfileModel)
            .outerjoin(UserProfileModel, UserProfileModel.user_id == UserModel.id)
            .where(UserModel.id == id)
        )
        result = await self._session.execute(stmt)
        row = result.one_or_none()
        if row is None:
            return None

        user, profile = row
        return UserWithProfile(
            id=user.id,
            email=user.email,
            created_at=user.created_at,
            updated_at=user.updated_at,
            name=profile.name if profile else None,
            age=profile.age if profile else None,
            gender=profile.gender if profile else None,
            profile_image=profile.profile_image if profile else None,
        )

    async def create(self, user: User) -> User:
        """Create a new user."""
        model = self._to_model(user)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    def _to_entity(self, model: UserModel) -> User:
        """Convert ORM model to domain entity."""
        return User(
            id=model.id,
            email=model.email,
            password_hash=model.password_hash,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: User) -> UserModel:
        """Convert domain entity to ORM model."""
        return UserModel(
            id=entity.id,
            email=entity.email,
            password_hash=entity.password_hash,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
