"""SQLAlchemy implementation of NameChangeRecord repository."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.user import NameChangeRecord
from infrastructure.database.models import NameChangeRecordModel


class SQLAlchemyNameChangeRecordRepository:
    """SQLAlchemy implementation of INameChangeRecordRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, record: NameChangeRecord) -> NameChangeRecord:
        """Append a name change record."""
        model = NameChangeRecordModel(
            id=record.id,
            user_id=record.user_id,
            before_name=record.before_name,
            after_name=record.after_name,
            created_at=record.created_at,
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def get_all_for_user(self, user_id: UUID) -> list[NameChangeRecord]:
        """Get all name changes for a user, oldest first."""
        stmt = (
            select(NameChangeRecordModel)
            .where(NameChangeRecordModel.user_id == user_id)
            .order_by(NameChangeRecordModel.created_at, NameChangeRecordModel.id)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    def _to_entity(self, model: NameChangeRecordModel) -> NameChangeRecord:
        """Convert ORM model to domain entity."""
        return NameChangeRecord(
            id=model.id,
            user_id=model.user_id,
            before_name=model.before_name,
            after_name=model.after_name,
            created_at=model.created_at,
        )
