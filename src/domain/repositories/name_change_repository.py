"""Name change record repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.user import NameChangeRecord


class INameChangeRecordRepository(Protocol):
    """Repository interface for the name change audit trail."""

    async def create(self, record: NameChangeRecord) -> NameChangeRecord:
        """Append a name change record."""
        ...

    async def get_all_for_user(self, user_id: UUID) -> list[NameChangeRecord]:
        """Get all name changes for a user, oldest first."""
        ...
