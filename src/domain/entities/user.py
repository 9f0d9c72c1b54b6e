"""User, profile and name-change domain entities."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4


def normalize_gender(gender: str) -> str:
    """Return the canonical (uppercase) form of a gender value."""
    return gender.strip().upper()


@dataclass
class User:
    """Domain entity for a registered account."""

    email: str
    password_hash: str
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        """Ensure updated_at is always at least as recent as created_at."""
        if self.updated_at < self.created_at:
            self.updated_at = self.created_at


@dataclass
class UserProfile:
    """Domain entity for the 1:1 profile attached to a User."""

    user_id: UUID
    name: str
    age: int
    gender: str
    profile_image: Optional[str] = None
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        self.gender = normalize_gender(self.gender)


@dataclass
class NameChangeRecord:
    """Append-only audit entry for a profile name change."""

    user_id: UUID
    before_name: str
    after_name: str
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)


@dataclass(frozen=True, slots=True)
class UserWithProfile:
    """Read-only projection: a User joined with its profile attributes."""

    id: UUID
    email: str
    created_at: datetime
    updated_at: datetime
    name: Optional[str] = None
    age: Optional[int] = None
    gender: Optional[str] = None
    profile_image: Optional[str] = None
