"""Pydantic schemas for User API."""

from datetime import datetime
from uuid import UUID

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from domain.entities.user import normalize_gender

# bcrypt ignores input past 72 bytes
MAX_PASSWORD_BYTES = 72


def _normalize_name(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("Name must not be blank")
    return v


def _normalize_email(v: str) -> str:
    v = v.strip().lower()
    if "@" not in v or "." not in v.split("@")[-1]:
        raise ValueError("Invalid email address")
    return v


class UserCreate(BaseModel):
    """Schema for registering a user."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "jane@example.com",
                "password": "correct-horse-battery",
                "name": "Jane",
                "age": 29,
                "gender": "female",
                "profile_image": "https://cdn.example.com/u/jane.png",
            }
        },
    )

    email: str = Field(..., min_length=3, max_length=255)
    password: str = Field(..., min_length=8)
    name: str = Field(..., min_length=1, max_length=100)
    age: int = Field(..., ge=0, le=150)
    gender: str = Field(..., min_length=1, max_length=20)
    profile_image: str | None = Field(
        None,
        max_length=500,
        validation_alias=AliasChoices("profile_image", "profileImage"),
    )

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Basic email validation."""
        return _normalize_email(v)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _normalize_name(v)

    @field_validator("password")
    @classmethod
    def validate_password_length(cls, v: str) -> str:
        if len(v.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return v

    @field_validator("gender")
    @classmethod
    def validate_gender(cls, v: str) -> str:
        v = normalize_gender(v)
        if not v:
            raise ValueError("Gender must not be blank")
        return v


class LoginRequest(BaseModel):
    """Schema for logging in."""

    email: str = Field(..., min_length=3, max_length=255)
    password: str = Field(..., min_length=1)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return _normalize_email(v)


class NameChangeRequest(BaseModel):
    """Schema for changing the caller's display name."""

    name: str = Field(..., min_length=1, max_length=100)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _normalize_name(v)


class UserProfileResponse(BaseModel):
    """Schema for a user joined with its profile."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "email": "jane@example.com",
                "created_at": "2026-01-28T10:00:00",
                "updated_at": "2026-01-28T10:00:00",
                "name": "Jane",
                "age": 29,
                "gender": "FEMALE",
                "profile_image": "https://cdn.example.com/u/jane.png",
            }
        },
    )

    id: UUID
    email: str
    created_at: datetime
    updated_at: datetime
    name: str | None = None
    age: int | None = None
    gender: str | None = None
    profile_image: str | None = None


class NameChangeResponse(BaseModel):
    """Schema for a name change audit record."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    before_name: str
    after_name: str
    created_at: datetime


class NameHistoryResponse(BaseModel):
    """Schema for a user's name change history."""

    data: list[NameChangeResponse]
