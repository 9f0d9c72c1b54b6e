"""Common Pydantic schemas shared across the API."""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ErrorResponse(BaseModel):
    """Standardized error response."""

    error_code: str
    message: str
    details: Any | None = None


class MessageResponse(BaseModel):
    """Simple message response."""

    message: str


class DataResponse(BaseModel, Generic[T]):
    """Envelope for a single payload under ``data``."""

    data: T
