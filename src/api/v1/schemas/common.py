"""Common Pydantic schemas shared across the API."""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Single-message error response."""

    msg: str


class FieldError(BaseModel):
    """One entry of an ``errors`` array."""

    msg: str
    param: str | None = None
    location: str | None = None
    type: str | None = None


class ErrorListResponse(BaseModel):
    """Validation or registration error response."""

    errors: list[FieldError]


class MessageResponse(BaseModel):
    """Simple message response."""

    msg: str
