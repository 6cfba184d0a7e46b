"""Pydantic schemas for user profile endpoints."""
from datetime import datetime

from pydantic import BaseModel, EmailStr, Field, field_validator

from schemas.validators import CAMEL_CASE_CONFIG, normalize_email


class UserUpdate(BaseModel):
    """
    Schema for editing the current user's profile.

    Only the fields present in the request body are changed. Names may be
    cleared with an explicit null; email may not.
    """

    model_config = CAMEL_CASE_CONFIG

    email: EmailStr | None = None
    first_name: str | None = Field(default=None, max_length=100)
    last_name: str | None = Field(default=None, max_length=100)

    @field_validator("email")
    @classmethod
    def normalize_email_field(cls, v: str | None) -> str:
        """Lowercase the new email and reject an explicit null."""
        if v is None:
            raise ValueError("email cannot be null")
        return normalize_email(v)


class UserResponse(BaseModel):
    """Response model for user info. Never includes the password hash."""

    model_config = CAMEL_CASE_CONFIG

    id: int
    email: str
    first_name: str | None
    last_name: str | None
    created_at: datetime
    updated_at: datetime
