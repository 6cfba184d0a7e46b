"""Pydantic schemas for signup/signin endpoints."""
from pydantic import BaseModel, EmailStr, Field, field_validator

from schemas.validators import normalize_email


class AuthCredentials(BaseModel):
    """Email/password pair submitted to signup and signin."""

    email: EmailStr
    password: str = Field(..., min_length=1, max_length=128)

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, v: str) -> str:
        """Emails are matched case-insensitively."""
        return normalize_email(v)


class AccessTokenResponse(BaseModel):
    """Response carrying a freshly issued bearer token."""

    access_token: str
    token_type: str = "bearer"
