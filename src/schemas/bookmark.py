"""Pydantic schemas for bookmark endpoints."""
from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from schemas.validators import CAMEL_CASE_CONFIG, reject_null, strip_text, validate_link


class BookmarkCreate(BaseModel):
    """Schema for creating a new bookmark."""

    model_config = CAMEL_CASE_CONFIG

    title: str = Field(..., min_length=1, max_length=500)
    description: str | None = None
    link: str

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, v: object) -> object:
        """Trim whitespace so a blank title fails the length check."""
        return strip_text(v)

    @field_validator("link")
    @classmethod
    def check_link(cls, v: str) -> str:
        """Require an absolute http(s) URL."""
        return validate_link(v)


class BookmarkUpdate(BaseModel):
    """
    Schema for updating an existing bookmark.

    Omitted fields are left unchanged. Description can be cleared with null;
    title and link cannot.
    """

    model_config = CAMEL_CASE_CONFIG

    title: str | None = Field(default=None, min_length=1, max_length=500)
    description: str | None = None
    link: str | None = None

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, v: object) -> object:
        """Trim whitespace so a blank title fails the length check."""
        return strip_text(v)

    @field_validator("title")
    @classmethod
    def check_title(cls, v: str | None) -> str:
        """Reject an explicit null title."""
        return reject_null(v, "title")

    @field_validator("link")
    @classmethod
    def check_link(cls, v: str | None) -> str:
        """Reject an explicit null and require an absolute http(s) URL."""
        return validate_link(reject_null(v, "link"))


class BookmarkResponse(BaseModel):
    """Schema for bookmark responses."""

    model_config = CAMEL_CASE_CONFIG

    id: int
    user_id: int
    title: str
    description: str | None
    link: str
    created_at: datetime
    updated_at: datetime
