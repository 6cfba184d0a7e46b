"""
Shared validation functions for Pydantic schemas.

This module contains validators used across the user and bookmark schemas.
"""
from typing import TypeVar

from pydantic import ConfigDict, HttpUrl, TypeAdapter
from pydantic.alias_generators import to_camel

# API bodies use camelCase keys; snake_case is still accepted on input.
CAMEL_CASE_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    from_attributes=True,
)

_http_url_adapter = TypeAdapter(HttpUrl)

T = TypeVar("T")


def normalize_email(email: str) -> str:
    """Lowercase and trim an email so uniqueness is case-insensitive."""
    return email.strip().lower()


def strip_text(value: object) -> object:
    """Trim surrounding whitespace from string input before length checks run."""
    if isinstance(value, str):
        return value.strip()
    return value


def validate_link(link: str) -> str:
    """
    Validate that a link is an absolute http(s) URL.

    Returns the trimmed link as submitted (not the normalized URL), so a
    bookmark reads back exactly the way it was saved.

    Raises:
        ValueError: If the link is not a valid http/https URL.
    """
    link = link.strip()
    try:
        _http_url_adapter.validate_python(link)
    except ValueError:
        raise ValueError(f"Invalid link: '{link}'. Must be an http or https URL.")
    return link


def reject_null(value: T | None, field_name: str) -> T:
    """Reject an explicit null for a field that may be omitted but not cleared."""
    if value is None:
        raise ValueError(f"{field_name} cannot be null")
    return value
