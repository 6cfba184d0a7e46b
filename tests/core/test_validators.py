"""Tests for shared schema validators."""
import pytest

from schemas.validators import reject_null, strip_text, validate_link


def test_reject_null_returns_value_unchanged() -> None:
    assert reject_null("kept", "title") == "kept"


def test_reject_null_raises_for_none() -> None:
    with pytest.raises(ValueError, match="title cannot be null"):
        reject_null(None, "title")


def test_strip_text_trims_strings_only() -> None:
    assert strip_text("  x  ") == "x"
    assert strip_text(None) is None
    assert strip_text(5) == 5


def test_validate_link_rejects_non_http_scheme() -> None:
    with pytest.raises(ValueError, match="Invalid link"):
        validate_link("ftp://example.org")
