"""Unit tests for header and content validation."""

from __future__ import annotations

import pytest

from core.constants import INVALID_IS_NEW, MISSING_CONTENT
from core.errors import MalformedDataError
from ingest.content_validator import ContentValidator

_HEADERS = ("name", "ring", "quadrant", "isNew")


def _row(is_new: str | None) -> dict[str, str | None]:
    return {"name": "Rust", "ring": "Adopt", "quadrant": "Languages", "isNew": is_new}


def test_verify_headers_accepts_required_and_optional_columns() -> None:
    """Optional and unknown columns should not fail validation."""
    validator = ContentValidator((*_HEADERS, "description", "topic", "owner"))

    assert validator.verify_headers() is None


def test_verify_headers_names_missing_header() -> None:
    """A missing isNew column should be reported by name."""
    error = ContentValidator(("name", "ring", "quadrant")).verify_headers()

    assert isinstance(error, MalformedDataError)
    assert "isNew" in str(error)


def test_verify_headers_is_case_sensitive() -> None:
    """Header matching should be exact."""
    error = ContentValidator(("Name", "ring", "quadrant", "isnew")).verify_headers()

    assert isinstance(error, MalformedDataError)
    assert "name, isNew" in str(error)


def test_verify_headers_reports_missing_content_for_empty_columns() -> None:
    """A document without a header row is missing content."""
    error = ContentValidator(()).verify_headers()

    assert str(error) == MISSING_CONTENT


@pytest.mark.parametrize("is_new", ["true", "FALSE", " True "])
def test_verify_content_accepts_boolean_text(is_new: str) -> None:
    """isNew values are compared case-insensitively."""
    assert ContentValidator(_HEADERS).verify_content([_row(is_new)]) is None


@pytest.mark.parametrize("is_new", ["Maybe", "", None, "yes"])
def test_verify_content_rejects_other_values(is_new: str | None) -> None:
    """Anything other than true/false is malformed."""
    error = ContentValidator(_HEADERS).verify_content([_row("true"), _row(is_new)])

    assert isinstance(error, MalformedDataError)
    assert str(error) == INVALID_IS_NEW


def test_validate_checks_headers_before_rows() -> None:
    """Header errors win over content errors."""
    validator = ContentValidator(("name", "ring", "quadrant"))

    error = validator.validate([_row("Maybe")])

    assert error is not None and "isNew" in str(error)
    assert str(error) != INVALID_IS_NEW
