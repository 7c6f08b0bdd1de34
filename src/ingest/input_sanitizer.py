"""Row normalization for validated source data.

This module trims every field and fills optional fields with defaults.
It never raises: required fields are guaranteed by the content validator.
"""

from __future__ import annotations

from typing import Iterable, Union

from core.types import RawRow, SanitizedRow


def sanitize(row: Union[RawRow, SanitizedRow]) -> SanitizedRow:
    """Normalize one row into canonical shape.

    Args:
        row: Validated raw row, or an already sanitized row.

    Returns:
        Row with stripped values, lowercase ``is_new``, and defaulted
        ``topic``, ``description``, and ``colour``.
    """
    if isinstance(row, SanitizedRow):
        return row
    return SanitizedRow(
        name=_clean(row.get("name")),
        ring=_clean(row.get("ring")),
        quadrant=_clean(row.get("quadrant")),
        is_new=_clean(row.get("isNew")).lower(),
        topic=_clean(row.get("topic")),
        description=_clean(row.get("description")),
        colour=_clean(row.get("colour")),
    )


def sanitize_rows(rows: Iterable[RawRow]) -> list[SanitizedRow]:
    """Sanitize rows, preserving order."""
    return [sanitize(row) for row in rows]


def _clean(value: str | None) -> str:
    return (value or "").strip()
