"""Structural validation of fetched source tables.

This module checks header names and ``isNew`` values before any row is
sanitized. Checks return an error value instead of raising, so the
pipeline can stop at the first failure and forward it unchanged.
"""

from __future__ import annotations

from typing import Sequence

from core.constants import (
    INVALID_IS_NEW,
    IS_NEW_VALUES,
    MISSING_CONTENT,
    MISSING_HEADERS,
    REQUIRED_HEADERS,
)
from core.errors import MalformedDataError
from core.types import RawRow


class ContentValidator:
    """Validator bound to the column names of one source table."""

    def __init__(self, column_names: Sequence[str]) -> None:
        self._column_names = tuple(column_names)

    def verify_headers(self) -> MalformedDataError | None:
        """Check that every required header is present.

        Returns:
            Error naming the missing headers, or ``None`` when valid.
        """
        if not self._column_names:
            return MalformedDataError(MISSING_CONTENT)
        present = set(self._column_names)
        missing = [header for header in REQUIRED_HEADERS if header not in present]
        if missing:
            return MalformedDataError(f"{MISSING_HEADERS} Missing: {', '.join(missing)}.")
        return None

    def verify_content(self, rows: Sequence[RawRow]) -> MalformedDataError | None:
        """Check that every row has a boolean ``isNew`` value.

        Args:
            rows: Raw rows read from the source.

        Returns:
            Error for the first invalid value, or ``None`` when valid.
        """
        for row in rows:
            if not _is_boolean_text(row.get("isNew")):
                return MalformedDataError(INVALID_IS_NEW)
        return None

    def validate(self, rows: Sequence[RawRow]) -> MalformedDataError | None:
        """Run header and content checks, headers first."""
        return self.verify_headers() or self.verify_content(rows)


def _is_boolean_text(value: str | None) -> bool:
    return value is not None and value.strip().lower() in IS_NEW_VALUES
