"""Runtime configuration model for the radar pipeline.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import math
import os

from core.constants import DEFAULT_SHEET_REFERENCE, DEFAULT_SHEETS_BASE_URL
from core.errors import RadarConfigError


@dataclass(frozen=True)
class RadarConfig:
    """Validated runtime configuration.

    Attributes:
        default_sheet_reference: Spreadsheet used when a request names none.
        http_timeout: Optional fetch timeout in seconds, ``None`` waits forever.
        sheets_base_url: Base URL for published spreadsheet documents.
    """

    default_sheet_reference: str = DEFAULT_SHEET_REFERENCE
    http_timeout: float | None = None
    sheets_base_url: str = DEFAULT_SHEETS_BASE_URL

    @classmethod
    def from_env(cls) -> "RadarConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            RadarConfigError: If environment values are invalid.
        """
        default_sheet = os.getenv("RADAR_DEFAULT_SHEET", DEFAULT_SHEET_REFERENCE)
        timeout_value = os.getenv("RADAR_HTTP_TIMEOUT")
        base_url = os.getenv("RADAR_SHEETS_BASE_URL", DEFAULT_SHEETS_BASE_URL)
        return cls(
            default_sheet_reference=default_sheet.strip() or DEFAULT_SHEET_REFERENCE,
            http_timeout=parse_http_timeout(timeout_value),
            sheets_base_url=base_url.rstrip("/"),
        )


def parse_http_timeout(raw_value: str | None, source: str = "RADAR_HTTP_TIMEOUT") -> float | None:
    """Parse an HTTP timeout setting.

    Args:
        raw_value: Raw string from environment or command line, if set.
        source: Setting name used in error messages.

    Returns:
        Parsed positive timeout, or ``None`` when unset.

    Raises:
        RadarConfigError: If value is not a positive finite number.
    """
    if raw_value is None or not raw_value.strip():
        return None
    try:
        timeout = float(raw_value)
    except ValueError as error:
        raise RadarConfigError(
            f"Invalid {source} value: "
            f"expected number of seconds, got '{raw_value}'. "
            f"Set {source} to a positive number or leave it unset."
        ) from error
    if not math.isfinite(timeout) or timeout <= 0:
        raise RadarConfigError(
            f"Invalid {source} value: expected positive seconds, got {raw_value.strip()}."
        )
    return timeout
