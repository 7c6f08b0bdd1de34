"""Radar pipeline exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each pipeline stage raises a specific error type for debuggability.
"""

from __future__ import annotations


class RadarError(Exception):
    """Base exception for all radar build failures."""


class RadarConfigError(RadarError):
    """Raised for invalid runtime configuration."""


class SheetNotFoundError(RadarError):
    """Raised when a spreadsheet reference does not resolve to a published sheet."""


class MalformedDataError(RadarError):
    """Raised when source headers or row values break the blip schema."""


class SourceUnavailableError(RadarError):
    """Raised when the underlying fetch or parse of a source fails."""
