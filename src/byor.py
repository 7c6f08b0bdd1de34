"""Public SDK surface for radar builds.

This module provides a stable import path for library users.
It re-exports the build entry point and the typed radar models.
"""

from __future__ import annotations

from core.config import RadarConfig
from core.errors import (
    MalformedDataError,
    RadarError,
    SheetNotFoundError,
    SourceUnavailableError,
)
from core.types import BuildRequest, SanitizedRow
from ingest.pipeline import BuildOutcome, build_radar
from model.entities import Blip, Quadrant, Radar, Ring
from present.console_presenter import ConsolePresenter, RadarPresenter

__all__ = [
    "Blip",
    "BuildOutcome",
    "BuildRequest",
    "ConsolePresenter",
    "MalformedDataError",
    "Quadrant",
    "Radar",
    "RadarConfig",
    "RadarError",
    "RadarPresenter",
    "Ring",
    "SanitizedRow",
    "SheetNotFoundError",
    "SourceUnavailableError",
    "build_radar",
]
