"""Radar build orchestration.

This module coordinates source resolution, fetching, validation,
sanitization, and model assembly for one build request, and reports
exactly one outcome to the presentation boundary.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from core.config import RadarConfig
from core.errors import RadarConfigError, RadarError
from core.logging_config import get_logger
from core.types import BuildRequest, SourceTable
from ingest.content_validator import ContentValidator
from ingest.http_fetch import create_session
from ingest.input_sanitizer import sanitize_rows
from ingest.source_resolver import SourceReader, resolve_source
from model.entities import Radar
from model.radar_builder import build_radar_model
from present.console_presenter import RadarPresenter

_LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class BuildOutcome:
    """Result of one build: a titled radar or a single error.

    Attributes:
        title: Document display name, empty when the fetch failed.
        radar: Built radar on success.
        error: Failure cause on error.
    """

    title: str = ""
    radar: Radar | None = None
    error: RadarError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.radar is not None


class RadarBuildRunner:
    """Single-use runner for one radar build."""

    def __init__(
        self,
        request: BuildRequest,
        config: RadarConfig | None = None,
        presenter: RadarPresenter | None = None,
        session: Any | None = None,
    ) -> None:
        self._request = request
        self._config = config
        self._presenter = presenter
        self._session = session

    def run(self) -> BuildOutcome:
        """Execute the build and notify the presenter of the outcome."""
        if self._presenter is not None:
            self._presenter.show_loading()
        outcome = self._build_outcome()
        if self._presenter is not None:
            if outcome.error is not None:
                self._presenter.show_error(outcome.error)
            elif outcome.radar is not None:
                self._presenter.show_radar(outcome.title, outcome.radar)
        return outcome

    def _build_outcome(self) -> BuildOutcome:
        try:
            config = self._config if self._config is not None else RadarConfig.from_env()
        except RadarConfigError as error:
            _log_failure("environment", error)
            return BuildOutcome(error=error)
        session = self._session if self._session is not None else create_session()
        reader = resolve_source(self._request, config, session)
        try:
            table = reader.fetch()
            _log_fetch(reader, table)
            return _assemble(table)
        except RadarError as error:
            _log_failure(reader.reference, error)
            return BuildOutcome(error=error)
        finally:
            if self._session is None:
                session.close()


def build_radar(
    request: BuildRequest,
    config: RadarConfig | None = None,
    presenter: RadarPresenter | None = None,
    session: Any | None = None,
) -> BuildOutcome:
    """Run the radar pipeline for a request.

    Args:
        request: Build request carrying the query string.
        config: Optional runtime configuration, read from env if omitted.
            Invalid environment values are reported as the outcome error.
        presenter: Optional presentation boundary to notify.
        session: Optional HTTP session; a fresh one is created and closed
            per build when omitted.

    Returns:
        Outcome holding ``(title, radar)`` or a single error.
    """
    runner = RadarBuildRunner(request, config, presenter, session)
    return runner.run()


def _assemble(table: SourceTable) -> BuildOutcome:
    """Validate, sanitize, and build a radar from a fetched table.

    Raises:
        MalformedDataError: If validation or ring limits fail.
    """
    validation_error = ContentValidator(table.column_names).validate(table.rows)
    if validation_error is not None:
        raise validation_error
    rows = sanitize_rows(table.rows)
    radar = build_radar_model(rows)
    _LOGGER.info(
        "radar_built",
        title=table.title,
        quadrant_count=len(radar.quadrants),
        ring_count=len(radar.rings),
        blip_count=len(rows),
    )
    return BuildOutcome(title=table.title, radar=radar)


def _log_fetch(reader: SourceReader, table: SourceTable) -> None:
    _LOGGER.info(
        "source_fetched",
        kind=reader.kind,
        source=reader.reference,
        column_count=len(table.column_names),
        row_count=len(table.rows),
    )


def _log_failure(source: str, error: RadarError) -> None:
    _LOGGER.error(
        "radar_build_failed",
        source=source,
        error_type=type(error).__name__,
        message=str(error),
    )
