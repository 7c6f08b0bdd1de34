"""Unit tests for radar build orchestration."""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest
import requests

from core.config import RadarConfig
from core.errors import (
    MalformedDataError,
    RadarConfigError,
    SheetNotFoundError,
    SourceUnavailableError,
)
from core.types import BuildRequest
from ingest.pipeline import build_radar
from model.entities import Radar
from tests.fake_http import FakeSession
from tests.fixture_paths import fixture_text

_CSV_URL = "https://host/radar.csv"
_REQUEST = BuildRequest(f"sheetId={_CSV_URL}")


@dataclass
class _RecordingPresenter:
    events: list[tuple[str, object]] = field(default_factory=list)

    def show_loading(self) -> None:
        self.events.append(("loading", None))

    def show_radar(self, title: str, radar: Radar) -> None:
        self.events.append(("radar", title))

    def show_error(self, error: Exception) -> None:
        self.events.append(("error", error))


def _session_serving(fixture_name: str) -> FakeSession:
    session = FakeSession()
    session.serve(_CSV_URL, fixture_text(fixture_name))
    return session


def test_build_radar_reports_loading_then_radar() -> None:
    """A valid source should produce a titled radar for the presenter."""
    presenter = _RecordingPresenter()

    outcome = build_radar(_REQUEST, RadarConfig(), presenter, _session_serving("radar_valid.csv"))

    assert outcome.ok and outcome.radar is not None
    assert outcome.title == "radar.csv"
    assert [quadrant.name for quadrant in outcome.radar.quadrants] == [
        "Platforms",
        "Languages",
        "Techniques",
    ]
    assert sum(1 for _ in outcome.radar.blips()) == 5
    assert presenter.events == [("loading", None), ("radar", "radar.csv")]


def test_build_radar_forwards_validation_error_unchanged() -> None:
    """Header errors should reach the presenter as the outcome error."""
    presenter = _RecordingPresenter()

    outcome = build_radar(
        _REQUEST, RadarConfig(), presenter, _session_serving("radar_missing_isnew.csv")
    )

    assert isinstance(outcome.error, MalformedDataError)
    assert outcome.radar is None
    assert presenter.events == [("loading", None), ("error", outcome.error)]


def test_build_radar_fails_for_five_rings() -> None:
    """Too many rings should fail the whole build."""
    outcome = build_radar(_REQUEST, RadarConfig(), None, _session_serving("radar_five_rings.csv"))

    assert isinstance(outcome.error, MalformedDataError)
    assert outcome.radar is None and not outcome.ok


def test_build_radar_reports_unavailable_source() -> None:
    """Network failures become a single outcome error."""
    session = FakeSession(routes={_CSV_URL: requests.Timeout("slow")})

    outcome = build_radar(_REQUEST, RadarConfig(), None, session)

    assert isinstance(outcome.error, SourceUnavailableError)


def test_build_radar_uses_default_sheet_without_parameters() -> None:
    """An empty request should read the configured default sheet."""
    config = RadarConfig(default_sheet_reference="missing-sheet")
    session = FakeSession()

    outcome = build_radar(BuildRequest(), config, None, session)

    assert isinstance(outcome.error, SheetNotFoundError)
    assert session.calls[0][0] == f"{config.sheets_base_url}/missing-sheet/htmlview"


def test_build_radar_leaves_caller_session_open() -> None:
    """Sessions passed in by the caller are not closed by the build."""
    session = _session_serving("radar_valid.csv")

    build_radar(_REQUEST, RadarConfig(), None, session)

    assert session.closed is False


def test_build_request_from_url_keeps_query_part() -> None:
    """Full page URLs should be reduced to their query string."""
    request = BuildRequest.from_url("http://localhost:8080/?sheetId=abc&sheetName=Tech")

    assert request.query_string == "sheetId=abc&sheetName=Tech"


def test_build_request_from_url_drops_fragment() -> None:
    """A trailing fragment is not part of the query string."""
    request = BuildRequest.from_url("http://localhost/?sheetId=https://host/data.csv#top")

    assert request.query_string == "sheetId=https://host/data.csv"


def test_fragment_url_still_selects_csv_source() -> None:
    """A CSV link followed by a fragment should build from the CSV."""
    session = _session_serving("radar_valid.csv")
    request = BuildRequest.from_url(f"http://localhost/?sheetId={_CSV_URL}#radar")

    outcome = build_radar(request, RadarConfig(), None, session)

    assert outcome.ok
    assert session.calls[0][0] == _CSV_URL


def test_build_radar_reports_invalid_environment_to_presenter(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Config errors from the environment should become the outcome error."""
    monkeypatch.setenv("RADAR_HTTP_TIMEOUT", "never")
    presenter = _RecordingPresenter()
    session = FakeSession()

    outcome = build_radar(_REQUEST, None, presenter, session)

    assert isinstance(outcome.error, RadarConfigError)
    assert presenter.events == [("loading", None), ("error", outcome.error)]
    assert session.calls == []
