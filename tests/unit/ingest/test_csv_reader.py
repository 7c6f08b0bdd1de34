"""Unit tests for the CSV source reader."""

from __future__ import annotations

import pytest
import requests

from core.config import RadarConfig
from core.errors import SourceUnavailableError
from ingest.csv_reader import CsvReader, parse_csv_text
from tests.fake_http import FakeSession
from tests.fixture_paths import fixture_text

_URL = "https://host/radars/radar_valid.csv"


def test_fetch_returns_header_rows_and_file_title() -> None:
    """Reader should expose the header row, rows, and file name title."""
    session = FakeSession()
    session.serve(_URL, fixture_text("radar_valid.csv"))

    table = CsvReader(_URL, RadarConfig(), session).fetch()

    assert table.title == "radar_valid.csv"
    assert table.column_names == ("name", "ring", "quadrant", "isNew", "topic", "description")
    assert len(table.rows) == 5
    assert table.rows[0]["name"] == "Kubernetes"


def test_fetch_raises_for_http_error_status() -> None:
    """HTTP error statuses should surface as an unavailable source."""
    session = FakeSession()
    session.serve(_URL, "gone", status_code=500)

    with pytest.raises(SourceUnavailableError):
        CsvReader(_URL, RadarConfig(), session).fetch()


def test_fetch_raises_for_connection_failure() -> None:
    """Network failures should surface as an unavailable source."""
    session = FakeSession(routes={_URL: requests.ConnectionError("refused")})

    with pytest.raises(SourceUnavailableError) as error_info:
        CsvReader(_URL, RadarConfig(), session).fetch()

    assert isinstance(error_info.value.__cause__, requests.ConnectionError)


def test_parse_csv_text_strips_bom_and_header_whitespace() -> None:
    """Header names should be normalized before schema checks."""
    column_names, rows = parse_csv_text("\ufeffname , ring\nA,Adopt\n", "inline")

    assert column_names == ("name", "ring")
    assert rows == ({"name": "A", "ring": "Adopt"},)


def test_parse_csv_text_drops_cells_without_header() -> None:
    """Overflow cells should not leak into rows under a missing key."""
    _, rows = parse_csv_text("name\nA,extra\n", "inline")

    assert rows == ({"name": "A"},)


def test_parse_csv_text_handles_empty_body() -> None:
    """An empty document has no columns and no rows."""
    assert parse_csv_text("", "inline") == ((), ())


def test_fetch_decodes_csv_without_charset_as_utf8() -> None:
    """Bodies served as text/csv without a charset should read as UTF-8."""
    session = FakeSession()
    session.serve(
        _URL,
        "\ufeffname,ring,quadrant,isNew\nCafé,Adopt,Tools,true\n".encode("utf-8"),
        headers={"Content-Type": "text/csv"},
    )

    table = CsvReader(_URL, RadarConfig(), session).fetch()

    assert table.column_names == ("name", "ring", "quadrant", "isNew")
    assert table.rows[0]["name"] == "Café"


def test_fetch_honours_declared_charset() -> None:
    """An explicit charset should be used to decode the body."""
    session = FakeSession()
    session.serve(
        _URL,
        "name,ring,quadrant,isNew\nCafé,Adopt,Tools,true\n".encode("latin-1"),
        headers={"Content-Type": "text/csv; charset=ISO-8859-1"},
    )

    table = CsvReader(_URL, RadarConfig(), session).fetch()

    assert table.rows[0]["name"] == "Café"


def test_fetch_raises_for_undecodable_body() -> None:
    """Bytes that are not UTF-8 should surface as an unavailable source."""
    session = FakeSession()
    session.serve(_URL, b"name,ring\n\xff\xfe\xfa,Adopt\n", headers={"Content-Type": "text/csv"})

    with pytest.raises(SourceUnavailableError) as error_info:
        CsvReader(_URL, RadarConfig(), session).fetch()

    assert isinstance(error_info.value.__cause__, UnicodeDecodeError)
