"""CSV document source reader.

This module fetches a published CSV file over HTTP and parses it into
a source table titled after the file name.
"""

from __future__ import annotations

import csv
import io
from typing import Any

from core.config import RadarConfig
from core.errors import SourceUnavailableError
from core.types import RawRow, SourceTable
from ingest.http_fetch import fetch_text
from ingest.query_params import file_name


class CsvReader:
    """Source reader for a CSV document at a URL."""

    kind = "csv"

    def __init__(self, url: str, config: RadarConfig, session: Any) -> None:
        self.url = url
        self._config = config
        self._session = session

    @property
    def reference(self) -> str:
        return self.url

    def fetch(self) -> SourceTable:
        """Fetch and parse the CSV document.

        Returns:
            Source table with the header row as column names.

        Raises:
            SourceUnavailableError: If the fetch or CSV parse fails.
        """
        body = fetch_text(self._session, self.url, self._config.http_timeout)
        column_names, rows = parse_csv_text(body, self.url)
        return SourceTable(title=file_name(self.url), column_names=column_names, rows=rows)


def parse_csv_text(body: str, source: str) -> tuple[tuple[str, ...], tuple[RawRow, ...]]:
    """Parse CSV text into header names and keyed rows.

    Args:
        body: Raw CSV text.
        source: Source URL used in error messages.

    Returns:
        Header names and rows keyed by header.

    Raises:
        SourceUnavailableError: If the text is not valid CSV.
    """
    reader = csv.DictReader(io.StringIO(body.lstrip("\ufeff")))
    try:
        header = reader.fieldnames or []
        column_names = tuple(name.strip() for name in header)
        reader.fieldnames = list(column_names)
        rows = tuple(_keyed_row(row) for row in reader)
    except csv.Error as error:
        raise SourceUnavailableError(
            f"Failed to parse CSV from {source}: {error}. "
            "Check that the document is a comma-separated file with a header row."
        ) from error
    return column_names, rows


def _keyed_row(row: dict[Any, Any]) -> RawRow:
    """Drop overflow cells that have no header."""
    return {key: value for key, value in row.items() if key is not None}
