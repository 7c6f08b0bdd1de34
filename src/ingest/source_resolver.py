"""Data source selection.

This module decides from a build request whether rows come from a CSV
document, a named spreadsheet, or the configured default spreadsheet.
"""

from __future__ import annotations

from typing import Any, Protocol

from core.config import RadarConfig
from core.constants import CSV_SUFFIX, GOOGLE_DOMAIN_SUFFIX, SHEET_ID_PARAM, SHEET_NAME_PARAM
from core.logging_config import get_logger
from core.types import BuildRequest, SourceTable
from ingest.csv_reader import CsvReader
from ingest.query_params import domain_name, query_params
from ingest.sheet_reader import SpreadsheetReader

_LOGGER = get_logger(__name__)


class SourceReader(Protocol):
    """Contract shared by CSV and spreadsheet readers."""

    kind: str

    @property
    def reference(self) -> str:
        """Source URL or spreadsheet reference."""

    def fetch(self) -> SourceTable:
        """Fetch column names and raw rows, or raise a radar error."""


def resolve_source(request: BuildRequest, config: RadarConfig, session: Any) -> SourceReader:
    """Pick the reader for a build request.

    Args:
        request: Build request carrying the query string.
        config: Runtime configuration with the default sheet.
        session: HTTP session handed to the reader.

    Returns:
        CSV reader when ``sheetId`` ends with ``csv``, a spreadsheet reader
        for ``google.com`` references, otherwise the default spreadsheet.
    """
    domain = domain_name(request.query_string)
    params = query_params(request.query_string)
    sheet_id = params.get(SHEET_ID_PARAM)
    reader: SourceReader
    if domain and sheet_id and sheet_id.endswith(CSV_SUFFIX):
        reader = CsvReader(sheet_id, config, session)
    elif domain and domain.endswith(GOOGLE_DOMAIN_SUFFIX) and sheet_id:
        reader = SpreadsheetReader(sheet_id, params.get(SHEET_NAME_PARAM), config, session)
    else:
        reader = SpreadsheetReader(config.default_sheet_reference, None, config, session)
    _LOGGER.info("source_resolved", kind=reader.kind, reference=reader.reference, domain=domain)
    return reader
