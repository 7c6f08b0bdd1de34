"""Published spreadsheet source reader.

This module resolves a spreadsheet reference to a sheet id, checks the
sheet is published before any rows are fetched, and reads one tab as CSV.
"""

from __future__ import annotations

from dataclasses import dataclass
import html
import re
from typing import Any

from core.config import RadarConfig
from core.constants import SHEET_NOT_FOUND
from core.errors import SheetNotFoundError, SourceUnavailableError
from core.logging_config import get_logger
from core.types import SourceTable
from ingest.csv_reader import parse_csv_text
from ingest.http_fetch import decode_body, fetch_text, get_response

_LOGGER = get_logger(__name__)
_SHEET_URL_PATTERN = re.compile(r"/spreadsheets/d/([A-Za-z0-9_-]+)")
_SHEET_KEY_PATTERN = re.compile(r"[?&#]key=([A-Za-z0-9_-]+)")
_BARE_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")
_OG_TITLE_PATTERN = re.compile(
    r"<meta[^>]+property=[\"']og:title[\"'][^>]+content=[\"']([^\"']*)[\"']",
    re.IGNORECASE,
)
_HTML_TITLE_PATTERN = re.compile(r"<title>(.*?)</title>", re.IGNORECASE | re.DOTALL)
_TITLE_SUFFIX = " - Google Sheets"
_NOT_FOUND_STATUSES = (401, 403, 404)
_LOGIN_HOST = "accounts.google.com"


@dataclass(frozen=True)
class SheetReference:
    """Resolved spreadsheet identity."""

    sheet_id: str
    sheet_name: str | None = None


def parse_sheet_reference(reference: str, sheet_name: str | None = None) -> SheetReference:
    """Resolve a spreadsheet URL or bare id to a sheet reference.

    Args:
        reference: Spreadsheet URL or id.
        sheet_name: Optional tab name.

    Returns:
        Parsed sheet reference.

    Raises:
        SheetNotFoundError: If no sheet id can be found in the reference.
    """
    candidate = reference.strip()
    for pattern in (_SHEET_URL_PATTERN, _SHEET_KEY_PATTERN):
        match = pattern.search(candidate)
        if match:
            return SheetReference(sheet_id=match.group(1), sheet_name=sheet_name or None)
    if _BARE_ID_PATTERN.match(candidate):
        return SheetReference(sheet_id=candidate, sheet_name=sheet_name or None)
    raise SheetNotFoundError(SHEET_NOT_FOUND)


class SpreadsheetReader:
    """Source reader for one tab of a published spreadsheet."""

    kind = "spreadsheet"

    def __init__(
        self,
        reference: str,
        sheet_name: str | None,
        config: RadarConfig,
        session: Any,
    ) -> None:
        self._reference = reference
        self.sheet_name = sheet_name or None
        self._config = config
        self._session = session

    @property
    def reference(self) -> str:
        return self._reference

    def fetch(self) -> SourceTable:
        """Check the sheet exists, then read its rows.

        Returns:
            Source table titled with the spreadsheet display name.

        Raises:
            SheetNotFoundError: If the sheet is missing or unpublished.
            SourceUnavailableError: If the fetch or CSV parse fails.
        """
        sheet = parse_sheet_reference(self._reference, self.sheet_name)
        title = self._load_title(sheet)
        body = fetch_text(
            self._session,
            self._document_url(sheet, "gviz/tq"),
            self._config.http_timeout,
            params=_export_params(sheet),
        )
        column_names, rows = parse_csv_text(body, self._reference)
        return SourceTable(title=title, column_names=column_names, rows=rows)

    def _load_title(self, sheet: SheetReference) -> str:
        """Fetch the published page and read the document title.

        Raises:
            SheetNotFoundError: If the page does not exist or needs a login.
            SourceUnavailableError: If the page cannot be fetched.
        """
        url = self._document_url(sheet, "htmlview")
        response = get_response(self._session, url, self._config.http_timeout)
        if response.status_code in _NOT_FOUND_STATUSES or _LOGIN_HOST in (response.url or ""):
            _LOGGER.warning("sheet_not_found", sheet_id=sheet.sheet_id, status=response.status_code)
            raise SheetNotFoundError(SHEET_NOT_FOUND)
        if not response.ok:
            raise SourceUnavailableError(
                f"Failed to fetch {url}: HTTP {response.status_code}. "
                "Try again once the spreadsheet service is reachable."
            )
        return extract_document_title(decode_body(response, url)) or sheet.sheet_id

    def _document_url(self, sheet: SheetReference, path: str) -> str:
        return f"{self._config.sheets_base_url}/{sheet.sheet_id}/{path}"


def extract_document_title(page: str) -> str | None:
    """Read a spreadsheet title from its published HTML page.

    Args:
        page: HTML body of the published page.

    Returns:
        Document title, or ``None`` when the page has none.
    """
    match = _OG_TITLE_PATTERN.search(page) or _HTML_TITLE_PATTERN.search(page)
    if match is None:
        return None
    title = html.unescape(match.group(1)).strip().removesuffix(_TITLE_SUFFIX).strip()
    return title or None


def _export_params(sheet: SheetReference) -> dict[str, str]:
    # Without a sheet name the export returns the first tab.
    params = {"tqx": "out:csv"}
    if sheet.sheet_name:
        params["sheet"] = sheet.sheet_name
    return params
