"""Core constants used across radar modules.

This module centralizes schema names, limits, and user-facing messages.
Keeping values here avoids magic literals in pipeline logic.
"""

from __future__ import annotations

DEFAULT_SHEET_REFERENCE = (
    "https://docs.google.com/spreadsheets/d/"
    "1UTjdvqlIlWQVbPFN0C1ofM_YwuhGfPNaHQZK9J2clh0/edit#gid=0"
)
DEFAULT_SHEETS_BASE_URL = "https://docs.google.com/spreadsheets/d"
DEFAULT_PAGE_TITLE = "Build your own Radar"
BANNER_TITLE = "The SUN"

SHEET_ID_PARAM = "sheetId"
SHEET_NAME_PARAM = "sheetName"
CSV_SUFFIX = "csv"
GOOGLE_DOMAIN_SUFFIX = "google.com"

REQUIRED_HEADERS = ("name", "ring", "quadrant", "isNew")
IS_NEW_VALUES = ("true", "false")

MAX_RINGS = 4
UNASSIGNED_BLIP_NUMBER = -1
FIRST_BLIP_NUMBER = 1
IDEAL_BLIP_WIDTH = 22

TOO_MANY_RINGS = "More than 4 rings."
MISSING_HEADERS = (
    "Document is missing one or more required headers or they are misspelled. "
    'Check that your document contains headers for "name", "ring", "quadrant", "isNew".'
)
MISSING_CONTENT = "Document is missing content."
INVALID_IS_NEW = (
    'Document has an "isNew" value other than "true" or "false". '
    "Check the isNew column of every row."
)
SHEET_NOT_FOUND = (
    "Oops! We can't find the Google Sheet you've entered. Can you check the URL?"
)
