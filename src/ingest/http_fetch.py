"""HTTP access helpers for source readers.

This module wraps requests so every network or HTTP failure surfaces
as a single ``SourceUnavailableError`` with the originating URL.
"""

from __future__ import annotations

from typing import Any, Mapping

import requests

from core.errors import SourceUnavailableError


def create_session() -> requests.Session:
    """Create the HTTP session shared by one radar build."""
    session = requests.Session()
    session.headers["Accept"] = "text/csv, text/html;q=0.9, */*;q=0.5"
    return session


def get_response(
    session: Any,
    url: str,
    timeout: float | None,
    params: Mapping[str, str] | None = None,
) -> requests.Response:
    """Issue a GET request without checking its status.

    Args:
        session: Requests session or compatible object.
        url: Target URL.
        timeout: Optional timeout in seconds.
        params: Optional query parameters.

    Returns:
        Raw response object.

    Raises:
        SourceUnavailableError: If the request cannot be completed.
    """
    try:
        return session.get(url, params=params, timeout=timeout)
    except requests.RequestException as error:
        raise SourceUnavailableError(
            f"Failed to fetch {url}: {type(error).__name__}. "
            "Check the address and your network connection."
        ) from error


def fetch_text(
    session: Any,
    url: str,
    timeout: float | None,
    params: Mapping[str, str] | None = None,
) -> str:
    """Fetch a URL and return its decoded body.

    Args:
        session: Requests session or compatible object.
        url: Target URL.
        timeout: Optional timeout in seconds.
        params: Optional query parameters.

    Returns:
        Response body text.

    Raises:
        SourceUnavailableError: If the request fails or returns an error status.
    """
    response = get_response(session, url, timeout, params)
    try:
        response.raise_for_status()
    except requests.HTTPError as error:
        raise SourceUnavailableError(
            f"Failed to fetch {url}: HTTP {response.status_code}. "
            "Make sure the document is published and publicly readable."
        ) from error
    return decode_body(response, url)


def decode_body(response: requests.Response, url: str) -> str:
    """Decode a response body, defaulting to UTF-8.

    Bodies without a declared charset are read as UTF-8 with an optional
    byte-order mark, instead of the ISO-8859-1 requests assumes for text.

    Args:
        response: Successful response.
        url: Source URL used in error messages.

    Returns:
        Decoded body text.

    Raises:
        SourceUnavailableError: If the body cannot be decoded.
    """
    content_type = response.headers.get("Content-Type", "")
    try:
        if "charset=" in content_type.lower():
            return response.content.decode(response.encoding or "utf-8")
        return response.content.decode("utf-8-sig")
    except (UnicodeDecodeError, LookupError) as error:
        raise SourceUnavailableError(
            f"Failed to decode {url}: {error}. Save the document as UTF-8 text."
        ) from error
