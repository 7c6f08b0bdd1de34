"""URL and query-string parsing helpers.

This module extracts request parameters, the authority of an embedded
URL, and the last path segment used as a CSV document title.
"""

from __future__ import annotations

import re
from urllib.parse import unquote

_QUERY_PAIR_PATTERN = re.compile(r"([^&=]+)=?([^&]*)")
_DOMAIN_PATTERN = re.compile(r".+://([^/]+)")
_FILE_NAME_PATTERN = re.compile(r"([^/]+)$")


def query_params(query_string: str) -> dict[str, str]:
    """Parse ``key=value`` pairs separated by ``&``.

    Args:
        query_string: Raw query string, without the leading ``?``.

    Returns:
        Decoded parameters; later duplicates overwrite earlier ones.
    """
    params: dict[str, str] = {}
    for match in _QUERY_PAIR_PATTERN.finditer(query_string):
        params[_decode(match.group(1))] = _decode(match.group(2))
    return params


def domain_name(url: str) -> str | None:
    """Return the authority of a ``scheme://authority/...`` string.

    Args:
        url: URL or query string embedding a URL.

    Returns:
        Authority component, or ``None`` when no scheme is present.
    """
    match = _DOMAIN_PATTERN.match(_decode(url))
    return match.group(1) if match else None


def file_name(url: str) -> str:
    """Return the last path segment of a URL.

    Args:
        url: URL or path.

    Returns:
        Last segment, or the input unchanged when none exists.
    """
    match = _FILE_NAME_PATTERN.search(_decode(url))
    return match.group(1) if match else url


def _decode(value: str) -> str:
    """Decode ``+`` as space, then percent-escapes."""
    return unquote(value.replace("+", " "))
