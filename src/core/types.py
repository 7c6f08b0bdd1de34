"""Shared typed models.

This module defines immutable data models passed between the source
readers, validation, sanitization, and model-building stages.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

RawRow = Mapping[str, Optional[str]]


@dataclass(frozen=True)
class BuildRequest:
    """Explicit request value for one radar build.

    Attributes:
        query_string: Query part of the triggering URL, or the whole URL.
    """

    query_string: str = ""

    @classmethod
    def from_url(cls, url: str) -> "BuildRequest":
        """Build a request from a full URL or a bare query string.

        The ``#fragment`` is dropped, as it is not part of a page's query.
        """
        location, _, _ = url.partition("#")
        _, separator, query = location.partition("?")
        return cls(query_string=query if separator else location)


@dataclass(frozen=True)
class SanitizedRow:
    """Validated and defaulted row ready for grouping.

    Attributes:
        name: Blip name.
        ring: Ring name the blip belongs to.
        quadrant: Raw quadrant name, normalized later by the model builder.
        is_new: Lowercase ``"true"`` or ``"false"``.
        topic: Optional topic, empty when absent.
        description: Optional description, empty when absent.
        colour: Optional colour, empty when absent.
    """

    name: str
    ring: str
    quadrant: str
    is_new: str
    topic: str = ""
    description: str = ""
    colour: str = ""


@dataclass(frozen=True)
class SourceTable:
    """Raw tabular data fetched by a source reader.

    Attributes:
        title: Display name of the spreadsheet or file.
        column_names: Header names actually present in the source.
        rows: Raw rows keyed by column name.
    """

    title: str
    column_names: tuple[str, ...]
    rows: tuple[RawRow, ...]
