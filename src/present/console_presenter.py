"""Console presentation of radar build states.

This module defines the presenter contract the pipeline reports to and a
console implementation that prints a loading banner, a radar summary,
or the error message as plain text or JSON.
"""

from __future__ import annotations

import json
import sys
from typing import Any, Protocol, TextIO

from core.constants import BANNER_TITLE, DEFAULT_PAGE_TITLE
from model.entities import Blip, Radar


class RadarPresenter(Protocol):
    """Consumer of build states, called once per state by the pipeline."""

    def show_loading(self) -> None:
        """Render the loading shell before any fetch."""

    def show_radar(self, title: str, radar: Radar) -> None:
        """Render a successfully built radar."""

    def show_error(self, error: Exception) -> None:
        """Render a single failure message."""


class ConsolePresenter:
    """Presenter writing build states to text streams."""

    def __init__(
        self,
        output: TextIO | None = None,
        errors: TextIO | None = None,
        as_json: bool = False,
    ) -> None:
        self._output = output or sys.stdout
        self._errors = errors or sys.stderr
        self._as_json = as_json

    def show_loading(self) -> None:
        if self._as_json:
            return
        print(f"{DEFAULT_PAGE_TITLE} | {BANNER_TITLE}", file=self._errors)

    def show_radar(self, title: str, radar: Radar) -> None:
        if self._as_json:
            json.dump(radar_to_payload(title, radar), self._output, indent=2)
            self._output.write("\n")
            return
        print(title, file=self._output)
        for quadrant in radar.quadrants:
            print(f"\n{quadrant.name}", file=self._output)
            for blip in sorted(quadrant.blips, key=lambda item: item.number):
                print(_format_blip(blip), file=self._output)

    def show_error(self, error: Exception) -> None:
        print(str(error), file=self._errors)


def radar_to_payload(title: str, radar: Radar) -> dict[str, Any]:
    """Convert a radar to a JSON-serializable payload.

    Args:
        title: Document display name.
        radar: Built radar.

    Returns:
        Nested dictionary of rings, quadrants, and blips.
    """
    return {
        "title": title,
        "rings": [{"name": ring.name, "order": ring.order} for ring in radar.rings],
        "quadrants": [
            {
                "name": quadrant.name,
                "blips": [_blip_payload(blip) for blip in quadrant.blips],
            }
            for quadrant in radar.quadrants
        ],
    }


def _blip_payload(blip: Blip) -> dict[str, Any]:
    return {
        "number": blip.number,
        "name": blip.name,
        "ring": blip.ring.name,
        "isNew": blip.is_new,
        "topic": blip.topic,
        "description": blip.description,
        "colour": blip.colour,
        "width": blip.width,
    }


def _format_blip(blip: Blip) -> str:
    marker = " (new)" if blip.is_new else ""
    return f"  {blip.number:>3}. {blip.name} [{blip.ring.name}]{marker}"
