"""Immutable radar entities.

This module defines the ring, blip, quadrant, and radar aggregate
produced by the model builder and consumed by presenters.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from core.constants import IDEAL_BLIP_WIDTH


@dataclass(frozen=True)
class Ring:
    """Adoption-stage ring.

    Attributes:
        name: Ring name as it appears in the source.
        order: Zero-based index of the ring's first appearance.
    """

    name: str
    order: int


@dataclass(frozen=True)
class Blip:
    """One rated technology item.

    Attributes:
        name: Blip name.
        ring: Shared ring reference, not owned by the blip.
        is_new: Whether the blip is new in this radar edition.
        number: Display number, unique within the owning quadrant.
        topic: Optional topic text.
        description: Optional description text.
        colour: Optional colour hint for renderers.
        width: Ideal display width for renderers.
    """

    name: str
    ring: Ring
    is_new: bool
    number: int
    topic: str = ""
    description: str = ""
    colour: str = ""
    width: int = IDEAL_BLIP_WIDTH


@dataclass(frozen=True)
class Quadrant:
    """Topical grouping of blips in append order."""

    name: str
    blips: tuple[Blip, ...] = ()


@dataclass(frozen=True)
class Radar:
    """Root aggregate for one successful build.

    Attributes:
        quadrants: Quadrants in the order they were first created.
        rings: Rings ordered by first appearance.
    """

    quadrants: tuple[Quadrant, ...] = ()
    rings: tuple[Ring, ...] = ()

    def blips(self) -> Iterator[Blip]:
        """Iterate all blips in quadrant order."""
        for quadrant in self.quadrants:
            yield from quadrant.blips

    def quadrant(self, name: str) -> Quadrant | None:
        """Return the quadrant with a given normalized name, if present."""
        for quadrant in self.quadrants:
            if quadrant.name == name:
                return quadrant
        return None
