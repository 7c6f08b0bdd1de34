"""Radar model assembly.

This module groups sanitized rows into rings and quadrants in a single
linear pass, numbers blips per quadrant, and freezes the result into
an immutable radar aggregate.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

from core.constants import FIRST_BLIP_NUMBER, MAX_RINGS, TOO_MANY_RINGS, UNASSIGNED_BLIP_NUMBER
from core.errors import MalformedDataError
from core.types import SanitizedRow
from model.entities import Blip, Quadrant, Radar, Ring


@dataclass
class _BlipDraft:
    """Mutable blip state that exists only during one build pass."""

    row: SanitizedRow
    ring: Ring
    number: int = UNASSIGNED_BLIP_NUMBER


@dataclass
class _QuadrantDraft:
    """Mutable quadrant state collecting blip drafts in append order."""

    name: str
    blips: list[_BlipDraft] = field(default_factory=list)


def build_radar_model(rows: Sequence[SanitizedRow]) -> Radar:
    """Assemble an immutable radar from sanitized rows.

    Args:
        rows: Sanitized rows in source order.

    Returns:
        Radar whose quadrants appear in first-seen order.

    Raises:
        MalformedDataError: If rows reference more than ``MAX_RINGS`` rings.
    """
    rings = _build_rings(rows)
    quadrant_drafts = _group_into_quadrants(rows, rings)
    for draft in quadrant_drafts.values():
        _assign_numbers(draft.blips)
    quadrants = tuple(_freeze_quadrant(draft) for draft in quadrant_drafts.values())
    return Radar(quadrants=quadrants, rings=tuple(rings.values()))


def distinct_ring_names(rows: Iterable[SanitizedRow]) -> list[str]:
    """Return ring names in order of first appearance."""
    return list(dict.fromkeys(row.ring for row in rows))


def _build_rings(rows: Sequence[SanitizedRow]) -> dict[str, Ring]:
    """Create one ring per distinct ring value.

    Args:
        rows: Sanitized rows.

    Returns:
        Ordered mapping from ring name to ring.

    Raises:
        MalformedDataError: If more than ``MAX_RINGS`` ring names exist.
    """
    ring_names = distinct_ring_names(rows)
    if len(ring_names) > MAX_RINGS:
        raise MalformedDataError(TOO_MANY_RINGS)
    return {name: Ring(name=name, order=order) for order, name in enumerate(ring_names)}


def _group_into_quadrants(
    rows: Sequence[SanitizedRow],
    rings: dict[str, Ring],
) -> dict[str, _QuadrantDraft]:
    """Group blip drafts under quadrants keyed by capitalized name."""
    quadrants: dict[str, _QuadrantDraft] = {}
    for row in rows:
        quadrant_name = row.quadrant.capitalize()
        draft = quadrants.get(quadrant_name)
        if draft is None:
            draft = _QuadrantDraft(name=quadrant_name)
            quadrants[quadrant_name] = draft
        draft.blips.append(_BlipDraft(row=row, ring=rings[row.ring]))
    return quadrants


def _assign_numbers(blips: list[_BlipDraft]) -> None:
    """Number blips by ring order, keeping source order within a ring.

    ``sorted`` is stable, so blips sharing a ring keep their append order
    and re-sorting a quadrant by ring never changes its numbering.
    """
    ordered = sorted(blips, key=lambda draft: draft.ring.order)
    for number, draft in enumerate(ordered, FIRST_BLIP_NUMBER):
        draft.number = number


def _freeze_quadrant(draft: _QuadrantDraft) -> Quadrant:
    """Convert a quadrant draft into an immutable quadrant."""
    return Quadrant(name=draft.name, blips=tuple(_freeze_blip(blip) for blip in draft.blips))


def _freeze_blip(draft: _BlipDraft) -> Blip:
    row = draft.row
    return Blip(
        name=row.name,
        ring=draft.ring,
        is_new=row.is_new.lower() == "true",
        number=draft.number,
        topic=row.topic,
        description=row.description,
        colour=row.colour,
    )
