"""
Paint totals aggregation.

This module computes, per paint, the total wall area, the liters required and
the cost, plus a grand total cost. It is a pure function of the current paints
and rooms and is cheap enough to recompute on every read.

Invariants
----------
- A wall contributes only if its paint resolves and length, height, coverage
  and price are all set. There are no partial contributions.
- Missing values are excluded, never treated as zero.
- A paint with zero coverage is excluded (no division by zero).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from .data_models import Paint, Paints, Rooms, Wall


@dataclass(frozen=True, slots=True)
class PaintTotals:
    """
    Aggregated usage of a single paint.

    Attributes
    ----------
    area:
        Total painted area in m².
    liters:
        Paint volume required in liters.
    cost:
        Cost in €.
    """

    area: float = 0.0
    liters: float = 0.0
    cost: float = 0.0


@dataclass(frozen=True, slots=True)
class TotalsReport:
    """Per-paint totals keyed by paint id, and the grand total cost."""

    per_paint: Mapping[str, PaintTotals] = field(default_factory=dict)
    grand_total_cost: float = 0.0


@dataclass(frozen=True, slots=True)
class WallContribution:
    """A single wall's qualifying contribution to a paint bucket."""

    paint_id: str
    area: float
    liters: float
    cost: float


def wall_area(wall: Wall) -> float | None:
    """
    Return the wall's area, or None when length or height is unset.

    Parameters
    ----------
    wall:
        Wall to measure.

    Returns
    -------
    float | None
        ``length * height`` in m².
    """
    if wall.length is None or wall.height is None:
        return None
    return wall.length * wall.height


def wall_contribution(wall: Wall, paint: Paint | None) -> WallContribution | None:
    """
    Return what ``wall`` adds to its paint's totals, or None if it is excluded.

    Parameters
    ----------
    wall:
        Wall being costed.
    paint:
        The resolved paint for ``wall.paint_id``, or None if it did not resolve.

    Returns
    -------
    WallContribution | None
        None when the paint is missing, any of length/height/coverage/price is
        unset, or the coverage is zero.
    """
    if paint is None:
        return None
    area = wall_area(wall)
    if area is None or paint.coverage is None or paint.price is None:
        return None
    if paint.coverage == 0:
        return None
    return WallContribution(
        paint_id=paint.id,
        area=area,
        liters=area / paint.coverage,
        cost=area * paint.price,
    )


def compute_totals(paints: Paints, rooms: Rooms) -> TotalsReport:
    """
    Aggregate paint usage across every wall of every room.

    Parameters
    ----------
    paints:
        Paint catalogue. Walls are resolved against it by id.
    rooms:
        Rooms and their walls.

    Returns
    -------
    TotalsReport
        Totals for each paint with at least one qualifying wall, and the sum of
        their costs.
    """
    by_id = {p.id: p for p in paints}
    buckets: dict[str, PaintTotals] = {}
    grand_total = 0.0

    for room in rooms:
        for wall in room.walls:
            contribution = wall_contribution(wall, by_id.get(wall.paint_id))
            if contribution is None:
                continue
            current = buckets.get(contribution.paint_id, PaintTotals())
            buckets[contribution.paint_id] = PaintTotals(
                area=current.area + contribution.area,
                liters=current.liters + contribution.liters,
                cost=current.cost + contribution.cost,
            )
            grand_total += contribution.cost

    return TotalsReport(per_paint=buckets, grand_total_cost=grand_total)
