"""
Rendering for paint totals and entity listings.

This module renders the model and a TotalsReport to deterministic,
human-readable text. Units are fixed: meters, m², liters and euros, all shown
with two decimals.
"""

from __future__ import annotations

from .data_models import Paints, Rooms
from .model import find_paint
from .totals import TotalsReport, wall_area

UNSET = "—"


def format_area(value: float | None) -> str:
    """Format an area in m², or the unset marker for None."""
    return UNSET if value is None else f"{value:.2f} m²"


def format_liters(value: float) -> str:
    """Format a volume in liters."""
    return f"{value:.2f} L"


def format_money(value: float) -> str:
    """Format a euro amount."""
    return f"€{value:.2f}"


def format_measure(value: float | None) -> str:
    """Format an optional number for listings ("—" when unset)."""
    return UNSET if value is None else f"{value:g}"


def render_totals_text(paints: Paints, report: TotalsReport) -> str:
    """
    Render a totals report as deterministic plain text.

    Parameters
    ----------
    paints:
        Paint catalogue, used for display names/codes and ordering.
    report:
        Output of :func:`compute_totals`.

    Returns
    -------
    str
        One block per paint with totals (in catalogue order), then the grand
        total. Buckets whose paint is no longer in the catalogue are not shown.
    """
    lines: list[str] = ["Summary", ""]

    for paint in paints:
        totals = report.per_paint.get(paint.id)
        if totals is None:
            continue
        lines.append(f"{paint.name} [{paint.code}]")
        lines.append(f"  Area:   {format_area(totals.area)}")
        lines.append(f"  Amount: {format_liters(totals.liters)}")
        lines.append(f"  Cost:   {format_money(totals.cost)}")
        lines.append("")

    if not report.per_paint:
        lines.append("No walls with complete measurements and a configured paint.")
        lines.append("")

    lines.append(f"Total Cost: {format_money(report.grand_total_cost)}")
    return "\n".join(lines)


def render_paints_text(paints: Paints) -> str:
    """Render the paint catalogue, one paint per line."""
    if not paints:
        return "No paints configured."
    lines = []
    for p in paints:
        lines.append(
            f"{p.id}  {p.name!r} code={p.code!r} "
            f"coverage={format_measure(p.coverage)} m²/L price={format_measure(p.price)} €/m²"
        )
    return "\n".join(lines)


def render_rooms_text(paints: Paints, rooms: Rooms) -> str:
    """Render rooms and their walls, including each wall's area and paint."""
    if not rooms:
        return "No rooms."
    lines: list[str] = []
    for room in rooms:
        lines.append(f"{room.id}  {room.name!r} ({len(room.walls)} walls)")
        for wall in room.walls:
            paint = find_paint(paints, wall.paint_id)
            if paint is not None:
                paint_text = paint.label
            elif wall.paint_id:
                paint_text = "(missing paint)"
            else:
                paint_text = "(no paint)"
            lines.append(
                f"  {wall.id}  {wall.name!r} "
                f"{format_measure(wall.length)} x {format_measure(wall.height)} m "
                f"= {format_area(wall_area(wall))}  {paint_text}"
            )
    return "\n".join(lines)
