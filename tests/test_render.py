from __future__ import annotations

from paint_engine.data_models import Paint, Room, Wall
from paint_engine.render import (
    format_area,
    format_money,
    render_paints_text,
    render_rooms_text,
    render_totals_text,
)
from paint_engine.totals import compute_totals

PAINTS = (
    Paint(id="p1", name="White", code="W-01", coverage=10.0, price=5.0),
    Paint(id="p2", name="Unused", code="U-00", coverage=10.0, price=1.0),
)
ROOMS = (
    Room(
        id="r1",
        name="Kitchen",
        walls=(
            Wall(id="w1", name="North", length=2.0, height=3.0, paint_id="p1"),
            Wall(id="w2", name="South", length=4.0, height=2.0, paint_id="p1"),
            Wall(id="w3", name="Door", length=None, height=2.0, paint_id="gone"),
        ),
    ),
)


def test_render_totals_text_lists_used_paints_and_grand_total() -> None:
    text = render_totals_text(PAINTS, compute_totals(PAINTS, ROOMS))

    assert "White [W-01]" in text
    assert "Area:   14.00 m²" in text
    assert "Amount: 1.40 L" in text
    assert "Cost:   €70.00" in text
    assert "Unused" not in text
    assert text.splitlines()[-1] == "Total Cost: €70.00"


def test_render_totals_text_explains_empty_report() -> None:
    text = render_totals_text((), compute_totals((), ()))
    assert "No walls with complete measurements" in text
    assert text.endswith("Total Cost: €0.00")


def test_render_rooms_text_shows_area_and_paint_state() -> None:
    text = render_rooms_text(PAINTS, ROOMS)

    assert "'Kitchen' (3 walls)" in text
    assert "= 6.00 m²  White (W-01)" in text
    assert "— x 2 m = —  (missing paint)" in text


def test_render_paints_text_marks_unset_values() -> None:
    text = render_paints_text((Paint(id="p9", name="Raw", code="R"),))
    assert "coverage=— m²/L" in text
    assert "price=— €/m²" in text
    assert render_paints_text(()) == "No paints configured."


def test_formatters_use_two_decimals() -> None:
    assert format_area(None) == "—"
    assert format_area(3.14159) == "3.14 m²"
    assert format_money(1.005) in {"€1.00", "€1.01"}
