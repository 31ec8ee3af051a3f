from __future__ import annotations

import pytest

from paint_engine.data_models import Paint
from paint_engine.errors import UnknownFieldError
from paint_engine.ids import SequentialIdSource
from paint_engine.model import PaintField, add_paint, delete_paint, update_paint


def _catalogue() -> tuple[Paint, ...]:
    return (
        Paint(id="p1", name="White", code="W-01", coverage=10.0, price=5.0),
        Paint(id="p2", name="Grey", code="G-02", coverage=8.0, price=6.5),
        Paint(id="p3", name="Blue", code="B-03"),
    )


def test_add_paint_appends_blank_paint_with_fresh_id() -> None:
    ids = SequentialIdSource(prefix="paint")
    paints = add_paint((), ids=ids)
    paints = add_paint(paints, ids=ids)

    assert [p.id for p in paints] == ["paint-1", "paint-2"]
    assert paints[0] == Paint(id="paint-1", name="", code="", coverage=None, price=None)


def test_add_paint_does_not_mutate_input() -> None:
    before = _catalogue()
    after = add_paint(before, ids=SequentialIdSource())
    assert len(before) == 3
    assert len(after) == 4
    assert after[:3] == before


def test_update_paint_replaces_only_the_named_field() -> None:
    paints = update_paint(_catalogue(), "p2", PaintField.NAME, "Slate")

    assert paints[1] == Paint(id="p2", name="Slate", code="G-02", coverage=8.0, price=6.5)
    assert paints[0] == _catalogue()[0]
    assert paints[2] == _catalogue()[2]


def test_update_paint_accepts_field_names_as_strings() -> None:
    paints = update_paint(_catalogue(), "p3", "coverage", "12.5")
    assert paints[2].coverage == 12.5


def test_update_paint_normalizes_unparsable_numbers_to_unset() -> None:
    paints = update_paint(_catalogue(), "p1", PaintField.PRICE, "twelve")
    assert paints[0].price is None
    assert paints[0].coverage == 10.0


def test_update_paint_treats_out_of_range_integers_as_unset() -> None:
    paints = update_paint(_catalogue(), "p1", PaintField.PRICE, 10**400)
    assert paints[0].price is None


def test_update_paint_unknown_id_is_a_noop() -> None:
    paints = _catalogue()
    assert update_paint(paints, "nope", PaintField.NAME, "x") is paints


def test_update_paint_rejects_unknown_field() -> None:
    with pytest.raises(UnknownFieldError):
        update_paint(_catalogue(), "p1", "colour", "red")


def test_delete_paint_removes_exactly_one_entry() -> None:
    before = _catalogue()
    after = delete_paint(before, "p2")

    assert [p.id for p in after] == ["p1", "p3"]
    assert after[0] == before[0]
    assert after[1] == before[2]


def test_delete_paint_unknown_id_is_a_noop() -> None:
    paints = _catalogue()
    assert delete_paint(paints, "missing") == paints
