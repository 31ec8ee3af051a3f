from __future__ import annotations

from paint_engine.ids import SequentialIdSource, UuidIdSource


def test_sequential_id_source_counts_from_one() -> None:
    ids = SequentialIdSource(prefix="x")
    assert [ids.new_id() for _ in range(3)] == ["x-1", "x-2", "x-3"]


def test_uuid_id_source_returns_distinct_hex_ids() -> None:
    ids = UuidIdSource()
    values = {ids.new_id() for _ in range(50)}
    assert len(values) == 50
    assert all(len(v) == 32 for v in values)
