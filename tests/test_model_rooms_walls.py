from __future__ import annotations

from paint_engine.data_models import Room, Wall
from paint_engine.ids import SequentialIdSource
from paint_engine.model import (
    RoomField,
    WallField,
    add_room,
    add_wall,
    delete_room,
    delete_wall,
    find_room,
    update_room,
    update_wall,
    wall_count,
)


def _rooms() -> tuple[Room, ...]:
    return (
        Room(
            id="r1",
            name="Kitchen",
            walls=(
                Wall(id="w1", name="North", length=3.0, height=2.5, paint_id="p1"),
                Wall(id="w2", name="South", length=3.0, height=2.5, paint_id=""),
            ),
        ),
        Room(id="r2", name="Hall", walls=(Wall(id="w3", name="East", length=1.0, height=2.0),)),
    )


def test_add_room_appends_named_room_without_walls() -> None:
    rooms = add_room((), ids=SequentialIdSource(prefix="room"))
    assert rooms == (Room(id="room-1", name="New Room", walls=()),)


def test_update_room_renames_matching_room() -> None:
    rooms = update_room(_rooms(), "r2", RoomField.NAME, "Hallway")
    assert rooms[1].name == "Hallway"
    assert rooms[1].walls == _rooms()[1].walls
    assert rooms[0] == _rooms()[0]


def test_update_room_unknown_id_is_a_noop() -> None:
    rooms = _rooms()
    assert update_room(rooms, "r9", "name", "x") is rooms


def test_delete_room_cascades_to_its_walls() -> None:
    before = _rooms()
    target = before[0]
    after = delete_room(before, target.id)

    assert find_room(after, target.id) is None
    assert wall_count(after) == wall_count(before) - len(target.walls)


def test_delete_room_unknown_id_is_a_noop() -> None:
    rooms = _rooms()
    assert delete_room(rooms, "r9") is rooms


def test_add_wall_appends_blank_wall_to_room_end() -> None:
    rooms = add_wall(_rooms(), "r1", ids=SequentialIdSource(prefix="wall"))
    walls = rooms[0].walls

    assert [w.id for w in walls] == ["w1", "w2", "wall-1"]
    assert walls[-1] == Wall(id="wall-1", name="New Wall", length=None, height=None, paint_id="")
    assert rooms[1] == _rooms()[1]


def test_add_wall_unknown_room_is_a_noop() -> None:
    rooms = _rooms()
    assert add_wall(rooms, "r9", ids=SequentialIdSource()) is rooms


def test_update_wall_sets_numeric_and_text_fields() -> None:
    rooms = update_wall(_rooms(), "r1", "w2", WallField.LENGTH, "4.2")
    rooms = update_wall(rooms, "r1", "w2", WallField.PAINT_ID, "p7")
    rooms = update_wall(rooms, "r1", "w2", "height", "oops")

    wall = rooms[0].walls[1]
    assert wall.length == 4.2
    assert wall.paint_id == "p7"
    assert wall.height is None
    assert rooms[0].walls[0] == _rooms()[0].walls[0]


def test_update_wall_wrong_room_is_a_noop() -> None:
    rooms = _rooms()
    assert update_wall(rooms, "r2", "w1", WallField.NAME, "x") is rooms
    assert update_wall(rooms, "r9", "w1", WallField.NAME, "x") is rooms


def test_delete_wall_removes_only_that_wall() -> None:
    rooms = delete_wall(_rooms(), "r1", "w1")
    assert [w.id for w in rooms[0].walls] == ["w2"]
    assert rooms[1] == _rooms()[1]


def test_delete_wall_unknown_ids_are_a_noop() -> None:
    rooms = _rooms()
    assert delete_wall(rooms, "r1", "w3") is rooms
    assert delete_wall(rooms, "r9", "w1") is rooms


def test_add_then_delete_wall_restores_wall_sequence() -> None:
    before = _rooms()
    added = add_wall(before, "r1", ids=SequentialIdSource(prefix="tmp"))
    new_wall_id = added[0].walls[-1].id

    restored = delete_wall(added, "r1", new_wall_id)
    assert restored == before
