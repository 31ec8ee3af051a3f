"""
Mutation operations over the paints and rooms collections.

Every operation takes the current collection and returns an updated one. Inputs
are never mutated. An id that matches nothing turns the operation into a no-op
returning the input unchanged.

Field updates keep the ``(id, field, value)`` call shape but the field is drawn
from a closed enum per entity. Text fields are coerced with ``str()``; numeric
fields pass through :func:`parse_measure`, so unparsable input is stored as
unset rather than as garbage.
"""

from __future__ import annotations

from dataclasses import replace
from enum import Enum

from .data_models import (
    DEFAULT_ROOM_NAME,
    DEFAULT_WALL_NAME,
    Paint,
    Paints,
    Room,
    Rooms,
    Wall,
    parse_measure,
)
from .errors import UnknownFieldError
from .ids import DEFAULT_ID_SOURCE, IdSource


class PaintField(str, Enum):
    """Updatable paint fields."""

    NAME = "name"
    CODE = "code"
    COVERAGE = "coverage"
    PRICE = "price"


class RoomField(str, Enum):
    """Updatable room fields."""

    NAME = "name"


class WallField(str, Enum):
    """Updatable wall fields."""

    NAME = "name"
    LENGTH = "length"
    HEIGHT = "height"
    PAINT_ID = "paint_id"


_NUMERIC_FIELDS = frozenset(
    {PaintField.COVERAGE, PaintField.PRICE, WallField.LENGTH, WallField.HEIGHT}
)


def _coerce_field(enum_cls: type[Enum], field: object) -> Enum:
    if isinstance(field, enum_cls):
        return field
    try:
        return enum_cls(str(field))
    except ValueError as exc:
        allowed = ", ".join(m.value for m in enum_cls)
        raise UnknownFieldError(f"Unknown field {field!r}; expected one of: {allowed}") from exc


def _coerce_value(field: Enum, value: object) -> object:
    if field in _NUMERIC_FIELDS:
        return parse_measure(value)
    return "" if value is None else str(value)


# ---------- Paints ----------


def add_paint(paints: Paints, *, ids: IdSource = DEFAULT_ID_SOURCE) -> Paints:
    """
    Append a blank paint.

    Parameters
    ----------
    paints:
        Current paints.
    ids:
        Source of the new paint's id.

    Returns
    -------
    Paints
        ``paints`` plus a new paint with empty name/code and unset coverage/price.
    """
    return (*paints, Paint(id=ids.new_id()))


def update_paint(
    paints: Paints, paint_id: str, field: PaintField | str, value: object
) -> Paints:
    """
    Replace one field of the paint matching ``paint_id``.

    Raises
    ------
    UnknownFieldError
        If ``field`` is not a paint field.
    """
    f = _coerce_field(PaintField, field)
    if not any(p.id == paint_id for p in paints):
        return paints
    new_value = _coerce_value(f, value)
    return tuple(replace(p, **{f.value: new_value}) if p.id == paint_id else p for p in paints)


def delete_paint(paints: Paints, paint_id: str) -> Paints:
    """Remove the paint matching ``paint_id``. Walls referencing it are left as-is."""
    if not any(p.id == paint_id for p in paints):
        return paints
    return tuple(p for p in paints if p.id != paint_id)


# ---------- Rooms ----------


def add_room(rooms: Rooms, *, ids: IdSource = DEFAULT_ID_SOURCE) -> Rooms:
    """Append a room named "New Room" with no walls."""
    return (*rooms, Room(id=ids.new_id(), name=DEFAULT_ROOM_NAME))


def update_room(rooms: Rooms, room_id: str, field: RoomField | str, value: object) -> Rooms:
    """
    Replace one field of the room matching ``room_id``.

    Raises
    ------
    UnknownFieldError
        If ``field`` is not a room field.
    """
    f = _coerce_field(RoomField, field)
    if not any(r.id == room_id for r in rooms):
        return rooms
    new_value = _coerce_value(f, value)
    return tuple(replace(r, **{f.value: new_value}) if r.id == room_id else r for r in rooms)


def delete_room(rooms: Rooms, room_id: str) -> Rooms:
    """Remove the room matching ``room_id`` together with all of its walls."""
    if not any(r.id == room_id for r in rooms):
        return rooms
    return tuple(r for r in rooms if r.id != room_id)


# ---------- Walls ----------


def _map_room(rooms: Rooms, room_id: str, change) -> Rooms:
    # change(room) returns the replacement room, or the same object for a no-op.
    out: list[Room] = []
    changed = False
    for r in rooms:
        if r.id == room_id:
            new_room = change(r)
            changed = changed or new_room is not r
            out.append(new_room)
        else:
            out.append(r)
    return tuple(out) if changed else rooms


def add_wall(rooms: Rooms, room_id: str, *, ids: IdSource = DEFAULT_ID_SOURCE) -> Rooms:
    """
    Append a blank wall to the room matching ``room_id``.

    The new wall is named "New Wall", has no length/height and no paint.
    """
    if not any(r.id == room_id for r in rooms):
        return rooms
    wall = Wall(id=ids.new_id(), name=DEFAULT_WALL_NAME)
    return _map_room(rooms, room_id, lambda r: replace(r, walls=(*r.walls, wall)))


def update_wall(
    rooms: Rooms, room_id: str, wall_id: str, field: WallField | str, value: object
) -> Rooms:
    """
    Replace one field of a wall, addressed by room id and wall id.

    Raises
    ------
    UnknownFieldError
        If ``field`` is not a wall field.
    """
    f = _coerce_field(WallField, field)
    new_value = _coerce_value(f, value)

    def change(room: Room) -> Room:
        if not any(w.id == wall_id for w in room.walls):
            return room
        walls = tuple(
            replace(w, **{f.value: new_value}) if w.id == wall_id else w for w in room.walls
        )
        return replace(room, walls=walls)

    return _map_room(rooms, room_id, change)


def delete_wall(rooms: Rooms, room_id: str, wall_id: str) -> Rooms:
    """Remove a wall from its room; no-op if either id is unknown."""

    def change(room: Room) -> Room:
        if not any(w.id == wall_id for w in room.walls):
            return room
        return replace(room, walls=tuple(w for w in room.walls if w.id != wall_id))

    return _map_room(rooms, room_id, change)


def find_paint(paints: Paints, paint_id: str) -> Paint | None:
    """Return the paint with ``paint_id``, or None if absent (including empty id)."""
    if not paint_id:
        return None
    return next((p for p in paints if p.id == paint_id), None)


def find_room(rooms: Rooms, room_id: str) -> Room | None:
    """Return the room with ``room_id``, or None if absent."""
    return next((r for r in rooms if r.id == room_id), None)


def wall_count(rooms: Rooms) -> int:
    """Return the total number of walls across all rooms."""
    return sum(len(r.walls) for r in rooms)
