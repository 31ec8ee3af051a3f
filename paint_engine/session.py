"""
Calculator session: in-memory state mirrored to a KeyValueStore.

Lifecycle
---------
- The session reads both collections once, at construction.
- Every mutation replaces the affected collection and writes it back.
- Writes are best-effort. A failed write is logged and kept in
  ``last_save_error``; the in-memory state stays authoritative.

Totals are derived on every read rather than maintained incrementally.
"""

from __future__ import annotations

import logging

from . import model
from .data_models import Paints, Rooms
from .ids import DEFAULT_ID_SOURCE, IdSource
from .model import PaintField, RoomField, WallField
from .state_store.api import KeyValueStore
from .state_store.codec import load_state, save_paints, save_rooms
from .state_store.errors import StateStoreError
from .totals import TotalsReport, compute_totals

LOGGER = logging.getLogger(__name__)


class Session:
    """
    Owns the paints and rooms collections for one user session.

    Parameters
    ----------
    store:
        Storage port. Read once here, written after every mutation.
    ids:
        Source of ids for new paints, rooms and walls.

    Raises
    ------
    StateStoreError
        If the store cannot be read at startup. Corrupt content loads as empty
        collections instead.
    """

    def __init__(self, store: KeyValueStore, *, ids: IdSource = DEFAULT_ID_SOURCE) -> None:
        self._store = store
        self._ids = ids
        state = load_state(store)
        self._paints: Paints = state.paints
        self._rooms: Rooms = state.rooms
        self.last_save_error: StateStoreError | None = None
        LOGGER.debug("Loaded %d paints and %d rooms", len(self._paints), len(self._rooms))

    @property
    def paints(self) -> Paints:
        """Current paints, in insertion order."""
        return self._paints

    @property
    def rooms(self) -> Rooms:
        """Current rooms, in insertion order."""
        return self._rooms

    def totals(self) -> TotalsReport:
        """Compute totals from the current state."""
        return compute_totals(self._paints, self._rooms)

    # ---------- Persistence ----------
    def _set_paints(self, paints: Paints) -> None:
        if paints is self._paints:
            return
        self._paints = paints
        self._persist(save_paints, paints)

    def _set_rooms(self, rooms: Rooms) -> None:
        if rooms is self._rooms:
            return
        self._rooms = rooms
        self._persist(save_rooms, rooms)

    def _persist(self, save, collection) -> None:
        try:
            save(self._store, collection)
        except StateStoreError as exc:
            LOGGER.warning("Could not persist state: %s", exc)
            self.last_save_error = exc
            return
        self.last_save_error = None

    # ---------- Paints ----------
    def add_paint(self) -> str:
        """Append a blank paint and return its id."""
        self._set_paints(model.add_paint(self._paints, ids=self._ids))
        return self._paints[-1].id

    def update_paint(self, paint_id: str, field: PaintField | str, value: object) -> None:
        """Update one paint field; unknown ids are ignored."""
        self._set_paints(model.update_paint(self._paints, paint_id, field, value))

    def delete_paint(self, paint_id: str) -> None:
        """Delete a paint; walls keep their (now dangling) reference."""
        self._set_paints(model.delete_paint(self._paints, paint_id))

    # ---------- Rooms ----------
    def add_room(self) -> str:
        """Append a "New Room" and return its id."""
        self._set_rooms(model.add_room(self._rooms, ids=self._ids))
        return self._rooms[-1].id

    def update_room(self, room_id: str, field: RoomField | str, value: object) -> None:
        """Update one room field; unknown ids are ignored."""
        self._set_rooms(model.update_room(self._rooms, room_id, field, value))

    def delete_room(self, room_id: str) -> None:
        """Delete a room and its walls."""
        self._set_rooms(model.delete_room(self._rooms, room_id))

    # ---------- Walls ----------
    def add_wall(self, room_id: str) -> str | None:
        """Append a "New Wall" to a room and return its id, or None if the room is unknown."""
        before = self._rooms
        self._set_rooms(model.add_wall(self._rooms, room_id, ids=self._ids))
        if self._rooms is before:
            return None
        room = model.find_room(self._rooms, room_id)
        assert room is not None
        return room.walls[-1].id

    def update_wall(
        self, room_id: str, wall_id: str, field: WallField | str, value: object
    ) -> None:
        """Update one wall field; unknown room or wall ids are ignored."""
        self._set_rooms(model.update_wall(self._rooms, room_id, wall_id, field, value))

    def delete_wall(self, room_id: str, wall_id: str) -> None:
        """Remove a wall from a room."""
        self._set_rooms(model.delete_wall(self._rooms, room_id, wall_id))
