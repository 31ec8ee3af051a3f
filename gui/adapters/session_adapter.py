"""Qt adapter for the engine Session.

The engine owns state and persistence. Widgets call this adapter's methods and
listen to its signals; they never touch the Session or the store directly.

Threading model
--------------
Everything runs on the Qt main thread. Session calls are synchronous and
cheap (in-memory tuples plus one small SQLite upsert), so there is no worker.
"""

from __future__ import annotations

from PySide6.QtCore import QObject, Signal

from paint_engine.data_models import Paints, Rooms
from paint_engine.model import PaintField, RoomField, WallField
from paint_engine.session import Session
from paint_engine.totals import TotalsReport


class SessionAdapter(QObject):
    """Qt adapter that forwards edits to a Session and announces changes."""

    paints_changed = Signal()
    rooms_changed = Signal()
    save_failed = Signal(str)  # message

    def __init__(self, session: Session) -> None:
        super().__init__()
        self._session = session

    @property
    def paints(self) -> Paints:
        """Current paints."""
        return self._session.paints

    @property
    def rooms(self) -> Rooms:
        """Current rooms."""
        return self._session.rooms

    def totals(self) -> TotalsReport:
        """Current totals, recomputed on every call."""
        return self._session.totals()

    @property
    def last_save_error(self) -> str | None:
        """Message of the most recent failed write, or None if the last write succeeded."""
        err = self._session.last_save_error
        return None if err is None else str(err)

    def _after_paints(self) -> None:
        self._report_save_error()
        self.paints_changed.emit()

    def _after_rooms(self) -> None:
        self._report_save_error()
        self.rooms_changed.emit()

    def _report_save_error(self) -> None:
        err = self._session.last_save_error
        if err is not None:
            self.save_failed.emit(str(err))

    # ---------- Paints ----------
    def add_paint(self) -> str:
        """Add a blank paint."""
        paint_id = self._session.add_paint()
        self._after_paints()
        return paint_id

    def update_paint(self, paint_id: str, field: PaintField, value: object) -> None:
        """Update one paint field."""
        self._session.update_paint(paint_id, field, value)
        self._after_paints()

    def delete_paint(self, paint_id: str) -> None:
        """Delete a paint."""
        self._session.delete_paint(paint_id)
        self._after_paints()

    # ---------- Rooms ----------
    def add_room(self) -> str:
        """Add a "New Room"."""
        room_id = self._session.add_room()
        self._after_rooms()
        return room_id

    def rename_room(self, room_id: str, name: str) -> None:
        """Rename a room."""
        self._session.update_room(room_id, RoomField.NAME, name)
        self._after_rooms()

    def delete_room(self, room_id: str) -> None:
        """Delete a room and its walls."""
        self._session.delete_room(room_id)
        self._after_rooms()

    # ---------- Walls ----------
    def add_wall(self, room_id: str) -> str | None:
        """Add a "New Wall" to a room."""
        wall_id = self._session.add_wall(room_id)
        self._after_rooms()
        return wall_id

    def update_wall(self, room_id: str, wall_id: str, field: WallField, value: object) -> None:
        """Update one wall field."""
        self._session.update_wall(room_id, wall_id, field, value)
        self._after_rooms()

    def delete_wall(self, room_id: str, wall_id: str) -> None:
        """Delete a wall."""
        self._session.delete_wall(room_id, wall_id)
        self._after_rooms()
