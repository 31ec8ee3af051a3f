"""
Calculator tab: rooms, walls and the totals summary.

Notes
-----
- Rooms are shown as cards; each wall is one row (name, length, height,
  computed area, paint, delete).
- The summary is recomputed from the session on every change.
- Cards are rebuilt only when rooms or walls are added or removed. Plain field
  edits refresh derived widgets in place so typing never loses focus.
"""

from __future__ import annotations

import html

from PySide6.QtCore import Qt
from PySide6.QtGui import QFont
from PySide6.QtWidgets import (
    QComboBox,
    QGridLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from gui.adapters.session_adapter import SessionAdapter
from paint_engine.data_models import Paints, Room, Wall
from paint_engine.model import WallField, find_paint
from paint_engine.render import (
    format_area,
    format_liters,
    format_measure,
    format_money,
)
from paint_engine.totals import wall_area

_NO_PAINT_TEXT = "Select paint"
_MISSING_PAINT_TEXT = "(missing paint)"


def _measure_text(value: float | None) -> str:
    return "" if value is None else format_measure(value)


def _fill_paint_combo(combo: QComboBox, paints: Paints, selected_id: str) -> None:
    combo.blockSignals(True)
    try:
        combo.clear()
        combo.addItem(_NO_PAINT_TEXT, "")
        for p in paints:
            combo.addItem(p.label, p.id)
        if selected_id and find_paint(paints, selected_id) is None:
            combo.addItem(_MISSING_PAINT_TEXT, selected_id)
        idx = combo.findData(selected_id)
        combo.setCurrentIndex(idx if idx >= 0 else 0)
    finally:
        combo.blockSignals(False)


class WallRow(QWidget):
    """Editor row for a single wall."""

    def __init__(self, room_id: str, wall: Wall, adapter: SessionAdapter) -> None:
        super().__init__()
        self._room_id = room_id
        self._wall_id = wall.id
        self._adapter = adapter

        grid = QGridLayout(self)
        grid.setContentsMargins(0, 2, 0, 2)

        self.name_edit = QLineEdit(wall.name)
        self.length_edit = QLineEdit(_measure_text(wall.length))
        self.height_edit = QLineEdit(_measure_text(wall.height))
        self.area_label = QLabel()
        self.area_label.setStyleSheet("background:#f0f0f0; padding:3px 6px; border-radius:3px;")
        self.paint_combo = QComboBox()
        self.btn_delete = QPushButton("✕")
        self.btn_delete.setToolTip("Delete wall")
        self.btn_delete.setFixedWidth(28)

        for col, text in enumerate(("Wall Name", "Length (m)", "Height (m)", "Area", "Paint")):
            caption = QLabel(text)
            caption.setStyleSheet("color: #666; font-size: 11px;")
            grid.addWidget(caption, 0, col)

        grid.addWidget(self.name_edit, 1, 0)
        grid.addWidget(self.length_edit, 1, 1)
        grid.addWidget(self.height_edit, 1, 2)
        grid.addWidget(self.area_label, 1, 3)
        grid.addWidget(self.paint_combo, 1, 4)
        grid.addWidget(self.btn_delete, 1, 5)
        grid.setColumnStretch(0, 3)
        grid.setColumnStretch(1, 2)
        grid.setColumnStretch(2, 2)
        grid.setColumnStretch(3, 2)
        grid.setColumnStretch(4, 3)

        self.name_edit.textEdited.connect(lambda v: self._update(WallField.NAME, v))
        self.length_edit.textEdited.connect(lambda v: self._update(WallField.LENGTH, v))
        self.height_edit.textEdited.connect(lambda v: self._update(WallField.HEIGHT, v))
        self.paint_combo.activated.connect(self._on_paint_chosen)
        self.btn_delete.clicked.connect(
            lambda: self._adapter.delete_wall(self._room_id, self._wall_id)
        )

        self.refresh(wall, adapter.paints)

    @property
    def wall_id(self) -> str:
        return self._wall_id

    def _update(self, field: WallField, value: object) -> None:
        self._adapter.update_wall(self._room_id, self._wall_id, field, value)

    def _on_paint_chosen(self, index: int) -> None:
        self._update(WallField.PAINT_ID, self.paint_combo.itemData(index) or "")

    def refresh(self, wall: Wall, paints: Paints) -> None:
        """Update derived widgets (area, paint choices) from current state."""
        self.area_label.setText(format_area(wall_area(wall)))
        _fill_paint_combo(self.paint_combo, paints, wall.paint_id)


class RoomCard(QGroupBox):
    """A room: editable name, its wall rows and an "Add Wall" button."""

    def __init__(self, room: Room, adapter: SessionAdapter) -> None:
        super().__init__()
        self._room_id = room.id
        self._adapter = adapter
        self._rows: dict[str, WallRow] = {}

        layout = QVBoxLayout(self)

        header = QHBoxLayout()
        self.name_edit = QLineEdit(room.name)
        f = self.name_edit.font()
        f.setBold(True)
        f.setPointSize(f.pointSize() + 2)
        self.name_edit.setFont(f)
        self.name_edit.setMaximumWidth(260)
        self.name_edit.textEdited.connect(lambda v: self._adapter.rename_room(self._room_id, v))

        btn_delete = QPushButton("Delete Room")
        btn_delete.setToolTip("Delete this room and all of its walls.")
        btn_delete.clicked.connect(lambda: self._adapter.delete_room(self._room_id))

        header.addWidget(self.name_edit)
        header.addStretch(1)
        header.addWidget(btn_delete)
        layout.addLayout(header)

        for wall in room.walls:
            row = WallRow(room.id, wall, adapter)
            self._rows[wall.id] = row
            layout.addWidget(row)

        btn_add_wall = QPushButton("+ Add Wall")
        btn_add_wall.clicked.connect(lambda: self._adapter.add_wall(self._room_id))
        layout.addWidget(btn_add_wall)

    @property
    def room_id(self) -> str:
        return self._room_id

    def refresh(self, room: Room, paints: Paints) -> None:
        """Refresh every wall row's derived widgets."""
        for wall in room.walls:
            row = self._rows.get(wall.id)
            if row is not None:
                row.refresh(wall, paints)


class SummaryPanel(QGroupBox):
    """Per-paint area, amount and cost, plus the grand total."""

    def __init__(self, adapter: SessionAdapter) -> None:
        super().__init__("Summary")
        self._adapter = adapter

        layout = QVBoxLayout(self)
        subtitle = QLabel("Total paint required and costs")
        subtitle.setStyleSheet("color: #666;")
        layout.addWidget(subtitle)

        self._entries_host = QWidget()
        self._entries_layout = QVBoxLayout(self._entries_host)
        self._entries_layout.setContentsMargins(0, 0, 0, 0)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(self._entries_host)
        scroll.setMinimumHeight(300)
        layout.addWidget(scroll, 1)

        footer = QHBoxLayout()
        total_caption = QLabel("Total Cost")
        total_caption.setStyleSheet("font-weight: 600;")
        self.total_label = QLabel()
        tf = QFont(self.total_label.font())
        tf.setPointSize(16)
        tf.setBold(True)
        self.total_label.setFont(tf)
        footer.addWidget(total_caption)
        footer.addStretch(1)
        footer.addWidget(self.total_label)
        layout.addLayout(footer)

    def refresh(self) -> None:
        """Rebuild the per-paint entries from freshly computed totals."""
        while self._entries_layout.count():
            item = self._entries_layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()

        paints = self._adapter.paints
        report = self._adapter.totals()
        for paint in paints:
            totals = report.per_paint.get(paint.id)
            if totals is None:
                continue
            entry = QLabel(
                f"<b>{html.escape(paint.name)}</b> <span style='color:#666'>{html.escape(paint.code)}</span><br>"
                f"Area: {format_area(totals.area)}<br>"
                f"Amount: {format_liters(totals.liters)}<br>"
                f"Cost: <b>{format_money(totals.cost)}</b>"
            )
            entry.setTextFormat(Qt.RichText)
            entry.setStyleSheet("border-bottom: 1px solid #ddd; padding-bottom: 6px;")
            self._entries_layout.addWidget(entry)
        self._entries_layout.addStretch(1)

        self.total_label.setText(format_money(report.grand_total_cost))


class RoomsTab(QWidget):
    """
    Rooms and walls editor with a live totals summary.

    Responsibilities
    ----------------
    - Add, rename and delete rooms; add, edit and delete walls.
    - Show each wall's area and the per-paint and grand totals.
    """

    def __init__(self, adapter: SessionAdapter) -> None:
        super().__init__()
        self._adapter = adapter
        self._cards: list[RoomCard] = []
        self._shape: list[tuple[str, tuple[str, ...]]] = []

        root = QHBoxLayout(self)
        root.setContentsMargins(12, 12, 12, 12)

        left = QVBoxLayout()
        top = QHBoxLayout()
        title = QLabel("Rooms")
        f = title.font()
        f.setPointSize(14)
        f.setBold(True)
        title.setFont(f)
        self.btn_add_room = QPushButton("+ Add Room")
        self.btn_add_room.clicked.connect(self._adapter.add_room)
        top.addWidget(title)
        top.addStretch(1)
        top.addWidget(self.btn_add_room)
        left.addLayout(top)

        self._cards_host = QWidget()
        self._cards_layout = QVBoxLayout(self._cards_host)
        self._cards_layout.setContentsMargins(0, 0, 0, 0)
        self._cards_layout.addStretch(1)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(self._cards_host)
        left.addWidget(scroll, 1)

        root.addLayout(left, 2)

        self.summary = SummaryPanel(adapter)
        root.addWidget(self.summary, 1)

        self._adapter.rooms_changed.connect(self._sync)
        self._adapter.paints_changed.connect(self._sync)
        self._sync()

    def _current_shape(self) -> list[tuple[str, tuple[str, ...]]]:
        return [(r.id, tuple(w.id for w in r.walls)) for r in self._adapter.rooms]

    def _sync(self) -> None:
        shape = self._current_shape()
        if shape != self._shape:
            self._rebuild_cards()
            self._shape = shape
        else:
            for card, room in zip(self._cards, self._adapter.rooms):
                card.refresh(room, self._adapter.paints)
        self.summary.refresh()

    def _rebuild_cards(self) -> None:
        for card in self._cards:
            self._cards_layout.removeWidget(card)
            card.deleteLater()
        self._cards = []

        for room in self._adapter.rooms:
            card = RoomCard(room, self._adapter)
            self._cards_layout.insertWidget(self._cards_layout.count() - 1, card)
            self._cards.append(card)
