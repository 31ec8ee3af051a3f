"""
Configuration tab: the paint catalogue.

Each paint is one row of line edits (name, code, coverage, price) plus a delete
button. Edits are pushed to the session as the user types; numeric text that
does not parse is stored as unset.
"""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
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
from paint_engine.data_models import Paint
from paint_engine.model import PaintField
from paint_engine.render import format_measure


def _measure_text(value: float | None) -> str:
    return "" if value is None else format_measure(value)


class PaintRow(QWidget):
    """Editor row for a single paint."""

    def __init__(self, paint: Paint, adapter: SessionAdapter) -> None:
        super().__init__()
        self._paint_id = paint.id
        self._adapter = adapter

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 4, 0, 4)

        self.name_edit = self._field(layout, "Name", paint.name, PaintField.NAME)
        self.code_edit = self._field(layout, "Code", paint.code, PaintField.CODE)
        self.coverage_edit = self._field(
            layout, "Coverage (m²/L)", _measure_text(paint.coverage), PaintField.COVERAGE
        )
        self.price_edit = self._field(
            layout, "Price (€/m²)", _measure_text(paint.price), PaintField.PRICE
        )

        self.btn_delete = QPushButton("Delete")
        self.btn_delete.setToolTip("Delete this paint. Walls using it stop counting towards totals.")
        self.btn_delete.clicked.connect(lambda: self._adapter.delete_paint(self._paint_id))
        layout.addWidget(self.btn_delete, 0, Qt.AlignBottom)

    @property
    def paint_id(self) -> str:
        return self._paint_id

    def _field(self, layout: QHBoxLayout, label: str, text: str, field: PaintField) -> QLineEdit:
        box = QVBoxLayout()
        box.addWidget(QLabel(label))
        edit = QLineEdit(text)
        edit.textEdited.connect(
            lambda value: self._adapter.update_paint(self._paint_id, field, value)
        )
        box.addWidget(edit)
        layout.addLayout(box, 1)
        return edit


class PaintsTab(QWidget):
    """
    Paint catalogue editor.

    Responsibilities
    ----------------
    - Add and delete paints.
    - Edit name, code, coverage and price in place.
    """

    def __init__(self, adapter: SessionAdapter) -> None:
        super().__init__()
        self._adapter = adapter
        self._rows: list[PaintRow] = []

        root = QVBoxLayout(self)
        root.setContentsMargins(12, 12, 12, 12)

        box = QGroupBox("Paint Types")
        box_layout = QVBoxLayout(box)

        top = QHBoxLayout()
        hint = QLabel("Configure available paint types, coverage, and pricing.")
        hint.setStyleSheet("color: #666;")
        self.btn_add = QPushButton("Add Paint")
        self.btn_add.clicked.connect(self._adapter.add_paint)
        top.addWidget(hint)
        top.addStretch(1)
        top.addWidget(self.btn_add)
        box_layout.addLayout(top)

        self._rows_host = QWidget()
        self._rows_layout = QVBoxLayout(self._rows_host)
        self._rows_layout.setContentsMargins(0, 0, 0, 0)
        self._rows_layout.addStretch(1)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(self._rows_host)
        box_layout.addWidget(scroll, 1)

        root.addWidget(box, 1)

        self._adapter.paints_changed.connect(self._sync_rows)
        self._sync_rows()

    def _sync_rows(self) -> None:
        # Field edits keep the same ids; only add/delete rebuild the rows so the
        # line edit being typed into keeps focus.
        ids = [p.id for p in self._adapter.paints]
        if ids == [r.paint_id for r in self._rows]:
            return

        for row in self._rows:
            self._rows_layout.removeWidget(row)
            row.deleteLater()
        self._rows = []

        for paint in self._adapter.paints:
            row = PaintRow(paint, self._adapter)
            self._rows_layout.insertWidget(self._rows_layout.count() - 1, row)
            self._rows.append(row)
