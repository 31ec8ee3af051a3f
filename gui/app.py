"""
Paint calculator GUI app.

Tabbed GUI backed by the engine Session (rooms and totals, paint catalogue).
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from PySide6.QtWidgets import (
    QApplication,
    QHBoxLayout,
    QLabel,
    QMessageBox,
    QTabWidget,
    QVBoxLayout,
    QWidget,
)

from gui.adapters.session_adapter import SessionAdapter
from gui.tabs.paints_tab import PaintsTab
from gui.tabs.rooms_tab import RoomsTab
from paint_engine.session import Session
from paint_engine.state_store.errors import StateStoreError
from paint_engine.state_store.sqlite_store import open_state_store

LOGGER = logging.getLogger(__name__)


class AppWindow(QWidget):
    """
    Main window for the paint calculator.

    Responsibilities
    ----------------
    - Host the tabbed interface (Calculator, Configuration)
    - Show storage write failures without interrupting editing
    """

    def __init__(self, adapter: SessionAdapter) -> None:
        """
        Initialize the main window and construct the tab layout.

        Parameters
        ----------
        adapter:
            Session adapter shared by all tabs.
        """
        super().__init__()
        self.setWindowTitle("Paint Cost Calculator")
        self.resize(1180, 720)
        self._adapter = adapter

        root = QVBoxLayout(self)
        root.setContentsMargins(8, 8, 8, 8)

        header = QWidget()
        header_layout = QHBoxLayout(header)
        header_layout.setContentsMargins(8, 8, 8, 8)

        title = QLabel("Paint Cost Calculator")
        f = title.font()
        f.setPointSize(16)
        f.setBold(True)
        title.setFont(f)

        self.status_label = QLabel("")
        self.status_label.setStyleSheet("color: #b00020;")

        header_layout.addWidget(title)
        header_layout.addStretch(1)
        header_layout.addWidget(self.status_label)

        root.addWidget(header)

        tabs = QTabWidget()

        self.rooms_tab = RoomsTab(adapter)
        tabs.addTab(self.rooms_tab, "Calculator (Rooms)")

        self.paints_tab = PaintsTab(adapter)
        tabs.addTab(self.paints_tab, "Configuration (Paints)")

        root.addWidget(tabs, 1)

        adapter.save_failed.connect(self._on_save_failed)
        adapter.paints_changed.connect(self._clear_status)
        adapter.rooms_changed.connect(self._clear_status)

    def _on_save_failed(self, message: str) -> None:
        self.status_label.setText(f"Not saved: {message}")

    def _clear_status(self) -> None:
        # save_failed is emitted before the change signal, so only clear when
        # the last write actually succeeded.
        if self._adapter.last_save_error is None:
            self.status_label.setText("")


def run_app(data_root: Path | None = None) -> int:
    """
    Run the paint calculator GUI application.

    Parameters
    ----------
    data_root:
        Optional data root override. If None, the default resolver is used.

    Returns
    -------
    int
        Qt application exit code, or 1 if the state store cannot be opened.
    """
    app = QApplication.instance() or QApplication(sys.argv)
    try:
        session = Session(open_state_store(data_root))
    except StateStoreError as exc:
        LOGGER.error("Cannot open state store: %s", exc)
        QMessageBox.critical(None, "Paint Cost Calculator", f"Cannot open saved data:\n{exc}")
        return 1

    w = AppWindow(SessionAdapter(session))
    w.show()
    return app.exec()


def main() -> int:
    """Entry point for ``python -m gui.app``."""
    logging.basicConfig(level=logging.WARNING)
    return run_app()


if __name__ == "__main__":
    raise SystemExit(main())
