from __future__ import annotations

from pathlib import Path

import pytest

import paintcalc.cli as cli_module
from paint_engine.state_store.errors import StateStoreError


def _run(tmp_path: Path, *argv: str) -> int:
    return cli_module.main(["--data-root", str(tmp_path), *argv])


@pytest.mark.parametrize(
    "argv",
    [
        ["paint", "set", "nope", "name", "x"],
        ["paint", "delete", "nope"],
        ["room", "rename", "nope", "Kitchen"],
        ["room", "delete", "nope"],
        ["wall", "add", "nope"],
        ["wall", "delete", "nope", "w1"],
    ],
)
def test_cli_returns_2_for_unknown_ids(
    tmp_path: Path, argv: list[str], capsys: pytest.CaptureFixture[str]
) -> None:
    rc = _run(tmp_path, *argv)
    out = capsys.readouterr().out
    assert rc == 2
    assert "ERROR: unknown" in out


def test_cli_returns_2_for_unknown_wall_in_known_room(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    assert _run(tmp_path, "room", "add") == 0
    room_id = capsys.readouterr().out.strip()

    rc = _run(tmp_path, "wall", "set", room_id, "nope", "length", "3")
    out = capsys.readouterr().out
    assert rc == 2
    assert "ERROR: unknown wall id: nope" in out


def test_cli_returns_1_when_store_cannot_be_opened(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    def _boom(_data_root: object) -> None:
        raise StateStoreError("cannot open")

    monkeypatch.setattr(cli_module, "open_state_store", _boom)

    rc = cli_module.main(["summary"])
    out = capsys.readouterr().out
    assert rc == 1
    assert "ERROR: cannot open" in out


def test_cli_gui_delegates_to_run_app(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    pytest.importorskip("PySide6.QtWidgets")
    import gui.app as app_module

    seen: dict[str, object] = {}

    def _run_app(*, data_root: Path | None) -> int:
        seen["data_root"] = data_root
        return 0

    monkeypatch.setattr(app_module, "run_app", _run_app)

    assert _run(tmp_path, "gui") == 0
    assert seen["data_root"] == tmp_path
