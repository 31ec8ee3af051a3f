from __future__ import annotations

from pathlib import Path

import pytest

from paint_engine.paths import default_data_root, state_db_path


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("PAINTCALC_DATA_ROOT", "LOCALAPPDATA", "APPDATA", "XDG_DATA_HOME"):
        monkeypatch.delenv(name, raising=False)


def test_default_data_root_prefers_explicit_override(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setenv("PAINTCALC_DATA_ROOT", str(tmp_path / "custom"))
    monkeypatch.setenv("LOCALAPPDATA", str(tmp_path / "Local"))

    assert default_data_root() == tmp_path / "custom"


def test_default_data_root_prefers_local_appdata(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setenv("LOCALAPPDATA", str(tmp_path / "Local"))
    monkeypatch.setenv("APPDATA", str(tmp_path / "Roaming"))

    assert default_data_root() == tmp_path / "Local" / "paintcalc"


def test_default_data_root_falls_back_to_roaming(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setenv("APPDATA", str(tmp_path / "Roaming"))

    assert default_data_root() == tmp_path / "Roaming" / "paintcalc"


def test_default_data_root_uses_xdg_data_home(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "share"))

    assert default_data_root() == tmp_path / "share" / "paintcalc"


def test_default_data_root_falls_back_to_home(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))

    assert default_data_root() == tmp_path / ".local" / "share" / "paintcalc"


def test_state_db_path_uses_override(tmp_path: Path) -> None:
    assert state_db_path(tmp_path) == tmp_path / "paintcalc.sqlite"
