from __future__ import annotations

import os

import pytest

os.environ.setdefault("CHECKBOX_SORT_DISABLE_CONSOLE", "1")


@pytest.fixture(autouse=True)
def _isolated_settings_env(
    monkeypatch: pytest.MonkeyPatch, tmp_path_factory: pytest.TempPathFactory
) -> None:
    for name in ("GLOBAL_ENABLED", "DEBUG"):
        monkeypatch.delenv(f"CHECKBOX_SORT_{name}", raising=False)
    settings_dir = tmp_path_factory.mktemp("settings")
    monkeypatch.setenv("CHECKBOX_SORT_SETTINGS", str(settings_dir / "settings.json"))
