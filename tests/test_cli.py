from __future__ import annotations

import json
from pathlib import Path

import pytest

from checkbox_sort import cli
from checkbox_sort.config import SettingsStore


def write_doc(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "list.md"
    path.write_text(text, encoding="utf-8")
    return path


def test_cli_toggle_sorts_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = write_doc(tmp_path, "- [ ] Buy milk\n- [ ] Get gas\n- [x] Bread\n")

    code = cli.main([str(path), "--line", "1"])

    assert code == 0
    assert path.read_text() == "- [ ] Get gas\n- [x] Buy milk\n- [x] Bread\n"
    assert "sorted lines 1-3" in capsys.readouterr().out


def test_cli_toggle_in_place_when_disabled(tmp_path: Path) -> None:
    path = write_doc(tmp_path, "%%checkbox-sort: false%%\n- [ ] a\n- [ ] b\n")

    code = cli.main([str(path), "--line", "2"])

    assert code == 0
    assert path.read_text() == "%%checkbox-sort: false%%\n- [x] a\n- [ ] b\n"


def test_cli_reports_non_list_line(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = write_doc(tmp_path, "Heading\n- [ ] a\n")

    code = cli.main([str(path), "--line", "1"])

    assert code == 1
    assert path.read_text() == "Heading\n- [ ] a\n"
    assert "not_a_list_item" in capsys.readouterr().out


def test_cli_missing_file(tmp_path: Path) -> None:
    assert cli.main([str(tmp_path / "nope.md"), "--line", "1"]) == 2


def test_cli_persists_global_setting(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    settings_path = tmp_path / "settings.json"

    code = cli.main(["--settings", str(settings_path), "--disable-global", "--show-settings"])

    assert code == 0
    assert SettingsStore(settings_path).load().enable_global_checkbox_sort is False
    printed = json.loads(capsys.readouterr().out)
    assert printed["enable_global_checkbox_sort"] is False


def test_cli_disabled_setting_applies_to_toggle(tmp_path: Path) -> None:
    settings_path = tmp_path / "settings.json"
    cli.main(["--settings", str(settings_path), "--disable-global"])
    path = write_doc(tmp_path, "- [ ] a\n- [ ] b")

    cli.main([str(path), "--line", "1", "--settings", str(settings_path)])

    assert path.read_text() == "- [x] a\n- [ ] b"


def test_cli_line_requires_file() -> None:
    assert cli.main(["--line", "1"]) == 2
