"""Persisted user settings: the global sort default and the debug flag."""

from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass, replace
from pathlib import Path
from typing import Any, Mapping, Optional

from checkbox_sort.runtime import telemetry

SETTINGS_ENV = f"{telemetry.ENV_PREFIX}SETTINGS"
DEFAULT_SETTINGS_PATH = Path("~/.config/checkbox-sort/settings.json")


@dataclass(frozen=True, slots=True)
class SortSettings:
    """Immutable settings snapshot handed to every click."""

    enable_global_checkbox_sort: bool = True
    debug_mode: bool = False

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "SortSettings":
        """Build settings from stored data, keeping defaults for bad values."""

        defaults = cls()
        values: dict[str, bool] = {}
        for key in ("enable_global_checkbox_sort", "debug_mode"):
            if key not in data:
                continue
            value = data[key]
            if isinstance(value, bool):
                values[key] = value
            else:
                telemetry.record_event(
                    "settings.invalid_value",
                    level="warning",
                    data={"key": key, "value": value},
                )
        return replace(defaults, **values)

    def to_mapping(self) -> dict[str, bool]:
        return asdict(self)


def resolve_settings_path(path: Optional[Path | str] = None) -> Path:
    if path is not None:
        return Path(path).expanduser()
    override = os.getenv(SETTINGS_ENV)
    if override:
        return Path(override).expanduser()
    return DEFAULT_SETTINGS_PATH.expanduser()


class SettingsStore:
    """Loads and saves ``SortSettings`` as a JSON document."""

    def __init__(self, path: Optional[Path | str] = None) -> None:
        self.path = resolve_settings_path(path)

    def load(self) -> SortSettings:
        """Read stored settings, then apply environment overrides.

        A missing or unreadable file yields the defaults.
        """

        data: Mapping[str, Any] = {}
        if self.path.exists():
            try:
                loaded = json.loads(self.path.read_text(encoding="utf-8"))
            except (OSError, ValueError) as exc:
                telemetry.record_event(
                    "settings.load_failed",
                    level="warning",
                    data={"path": str(self.path), "error": str(exc)},
                )
            else:
                if isinstance(loaded, dict):
                    data = loaded
        settings = SortSettings.from_mapping(data)

        overrides: dict[str, bool] = {}
        enabled = telemetry.env_flag("GLOBAL_ENABLED")
        if enabled is not None:
            overrides["enable_global_checkbox_sort"] = enabled
        debug = telemetry.env_flag("DEBUG")
        if debug is not None:
            overrides["debug_mode"] = debug
        return replace(settings, **overrides)

    def save(self, settings: SortSettings) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps(settings.to_mapping(), indent=2) + "\n", encoding="utf-8"
        )
        telemetry.record_event(
            "settings.saved",
            level="debug",
            data={"path": str(self.path), **settings.to_mapping()},
        )


def load_settings(path: Optional[Path | str] = None) -> SortSettings:
    return SettingsStore(path).load()


__all__ = [
    "DEFAULT_SETTINGS_PATH",
    "SETTINGS_ENV",
    "SettingsStore",
    "SortSettings",
    "load_settings",
    "resolve_settings_path",
]
