"""Command line entry point: headless toggles, settings, and the Textual app."""

from __future__ import annotations

import argparse
import json
from dataclasses import replace
from pathlib import Path
from typing import Optional, Sequence

from checkbox_sort.buffer import Buffer
from checkbox_sort.config import SettingsStore, SortSettings
from checkbox_sort.engine import SortError, handle_toggle, toggle_in_place
from checkbox_sort.runtime import telemetry


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="checkbox-sort",
        description="Keep checked items below unchecked ones in a list document.",
    )
    parser.add_argument("file", nargs="?", type=Path, help="Document to edit")
    parser.add_argument(
        "--line",
        type=int,
        help="Toggle the checkbox on this 1-based line and write the file back",
    )
    parser.add_argument(
        "--settings",
        type=Path,
        default=None,
        help="Settings file (default: $CHECKBOX_SORT_SETTINGS or "
        "~/.config/checkbox-sort/settings.json)",
    )
    global_group = parser.add_mutually_exclusive_group()
    global_group.add_argument(
        "--enable-global",
        dest="global_enabled",
        action="store_const",
        const=True,
        help="Persist: sort on click unless a document or list overrides it",
    )
    global_group.add_argument(
        "--disable-global",
        dest="global_enabled",
        action="store_const",
        const=False,
        help="Persist: do not sort unless a document or list enables it",
    )
    debug_group = parser.add_mutually_exclusive_group()
    debug_group.add_argument(
        "--debug", dest="debug", action="store_const", const=True,
        help="Persist: enable debug logging",
    )
    debug_group.add_argument(
        "--no-debug", dest="debug", action="store_const", const=False,
        help="Persist: disable debug logging",
    )
    parser.add_argument(
        "--show-settings", action="store_true", help="Print the effective settings"
    )
    return parser.parse_args(argv)


def _apply_setting_flags(
    store: SettingsStore, settings: SortSettings, args: argparse.Namespace
) -> SortSettings:
    updates: dict[str, bool] = {}
    if args.global_enabled is not None:
        updates["enable_global_checkbox_sort"] = args.global_enabled
    if args.debug is not None:
        updates["debug_mode"] = args.debug
    if not updates:
        return settings
    settings = replace(settings, **updates)
    store.save(settings)
    return settings


def toggle_file(path: Path, line_number: int, settings: SortSettings) -> int:
    """Toggle ``line_number`` (1-based) in ``path``; returns an exit code."""

    original = path.read_text(encoding="utf-8")
    buffer = Buffer.from_text(original, name=str(path))
    row = line_number - 1
    outcome = handle_toggle(buffer, row, settings=settings)
    toggled = False
    if not outcome.applied and outcome.error is not SortError.BUFFER_ACCESS_FAILURE:
        toggled = toggle_in_place(buffer, row)

    if buffer.text != original:
        path.write_text(buffer.text, encoding="utf-8")

    if outcome.error is not None and not toggled:
        print(f"{path}:{line_number}: {outcome.error.value}: {outcome.message}")
        return 1
    detail = outcome.status.value
    if outcome.replaced is not None:
        first, last = outcome.replaced
        detail = f"{detail} lines {first + 1}-{last + 1}"
    elif toggled:
        detail = f"{detail}, toggled in place"
    print(f"{path}:{line_number}: {detail}")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    store = SettingsStore(args.settings)
    settings = _apply_setting_flags(store, store.load(), args)
    telemetry.configure(debug=settings.debug_mode)

    if args.show_settings:
        print(json.dumps(settings.to_mapping(), indent=2))

    if args.file is None:
        if args.line is not None:
            print("--line requires a FILE")
            return 2
        return 0

    if args.line is not None:
        if not args.file.is_file():
            print(f"{args.file}: no such file")
            return 2
        return toggle_file(args.file, args.line, settings)

    from checkbox_sort.adapters.textual.app import run_app

    run_app(args.file, settings=settings, store=store)
    return 0


if __name__ == "__main__":  # pragma: no cover - manual entry
    raise SystemExit(main())
