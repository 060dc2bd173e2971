"""Textual app that renders a list document and sorts checkboxes on click."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Optional

try:  # pragma: no cover - imported only when the app is run
    from rich.text import Text
    from textual import events
    from textual.app import App, ComposeResult
    from textual.containers import VerticalScroll
    from textual.widgets import Footer, Header, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use checkbox_sort.adapters.textual.app"
    ) from exc

from checkbox_sort.buffer import Buffer, BufferView
from checkbox_sort.config import SettingsStore, SortSettings
from checkbox_sort.runtime import telemetry

from .controller import TextualCheckboxAdapter, TextualUIHooks


class ChecklistApp(App[None]):
    """Minimal Textual UI: click a row to toggle its checkbox."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#document-scroll {
		height: 1fr;
		border: round $accent;
	}

	#document-view {
		padding: 0 1;
		width: auto;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+s", "save", "Save"),
        ("ctrl+z", "undo", "Undo"),
        ("ctrl+g", "toggle_global", "Toggle global sort"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        path: Path,
        *,
        settings: Optional[SortSettings] = None,
        store: Optional[SettingsStore] = None,
    ) -> None:
        super().__init__()
        self.path = path
        self.store = store
        self.settings = settings or SortSettings()
        self.adapter: TextualCheckboxAdapter | None = None
        self._document_widget: Static | None = None
        self._status_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with VerticalScroll(id="document-scroll"):
            self._document_widget = Static("", id="document-view")
            yield self._document_widget
        self._status_widget = Static("", id="status-line")
        yield self._status_widget
        yield Footer()

    def on_mount(self) -> None:
        text = self.path.read_text(encoding="utf-8") if self.path.exists() else ""
        buffer = Buffer.from_text(text, name=str(self.path))
        hooks = TextualUIHooks(
            update_buffer=self._update_buffer,
            update_status=self._update_status,
            log=self._log_line,
        )
        self.adapter = TextualCheckboxAdapter(buffer, hooks, settings=self.settings)
        self._update_status(str(self.path))

    def on_click(self, event: events.Click) -> None:
        if not self.adapter or self._document_widget is None:
            return
        offset = event.get_content_offset(self._document_widget)
        if offset is None:
            return
        self.adapter.handle_click(offset.y)
        event.stop()

    def action_save(self) -> None:
        if not self.adapter:
            return
        self.path.write_text(self.adapter.buffer.text, encoding="utf-8")
        self._update_status(f"saved {self.path}")

    def action_undo(self) -> None:
        if self.adapter:
            self.adapter.undo()

    def action_toggle_global(self) -> None:
        enabled = not self.settings.enable_global_checkbox_sort
        self.settings = replace(self.settings, enable_global_checkbox_sort=enabled)
        if self.store is not None:
            self.store.save(self.settings)
        if self.adapter:
            self.adapter.update_settings(self.settings)
        self._update_status(f"global sort {'on' if enabled else 'off'}")

    def _update_buffer(self, view: BufferView) -> None:
        if self._document_widget:
            self._document_widget.update(Text(view.text, no_wrap=True))

    def _update_status(self, status: str) -> None:
        if self._status_widget:
            self._status_widget.update(Text(status))

    def _log_line(self, line: str) -> None:
        telemetry.record_event("ui.log", level="debug", data={"line": line})


def run_app(
    path: Path,
    *,
    settings: Optional[SortSettings] = None,
    store: Optional[SettingsStore] = None,
) -> None:
    ChecklistApp(path, settings=settings, store=store).run()


__all__ = ["ChecklistApp", "run_app"]
