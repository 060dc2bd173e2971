"""Textual-facing adapter that turns checkbox clicks into toggle pipeline runs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from checkbox_sort.buffer import Buffer, BufferView
from checkbox_sort.config import DocumentMetadataProvider, SortSettings
from checkbox_sort.engine import SortError, SortOutcome, handle_toggle, toggle_in_place


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_buffer: Callable[[BufferView], None]
    update_status: Callable[[str], None] = _noop
    # Optional realtime log callback a host may use to surface debug lines
    log: Callable[[str], None] = _noop


class TextualCheckboxAdapter:
    """Bridges row clicks on a rendered list document to the sorting core.

    When the pipeline does not rewrite the block (sorting disabled, already in
    order, or a failure) the adapter performs the plain checkbox toggle the
    host would do on its own.
    """

    def __init__(
        self,
        buffer: Buffer,
        hooks: TextualUIHooks,
        *,
        settings: Optional[SortSettings] = None,
        metadata: Optional[DocumentMetadataProvider] = None,
    ) -> None:
        self.buffer = buffer
        self.hooks = hooks
        self.settings = settings or SortSettings()
        self.metadata = metadata
        self._refresh_buffer()

    def update_settings(self, settings: SortSettings) -> None:
        self.settings = settings
        self._log_state("settings ->", enabled=settings.enable_global_checkbox_sort)

    def handle_click(self, row: int) -> SortOutcome:
        """Dispatch a click on ``row`` (zero-based line index)."""

        self._log_state("click ->", row=row)
        outcome = handle_toggle(
            self.buffer, row, settings=self.settings, metadata=self.metadata
        )
        toggled = False
        if not outcome.applied and outcome.error is not SortError.BUFFER_ACCESS_FAILURE:
            toggled = toggle_in_place(self.buffer, row)
        self.hooks.update_status(self._status_for(outcome, toggled))
        self._refresh_buffer()
        self._log_state(
            "result <-",
            status=outcome.status.value,
            error=outcome.error.value if outcome.error else None,
            toggled=toggled,
        )
        return outcome

    def undo(self) -> bool:
        entry = self.buffer.undo_last()
        if entry is None:
            self.hooks.update_status("nothing to undo")
            return False
        self.hooks.update_status(f"undo:{entry.label}")
        self._refresh_buffer()
        return True

    @staticmethod
    def _status_for(outcome: SortOutcome, toggled: bool) -> str:
        if outcome.applied and outcome.replaced is not None:
            first, last = outcome.replaced
            return f"sorted lines {first + 1}-{last + 1}"
        if outcome.error is not None:
            return f"{outcome.error.value}: {outcome.message}"
        label = outcome.status.value
        if outcome.message:
            label = outcome.message
        return f"{label} (toggled)" if toggled else label

    def _refresh_buffer(self) -> None:
        self.hooks.update_buffer(self.buffer.snapshot())

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        return {
            "buffer": self.buffer.name,
            "buffer_version": self.buffer.document.version,
            "lines": self.buffer.line_count(),
        }


__all__ = ["TextualCheckboxAdapter", "TextualUIHooks"]
