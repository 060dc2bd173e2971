"""Per-click entry point: resolve config, scan the peer group, rewrite.

``handle_toggle`` runs synchronously to completion and never raises. Every
failure becomes a ``SortOutcome`` and leaves the buffer untouched.
"""

from __future__ import annotations

from typing import Optional

from checkbox_sort.buffer import BufferValidationError, LineBufferProvider
from checkbox_sort.config import (
    DocumentMetadataProvider,
    EffectiveConfig,
    FrontmatterMetadata,
    SortSettings,
    resolve_effective_config,
)
from checkbox_sort.grammar import checkbox_state, is_list_item, set_checkbox
from checkbox_sort.runtime import telemetry

from .outcome import SortError, SortOutcome, SortStatus
from .rewrite import apply_replacement, build_replacement
from .scanner import scan_peer_group

TOGGLE_LABEL = "checkbox_toggle"

_ERROR_LEVELS = {
    SortError.NOT_A_LIST_ITEM: "warning",
    SortError.NO_CHECKBOX: "debug",
}


def handle_toggle(
    buffer: LineBufferProvider,
    clicked_line: int,
    *,
    settings: Optional[SortSettings] = None,
    metadata: Optional[DocumentMetadataProvider] = None,
) -> SortOutcome:
    """Reorder the clicked item's peer group as if its checkbox just flipped."""

    settings = settings or SortSettings()
    provider = metadata if metadata is not None else FrontmatterMetadata(buffer)
    with telemetry.span(
        "toggle::handle", component="engine", metadata={"line": clicked_line}
    ) as handle:
        try:
            outcome = _run(buffer, clicked_line, settings, provider)
        except BufferValidationError as exc:
            outcome = SortOutcome.failed(
                clicked_line, SortError.BUFFER_ACCESS_FAILURE, str(exc)
            )
        except Exception as exc:
            outcome = SortOutcome.failed(
                clicked_line, SortError.INTERNAL, f"{type(exc).__name__}: {exc}"
            )
        handle.add_metadata("status", outcome.status.value)
        _report(outcome)
        return outcome


def _run(
    buffer: LineBufferProvider,
    clicked_line: int,
    settings: SortSettings,
    metadata: DocumentMetadataProvider,
) -> SortOutcome:
    clicked_text = buffer.get_line(clicked_line)
    config = resolve_effective_config(
        buffer,
        clicked_line,
        global_default=settings.enable_global_checkbox_sort,
        document_override=metadata.get_document_override(),
    )
    if not config.enabled:
        return SortOutcome(
            status=SortStatus.DISABLED,
            line=clicked_line,
            config=config,
            message=f"sorting disabled by {config.source.value}",
        )

    if not is_list_item(clicked_text):
        return SortOutcome.failed(
            clicked_line,
            SortError.NOT_A_LIST_ITEM,
            f"line {clicked_line} is not a list item",
            config=config,
        )
    was_checked = checkbox_state(clicked_text)
    if was_checked is None:
        return SortOutcome.failed(
            clicked_line,
            SortError.NO_CHECKBOX,
            f"line {clicked_line} has no checkbox",
            config=config,
        )

    group = scan_peer_group(buffer, clicked_line)
    if group is None:
        return SortOutcome.failed(
            clicked_line,
            SortError.NOT_A_LIST_ITEM,
            f"line {clicked_line} is not a list item",
            config=config,
        )

    replacement = build_replacement(buffer, group, now_checked=not was_checked)
    replaced = (replacement.first_line, replacement.last_line)
    if replacement.is_noop:
        return SortOutcome(
            status=SortStatus.UNCHANGED, line=clicked_line, config=config
        )

    try:
        apply_replacement(buffer, replacement)
    except Exception as exc:
        return SortOutcome.failed(
            clicked_line,
            SortError.REPLACE_FAILURE,
            f"{type(exc).__name__}: {exc}",
            config=config,
        )
    return SortOutcome(
        status=SortStatus.SORTED, line=clicked_line, config=config, replaced=replaced
    )


def _report(outcome: SortOutcome) -> None:
    config: Optional[EffectiveConfig] = outcome.config
    data: dict[str, object] = {
        "line": outcome.line,
        "status": outcome.status.value,
        "source": config.source.value if config else None,
    }
    if outcome.replaced is not None:
        data["replaced"] = f"{outcome.replaced[0]}-{outcome.replaced[1]}"
    level = "debug"
    if outcome.error is not None:
        data["error"] = outcome.error.value
        data["message"] = outcome.message
        level = _ERROR_LEVELS.get(outcome.error, "error")
    telemetry.record_event(f"toggle.{outcome.status.value}", level=level, data=data)


def toggle_in_place(buffer: LineBufferProvider, line_index: int) -> bool:
    """Flip one checkbox without reordering anything.

    This is the plain toggle a host performs itself when ``handle_toggle``
    did not rewrite the block, so an uppercase ``[X]`` unticks too. Returns
    ``False`` for lines without a checkbox.
    """

    text = buffer.get_line(line_index)
    state = checkbox_state(text, accept_upper=True)
    if state is None:
        return False
    buffer.replace_range(
        (line_index, 0),
        (line_index, len(text)),
        set_checkbox(text, not state),
        label=TOGGLE_LABEL,
    )
    return True


__all__ = ["TOGGLE_LABEL", "handle_toggle", "toggle_in_place"]
