from __future__ import annotations

import pytest

from checkbox_sort.buffer import (
    Buffer,
    BufferDocument,
    BufferValidationError,
    UndoEntry,
    UndoTimeline,
)


def test_document_round_trips_text() -> None:
    for text in ("", "a", "a\n", "a\n\nb\n", "x\r\ny"):
        assert BufferDocument.from_text(text).to_text() == text


def test_trailing_newline_adds_empty_last_line() -> None:
    document = BufferDocument.from_text("- [ ] a\n")

    assert document.snapshot() == ("- [ ] a", "")
    assert document.line_count == 2


def test_get_line_rejects_out_of_range() -> None:
    buffer = Buffer.from_text("one\ntwo")

    assert buffer.get_line(1) == "two"
    with pytest.raises(BufferValidationError):
        buffer.get_line(2)
    with pytest.raises(BufferValidationError):
        buffer.get_line(-1)


def test_get_range_spans_lines() -> None:
    buffer = Buffer.from_text("alpha\nbeta\ngamma")

    assert buffer.get_range((0, 2), (1, 2)) == "pha\nbe"
    assert buffer.get_range((1, 0), (2, 0)) == "beta\n"


def test_replace_range_bumps_version_and_records_undo() -> None:
    buffer = Buffer.from_text("alpha\nbeta\ngamma")

    delta = buffer.replace_range((1, 0), (2, 0), "BETA\n", label="edit")

    assert buffer.text == "alpha\nBETA\ngamma"
    assert delta.version == 1
    assert delta.label == "edit"
    assert buffer.document.dirty
    assert buffer.undo.can_undo()


def test_replace_range_validates_cursor() -> None:
    buffer = Buffer.from_text("short")

    with pytest.raises(BufferValidationError):
        buffer.replace_range((0, 0), (0, 99), "x", label="edit")
    assert buffer.text == "short"
    assert not buffer.undo.can_undo()


def test_undo_and_redo_restore_text() -> None:
    buffer = Buffer.from_text("- [ ] a\n- [ ] b")
    buffer.replace_range((0, 0), (1, 7), "- [ ] b\n- [x] a", label="sort")

    entry = buffer.undo_last()

    assert entry is not None and entry.label == "sort"
    assert buffer.text == "- [ ] a\n- [ ] b"
    assert buffer.undo_last() is None

    buffer.redo_last()
    assert buffer.text == "- [ ] b\n- [x] a"


def test_undo_timeline_keeps_only_newest_entries() -> None:
    timeline = UndoTimeline(max_entries=2)
    for label in ("one", "two", "three"):
        timeline.push(UndoEntry(label, "before", "after", (0, 0), (0, 0)))

    assert len(timeline) == 2
    assert [timeline.undo().label, timeline.undo().label] == ["three", "two"]
    assert timeline.undo() is None


def test_buffer_history_is_bounded() -> None:
    buffer = Buffer(
        document=BufferDocument.from_text("- [ ] a"), undo=UndoTimeline(max_entries=3)
    )
    for _ in range(5):
        buffer.replace_range((0, 3), (0, 4), "x")
        buffer.replace_range((0, 3), (0, 4), " ")

    assert len(buffer.undo) == 3
