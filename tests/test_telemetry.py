from __future__ import annotations

import pytest

from checkbox_sort.runtime import telemetry


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("1", True), ("TRUE", True), (" on ", True), ("0", False), ("nope", False)],
)
def test_env_flag_reads_prefixed_variable(
    monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool
) -> None:
    monkeypatch.setenv("CHECKBOX_SORT_LOG_JSON", raw)

    assert telemetry.env_flag("LOG_JSON") is expected


def test_env_flag_unset_is_none(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CHECKBOX_SORT_LOG_JSON", raising=False)

    assert telemetry.env_flag("LOG_JSON") is None


def test_configure_drops_cached_loggers() -> None:
    first = telemetry.get_logger()
    assert telemetry.get_logger() is first

    telemetry.configure(debug=True)

    assert telemetry.get_logger() is not first


def test_record_event_rejects_unknown_level() -> None:
    with pytest.raises(ValueError):
        telemetry.record_event("bogus", level="shout")


def test_span_reraises_and_exposes_metadata() -> None:
    with pytest.raises(RuntimeError):
        with telemetry.span("test::block", component=True, metadata={"n": 1}) as handle:
            assert handle.component == "test::block"
            assert handle.metadata == {"n": "1"}
            raise RuntimeError("boom")
