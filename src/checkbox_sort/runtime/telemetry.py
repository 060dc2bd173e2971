"""Logging for checkbox-sort, backed by telelog.

Call ``configure(debug=...)`` once the user settings are loaded. Everything
else goes through ``record_event`` for one-off structured records and ``span``
for timed blocks.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "CHECKBOX_SORT_"
LOGGER_NAME = "checkbox_sort"
_TRUTHY = frozenset({"1", "true", "yes", "on"})

_loggers: Dict[str, Any] = {}
_config: Optional[Any] = None


def env_flag(name: str) -> Optional[bool]:
    """Read ``CHECKBOX_SORT_<name>`` as a boolean, or ``None`` when unset."""

    raw = os.getenv(ENV_PREFIX + name)
    if raw is None:
        return None
    return raw.strip().lower() in _TRUTHY


def _as_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list, tuple, set)):
        return repr(value)
    return str(value)


def build_config(debug: bool) -> Any:
    """Translate the debug setting and ``CHECKBOX_SORT_LOG_*`` env into a config."""

    config = tl.Config()
    if debug:
        config.with_min_level("DEBUG")
    else:
        config.with_min_level((os.getenv(ENV_PREFIX + "LOG_LEVEL") or "INFO").upper())

    console = not env_flag("DISABLE_CONSOLE")
    config.with_console_output(console)
    if console:
        config.with_colored_output(not env_flag("NO_COLOR"))
    if env_flag("LOG_JSON"):
        config.with_json_format(True)

    log_file = os.getenv(ENV_PREFIX + "LOG_FILE")
    if log_file:
        config.with_file_output(log_file)
    return config


def configure(*, debug: Optional[bool] = None) -> Any:
    """Rebuild the active configuration and drop cached loggers.

    ``debug`` mirrors the ``debug_mode`` setting; left as ``None`` the
    ``CHECKBOX_SORT_DEBUG`` flag decides.
    """

    global _config
    if debug is None:
        debug = bool(env_flag("DEBUG"))
    _config = build_config(debug)
    _loggers.clear()
    return _config


def get_logger(name: Optional[str] = None) -> Any:
    key = name or LOGGER_NAME
    log = _loggers.get(key)
    if log is None:
        if _config is None:
            configure()
        log = tl.Logger.with_config(key, _config)
        _loggers[key] = log
    return log


def _emit(log: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    level = level.lower()
    structured = getattr(log, f"{level}_with", None)
    if structured is not None:
        structured(message, [(str(k), _as_text(v)) for k, v in payload.items()])
        return
    plain = getattr(log, level, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {payload}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Emit ``event::<name>`` with ``data`` attached as key/value pairs."""

    _emit(get_logger(logger_name), level, f"event::{name}", {"event": name, **(data or {})})


@dataclass
class SpanHandle:
    logger: Any
    name: str
    component: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _as_text(value)

    def fail(self, reason: str) -> None:
        payload: Dict[str, Any] = {"span": self.name, **self.metadata, "reason": reason}
        if self.component:
            payload["component"] = self.component
        _emit(self.logger, "error", "span::fail", payload)


@contextmanager
def span(
    name: str,
    *,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> Iterator[SpanHandle]:
    """Profile a block under ``name``.

    ``component=True`` also tracks the block as a component called ``name``;
    a string picks another component name. ``metadata`` is logger context for
    the duration of the block. An exception escaping the block is logged as
    ``span::fail`` and re-raised.
    """

    log = get_logger(logger_name)
    tracked = name if component is True else component or None
    context = {key: _as_text(value) for key, value in (metadata or {}).items()}
    for key, value in context.items():
        log.add_context(key, value)

    handle = SpanHandle(logger=log, name=name, component=tracked, metadata=dict(context))
    try:
        with ExitStack() as stack:
            if tracked:
                stack.enter_context(log.track_component(tracked))
            stack.enter_context(log.profile(name))
            try:
                yield handle
            except Exception as exc:
                handle.fail(str(exc))
                raise
    finally:
        for key in context:
            log.remove_context(key)


__all__ = [
    "ENV_PREFIX",
    "SpanHandle",
    "build_config",
    "configure",
    "env_flag",
    "get_logger",
    "record_event",
    "span",
]
