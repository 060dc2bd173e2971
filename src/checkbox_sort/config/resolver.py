"""Three-tier resolution of whether a click should reorder its list.

Precedence is list marker > front matter > global default. The result is a
frozen snapshot built fresh for every click.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from checkbox_sort.buffer import LineBufferProvider
from checkbox_sort.grammar import is_list_item
from checkbox_sort.runtime import telemetry

from .frontmatter import coerce_override

ENABLE_MARKER = "%%checkbox-sort: true%%"
DISABLE_MARKER = "%%checkbox-sort: false%%"


class ConfigSource(str, Enum):
    GLOBAL = "global"
    FRONTMATTER = "frontmatter"
    LIST_MARKER = "list_marker"


@dataclass(frozen=True, slots=True)
class EffectiveConfig:
    enabled: bool
    source: ConfigSource
    marker_line: Optional[int] = None


def find_list_marker(
    buffer: LineBufferProvider, clicked_line: int
) -> Optional[tuple[int, bool]]:
    """Scan upward from the line above the click for the nearest marker.

    Returns ``(line_index, enabled)`` or ``None``. A line that is neither a
    marker nor a list item ends the scan: markers only govern the list block
    directly beneath them.
    """

    for index in range(clicked_line - 1, -1, -1):
        line = buffer.get_line(index)
        if ENABLE_MARKER in line:
            return index, True
        if DISABLE_MARKER in line:
            return index, False
        if not is_list_item(line):
            break
    return None


def resolve_effective_config(
    buffer: LineBufferProvider,
    clicked_line: int,
    *,
    global_default: bool,
    document_override: object = None,
) -> EffectiveConfig:
    enabled = bool(global_default)
    source = ConfigSource.GLOBAL

    override = coerce_override(document_override)
    if override is not None:
        enabled = override
        source = ConfigSource.FRONTMATTER

    marker = find_list_marker(buffer, clicked_line)
    if marker is not None:
        marker_line, marker_enabled = marker
        config = EffectiveConfig(
            enabled=marker_enabled,
            source=ConfigSource.LIST_MARKER,
            marker_line=marker_line,
        )
    else:
        config = EffectiveConfig(enabled=enabled, source=source)

    telemetry.record_event(
        "config.resolved",
        level="debug",
        data={
            "line": clicked_line,
            "enabled": config.enabled,
            "source": config.source.value,
            "marker_line": config.marker_line,
        },
    )
    return config


__all__ = [
    "DISABLE_MARKER",
    "ENABLE_MARKER",
    "ConfigSource",
    "EffectiveConfig",
    "find_list_marker",
    "resolve_effective_config",
]
