"""Document-level override read from a leading YAML front-matter block."""

from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

import yaml

from checkbox_sort.buffer import LineBufferProvider
from checkbox_sort.runtime import telemetry

FRONTMATTER_KEY = "checkbox-sort"
FENCE = "---"


class DocumentMetadataProvider(Protocol):
    def get_document_override(self) -> Optional[bool]:
        """Return the document's boolean override, or ``None`` when absent."""
        ...


def coerce_override(value: Any) -> Optional[bool]:
    """Accept only real booleans; anything else counts as absent."""

    if value is None or isinstance(value, bool):
        return value
    telemetry.record_event(
        "config.override_decode_failed",
        level="warning",
        data={"key": FRONTMATTER_KEY, "value": value},
    )
    return None


def extract_frontmatter(lines: Sequence[str]) -> Optional[dict[str, Any]]:
    """Parse the ``---`` fenced block at the top of ``lines``.

    Returns ``None`` when there is no block or it is not a YAML mapping.
    """

    if not lines or lines[0].rstrip() != FENCE:
        return None
    for index in range(1, len(lines)):
        if lines[index].rstrip() == FENCE:
            block = "\n".join(lines[1:index])
            break
    else:
        return None
    try:
        data = yaml.safe_load(block)
    except yaml.YAMLError as exc:
        telemetry.record_event(
            "config.frontmatter_invalid", level="warning", data={"error": str(exc)}
        )
        return None
    return data if isinstance(data, dict) else None


class StaticMetadata:
    """Metadata provider for hosts that already parsed the override."""

    def __init__(self, override: Any = None) -> None:
        self._override = override

    def get_document_override(self) -> Optional[bool]:
        return coerce_override(self._override)


class FrontmatterMetadata:
    """Reads ``checkbox-sort`` from the buffer's front matter on each call."""

    def __init__(self, buffer: LineBufferProvider) -> None:
        self.buffer = buffer

    def _leading_lines(self) -> list[str]:
        count = self.buffer.line_count()
        if count == 0 or self.buffer.get_line(0).rstrip() != FENCE:
            return []
        lines = [self.buffer.get_line(0)]
        for index in range(1, count):
            line = self.buffer.get_line(index)
            lines.append(line)
            if line.rstrip() == FENCE:
                break
        return lines

    def get_document_override(self) -> Optional[bool]:
        data = extract_frontmatter(self._leading_lines())
        if not data or FRONTMATTER_KEY not in data:
            return None
        return coerce_override(data[FRONTMATTER_KEY])


__all__ = [
    "FENCE",
    "FRONTMATTER_KEY",
    "DocumentMetadataProvider",
    "FrontmatterMetadata",
    "StaticMetadata",
    "coerce_override",
    "extract_frontmatter",
]
