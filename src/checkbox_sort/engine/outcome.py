"""Result values returned by the toggle pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from checkbox_sort.config import EffectiveConfig


class SortStatus(str, Enum):
    SORTED = "sorted"
    UNCHANGED = "unchanged"
    DISABLED = "disabled"
    FAILED = "failed"


class SortError(str, Enum):
    NOT_A_LIST_ITEM = "not_a_list_item"
    NO_CHECKBOX = "no_checkbox"
    BUFFER_ACCESS_FAILURE = "buffer_access_failure"
    REPLACE_FAILURE = "replace_failure"
    INTERNAL = "internal"


@dataclass(frozen=True, slots=True)
class SortOutcome:
    """What one click did to the document.

    Only ``SORTED`` outcomes correspond to a buffer mutation.
    """

    status: SortStatus
    line: int
    config: Optional[EffectiveConfig] = None
    error: Optional[SortError] = None
    message: Optional[str] = None
    replaced: Optional[tuple[int, int]] = None

    @property
    def applied(self) -> bool:
        return self.status is SortStatus.SORTED

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failed(
        cls,
        line: int,
        error: SortError,
        message: str,
        *,
        config: Optional[EffectiveConfig] = None,
    ) -> "SortOutcome":
        return cls(
            status=SortStatus.FAILED,
            line=line,
            config=config,
            error=error,
            message=message,
        )


__all__ = ["SortError", "SortOutcome", "SortStatus"]
