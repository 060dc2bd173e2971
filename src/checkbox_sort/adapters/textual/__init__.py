"""Textual host adapter; the runnable app lives in ``.app``."""

from .controller import TextualCheckboxAdapter, TextualUIHooks

__all__ = ["TextualCheckboxAdapter", "TextualUIHooks"]
