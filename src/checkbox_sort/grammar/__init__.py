"""List-item grammar: indentation depth and checkbox predicates."""

from .items import (
    BULLETS,
    CHECKED_BOX,
    UNCHECKED_BOX,
    UPPER_CHECKED_BOX,
    ListItem,
    checkbox_state,
    indent_depth,
    is_checked,
    is_list_item,
    parse_list_item,
    set_checkbox,
)

__all__ = [
    "BULLETS",
    "CHECKED_BOX",
    "UNCHECKED_BOX",
    "UPPER_CHECKED_BOX",
    "ListItem",
    "checkbox_state",
    "indent_depth",
    "is_checked",
    "is_list_item",
    "parse_list_item",
    "set_checkbox",
]
