"""
Component family resolution.

Design-system components live in one directory per family, and every
component in a family shares the family name as a prefix (DialogContent,
DialogTitle, ... all live under dialog/). This module maps an exported name
back to its family directory.
"""

from __future__ import annotations

# Evaluated in order, first prefix match wins. Compound names must come before
# any shorter entry that is a prefix of them (DropdownMenu before Dropdown,
# ToggleGroup before Toggle).
FAMILY_MAP: tuple[tuple[str, str], ...] = (
    ("DropdownMenu", "dropdown-menu"),
    ("RangeCalendar", "range-calendar"),
    ("TagsInput", "tags-input"),
    ("ToggleGroup", "toggle-group"),
    ("Accordion", "accordion"),
    ("Button", "button"),
    ("Calendar", "calendar"),
    ("Checkbox", "checkbox"),
    ("Command", "command"),
    ("Dialog", "dialog"),
    ("Drawer", "drawer"),
    ("Input", "input"),
    ("Label", "label"),
    ("Popover", "popover"),
    ("Switch", "switch"),
    ("Table", "table"),
    ("Toggle", "toggle"),
    ("Tooltip", "tooltip"),
)


def resolve_family(
    imported_name: str, family_map: tuple[tuple[str, str], ...] = FAMILY_MAP
) -> str | None:
    """
    Find the directory of the family an exported name belongs to.

    Args:
        imported_name: Name as exported by the aggregator (e.g. "DialogTitle")
        family_map: Ordered (prefix, directory) table to search

    Returns:
        Directory segment of the first matching family, or None if no prefix matches
    """
    for prefix, directory in family_map:
        if imported_name.startswith(prefix):
            return directory
    return None
