"""Responsive layout mode selection by terminal width."""

from __future__ import annotations

GRID_COLUMNS = {
    "narrow": 1,
    "medium": 2,
    "wide": 3,
}


def select_layout_mode(width: int) -> str:
    if width < 100:
        return "narrow"
    if width < 160:
        return "medium"
    return "wide"


def grid_columns(width: int) -> int:
    return GRID_COLUMNS[select_layout_mode(width)]
