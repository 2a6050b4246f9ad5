"""Page slicing and page-selector window computation."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

ELLIPSIS = "..."


@dataclass(frozen=True)
class Page:
    current_page: int
    total_pages: int
    items: list[Any] = field(default_factory=list)


def total_pages_for(count: int, page_size: int) -> int:
    if page_size < 1:
        raise ValueError(f"page_size must be positive: {page_size}")
    return max(1, math.ceil(count / page_size))


def paginate(items: Sequence[Any], page_size: int, current_page: int) -> Page:
    """Slice one page out of ``items``.

    The page index is not clamped: a page outside ``[1, total_pages]`` yields
    an empty slice and the caller decides how to correct it.
    """
    total = total_pages_for(len(items), page_size)
    if current_page < 1:
        return Page(current_page=current_page, total_pages=total, items=[])
    start = (current_page - 1) * page_size
    return Page(
        current_page=current_page,
        total_pages=total,
        items=list(items[start : start + page_size]),
    )


def clamp_page(page: int, total_pages: int) -> int:
    return min(max(1, int(page)), max(1, int(total_pages)))


def page_bounds(current_page: int, total_pages: int) -> tuple[bool, bool]:
    """(has_previous, has_next) for prev/next controls."""
    return current_page > 1, current_page < total_pages


def compute_window(current_page: int, total_pages: int) -> list[int | str]:
    if total_pages <= 1:
        return []

    tokens: list[int | str] = [1]
    if current_page > 3:
        tokens.append(ELLIPSIS)

    for number in range(max(2, current_page - 1), min(total_pages - 1, current_page + 1) + 1):
        tokens.append(number)

    if current_page < total_pages - 2:
        tokens.append(ELLIPSIS)

    tokens.append(total_pages)
    return tokens
