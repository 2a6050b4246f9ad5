"""Pagination control renderer."""

from __future__ import annotations

from rich.text import Text

from directory_core.pagination import ELLIPSIS, compute_window, page_bounds


def render(current_page: int, total_pages: int) -> Text | None:
    tokens = compute_window(current_page, total_pages)
    if not tokens:
        return None

    has_previous, has_next = page_bounds(current_page, total_pages)
    text = Text(justify="center")
    text.append("‹ ", style="bold" if has_previous else "dim")
    for token in tokens:
        if token == ELLIPSIS:
            text.append(f" {ELLIPSIS} ", style="dim")
        elif token == current_page:
            text.append(f"[{token}]", style="bold reverse cyan")
        else:
            text.append(f" {token} ")
    text.append(" ›", style="bold" if has_next else "dim")
    return text
