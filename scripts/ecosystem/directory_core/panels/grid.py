"""Card grid renderer with empty state."""

from __future__ import annotations

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from directory_core.models import Entity
from directory_core.panels.cards import render_entity

CLEAR_FILTERS_HINT = "Try another search or clear filters (c)."


def render_empty(message: str) -> Panel:
    content = Text(justify="center")
    content.append(f"{message}\n", style="bold")
    content.append(CLEAR_FILTERS_HINT, style="dim")
    return Panel(content, border_style="yellow")


def render(
    entities: list[Entity],
    empty_message: str,
    columns: int = 3,
    categories: dict[str, dict] | None = None,
):
    if not entities:
        return render_empty(empty_message)

    lookup = categories or {}
    grid = Table.grid(expand=True, padding=(0, 1))
    for _ in range(columns):
        grid.add_column(ratio=1)

    cards = [render_entity(entity, lookup.get(entity.category or "")) for entity in entities]
    for start in range(0, len(cards), columns):
        row = cards[start : start + columns]
        row += [Text("")] * (columns - len(row))
        grid.add_row(*row)
    return grid
