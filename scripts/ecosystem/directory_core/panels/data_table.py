"""Admin data table renderer."""

from __future__ import annotations

from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from directory_core.formatting import cell_text
from directory_core.panels import border_for
from directory_core.panels.pagination import render as render_pagination
from directory_core.table import ACTIONS, Action, DataTable

ACTION_LABELS = {
    Action.EDIT: ("✎ edit", "blue"),
    Action.DELETE: ("🗑 delete", "red"),
}


def _placeholder_row(table: Table, width: int, message: str, style: str) -> None:
    cells = [Text(message, style=style)] + [Text("")] * (width - 1)
    table.add_row(*cells)


def _actions_cell(actions: list[Action]) -> Text:
    text = Text()
    for index, action in enumerate(actions):
        if index:
            text.append("  ")
        label, style = ACTION_LABELS[action]
        text.append(label, style=style)
    return text


def render(table: DataTable) -> Panel:
    grid = Table(expand=True)
    for column in table.columns:
        grid.add_column(column.header, overflow="fold", no_wrap=column.key == ACTIONS)

    width = max(1, len(table.columns))
    state = table.state
    if state == "loading":
        _placeholder_row(grid, width, "⟳ Loading...", "dim")
    elif state == "empty":
        _placeholder_row(grid, width, "No results found.", "dim")
    else:
        for row in table.rows():
            cells = []
            for column, value in zip(table.columns, row.cells):
                if column.key == ACTIONS:
                    cells.append(_actions_cell(value))
                elif isinstance(value, Text):
                    cells.append(value)
                else:
                    cells.append(Text(cell_text(value)))
            grid.add_row(*cells)

    parts = []
    toolbar = Text()
    if table.search_key:
        toolbar.append(f"Search: {table.search_query or '...'}", style="default" if table.search_query else "dim")
    if table.on_add is not None:
        toolbar.append("   + Add New", style="bold green")
    if toolbar.plain:
        parts.append(toolbar)
    parts.append(grid)
    footer = render_pagination(table.page, table.total_pages)
    if footer is not None:
        parts.append(footer)

    return Panel(Group(*parts), title=f"[bold]{table.title}[/bold]", border_style=border_for("ok"))
