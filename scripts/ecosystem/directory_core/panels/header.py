"""Header renderer: site title plus navigation."""

from __future__ import annotations

from rich.console import Group
from rich.panel import Panel
from rich.text import Text

from directory_core.navigation import NavItem, is_active, short_label


def nav_text(items: list[NavItem], current_path: str, narrow: bool = False) -> Text:
    text = Text(justify="center")
    for index, item in enumerate(items):
        if index:
            text.append("  ")
        label = short_label(item.label) if narrow else item.label
        style = "bold reverse cyan" if is_active(item, current_path) else "dim"
        text.append(f" {item.kind.glyph} {label} ", style=style)
    return text


def render(
    nav_items: list[NavItem],
    current_path: str,
    title: str,
    description: str = "",
    narrow: bool = False,
) -> Panel:
    parts = [nav_text(nav_items, current_path, narrow)] if nav_items else []
    parts.append(Text(title, style="bold", justify="center"))
    if description:
        parts.append(Text(description, style="dim", justify="center"))
    return Panel(Group(*parts), title="[bold]🚀 Algeria Ecosystem[/bold]", border_style="cyan")
