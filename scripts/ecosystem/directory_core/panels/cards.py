"""Entity card renderers."""

from __future__ import annotations

from rich.console import Group
from rich.panel import Panel
from rich.text import Text

from directory_core.formatting import founded_label, truncate_description
from directory_core.models import Entity


def description_text(description: str, expanded: bool = False) -> Text:
    display, truncated = truncate_description(description)
    if expanded or not truncated:
        return Text(description or "", style="default")
    text = Text(display)
    text.append("... ")
    text.append("Show more", style="bold cyan")
    return text


def render_entity(entity: Entity, category: dict | None = None, expanded: bool = False) -> Panel:
    parts = []
    if category:
        parts.append(Text(f"{category.get('icon', '')} {category.get('name', '')}".strip(), style="cyan"))
    subtitle = " · ".join(p for p in (entity.city, founded_label(entity.founded_year)) if p)
    if subtitle:
        parts.append(Text(subtitle, style="dim"))
    parts.append(description_text(entity.description, expanded))
    if entity.url:
        parts.append(Text(f"↗ {entity.url}", style="underline blue"))
    return Panel(
        Group(*parts),
        title=f"[bold]{entity.name}[/bold]",
        title_align="left",
        border_style="cyan",
        padding=(0, 1),
    )
