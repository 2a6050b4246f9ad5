"""Filter bar renderer: current query plus result counts."""

from __future__ import annotations

from rich.panel import Panel

from directory_core.controller import ListingView
from directory_core.formatting import result_summary
from directory_core.models import ALL, SortOrder
from directory_core.panels import error_suffix, kv_table, panel_from_table

SORT_LABELS = {
    SortOrder.DESC: "Newest first",
    SortOrder.ASC: "Oldest first",
}


def render(view: ListingView, profile: dict, facet_labels: dict[str, str] | None = None) -> Panel:
    labels = facet_labels or {}
    query = view.query
    selected = query.categorical_filter
    facet_text = "All" if selected == ALL else labels.get(selected, selected)
    options = ", ".join(labels.get(value, value) for value in view.facets) or "-"

    table = kv_table(
        [
            ("Search", query.search_text or f"[dim]{profile.get('search_placeholder', 'Search...')}[/dim]"),
            (profile.get("facet_label", "Filter"), f"{facet_text}  [dim]({options})[/dim]"),
            ("Sort", SORT_LABELS[query.sort_order]),
        ]
    )
    summary = result_summary(view.filtered_count, view.total_count)
    title = f"{summary}{error_suffix(view.errors)}"
    return panel_from_table(title, view.status, table)
