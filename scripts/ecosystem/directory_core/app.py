"""Directory application entrypoint."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from datetime import datetime, timezone
from pathlib import Path

from rich.console import Console, Group
from rich.prompt import Confirm, Prompt

from directory_core.admin import EntityStore, build_admin_table
from directory_core.collectors import env_api_key, env_api_url, env_data_dir
from directory_core.collectors.lookups import LookupClient
from directory_core.collectors.lookups import collect as collect_lookups
from directory_core.collectors.static import collect as collect_static
from directory_core.commands import QUIT, UNKNOWN, apply_admin_command, apply_listing_command
from directory_core.controller import ListingController, ListingView
from directory_core.layout import grid_columns, select_layout_mode
from directory_core.logging_config import setup_logging
from directory_core.models import SourceData
from directory_core.navigation import LookupRecord, NavItem, build_nav_items
from directory_core.panels.data_table import render as render_data_table
from directory_core.panels.filter_bar import render as render_filter_bar
from directory_core.panels.grid import render as render_grid
from directory_core.panels.header import render as render_header
from directory_core.panels.pagination import render as render_pagination
from directory_core.profiles import BUILTIN_PROFILES, LISTING_PROFILES, fields_for, resolve_profile
from directory_core.table import DataTable

logger = logging.getLogger(__name__)

FALLBACK_LOOKUPS = [
    LookupRecord(id=BUILTIN_PROFILES[name]["kind"], slug=BUILTIN_PROFILES[name]["kind"], name=BUILTIN_PROFILES[name]["title"])
    for name in LISTING_PROFILES
]


def _nav_items(api_url: str | None, api_key: str | None) -> list[NavItem]:
    if not api_url:
        return build_nav_items(FALLBACK_LOOKUPS)
    try:
        client = LookupClient(api_url, api_key=api_key)
    except ValueError as exc:
        logger.warning("lookup service disabled: %s", exc)
        return build_nav_items(FALLBACK_LOOKUPS)
    with client:
        lookups = collect_lookups(client)
    return build_nav_items(lookups.items or FALLBACK_LOOKUPS)


def _category_map(source: SourceData) -> dict[str, dict]:
    return {str(c.get("id")): c for c in source.meta.get("categories", []) if c.get("id") is not None}


def _render_listing(
    view: ListingView,
    profile: dict,
    nav_items: list[NavItem],
    current_path: str,
    width: int,
    categories: dict[str, dict],
):
    mode = select_layout_mode(width)
    facet_labels = {key: str(c.get("name", key)) for key, c in categories.items()}
    parts = [
        render_header(nav_items, current_path, profile["title"], profile.get("description", ""), narrow=mode == "narrow"),
        render_filter_bar(view, profile, facet_labels),
        render_grid(view.page_items, profile["empty_message"], grid_columns(width), categories),
    ]
    pager = render_pagination(view.current_page, view.total_pages)
    if pager is not None:
        parts.append(pager)
    return Group(*parts)


def _render_admin(table: DataTable, nav_items: list[NavItem], current_path: str, width: int):
    narrow = select_layout_mode(width) == "narrow"
    return Group(render_header(nav_items, current_path, "Admin", narrow=narrow), render_data_table(table))


def _json_output(profile: dict, source: SourceData, payload: dict) -> str:
    document = {
        "profile": profile["name"],
        "collected_at": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        "source": {
            "key": source.key,
            "status": source.status,
            "meta": {k: v for k, v in source.meta.items() if k != "categories"},
            "errors": source.errors,
        },
        **payload,
    }
    return json.dumps(document, indent=2, ensure_ascii=False)


def _admin_payload(table: DataTable) -> dict:
    return {
        "table": {
            "title": table.title,
            "state": table.state,
            "headers": table.headers(),
            "page": table.page,
            "total_pages": table.total_pages,
            "window": table.window(),
            "rows": [
                {"key": row.key, "cells": [c if not isinstance(c, list) else [str(a.value) for a in c] for c in row.cells]}
                for row in table.rows()
            ],
        }
    }


def _run_listing(args: argparse.Namespace, profile: dict, console: Console, source: SourceData, nav_items: list[NavItem]) -> int:
    controller = ListingController(
        fields=fields_for(profile),
        page_size=int(profile["page_size"]),
        sort_order=args.sort or profile["sort_order"],
    )
    controller.mark_pending()
    controller.load(source)
    if args.search:
        controller.set_search_text(args.search)
    if args.filter:
        controller.set_categorical_filter(args.filter)
    if args.page is not None:
        controller.set_current_page(args.page)

    if args.json:
        print(_json_output(profile, source, {"view": controller.view().to_dict()}))
        return 0

    categories = _category_map(source)
    current_path = args.path or f"/{profile['kind']}s"

    def build_renderable():
        return _render_listing(controller.view(), profile, nav_items, current_path, console.size.width, categories)

    console.print(build_renderable())
    if not args.interactive:
        return 0

    while True:
        try:
            line = Prompt.ask("[bold cyan]›[/bold cyan] /search  f <value>  s asc|desc  n p g <n>  c  q", console=console)
        except (EOFError, KeyboardInterrupt):
            return 0
        result = apply_listing_command(controller, line)
        if result == QUIT:
            return 0
        if result == UNKNOWN:
            console.print(f"[yellow]unknown command:[/yellow] {line}")
            continue
        console.print(build_renderable())


def _run_admin(args: argparse.Namespace, profile: dict, console: Console, source: SourceData, nav_items: list[NavItem]) -> int:
    store = EntityStore(source.items if source.status != "error" else [])

    def add() -> None:
        name = Prompt.ask("Name", console=console).strip()
        if not name:
            return
        city = Prompt.ask("City", default="", console=console).strip() or None
        year = Prompt.ask("Founded year", default="", console=console).strip()
        store.create(name, city=city, founded_year=int(year) if year.isdigit() else None, kind=profile["kind"])

    def edit(entity) -> None:
        name = Prompt.ask("Name", default=entity.name, console=console).strip() or entity.name
        city = Prompt.ask("City", default=entity.city or "", console=console).strip() or None
        store.update(entity.id, name=name, city=city)

    table = build_admin_table(
        store,
        profile["title"],
        on_add=add if args.interactive else None,
        on_edit=edit if args.interactive else None,
        search_key=profile.get("search_key"),
        page_size=int(profile["page_size"]),
    )
    if args.search:
        table.set_search_query(args.search)
    if args.page is not None:
        table.set_page(args.page)

    if args.json:
        print(_json_output(profile, source, _admin_payload(table)))
        return 0

    current_path = args.path or "/admin"
    console.print(_render_admin(table, nav_items, current_path, console.size.width))
    if not args.interactive:
        return 0

    def confirm(title: str, body: str) -> bool:
        console.print(f"[bold red]{title}[/bold red]\n{body}")
        return Confirm.ask("Delete", default=False, console=console)

    while True:
        try:
            line = Prompt.ask("[bold cyan]›[/bold cyan] /search  n p g <n>  a  e <id>  d <id>  q", console=console)
        except (EOFError, KeyboardInterrupt):
            return 0
        result = apply_admin_command(table, line, confirm)
        if result == QUIT:
            return 0
        if result == UNKNOWN:
            console.print(f"[yellow]unknown command:[/yellow] {line}")
            continue
        console.print(_render_admin(table, nav_items, current_path, console.size.width))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Algeria ecosystem directory")
    parser.add_argument("--profile", default=os.environ.get("ECOSYSTEM_PROFILE", "accelerators"), help="Profile name: accelerators|media|admin")
    parser.add_argument("--config", help="Optional JSON config file for profile overrides")
    parser.add_argument("--search", help="Initial search text")
    parser.add_argument("--filter", help="Initial facet filter value")
    parser.add_argument("--sort", choices=["asc", "desc"], help="Sort order override")
    parser.add_argument("--page", type=int, help="Initial page number")
    parser.add_argument("--json", action="store_true", help="Emit JSON payload")
    parser.add_argument("--data-dir", help="Override dataset directory")
    parser.add_argument("--api-url", default=env_api_url(), help="Lookup service base URL")
    parser.add_argument("--path", help="Current navigation path")
    parser.add_argument("-i", "--interactive", action="store_true", help="Run interactive prompt loop")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        profile = resolve_profile(args.profile, args.config)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if profile["name"] == "admin":
        unsupported = [flag for flag, value in (("--filter", args.filter), ("--sort", args.sort)) if value is not None]
        if unsupported:
            print(f"error: {', '.join(unsupported)} not supported for the admin profile", file=sys.stderr)
            return 2

    if args.data_dir:
        data_dir = Path(args.data_dir)
    elif profile.get("data_dir"):
        data_dir = Path(profile["data_dir"])
    else:
        data_dir = env_data_dir()

    console = Console()
    source = collect_static(profile["source"], data_dir, kind=profile["kind"])
    nav_items = [] if args.json else _nav_items(args.api_url, env_api_key())

    if profile["name"] == "admin":
        return _run_admin(args, profile, console, source, nav_items)
    return _run_listing(args, profile, console, source, nav_items)


if __name__ == "__main__":
    raise SystemExit(main())
