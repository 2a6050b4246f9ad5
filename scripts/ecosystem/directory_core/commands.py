"""Interactive command parsing: one input line is one state transition.

Listing commands:
    /text        search for ``text`` ("/" alone clears the search)
    f <value>    filter by facet value ("f" or "f all" clears)
    s asc|desc   sort order
    n / p        next / previous page
    g <n>        go to page ``n``
    c            clear filters
    q            quit

Admin commands add:
    a            add a row
    e <id>       edit a row
    d <id>       delete a row (asks for confirmation)
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from directory_core.controller import ListingController
from directory_core.models import ALL, SortOrder
from directory_core.table import DataTable

logger = logging.getLogger(__name__)

QUIT = "quit"
HANDLED = "ok"
UNKNOWN = "unknown"


def _split(line: str) -> tuple[str, str]:
    text = line.strip()
    if text.startswith("/"):
        return "/", text[1:]
    head, _, rest = text.partition(" ")
    return head.lower(), rest.strip()


def _page_number(arg: str) -> int | None:
    try:
        return int(arg)
    except ValueError:
        return None


def apply_listing_command(controller: ListingController, line: str) -> str:
    command, arg = _split(line)
    if command in ("q", "quit", "exit"):
        return QUIT
    if command == "/":
        controller.set_search_text(arg)
    elif command == "f":
        controller.set_categorical_filter(arg or ALL)
    elif command == "s":
        try:
            controller.set_sort_order(SortOrder(arg.lower()))
        except ValueError:
            return UNKNOWN
    elif command == "n":
        controller.set_current_page(controller.current_page + 1)
    elif command == "p":
        controller.set_current_page(controller.current_page - 1)
    elif command == "g":
        number = _page_number(arg)
        if number is None:
            return UNKNOWN
        controller.set_current_page(number)
    elif command == "c":
        controller.clear_filters()
    else:
        logger.debug("unknown command %r", line)
        return UNKNOWN
    return HANDLED


def apply_admin_command(
    table: DataTable,
    line: str,
    confirm: Callable[[str, str], bool],
) -> str:
    """``confirm(title, body)`` blocks until the user answers."""
    command, arg = _split(line)
    if command in ("q", "quit", "exit"):
        return QUIT
    if command == "/":
        table.set_search_query(arg)
    elif command == "n":
        table.next_page()
    elif command == "p":
        table.previous_page()
    elif command == "g":
        number = _page_number(arg)
        if number is None:
            return UNKNOWN
        table.set_page(number)
    elif command == "a":
        if not table.add():
            return UNKNOWN
    elif command in ("e", "d"):
        item = table.find(arg)
        if item is None:
            return UNKNOWN
        if command == "e":
            return HANDLED if table.edit(item) else UNKNOWN
        confirmation = table.request_delete(item)
        if confirmation is None:
            return UNKNOWN
        if confirm(confirmation.title, confirmation.body):
            confirmation.confirm()
        else:
            confirmation.cancel()
    else:
        logger.debug("unknown admin command %r", line)
        return UNKNOWN
    return HANDLED
