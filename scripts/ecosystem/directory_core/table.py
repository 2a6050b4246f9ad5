"""Reusable data table: columns, own search, own pagination, row actions.

The table knows nothing about what its rows represent. Every row must expose a
unique ``id`` (attribute or mapping key); it is used as the row key and
duplicates leave row identity undefined. This is a precondition and is not
checked.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

from directory_core.models import field_value
from directory_core.pagination import clamp_page, compute_window, page_bounds, paginate

logger = logging.getLogger(__name__)

T = TypeVar("T")

ACTIONS = "actions"
DEFAULT_PAGE_SIZE = 10

CONFIRM_TITLE = "Are you absolutely sure?"
CONFIRM_BODY = "This action cannot be undone. This will permanently delete this item."


class Action(str, Enum):
    EDIT = "edit"
    DELETE = "delete"


@dataclass(frozen=True)
class Column(Generic[T]):
    key: str
    header: str
    render: Callable[[T], Any] | None = None


@dataclass(frozen=True)
class Row(Generic[T]):
    key: Any
    item: T
    cells: list[Any]


class DeleteConfirmation(Generic[T]):
    """A pending delete. Only ``confirm()`` reaches the delete callback."""

    def __init__(self, item: T, on_delete: Callable[[T], None]) -> None:
        self.item = item
        self._on_delete = on_delete
        self.resolved = False
        self.confirmed = False
        self.title = CONFIRM_TITLE
        self.body = CONFIRM_BODY

    def confirm(self) -> None:
        if self.resolved:
            return
        self.resolved = True
        self.confirmed = True
        self._on_delete(self.item)

    def cancel(self) -> None:
        self.resolved = True


class DataTable(Generic[T]):
    def __init__(
        self,
        title: str,
        columns: Sequence[Column[T]],
        data: Sequence[T] = (),
        *,
        on_add: Callable[[], None] | None = None,
        on_edit: Callable[[T], None] | None = None,
        on_delete: Callable[[T], None] | None = None,
        is_loading: bool = False,
        search_key: str | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        if page_size < 1:
            raise ValueError(f"page_size must be positive: {page_size}")
        self.title = title
        self.columns = list(columns)
        self.data = list(data)
        self.on_add = on_add
        self.on_edit = on_edit
        self.on_delete = on_delete
        self.is_loading = is_loading
        self.search_key = search_key
        self.page_size = page_size
        self.search_query = ""
        self.page = 1
        self._filtered_source: list[T] | None = None
        self._filtered_key: tuple[str, str | None] | None = None
        self._filtered: list[T] = []
        self.filter_runs = 0

    # ------------------------------------------------------------------
    # state transitions
    # ------------------------------------------------------------------
    def set_data(self, data: Sequence[T]) -> None:
        self.data = list(data)
        self.page = clamp_page(self.page, self.total_pages)

    def set_loading(self, loading: bool) -> None:
        self.is_loading = loading

    def set_search_query(self, query: str) -> None:
        self.search_query = query or ""
        self.page = 1

    def set_page(self, page: int) -> None:
        self.page = clamp_page(page, self.total_pages)

    def next_page(self) -> None:
        self.set_page(self.page + 1)

    def previous_page(self) -> None:
        self.set_page(self.page - 1)

    # ------------------------------------------------------------------
    # derived data
    # ------------------------------------------------------------------
    def _matches(self, item: T) -> bool:
        if not self.search_query or not self.search_key:
            return True
        value = field_value(item, self.search_key)
        if value is None:
            return False
        if isinstance(value, str):
            return self.search_query.lower() in value.lower()
        return self.search_query in str(value)

    def filtered(self) -> list[T]:
        key = (self.search_query, self.search_key)
        if self.data is not self._filtered_source or key != self._filtered_key:
            self._filtered = [item for item in self.data if self._matches(item)]
            self._filtered_source = self.data
            self._filtered_key = key
            self.filter_runs += 1
        return self._filtered

    @property
    def total_pages(self) -> int:
        return paginate(self.filtered(), self.page_size, 1).total_pages

    def page_items(self) -> list[T]:
        return paginate(self.filtered(), self.page_size, self.page).items

    @property
    def state(self) -> str:
        if self.is_loading:
            return "loading"
        if not self.page_items():
            return "empty"
        return "populated"

    def available_actions(self) -> list[Action]:
        actions = []
        if self.on_edit is not None:
            actions.append(Action.EDIT)
        if self.on_delete is not None:
            actions.append(Action.DELETE)
        return actions

    def _cell(self, column: Column[T], item: T) -> Any:
        if column.key == ACTIONS:
            return self.available_actions()
        if column.render is not None:
            return column.render(item)
        return field_value(item, column.key)

    def rows(self) -> list[Row[T]]:
        if self.is_loading:
            return []
        return [
            Row(key=field_value(item, "id"), item=item, cells=[self._cell(c, item) for c in self.columns])
            for item in self.page_items()
        ]

    def headers(self) -> list[str]:
        return [column.header for column in self.columns]

    def window(self) -> list[int | str]:
        return compute_window(self.page, self.total_pages)

    def bounds(self) -> tuple[bool, bool]:
        return page_bounds(self.page, self.total_pages)

    # ------------------------------------------------------------------
    # actions
    # ------------------------------------------------------------------
    def add(self) -> bool:
        if self.on_add is None:
            return False
        self.on_add()
        return True

    def edit(self, item: T) -> bool:
        if self.on_edit is None:
            return False
        self.on_edit(item)
        return True

    def request_delete(self, item: T) -> DeleteConfirmation[T] | None:
        if self.on_delete is None:
            return None
        logger.debug("delete requested for row %s", field_value(item, "id"))
        return DeleteConfirmation(item, self.on_delete)

    def find(self, key: Any) -> T | None:
        for item in self.data:
            row_key = field_value(item, "id")
            if row_key == key or str(row_key) == str(key):
                return item
        return None
