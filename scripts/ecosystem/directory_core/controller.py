"""Listing page controller: owns query state and derives the visible page.

Each derived stage is recomputed only when its own inputs change. Facets are
keyed by the collection object, the reducer by (collection, query) and the
paginator by (reducer output, page size, page).
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field, replace
from typing import Any

from directory_core.facets import FacetCache
from directory_core.models import ALL, DEFAULT_FIELDS, FieldSpec, QueryDescriptor, SortOrder, SourceData
from directory_core.pagination import Page, clamp_page, compute_window, paginate, total_pages_for
from directory_core.query import apply_query

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ListingView:
    query: QueryDescriptor
    facets: list[str]
    results: list[Any]
    page_items: list[Any]
    current_page: int
    total_pages: int
    window: list[int | str]
    total_count: int
    filtered_count: int
    status: str = "ok"
    errors: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "query": self.query.to_dict(),
            "facets": self.facets,
            "current_page": self.current_page,
            "total_pages": self.total_pages,
            "window": self.window,
            "total_count": self.total_count,
            "filtered_count": self.filtered_count,
            "status": self.status,
            "errors": self.errors,
            "items": [item.to_dict() if hasattr(item, "to_dict") else item for item in self.page_items],
        }


class ListingController:
    def __init__(
        self,
        entities: Sequence[Any] | None = None,
        *,
        fields: FieldSpec = DEFAULT_FIELDS,
        page_size: int = 9,
        sort_order: SortOrder | str = SortOrder.DESC,
    ) -> None:
        # validates page_size up front
        total_pages_for(0, page_size)
        self.fields = fields
        self.page_size = page_size
        self.entities: Sequence[Any] = list(entities) if entities is not None else []
        self.query = QueryDescriptor(sort_order=SortOrder(sort_order))
        self.current_page = 1
        self.status = "ok"
        self.errors: list[str] = []

        self._facets = FacetCache(fields.facet_field)
        self._results_source: Sequence[Any] | None = None
        self._results_query: QueryDescriptor | None = None
        self._results: list[Any] = []
        self._page_source: list[Any] | None = None
        self._page_key: tuple[int, int] | None = None
        self._page: Page | None = None
        self.reducer_runs = 0
        self.paginator_runs = 0

    # ------------------------------------------------------------------
    # entity source
    # ------------------------------------------------------------------
    def mark_pending(self) -> None:
        self.status = "pending"

    def load(self, source: SourceData) -> None:
        """Take a fresh snapshot from the entity source."""
        if source.status == "error" or source.items is None:
            logger.warning("entity source %s failed: %s", source.key, "; ".join(source.errors) or "no data")
            self.set_entities([])
            self.status = "error"
            self.errors = list(source.errors)
            return
        self.set_entities(source.items)
        self.status = source.status
        self.errors = list(source.errors)

    def set_entities(self, entities: Sequence[Any] | None) -> None:
        self.entities = list(entities) if entities is not None else []
        self.status = "ok"
        self.errors = []
        self.current_page = clamp_page(self.current_page, self._total_pages())

    # ------------------------------------------------------------------
    # transitions
    # ------------------------------------------------------------------
    def set_search_text(self, text: str) -> None:
        self.query = replace(self.query, search_text=text or "")
        self.current_page = 1
        logger.debug("search text -> %r", self.query.search_text)

    def set_categorical_filter(self, value: str | None) -> None:
        self.query = replace(self.query, categorical_filter=value or ALL)
        self.current_page = 1
        logger.debug("filter -> %r", self.query.categorical_filter)

    def set_sort_order(self, order: SortOrder | str) -> None:
        self.query = replace(self.query, sort_order=SortOrder(order))
        logger.debug("sort -> %s", self.query.sort_order.value)

    def set_current_page(self, page: int) -> None:
        self.current_page = clamp_page(page, self._total_pages())
        logger.debug("page -> %d", self.current_page)

    def clear_filters(self) -> None:
        self.query = replace(self.query, search_text="", categorical_filter=ALL)
        self.current_page = 1

    # ------------------------------------------------------------------
    # derived state
    # ------------------------------------------------------------------
    @property
    def facets(self) -> list[str]:
        return self._facets.get(self.entities)

    def results(self) -> list[Any]:
        if self.entities is not self._results_source or self.query != self._results_query:
            self._results = apply_query(self.entities, self.query, self.fields)
            self._results_source = self.entities
            self._results_query = self.query
            self.reducer_runs += 1
        return self._results

    def _total_pages(self) -> int:
        return total_pages_for(len(self.results()), self.page_size)

    def page(self) -> Page:
        results = self.results()
        key = (self.page_size, self.current_page)
        if results is not self._page_source or key != self._page_key or self._page is None:
            self._page = paginate(results, self.page_size, self.current_page)
            self._page_source = results
            self._page_key = key
            self.paginator_runs += 1
        return self._page

    def view(self) -> ListingView:
        facets = self.facets
        results = self.results()
        page = self.page()
        return ListingView(
            query=self.query,
            facets=facets,
            results=results,
            page_items=page.items,
            current_page=self.current_page,
            total_pages=page.total_pages,
            window=compute_window(self.current_page, page.total_pages),
            total_count=len(self.entities),
            filtered_count=len(results),
            status=self.status,
            errors=list(self.errors),
        )
