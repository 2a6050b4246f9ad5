"""Distinct categorical values used as filter options."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from directory_core.models import field_value


def extract_facets(entities: Sequence[Any], field: str) -> list[str]:
    values = {
        value
        for value in (field_value(entity, field) for entity in entities)
        if isinstance(value, str) and value
    }
    return sorted(values)


class FacetCache:
    """Recomputes facets only when handed a different collection object."""

    def __init__(self, field: str) -> None:
        self.field = field
        self._source: Sequence[Any] | None = None
        self._facets: list[str] = []
        self.computations = 0

    def get(self, entities: Sequence[Any]) -> list[str]:
        if entities is not self._source:
            self._facets = extract_facets(entities, self.field)
            self._source = entities
            self.computations += 1
        return self._facets
