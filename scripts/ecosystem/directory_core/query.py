"""Query reducer: categorical filter, text search, then stable ordering."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any

from directory_core.models import ALL, DEFAULT_FIELDS, FieldSpec, QueryDescriptor, SortOrder, field_value


def normalize_search(text: str | None) -> str:
    if not text:
        return ""
    return str(text).strip().lower()


def _lowered(value: Any) -> str:
    if isinstance(value, str):
        return value.lower()
    return ""


def matches_category(entity: Any, value: str, fields: FieldSpec = DEFAULT_FIELDS) -> bool:
    if value == ALL:
        return True
    return field_value(entity, fields.facet_field) == value


def matches_search(entity: Any, needle: str, fields: FieldSpec = DEFAULT_FIELDS) -> bool:
    """``needle`` must already be normalized; empty matches everything."""
    if not needle:
        return True
    for key in (*fields.search_fields, fields.facet_field):
        if needle in _lowered(field_value(entity, key)):
            return True
    return False


def _parse_number(text: str) -> int | float | None:
    text = text.strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return None


def ordering_key(entity: Any, fields: FieldSpec = DEFAULT_FIELDS) -> tuple[int, int | float]:
    """Missing, boolean, unparseable and NaN values all sort as minimal."""
    value = field_value(entity, fields.ordering_field)
    if isinstance(value, bool):
        return (0, 0.0)
    if isinstance(value, str):
        value = _parse_number(value)
    if not isinstance(value, (int, float)):
        return (0, 0.0)
    if isinstance(value, float) and math.isnan(value):
        return (0, 0.0)
    return (1, value)


def apply_query(
    entities: Sequence[Any],
    query: QueryDescriptor,
    fields: FieldSpec = DEFAULT_FIELDS,
) -> list[Any]:
    result = [e for e in entities if matches_category(e, query.categorical_filter, fields)]

    needle = normalize_search(query.search_text)
    if needle:
        result = [e for e in result if matches_search(e, needle, fields)]

    # sorted() keeps ties in input order for reverse=True as well.
    return sorted(
        result,
        key=lambda entity: ordering_key(entity, fields),
        reverse=SortOrder(query.sort_order) is SortOrder.DESC,
    )
