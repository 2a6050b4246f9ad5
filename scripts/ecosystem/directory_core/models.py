"""Shared model contracts for directory data flow."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

ALL = "all"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class Entity:
    id: str | int
    name: str
    description: str = ""
    city: str | None = None
    category: str | None = None
    founded_year: int | None = None
    url: str | None = None
    image: str | None = None
    kind: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "city": self.city,
            "category": self.category,
            "founded_year": self.founded_year,
            "url": self.url,
            "image": self.image,
            "kind": self.kind,
        }


@dataclass(frozen=True)
class FieldSpec:
    """Names the fields a listing filters, searches and orders by."""

    facet_field: str = "city"
    ordering_field: str = "founded_year"
    search_fields: tuple[str, ...] = ("name", "description")


DEFAULT_FIELDS = FieldSpec()


@dataclass(frozen=True)
class QueryDescriptor:
    search_text: str = ""
    categorical_filter: str = ALL
    sort_order: SortOrder = SortOrder.DESC

    def to_dict(self) -> dict[str, Any]:
        return {
            "search_text": self.search_text,
            "categorical_filter": self.categorical_filter,
            "sort_order": self.sort_order.value,
        }


@dataclass
class SourceData:
    key: str
    title: str
    status: str = "ok"
    items: list[Any] = field(default_factory=list)
    meta: dict[str, Any] = field(default_factory=dict)
    errors: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "title": self.title,
            "status": self.status,
            "items": [item.to_dict() if hasattr(item, "to_dict") else item for item in self.items],
            "meta": self.meta,
            "errors": self.errors,
        }


def field_value(record: Any, key: str) -> Any:
    """Read ``key`` from a mapping or an attribute-bearing record; missing -> None."""
    if isinstance(record, Mapping):
        return record.get(key)
    return getattr(record, key, None)
