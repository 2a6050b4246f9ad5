"""Navigation entries built from the entity-type lookup table."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class EntityKind(Enum):
    # Declaration order is navigation order.
    STARTUP = ("startup", "🚀")
    INCUBATOR = ("incubator", "🏢")
    ACCELERATOR = ("accelerator", "⚡")
    COWORKING_SPACE = ("coworking-space", "👥")
    MEDIA = ("media", "📻")
    JOB_PORTAL = ("job_portal", "💼")
    COMMUNITY = ("community", "💬")
    EVENT = ("event", "📅")
    RESOURCE = ("resource", "📖")
    OTHER = ("", "ℹ")

    def __init__(self, slug: str, glyph: str) -> None:
        self.slug = slug
        self.glyph = glyph

    @classmethod
    def from_slug(cls, slug: str | None) -> EntityKind:
        for kind in cls:
            if kind is not cls.OTHER and kind.slug == slug:
                return kind
        logger.debug("unknown entity kind %r, using fallback", slug)
        return cls.OTHER

    @property
    def order(self) -> int:
        return list(EntityKind).index(self)


@dataclass(frozen=True)
class LookupRecord:
    id: str
    slug: str
    name: str

    def to_dict(self) -> dict[str, str]:
        return {"id": self.id, "slug": self.slug, "name": self.name}


@dataclass(frozen=True)
class NavItem:
    path: str
    label: str
    kind: EntityKind


ABOUT_ITEM = NavItem(path="/about", label="About", kind=EntityKind.OTHER)


def path_for_slug(slug: str) -> str:
    return f"/{slug}s"


def _nav_sort_key(item: NavItem) -> tuple[int, int, str]:
    if item.kind is EntityKind.OTHER:
        return (1, 0, item.label)
    return (0, item.kind.order, "")


def build_nav_items(lookups: Iterable[LookupRecord]) -> list[NavItem]:
    dynamic = [
        NavItem(path=path_for_slug(record.slug), label=record.name, kind=EntityKind.from_slug(record.slug))
        for record in lookups
    ]
    dynamic.sort(key=_nav_sort_key)
    return [*dynamic, ABOUT_ITEM]


def is_active(item: NavItem, current_path: str) -> bool:
    if current_path == item.path:
        return True
    return item.path != ABOUT_ITEM.path and current_path.startswith(item.path)


def short_label(label: str) -> str:
    parts = label.split(" ")
    return parts[0] if parts else label
