"""In-memory entity store and the admin table wired to it."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace

from directory_core.models import Entity
from directory_core.table import ACTIONS, Column, DataTable

logger = logging.getLogger(__name__)


class EntityStore:
    """Owns the mutable collection; every change publishes a fresh snapshot."""

    def __init__(self, entities: list[Entity] | None = None) -> None:
        self._entities = list(entities or [])
        self._listeners: list[Callable[[list[Entity]], None]] = []

    def snapshot(self) -> list[Entity]:
        return list(self._entities)

    def subscribe(self, listener: Callable[[list[Entity]], None]) -> None:
        self._listeners.append(listener)

    def _publish(self) -> None:
        snapshot = self.snapshot()
        for listener in self._listeners:
            listener(snapshot)

    def _next_id(self) -> str:
        taken = {str(e.id) for e in self._entities}
        number = len(self._entities) + 1
        while f"new-{number}" in taken:
            number += 1
        return f"new-{number}"

    def create(self, name: str, **fields) -> Entity:
        entity_id = fields.pop("id", None) or self._next_id()
        entity = Entity(id=entity_id, name=name, **fields)
        self._entities.append(entity)
        logger.info("created %s", entity.id)
        self._publish()
        return entity

    def update(self, entity_id, **changes) -> Entity | None:
        for index, entity in enumerate(self._entities):
            if entity.id == entity_id:
                updated = replace(entity, **changes)
                self._entities[index] = updated
                logger.info("updated %s", entity_id)
                self._publish()
                return updated
        return None

    def delete(self, entity_id) -> bool:
        remaining = [e for e in self._entities if e.id != entity_id]
        if len(remaining) == len(self._entities):
            return False
        self._entities = remaining
        logger.info("deleted %s", entity_id)
        self._publish()
        return True


def admin_columns() -> list[Column[Entity]]:
    return [
        Column("name", "Name"),
        Column("city", "City"),
        Column("founded_year", "Founded", render=lambda e: e.founded_year if e.founded_year is not None else "n/a"),
        Column(ACTIONS, "Actions"),
    ]


def build_admin_table(
    store: EntityStore,
    title: str,
    *,
    on_add: Callable[[], None] | None = None,
    on_edit: Callable[[Entity], None] | None = None,
    search_key: str | None = "name",
    page_size: int = 10,
) -> DataTable[Entity]:
    table: DataTable[Entity] = DataTable(
        title,
        admin_columns(),
        store.snapshot(),
        on_add=on_add,
        on_edit=on_edit,
        on_delete=lambda entity: store.delete(entity.id),
        search_key=search_key,
        page_size=page_size,
    )
    store.subscribe(table.set_data)
    return table
