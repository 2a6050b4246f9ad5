"""Bundled dataset collector (fail-soft)."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from directory_core.collectors import env_data_dir
from directory_core.errors import DataSourceError
from directory_core.formatting import collapse_whitespace
from directory_core.models import Entity, SourceData

logger = logging.getLogger(__name__)


def _year(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return None


def _text(value: Any) -> str | None:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def entity_from_row(row: dict, kind: str | None = None) -> Entity | None:
    name = _text(row.get("name")) or _text(row.get("title"))
    if name is None:
        return None
    return Entity(
        id=row.get("id") if row.get("id") is not None else name,
        name=name,
        description=collapse_whitespace(row.get("description") if isinstance(row.get("description"), str) else ""),
        city=_text(row.get("city")),
        category=_text(row.get("category")),
        founded_year=_year(row.get("founded_year", row.get("foundedYear"))),
        url=_text(row.get("url")) or _text(row.get("website")),
        image=_text(row.get("image")) or _text(row.get("logo")),
        kind=kind,
    )


def _rows_from_payload(payload: Any) -> tuple[list[Any], list[dict]]:
    if isinstance(payload, list):
        return payload, []
    if isinstance(payload, dict):
        rows = payload.get("items")
        categories = payload.get("categories")
        return (
            rows if isinstance(rows, list) else [],
            [c for c in categories if isinstance(c, dict)] if isinstance(categories, list) else [],
        )
    raise DataSourceError("dataset must be a JSON list or an object with 'items'")


def load_entities(path: Path, kind: str | None = None) -> tuple[list[Entity], list[dict], int]:
    """Strict loader: returns (entities, categories, skipped)."""
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise DataSourceError(f"cannot read {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise DataSourceError(f"invalid JSON in {path}: {exc}") from exc

    rows, categories = _rows_from_payload(payload)
    entities: list[Entity] = []
    skipped = 0
    for row in rows:
        entity = entity_from_row(row, kind) if isinstance(row, dict) else None
        if entity is None:
            skipped += 1
            continue
        entities.append(entity)
    return entities, categories, skipped


def collect(source: str, data_dir: Path | None = None, kind: str | None = None) -> SourceData:
    path = (data_dir or env_data_dir()) / f"{source}.json"
    title = source.replace("_", " ").title()
    try:
        entities, categories, skipped = load_entities(path, kind)
    except DataSourceError as exc:
        logger.warning("%s", exc)
        return SourceData(
            key=source,
            title=title,
            status="error",
            items=[],
            meta={"count": 0, "path": str(path)},
            errors=[str(exc)],
        )

    if skipped:
        logger.warning("skipped %d malformed rows in %s", skipped, path)
    status = "ok" if entities else "warn"
    return SourceData(
        key=source,
        title=title,
        status=status,
        items=entities,
        meta={
            "count": len(entities),
            "skipped": skipped,
            "categories": categories,
            "path": str(path),
        },
        errors=[] if entities else [f"{source} dataset is empty"],
    )
