"""Remote lookup tables (entity types) for navigation."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from directory_core.errors import LookupServiceError
from directory_core.models import SourceData
from directory_core.navigation import LookupRecord

logger = logging.getLogger(__name__)


class LookupClient:
    """Client for the hosted ``api`` function's ``get-lookups`` task."""

    def __init__(
        self,
        base_url: str,
        *,
        api_key: str | None = None,
        timeout: float = 10.0,
        http_client: httpx.Client | None = None,
    ) -> None:
        if not base_url.startswith(("http://", "https://")):
            raise ValueError("base_url must include scheme and host")
        self._endpoint = f"{base_url.rstrip('/')}/functions/v1/api"
        headers = {"Accept": "application/json"}
        if api_key:
            headers["apikey"] = api_key
            headers["Authorization"] = f"Bearer {api_key}"
        self._headers = headers
        self._client = http_client or httpx.Client(timeout=timeout)
        self._owns_client = http_client is None

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> LookupClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @staticmethod
    def _record(row: Any) -> LookupRecord | None:
        if not isinstance(row, dict):
            return None
        slug = row.get("slug")
        name = row.get("name")
        if not slug or not name:
            return None
        return LookupRecord(id=str(row.get("id", slug)), slug=str(slug), name=str(name))

    def fetch(self, table: str) -> list[LookupRecord]:
        params = {"task": "get-lookups", "table": table}
        try:
            response = self._client.get(self._endpoint, params=params, headers=self._headers)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise LookupServiceError(f"lookup {table} failed with HTTP {exc.response.status_code}") from exc
        except httpx.HTTPError as exc:
            raise LookupServiceError(f"lookup {table} request failed: {exc}") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise LookupServiceError(f"invalid JSON from lookup {table}") from exc

        if isinstance(payload, dict):
            payload = payload.get("data")
        if not isinstance(payload, list):
            raise LookupServiceError(f"lookup {table} did not return a list")

        records = [record for record in (self._record(row) for row in payload) if record is not None]
        logger.debug("lookup %s returned %d records", table, len(records))
        return records


def collect(client: LookupClient | None, table: str = "entity_types") -> SourceData:
    if client is None:
        return SourceData(
            key="lookups",
            title="Lookups",
            status="warn",
            items=[],
            meta={"table": table, "count": 0},
            errors=["lookup service not configured"],
        )

    try:
        records = client.fetch(table)
    except LookupServiceError as exc:
        logger.warning("%s", exc)
        return SourceData(
            key="lookups",
            title="Lookups",
            status="warn",
            items=[],
            meta={"table": table, "count": 0},
            errors=[str(exc)],
        )

    return SourceData(
        key="lookups",
        title="Lookups",
        status="ok" if records else "warn",
        items=records,
        meta={"table": table, "count": len(records)},
        errors=[] if records else [f"lookup {table} is empty"],
    )
