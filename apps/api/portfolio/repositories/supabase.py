"""Supabase-backed content store."""

from __future__ import annotations

import logging
from typing import Any

from fastapi.encoders import jsonable_encoder
from postgrest.exceptions import APIError
from supabase import Client

from portfolio.repositories.base import ContentStore, ContentStoreError, DuplicateSlugError
from portfolio.schemas.content import ContentRecord

logger = logging.getLogger(__name__)

_UNIQUE_VIOLATION = "23505"


class SupabaseContentStore(ContentStore):
    """Reads and writes the content table through a service-role client."""

    def __init__(self, client: Client, table: str = "content") -> None:
        self._client = client
        self._table = table

    def list_records(self, *, include_unpublished: bool = True) -> list[ContentRecord]:
        query = self._client.table(self._table).select("*").order("date", desc=True)
        if not include_unpublished:
            query = query.eq("published", True)
        rows = self._execute("list", query)
        return [ContentRecord.model_validate(row) for row in rows]

    def get_record(self, slug: str) -> ContentRecord | None:
        rows = self._execute("get", self._client.table(self._table).select("*").eq("slug", slug).limit(1))
        return ContentRecord.model_validate(rows[0]) if rows else None

    def slug_exists(self, slug: str) -> bool:
        rows = self._execute("exists", self._client.table(self._table).select("id").eq("slug", slug).limit(1))
        return bool(rows)

    def insert_record(self, record: ContentRecord) -> ContentRecord:
        row = record.model_dump(mode="json")
        try:
            rows = self._execute("insert", self._client.table(self._table).insert(row))
        except ContentStoreError as exc:
            if isinstance(exc.__cause__, APIError) and exc.__cause__.code == _UNIQUE_VIOLATION:
                raise DuplicateSlugError(f"Content with slug {record.slug!r} already exists") from exc.__cause__
            raise
        return ContentRecord.model_validate(rows[0]) if rows else record

    def update_record(self, slug: str, changes: dict[str, Any]) -> ContentRecord | None:
        values = jsonable_encoder(changes)
        rows = self._execute("update", self._client.table(self._table).update(values).eq("slug", slug))
        return ContentRecord.model_validate(rows[0]) if rows else None

    def delete_record(self, slug: str) -> bool:
        rows = self._execute("delete", self._client.table(self._table).delete().eq("slug", slug))
        return bool(rows)

    def _execute(self, operation: str, query: Any) -> list[dict[str, Any]]:
        try:
            response = query.execute()
        except APIError as exc:
            logger.warning("store.failed operation=%s table=%s code=%s", operation, self._table, exc.code)
            raise ContentStoreError(exc.message or f"Content {operation} failed") from exc
        return list(response.data or [])
