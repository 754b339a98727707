"""In-memory content store used by local development and tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from portfolio.repositories.base import ContentStore, DuplicateSlugError
from portfolio.schemas.content import ContentRecord


@dataclass(slots=True)
class InMemoryContentStore(ContentStore):
    """Simple, deterministic persistence layer for scaffolding and tests."""

    records: dict[str, ContentRecord] = field(default_factory=dict)
    read_count: int = 0
    write_count: int = 0

    def list_records(self, *, include_unpublished: bool = True) -> list[ContentRecord]:
        self.read_count += 1
        records = [
            record.model_copy(deep=True)
            for record in self.records.values()
            if include_unpublished or record.published
        ]
        records.sort(key=lambda record: record.slug)
        records.sort(key=lambda record: record.date, reverse=True)
        return records

    def get_record(self, slug: str) -> ContentRecord | None:
        self.read_count += 1
        record = self.records.get(slug)
        return record.model_copy(deep=True) if record is not None else None

    def slug_exists(self, slug: str) -> bool:
        self.read_count += 1
        return slug in self.records

    def insert_record(self, record: ContentRecord) -> ContentRecord:
        if record.slug in self.records:
            raise DuplicateSlugError(f"Content with slug {record.slug!r} already exists")
        self.records[record.slug] = record.model_copy(deep=True)
        self.write_count += 1
        return record.model_copy(deep=True)

    def update_record(self, slug: str, changes: dict[str, Any]) -> ContentRecord | None:
        current = self.records.get(slug)
        if current is None:
            return None
        updated = current.model_copy(update=changes, deep=True)
        self.records[slug] = updated
        self.write_count += 1
        return updated.model_copy(deep=True)

    def delete_record(self, slug: str) -> bool:
        if self.records.pop(slug, None) is None:
            return False
        self.write_count += 1
        return True
