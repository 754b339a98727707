"""Content store interface used by the admin service."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from portfolio.schemas.content import ContentRecord


class ContentStoreError(Exception):
    """Raised when the backing store rejects or fails an operation."""


class DuplicateSlugError(ContentStoreError):
    """Raised when an insert collides with an existing slug."""


class ContentStore(ABC):
    """Persistence port for admin-managed content rows keyed by slug."""

    @abstractmethod
    def list_records(self, *, include_unpublished: bool = True) -> list[ContentRecord]:
        """Return records ordered by date, newest first."""

    @abstractmethod
    def get_record(self, slug: str) -> ContentRecord | None: ...

    @abstractmethod
    def slug_exists(self, slug: str) -> bool: ...

    @abstractmethod
    def insert_record(self, record: ContentRecord) -> ContentRecord: ...

    @abstractmethod
    def update_record(self, slug: str, changes: dict[str, Any]) -> ContentRecord | None:
        """Apply ``changes`` and return the updated record, or ``None`` if absent."""

    @abstractmethod
    def delete_record(self, slug: str) -> bool:
        """Remove the record; ``False`` when nothing matched."""


__all__ = ["ContentStore", "ContentStoreError", "DuplicateSlugError"]
