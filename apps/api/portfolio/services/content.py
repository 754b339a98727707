"""Admin content service layer."""

from __future__ import annotations

import logging
import re
from datetime import UTC, date, datetime
from uuid import uuid4

from portfolio.core.logging import safe_log_identifier
from portfolio.errors import ApiError, internal_error, not_found
from portfolio.repositories.base import ContentStore, ContentStoreError, DuplicateSlugError
from portfolio.schemas.content import (
    DEFAULT_CATEGORY,
    ContentCreateRequest,
    ContentRecord,
    ContentType,
    ContentUpdateRequest,
)

logger = logging.getLogger(__name__)

SLUG_ALREADY_EXISTS = "A content item with this slug already exists"
OPTIMISTIC_LOCK_MESSAGE = "Content was modified by another user"
_MAX_SLUG_LENGTH = 100
_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]+")


def generate_slug(title: str) -> str:
    """Lowercase, collapse non-alphanumerics to hyphens, trim, cap length."""
    slug = _NON_SLUG_CHARS.sub("-", title.lower().strip()).strip("-")
    return slug[:_MAX_SLUG_LENGTH].rstrip("-")


class ContentAdminService:
    def __init__(self, store: ContentStore, *, production: bool = False) -> None:
        self._store = store
        self._production = production

    def list_content(self) -> list[ContentRecord]:
        try:
            return self._store.list_records(include_unpublished=True)
        except ContentStoreError as exc:
            raise self._store_failure(exc, operation="list") from exc

    def get_content(self, slug: str) -> ContentRecord:
        try:
            record = self._store.get_record(slug)
        except ContentStoreError as exc:
            raise self._store_failure(exc, operation="get") from exc
        if record is None:
            raise not_found()
        return record

    def create_content(self, *, author_id: str, payload: ContentCreateRequest) -> ContentRecord:
        try:
            if payload.slug:
                slug = payload.slug
                if self._store.slug_exists(slug):
                    raise self._duplicate(slug)
            else:
                slug = self._unique_slug(payload.title)

            now = datetime.now(UTC)
            record = ContentRecord(
                id=str(uuid4()),
                slug=slug,
                title=payload.title,
                excerpt=payload.excerpt,
                content=payload.content,
                date=payload.date or date.today().isoformat(),
                category=payload.category or DEFAULT_CATEGORY,
                image=payload.image,
                type=payload.type or ContentType.BLOG,
                tags=payload.tags or [],
                published=payload.published if payload.published is not None else False,
                comments_enabled=payload.comments_enabled if payload.comments_enabled is not None else True,
                author_id=author_id,
                created_at=now,
                updated_at=now,
            )
            created = self._store.insert_record(record)
        except DuplicateSlugError as exc:
            raise self._duplicate(slug) from exc
        except ContentStoreError as exc:
            raise self._store_failure(exc, operation="create") from exc

        logger.info(
            "content.created slug=%s author_id=%s",
            created.slug,
            safe_log_identifier(author_id, prefix="uid"),
        )
        return created

    def update_content(self, slug: str, payload: ContentUpdateRequest) -> ContentRecord:
        changes = payload.model_dump(exclude_unset=True, exclude={"updated_at"})
        try:
            current = self._store.get_record(slug)
            if current is None:
                raise not_found()
            if payload.updated_at is not None and current.updated_at != payload.updated_at:
                raise ApiError(
                    status_code=409,
                    code="OPTIMISTIC_LOCK_ERROR",
                    message=OPTIMISTIC_LOCK_MESSAGE,
                    details={
                        "expected_updated_at": payload.updated_at.isoformat(),
                        "current_updated_at": current.updated_at.isoformat(),
                    },
                )

            changes["updated_at"] = datetime.now(UTC)
            updated = self._store.update_record(slug, changes)
        except ContentStoreError as exc:
            raise self._store_failure(exc, operation="update") from exc

        if updated is None:
            raise not_found()
        logger.info("content.updated slug=%s fields=%s", slug, ",".join(sorted(changes)))
        return updated

    def delete_content(self, slug: str, *, hard: bool = False) -> None:
        """Soft delete unpublishes the record; hard delete removes it."""
        try:
            if hard:
                deleted = self._store.delete_record(slug)
            else:
                deleted = (
                    self._store.update_record(slug, {"published": False, "updated_at": datetime.now(UTC)})
                    is not None
                )
        except ContentStoreError as exc:
            raise self._store_failure(exc, operation="delete") from exc

        if not deleted:
            raise not_found()
        logger.info("content.deleted slug=%s mode=%s", slug, "hard" if hard else "soft")

    def _unique_slug(self, title: str) -> str:
        base = generate_slug(title) or "untitled"
        slug = base
        counter = 1
        while self._store.slug_exists(slug):
            suffix = f"-{counter}"
            slug = base[: _MAX_SLUG_LENGTH - len(suffix)].rstrip("-") + suffix
            counter += 1
        return slug

    @staticmethod
    def _duplicate(slug: str) -> ApiError:
        return ApiError(status_code=409, code="DUPLICATE_ENTRY", message=SLUG_ALREADY_EXISTS, details={"slug": slug})

    def _store_failure(self, exc: ContentStoreError, *, operation: str) -> ApiError:
        logger.error("content.store_failed operation=%s error=%s", operation, exc)
        return internal_error(str(exc) or "Content store failure", production=self._production)
