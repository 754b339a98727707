"""Content schemas shared by the public and admin APIs."""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"
DEFAULT_CATEGORY = "Uncategorized"
NO_DESCRIPTION = "No description available"


class ContentType(str, Enum):
    BLOG = "blog"
    PROJECT = "project"


class ContentItem(BaseModel):
    """One loaded, validated piece of file-backed content."""

    model_config = ConfigDict(frozen=True)

    id: str
    slug: str
    title: str
    excerpt: str
    date: str
    category: str
    image: str | None = None
    type: ContentType
    tags: list[str] = Field(default_factory=list)
    content: str


class ContentRecord(BaseModel):
    """Persisted admin-side content row."""

    id: str
    slug: str
    title: str
    excerpt: str | None = None
    content: str = ""
    date: str
    category: str = DEFAULT_CATEGORY
    image: str | None = None
    type: ContentType = ContentType.BLOG
    tags: list[str] = Field(default_factory=list)
    published: bool = False
    comments_enabled: bool = True
    author_id: str | None = None
    created_at: datetime
    updated_at: datetime


class ContentCreateRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: str = Field(min_length=1, max_length=200)
    slug: str | None = Field(default=None, min_length=1, max_length=100, pattern=r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
    excerpt: str | None = None
    content: str = ""
    date: str | None = Field(default=None, pattern=DATE_PATTERN)
    category: str | None = None
    image: str | None = None
    type: ContentType | None = None
    tags: list[str] | None = None
    published: bool | None = None
    comments_enabled: bool | None = None


class ContentUpdateRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: str | None = Field(default=None, min_length=1, max_length=200)
    excerpt: str | None = None
    content: str | None = None
    date: str | None = Field(default=None, pattern=DATE_PATTERN)
    category: str | None = None
    image: str | None = None
    type: ContentType | None = None
    tags: list[str] | None = None
    published: bool | None = None
    comments_enabled: bool | None = None
    updated_at: datetime | None = Field(
        default=None,
        description="Last-seen updated_at of the record; a mismatch rejects the update.",
    )

    @field_validator(
        "title", "content", "date", "category", "type", "tags", "published", "comments_enabled", mode="before"
    )
    @classmethod
    def _reject_null(cls, value: Any) -> Any:
        # Omit a field to leave it unchanged; these columns cannot hold null.
        if value is None:
            raise ValueError("Field cannot be null")
        return value


class ContentEnvelope(BaseModel):
    success: bool = True
    data: ContentRecord


class ContentListEnvelope(BaseModel):
    success: bool = True
    data: list[ContentRecord]


class DeleteEnvelope(BaseModel):
    success: bool = True
