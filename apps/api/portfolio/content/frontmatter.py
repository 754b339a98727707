"""Frontmatter parsing and schema validation for content files."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Mapping

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from portfolio.schemas.content import DEFAULT_CATEGORY, ContentType

_DELIMITER = "---"


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    field: str
    message: str


class FrontmatterValidationError(ValueError):
    """Raised when a frontmatter block is malformed or violates the schema.

    ``issues`` lists every violation found, not just the first one.
    """

    def __init__(self, issues: list[ValidationIssue]) -> None:
        self.issues = issues
        super().__init__(", ".join(f"{issue.field}: {issue.message}" for issue in issues))


class Frontmatter(BaseModel):
    """Validated metadata block of a content file."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    title: str = Field(min_length=1)
    date: str
    tags: list[str]
    description: str | None = None
    excerpt: str | None = None
    category: str = DEFAULT_CATEGORY
    image: str | None = None
    type: ContentType = ContentType.BLOG

    @field_validator("date", mode="before")
    @classmethod
    def _normalize_date(cls, value: Any) -> Any:
        """Accept ISO-8601 dates or datetimes and keep only the calendar day."""
        # YAML loads unquoted 2024-01-31 as a date (or datetime) object.
        if isinstance(value, date):
            return value.isoformat()[:10]
        if isinstance(value, str):
            try:
                return datetime.fromisoformat(value.strip()).date().isoformat()
            except ValueError as exc:
                raise ValueError("Date must be an ISO-8601 date or datetime") from exc
        return value


def split_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Split a leading ``---`` delimited YAML block from the body."""
    lines = text.splitlines(keepends=True)
    if not lines or lines[0].strip() != _DELIMITER:
        return {}, text

    for index in range(1, len(lines)):
        if lines[index].strip() == _DELIMITER:
            header = "".join(lines[1:index])
            body = "".join(lines[index + 1 :])
            break
    else:
        raise FrontmatterValidationError([ValidationIssue("frontmatter", "Unterminated frontmatter block")])

    try:
        metadata = yaml.safe_load(header)
    except yaml.YAMLError as exc:
        raise FrontmatterValidationError([ValidationIssue("frontmatter", f"Invalid YAML: {exc}")]) from exc

    if metadata is None:
        return {}, body
    if not isinstance(metadata, dict):
        raise FrontmatterValidationError([ValidationIssue("frontmatter", "Frontmatter must be a mapping")])
    return metadata, body


def validate_frontmatter(metadata: Mapping[str, Any]) -> Frontmatter:
    """Validate an untyped metadata mapping; all-or-nothing."""
    try:
        return Frontmatter.model_validate(dict(metadata))
    except ValidationError as exc:
        issues = [
            ValidationIssue(
                field=".".join(str(part) for part in error["loc"]) or "frontmatter",
                message=error["msg"],
            )
            for error in exc.errors()
        ]
        raise FrontmatterValidationError(issues) from exc
