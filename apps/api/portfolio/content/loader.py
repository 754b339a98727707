"""Content loader reading frontmatter files from a directory."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from portfolio.content.frontmatter import FrontmatterValidationError, split_frontmatter, validate_frontmatter
from portfolio.content.query import categories, search
from portfolio.schemas.content import NO_DESCRIPTION, ContentItem, ContentType

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS: tuple[str, ...] = (".mdx", ".md")


class ContentLoader:
    """Builds ContentItems from the files of one content directory.

    Every call re-reads the directory; nothing is cached between calls.
    """

    def __init__(self, content_dir: str | Path, extensions: Iterable[str] = DEFAULT_EXTENSIONS) -> None:
        self._content_dir = Path(content_dir)
        self._extensions = tuple(ext.lower() for ext in extensions)

    @property
    def content_dir(self) -> Path:
        return self._content_dir

    def eligible_files(self) -> list[Path]:
        """Content files in the directory, one per stem.

        When a stem exists under several extensions the earliest configured
        extension wins; the others are skipped with a warning.
        """
        if not self._content_dir.is_dir():
            logger.warning("content.directory_missing path=%s", self._content_dir)
            return []

        candidates = sorted(
            (path for path in self._content_dir.iterdir() if path.is_file() and path.suffix.lower() in self._extensions),
            key=lambda path: (path.stem, self._extensions.index(path.suffix.lower()), path.name),
        )
        by_stem: dict[str, Path] = {}
        for path in candidates:
            kept = by_stem.setdefault(path.stem, path)
            if kept is not path:
                logger.warning("content.duplicate_slug slug=%s kept=%s skipped=%s", path.stem, kept.name, path.name)
        return sorted(by_stem.values())

    def load_all(self) -> list[ContentItem]:
        items: list[ContentItem] = []
        for path in self.eligible_files():
            item = self._load_file(path)
            if item is not None:
                items.append(item)

        # Stable sorts: slug ascending breaks ties, then date descending.
        items.sort(key=lambda item: item.slug)
        items.sort(key=lambda item: item.date, reverse=True)
        return items

    def load_by_slug(self, slug: str) -> ContentItem | None:
        if not slug or slug.startswith(".") or "/" in slug or "\\" in slug:
            return None

        for path in self.eligible_files():
            if path.stem == slug:
                return self._load_file(path)
        return None

    def load_by_type(self, content_type: ContentType | str) -> list[ContentItem]:
        wanted = ContentType(content_type)
        return [item for item in self.load_all() if item.type == wanted]

    def search(self, query: str) -> list[ContentItem]:
        return search(self.load_all(), query)

    def categories(self) -> set[str]:
        return categories(self.load_all())

    def _load_file(self, path: Path) -> ContentItem | None:
        slug = path.stem
        try:
            metadata, body = split_frontmatter(path.read_text(encoding="utf-8"))
            frontmatter = validate_frontmatter(metadata)
        except FrontmatterValidationError as exc:
            logger.warning("content.invalid file=%s reason=%s", path.name, exc)
            return None
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("content.unreadable file=%s reason=%s", path.name, exc)
            return None

        return ContentItem(
            id=slug,
            slug=slug,
            title=frontmatter.title,
            excerpt=frontmatter.description or frontmatter.excerpt or NO_DESCRIPTION,
            date=frontmatter.date,
            category=frontmatter.category,
            image=frontmatter.image or None,
            type=frontmatter.type,
            tags=list(frontmatter.tags),
            content=body,
        )
