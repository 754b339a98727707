"""In-memory queries over loaded content items."""

from __future__ import annotations

from typing import Iterable, Sequence

from portfolio.schemas.content import ContentItem


def search(items: Sequence[ContentItem], query: str) -> list[ContentItem]:
    """Case-insensitive substring match on title, excerpt and category."""
    term = query.lower()
    return [
        item
        for item in items
        if term in item.title.lower() or term in item.excerpt.lower() or term in item.category.lower()
    ]


def categories(items: Iterable[ContentItem]) -> set[str]:
    return {item.category for item in items}


def filter_by_tags(items: Sequence[ContentItem], selected: Iterable[str]) -> list[ContentItem]:
    """Keep items sharing at least one tag with the selection.

    An empty selection applies no filter.
    """
    wanted = set(selected)
    if not wanted:
        return list(items)
    return [item for item in items if wanted.intersection(item.tags)]
