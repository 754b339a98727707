"""Public content discovery routes."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from portfolio.content import ContentLoader, filter_by_tags, search
from portfolio.routes.dependencies import get_content_loader
from portfolio.schemas.content import ContentItem, ContentType

router = APIRouter(prefix="/content", tags=["Content"])


def _split_tags(raw: str | None) -> list[str]:
    if not raw:
        return []
    return [tag.strip() for tag in raw.split(",") if tag.strip()]


@router.get("", response_model=list[ContentItem])
async def list_content(
    loader: Annotated[ContentLoader, Depends(get_content_loader)],
    content_type: Annotated[ContentType | None, Query(alias="type")] = None,
    q: Annotated[str | None, Query()] = None,
    category: Annotated[str | None, Query()] = None,
    tags: Annotated[str | None, Query(description="Comma-separated; matches items with any listed tag.")] = None,
) -> list[ContentItem]:
    items = loader.load_by_type(content_type) if content_type else loader.load_all()
    if q:
        items = search(items, q)
    if category:
        items = [item for item in items if item.category.lower() == category.lower()]
    return filter_by_tags(items, _split_tags(tags))


@router.get("/categories", response_model=list[str])
async def list_categories(loader: Annotated[ContentLoader, Depends(get_content_loader)]) -> list[str]:
    return sorted(loader.categories())
