"""Public blog post routes."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from portfolio.content import ContentLoader
from portfolio.errors import PublicApiError
from portfolio.routes.dependencies import get_content_loader
from portfolio.schemas.content import ContentItem, ContentType
from portfolio.schemas.error import PublicErrorResponse

router = APIRouter(prefix="/posts", tags=["Posts"])
logger = logging.getLogger(__name__)

POST_NOT_FOUND = "Post not found"
FAILED_TO_FETCH_POSTS = "Failed to fetch posts"


@router.get(
    "",
    response_model=ContentItem | list[ContentItem],
    responses={404: {"model": PublicErrorResponse}, 500: {"model": PublicErrorResponse}},
)
async def get_posts(
    loader: Annotated[ContentLoader, Depends(get_content_loader)],
    slug: Annotated[str | None, Query()] = None,
) -> ContentItem | list[ContentItem]:
    """Return every blog post, or the single post named by ``slug``."""
    try:
        if slug:
            post = loader.load_by_slug(slug)
        else:
            return loader.load_by_type(ContentType.BLOG)
    except Exception as exc:
        logger.exception("posts.failed slug=%s", slug)
        raise PublicApiError(status_code=500, message=FAILED_TO_FETCH_POSTS) from exc

    if post is None or post.type != ContentType.BLOG:
        raise PublicApiError(status_code=404, message=POST_NOT_FOUND)
    return post
