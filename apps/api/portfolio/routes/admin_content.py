"""Admin content CRUD routes."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, status

from portfolio.domain.access import ensure_role
from portfolio.routes.dependencies import get_content_admin_service, require_editor
from portfolio.schemas.auth import AuthenticatedUser, UserRole
from portfolio.schemas.content import (
    ContentCreateRequest,
    ContentEnvelope,
    ContentListEnvelope,
    ContentUpdateRequest,
    DeleteEnvelope,
)
from portfolio.schemas.error import ErrorResponse
from portfolio.services.content import ContentAdminService

router = APIRouter(prefix="/admin/content", tags=["Admin content"])

_AUTH_RESPONSES = {401: {"model": ErrorResponse}, 403: {"model": ErrorResponse}}


@router.get("", response_model=ContentListEnvelope, responses=_AUTH_RESPONSES)
async def list_content(
    user: Annotated[AuthenticatedUser, Depends(require_editor)],
    service: Annotated[ContentAdminService, Depends(get_content_admin_service)],
) -> ContentListEnvelope:
    return ContentListEnvelope(data=service.list_content())


@router.post(
    "",
    response_model=ContentEnvelope,
    status_code=status.HTTP_201_CREATED,
    responses={**_AUTH_RESPONSES, 400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def create_content(
    payload: ContentCreateRequest,
    user: Annotated[AuthenticatedUser, Depends(require_editor)],
    service: Annotated[ContentAdminService, Depends(get_content_admin_service)],
) -> ContentEnvelope:
    return ContentEnvelope(data=service.create_content(author_id=user.id, payload=payload))


@router.get(
    "/{slug}",
    response_model=ContentEnvelope,
    responses={**_AUTH_RESPONSES, 404: {"model": ErrorResponse}},
)
async def get_content(
    slug: Annotated[str, Path(min_length=1)],
    user: Annotated[AuthenticatedUser, Depends(require_editor)],
    service: Annotated[ContentAdminService, Depends(get_content_admin_service)],
) -> ContentEnvelope:
    return ContentEnvelope(data=service.get_content(slug))


@router.patch(
    "/{slug}",
    response_model=ContentEnvelope,
    responses={**_AUTH_RESPONSES, 400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def update_content(
    slug: Annotated[str, Path(min_length=1)],
    payload: ContentUpdateRequest,
    user: Annotated[AuthenticatedUser, Depends(require_editor)],
    service: Annotated[ContentAdminService, Depends(get_content_admin_service)],
) -> ContentEnvelope:
    return ContentEnvelope(data=service.update_content(slug, payload))


@router.delete(
    "/{slug}",
    response_model=DeleteEnvelope,
    responses={**_AUTH_RESPONSES, 404: {"model": ErrorResponse}},
)
async def delete_content(
    slug: Annotated[str, Path(min_length=1)],
    user: Annotated[AuthenticatedUser, Depends(require_editor)],
    service: Annotated[ContentAdminService, Depends(get_content_admin_service)],
    hard: Annotated[bool, Query(description="Remove the record instead of unpublishing it.")] = False,
) -> DeleteEnvelope:
    if hard:
        ensure_role(user, UserRole.ADMIN)
    service.delete_content(slug, hard=hard)
    return DeleteEnvelope()
