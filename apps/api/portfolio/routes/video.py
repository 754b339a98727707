"""Video lookup route."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, ConfigDict, Field

from portfolio.adapters.blob import BlobStore, BlobStoreError
from portfolio.core.config import Settings
from portfolio.errors import INTERNAL_ERROR_MESSAGE, PublicApiError
from portfolio.routes.dependencies import get_blob_store, get_settings_state
from portfolio.schemas.error import PublicErrorResponse

router = APIRouter(prefix="/video", tags=["Video"])
logger = logging.getLogger(__name__)

FILENAME_REQUIRED = "fileName parameter is required"
VIDEO_NOT_FOUND = "Video not found"


class VideoLocation(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    url: str
    file_name: str = Field(alias="fileName")


@router.get(
    "",
    response_model=VideoLocation,
    response_model_by_alias=True,
    responses={
        400: {"model": PublicErrorResponse},
        404: {"model": PublicErrorResponse},
        500: {"model": PublicErrorResponse},
    },
)
async def get_video(
    blob_store: Annotated[BlobStore, Depends(get_blob_store)],
    settings: Annotated[Settings, Depends(get_settings_state)],
    file_name: Annotated[str | None, Query(alias="fileName")] = None,
) -> VideoLocation:
    if not file_name:
        raise PublicApiError(status_code=400, message=FILENAME_REQUIRED)

    try:
        blob = blob_store.find_object(file_name)
    except BlobStoreError as exc:
        logger.error("video.lookup_failed file_name=%s error=%s", file_name, exc)
        message = INTERNAL_ERROR_MESSAGE if settings.is_production else str(exc)
        raise PublicApiError(status_code=500, message=message) from exc

    if blob is None:
        raise PublicApiError(status_code=404, message=VIDEO_NOT_FOUND)
    return VideoLocation(url=blob.url, file_name=file_name)
