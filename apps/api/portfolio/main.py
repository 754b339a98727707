"""FastAPI application entrypoint."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from supabase import Client, create_client

from portfolio.adapters.auth import MockTokenVerifier, SupabaseTokenVerifier, TokenVerifier
from portfolio.adapters.blob import BlobStore, InMemoryBlobStore, VercelBlobStore
from portfolio.content import ContentLoader
from portfolio.core.config import Settings, get_settings
from portfolio.core.logging import configure_logging
from portfolio.errors import ApiError, PublicApiError
from portfolio.repositories import ContentStore, InMemoryContentStore, SupabaseContentStore
from portfolio.routes import (
    admin_auth_router,
    admin_content_router,
    content_router,
    health_router,
    posts_router,
    video_router,
)
from portfolio.schemas.error import ErrorResponse, PublicErrorResponse
from portfolio.services.rate_limit import RateLimiter

logger = logging.getLogger(__name__)

API_PREFIX = "/api"
_ADMIN_PREFIX = f"{API_PREFIX}/admin"


class ConfigurationError(RuntimeError):
    """Raised when settings select a provider whose credentials are missing."""


def _supabase_client(settings: Settings) -> Client:
    if not settings.supabase_url or not settings.supabase_service_key:
        raise ConfigurationError("PORTFOLIO_SUPABASE_URL and PORTFOLIO_SUPABASE_SERVICE_KEY are required")
    return create_client(settings.supabase_url, settings.supabase_service_key)


def build_token_verifier(settings: Settings) -> TokenVerifier:
    """Resolve provider adapter from configuration."""
    if settings.auth_provider == "supabase":
        return SupabaseTokenVerifier(
            auth_client=_supabase_client(settings),
            data_client=_supabase_client(settings),
            profiles_table=settings.supabase_profiles_table,
        )
    return MockTokenVerifier()


def build_content_store(settings: Settings) -> ContentStore:
    if settings.content_store == "supabase":
        return SupabaseContentStore(_supabase_client(settings), table=settings.supabase_content_table)
    return InMemoryContentStore()


def build_blob_store(settings: Settings) -> BlobStore:
    if settings.blob_provider == "vercel":
        if not settings.blob_read_write_token:
            raise ConfigurationError("PORTFOLIO_BLOB_READ_WRITE_TOKEN is required for the vercel blob provider")
        return VercelBlobStore(settings.blob_read_write_token, api_url=settings.blob_api_url)
    return InMemoryBlobStore()


def _is_admin_request(request: Request) -> bool:
    return request.url.path.startswith(_ADMIN_PREFIX)


def create_app(
    settings: Settings | None = None,
    *,
    token_verifier: TokenVerifier | None = None,
    content_store: ContentStore | None = None,
    blob_store: BlobStore | None = None,
    content_loader: ContentLoader | None = None,
) -> FastAPI:
    """Build the application; external clients are created once here and shared via ``app.state``."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Portfolio Site API", version="1.0.0")
    app.state.settings = settings
    app.state.token_verifier = token_verifier or build_token_verifier(settings)
    app.state.content_store = content_store or build_content_store(settings)
    app.state.blob_store = blob_store or build_blob_store(settings)
    app.state.content_loader = content_loader or ContentLoader(settings.content_dir, settings.content_extensions)
    app.state.login_rate_limiter = RateLimiter(
        limit=settings.login_rate_limit,
        window_seconds=settings.login_rate_window_seconds,
    )

    @app.exception_handler(ApiError)
    async def handle_api_error(_, exc: ApiError) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.payload.model_dump(mode="json", exclude_none=True),
            headers=exc.headers,
        )

    @app.exception_handler(PublicApiError)
    async def handle_public_api_error(_, exc: PublicApiError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content=exc.payload.model_dump())

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        if _is_admin_request(request):
            payload = ErrorResponse(
                error="Invalid request",
                code="VALIDATION_ERROR",
                details=jsonable_encoder(exc.errors(), exclude={"ctx", "input", "url"}),
            )
            return JSONResponse(status_code=400, content=payload.model_dump(mode="json", exclude_none=True))
        if request.url.path.startswith(API_PREFIX):
            return JSONResponse(status_code=400, content=PublicErrorResponse(error="Invalid request").model_dump())
        return await request_validation_exception_handler(request, exc)

    app.include_router(health_router)
    app.include_router(posts_router, prefix=API_PREFIX)
    app.include_router(content_router, prefix=API_PREFIX)
    app.include_router(video_router, prefix=API_PREFIX)
    app.include_router(admin_auth_router, prefix=API_PREFIX)
    app.include_router(admin_content_router, prefix=API_PREFIX)

    logger.info(
        "app.created environment=%s auth_provider=%s content_store=%s blob_provider=%s content_dir=%s",
        settings.environment,
        settings.auth_provider,
        settings.content_store,
        settings.blob_provider,
        settings.content_dir,
    )
    return app
