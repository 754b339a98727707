"""Dependency wiring for routes."""

from __future__ import annotations

import logging
from typing import Annotated, Awaitable, Callable
from uuid import uuid4

from fastapi import Depends, Request, Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from portfolio.adapters.auth import AuthVerificationError, TokenVerifier
from portfolio.adapters.blob import BlobStore
from portfolio.content import ContentLoader
from portfolio.core.config import Settings
from portfolio.core.logging import safe_log_identifier
from portfolio.domain.access import GateState, ensure_role, unauthenticated_error
from portfolio.errors import ApiError
from portfolio.repositories import ContentStore
from portfolio.schemas.auth import AuthenticatedUser, UserRole
from portfolio.services.content import ContentAdminService
from portfolio.services.rate_limit import RateLimiter

bearer_scheme = HTTPBearer(auto_error=False, scheme_name="bearerAuth")
logger = logging.getLogger(__name__)


def _request_correlation_id(request: Request) -> str:
    existing = getattr(request.state, "correlation_id", None)
    if isinstance(existing, str) and existing:
        return existing

    correlation_id = request.headers.get("X-Correlation-Id")
    if correlation_id:
        request.state.correlation_id = correlation_id
        return correlation_id

    generated = f"req-{uuid4()}"
    request.state.correlation_id = generated
    return generated


def get_settings_state(request: Request) -> Settings:
    return request.app.state.settings


def get_token_verifier(request: Request) -> TokenVerifier:
    return request.app.state.token_verifier


def get_content_loader(request: Request) -> ContentLoader:
    return request.app.state.content_loader


def get_content_store(request: Request) -> ContentStore:
    return request.app.state.content_store


def get_blob_store(request: Request) -> BlobStore:
    return request.app.state.blob_store


def get_login_rate_limiter(request: Request) -> RateLimiter:
    return request.app.state.login_rate_limiter


def get_content_admin_service(
    store: Annotated[ContentStore, Depends(get_content_store)],
    settings: Annotated[Settings, Depends(get_settings_state)],
) -> ContentAdminService:
    return ContentAdminService(store, production=settings.is_production)


async def get_authenticated_user(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Security(bearer_scheme)],
    verifier: Annotated[TokenVerifier, Depends(get_token_verifier)],
) -> AuthenticatedUser:
    """Validate the bearer token and attach the caller identity to request state."""
    safe_correlation_id = safe_log_identifier(_request_correlation_id(request), prefix="cid")
    request.state.auth_state = GateState.UNVERIFIED

    if credentials is None or credentials.scheme.lower() != "bearer" or not credentials.credentials:
        request.state.auth_state = GateState.REJECTED
        logger.warning(
            "auth.rejected correlation_id=%s method=%s path=%s reason=invalid_or_missing_bearer",
            safe_correlation_id,
            request.method,
            request.url.path,
        )
        raise unauthenticated_error()

    try:
        user = verifier.verify_token(credentials.credentials)
    except AuthVerificationError as exc:
        request.state.auth_state = GateState.REJECTED
        logger.warning(
            "auth.rejected correlation_id=%s method=%s path=%s reason=token_verification_failed",
            safe_correlation_id,
            request.method,
            request.url.path,
        )
        raise unauthenticated_error() from exc

    request.state.auth_state = GateState.AUTHENTICATED
    request.state.auth_user = user
    logger.info(
        "auth.accepted correlation_id=%s method=%s path=%s user_id=%s role=%s",
        safe_correlation_id,
        request.method,
        request.url.path,
        safe_log_identifier(user.id, prefix="uid"),
        user.role.value,
    )
    return user


def require_role(required: UserRole) -> Callable[..., Awaitable[AuthenticatedUser]]:
    """Build a dependency that authenticates and then checks the caller's role."""

    async def _role_gate(
        request: Request,
        user: Annotated[AuthenticatedUser, Depends(get_authenticated_user)],
    ) -> AuthenticatedUser:
        try:
            ensure_role(user, required)
        except ApiError:
            logger.warning(
                "auth.forbidden path=%s user_id=%s role=%s required_role=%s",
                request.url.path,
                safe_log_identifier(user.id, prefix="uid"),
                user.role.value,
                required.value,
            )
            raise
        return user

    return _role_gate


require_editor = require_role(UserRole.EDITOR)
require_admin = require_role(UserRole.ADMIN)
