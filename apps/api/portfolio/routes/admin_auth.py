"""Admin authentication routes."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends, Request

from portfolio.adapters.auth import AuthVerificationError, TokenVerifier
from portfolio.core.logging import safe_log_identifier
from portfolio.errors import ApiError
from portfolio.routes.dependencies import get_authenticated_user, get_login_rate_limiter, get_token_verifier
from portfolio.schemas.auth import AuthenticatedUser, CurrentUserEnvelope, LoginEnvelope, LoginRequest
from portfolio.schemas.error import ErrorResponse
from portfolio.services.rate_limit import RateLimiter

router = APIRouter(prefix="/admin/auth", tags=["Admin auth"])
logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials provided"
TOO_MANY_ATTEMPTS = "Too many login attempts. Please try again later."


def client_identifier(request: Request) -> str:
    """Prefer proxy-forwarded addresses, then the socket peer, then header fingerprint."""
    forwarded_for = request.headers.get("x-forwarded-for")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()

    real_ip = request.headers.get("x-real-ip")
    if real_ip:
        return real_ip

    if request.client is not None and request.client.host:
        return request.client.host

    user_agent = request.headers.get("user-agent", "unknown")
    accept_language = request.headers.get("accept-language", "unknown")
    return f"fallback-{user_agent}-{accept_language}"[:100]


async def enforce_login_rate_limit(
    request: Request,
    limiter: Annotated[RateLimiter, Depends(get_login_rate_limiter)],
) -> None:
    decision = limiter.hit(client_identifier(request))
    if decision.allowed:
        return

    retry_after = decision.retry_after(limiter.now())
    logger.warning(
        "auth.login_rate_limited client=%s retry_after=%s",
        safe_log_identifier(client_identifier(request), prefix="client"),
        retry_after,
    )
    raise ApiError(
        status_code=429,
        code="RATE_LIMITED",
        message=TOO_MANY_ATTEMPTS,
        details={"reset_at": datetime.fromtimestamp(decision.reset_at, UTC).isoformat()},
        headers={
            "Retry-After": str(retry_after),
            "X-RateLimit-Limit": str(decision.limit),
            "X-RateLimit-Reset": str(int(decision.reset_at)),
        },
    )


@router.post(
    "/login",
    response_model=LoginEnvelope,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}, 429: {"model": ErrorResponse}},
    dependencies=[Depends(enforce_login_rate_limit)],
)
async def login(
    payload: LoginRequest,
    verifier: Annotated[TokenVerifier, Depends(get_token_verifier)],
) -> LoginEnvelope:
    try:
        session = verifier.sign_in(payload.email, payload.password)
    except AuthVerificationError as exc:
        logger.warning("auth.login_failed email=%s", safe_log_identifier(payload.email.lower(), prefix="email"))
        raise ApiError(status_code=401, code="NO_AUTH", message=INVALID_CREDENTIALS) from exc

    logger.info("auth.login_succeeded user_id=%s", safe_log_identifier(session.user.id, prefix="uid"))
    return LoginEnvelope(data=session)


@router.get("/me", response_model=CurrentUserEnvelope, responses={401: {"model": ErrorResponse}})
async def get_current_user(
    user: Annotated[AuthenticatedUser, Depends(get_authenticated_user)],
) -> CurrentUserEnvelope:
    return CurrentUserEnvelope(data=user)
