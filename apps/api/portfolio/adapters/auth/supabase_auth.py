"""Supabase Auth token verifier adapter."""

from __future__ import annotations

import logging

from supabase import Client

from portfolio.adapters.auth.base import AuthVerificationError, TokenVerifier
from portfolio.schemas.auth import AuthenticatedUser, AuthSession, UserRole

logger = logging.getLogger(__name__)


class SupabaseTokenVerifier(TokenVerifier):
    """Verifies Supabase access tokens and resolves the caller's profile role.

    ``auth_client`` performs token and password checks; ``data_client`` reads
    the profiles table. Keeping them apart stops a password sign-in from
    replacing the service credentials used for table reads.
    """

    def __init__(self, auth_client: Client, data_client: Client, profiles_table: str = "user_profiles") -> None:
        self._auth_client = auth_client
        self._data_client = data_client
        self._profiles_table = profiles_table

    def verify_token(self, token: str) -> AuthenticatedUser:
        try:
            response = self._auth_client.auth.get_user(token)
        except Exception as exc:  # pragma: no cover - provider exception surface
            raise AuthVerificationError("Invalid bearer token") from exc

        user = getattr(response, "user", None)
        if user is None or not str(getattr(user, "id", "") or "").strip():
            raise AuthVerificationError("Bearer token missing user identity")

        user_id = str(user.id)
        return AuthenticatedUser(id=user_id, email=user.email or "", role=self._resolve_role(user_id))

    def sign_in(self, email: str, password: str) -> AuthSession:
        try:
            response = self._auth_client.auth.sign_in_with_password({"email": email, "password": password})
        except Exception as exc:  # pragma: no cover - provider exception surface
            raise AuthVerificationError("Invalid credentials") from exc

        if response.user is None or response.session is None:
            raise AuthVerificationError("Login failed")

        user_id = str(response.user.id)
        user = AuthenticatedUser(id=user_id, email=response.user.email or email, role=self._resolve_role(user_id))
        return AuthSession(access_token=response.session.access_token, user=user)

    def _resolve_role(self, user_id: str) -> UserRole:
        try:
            result = (
                self._data_client.table(self._profiles_table)
                .select("role")
                .eq("id", user_id)
                .limit(1)
                .execute()
            )
        except Exception as exc:  # pragma: no cover - provider exception surface
            logger.warning("auth.profile_lookup_failed table=%s error=%s", self._profiles_table, type(exc).__name__)
            return UserRole.EDITOR

        rows = result.data or []
        if not rows:
            return UserRole.EDITOR
        try:
            return UserRole(rows[0].get("role"))
        except ValueError:
            return UserRole.EDITOR


__all__ = ["SupabaseTokenVerifier"]
