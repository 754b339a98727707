"""Mock auth verifier for local development and tests."""

from __future__ import annotations

from dataclasses import dataclass
from secrets import compare_digest

from portfolio.adapters.auth.base import AuthVerificationError, TokenVerifier
from portfolio.schemas.auth import AuthenticatedUser, AuthSession, UserRole


@dataclass(frozen=True, slots=True)
class MockAccount:
    password: str
    user_id: str
    role: UserRole = UserRole.EDITOR


class MockTokenVerifier(TokenVerifier):
    """Accepts deterministic test tokens only.

    Expected token format:
    - ``test:<user_id>``
    - ``test:<user_id>:<role>``
    - ``test:<user_id>:<role>:<email>``
    """

    def __init__(self, accounts: dict[str, MockAccount] | None = None) -> None:
        self._accounts = dict(accounts or {})

    def verify_token(self, token: str) -> AuthenticatedUser:
        parts = token.split(":")
        if len(parts) not in (2, 3, 4) or parts[0] != "test":
            raise AuthVerificationError("Invalid bearer token")

        user_id = parts[1].strip()
        role = parts[2].strip() if len(parts) >= 3 else UserRole.EDITOR.value
        email = parts[3].strip() if len(parts) == 4 else f"{user_id}@example.test"

        if not user_id:
            raise AuthVerificationError("Bearer token missing user identity")
        try:
            resolved_role = UserRole(role)
        except ValueError as exc:
            raise AuthVerificationError("Bearer token has unknown role") from exc

        return AuthenticatedUser(id=user_id, email=email, role=resolved_role)

    def sign_in(self, email: str, password: str) -> AuthSession:
        account = self._accounts.get(email.lower())
        if account is None or not compare_digest(account.password, password):
            raise AuthVerificationError("Invalid credentials")

        user = AuthenticatedUser(id=account.user_id, email=email.lower(), role=account.role)
        token = f"test:{user.id}:{user.role.value}:{user.email}"
        return AuthSession(access_token=token, user=user)


__all__ = ["MockAccount", "MockTokenVerifier"]
