"""Authentication provider interfaces."""

from abc import ABC, abstractmethod

from portfolio.schemas.auth import AuthenticatedUser, AuthSession


class AuthVerificationError(Exception):
    """Raised when a token or credential pair cannot be verified."""


class TokenVerifier(ABC):
    """Provider-neutral token verification interface."""

    @abstractmethod
    def verify_token(self, token: str) -> AuthenticatedUser:
        """Verify token and return the normalized caller identity."""

    @abstractmethod
    def sign_in(self, email: str, password: str) -> AuthSession:
        """Exchange credentials for a bearer session."""


__all__ = ["AuthVerificationError", "TokenVerifier"]
