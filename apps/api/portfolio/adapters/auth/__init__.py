"""Auth verifier adapters."""

from .base import AuthVerificationError, TokenVerifier
from .mock_auth import MockAccount, MockTokenVerifier
from .supabase_auth import SupabaseTokenVerifier

__all__ = [
    "AuthVerificationError",
    "MockAccount",
    "MockTokenVerifier",
    "SupabaseTokenVerifier",
    "TokenVerifier",
]
