"""Admin access rules applied by the auth gate."""

from enum import Enum

from portfolio.errors import ApiError
from portfolio.schemas.auth import AuthenticatedUser, UserRole

AUTHENTICATION_REQUIRED = "Authentication required"
INSUFFICIENT_ROLE = "Insufficient role for this operation"


class GateState(str, Enum):
    UNVERIFIED = "UNVERIFIED"
    AUTHENTICATED = "AUTHENTICATED"
    REJECTED = "REJECTED"


# Roles each role may act as.
_ROLE_GRANTS: dict[UserRole, set[UserRole]] = {
    UserRole.ADMIN: {UserRole.ADMIN, UserRole.EDITOR},
    UserRole.EDITOR: {UserRole.EDITOR},
}


def role_satisfies(actual: UserRole, required: UserRole) -> bool:
    return required in _ROLE_GRANTS.get(actual, set())


def unauthenticated_error() -> ApiError:
    return ApiError(
        status_code=401,
        code="NO_AUTH",
        message=AUTHENTICATION_REQUIRED,
        headers={"WWW-Authenticate": "Bearer"},
    )


def ensure_role(user: AuthenticatedUser, required: UserRole) -> None:
    """Reject an authenticated caller whose role does not cover ``required``."""
    if not role_satisfies(user.role, required):
        raise ApiError(
            status_code=403,
            code="INSUFFICIENT_ROLE",
            message=INSUFFICIENT_ROLE,
            details={"required_role": required.value, "role": user.role.value},
        )
