"""Authentication schemas."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class UserRole(str, Enum):
    ADMIN = "admin"
    EDITOR = "editor"


class AuthenticatedUser(BaseModel):
    """Caller identity resolved by the auth gate for a single request."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    email: str = ""
    role: UserRole = UserRole.EDITOR


class AuthSession(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: AuthenticatedUser


class LoginRequest(BaseModel):
    email: str = Field(min_length=3, pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    password: str = Field(min_length=1)


class CurrentUserEnvelope(BaseModel):
    success: bool = True
    data: AuthenticatedUser


class LoginEnvelope(BaseModel):
    success: bool = True
    data: AuthSession
