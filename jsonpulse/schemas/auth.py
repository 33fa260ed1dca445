"""Authentication schemas."""

from pydantic import EmailStr, Field

from jsonpulse.models.enums import UserType
from jsonpulse.schemas.base import CamelModel


class UserSignup(CamelModel):
    """User registration request."""

    first_name: str = Field(..., min_length=1, max_length=255)
    last_name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr = Field(..., max_length=255)
    mobile: str | None = Field(None, max_length=50)
    password: str = Field(..., min_length=1, max_length=128)
    type: UserType = UserType.USER


class UserLogin(CamelModel):
    """User login request."""

    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=1, max_length=128)


class Identity(CamelModel):
    """Identity carried inside the session token."""

    id: int
    email: str
    first_name: str
    last_name: str
    type: UserType


class UserResponse(Identity):
    """Public user projection; the password hash is never included."""

    api_key: str | None = None


class AuthResponse(CamelModel):
    """Signup/login response. The token itself travels in the session cookie."""

    success: bool = True
    user: UserResponse


class MeResponse(CamelModel):
    """Current identity as decoded from the session token."""

    user: Identity
