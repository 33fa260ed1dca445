"""Authentication API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from jsonpulse.api.dependencies import (
    clear_session_cookie,
    get_current_identity,
    set_session_cookie,
)
from jsonpulse.database import get_db
from jsonpulse.schemas.auth import (
    AuthResponse,
    Identity,
    MeResponse,
    UserLogin,
    UserResponse,
    UserSignup,
)
from jsonpulse.schemas.base import MessageResponse
from jsonpulse.services.auth import (
    authenticate_user,
    create_access_token,
    create_user,
    identity_for,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/signup", response_model=AuthResponse)
def signup(
    user_data: UserSignup,
    response: Response,
    db: Annotated[Session, Depends(get_db)],
):
    """Register a new user and start a session."""
    user = create_user(
        db,
        email=user_data.email,
        password=user_data.password,
        first_name=user_data.first_name,
        last_name=user_data.last_name,
        mobile=user_data.mobile,
        user_type=user_data.type,
    )

    identity = identity_for(user)
    set_session_cookie(response, create_access_token(identity))

    return AuthResponse(user=UserResponse(**identity.model_dump(), api_key=user.api_key))


@router.post("/login", response_model=AuthResponse)
def login(
    credentials: UserLogin,
    response: Response,
    db: Annotated[Session, Depends(get_db)],
):
    """Login with email and password."""
    user = authenticate_user(db, credentials.email, credentials.password)

    if not user:
        logger.warning("Rejected login attempt")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
        )

    identity = identity_for(user)
    set_session_cookie(response, create_access_token(identity))

    return AuthResponse(user=UserResponse(**identity.model_dump(), api_key=user.api_key))


@router.post("/logout", response_model=MessageResponse)
def logout(response: Response):
    """Clear the session cookie."""
    clear_session_cookie(response)
    return MessageResponse(message="Logged out successfully")


@router.get("/me", response_model=MeResponse)
def get_me(
    identity: Annotated[Identity, Depends(get_current_identity)],
):
    """Identity of the current session, as carried by the token."""
    return MeResponse(user=identity)
