"""FastAPI dependencies for authentication and database."""

from typing import Annotated

from fastapi import Depends, HTTPException, Response, status
from fastapi.security import APIKeyCookie
from sqlalchemy.orm import Session

from jsonpulse.config import get_settings
from jsonpulse.database import get_db
from jsonpulse.models.user import User
from jsonpulse.schemas.auth import Identity
from jsonpulse.services.auth import decode_access_token, get_user_by_id
from jsonpulse.services.json_files import JsonFileService
from jsonpulse.services.public_data import PublicDataService

settings = get_settings()

session_cookie = APIKeyCookie(name=settings.auth_cookie_name, auto_error=False)


def set_session_cookie(response: Response, token: str) -> None:
    """Attach the signed session token as an HTTP-only cookie."""
    response.set_cookie(
        key=settings.auth_cookie_name,
        value=token,
        max_age=settings.jwt_expiration_minutes * 60,
        path="/",
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
    )


def clear_session_cookie(response: Response) -> None:
    """Expire the session cookie on the client."""
    response.delete_cookie(
        key=settings.auth_cookie_name,
        path="/",
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
    )


def get_current_identity(
    token: Annotated[str | None, Depends(session_cookie)],
) -> Identity:
    """Identity from the session cookie, trusted without a database lookup."""
    if not token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")

    identity = decode_access_token(token)
    if identity is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")

    return identity


def get_current_user(
    identity: Annotated[Identity, Depends(get_current_identity)],
    db: Annotated[Session, Depends(get_db)],
) -> User:
    """Load the caller's row, for endpoints that need fresh or mutable user data."""
    user = get_user_by_id(db, identity.id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User not found")
    return user


def get_json_file_service(
    identity: Annotated[Identity, Depends(get_current_identity)],
    db: Annotated[Session, Depends(get_db)],
) -> JsonFileService:
    """Get file service scoped to the caller."""
    return JsonFileService(db, identity.id)


def get_public_data_service(
    db: Annotated[Session, Depends(get_db)],
) -> PublicDataService:
    """Get public data service for key-addressed reads."""
    return PublicDataService(db)
