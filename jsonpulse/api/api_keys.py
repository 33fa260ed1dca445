"""API key endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from jsonpulse.api.dependencies import get_current_user
from jsonpulse.database import get_db
from jsonpulse.models.user import User
from jsonpulse.schemas.api_key import ApiKeyGenerateResponse, ApiKeyResponse
from jsonpulse.schemas.base import MessageResponse
from jsonpulse.services.api_keys import delete_api_key, get_api_key, rotate_api_key

router = APIRouter(prefix="/api/api-key", tags=["api-key"])


@router.get("", response_model=ApiKeyResponse)
def read_api_key(
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Get the caller's current API key, or null if none was generated."""
    return ApiKeyResponse(api_key=get_api_key(current_user))


@router.post("/generate", response_model=ApiKeyGenerateResponse)
def generate_api_key(
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Generate a new API key, replacing any existing one."""
    return ApiKeyGenerateResponse(api_key=rotate_api_key(db, current_user))


@router.delete("", response_model=MessageResponse)
def remove_api_key(
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Delete the caller's API key; public URLs stop working immediately."""
    delete_api_key(db, current_user)
    return MessageResponse(message="API key deleted successfully")
