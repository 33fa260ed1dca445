"""Preview URL preference endpoints."""

from typing import Annotated
from urllib.parse import urlparse

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from jsonpulse.api.dependencies import get_current_user
from jsonpulse.database import get_db
from jsonpulse.exceptions import InvalidFormatError
from jsonpulse.models.user import User
from jsonpulse.schemas.preview_url import (
    PreviewUrlResponse,
    PreviewUrlSaveResponse,
    PreviewUrlUpdate,
)

router = APIRouter(prefix="/api/preview-url", tags=["preview-url"])


def is_valid_url(url: str) -> bool:
    """Absolute URL with a scheme and a host."""
    try:
        parsed = urlparse(url)
    except ValueError:
        return False
    return bool(parsed.scheme and parsed.netloc)


@router.get("", response_model=PreviewUrlResponse)
def get_preview_url(
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Get the caller's preview URL, or null if none is set."""
    return PreviewUrlResponse(preview_url=current_user.preview_url)


@router.post("", response_model=PreviewUrlSaveResponse)
def save_preview_url(
    data: PreviewUrlUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Save the preview URL; an empty value clears it."""
    preview_url = data.preview_url or None
    if preview_url and not is_valid_url(preview_url):
        raise InvalidFormatError("Invalid URL format")

    current_user.preview_url = preview_url
    db.commit()
    return PreviewUrlSaveResponse(preview_url=preview_url)
