"""Public endpoints addressed by API key."""

from typing import Annotated
from urllib.parse import quote

from fastapi import APIRouter, Depends, Request

from jsonpulse.api.dependencies import get_public_data_service
from jsonpulse.schemas.public_data import PublicFileEntry, PublicFileListing
from jsonpulse.services.json_files import parse_json_content
from jsonpulse.services.public_data import PublicDataService

router = APIRouter(prefix="/api/data/key", tags=["public-data"])


def public_file_url(request: Request, api_key: str, file_name: str) -> str:
    """Absolute URL of a file's public endpoint."""
    base = str(request.base_url).rstrip("/")
    return f"{base}{router.prefix}/{quote(api_key, safe='')}/{quote(file_name, safe='')}"


@router.get("/{api_key}", response_model=PublicFileListing)
def list_public_files(
    api_key: str,
    request: Request,
    service: Annotated[PublicDataService, Depends(get_public_data_service)],
):
    """List every file reachable with this key."""
    files = service.list_files(api_key)
    return PublicFileListing(
        api_key=api_key,
        file_count=len(files),
        files=[
            PublicFileEntry(
                file_name=f.file_name,
                url=public_file_url(request, api_key, f.file_name),
                views=f.views,
                created_at=f.created_at,
                updated_at=f.updated_at,
            )
            for f in files
        ],
    )


@router.get("/{api_key}/{file_name}")
def get_public_file(
    api_key: str,
    file_name: str,
    service: Annotated[PublicDataService, Depends(get_public_data_service)],
):
    """Return the raw JSON document and count the view."""
    file = service.resolve(api_key, file_name)
    return parse_json_content(file.content)
