"""Private, session-authenticated file endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from jsonpulse.api.dependencies import get_json_file_service
from jsonpulse.schemas.base import MessageResponse
from jsonpulse.schemas.json_file import (
    JsonFileDetail,
    JsonFileListResponse,
    JsonFileMeta,
    JsonFileSave,
    JsonFileSaveResponse,
    JsonFileSummary,
)
from jsonpulse.services.json_files import JsonFileService, parse_json_content

router = APIRouter(prefix="/api/files", tags=["files"])


@router.get("", response_model=JsonFileListResponse)
def list_files(
    service: Annotated[JsonFileService, Depends(get_json_file_service)],
):
    """List the caller's files, newest first, without content."""
    files = service.list_files()
    return JsonFileListResponse(files=[JsonFileSummary.model_validate(f) for f in files])


@router.post("", response_model=JsonFileSaveResponse)
def save_file(
    file_data: JsonFileSave,
    service: Annotated[JsonFileService, Depends(get_json_file_service)],
):
    """Create a file, or update the caller's file with the same name in place."""
    file = service.save(file_data.file_name, file_data.content)
    return JsonFileSaveResponse(file=JsonFileMeta.model_validate(file))


@router.get("/{file_name}", response_model=JsonFileDetail)
def get_file(
    file_name: str,
    service: Annotated[JsonFileService, Depends(get_json_file_service)],
):
    """Get one of the caller's files with its parsed content."""
    file = service.get(file_name)
    return JsonFileDetail(
        id=file.id,
        file_name=file.file_name,
        content=parse_json_content(file.content),
        created_at=file.created_at,
        updated_at=file.updated_at,
        views=file.views,
    )


@router.delete("/{file_name}", response_model=MessageResponse)
def delete_file(
    file_name: str,
    service: Annotated[JsonFileService, Depends(get_json_file_service)],
):
    """Permanently delete one of the caller's files."""
    service.delete(file_name)
    return MessageResponse(message=f'File "{file_name}" deleted successfully')
