"""JSON file schemas."""

from datetime import datetime
from typing import Any

from pydantic import Field

from jsonpulse.schemas.base import CamelModel


class JsonFileSave(CamelModel):
    """Create-or-update request. ``content`` is JSON text, validated by the service."""

    file_name: str = Field(..., min_length=1, max_length=255, pattern=r"^[^/]+$")
    content: str = Field(..., min_length=1)


class JsonFileMeta(CamelModel):
    """Saved file metadata."""

    id: int
    file_name: str
    created_at: datetime
    updated_at: datetime


class JsonFileSummary(JsonFileMeta):
    """List entry (content omitted)."""

    views: int


class JsonFileDetail(JsonFileSummary):
    """Single file with its parsed content."""

    content: Any


class JsonFileListResponse(CamelModel):
    files: list[JsonFileSummary]


class JsonFileSaveResponse(CamelModel):
    success: bool = True
    file: JsonFileMeta
