"""Schemas for the public, key-addressed API."""

from datetime import datetime

from jsonpulse.schemas.base import CamelModel

USAGE_HINT = "Use /api/data/key/{apiKey}/{fileName} to access specific file content"


class PublicFileEntry(CamelModel):
    file_name: str
    url: str
    views: int
    created_at: datetime
    updated_at: datetime


class PublicFileListing(CamelModel):
    """Files reachable with one API key."""

    api_key: str
    file_count: int
    files: list[PublicFileEntry]
    message: str = USAGE_HINT
