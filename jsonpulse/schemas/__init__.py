"""Pydantic schemas for API requests and responses."""

from jsonpulse.schemas.api_key import ApiKeyGenerateResponse, ApiKeyResponse
from jsonpulse.schemas.auth import (
    AuthResponse,
    Identity,
    MeResponse,
    UserLogin,
    UserResponse,
    UserSignup,
)
from jsonpulse.schemas.base import MessageResponse
from jsonpulse.schemas.json_file import (
    JsonFileDetail,
    JsonFileListResponse,
    JsonFileMeta,
    JsonFileSave,
    JsonFileSaveResponse,
    JsonFileSummary,
)
from jsonpulse.schemas.preview_url import (
    PreviewUrlResponse,
    PreviewUrlSaveResponse,
    PreviewUrlUpdate,
)
from jsonpulse.schemas.public_data import PublicFileEntry, PublicFileListing

__all__ = [
    "UserSignup",
    "UserLogin",
    "Identity",
    "UserResponse",
    "AuthResponse",
    "MeResponse",
    "ApiKeyResponse",
    "ApiKeyGenerateResponse",
    "MessageResponse",
    "JsonFileSave",
    "JsonFileMeta",
    "JsonFileSummary",
    "JsonFileDetail",
    "JsonFileListResponse",
    "JsonFileSaveResponse",
    "PreviewUrlUpdate",
    "PreviewUrlResponse",
    "PreviewUrlSaveResponse",
    "PublicFileEntry",
    "PublicFileListing",
]
