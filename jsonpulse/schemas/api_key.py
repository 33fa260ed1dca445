"""API key schemas."""

from jsonpulse.schemas.base import CamelModel


class ApiKeyResponse(CamelModel):
    api_key: str | None


class ApiKeyGenerateResponse(CamelModel):
    success: bool = True
    api_key: str
