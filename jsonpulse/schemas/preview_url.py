"""Preview URL schemas."""

from pydantic import Field

from jsonpulse.schemas.base import CamelModel


class PreviewUrlUpdate(CamelModel):
    """Save or clear the preview URL. Empty or null clears it."""

    preview_url: str | None = Field(None, max_length=2048)


class PreviewUrlResponse(CamelModel):
    preview_url: str | None


class PreviewUrlSaveResponse(PreviewUrlResponse):
    success: bool = True
