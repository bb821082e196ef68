"""
Request Models - Pydantic models for API requests.

Wire names follow the web client (camelCase); Python code uses snake_case.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from config.constants import DEFAULT_LANGUAGE


class GenerateCaptionsRequest(BaseModel):
    """Single-language caption request for one inline image."""

    model_config = ConfigDict(populate_by_name=True)

    # Optional here so a missing image is reported as 400, not schema error
    image_base64: Optional[str] = Field(default=None, alias="imageBase64")
    user_notes: Optional[str] = Field(default=None, alias="userNotes")
    tone: Optional[str] = None
    language: str = DEFAULT_LANGUAGE


class ImagePayload(BaseModel):
    """One image of a multi-image post."""

    model_config = ConfigDict(populate_by_name=True)

    image_base64: Optional[str] = Field(default=None, alias="imageBase64")
    notes: Optional[str] = None


class GenerateMultilingualRequest(BaseModel):
    """Generation action spanning every selected language."""

    images: List[ImagePayload] = []
    tone: Optional[str] = None
    languages: List[str] = [DEFAULT_LANGUAGE]
