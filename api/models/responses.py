"""
Response Models - Pydantic models for API responses.
"""

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from backend.models import CaptionRecord


class CaptionItem(BaseModel):
    """Caption record as sent over the wire."""

    caption: str
    hashtags: str = ""

    @classmethod
    def from_record(cls, record: CaptionRecord) -> "CaptionItem":
        """Create from internal CaptionRecord model."""
        return cls(caption=record.caption, hashtags=record.hashtags)


class CaptionResponse(BaseModel):
    """Captions for one language."""

    success: bool = True
    captions: List[CaptionItem]


class MultilingualCaptionResponse(BaseModel):
    """Captions keyed by language, in the order languages were requested."""

    success: bool = True
    captions: Dict[str, List[CaptionItem]]


class ErrorResponse(BaseModel):
    """Error body returned with every non-2xx status."""

    error: str
    details: Optional[str] = None


class UploadResponse(BaseModel):
    """Stored upload metadata."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    filename: str
    original_name: str = Field(alias="originalName")
    size: int
    url: str


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    timestamp: datetime
    openai_configured: bool
