"""
API Models - Pydantic request/response models.
"""

from api.models.requests import (
    GenerateCaptionsRequest,
    GenerateMultilingualRequest,
    ImagePayload,
)
from api.models.responses import (
    CaptionItem,
    CaptionResponse,
    ErrorResponse,
    HealthResponse,
    MultilingualCaptionResponse,
    UploadResponse,
)

__all__ = [
    "GenerateCaptionsRequest",
    "GenerateMultilingualRequest",
    "ImagePayload",
    "CaptionItem",
    "CaptionResponse",
    "ErrorResponse",
    "HealthResponse",
    "MultilingualCaptionResponse",
    "UploadResponse",
]
