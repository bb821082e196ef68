"""
Backend models module.

Exports shared domain models for caption generation.
"""

from backend.models.caption_models import (
    CaptionRecord,
    GenerationRequest,
    ImageInput,
    Language,
    LanguageCaptionMap,
)

__all__ = [
    "CaptionRecord",
    "GenerationRequest",
    "ImageInput",
    "Language",
    "LanguageCaptionMap",
]
