"""Dependency injection for FastAPI."""

from typing import Optional

from api.config import Settings, get_settings
from api.services.caption_service import CaptionService
from api.services.upload_service import UploadService
from backend.llms.llm_strategy import VisionLLMStrategy
from backend.llms.openai_llm import OpenAIVisionLLM

# Singleton instances
_vision_llm: Optional[VisionLLMStrategy] = None
_caption_service: Optional[CaptionService] = None
_upload_service: Optional[UploadService] = None


def get_vision_llm(settings: Settings = None) -> VisionLLMStrategy:
    """Get or create the OpenAI vision LLM.

    Raises:
        ConfigurationError: If no API key is configured (not cached, so a
            key added later is picked up after a settings reload)
    """
    global _vision_llm
    if _vision_llm is None:
        settings = settings or get_settings()
        _vision_llm = OpenAIVisionLLM(
            api_key=settings.openai_api_key,
            model_version=settings.caption_model,
            max_tokens=settings.caption_max_tokens,
            detail_mode=settings.caption_image_detail,
        )
    return _vision_llm


def get_caption_service() -> CaptionService:
    """Get or create CaptionService singleton."""
    global _caption_service
    if _caption_service is None:
        _caption_service = CaptionService(llm_factory=get_vision_llm)
    return _caption_service


def get_upload_service() -> UploadService:
    """Get or create UploadService singleton."""
    global _upload_service
    if _upload_service is None:
        _upload_service = UploadService(settings=get_settings())
    return _upload_service
