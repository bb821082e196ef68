"""Caption service - maps API requests onto the caption pipeline."""

import logging
from typing import Callable

from api.models.requests import GenerateCaptionsRequest, GenerateMultilingualRequest
from api.models.responses import (
    CaptionItem,
    CaptionResponse,
    MultilingualCaptionResponse,
)
from backend.llms.llm_strategy import VisionLLMStrategy
from backend.models import GenerationRequest, ImageInput, Language
from backend.vision import CaptionOrchestrator

logger = logging.getLogger(__name__)


class CaptionService:
    """Service for generating captions from inline images.

    The LLM is resolved per request, after input validation, so a missing
    API key is reported only for requests that would otherwise be sent.
    """

    def __init__(self, llm_factory: Callable[[], VisionLLMStrategy]):
        self._llm_factory = llm_factory

    def _orchestrator(self) -> CaptionOrchestrator:
        return CaptionOrchestrator(llm=self._llm_factory())

    def generate_captions(self, request: GenerateCaptionsRequest) -> CaptionResponse:
        """Generate captions in one language.

        Raises:
            ValidationError: Missing image or unsupported language
            ConfigurationError: OpenAI API key not configured
            InvocationError: Model call failed
        """
        image_data = request.image_base64 or ""
        GenerationRequest(image_data=image_data, language=request.language).validate()
        language = Language.parse(request.language)

        logger.info(
            f"Caption request: language={language.value}, "
            f"image ~{len(image_data) // 1024} KB, "
            f"notes={len(request.user_notes or '')} chars"
        )
        generation = GenerationRequest(
            image_data=image_data,
            language=language.value,
            notes=request.user_notes,
            tone=request.tone,
        )
        captions = self._orchestrator().generate_captions(generation)
        return CaptionResponse(captions=[CaptionItem.from_record(c) for c in captions])

    def generate_multilingual(
        self, request: GenerateMultilingualRequest
    ) -> MultilingualCaptionResponse:
        """Run one generation action across every selected language.

        All-or-nothing: any failing language fails the whole action.
        """
        images = [
            ImageInput(image_data=image.image_base64 or "", notes=image.notes)
            for image in request.images
        ]
        selected = CaptionOrchestrator.validate_action(images, request.languages)

        logger.info(
            f"Multilingual caption request: {len(images)} image(s), "
            f"languages={[language.value for language in selected]}"
        )
        results = self._orchestrator().generate_for_languages(
            images=images,
            languages=[language.value for language in selected],
            tone=request.tone,
        )
        return MultilingualCaptionResponse(
            captions={
                language: [CaptionItem.from_record(c) for c in captions]
                for language, captions in results.items()
            }
        )
