"""
Per-language caption orchestration.

One generation action = one model call per selected language, run strictly
in sequence. The first failure aborts the action: languages already
completed are discarded and later languages are never attempted.
"""

import logging
from typing import Iterable, List, Optional, Sequence

from backend.errors import CaptionServiceError, ValidationError
from backend.llms.llm_strategy import VisionLLMStrategy
from backend.models import (
    CaptionRecord,
    GenerationRequest,
    ImageInput,
    Language,
    LanguageCaptionMap,
)
from backend.prompts import PromptBuilder
from backend.vision.response_normalizer import normalize_caption_response

logger = logging.getLogger(__name__)


class CaptionOrchestrator:
    """Drive prompt building, model invocation and normalization."""

    def __init__(self, llm: VisionLLMStrategy):
        self.llm = llm

    @staticmethod
    def select_languages(languages: Iterable[str]) -> List[Language]:
        """Parse language labels, collapsing duplicates but keeping order.

        Raises:
            ValidationError: If a label is unsupported or none are given
        """
        selected = list(dict.fromkeys(Language.parse(label) for label in languages))
        if not selected:
            raise ValidationError("At least one language must be selected")
        return selected

    @classmethod
    def validate_action(
        cls, images: Sequence[ImageInput], languages: Iterable[str]
    ) -> List[Language]:
        """Check a generation action's input without touching the model.

        Returns:
            The selected languages, deduplicated, in selection order

        Raises:
            ValidationError: If there is no image, no usable image data,
                or no supported language
        """
        if not images:
            raise ValidationError("At least one image is required")
        selected = cls.select_languages(languages)
        GenerationRequest(
            image_data=images[0].image_data, language=selected[0].value
        ).validate()
        return selected

    def generate_captions(self, request: GenerationRequest) -> List[CaptionRecord]:
        """Run one (image, language) request through the pipeline.

        Raises:
            ValidationError: If the request has no image data
            InvocationError: If the model call fails
        """
        request.validate()
        prompt = PromptBuilder.build_caption_prompt(
            language=request.language,
            image_count=request.image_count,
            image_notes=request.notes,
            tone=request.tone,
        )
        raw = self.llm.generate_from_image(request.image_data, prompt)
        captions = normalize_caption_response(raw)
        logger.info(f"Generated {len(captions)} caption(s) in {request.language}")
        return captions

    def generate_for_languages(
        self,
        images: Sequence[ImageInput],
        languages: Iterable[str],
        tone: Optional[str] = None,
    ) -> LanguageCaptionMap:
        """
        Generate captions for every selected language.

        The first image is sent for every language; notes from all images
        are combined into the prompt.

        Args:
            images: Uploaded images in upload order
            languages: Language labels in selection order
            tone: Overall tone for the post

        Returns:
            Mapping of language label to captions, in selection order

        Raises:
            ValidationError: Before any model call, for bad input
            CaptionServiceError: From the first failing language; carries
                that language and the underlying message as details
        """
        selected = self.validate_action(images, languages)
        first_image = images[0]
        notes = PromptBuilder.combine_image_notes(image.notes for image in images)

        results: LanguageCaptionMap = {}
        for language in selected:
            logger.info(f"Generating captions for language: {language.value}")
            request = GenerationRequest(
                image_data=first_image.image_data,
                language=language.value,
                notes=notes,
                tone=tone,
                image_count=len(images),
            )
            try:
                results[language.value] = self.generate_captions(request)
            except CaptionServiceError as e:
                logger.error(
                    f"Caption generation failed for {language.value} after "
                    f"{len(results)} completed language(s): {e}"
                )
                raise type(e)(
                    f"Failed to generate captions for {language.value}",
                    details=e.details or e.message,
                    language=language.value,
                ) from e

        return results
