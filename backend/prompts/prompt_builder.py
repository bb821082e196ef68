"""
Prompt Builder - constructs the caption instruction sent with each image.

Pure functions of their inputs: no I/O, no model calls.
"""

import logging
from typing import Iterable, Optional

from config.constants import (
    CAPTION_COUNT,
    CAPTION_MAX_CHARS,
    DEFAULT_TONE,
    NO_NOTES_PLACEHOLDER,
    SCRIPT_VARIANT_NOTES,
)

logger = logging.getLogger(__name__)

# Multi-caption social media post for one target language
CAPTION_TEMPLATE = """Generate exactly {caption_count} engaging social media captions in {language} language.

Context:
- Total images in post: {image_count}
- Image descriptions: {image_notes}
- Overall tone: {tone}

Requirements:
- Write ONLY in {language} language{script_note}
- Make captions suitable for Instagram/social media
- Include relevant emojis
- Include relevant hashtags in {language}{hashtag_note}
- Keep each caption under {max_chars} characters
- Make them engaging and authentic, each unique in style

Return the response as a JSON array of objects with 'caption' and 'hashtags' fields."""


class PromptBuilder:
    """
    Helper class for building caption prompts.

    Provides static methods so callers never need an instance.
    """

    @staticmethod
    def combine_image_notes(notes: Iterable[Optional[str]]) -> str:
        """
        Join per-image notes into one description line.

        Each note is prefixed with its 1-based image position; images with
        no note keep their position but contribute nothing.

        Args:
            notes: One entry per image, in upload order

        Returns:
            e.g. "Image 1: beach. Image 3: sunset", or "" if no notes
        """
        parts = [
            f"Image {index}: {note.strip()}"
            for index, note in enumerate(notes, start=1)
            if note and note.strip()
        ]
        return ". ".join(parts)

    @staticmethod
    def build_caption_prompt(
        language: str,
        image_count: int = 1,
        image_notes: Optional[str] = None,
        tone: Optional[str] = None,
        template: Optional[str] = None,
    ) -> str:
        """
        Build the caption instruction for one target language.

        Args:
            language: Target language label, e.g. "Japanese"
            image_count: Number of images in the post
            image_notes: Combined notes (see combine_image_notes)
            tone: Overall tone; defaults when blank
            template: Optional override of CAPTION_TEMPLATE (str.format fields)

        Returns:
            Rendered prompt string

        Raises:
            KeyError: If the template uses a field that is not provided
        """
        template = template or CAPTION_TEMPLATE
        script_note, hashtag_note = SCRIPT_VARIANT_NOTES.get(language, ("", ""))

        prompt = template.format(
            caption_count=CAPTION_COUNT,
            language=language,
            image_count=image_count,
            image_notes=(image_notes or "").strip() or NO_NOTES_PLACEHOLDER,
            tone=(tone or "").strip() or DEFAULT_TONE,
            script_note=f" ({script_note})" if script_note else "",
            hashtag_note=f" ({hashtag_note})" if hashtag_note else "",
            max_chars=CAPTION_MAX_CHARS,
        )
        logger.debug(f"Built caption prompt for {language}: {prompt[:100]}...")
        return prompt
