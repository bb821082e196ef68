"""
Shared domain models for caption generation.

Frozen dataclasses keep records immutable once normalized; the same shapes
are used by the orchestrator, the API layer and the HTTP client.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

from backend.errors import ValidationError
from config.constants import SUPPORTED_LANGUAGES


class Language(str, Enum):
    """Target languages a caption can be requested in."""

    ENGLISH = "English"
    TRADITIONAL_CHINESE = "Traditional Chinese"
    JAPANESE = "Japanese"
    KOREAN = "Korean"
    SPANISH = "Spanish"
    FRENCH = "French"

    @property
    def display_name(self) -> str:
        return SUPPORTED_LANGUAGES[self.value][0]

    @property
    def flag(self) -> str:
        return SUPPORTED_LANGUAGES[self.value][1]

    @classmethod
    def parse(cls, label: str) -> "Language":
        """Resolve a language label, ignoring case and surrounding spaces.

        Raises:
            ValidationError: If the label is not a supported language
        """
        wanted = (label or "").strip().lower()
        for language in cls:
            if language.value.lower() == wanted:
                return language
        raise ValidationError(
            f"Unsupported language: {label!r}",
            details=f"Supported languages: {', '.join(lang.value for lang in cls)}",
        )


@dataclass(frozen=True)
class CaptionRecord:
    """One generated caption with its hashtags.

    'caption' is never empty after normalization; 'hashtags' may be.
    """

    caption: str
    hashtags: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {"caption": self.caption, "hashtags": self.hashtags}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CaptionRecord":
        return cls(
            caption=str(data.get("caption", "")),
            hashtags=str(data.get("hashtags") or ""),
        )


@dataclass(frozen=True)
class ImageInput:
    """An uploaded image (inline encoded) with the user's optional note."""

    image_data: str
    notes: Optional[str] = None


@dataclass(frozen=True)
class GenerationRequest:
    """Inputs for a single (image, language) model call.

    Built per language at request time and discarded after use.
    """

    image_data: str
    language: str
    notes: Optional[str] = None
    tone: Optional[str] = None
    image_count: int = 1

    def validate(self) -> None:
        """Reject requests that must not reach the model.

        Raises:
            ValidationError: If image data is missing
        """
        if not self.image_data or not self.image_data.strip():
            raise ValidationError("Image base64 is required")


# language label -> captions, in the order languages were requested
LanguageCaptionMap = Dict[str, List[CaptionRecord]]
