from abc import ABC, abstractmethod
from typing import Optional


class VisionLLMStrategy(ABC):
    """Abstract base class for vision-capable LLM providers."""

    @abstractmethod
    def generate_from_image(self, image_data: str, prompt: str) -> Optional[str]:
        """Send one image plus a prompt; return the raw text of the reply."""

    @abstractmethod
    def is_available(self) -> bool:
        """Check if LLM is available."""
