from abc import abstractmethod
from typing import Optional

from backend.errors import ConfigurationError
from backend.llms.llm_strategy import VisionLLMStrategy


class OnlineVisionLLM(VisionLLMStrategy):
    """Base class for cloud-hosted vision LLM providers."""

    def __init__(self, provider_name: str, api_key: Optional[str], model_version: str):
        """
        Initialize online LLM adapter.

        Args:
            provider_name: Display name of provider ("OpenAI")
            api_key: API key for authentication
            model_version: Model identifier sent with every call

        Raises:
            ConfigurationError: If the API key is missing
        """
        if not api_key:
            raise ConfigurationError(f"{provider_name} API key not configured")

        self.provider_name = provider_name
        self.api_key = api_key
        self.model_version = model_version
        self._client = None

    @abstractmethod
    def _initialize_client(self):
        """Initialize provider-specific client. Must be implemented by subclasses."""
        raise NotImplementedError

    def is_available(self) -> bool:
        """Check if API key is configured."""
        return bool(self.api_key and self._client)
