import logging
from typing import List, Optional

from openai import OpenAI, OpenAIError

from backend.errors import InvocationError
from backend.llms.online_llm import OnlineVisionLLM
from backend.utils.image_encoding import ensure_data_url
from config.constants import (
    DEFAULT_IMAGE_DETAIL,
    DEFAULT_VISION_MAX_TOKENS,
    DEFAULT_VISION_MODEL,
)

logger = logging.getLogger(__name__)


class OpenAIVisionLLM(OnlineVisionLLM):
    """OpenAI chat-completions implementation of the vision strategy.

    One attempt per call: failures surface as InvocationError and are
    never retried here.
    """

    def __init__(
        self,
        api_key: Optional[str],
        model_version: str = DEFAULT_VISION_MODEL,
        max_tokens: int = DEFAULT_VISION_MAX_TOKENS,
        detail_mode: str = DEFAULT_IMAGE_DETAIL,
        client: Optional[OpenAI] = None,
    ):
        """
        Initialize OpenAI vision LLM.

        Args:
            api_key: OpenAI API key
            model_version: Vision model name (default: gpt-4o)
            max_tokens: Output token budget per reply
            detail_mode: Image detail level ("low" or "high")
            client: Pre-built SDK client (tests inject a mock here)

        Raises:
            ConfigurationError: If api_key is missing
        """
        super().__init__(
            provider_name="OpenAI",
            api_key=api_key,
            model_version=model_version,
        )
        self.max_tokens = max_tokens
        self.detail_mode = detail_mode

        if client is not None:
            self._client = client
        else:
            self._initialize_client()

        logger.info(
            f"OpenAIVisionLLM initialized: model={model_version}, "
            f"detail={detail_mode}, max_tokens={max_tokens}"
        )

    def _initialize_client(self):
        """Initialize OpenAI client."""
        self._client = OpenAI(api_key=self.api_key)

    def generate_from_image(self, image_data: str, prompt: str) -> Optional[str]:
        """Call the Vision API with one image and return the reply text.

        Raises:
            ValidationError: If image_data is empty
            InvocationError: If the API call fails
        """
        image_url = ensure_data_url(image_data)
        messages = self._build_messages(prompt, image_url)

        logger.info(
            f"Calling OpenAI API with model: {self.model_version} "
            f"(image ~{len(image_url) // 1024} KB)"
        )
        try:
            response = self._client.chat.completions.create(
                model=self.model_version,
                messages=messages,
                max_tokens=self.max_tokens,
            )
        except OpenAIError as e:
            logger.error(f"OpenAI API error: {str(e)}")
            raise InvocationError(details=str(e))

        content = response.choices[0].message.content
        logger.info(f"OpenAI API call successful, response preview: {(content or '')[:100]!r}")
        return content

    def _build_messages(self, prompt: str, image_url: str) -> List[dict]:
        """Build the single user message carrying text + image parts."""
        return [
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": prompt},
                    {
                        "type": "image_url",
                        "image_url": {
                            "url": image_url,
                            "detail": self.detail_mode,
                        },
                    },
                ],
            }
        ]
