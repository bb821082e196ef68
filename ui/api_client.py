"""HTTP client for the caption API."""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence

import httpx

from backend.models import CaptionRecord
from backend.utils.image_encoding import encode_image_bytes
from config.constants import API_BASE_URL, API_PREFIX, DEFAULT_LANGUAGE

logger = logging.getLogger(__name__)


class APIClientError(Exception):
    """Raised when the API answers with a non-2xx status."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details


@dataclass
class UploadedImage:
    """Upload result from API."""

    filename: str
    original_name: str
    size: int
    url: str


@dataclass
class ImagePayload:
    """Inline image with optional notes, for multilingual generation."""

    image_base64: str
    notes: Optional[str] = None

    @classmethod
    def from_bytes(
        cls, data: bytes, mime_type: Optional[str] = None, notes: Optional[str] = None
    ) -> "ImagePayload":
        """Build a payload from raw image file contents."""
        return cls(image_base64=encode_image_bytes(data, mime_type), notes=notes)

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {"imageBase64": self.image_base64, "notes": self.notes}


class CaptionAPIClient:
    """HTTP client for the caption backend."""

    def __init__(
        self,
        base_url: str = API_BASE_URL,
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._client = httpx.Client(
            base_url=self._base_url, timeout=timeout, transport=transport
        )

    def health_check(self) -> bool:
        """Check if API is healthy."""
        try:
            response = self._client.get("/health")
            return response.status_code == 200
        except httpx.HTTPError as e:
            logger.warning(f"API health check failed: {e}")
            return False

    def upload_image(
        self, data: bytes, filename: str, content_type: str = "image/jpeg"
    ) -> UploadedImage:
        """Upload an image file and return its stored name and URL."""
        response = self._client.post(
            f"{API_PREFIX}/upload",
            files={"image": (filename, data, content_type)},
        )
        result = self._json_or_raise(response)
        return UploadedImage(
            filename=result["filename"],
            original_name=result.get("originalName", filename),
            size=result.get("size", len(data)),
            url=result["url"],
        )

    def generate_captions(
        self,
        image_base64: str,
        user_notes: Optional[str] = None,
        tone: Optional[str] = None,
        language: str = DEFAULT_LANGUAGE,
    ) -> List[CaptionRecord]:
        """Generate captions for one inline image in one language."""
        response = self._client.post(
            f"{API_PREFIX}/generate-captions",
            json={
                "imageBase64": image_base64,
                "userNotes": user_notes,
                "tone": tone,
                "language": language,
            },
        )
        result = self._json_or_raise(response)
        return [CaptionRecord.from_dict(c) for c in result.get("captions", [])]

    def generate_multilingual(
        self,
        images: Sequence[ImagePayload],
        languages: Iterable[str] = (DEFAULT_LANGUAGE,),
        tone: Optional[str] = None,
    ) -> Dict[str, List[CaptionRecord]]:
        """Generate captions for each selected language in one action.

        Raises:
            APIClientError: If any language fails (no partial results)
        """
        response = self._client.post(
            f"{API_PREFIX}/generate-multilingual",
            json={
                "images": [image.to_dict() for image in images],
                "languages": list(languages),
                "tone": tone,
            },
        )
        result = self._json_or_raise(response)
        return {
            language: [CaptionRecord.from_dict(c) for c in captions]
            for language, captions in result.get("captions", {}).items()
        }

    def close(self):
        """Close HTTP client."""
        self._client.close()

    @staticmethod
    def _json_or_raise(response: httpx.Response) -> dict:
        if response.is_success:
            return response.json()
        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}
        message = body.get("error") or f"HTTP {response.status_code}"
        logger.warning(f"API request failed ({response.status_code}): {message}")
        raise APIClientError(
            message, status_code=response.status_code, details=body.get("details")
        )
