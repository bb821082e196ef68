"""
Caption generation error types.

Configuration and invocation failures propagate to the caller; malformed
model output never does (see backend.vision.response_normalizer).
"""

from typing import Any, Dict, Optional


class CaptionServiceError(Exception):
    """Base exception for caption generation errors."""

    status_code = 500

    def __init__(
        self,
        message: str,
        details: Optional[str] = None,
        language: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details
        self.language = language
        self.error_type = self.__class__.__name__

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to the API error body."""
        body: Dict[str, Any] = {"error": self.message}
        if self.details:
            body["details"] = self.details
        return body


class ConfigurationError(CaptionServiceError):
    """Raised when a required credential or setting is missing."""

    status_code = 500


class InvocationError(CaptionServiceError):
    """Raised when the external model call fails. Never retried."""

    status_code = 500

    def __init__(
        self,
        message: str = "Failed to generate captions",
        details: Optional[str] = None,
        language: Optional[str] = None,
    ):
        super().__init__(message, details=details, language=language)


class ValidationError(CaptionServiceError):
    """Raised when a request is missing required input."""

    status_code = 400
