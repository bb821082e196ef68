"""
Backend error handling modules.

Error types for the caption generation pipeline and its HTTP boundary.
"""

from .caption_errors import (
    CaptionServiceError,
    ConfigurationError,
    InvocationError,
    ValidationError,
)

__all__ = [
    "CaptionServiceError",
    "ConfigurationError",
    "InvocationError",
    "ValidationError",
]
