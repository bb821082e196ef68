"""
Vision module for social-media caption generation.

Provides the response normalizer that turns free-form model output into
caption records, and the orchestrator that runs one model call per
selected language.
"""

from .caption_orchestrator import CaptionOrchestrator
from .response_normalizer import normalize_caption_response

__all__ = ["CaptionOrchestrator", "normalize_caption_response"]
