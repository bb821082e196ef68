"""
Caption response normalization.

Turns whatever text the vision model returned into a non-empty list of
CaptionRecord objects. Parsing degrades in stages:

1. Parse the whole reply as JSON (arrays used as-is, anything else wrapped).
2. Otherwise parse the first-"[" to last-"]" span found in the reply.
3. Otherwise keep the whole reply as one caption with default hashtags.

The bracket scrape in stage 2 is heuristic and lossy; it targets the common
"prose around a JSON array" reply and makes no attempt to repair broken JSON.
Every candidate then goes through shape coercion. Nothing in this module
raises on bad model output.
"""

import json
import logging
import re
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Union

from backend.models import CaptionRecord
from config.constants import FALLBACK_CAPTION, FALLBACK_HASHTAGS

logger = logging.getLogger(__name__)

# Greedy: first "[" to last "]", across newlines
_EMBEDDED_ARRAY = re.compile(r"\[.*\]", re.DOTALL)


@dataclass(frozen=True)
class StringItem:
    """Candidate that is a bare string."""

    text: str

    def to_record(self) -> CaptionRecord:
        return CaptionRecord(caption=_non_empty(self.text), hashtags="")


@dataclass(frozen=True)
class ObjectItem:
    """Candidate that is a JSON object."""

    fields: Mapping[str, Any]

    def to_record(self) -> CaptionRecord:
        # Missing fields fall through; present but blank ones do not
        for key in ("caption", "text"):
            value = self.fields.get(key)
            if value is not None:
                caption = _stringify(value)
                break
        else:
            caption = _stringify(dict(self.fields))
        return CaptionRecord(
            caption=_non_empty(caption),
            hashtags=_as_hashtags(self.fields.get("hashtags")),
        )


@dataclass(frozen=True)
class OtherItem:
    """Candidate of any other JSON type (number, bool, null, nested list)."""

    value: Any

    def to_record(self) -> CaptionRecord:
        return CaptionRecord(caption=_non_empty(_stringify(self.value)), hashtags="")


CandidateItem = Union[StringItem, ObjectItem, OtherItem]


def classify(element: Any) -> CandidateItem:
    """Resolve a parsed JSON element to its candidate variant once."""
    if isinstance(element, str):
        return StringItem(element)
    if isinstance(element, Mapping):
        return ObjectItem(element)
    return OtherItem(element)


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    try:
        return json.dumps(value, ensure_ascii=False)
    except RecursionError:
        logger.warning("Model response element is nested too deeply to render")
        return ""


def _as_hashtags(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return " ".join(str(tag).strip() for tag in value if str(tag).strip())
    return _stringify(value)


def _non_empty(caption: str) -> str:
    return caption if caption and caption.strip() else FALLBACK_CAPTION


def _fallback_candidates(raw: Optional[str]) -> List[Any]:
    return [{"caption": raw or FALLBACK_CAPTION, "hashtags": FALLBACK_HASHTAGS}]


def _parse_candidates(raw: Optional[str]) -> List[Any]:
    """Run the parse stages and return the candidate list."""
    if raw is None or not raw.strip():
        logger.warning("Empty model response, using placeholder caption")
        return _fallback_candidates(None)

    try:
        parsed = json.loads(raw)
    except (ValueError, RecursionError):
        pass
    else:
        if isinstance(parsed, list):
            return parsed
        logger.debug("Model response is JSON but not an array, wrapping it")
        return [parsed]

    match = _EMBEDDED_ARRAY.search(raw)
    if match:
        try:
            parsed = json.loads(match.group(0))
        except (ValueError, RecursionError):
            logger.warning("Embedded array in model response is not valid JSON")
        else:
            logger.debug("Parsed JSON array embedded in model response")
            return parsed
    else:
        logger.warning("No JSON array found in model response")

    return _fallback_candidates(raw)


def normalize_caption_response(raw: Optional[str]) -> List[CaptionRecord]:
    """
    Normalize raw model output into caption records.

    Args:
        raw: Reply text from the vision model (may be None or empty)

    Returns:
        At least one CaptionRecord, in the model's original order
    """
    candidates = _parse_candidates(raw)
    if not candidates:
        logger.warning("Model returned an empty caption array, using placeholder")
        candidates = _fallback_candidates(None)

    return [classify(element).to_record() for element in candidates]
