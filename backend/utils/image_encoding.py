"""
Inline image helpers.

Images travel to the model as data URLs rather than stored-file references,
so uploads and API payloads both pass through here.
"""

import base64
import io
import logging
from typing import Optional

from PIL import Image, UnidentifiedImageError

from backend.errors import ValidationError
from config.constants import DEFAULT_IMAGE_MIME_TYPE

logger = logging.getLogger(__name__)

DATA_URL_PREFIX = "data:"


def encode_image_bytes(data: bytes, mime_type: Optional[str] = None) -> str:
    """
    Encode raw image bytes as a base64 data URL.

    Args:
        data: Image file contents
        mime_type: Content type; defaults to image/jpeg

    Returns:
        "data:<mime>;base64,<payload>"
    """
    if not data:
        raise ValidationError("Image data is empty")
    payload = base64.b64encode(data).decode("utf-8")
    return f"data:{mime_type or DEFAULT_IMAGE_MIME_TYPE};base64,{payload}"


def ensure_data_url(image_data: Optional[str]) -> str:
    """
    Normalize inline image data to a data URL.

    Accepts either a data URL (passed through) or bare base64.

    Raises:
        ValidationError: If image data is missing
    """
    value = (image_data or "").strip()
    if not value:
        raise ValidationError("Image base64 is required")
    if value.startswith(DATA_URL_PREFIX):
        return value
    return f"data:{DEFAULT_IMAGE_MIME_TYPE};base64,{value}"


def validate_image_bytes(data: bytes) -> str:
    """
    Check that bytes decode as an image.

    Returns:
        Detected image format (e.g. "PNG", "JPEG")

    Raises:
        ValidationError: If data is empty or not a readable image
    """
    if not data:
        raise ValidationError("No image file uploaded")
    try:
        with Image.open(io.BytesIO(data)) as img:
            img.verify()
            image_format = img.format or "UNKNOWN"
    except (UnidentifiedImageError, OSError, SyntaxError) as e:
        logger.warning(f"Rejected non-image upload: {e}")
        raise ValidationError("Only image files are allowed", details=str(e))
    return image_format
