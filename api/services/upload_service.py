"""Upload service - stores uploaded images for static serving."""

import logging
import random
import time
from pathlib import Path
from typing import Optional

from fastapi import UploadFile

from api.config import Settings
from api.models.responses import UploadResponse
from backend.errors import ValidationError
from backend.utils.image_encoding import validate_image_bytes

logger = logging.getLogger(__name__)

UPLOAD_URL_PATH = "/uploads"


class UploadService:
    """Service for validating and storing uploaded images.

    Caption generation does not read these files; images are sent to the
    model inline.
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self.upload_dir = Path(settings.upload_dir)

    def store_image(self, file: Optional[UploadFile], base_url: str) -> UploadResponse:
        """Validate an uploaded image and write it to the upload directory.

        Args:
            file: Multipart upload (field "image")
            base_url: Public base URL of this server, for the returned link

        Raises:
            ValidationError: Missing file, non-image, or over the size limit
        """
        if file is None or not file.filename:
            raise ValidationError("No image file uploaded")

        if not (file.content_type or "").startswith("image/"):
            raise ValidationError("Only image files are allowed")

        max_bytes = self.settings.max_upload_bytes
        data = file.file.read(max_bytes + 1)
        if len(data) > max_bytes:
            raise ValidationError(
                f"File too large. Maximum size is {max_bytes // (1024 * 1024)}MB."
            )

        image_format = validate_image_bytes(data)

        filename = self._unique_filename(file.filename)
        self.upload_dir.mkdir(parents=True, exist_ok=True)
        (self.upload_dir / filename).write_bytes(data)

        logger.info(
            f"Stored upload {file.filename[:100]!r} as {filename} "
            f"({len(data)} bytes, {image_format})"
        )
        return UploadResponse(
            filename=filename,
            original_name=file.filename,
            size=len(data),
            url=f"{base_url.rstrip('/')}{UPLOAD_URL_PATH}/{filename}",
        )

    @staticmethod
    def _unique_filename(original_name: str) -> str:
        """image-<millis>-<random><ext>, keeping the original extension."""
        suffix = Path(original_name).suffix.lower()
        millis = int(time.time() * 1000)
        return f"image-{millis}-{random.randint(0, 10**9)}{suffix}"
