"""Upload router - image upload endpoint."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Request, UploadFile

from api.dependencies import get_upload_service
from api.models.responses import ErrorResponse, UploadResponse
from api.services.upload_service import UploadService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["upload"])


@router.post(
    "/upload",
    response_model=UploadResponse,
    responses={400: {"model": ErrorResponse}},
)
def upload_image(
    request: Request,
    image: Optional[UploadFile] = File(default=None, description="Image file"),
    upload_service: UploadService = Depends(get_upload_service),
) -> UploadResponse:
    """
    Upload an image and return its public URL.

    Raises:
        ValidationError (400): No file, not an image, or larger than the limit
    """
    safe_filename = (image.filename if image else None) or "unknown"
    logger.info(f"Upload request: {safe_filename[:100]!r}")
    return upload_service.store_image(image, base_url=str(request.base_url))
