"""Caption endpoints - single-language and multi-language generation."""

import logging

from fastapi import APIRouter, Depends

from api.dependencies import get_caption_service
from api.models.requests import GenerateCaptionsRequest, GenerateMultilingualRequest
from api.models.responses import (
    CaptionResponse,
    ErrorResponse,
    MultilingualCaptionResponse,
)
from api.services.caption_service import CaptionService
from backend.errors import CaptionServiceError, InvocationError

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["captions"],
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)


@router.post("/generate-captions", response_model=CaptionResponse)
def generate_captions(
    request: GenerateCaptionsRequest,
    caption_service: CaptionService = Depends(get_caption_service),
) -> CaptionResponse:
    """
    Generate captions for one inline image in one language.

    Returns:
        CaptionResponse with at least one caption

    Raises:
        ValidationError (400): Missing image or unsupported language
        ConfigurationError (500): OpenAI API key not configured
        InvocationError (500): Model call failed
    """
    logger.info(
        f"Caption generation request received "
        f"(has image: {bool(request.image_base64)})"
    )
    try:
        return caption_service.generate_captions(request)
    except CaptionServiceError:
        raise
    except Exception as e:
        logger.error(f"Caption generation error: {e}", exc_info=True)
        raise InvocationError(details=str(e))


@router.post("/generate-multilingual", response_model=MultilingualCaptionResponse)
def generate_multilingual(
    request: GenerateMultilingualRequest,
    caption_service: CaptionService = Depends(get_caption_service),
) -> MultilingualCaptionResponse:
    """
    Generate captions for every selected language (one model call each).

    The first image is captioned; notes from all images feed the prompt.
    Any failing language fails the whole request and no partial map is
    returned.
    """
    logger.info(
        f"Multilingual caption request received: {len(request.images)} image(s), "
        f"{len(request.languages)} language(s)"
    )
    try:
        return caption_service.generate_multilingual(request)
    except CaptionServiceError:
        raise
    except Exception as e:
        logger.error(f"Multilingual caption generation error: {e}", exc_info=True)
        raise InvocationError(details=str(e))
