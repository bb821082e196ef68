"""
API Services - request handling logic behind the routers.
"""

from api.services.caption_service import CaptionService
from api.services.upload_service import UploadService

__all__ = [
    "CaptionService",
    "UploadService",
]
