"""API configuration from environment."""

from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from config.constants import (
    API_PREFIX,
    DEFAULT_IMAGE_DETAIL,
    DEFAULT_VISION_MAX_TOKENS,
    DEFAULT_VISION_MODEL,
    MAX_UPLOAD_BYTES,
    UPLOAD_DIR,
)


class Settings(BaseSettings):
    """API settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API
    api_title: str = "Pawscribe Caption API"
    api_version: str = "1.0.0"
    api_prefix: str = API_PREFIX
    host: str = "0.0.0.0"
    port: int = 3001
    cors_allow_origins: List[str] = ["*"]

    # OpenAI (absence is reported at startup and on every generation request)
    openai_api_key: Optional[str] = None

    # Vision model
    caption_model: str = DEFAULT_VISION_MODEL
    caption_max_tokens: int = DEFAULT_VISION_MAX_TOKENS
    caption_image_detail: str = DEFAULT_IMAGE_DETAIL

    # Uploads
    upload_dir: str = UPLOAD_DIR
    max_upload_bytes: int = MAX_UPLOAD_BYTES

    # Logging
    log_dir: str = "logs"
    log_level: str = "INFO"

    @property
    def openai_configured(self) -> bool:
        return bool(self.openai_api_key)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
