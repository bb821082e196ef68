import os

from dotenv import load_dotenv

load_dotenv()

# ============================================================
# LANGUAGE OPTIONS
# ============================================================
ENGLISH = "English"
TRADITIONAL_CHINESE = "Traditional Chinese"
JAPANESE = "Japanese"
KOREAN = "Korean"
SPANISH = "Spanish"
FRENCH = "French"

# label -> (native name, flag)
SUPPORTED_LANGUAGES = {
    ENGLISH: ("English", "🇺🇸"),
    TRADITIONAL_CHINESE: ("繁體中文", "🇹🇼"),
    JAPANESE: ("日本語", "🇯🇵"),
    KOREAN: ("한국어", "🇰🇷"),
    SPANISH: ("Español", "🇪🇸"),
    FRENCH: ("Français", "🇫🇷"),
}

DEFAULT_LANGUAGE = ENGLISH

# Languages whose script has a commonly confused variant.
# label -> (caption instruction, hashtag instruction)
SCRIPT_VARIANT_NOTES = {
    TRADITIONAL_CHINESE: (
        "use Traditional Chinese characters 繁體中文, NOT Simplified Chinese 简体中文",
        "hashtags must also use Traditional Chinese characters",
    ),
}

# ============================================================
# CAPTION GENERATION
# ============================================================
CAPTION_COUNT = 3
CAPTION_MAX_CHARS = 280

DEFAULT_TONE = "engaging and social media friendly"
NO_NOTES_PLACEHOLDER = "No specific descriptions provided"

# Used when the model output carries no usable caption
FALLBACK_CAPTION = "Great moments captured! ✨"
FALLBACK_HASHTAGS = "#memories #photography #lifestyle"

# ============================================================
# LLM CONFIGURATION
# ============================================================
DEFAULT_VISION_MODEL = "gpt-4o"
DEFAULT_VISION_MAX_TOKENS = 1000
DEFAULT_IMAGE_DETAIL = "high"
DEFAULT_IMAGE_MIME_TYPE = "image/jpeg"

# ============================================================
# UPLOADS
# ============================================================
UPLOAD_DIR = os.getenv("UPLOAD_DIR", "uploads")
MAX_UPLOAD_MB = 10
MAX_UPLOAD_BYTES = MAX_UPLOAD_MB * 1024 * 1024

# ============================================================
# API
# ============================================================
API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:3001")
API_PREFIX = "/api"
