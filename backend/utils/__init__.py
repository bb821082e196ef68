from .image_encoding import (
    encode_image_bytes,
    ensure_data_url,
    validate_image_bytes,
)

__all__ = [
    "encode_image_bytes",
    "ensure_data_url",
    "validate_image_bytes",
]
