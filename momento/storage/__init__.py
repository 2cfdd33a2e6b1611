"""Image storage backends for Momento."""

from momento.storage.base import (
    BaseImageStorage,
    UploadResult,
    generate_image_name,
)
from momento.storage.local import LocalImageStorage

__all__ = [
    "BaseImageStorage",
    "LocalImageStorage",
    "UploadResult",
    "generate_image_name",
]
