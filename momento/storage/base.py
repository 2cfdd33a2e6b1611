"""Base image storage interface for Momento."""

import uuid
from abc import ABC, abstractmethod
from typing import Optional

from pydantic import BaseModel, Field

IMAGE_PREFIX = "journalEntries"


class UploadResult(BaseModel):
    """Represents the outcome of an image upload."""

    name: str = Field(..., description="Object name the image was stored under")
    success: bool = Field(..., description="Whether the upload succeeded")
    location: Optional[str] = Field(default=None, description="Where the image ended up")
    message: str = Field(default="", description="Status message")

    model_config = {"frozen": True}


def generate_image_name() -> str:
    """Generate an opaque object name for a new journal image."""
    return f"{IMAGE_PREFIX}/{uuid.uuid4().hex}.jpg"


class BaseImageStorage(ABC):
    """Abstract base class for image storage backends.

    Uploads are independent of the journal: a failed upload never changes
    the entries that were already recorded.
    """

    @abstractmethod
    def upload(self, name: str, data: bytes) -> UploadResult:
        """Persist image bytes under a name.

        Args:
            name: Object name, usually from generate_image_name().
            data: Raw image bytes.

        Returns:
            UploadResult describing the outcome. Implementations report
            failures in the result instead of raising.
        """
        pass

    @abstractmethod
    def exists(self, name: str) -> bool:
        """Check whether an image has been stored.

        Args:
            name: Object name.

        Returns:
            True if the image exists, False otherwise.
        """
        pass
