"""Local filesystem image storage."""

import logging
from pathlib import Path

from momento.storage.base import BaseImageStorage, UploadResult

logger = logging.getLogger(__name__)


class LocalImageStorage(BaseImageStorage):
    """Stores journal images as files under a root directory."""

    def __init__(self, root: Path):
        """Initialize local storage.

        Args:
            root: Directory images are written under.
        """
        self.root = root

    def _resolve(self, name: str) -> Path:
        path = (self.root / name).resolve()
        if not path.is_relative_to(self.root.resolve()):
            raise ValueError(f"Image name escapes storage root: {name}")
        return path

    def upload(self, name: str, data: bytes) -> UploadResult:
        """Write image bytes to disk."""
        if not data:
            logger.warning("Refusing to upload empty image %s", name)
            return UploadResult(name=name, success=False, message="Image data is empty")

        try:
            path = self._resolve(name)
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)
        except (OSError, ValueError) as e:
            logger.error("Failed to upload image %s: %s", name, e)
            return UploadResult(name=name, success=False, message=str(e))

        logger.info("Image uploaded to %s", path)
        return UploadResult(
            name=name,
            success=True,
            location=str(path),
            message="Image uploaded successfully",
        )

    def exists(self, name: str) -> bool:
        try:
            return self._resolve(name).is_file()
        except ValueError:
            return False
