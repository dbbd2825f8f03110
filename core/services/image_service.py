# =============================================================================
# core/services/image_service.py - Uploaded Image Storage
# =============================================================================
# Handles the image files behind posts:
# - is_accepted(): MIME type filter applied to every upload
# - save_image(): write an upload under MEDIA_ROOT/IMAGES_DIR/<uuid4>
# - clear_image(): delete a previously stored image by its relative path
#
# Stored images are addressed by their path relative to MEDIA_ROOT
# ("images/<uuid4>"), which is also the URL path they are served under.
# =============================================================================

import logging
import uuid
from pathlib import Path

import aiofiles
import aiofiles.os

from app.config import settings
from app.exceptions import FileTooLargeError

logger = logging.getLogger(__name__)


class ImageService:
    """
    Service for image files on local disk.

    Paths handed out and accepted by this service are relative to
    settings.MEDIA_ROOT and always use forward slashes.
    """

    @staticmethod
    def is_accepted(content_type: str | None) -> bool:
        """
        Check whether a declared MIME type is an accepted image type.

        Files failing this check are treated as if no file had been sent.
        """
        if not content_type:
            return False
        return content_type.lower() in settings.allowed_image_types_list

    @staticmethod
    async def save_image(content: bytes) -> str:
        """
        Write image bytes to the images directory under a fresh uuid4 name.

        Args:
            content: Raw file content

        Returns:
            Relative path of the stored file, e.g. "images/0b6c...-..."

        Raises:
            FileTooLargeError: If the content exceeds MAX_UPLOAD_SIZE_MB
        """
        size_bytes = len(content)
        if size_bytes > settings.max_upload_size_bytes:
            raise FileTooLargeError(size_bytes / (1024 * 1024), settings.MAX_UPLOAD_SIZE_MB)

        directory = settings.images_path
        directory.mkdir(parents=True, exist_ok=True)

        filename = str(uuid.uuid4())
        async with aiofiles.open(directory / filename, "wb") as f:
            await f.write(content)

        relative_path = f"{settings.IMAGES_DIR}/{filename}"
        logger.info(f"Stored image: {relative_path} ({size_bytes} bytes)")
        return relative_path

    @staticmethod
    def resolve_image_path(relative_path: str) -> Path | None:
        """
        Map a stored image path to its file on disk.

        Returns None for paths that point anywhere but directly inside the
        images directory.
        """
        cleaned = relative_path.replace("\\", "/").lstrip("/")
        if not cleaned:
            return None

        target = (Path(settings.MEDIA_ROOT) / cleaned).resolve()
        if target.parent != settings.images_path:
            return None
        return target

    @staticmethod
    async def clear_image(relative_path: str) -> bool:
        """
        Delete a previously stored image.

        Failures are logged and reported through the return value; they are
        never raised, so a stale path cannot break an upload or a delete.

        Returns:
            True if a file was removed
        """
        target = ImageService.resolve_image_path(relative_path)
        if target is None:
            logger.warning(f"Refusing to clear image outside images directory: {relative_path}")
            return False

        try:
            await aiofiles.os.remove(target)
        except FileNotFoundError:
            logger.warning(f"Image to clear does not exist: {relative_path}")
            return False
        except OSError as e:
            logger.error(f"Failed to clear image {relative_path}: {e}")
            return False

        logger.info(f"Cleared image: {relative_path}")
        return True
