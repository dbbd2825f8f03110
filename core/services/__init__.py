# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .image_service import ImageService
from .post_service import PostService
from .user_service import UserService

__all__ = [
    "ImageService",
    "PostService",
    "UserService",
]
