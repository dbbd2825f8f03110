# =============================================================================
# core/models/ - Documents and Input Schemas
# =============================================================================
# - base.py: BaseDocument with automatic timestamps
# - user.py: User document and UserCreate input
# - post.py: Post document and PostInput input
# =============================================================================

from .base import BaseDocument, utc_now
from .post import IMAGE_UNCHANGED, Post, PostInput, post_input_errors
from .user import DEFAULT_STATUS, User, UserCreate, user_input_errors


def get_document_models() -> list[type[BaseDocument]]:
    """Documents registered with Beanie on startup."""
    return [User, Post]


__all__ = [
    "BaseDocument",
    "DEFAULT_STATUS",
    "IMAGE_UNCHANGED",
    "Post",
    "PostInput",
    "User",
    "UserCreate",
    "get_document_models",
    "post_input_errors",
    "user_input_errors",
    "utc_now",
]
