# =============================================================================
# core/models/post.py - Post Document and Input Schemas
# =============================================================================
# - Post: the `posts` collection
# - PostInput: validated input of the createPost / updatePost mutations
# =============================================================================

from typing import Optional

from beanie import PydanticObjectId
from pydantic import BaseModel, Field, ValidationError, field_validator

from .base import BaseDocument

# Clients send this literal when a post is edited without picking a new image
IMAGE_UNCHANGED = "undefined"


class Post(BaseDocument):
    """
    A feed post.

    `image_url` is the relative path returned by the upload endpoint
    (e.g. "images/3f1c..."), which is also the URL path it is served under.
    """

    title: str
    content: str
    image_url: str
    creator_id: PydanticObjectId

    class Settings:
        name = "posts"
        indexes = ["creator_id"]


class PostInput(BaseModel):
    """
    Input for creating or updating a post.

    Titles and contents are trimmed before their length is checked.
    """

    title: str = Field(..., min_length=5)
    content: str = Field(..., min_length=5)
    image_url: Optional[str] = None

    @field_validator("title", "content", mode="before")
    @classmethod
    def strip_text(cls, value):
        if isinstance(value, str):
            return value.strip()
        return value

    @property
    def keeps_current_image(self) -> bool:
        """True when the client did not send a new image path."""
        return not self.image_url or self.image_url == IMAGE_UNCHANGED


POST_INPUT_MESSAGES = {
    "title": "Title is invalid.",
    "content": "Content is invalid.",
}


def post_input_errors(exc: ValidationError) -> list[str]:
    """Translate a PostInput ValidationError into client messages."""
    invalid = {str(error["loc"][0]) for error in exc.errors() if error["loc"]}
    return [message for field, message in POST_INPUT_MESSAGES.items() if field in invalid]
