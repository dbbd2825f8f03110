# =============================================================================
# core/services/post_service.py - Post Business Logic
# =============================================================================
# Handles post CRUD operations. Ownership checks live in the resolvers; this
# layer only talks to the database and the image store.
# =============================================================================

import logging

from beanie import PydanticObjectId

from core.models.post import Post, PostInput
from core.services.image_service import ImageService
from core.services.user_service import to_object_id

logger = logging.getLogger(__name__)


class PostService:
    """Service for post operations."""

    @staticmethod
    async def count_posts() -> int:
        """Total number of posts."""
        return await Post.find_all().count()

    @staticmethod
    async def list_posts(page: int, per_page: int) -> list[Post]:
        """
        Get one page of posts, newest first.

        Args:
            page: 1-based page number (values below 1 are treated as 1)
            per_page: Page size
        """
        page = max(page, 1)
        return await (
            Post.find_all()
            .sort(-Post.created_at)
            .skip((page - 1) * per_page)
            .limit(per_page)
            .to_list()
        )

    @staticmethod
    async def list_by_creator(creator_id: str | PydanticObjectId) -> list[Post]:
        """Get all posts of one user, newest first."""
        object_id = to_object_id(creator_id)
        if object_id is None:
            return []
        return await Post.find(Post.creator_id == object_id).sort(-Post.created_at).to_list()

    @staticmethod
    async def get_post(post_id: str | PydanticObjectId) -> Post | None:
        """Get a post by ID, or None if there is no such post."""
        object_id = to_object_id(post_id)
        if object_id is None:
            return None
        return await Post.get(object_id)

    @staticmethod
    async def create_post(creator_id: str, data: PostInput) -> Post:
        """Create a post owned by creator_id."""
        post = Post(
            title=data.title,
            content=data.content,
            image_url=data.image_url or "",
            creator_id=PydanticObjectId(creator_id),
        )
        await post.insert()

        logger.info(f"Created post: {post.id} by user: {creator_id}")
        return post

    @staticmethod
    async def update_post(post: Post, data: PostInput) -> Post:
        """
        Overwrite a post's title and content.

        The image is only replaced when the input carries a new image path.
        """
        post.title = data.title
        post.content = data.content
        if not data.keeps_current_image:
            post.image_url = data.image_url
        await post.save()

        logger.info(f"Updated post: {post.id}")
        return post

    @staticmethod
    async def delete_post(post: Post) -> None:
        """Delete a post and its stored image."""
        if post.image_url:
            await ImageService.clear_image(post.image_url)
        await post.delete()

        logger.info(f"Deleted post: {post.id}")
