# =============================================================================
# app/graphql/types.py - GraphQL Object and Input Types
# =============================================================================
# Field names are camel-cased by Strawberry (image_url -> imageUrl).
# Documents are exposed under "_id" to match the ids clients already use.
# =============================================================================

from typing import Any

import strawberry

from app.exceptions import UserNotFoundError
from core.services import PostService, UserService


@strawberry.type(name="User")
class UserType:
    id: strawberry.ID = strawberry.field(name="_id")
    name: str
    email: str
    status: str

    @strawberry.field
    async def posts(self) -> list["PostType"]:
        posts = await PostService.list_by_creator(str(self.id))
        return [PostType.from_document(post) for post in posts]

    @classmethod
    def from_document(cls, user: Any) -> "UserType":
        return cls(
            id=strawberry.ID(str(user.id)),
            name=user.name,
            email=user.email,
            status=user.status,
        )


@strawberry.type(name="Post")
class PostType:
    id: strawberry.ID = strawberry.field(name="_id")
    title: str
    content: str
    image_url: str
    created_at: str
    updated_at: str
    creator_id: strawberry.Private[str]

    @strawberry.field
    async def creator(self) -> UserType:
        user = await UserService.get_user(self.creator_id)
        if user is None:
            raise UserNotFoundError("Creator not found.")
        return UserType.from_document(user)

    @classmethod
    def from_document(cls, post: Any) -> "PostType":
        return cls(
            id=strawberry.ID(str(post.id)),
            title=post.title,
            content=post.content,
            image_url=post.image_url,
            created_at=post.created_at.isoformat(),
            updated_at=post.updated_at.isoformat(),
            creator_id=str(post.creator_id),
        )


@strawberry.type
class AuthData:
    token: str
    user_id: str


@strawberry.type
class PostData:
    posts: list[PostType]
    total_posts: int


@strawberry.input
class UserInputData:
    email: str
    name: str
    password: str


@strawberry.input
class PostInputData:
    title: str
    content: str
    image_url: str
