# =============================================================================
# app/graphql/schema.py - GraphQL Schema and Resolvers
# =============================================================================
# Query:    login, posts, post, user
# Mutation: createUser, createPost, updatePost, deletePost, updateStatus
#
# Resolvers raise app.exceptions classes; format_graphql_error turns them
# into {message, status, data} entries of the response's "errors" list.
# =============================================================================

import logging
from typing import Optional

import strawberry
from pydantic import ValidationError
from strawberry.types import Info

from app.auth import create_access_token
from app.config import settings
from app.exceptions import (
    NotAuthorizedError,
    PostNotFoundError,
    UserNotFoundError,
    ValidationFailedError,
)
from app.graphql.context import require_user_id
from app.graphql.types import (
    AuthData,
    PostData,
    PostInputData,
    PostType,
    UserInputData,
    UserType,
)
from core.models import PostInput, UserCreate, post_input_errors, user_input_errors
from core.services import PostService, UserService

logger = logging.getLogger(__name__)


def _validate_post_input(post_input: PostInputData) -> PostInput:
    try:
        return PostInput(
            title=post_input.title,
            content=post_input.content,
            image_url=post_input.image_url,
        )
    except ValidationError as e:
        raise ValidationFailedError(post_input_errors(e))


async def _get_owned_post(post_id: strawberry.ID, user_id: str):
    post = await PostService.get_post(post_id)
    if post is None:
        raise PostNotFoundError(str(post_id))
    if str(post.creator_id) != user_id:
        raise NotAuthorizedError()
    return post


@strawberry.type
class Query:

    @strawberry.field
    async def login(self, email: str, password: str) -> AuthData:
        user = await UserService.authenticate(email, password)
        token = create_access_token(str(user.id), user.email)
        return AuthData(token=token, user_id=str(user.id))

    @strawberry.field
    async def posts(self, info: Info, page: Optional[int] = None) -> PostData:
        require_user_id(info)

        total_posts = await PostService.count_posts()
        posts = await PostService.list_posts(page or 1, settings.POSTS_PER_PAGE)
        return PostData(
            posts=[PostType.from_document(post) for post in posts],
            total_posts=total_posts,
        )

    @strawberry.field
    async def post(self, info: Info, id: strawberry.ID) -> PostType:
        require_user_id(info)

        post = await PostService.get_post(id)
        if post is None:
            raise PostNotFoundError(str(id))
        return PostType.from_document(post)

    @strawberry.field
    async def user(self, info: Info) -> UserType:
        user_id = require_user_id(info)

        user = await UserService.get_user(user_id)
        if user is None:
            raise UserNotFoundError("No user found!")
        return UserType.from_document(user)


@strawberry.type
class Mutation:

    @strawberry.mutation
    async def create_user(self, user_input: UserInputData) -> UserType:
        try:
            data = UserCreate(
                email=user_input.email,
                name=user_input.name,
                password=user_input.password,
            )
        except ValidationError as e:
            raise ValidationFailedError(user_input_errors(e))

        user = await UserService.create_user(data)
        return UserType.from_document(user)

    @strawberry.mutation
    async def create_post(self, info: Info, post_input: PostInputData) -> PostType:
        user_id = require_user_id(info)
        data = _validate_post_input(post_input)

        creator = await UserService.get_user(user_id)
        if creator is None:
            raise UserNotFoundError("Invalid user.")

        post = await PostService.create_post(str(creator.id), data)
        return PostType.from_document(post)

    @strawberry.mutation
    async def update_post(
        self,
        info: Info,
        id: strawberry.ID,
        post_input: PostInputData,
    ) -> PostType:
        user_id = require_user_id(info)
        post = await _get_owned_post(id, user_id)
        data = _validate_post_input(post_input)

        post = await PostService.update_post(post, data)
        return PostType.from_document(post)

    @strawberry.mutation
    async def delete_post(self, info: Info, id: strawberry.ID) -> bool:
        user_id = require_user_id(info)
        post = await _get_owned_post(id, user_id)

        await PostService.delete_post(post)
        return True

    @strawberry.mutation
    async def update_status(self, info: Info, status: str) -> UserType:
        user_id = require_user_id(info)

        user = await UserService.update_status(user_id, status)
        return UserType.from_document(user)


schema = strawberry.Schema(query=Query, mutation=Mutation)
