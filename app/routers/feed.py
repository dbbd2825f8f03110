# =============================================================================
# app/routers/feed.py - Image Upload Endpoint
# =============================================================================
# Stores the image picked for a post. The GraphQL createPost / updatePost
# mutations then reference the returned filePath as imageUrl.
#
#   POST /feed/post-image   (multipart: image=<file>, oldPath=<previous path>)
# =============================================================================

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import JSONResponse
from starlette.datastructures import UploadFile

from app.auth import AuthState, get_auth_state
from app.exceptions import FeedException
from core.services import ImageService

logger = logging.getLogger(__name__)

router = APIRouter()


# =============================================================================
# Dependencies
# =============================================================================

async def accepted_image(request: Request) -> Optional[UploadFile]:
    """
    Multipart `image` file, filtered by MIME type.

    A missing `image`, a plain text `image` field and a file that is not an
    accepted image type all look the same to the route: no file.
    """
    form = await request.form()
    image = form.get("image")

    if not isinstance(image, UploadFile):
        return None

    if not ImageService.is_accepted(image.content_type):
        logger.info(f"Ignoring upload with type {image.content_type!r}: {image.filename}")
        return None

    return image


# =============================================================================
# Endpoints
# =============================================================================

@router.api_route("/post-image", methods=["POST", "PUT"], status_code=201)
async def post_image(
    image: Annotated[Optional[UploadFile], Depends(accepted_image)],
    old_path: Annotated[Optional[str], Form(alias="oldPath")] = None,
    auth: AuthState = Depends(get_auth_state),
):
    """
    Store an uploaded post image.

    1. Rejects unauthenticated requests
    2. Answers 200 when no accepted image was sent
    3. Removes the image at oldPath, if given
    4. Stores the new image and returns its path

    Returns:
        201 {"message": "File stored.", "filePath": "images/<uuid>"}
    """
    if not auth.is_auth:
        raise FeedException("Not authenticated")

    if image is None:
        return JSONResponse(status_code=200, content={"message": "No file provided!"})

    if old_path:
        await ImageService.clear_image(old_path)

    content = await image.read()
    file_path = await ImageService.save_image(content)

    logger.info(f"User {auth.user_id} stored image {file_path}")
    return {"message": "File stored.", "filePath": file_path}
