# =============================================================================
# app/exceptions.py - Custom Exceptions and Handlers
# =============================================================================
# Centralized exception handling for the API.
#
# Every error leaving the application has the same JSON shape:
#   {"message": "...", "data": ...}   (data only when the error carries some)
#
# GraphQL resolvers raise the same exception classes; their status_code and
# data are picked up by app.graphql.errors.format_graphql_error.
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class FeedException(Exception):
    """
    Base exception for the Feed API.

    Raising it without a status code behaves like throwing a plain error:
    the trailing handler answers with status 500.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        code: str = "FEED_ERROR",
        data: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code
        self.data = data

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result: dict[str, Any] = {"message": self.message}
        if self.data is not None:
            result["data"] = self.data
        return result


# =============================================================================
# Authentication Exceptions
# =============================================================================

class NotAuthenticatedError(FeedException):
    """Raised when an operation requires a valid access token."""

    def __init__(self, message: str = "Not authenticated!"):
        super().__init__(
            message=message,
            status_code=401,
            code="NOT_AUTHENTICATED",
        )


class NotAuthorizedError(FeedException):
    """Raised when the current user may not touch the resource."""

    def __init__(self, message: str = "Not authorized!"):
        super().__init__(
            message=message,
            status_code=403,
            code="NOT_AUTHORIZED",
        )


# =============================================================================
# Validation Exceptions
# =============================================================================

class ValidationFailedError(FeedException):
    """
    Raised when user input fails validation.

    `errors` is a list of human readable messages; it is exposed as
    data=[{"message": ...}, ...].
    """

    def __init__(self, errors: list[str], message: str = "Invalid input."):
        super().__init__(
            message=message,
            status_code=422,
            code="VALIDATION_FAILED",
            data=[{"message": error} for error in errors],
        )


# =============================================================================
# User Exceptions
# =============================================================================

class UserExistsError(FeedException):
    """Raised when signing up with an email that is already registered."""

    def __init__(self, email: str):
        super().__init__(
            message="User exists already!",
            code="USER_EXISTS",
            data={"email": email},
        )


class UserNotFoundError(FeedException):
    """Raised when no user matches the given email or id."""

    def __init__(self, message: str = "User not found."):
        super().__init__(
            message=message,
            status_code=401,
            code="USER_NOT_FOUND",
        )


class PasswordIncorrectError(FeedException):
    """Raised when the password does not match the stored hash."""

    def __init__(self):
        super().__init__(
            message="Password is incorrect.",
            status_code=401,
            code="PASSWORD_INCORRECT",
        )


# =============================================================================
# Post Exceptions
# =============================================================================

class PostNotFoundError(FeedException):
    """Raised when a post ID doesn't exist."""

    def __init__(self, post_id: str):
        super().__init__(
            message="No post found!",
            status_code=404,
            code="POST_NOT_FOUND",
            data={"post_id": post_id},
        )


# =============================================================================
# Upload Exceptions
# =============================================================================

class FileTooLargeError(FeedException):
    """Raised when uploaded file exceeds size limit."""

    def __init__(self, size_mb: float, max_mb: int):
        super().__init__(
            message=f"File too large: {size_mb:.1f}MB (max: {max_mb}MB)",
            status_code=413,
            code="FILE_TOO_LARGE",
            data={"size_mb": round(size_mb, 2), "max_mb": max_mb},
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def feed_exception_handler(
    request: Request,
    exc: FeedException
) -> JSONResponse:
    """
    Trailing error handler: log the error and answer with its status code
    (default 500) and message.
    """
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")

    return JSONResponse(
        status_code=exc.status_code,
        content=jsonable_encoder(exc.to_dict())
    )


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException
) -> JSONResponse:
    """Reshape framework HTTP errors (404, 405, ...) into the message shape."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """Handle request validation errors raised by FastAPI."""
    return JSONResponse(
        status_code=422,
        content={
            "message": "Invalid input.",
            "data": jsonable_encoder(exc.errors()),
        }
    )


async def unhandled_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Handle unexpected exceptions: log with traceback, answer 500."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={"message": str(exc) or "An unexpected error occurred"},
    )
