# =============================================================================
# app/auth/middleware.py - Token Authentication Middleware
# =============================================================================
# Decodes the optional "Authorization: Bearer <token>" header on every
# request and records the outcome on request.state:
#
#   request.state.is_auth   -> bool
#   request.state.user_id   -> str | None
#
# The middleware never rejects a request. Routes and resolvers that need a
# user check is_auth themselves.
# =============================================================================

import logging

from fastapi import Request
from jose import JWTError
from starlette.middleware.base import BaseHTTPMiddleware

from app.auth.tokens import decode_access_token

logger = logging.getLogger(__name__)


class AuthMiddleware(BaseHTTPMiddleware):
    """Attach the authentication state of the request to request.state."""

    async def dispatch(self, request: Request, call_next):
        request.state.is_auth = False
        request.state.user_id = None

        authorization = request.headers.get("Authorization")
        if not authorization:
            return await call_next(request)

        parts = authorization.split()
        if len(parts) != 2 or parts[0].lower() != "bearer":
            logger.debug("Malformed Authorization header")
            return await call_next(request)

        try:
            payload = decode_access_token(parts[1])
        except JWTError as e:
            logger.debug(f"Token rejected: {e}")
            return await call_next(request)

        request.state.is_auth = True
        request.state.user_id = payload.user_id

        return await call_next(request)
