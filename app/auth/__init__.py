# =============================================================================
# app/auth/__init__.py - Authentication Module
# =============================================================================
# Provides JWT-based authentication.
#
# Usage:
#   from app.auth import AuthState, get_auth_state
#
#   @router.post("/protected")
#   async def protected(auth: AuthState = Depends(get_auth_state)):
#       return {"user_id": auth.user_id}
# =============================================================================

from app.auth.dependencies import auth_state_from_request, get_auth_state
from app.auth.middleware import AuthMiddleware
from app.auth.models import AuthState, TokenPayload
from app.auth.tokens import create_access_token, decode_access_token

__all__ = [
    "AuthMiddleware",
    "AuthState",
    "TokenPayload",
    "auth_state_from_request",
    "create_access_token",
    "decode_access_token",
    "get_auth_state",
]
