# =============================================================================
# app/auth/dependencies.py - FastAPI Auth Dependencies
# =============================================================================
# Exposes the state recorded by AuthMiddleware to route handlers.
#
# Usage:
#   from app.auth import AuthState, get_auth_state
#
#   @router.post("/protected")
#   async def protected(auth: AuthState = Depends(get_auth_state)):
#       if not auth.is_auth:
#           ...
# =============================================================================

from fastapi import Request

from app.auth.models import AuthState


def auth_state_from_request(request: Request) -> AuthState:
    """
    Read the authentication state from a request.

    Requests that did not pass through AuthMiddleware are unauthenticated.
    """
    return AuthState(
        is_auth=bool(getattr(request.state, "is_auth", False)),
        user_id=getattr(request.state, "user_id", None),
    )


async def get_auth_state(request: Request) -> AuthState:
    """FastAPI dependency returning the request's AuthState."""
    return auth_state_from_request(request)
