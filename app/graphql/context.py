# =============================================================================
# app/graphql/context.py - Resolver Context Helpers
# =============================================================================

from strawberry.types import Info

from app.auth import AuthState, auth_state_from_request
from app.exceptions import NotAuthenticatedError


def get_auth(info: Info) -> AuthState:
    """Authentication state of the request being resolved."""
    return auth_state_from_request(info.context["request"])


def require_user_id(info: Info) -> str:
    """
    Id of the authenticated user.

    Raises:
        NotAuthenticatedError: If the request carried no valid token
    """
    auth = get_auth(info)
    if not auth.is_auth or not auth.user_id:
        raise NotAuthenticatedError()
    return auth.user_id
