# =============================================================================
# app/auth/models.py - Authentication Models
# =============================================================================
# Pydantic models for authentication data.
# =============================================================================

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TokenPayload(BaseModel):
    """
    Decoded access token payload.

    Tokens are issued by the login query and carry the user's id as the
    `userId` claim.
    """
    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(..., alias="userId", min_length=1)
    email: Optional[str] = None
    exp: datetime


class AuthState(BaseModel):
    """
    Authentication result recorded on every request by AuthMiddleware.

    A request without a usable token is not rejected; it simply carries
    is_auth=False and it is up to the route or resolver to refuse it.
    """
    model_config = ConfigDict(frozen=True)

    is_auth: bool = False
    user_id: Optional[str] = None
