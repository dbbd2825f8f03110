# =============================================================================
# app/auth/tokens.py - Access Token Signing and Verification
# =============================================================================
# HS256 JWTs signed with settings.SECRET_KEY.
#
# Usage:
#   token = create_access_token(user_id="65f0...", email="a@b.com")
#   payload = decode_access_token(token)   # raises JWTError when invalid
# =============================================================================

from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt
from pydantic import ValidationError

from app.auth.models import TokenPayload
from app.config import settings


def create_access_token(
    user_id: str,
    email: str | None = None,
    expires_delta: timedelta | None = None,
) -> str:
    """
    Sign an access token for a user.

    Args:
        user_id: The user's id, stored as the `userId` claim
        email: The user's email
        expires_delta: Token lifetime (defaults to JWT_EXPIRE_MINUTES)

    Returns:
        The encoded JWT
    """
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.JWT_EXPIRE_MINUTES)

    claims = {
        "userId": str(user_id),
        "email": email,
        "exp": datetime.now(timezone.utc) + expires_delta,
    }
    return jwt.encode(claims, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> TokenPayload:
    """
    Verify a token's signature and expiry and return its payload.

    Raises:
        JWTError: If the token is malformed, expired, badly signed or
            lacks the userId claim
    """
    claims = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])

    try:
        return TokenPayload.model_validate(claims)
    except ValidationError as e:
        raise JWTError(f"Invalid token payload: {e.error_count()} error(s)") from e
