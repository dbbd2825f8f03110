# =============================================================================
# tests/test_auth.py - Token and Authentication Middleware Tests
# =============================================================================
# Tests for:
# - create_access_token / decode_access_token
# - AuthMiddleware recording is_auth / user_id on the request
# =============================================================================

from datetime import datetime, timedelta, timezone

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient
from jose import JWTError, jwt

from app.auth import (
    AuthMiddleware,
    AuthState,
    create_access_token,
    decode_access_token,
    get_auth_state,
)
from app.config import settings
from tests.conftest import USER_ID


@pytest.fixture
def echo_client():
    """App that echoes the AuthState recorded by the middleware."""
    echo_app = FastAPI()
    echo_app.add_middleware(AuthMiddleware)

    @echo_app.get("/whoami")
    async def whoami(auth: AuthState = Depends(get_auth_state)):
        return auth.model_dump()

    return TestClient(echo_app)


# =============================================================================
# Token Tests
# =============================================================================

class TestAccessTokens:
    """Tests for signing and verifying tokens."""

    def test_decode_returns_claims(self):
        token = create_access_token(USER_ID, "test@test.com")

        payload = decode_access_token(token)

        assert payload.user_id == USER_ID
        assert payload.email == "test@test.com"

    def test_token_expires_after_configured_lifetime(self):
        before = datetime.now(timezone.utc)

        payload = decode_access_token(create_access_token(USER_ID))

        expected = before + timedelta(minutes=settings.JWT_EXPIRE_MINUTES)
        assert abs((payload.exp - expected).total_seconds()) < 5

    def test_expired_token_is_rejected(self):
        token = create_access_token(USER_ID, expires_delta=timedelta(seconds=-10))

        with pytest.raises(JWTError):
            decode_access_token(token)

    def test_token_signed_with_other_key_is_rejected(self):
        token = jwt.encode(
            {"userId": USER_ID, "exp": datetime.now(timezone.utc) + timedelta(hours=1)},
            "some-other-secret-key",
            algorithm="HS256",
        )

        with pytest.raises(JWTError):
            decode_access_token(token)

    def test_token_without_user_id_is_rejected(self):
        token = jwt.encode(
            {"email": "a@b.com", "exp": datetime.now(timezone.utc) + timedelta(hours=1)},
            settings.SECRET_KEY,
            algorithm=settings.JWT_ALGORITHM,
        )

        with pytest.raises(JWTError):
            decode_access_token(token)


# =============================================================================
# Middleware Tests
# =============================================================================

class TestAuthMiddleware:
    """Tests for the request state set by AuthMiddleware."""

    def test_valid_token_authenticates(self, echo_client):
        token = create_access_token(USER_ID)

        response = echo_client.get("/whoami", headers={"Authorization": f"Bearer {token}"})

        assert response.json() == {"is_auth": True, "user_id": USER_ID}

    def test_missing_header_is_anonymous(self, echo_client):
        response = echo_client.get("/whoami")

        assert response.status_code == 200
        assert response.json() == {"is_auth": False, "user_id": None}

    @pytest.mark.parametrize(
        "header",
        [
            "Bearer",
            "Bearer not.a.jwt",
            "Token abc",
            "Bearer a b",
        ],
    )
    def test_unusable_header_is_anonymous(self, echo_client, header):
        response = echo_client.get("/whoami", headers={"Authorization": header})

        assert response.status_code == 200
        assert response.json() == {"is_auth": False, "user_id": None}

    def test_expired_token_is_anonymous(self, echo_client):
        token = create_access_token(USER_ID, expires_delta=timedelta(seconds=-10))

        response = echo_client.get("/whoami", headers={"Authorization": f"Bearer {token}"})

        assert response.json()["is_auth"] is False

    def test_state_without_middleware_is_anonymous(self):
        """Routes mounted outside the middleware see an anonymous request."""
        bare_app = FastAPI()

        @bare_app.get("/whoami")
        async def whoami(auth: AuthState = Depends(get_auth_state)):
            return auth.model_dump()

        response = TestClient(bare_app).get("/whoami")

        assert response.json() == {"is_auth": False, "user_id": None}
