# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up test environment variables before any imports
# - Points MEDIA_ROOT at a temporary directory so uploads never touch the repo
# - Provides an HTTP client that skips the lifespan (no MongoDB needed)
# =============================================================================

import os
import tempfile

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("MONGODB_URL", "mongodb://localhost:27017/feed_test")
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-tokens")
os.environ.setdefault("MEDIA_ROOT", tempfile.mkdtemp(prefix="feed-media-"))
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "false")

from datetime import datetime, timezone
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from app.auth import create_access_token
from app.main import app

# Small PNG payload (signature + header chunks)
PNG_BYTES = bytes.fromhex(
    "89504e470d0a1a0a0000000d4948445200000001000000010806000000"
    "1f15c4890000000d49444154789c6360000002000154a24f6f00000000"
    "49454e44ae426082"
)

USER_ID = "65f1c0ffee00000000000001"
OTHER_USER_ID = "65f1c0ffee00000000000002"
POST_ID = "65f1c0ffee0000000000a001"


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def client():
    """
    HTTP client for the application.

    Not entered as a context manager, so the lifespan (and with it the
    MongoDB connection) does not run.
    """
    return TestClient(app)


@pytest.fixture
def auth_headers():
    """Authorization header carrying a valid token for USER_ID."""
    token = create_access_token(USER_ID, "test@test.com")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def png_bytes():
    """Bytes of a small PNG image."""
    return PNG_BYTES


@pytest.fixture
def sample_user():
    """Stand-in for a stored User document."""
    return SimpleNamespace(
        id=USER_ID,
        email="test@test.com",
        name="Max",
        password="$argon2id$not-a-real-hash",
        status="I am new!",
    )


@pytest.fixture
def sample_post():
    """Stand-in for a stored Post document owned by USER_ID."""
    created = datetime(2024, 1, 15, 10, 0, tzinfo=timezone.utc)
    return SimpleNamespace(
        id=POST_ID,
        title="First Post",
        content="This is the first post!",
        image_url="images/0b6c6a2e-5d2f-4c3e-9a1b-2f7d8c9e0a11",
        creator_id=USER_ID,
        created_at=created,
        updated_at=created,
    )
