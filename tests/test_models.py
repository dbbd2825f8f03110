# =============================================================================
# tests/test_models.py - Input Model Tests
# =============================================================================
# Unit tests for the Pydantic input models to ensure:
# - Valid data is accepted and parsed correctly
# - Invalid data is reported with the messages clients display
# =============================================================================

from datetime import datetime, timezone
from types import SimpleNamespace

import pytest
from pydantic import ValidationError

from core.models import (
    IMAGE_UNCHANGED,
    BaseDocument,
    PostInput,
    UserCreate,
    post_input_errors,
    user_input_errors,
)


# =============================================================================
# User Input Tests
# =============================================================================

class TestUserCreate:
    """Tests for UserCreate model."""

    def test_valid_user(self):
        user = UserCreate(email="test@test.com", name="Max", password="tester")

        assert user.email == "test@test.com"
        assert user.name == "Max"

    def test_invalid_email_message(self):
        with pytest.raises(ValidationError) as exc_info:
            UserCreate(email="not-an-email", name="Max", password="tester")

        assert user_input_errors(exc_info.value) == ["E-Mail is invalid."]

    def test_short_password_message(self):
        with pytest.raises(ValidationError) as exc_info:
            UserCreate(email="test@test.com", name="Max", password="1234")

        assert user_input_errors(exc_info.value) == ["Password too short!"]

    def test_all_messages_in_field_order(self):
        with pytest.raises(ValidationError) as exc_info:
            UserCreate(email="bad", name="", password="")

        assert user_input_errors(exc_info.value) == [
            "E-Mail is invalid.",
            "Name is invalid.",
            "Password too short!",
        ]


# =============================================================================
# Post Input Tests
# =============================================================================

class TestPostInput:
    """Tests for PostInput model."""

    def test_valid_post(self):
        post = PostInput(title="  Hello World  ", content="Some content", image_url="images/x")

        # Surrounding whitespace is trimmed
        assert post.title == "Hello World"
        assert post.keeps_current_image is False

    def test_title_too_short_after_trim(self):
        with pytest.raises(ValidationError) as exc_info:
            PostInput(title="  abc   ", content="Some content")

        assert post_input_errors(exc_info.value) == ["Title is invalid."]

    def test_both_fields_invalid(self):
        with pytest.raises(ValidationError) as exc_info:
            PostInput(title="", content="abc")

        assert post_input_errors(exc_info.value) == ["Title is invalid.", "Content is invalid."]

    @pytest.mark.parametrize("image_url", [None, "", IMAGE_UNCHANGED])
    def test_keeps_current_image(self, image_url):
        post = PostInput(title="Hello World", content="Some content", image_url=image_url)

        assert post.keeps_current_image is True


# =============================================================================
# Timestamp Tests
# =============================================================================

class TestTimestamps:
    """updated_at is refreshed before a document is written back."""

    def test_touch_refreshes_updated_at(self):
        created = datetime(2024, 1, 15, 10, 0, tzinfo=timezone.utc)
        doc = SimpleNamespace(created_at=created, updated_at=created)

        BaseDocument.touch(doc)

        assert doc.updated_at > created
        assert doc.created_at == created
