# =============================================================================
# core/models/base.py - Shared Document Base
# =============================================================================
# Users and posts both carry created_at / updated_at. updated_at is refreshed
# by a Beanie event hook whenever a document is saved or replaced.
# =============================================================================

from datetime import datetime, timezone

from beanie import Document, Replace, Save, before_event
from pydantic import Field


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class BaseDocument(Document):
    """Document with creation and last-update timestamps."""

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @before_event(Save, Replace)
    def touch(self) -> None:
        self.updated_at = utc_now()
