"""User-facing activity views over the event pipeline."""

from __future__ import annotations

from .service import ActivityResult, ActivityService, ActivityView, empty_message_for

__all__ = ["ActivityResult", "ActivityService", "ActivityView", "empty_message_for"]
