"""GitHub activity projection and formatting."""

from __future__ import annotations

from ghactivity.events import (
    EventEnvelope,
    EventKind,
    filter_by_kind,
    format_event,
)

__all__ = ["EventEnvelope", "EventKind", "filter_by_kind", "format_event"]
