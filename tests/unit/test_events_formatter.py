"""Unit tests for activity line formatting."""

from __future__ import annotations

import pytest

from ghactivity.events import UNKNOWN_EVENT, EventEnvelope, format_event, format_events
from ghactivity.events.formatter import AnsiStyle, Icon


class TestFormatEvent:
    """Plain-text rendering per kind."""

    @pytest.mark.parametrize(
        ("kind", "payload", "expected"),
        [
            (
                "PushEvent",
                {"size": 3},
                "Pushed 3 commits to reef -> 2025-01-01T00:00:00Z",
            ),
            ("WatchEvent", None, "Starred reef"),
            ("IssuesEvent", {"action": "opened"}, "Opened an issue in reef"),
            ("ForkEvent", None, "Forked reef"),
            ("PullRequestEvent", None, "Created a pull request in reef"),
            ("GollumEvent", None, "GollumEvent on reef"),
            (None, None, "Event on reef"),
        ],
    )
    def test_renders_known_and_unknown_kinds(
        self, kind: str | None, payload: object, expected: str
    ) -> None:
        """Each kind uses its rule; unknown kinds use the generic line."""
        envelope = EventEnvelope(
            kind=kind,
            repo="octo/reef",
            payload=payload,
            created_at="2025-01-01T00:00:00Z",
        )
        assert format_event(envelope) == expected

    def test_watch_event_names_short_repo(self) -> None:
        """A star on a/b renders with the short name."""
        assert "Starred b" in format_event(EventEnvelope(kind="WatchEvent", repo="a/b"))

    def test_push_with_malformed_payload_counts_zero(self) -> None:
        """The push rule shares the push extractor's default of 0."""
        envelope = EventEnvelope(
            kind="PushEvent", repo="u/r", payload="not-a-structure"
        )
        assert format_event(envelope).startswith("Pushed 0 commits to r")

    def test_repo_without_separator_renders_verbatim(self) -> None:
        """A repo identifier without an owner is used as-is."""
        envelope = EventEnvelope(kind="ForkEvent", repo="reef")
        assert format_event(envelope) == "Forked reef"

    @pytest.mark.parametrize(
        "envelope",
        [None, EventEnvelope(), EventEnvelope(kind="PushEvent", payload={"size": 1})],
    )
    def test_absent_envelope_or_repo_is_unknown(
        self, envelope: EventEnvelope | None
    ) -> None:
        """Absent envelopes and repos render the fixed sentinel."""
        assert format_event(envelope) == UNKNOWN_EVENT == "Unknown event"


class TestColouredOutput:
    """ANSI rendering used by the command line."""

    def test_colour_wraps_text_and_keeps_suffix_outside(self) -> None:
        """Push lines are styled with the timestamp after the reset code."""
        envelope = EventEnvelope(
            kind="PushEvent", repo="o/r", payload={"size": 1}, created_at="T"
        )
        line = format_event(envelope, colour=True)
        assert line == (
            f"{AnsiStyle.BOLD_GREEN}{Icon.PUSH}Pushed 1 commits to r"
            f"{AnsiStyle.RESET} -> T"
        )

    def test_unknown_event_is_red(self) -> None:
        """The sentinel is styled red when colour is on."""
        assert format_event(None, colour=True) == (
            f"{AnsiStyle.RED}{UNKNOWN_EVENT}{AnsiStyle.RESET}"
        )

    def test_generic_rule_uses_default_icon(self) -> None:
        """Unknown kinds use the default icon and white style."""
        line = format_event(EventEnvelope(kind="GollumEvent", repo="o/r"), colour=True)
        assert line.startswith(f"{AnsiStyle.WHITE}{Icon.DEFAULT}")


def test_format_events_preserves_order_and_handles_none() -> None:
    """Every envelope renders to one line, in input order."""
    envelopes = [
        EventEnvelope(kind="WatchEvent", repo="a/b"),
        None,
        EventEnvelope(kind="ForkEvent", repo="c/d"),
    ]
    assert format_events(envelopes) == ["Starred b", UNKNOWN_EVENT, "Forked d"]
    assert format_events(None) == []
