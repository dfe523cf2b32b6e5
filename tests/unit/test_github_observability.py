"""Unit tests for activity fetch observability."""

from __future__ import annotations

import datetime as dt

import httpx
import pytest

from ghactivity.github.errors import (
    GitHubAPIError,
    GitHubConfigError,
    GitHubResponseShapeError,
    GitHubTransportError,
    InvalidUsernameError,
    SubjectNotFoundError,
)
from ghactivity.github.observability import (
    ActivityEventLogger,
    ActivityEventType,
    ErrorCategory,
    FetchContext,
    categorize_error,
)
from tests.helpers.femtologging_capture import capture_femto_logs

_LOGGER_NAME = "ghactivity.github.observability"


class TestCategorizeError:
    """Tests for error categorization."""

    @pytest.mark.parametrize(
        ("exc", "expected"),
        [
            (SubjectNotFoundError("ghost"), ErrorCategory.NOT_FOUND),
            (GitHubAPIError.http_error(502), ErrorCategory.TRANSIENT),
            (GitHubAPIError.http_error(503), ErrorCategory.TRANSIENT),
            (GitHubAPIError.http_error(422), ErrorCategory.CLIENT_ERROR),
            (GitHubAPIError.http_error(403), ErrorCategory.CLIENT_ERROR),
            (
                GitHubAPIError.http_error(403, remaining="0"),
                ErrorCategory.RATE_LIMITED,
            ),
            (
                GitHubAPIError.http_error(429, remaining="0"),
                ErrorCategory.RATE_LIMITED,
            ),
            (
                GitHubTransportError.from_exception(httpx.ReadTimeout("slow")),
                ErrorCategory.TRANSPORT,
            ),
            (
                GitHubResponseShapeError.expected_list("events"),
                ErrorCategory.SCHEMA_DRIFT,
            ),
            (InvalidUsernameError("../x"), ErrorCategory.INVALID_INPUT),
            (GitHubConfigError.empty_base_url(), ErrorCategory.CONFIGURATION),
            (RuntimeError("boom"), ErrorCategory.UNKNOWN),
        ],
    )
    def test_categorize(self, exc: BaseException, expected: ErrorCategory) -> None:
        """Each ingestion error maps to one category."""
        assert categorize_error(exc) == expected, f"wrong category for {exc!r}"


@pytest.fixture
def context() -> FetchContext:
    """Return a fetch context for octocat's push view."""
    return FetchContext(
        username="octocat",
        view="pushes",
        started_at=dt.datetime(2025, 1, 1, tzinfo=dt.UTC),
    )


class TestActivityEventLogger:
    """Structured log lines emitted for each fetch."""

    def test_log_fetch_started(self, context: FetchContext) -> None:
        """Start events carry the username and view."""
        with capture_femto_logs(_LOGGER_NAME) as capture:
            ActivityEventLogger().log_fetch_started(context)

        capture.wait_for_count(1)
        record = capture.records[0]
        assert record.level == "INFO"
        assert ActivityEventType.FETCH_STARTED in record.message
        assert "username=octocat" in record.message
        assert "view=pushes" in record.message

    def test_log_fetch_completed_includes_counts(self, context: FetchContext) -> None:
        """Completion events report fetched and returned counts."""
        with capture_femto_logs(_LOGGER_NAME) as capture:
            ActivityEventLogger().log_fetch_completed(
                context,
                fetched=30,
                returned=4,
                duration=dt.timedelta(milliseconds=1500),
            )

        capture.wait_for_count(1)
        message = capture.records[0].message
        assert ActivityEventType.FETCH_COMPLETED in message
        assert "items_fetched=30" in message
        assert "items_returned=4" in message
        assert "duration_seconds=1.500" in message

    def test_log_fetch_failed_includes_category(self, context: FetchContext) -> None:
        """Failure events log at ERROR with the error category."""
        error = GitHubAPIError.http_error(429, remaining="0")
        with capture_femto_logs(_LOGGER_NAME) as capture:
            ActivityEventLogger().log_fetch_failed(
                context, error, dt.timedelta(seconds=1)
            )

        capture.wait_for_count(1)
        record = capture.records[0]
        assert record.level == "ERROR"
        assert ActivityEventType.FETCH_FAILED in record.message
        assert "error_type=GitHubAPIError" in record.message
        assert "error_category=rate_limited" in record.message
