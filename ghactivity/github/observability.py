"""Observability primitives for activity fetches.

Provides error categorisation and structured log events for each request a
user view makes against GitHub. Events are single pre-formatted lines with
``key=value`` pairs suitable for parsing by log aggregators.
"""

from __future__ import annotations

import dataclasses
import enum
import typing as typ

from ghactivity.logging import get_logger, log_error, log_info

from .errors import (
    GitHubAPIError,
    GitHubConfigError,
    GitHubResponseShapeError,
    GitHubTransportError,
    InvalidUsernameError,
    SubjectNotFoundError,
)

if typ.TYPE_CHECKING:
    import datetime as dt

logger = get_logger(__name__)

# HTTP status code threshold for server errors (5xx)
_HTTP_SERVER_ERROR_THRESHOLD = 500


class ActivityEventType(enum.StrEnum):
    """Structured log event types for activity fetches."""

    FETCH_STARTED = "activity.fetch.started"
    FETCH_COMPLETED = "activity.fetch.completed"
    FETCH_FAILED = "activity.fetch.failed"


class ErrorCategory(enum.StrEnum):
    """Categories for classifying fetch failures."""

    NOT_FOUND = "not_found"
    RATE_LIMITED = "rate_limited"
    TRANSIENT = "transient"
    CLIENT_ERROR = "client_error"
    TRANSPORT = "transport"
    SCHEMA_DRIFT = "schema_drift"
    INVALID_INPUT = "invalid_input"
    CONFIGURATION = "configuration"
    UNKNOWN = "unknown"


@dataclasses.dataclass(frozen=True, slots=True)
class FetchContext:
    """Shared context for a single view fetch."""

    username: str
    view: str
    started_at: dt.datetime


_EXCEPTION_CATEGORY_MAP: tuple[tuple[type[BaseException], ErrorCategory], ...] = (
    (SubjectNotFoundError, ErrorCategory.NOT_FOUND),
    (GitHubTransportError, ErrorCategory.TRANSPORT),
    (GitHubResponseShapeError, ErrorCategory.SCHEMA_DRIFT),
    (InvalidUsernameError, ErrorCategory.INVALID_INPUT),
    (GitHubConfigError, ErrorCategory.CONFIGURATION),
)


def categorize_error(exc: BaseException) -> ErrorCategory:
    """Categorize an exception for log routing.

    Returns:
        ErrorCategory indicating the type of failure.

    """
    for exc_type, category in _EXCEPTION_CATEGORY_MAP:
        if isinstance(exc, exc_type):
            return category

    # Remaining API errors split on rate limiting and status class
    if isinstance(exc, GitHubAPIError):
        if exc.rate_limited:
            return ErrorCategory.RATE_LIMITED
        if (
            exc.status_code is not None
            and exc.status_code >= _HTTP_SERVER_ERROR_THRESHOLD
        ):
            return ErrorCategory.TRANSIENT
        return ErrorCategory.CLIENT_ERROR

    return ErrorCategory.UNKNOWN


class ActivityEventLogger:
    """Emit structured activity fetch events via femtologging."""

    def log_fetch_started(self, context: FetchContext) -> None:
        """Log the start of a view fetch."""
        log_info(
            logger,
            "[%s] username=%s view=%s started_at=%s",
            ActivityEventType.FETCH_STARTED,
            context.username,
            context.view,
            context.started_at.isoformat(),
        )

    def log_fetch_completed(
        self,
        context: FetchContext,
        *,
        fetched: int,
        returned: int,
        duration: dt.timedelta,
    ) -> None:
        """Log a completed fetch with upstream and projected item counts."""
        log_info(
            logger,
            "[%s] username=%s view=%s duration_seconds=%.3f "
            "items_fetched=%d items_returned=%d",
            ActivityEventType.FETCH_COMPLETED,
            context.username,
            context.view,
            duration.total_seconds(),
            fetched,
            returned,
        )

    def log_fetch_failed(
        self,
        context: FetchContext,
        error: BaseException,
        duration: dt.timedelta,
    ) -> None:
        """Log a failed fetch with error categorisation."""
        log_error(
            logger,
            "[%s] username=%s view=%s duration_seconds=%.3f "
            "error_type=%s error_category=%s error_message=%s",
            ActivityEventType.FETCH_FAILED,
            context.username,
            context.view,
            duration.total_seconds(),
            type(error).__name__,
            categorize_error(error),
            str(error),
            exc_info=error,
        )
