"""GitHub REST ingestion client and error taxonomy."""

from __future__ import annotations

from .client import GitHubActivitySource, GitHubRestClient, GitHubRestConfig
from .errors import (
    GitHubAPIError,
    GitHubConfigError,
    GitHubResponseShapeError,
    GitHubTransportError,
    InvalidUsernameError,
    SubjectNotFoundError,
)
from .observability import (
    ActivityEventLogger,
    ActivityEventType,
    ErrorCategory,
    FetchContext,
    categorize_error,
)

__all__ = [
    "ActivityEventLogger",
    "ActivityEventType",
    "ErrorCategory",
    "FetchContext",
    "GitHubAPIError",
    "GitHubActivitySource",
    "GitHubConfigError",
    "GitHubResponseShapeError",
    "GitHubRestClient",
    "GitHubRestConfig",
    "GitHubTransportError",
    "InvalidUsernameError",
    "SubjectNotFoundError",
    "categorize_error",
]
