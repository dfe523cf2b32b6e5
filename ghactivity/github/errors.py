"""GitHub ingestion errors."""

from __future__ import annotations

_RATE_LIMIT_STATUSES = frozenset({403, 429})


class GitHubAPIError(RuntimeError):
    """Raised when GitHub returns an error response."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        rate_limited: bool = False,
    ) -> None:
        """Initialise with a message, HTTP status code and rate-limit flag."""
        self.status_code = status_code
        self.rate_limited = rate_limited
        super().__init__(message)

    @classmethod
    def http_error(
        cls, status_code: int, *, remaining: str | None = None
    ) -> GitHubAPIError:
        """Return an error for non-2xx HTTP responses.

        ``remaining`` is the ``X-RateLimit-Remaining`` header; a value of
        ``"0"`` on a 403 or 429 marks the error as a rate-limit rejection.
        """
        rate_limited = status_code in _RATE_LIMIT_STATUSES and remaining == "0"
        if rate_limited:
            return cls(
                f"GitHub API rate limit exceeded (HTTP {status_code})",
                status_code=status_code,
                rate_limited=True,
            )
        return cls(f"GitHub API error: HTTP {status_code}", status_code=status_code)


class SubjectNotFoundError(GitHubAPIError):
    """Raised when the requested GitHub user does not exist."""

    def __init__(self, username: str) -> None:
        """Initialise with the username that GitHub could not find."""
        self.username = username
        super().__init__(f"User not found: {username}", status_code=404)


class GitHubTransportError(RuntimeError):
    """Raised when the GitHub API cannot be reached."""

    @classmethod
    def from_exception(cls, exc: Exception) -> GitHubTransportError:
        """Wrap a transport-level exception raised by the HTTP client."""
        return cls(f"GitHub API request failed: {exc}")


class GitHubResponseShapeError(RuntimeError):
    """Raised when GitHub responses do not have the expected JSON shape."""

    @classmethod
    def expected_list(cls, resource: str) -> GitHubResponseShapeError:
        """Return an error for a listing endpoint that did not return a list."""
        return cls(f"GitHub response for {resource} is not a JSON array")

    @classmethod
    def invalid_json(cls, resource: str) -> GitHubResponseShapeError:
        """Return an error for a response body that is not valid JSON."""
        return cls(f"GitHub response for {resource} is not valid JSON")


class GitHubConfigError(RuntimeError):
    """Raised when GitHub client configuration is invalid."""

    @classmethod
    def invalid_timeout(cls, raw: str) -> GitHubConfigError:
        """Return an error for a non-positive or non-numeric timeout."""
        return cls(
            f"GHACTIVITY_GITHUB_TIMEOUT_S must be a positive number, got: {raw!r}"
        )

    @classmethod
    def empty_base_url(cls) -> GitHubConfigError:
        """Return an error when the API base URL is blank."""
        return cls("GitHub API base URL must be non-empty")


class InvalidUsernameError(ValueError):
    """Raised when a username cannot be a GitHub login."""

    def __init__(self, username: str) -> None:
        """Initialise with the rejected username."""
        self.username = username
        super().__init__(f"Invalid GitHub username: {username!r}")
