"""GitHub REST client for user activity listings."""

from __future__ import annotations

import dataclasses
import os
import re
import typing as typ

import httpx
import msgspec

from ghactivity.events.models import EventEnvelope, envelopes_from_raw

from .errors import (
    GitHubAPIError,
    GitHubConfigError,
    GitHubResponseShapeError,
    GitHubTransportError,
    InvalidUsernameError,
    SubjectNotFoundError,
)


class GitHubActivitySource(typ.Protocol):
    """Interface for fetching a user's public GitHub activity."""

    async def fetch_user_events(self, username: str) -> list[EventEnvelope]:
        """Return the user's recent events, newest first."""
        ...

    async def fetch_starred(self, username: str) -> list[typ.Any]:
        """Return the raw repository objects the user has starred."""
        ...

    async def fetch_repositories(self, username: str) -> list[typ.Any]:
        """Return the raw repository objects the user owns."""
        ...


_DEFAULT_BASE_URL = "https://api.github.com"
_DEFAULT_TIMEOUT_S = 20.0


@dataclasses.dataclass(frozen=True, slots=True)
class GitHubRestConfig:
    """Configuration for the GitHub REST API client.

    The events, starred and repos listings are public, so ``token`` is
    optional; supplying one raises the upstream rate limit.
    """

    token: str | None = None
    base_url: str = _DEFAULT_BASE_URL
    timeout_s: float = _DEFAULT_TIMEOUT_S
    user_agent: str = "ghactivity/0.1"

    @classmethod
    def from_env(cls) -> GitHubRestConfig:
        """Build configuration from ``GHACTIVITY_GITHUB_*`` variables.

        - ``GHACTIVITY_GITHUB_TOKEN``: optional bearer token.
        - ``GHACTIVITY_GITHUB_API_URL``: API base URL.
        - ``GHACTIVITY_GITHUB_TIMEOUT_S``: request timeout in seconds.

        Raises
        ------
        GitHubConfigError
            If the timeout is not a positive number.

        """
        token = os.environ.get("GHACTIVITY_GITHUB_TOKEN", "").strip() or None
        base_url = (
            os.environ.get("GHACTIVITY_GITHUB_API_URL", "").strip() or _DEFAULT_BASE_URL
        )
        raw_timeout = os.environ.get("GHACTIVITY_GITHUB_TIMEOUT_S", "").strip()
        timeout_s = _parse_timeout(raw_timeout) if raw_timeout else _DEFAULT_TIMEOUT_S
        return cls(token=token, base_url=base_url, timeout_s=timeout_s)


def _parse_timeout(raw: str) -> float:
    try:
        value = float(raw)
    except ValueError as exc:
        raise GitHubConfigError.invalid_timeout(raw) from exc
    if not value > 0:
        raise GitHubConfigError.invalid_timeout(raw)
    return value


# GitHub logins are alphanumeric with single hyphens; app accounts end in [bot].
_USERNAME_PATTERN = re.compile(r"[A-Za-z0-9](?:[A-Za-z0-9-]{0,38})(?:\[bot\])?")
_HTTP_NOT_FOUND = 404
_HTTP_ERROR_STATUS_THRESHOLD = 400


def _validate_username(username: str) -> str:
    if not _USERNAME_PATTERN.fullmatch(username):
        raise InvalidUsernameError(username)
    return username


class GitHubRestClient:
    """GitHub REST implementation of :class:`GitHubActivitySource`."""

    def __init__(
        self,
        config: GitHubRestConfig,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialise the client with the provided API configuration."""
        if not config.base_url.strip():
            raise GitHubConfigError.empty_base_url()

        self._config = config
        self._base_url = config.base_url.rstrip("/")
        self._headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
            "User-Agent": config.user_agent,
        }
        if config.token:
            self._headers["Authorization"] = f"Bearer {config.token}"
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=config.timeout_s)

    async def aclose(self) -> None:
        """Close any owned HTTP resources."""
        if self._owns_client:
            await self._client.aclose()

    async def fetch_user_events(self, username: str) -> list[EventEnvelope]:
        """Fetch ``/users/{username}/events`` as envelopes."""
        items = await self._get_list(username, "events")
        return envelopes_from_raw(items)

    async def fetch_starred(self, username: str) -> list[typ.Any]:
        """Fetch ``/users/{username}/starred``."""
        return await self._get_list(username, "starred")

    async def fetch_repositories(self, username: str) -> list[typ.Any]:
        """Fetch ``/users/{username}/repos``."""
        return await self._get_list(username, "repos")

    async def _get_list(self, username: str, resource: str) -> list[typ.Any]:
        """GET a user listing and return the decoded JSON array.

        Raises
        ------
        InvalidUsernameError
            If ``username`` is not a valid GitHub login.
        SubjectNotFoundError
            If GitHub answers 404 for the user.
        GitHubAPIError
            For any other HTTP error status.
        GitHubTransportError
            If the request could not be completed.
        GitHubResponseShapeError
            If the body is not a JSON array.

        """
        login = _validate_username(username)
        url = f"{self._base_url}/users/{login}/{resource}"
        try:
            response = await self._client.get(url, headers=self._headers)
        except httpx.HTTPError as exc:
            raise GitHubTransportError.from_exception(exc) from exc

        if response.status_code == _HTTP_NOT_FOUND:
            raise SubjectNotFoundError(login)
        if response.status_code >= _HTTP_ERROR_STATUS_THRESHOLD:
            raise GitHubAPIError.http_error(
                response.status_code,
                remaining=response.headers.get("X-RateLimit-Remaining"),
            )

        try:
            body = msgspec.json.decode(response.content)
        except msgspec.DecodeError as exc:
            raise GitHubResponseShapeError.invalid_json(resource) from exc
        if not isinstance(body, list):
            raise GitHubResponseShapeError.expected_list(resource)
        return body
