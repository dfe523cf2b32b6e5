"""Behavioural coverage for the activity feed over HTTP."""

from __future__ import annotations

import typing as typ

import falcon.testing
import httpx
import pytest
from pytest_bdd import given, parsers, scenario, then, when

from ghactivity.activity import ActivityService
from ghactivity.api.app import AppDependencies, create_app
from ghactivity.github import GitHubRestClient, GitHubRestConfig
from tests.helpers.event_builders import push_event, raw_event, watch_event

if typ.TYPE_CHECKING:
    from falcon.testing.client import Result

_FEATURE = "../activity_feed.feature"


class FeedContext(typ.TypedDict, total=False):
    """Shared mutable scenario state."""

    username: str
    events: list[typ.Any]
    status: int
    headers: dict[str, str]
    response: Result


@scenario(_FEATURE, "Pushes are projected into records")
def test_pushes_are_projected() -> None:
    """Wrap the pytest-bdd scenario for push projection."""


@scenario(_FEATURE, "A malformed push payload counts zero commits")
def test_malformed_push_payload() -> None:
    """Wrap the pytest-bdd scenario for malformed push payloads."""


@scenario(_FEATURE, "The activity feed names starred repositories by short name")
def test_activity_feed_names_stars() -> None:
    """Wrap the pytest-bdd scenario for star rendering."""


@scenario(_FEATURE, "A view without matching events explains why it is empty")
def test_empty_view_message() -> None:
    """Wrap the pytest-bdd scenario for empty views."""


@scenario(_FEATURE, "An unknown user is reported as not found")
def test_unknown_user() -> None:
    """Wrap the pytest-bdd scenario for missing users."""


@scenario(_FEATURE, "An exhausted rate limit is reported as an upstream error")
def test_rate_limited() -> None:
    """Wrap the pytest-bdd scenario for rate limiting."""


@pytest.fixture
def feed_context() -> FeedContext:
    """Start each scenario with an empty, successful GitHub listing."""
    return {"events": [], "status": 200, "headers": {}}


def _client_for(context: FeedContext) -> falcon.testing.TestClient:
    def _handler(request: httpx.Request) -> httpx.Response:
        if context["status"] != 200:  # noqa: PLR2004 - HTTP OK
            return httpx.Response(
                context["status"], json={"message": "error"}, headers=context["headers"]
            )
        assert request.url.path.endswith("/events"), request.url.path
        return httpx.Response(200, json=context["events"])

    http_client = httpx.AsyncClient(transport=httpx.MockTransport(_handler))
    rest_client = GitHubRestClient(
        GitHubRestConfig(base_url="https://github.test"), http_client=http_client
    )
    deps = AppDependencies(service=ActivityService(rest_client), client=rest_client)
    return falcon.testing.TestClient(create_app(deps))


@given(
    parsers.parse(
        'GitHub lists a push of {size:d} commits to "{repo}" for "{username}"'
    )
)
def given_push(
    feed_context: FeedContext, size: int, repo: str, username: str
) -> None:
    """Queue a push event with ``size`` commits."""
    feed_context["username"] = username
    feed_context["events"].append(
        push_event(repo, size=size, created_at="2025-01-01T00:00:00Z")
    )


@given(
    parsers.parse(
        'GitHub lists a push with payload "{payload}" to "{repo}" for "{username}"'
    )
)
def given_malformed_push(
    feed_context: FeedContext, payload: str, repo: str, username: str
) -> None:
    """Queue a push event whose payload is a bare string."""
    feed_context["username"] = username
    feed_context["events"].append(raw_event("PushEvent", repo, payload))


@given(parsers.parse('GitHub lists a star of "{repo}" for "{username}"'))
def given_star(feed_context: FeedContext, repo: str, username: str) -> None:
    """Queue a watch event."""
    feed_context["username"] = username
    feed_context["events"].append(watch_event(repo))


@given(parsers.parse('GitHub does not know the user "{username}"'))
def given_unknown_user(feed_context: FeedContext, username: str) -> None:
    """Make GitHub answer 404."""
    feed_context["username"] = username
    feed_context["status"] = 404


@given("GitHub has exhausted the rate limit")
def given_rate_limited(feed_context: FeedContext) -> None:
    """Make GitHub answer 403 with no remaining quota."""
    feed_context["status"] = 403
    feed_context["headers"] = {"X-RateLimit-Remaining": "0"}


@when(parsers.parse("I request GET {path}"))
def when_request_get(feed_context: FeedContext, path: str) -> None:
    """Issue a GET request against the app wired to the mocked GitHub."""
    feed_context["response"] = _client_for(feed_context).simulate_get(path)


@then(parsers.parse("the response status is {status:d}"))
def then_response_status(feed_context: FeedContext, status: int) -> None:
    """Assert the HTTP response status code."""
    response = feed_context["response"]
    assert response.status_code == status, (
        f"expected status {status}, got {response.status_code}: {response.text}"
    )


@then(
    parsers.parse(
        'the first record has repoName "{name}", repoOwner "{owner}" '
        "and commitCount {count:d}"
    )
)
def then_first_record(
    feed_context: FeedContext, name: str, owner: str, count: int
) -> None:
    """Assert the repository reference and commit count of the first record."""
    record = feed_context["response"].json["items"][0]
    assert (record["repoName"], record["repoOwner"], record["commitCount"]) == (
        name,
        owner,
        count,
    )


@then(parsers.parse('the activity contains "{line}"'))
def then_activity_contains(feed_context: FeedContext, line: str) -> None:
    """Assert one activity line contains ``line``."""
    items = feed_context["response"].json["items"]
    assert any(line in item for item in items), f"{line!r} not in {items!r}"


@then(parsers.parse('the response message is "{message}"'))
def then_response_message(feed_context: FeedContext, message: str) -> None:
    """Assert the empty-view message."""
    body = feed_context["response"].json
    assert body["items"] == []
    assert body["message"] == message
