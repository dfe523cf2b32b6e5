"""Activity service mapping user-facing views onto the event pipeline.

Each :class:`ActivityView` names one upstream listing, an optional event
kind filter, the projector that turns the selected items into records, and
the message shown when the view comes back empty.

Usage
-----
Fetch the formatted activity feed for a user::

    from ghactivity.activity import ActivityService, ActivityView
    from ghactivity.github import GitHubRestClient, GitHubRestConfig

    client = GitHubRestClient(GitHubRestConfig.from_env())
    service = ActivityService(client)
    result = await service.view("octocat", ActivityView.PUSHES)
    print(result.message or result.items)

"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import datetime as dt
import enum
import time
import typing as typ

from ghactivity.common.time import utcnow
from ghactivity.events import (
    EventKind,
    count_by_kind,
    filter_by_kind,
    format_events,
    project_comment_events,
    project_commit_events,
    project_create_events,
    project_delete_events,
    project_fork_events,
    project_issue_events,
    project_member_events,
    project_public_events,
    project_pull_request_events,
    project_push_events,
    project_release_events,
    project_repositories,
    project_starred_repositories,
)
from ghactivity.github.observability import ActivityEventLogger, FetchContext
from ghactivity.logging import get_logger, log_debug

if typ.TYPE_CHECKING:
    from ghactivity.github.client import GitHubActivitySource

logger = get_logger(__name__)


class ActivityView(enum.StrEnum):
    """User-facing views over a GitHub account's activity."""

    ACTIVITY = "activity"
    COMMITS = "commits"
    PUSHES = "pushes"
    ISSUES = "issues"
    STARS = "stars"
    FORKS = "forks"
    PULLS = "pulls"
    RELEASES = "releases"
    COMMENTS = "comments"
    PUBLIC = "public"
    DELETES = "deletes"
    CREATES = "creates"
    MEMBERS = "members"
    REPOS = "repos"


class _Source(enum.StrEnum):
    EVENTS = "events"
    STARRED = "starred"
    REPOS = "repos"


@dc.dataclass(frozen=True, slots=True)
class _ViewSpec:
    source: _Source
    project: cabc.Callable[[typ.Any], list[typ.Any]]
    empty_message: str
    kind: EventKind | None = None


def _no(what: str) -> str:
    return f"The specified user has no {what}."


_VIEWS: dict[ActivityView, _ViewSpec] = {
    ActivityView.ACTIVITY: _ViewSpec(
        _Source.EVENTS, format_events, _no("activity events")
    ),
    ActivityView.COMMITS: _ViewSpec(
        _Source.EVENTS, project_commit_events, _no("commit events"), EventKind.PUSH
    ),
    ActivityView.PUSHES: _ViewSpec(
        _Source.EVENTS, project_push_events, _no("push events"), EventKind.PUSH
    ),
    ActivityView.ISSUES: _ViewSpec(
        _Source.EVENTS, project_issue_events, _no("opened issues"), EventKind.ISSUES
    ),
    ActivityView.STARS: _ViewSpec(
        _Source.STARRED, project_starred_repositories, _no("starred repositories")
    ),
    ActivityView.FORKS: _ViewSpec(
        _Source.EVENTS, project_fork_events, _no("fork events"), EventKind.FORK
    ),
    ActivityView.PULLS: _ViewSpec(
        _Source.EVENTS,
        project_pull_request_events,
        _no("pull request events"),
        EventKind.PULL_REQUEST,
    ),
    ActivityView.RELEASES: _ViewSpec(
        _Source.EVENTS,
        project_release_events,
        _no("release events"),
        EventKind.RELEASE,
    ),
    ActivityView.COMMENTS: _ViewSpec(
        _Source.EVENTS,
        project_comment_events,
        _no("issue comment events"),
        EventKind.ISSUE_COMMENT,
    ),
    ActivityView.PUBLIC: _ViewSpec(
        _Source.EVENTS, project_public_events, _no("public events"), EventKind.PUBLIC
    ),
    ActivityView.DELETES: _ViewSpec(
        _Source.EVENTS, project_delete_events, _no("delete events"), EventKind.DELETE
    ),
    ActivityView.CREATES: _ViewSpec(
        _Source.EVENTS, project_create_events, _no("create events"), EventKind.CREATE
    ),
    ActivityView.MEMBERS: _ViewSpec(
        _Source.EVENTS, project_member_events, _no("member events"), EventKind.MEMBER
    ),
    ActivityView.REPOS: _ViewSpec(
        _Source.REPOS, project_repositories, _no("public repositories")
    ),
}


def empty_message_for(view: ActivityView) -> str:
    """Return the message shown when ``view`` has no items."""
    return _VIEWS[view].empty_message


@dc.dataclass(frozen=True, slots=True)
class ActivityResult:
    """Items produced for one view of one user.

    Attributes
    ----------
    view
        The view that produced the items.
    username
        The GitHub login the items belong to.
    items
        Formatted strings for :attr:`ActivityView.ACTIVITY`, projection
        records for every other view. Order follows the upstream listing.
    empty_message
        Message describing an empty result for this view.

    """

    view: ActivityView
    username: str
    items: list[typ.Any]
    empty_message: str

    @property
    def is_empty(self) -> bool:
        """Return True when the view produced no items."""
        return not self.items

    @property
    def message(self) -> str | None:
        """Return the empty message when there are no items, else None."""
        return self.empty_message if self.is_empty else None


class ActivityService:
    """Fetch, classify and project a user's activity per view."""

    def __init__(
        self,
        source: GitHubActivitySource,
        *,
        event_logger: ActivityEventLogger | None = None,
    ) -> None:
        """Bind the service to an activity source and event logger."""
        self._source = source
        self._event_logger = event_logger or ActivityEventLogger()

    async def activity(self, username: str, *, colour: bool = False) -> ActivityResult:
        """Return one formatted line per recent event of ``username``."""
        return await self._run(
            username,
            ActivityView.ACTIVITY,
            lambda envelopes: format_events(envelopes, colour=colour),
        )

    async def view(self, username: str, view: ActivityView | str) -> ActivityResult:
        """Return the items of ``view`` for ``username``.

        Raises
        ------
        ValueError
            If ``view`` is not a known :class:`ActivityView` value.

        """
        selected = ActivityView(view)
        return await self._run(username, selected, _VIEWS[selected].project)

    async def _run(
        self,
        username: str,
        view: ActivityView,
        project: cabc.Callable[[typ.Any], list[typ.Any]],
    ) -> ActivityResult:
        spec = _VIEWS[view]
        context = FetchContext(username=username, view=view, started_at=utcnow())
        self._event_logger.log_fetch_started(context)
        started = time.monotonic()
        try:
            raw = await self._fetch(spec.source, username)
        except Exception as exc:
            duration = dt.timedelta(seconds=time.monotonic() - started)
            self._event_logger.log_fetch_failed(context, exc, duration)
            raise

        if spec.source is _Source.EVENTS:
            log_debug(
                logger,
                "username=%s view=%s kinds=%s",
                username,
                view,
                count_by_kind(raw),
            )
        selected = filter_by_kind(raw, spec.kind) if spec.kind is not None else raw
        items = project(selected)
        self._event_logger.log_fetch_completed(
            context,
            fetched=len(raw),
            returned=len(items),
            duration=dt.timedelta(seconds=time.monotonic() - started),
        )
        return ActivityResult(
            view=view,
            username=username,
            items=items,
            empty_message=spec.empty_message,
        )

    async def _fetch(self, source: _Source, username: str) -> list[typ.Any]:
        match source:
            case _Source.STARRED:
                return await self._source.fetch_starred(username)
            case _Source.REPOS:
                return await self._source.fetch_repositories(username)
            case _:
                return await self._source.fetch_user_events(username)


__all__ = ["ActivityResult", "ActivityService", "ActivityView", "empty_message_for"]
