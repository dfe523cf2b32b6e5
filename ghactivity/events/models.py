"""Typed models for GitHub activity events and their projections."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

import msgspec

from ghactivity.common.slug import RepoRef, parse_repo_ref

from .accessor import get_mapping, get_string

STARRED_AT_UNKNOWN = "Unknown"


class EventEnvelope(msgspec.Struct, frozen=True, kw_only=True):
    """One raw activity event as returned by ``/users/{username}/events``.

    ``payload`` keeps the decoded JSON value untouched; its shape depends on
    ``kind`` and is only read through :mod:`ghactivity.events.accessor`.
    """

    kind: str | None = None
    repo: str | None = None
    payload: typ.Any = None
    created_at: str | None = None

    @property
    def repo_ref(self) -> RepoRef:
        """Return the parsed ``(name, owner)`` reference for ``repo``."""
        return parse_repo_ref(self.repo)


def envelope_from_raw(raw: object) -> EventEnvelope:
    """Build an envelope from one decoded event object.

    GitHub events carry ``type``, ``repo.name``, ``payload`` and
    ``created_at``. Missing or mistyped fields become ``None``; a value that
    is not an object at all yields an empty envelope.
    """
    if not isinstance(raw, cabc.Mapping):
        return EventEnvelope()
    return EventEnvelope(
        kind=get_string(raw, "type"),
        repo=get_string(get_mapping(raw, "repo"), "name"),
        payload=raw.get("payload"),
        created_at=get_string(raw, "created_at"),
    )


def envelopes_from_raw(items: cabc.Iterable[object] | None) -> list[EventEnvelope]:
    """Convert a decoded events list into envelopes, preserving order."""
    if items is None:
        return []
    return [envelope_from_raw(item) for item in items]


class _ProjectionRecord(msgspec.Struct, frozen=True, kw_only=True, rename="camel"):
    """Base for projection records; serialises with camelCase keys."""


class _RepoEventRecord(_ProjectionRecord):
    repo_name: str | None = None
    repo_owner: str | None = None


class CommitEventRecord(_RepoEventRecord):
    """Commits pushed by a single ``PushEvent``."""

    commit_count: int = 0
    pushed_at: str | None = None


class PushEventRecord(_RepoEventRecord):
    """A ``PushEvent`` summarised as one push."""

    commit_count: int = 0
    pushed_at: str | None = None


class IssueEventRecord(_RepoEventRecord):
    """An ``IssuesEvent``: issue title and the action taken."""

    issue_title: str | None = None
    action: str | None = None
    occurred_at: str | None = None


class ForkEventRecord(_RepoEventRecord):
    """A ``ForkEvent``; ``forked_repo_name`` is the new fork's full name."""

    forked_repo_name: str | None = None
    occurred_at: str | None = None


class PullRequestEventRecord(_RepoEventRecord):
    """A ``PullRequestEvent``."""

    pr_title: str | None = None
    action: str | None = None
    occurred_at: str | None = None


class ReleaseEventRecord(_RepoEventRecord):
    """A ``ReleaseEvent``."""

    release_name: str | None = None
    action: str | None = None
    occurred_at: str | None = None


class IssueCommentEventRecord(_RepoEventRecord):
    """An ``IssueCommentEvent``."""

    comment_body: str | None = None
    occurred_at: str | None = None


class PublicEventRecord(_RepoEventRecord):
    """A ``PublicEvent``: a repository was made public."""

    occurred_at: str | None = None


class DeleteEventRecord(_RepoEventRecord):
    """A ``DeleteEvent`` for a branch or tag."""

    ref_type: str | None = None
    ref: str | None = None
    occurred_at: str | None = None


class CreateEventRecord(_RepoEventRecord):
    """A ``CreateEvent`` for a repository, branch or tag."""

    ref_type: str | None = None
    ref: str | None = None
    occurred_at: str | None = None


class MemberEventRecord(_RepoEventRecord):
    """A ``MemberEvent``: a collaborator was added or changed."""

    member_login: str | None = None
    action: str | None = None
    occurred_at: str | None = None


class StarEventRecord(_RepoEventRecord):
    """A starred repository.

    The starred listing used upstream does not report when the star was
    given, so ``starred_at`` holds :data:`STARRED_AT_UNKNOWN`.
    """

    starred_at: str = STARRED_AT_UNKNOWN


class RepositoryRecord(_ProjectionRecord):
    """One entry of ``/users/{username}/repos``."""

    name: str | None = None
    full_name: str | None = None
    description: str | None = None
    language: str | None = None
    stargazers_count: int = 0
    forks_count: int = 0
    created_at: str | None = None
    updated_at: str | None = None


type EventRecord = (
    CommitEventRecord
    | PushEventRecord
    | IssueEventRecord
    | ForkEventRecord
    | PullRequestEventRecord
    | ReleaseEventRecord
    | IssueCommentEventRecord
    | PublicEventRecord
    | DeleteEventRecord
    | CreateEventRecord
    | MemberEventRecord
)

type ProjectionRecord = EventRecord | StarEventRecord | RepositoryRecord


__all__ = [
    "STARRED_AT_UNKNOWN",
    "CommitEventRecord",
    "CreateEventRecord",
    "DeleteEventRecord",
    "EventEnvelope",
    "EventRecord",
    "ForkEventRecord",
    "IssueCommentEventRecord",
    "IssueEventRecord",
    "MemberEventRecord",
    "ProjectionRecord",
    "PublicEventRecord",
    "PullRequestEventRecord",
    "PushEventRecord",
    "ReleaseEventRecord",
    "RepositoryRecord",
    "StarEventRecord",
    "envelope_from_raw",
    "envelopes_from_raw",
]
