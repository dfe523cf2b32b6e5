"""Projection of activity envelopes and listings into typed records.

Every projector maps its input one-to-one and in order. Projectors never
filter by kind themselves; callers pass envelopes already selected with
:func:`ghactivity.events.classification.filter_by_kind`. Payload fields are
read through the shared extraction table, so a malformed payload only ever
produces default field values.
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses
import typing as typ

from ghactivity.common.slug import parse_repo_ref

from .accessor import get_int, get_string
from .classification import EventKind
from .extraction import get_extractor
from .models import (
    CommitEventRecord,
    CreateEventRecord,
    DeleteEventRecord,
    EventEnvelope,
    ForkEventRecord,
    IssueCommentEventRecord,
    IssueEventRecord,
    MemberEventRecord,
    PublicEventRecord,
    PullRequestEventRecord,
    PushEventRecord,
    ReleaseEventRecord,
    RepositoryRecord,
    StarEventRecord,
)

if typ.TYPE_CHECKING:
    from .models import EventRecord

type Envelopes = cabc.Iterable[EventEnvelope | None] | None
type Listing = cabc.Iterable[object] | None


@dataclasses.dataclass(frozen=True, slots=True)
class _ProjectionSpec:
    """How one record type is built from an envelope of ``kind``."""

    kind: EventKind
    record_type: type[EventRecord]
    time_field: str = "occurred_at"


_COMMIT = _ProjectionSpec(EventKind.PUSH, CommitEventRecord, "pushed_at")
_PUSH = _ProjectionSpec(EventKind.PUSH, PushEventRecord, "pushed_at")
_ISSUE = _ProjectionSpec(EventKind.ISSUES, IssueEventRecord)
_FORK = _ProjectionSpec(EventKind.FORK, ForkEventRecord)
_PULL_REQUEST = _ProjectionSpec(EventKind.PULL_REQUEST, PullRequestEventRecord)
_RELEASE = _ProjectionSpec(EventKind.RELEASE, ReleaseEventRecord)
_COMMENT = _ProjectionSpec(EventKind.ISSUE_COMMENT, IssueCommentEventRecord)
_PUBLIC = _ProjectionSpec(EventKind.PUBLIC, PublicEventRecord)
_DELETE = _ProjectionSpec(EventKind.DELETE, DeleteEventRecord)
_CREATE = _ProjectionSpec(EventKind.CREATE, CreateEventRecord)
_MEMBER = _ProjectionSpec(EventKind.MEMBER, MemberEventRecord)


def _project_envelope(
    envelope: EventEnvelope | None, spec: _ProjectionSpec
) -> EventRecord:
    if envelope is None:
        return spec.record_type()
    ref = envelope.repo_ref
    extractor = get_extractor(spec.kind)
    fields = extractor(envelope.payload) if extractor is not None else {}
    fields[spec.time_field] = envelope.created_at
    return spec.record_type(repo_name=ref.name, repo_owner=ref.owner, **fields)


def _project_all(envelopes: Envelopes, spec: _ProjectionSpec) -> list[typ.Any]:
    if envelopes is None:
        return []
    return [_project_envelope(envelope, spec) for envelope in envelopes]


def project_commit_events(envelopes: Envelopes) -> list[CommitEventRecord]:
    """Project push envelopes into commit records."""
    return _project_all(envelopes, _COMMIT)


def project_push_events(envelopes: Envelopes) -> list[PushEventRecord]:
    """Project push envelopes into push records."""
    return _project_all(envelopes, _PUSH)


def project_issue_events(envelopes: Envelopes) -> list[IssueEventRecord]:
    """Project issues envelopes into issue records."""
    return _project_all(envelopes, _ISSUE)


def project_fork_events(envelopes: Envelopes) -> list[ForkEventRecord]:
    """Project fork envelopes into fork records."""
    return _project_all(envelopes, _FORK)


def project_pull_request_events(
    envelopes: Envelopes,
) -> list[PullRequestEventRecord]:
    """Project pull request envelopes into pull request records."""
    return _project_all(envelopes, _PULL_REQUEST)


def project_release_events(envelopes: Envelopes) -> list[ReleaseEventRecord]:
    """Project release envelopes into release records."""
    return _project_all(envelopes, _RELEASE)


def project_comment_events(envelopes: Envelopes) -> list[IssueCommentEventRecord]:
    """Project issue comment envelopes into comment records."""
    return _project_all(envelopes, _COMMENT)


def project_public_events(envelopes: Envelopes) -> list[PublicEventRecord]:
    """Project public envelopes into public records."""
    return _project_all(envelopes, _PUBLIC)


def project_delete_events(envelopes: Envelopes) -> list[DeleteEventRecord]:
    """Project delete envelopes into delete records."""
    return _project_all(envelopes, _DELETE)


def project_create_events(envelopes: Envelopes) -> list[CreateEventRecord]:
    """Project create envelopes into create records."""
    return _project_all(envelopes, _CREATE)


def project_member_events(envelopes: Envelopes) -> list[MemberEventRecord]:
    """Project member envelopes into member records."""
    return _project_all(envelopes, _MEMBER)


def _mappings(listing: Listing) -> cabc.Iterator[cabc.Mapping[str, typ.Any]]:
    for item in listing or ():
        if isinstance(item, cabc.Mapping):
            yield item


def project_starred_repositories(listing: Listing) -> list[StarEventRecord]:
    """Project ``/users/{username}/starred`` entries into star records.

    Only ``full_name`` is read. Entries that are not JSON objects are skipped.
    """
    records: list[StarEventRecord] = []
    for item in _mappings(listing):
        ref = parse_repo_ref(get_string(item, "full_name"))
        records.append(StarEventRecord(repo_name=ref.name, repo_owner=ref.owner))
    return records


def project_repositories(listing: Listing) -> list[RepositoryRecord]:
    """Project ``/users/{username}/repos`` entries into repository records.

    Entries that are not JSON objects are skipped.
    """
    return [
        RepositoryRecord(
            name=get_string(item, "name"),
            full_name=get_string(item, "full_name"),
            description=get_string(item, "description"),
            language=get_string(item, "language"),
            stargazers_count=get_int(item, "stargazers_count"),
            forks_count=get_int(item, "forks_count"),
            created_at=get_string(item, "created_at"),
            updated_at=get_string(item, "updated_at"),
        )
        for item in _mappings(listing)
    ]


__all__ = [
    "project_comment_events",
    "project_commit_events",
    "project_create_events",
    "project_delete_events",
    "project_fork_events",
    "project_issue_events",
    "project_member_events",
    "project_public_events",
    "project_pull_request_events",
    "project_push_events",
    "project_release_events",
    "project_repositories",
    "project_starred_repositories",
]
