"""Activity event classification, projection, and formatting."""

from __future__ import annotations

from .accessor import get_int, get_mapping, get_nested_string, get_string
from .classification import UNKNOWN_KIND, EventKind, count_by_kind, filter_by_kind
from .extraction import commit_count, extract_fields, get_extractor, register
from .formatter import UNKNOWN_EVENT, format_event, format_events
from .models import (
    STARRED_AT_UNKNOWN,
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
    envelope_from_raw,
    envelopes_from_raw,
)
from .projection import (
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

__all__ = [
    "STARRED_AT_UNKNOWN",
    "UNKNOWN_EVENT",
    "UNKNOWN_KIND",
    "CommitEventRecord",
    "CreateEventRecord",
    "DeleteEventRecord",
    "EventEnvelope",
    "EventKind",
    "ForkEventRecord",
    "IssueCommentEventRecord",
    "IssueEventRecord",
    "MemberEventRecord",
    "PublicEventRecord",
    "PullRequestEventRecord",
    "PushEventRecord",
    "ReleaseEventRecord",
    "RepositoryRecord",
    "StarEventRecord",
    "commit_count",
    "count_by_kind",
    "envelope_from_raw",
    "envelopes_from_raw",
    "extract_fields",
    "filter_by_kind",
    "format_event",
    "format_events",
    "get_extractor",
    "get_int",
    "get_mapping",
    "get_nested_string",
    "get_string",
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
    "register",
]
