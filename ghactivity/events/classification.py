"""Event kind taxonomy and kind-based filtering."""

from __future__ import annotations

import collections
import enum
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .models import EventEnvelope

UNKNOWN_KIND = "unknown"


class EventKind(enum.StrEnum):
    """GitHub event ``type`` tags with dedicated handling.

    The upstream taxonomy is open; kinds missing here still flow through
    formatting via the generic rule.
    """

    PUSH = "PushEvent"
    ISSUES = "IssuesEvent"
    FORK = "ForkEvent"
    PULL_REQUEST = "PullRequestEvent"
    RELEASE = "ReleaseEvent"
    ISSUE_COMMENT = "IssueCommentEvent"
    PUBLIC = "PublicEvent"
    DELETE = "DeleteEvent"
    CREATE = "CreateEvent"
    MEMBER = "MemberEvent"
    WATCH = "WatchEvent"


def filter_by_kind(
    envelopes: cabc.Iterable[EventEnvelope | None] | None,
    kind: str,
) -> list[EventEnvelope]:
    """Return the envelopes whose ``kind`` equals ``kind``, in input order.

    Parameters
    ----------
    envelopes:
        Envelopes to filter. ``None`` is treated as an empty collection and
        ``None`` elements are skipped.
    kind:
        Discriminator to keep, e.g. ``EventKind.PUSH`` or ``"PushEvent"``.

    Returns
    -------
    list[EventEnvelope]
        A new list; the input is never modified.

    """
    if envelopes is None:
        return []
    return [
        envelope
        for envelope in envelopes
        if envelope is not None and envelope.kind == kind
    ]


def count_by_kind(
    envelopes: cabc.Iterable[EventEnvelope | None] | None,
) -> dict[str, int]:
    """Count envelopes per kind; absent envelopes or kinds count as unknown."""
    counts: collections.Counter[str] = collections.Counter()
    for envelope in envelopes or ():
        kind = envelope.kind if envelope is not None else None
        counts[kind or UNKNOWN_KIND] += 1
    return dict(counts)


__all__ = ["UNKNOWN_KIND", "EventKind", "count_by_kind", "filter_by_kind"]
