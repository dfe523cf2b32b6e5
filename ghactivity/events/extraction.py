"""Kind-specific payload extraction rules.

Each known event kind registers one extractor that reads its payload and
returns the kind-specific fields as keyword arguments for a projection
record. Projectors and the formatter both read payloads through this table,
so there is exactly one definition of how each payload is interpreted.

New kinds are added by registering another extractor::

    @register("GollumEvent")
    def extract_gollum(payload: object) -> dict[str, typ.Any]:
        return {"action": get_string(payload, "action")}

"""

from __future__ import annotations

import typing as typ

from .accessor import get_int, get_nested_string, get_string
from .classification import EventKind

if typ.TYPE_CHECKING:
    from .models import EventEnvelope

Extractor = typ.Callable[[object], dict[str, typ.Any]]
_registry: dict[str, Extractor] = {}


def register(kind: str) -> typ.Callable[[Extractor], Extractor]:
    """Register a payload extractor for ``kind``."""

    def _inner(func: Extractor) -> Extractor:
        _registry[kind] = func
        return func

    return _inner


def get_extractor(kind: str | None) -> Extractor | None:
    """Return the registered extractor for ``kind`` if present."""
    if kind is None:
        return None
    return _registry.get(kind)


def registered_kinds() -> frozenset[str]:
    """Return the kinds that currently have an extractor."""
    return frozenset(_registry)


def extract_fields(envelope: EventEnvelope) -> dict[str, typ.Any]:
    """Return the kind-specific fields of ``envelope``.

    Unknown kinds have no extractor and yield an empty mapping.
    """
    extractor = get_extractor(envelope.kind)
    if extractor is None:
        return {}
    return extractor(envelope.payload)


def commit_count(envelope: EventEnvelope) -> int:
    """Return the number of commits carried by a push envelope."""
    return extract_push(envelope.payload)["commit_count"]


@register(EventKind.PUSH)
def extract_push(payload: object) -> dict[str, typ.Any]:
    """Read ``size`` as the commit count."""
    return {"commit_count": get_int(payload, "size")}


@register(EventKind.ISSUES)
def extract_issue(payload: object) -> dict[str, typ.Any]:
    """Read the issue title and action."""
    return {
        "issue_title": get_nested_string(payload, "issue", "title"),
        "action": get_string(payload, "action"),
    }


@register(EventKind.FORK)
def extract_fork(payload: object) -> dict[str, typ.Any]:
    """Read the full name of the newly created fork."""
    return {"forked_repo_name": get_nested_string(payload, "forkee", "full_name")}


@register(EventKind.PULL_REQUEST)
def extract_pull_request(payload: object) -> dict[str, typ.Any]:
    """Read the pull request title and action."""
    return {
        "pr_title": get_nested_string(payload, "pull_request", "title"),
        "action": get_string(payload, "action"),
    }


@register(EventKind.RELEASE)
def extract_release(payload: object) -> dict[str, typ.Any]:
    """Read the release name and action."""
    return {
        "release_name": get_nested_string(payload, "release", "name"),
        "action": get_string(payload, "action"),
    }


@register(EventKind.ISSUE_COMMENT)
def extract_issue_comment(payload: object) -> dict[str, typ.Any]:
    """Read the comment body."""
    return {"comment_body": get_nested_string(payload, "comment", "body")}


@register(EventKind.PUBLIC)
def extract_public(payload: object) -> dict[str, typ.Any]:  # noqa: ARG001
    """Public events carry nothing beyond the repository."""
    return {}


def _extract_ref(payload: object) -> dict[str, typ.Any]:
    return {
        "ref_type": get_string(payload, "ref_type"),
        "ref": get_string(payload, "ref"),
    }


register(EventKind.DELETE)(_extract_ref)
register(EventKind.CREATE)(_extract_ref)


@register(EventKind.MEMBER)
def extract_member(payload: object) -> dict[str, typ.Any]:
    """Read the member login and action."""
    return {
        "member_login": get_nested_string(payload, "member", "login"),
        "action": get_string(payload, "action"),
    }


__all__ = [
    "Extractor",
    "commit_count",
    "extract_fields",
    "get_extractor",
    "register",
    "registered_kinds",
]
