"""Human-readable rendering of activity envelopes.

Each known kind has a render rule: an ANSI style, an icon, and a message
template. Kinds without a rule use the generic ``"<kind> on <repo>"`` line,
so new upstream event types still render. Plain text is the default; the
command line asks for colour.

Example output with colour disabled::

    Pushed 3 commits to reef -> 2025-04-01T12:34:56Z
    Starred reef
    WatchEvent on reef

"""

from __future__ import annotations

import dataclasses
import enum
import typing as typ

from .classification import EventKind
from .extraction import commit_count

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .models import EventEnvelope

UNKNOWN_EVENT = "Unknown event"


class AnsiStyle(enum.StrEnum):
    """Terminal escape sequences used by coloured output."""

    RESET = "\033[0m"
    RED = "\033[31m"
    CYAN = "\033[36m"
    WHITE = "\033[37m"
    BOLD_GREEN = "\033[1;32m"
    BOLD_YELLOW = "\033[1;33m"
    BOLD_BLUE = "\033[1;34m"
    BOLD_PURPLE = "\033[1;35m"


class Icon(enum.StrEnum):
    """Icons prefixed to coloured lines."""

    PUSH = "🟢 "
    STAR = "⭐ "
    ISSUE = "🐛 "
    PULL_REQUEST = "📬 "
    FORK = "🍴 "
    DEFAULT = "📌 "


@dataclasses.dataclass(frozen=True, slots=True)
class _RenderRule:
    style: AnsiStyle
    icon: Icon
    render: typ.Callable[[EventEnvelope, str], str]
    # Text appended after the reset code, outside the coloured span.
    suffix: typ.Callable[[EventEnvelope], str] | None = None


def _pushed_at(envelope: EventEnvelope) -> str:
    return f" -> {envelope.created_at}"


_RULES: dict[str, _RenderRule] = {
    EventKind.PUSH: _RenderRule(
        AnsiStyle.BOLD_GREEN,
        Icon.PUSH,
        lambda envelope, repo: (
            f"Pushed {commit_count(envelope)} commits to {repo}"
        ),
        suffix=_pushed_at,
    ),
    EventKind.WATCH: _RenderRule(
        AnsiStyle.BOLD_YELLOW, Icon.STAR, lambda _envelope, repo: f"Starred {repo}"
    ),
    EventKind.ISSUES: _RenderRule(
        AnsiStyle.BOLD_PURPLE,
        Icon.ISSUE,
        lambda _envelope, repo: f"Opened an issue in {repo}",
    ),
    EventKind.FORK: _RenderRule(
        AnsiStyle.BOLD_BLUE, Icon.FORK, lambda _envelope, repo: f"Forked {repo}"
    ),
    EventKind.PULL_REQUEST: _RenderRule(
        AnsiStyle.CYAN,
        Icon.PULL_REQUEST,
        lambda _envelope, repo: f"Created a pull request in {repo}",
    ),
}

_GENERIC_RULE = _RenderRule(
    AnsiStyle.WHITE,
    Icon.DEFAULT,
    lambda envelope, repo: f"{envelope.kind or 'Event'} on {repo}",
)


def format_event(envelope: EventEnvelope | None, *, colour: bool = False) -> str:
    """Render one envelope as a single display line.

    Parameters
    ----------
    envelope:
        Envelope to render. ``None`` and envelopes without a repository render
        as ``"Unknown event"``.
    colour:
        Wrap the line in ANSI styling and prefix the kind's icon.

    Returns
    -------
    str
        The rendered line. This function never raises.

    """
    if envelope is None or envelope.repo is None:
        if colour:
            return f"{AnsiStyle.RED}{UNKNOWN_EVENT}{AnsiStyle.RESET}"
        return UNKNOWN_EVENT

    repo_name = envelope.repo_ref.name or envelope.repo
    rule = _RULES.get(envelope.kind or "", _GENERIC_RULE)
    text = rule.render(envelope, repo_name)
    suffix = rule.suffix(envelope) if rule.suffix is not None else ""
    if not colour:
        return f"{text}{suffix}"
    return f"{rule.style}{rule.icon}{text}{AnsiStyle.RESET}{suffix}"


def format_events(
    envelopes: cabc.Iterable[EventEnvelope | None] | None, *, colour: bool = False
) -> list[str]:
    """Render every envelope, preserving input order."""
    return [format_event(envelope, colour=colour) for envelope in envelopes or ()]


__all__ = ["UNKNOWN_EVENT", "AnsiStyle", "Icon", "format_event", "format_events"]
