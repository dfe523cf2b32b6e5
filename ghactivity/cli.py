"""Print a GitHub user's recent activity to the terminal."""

from __future__ import annotations

import argparse
import asyncio
import os
import sys
import typing as typ

import msgspec

from ghactivity.activity import ActivityService, ActivityView
from ghactivity.github.client import GitHubRestClient, GitHubRestConfig
from ghactivity.github.errors import (
    GitHubAPIError,
    GitHubConfigError,
    GitHubResponseShapeError,
    GitHubTransportError,
    InvalidUsernameError,
)

if typ.TYPE_CHECKING:
    from ghactivity.activity import ActivityResult
    from ghactivity.github.client import GitHubActivitySource

NO_ACTIVITY_MESSAGE = "No recent activity found."

_REPORTED_ERRORS = (
    GitHubAPIError,
    GitHubConfigError,
    GitHubResponseShapeError,
    GitHubTransportError,
    InvalidUsernameError,
)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ghactivity", description=__doc__)
    parser.add_argument("username", help="GitHub login whose activity to show")
    parser.add_argument(
        "--view",
        choices=[view.value for view in ActivityView],
        default=ActivityView.ACTIVITY.value,
        help="Activity view to print (default: activity)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the items as a single JSON array",
    )
    parser.add_argument(
        "--no-colour",
        "--no-color",
        dest="colour",
        action="store_false",
        help="Disable ANSI colours in the activity view",
    )
    return parser


def _use_colour(requested: bool) -> bool:  # noqa: FBT001
    # https://no-color.org: any non-empty NO_COLOR disables colour
    return requested and not os.environ.get("NO_COLOR")


def _render(result: ActivityResult, *, as_json: bool) -> list[str]:
    if as_json:
        return [msgspec.json.encode(result.items).decode()]
    if result.is_empty:
        if result.view is ActivityView.ACTIVITY:
            return [NO_ACTIVITY_MESSAGE]
        return [result.empty_message]
    if result.view is ActivityView.ACTIVITY:
        return list(result.items)
    return [msgspec.json.encode(item).decode() for item in result.items]


async def _fetch(
    service: ActivityService,
    args: argparse.Namespace,
) -> ActivityResult:
    view = ActivityView(args.view)
    if view is ActivityView.ACTIVITY:
        colour = _use_colour(args.colour) and not args.json
        return await service.activity(args.username, colour=colour)
    return await service.view(args.username, view)


async def _run(
    args: argparse.Namespace, source: GitHubActivitySource | None
) -> ActivityResult:
    if source is not None:
        return await _fetch(ActivityService(source), args)

    client = GitHubRestClient(GitHubRestConfig.from_env())
    try:
        return await _fetch(ActivityService(client), args)
    finally:
        await client.aclose()


def main(
    argv: list[str] | None = None,
    *,
    source: GitHubActivitySource | None = None,
) -> int:
    """Fetch and print one activity view for a GitHub user.

    Parameters
    ----------
    argv : list[str] | None, optional
        Command-line arguments. ``None`` defaults to ``sys.argv``.
    source : GitHubActivitySource | None, optional
        Activity source to query. ``None`` builds a GitHub REST client from
        the ``GHACTIVITY_GITHUB_*`` environment variables.

    Returns
    -------
    int
        Exit code: 0 on success (including empty views), 1 when GitHub or
        the configuration reports an error.

    """
    args = _build_parser().parse_args(argv)
    try:
        result = asyncio.run(_run(args, source))
    except _REPORTED_ERRORS as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    for line in _render(result, as_json=args.json):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
