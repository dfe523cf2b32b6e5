"""API resources exposing a user's activity views.

``GET /api/activity/{username}`` returns the formatted activity feed and
``GET /api/{view}/{username}`` returns the projection records of any other
view. Both answer with the same JSON envelope::

    {"username": "octocat", "view": "pushes", "items": [...], "message": null}

``message`` carries the view's empty message when ``items`` is empty.

"""

from __future__ import annotations

import typing as typ
from http import HTTPStatus

import msgspec

from ghactivity.activity import ActivityView
from ghactivity.api.errors import InvalidViewError

if typ.TYPE_CHECKING:
    from falcon.asgi import Request, Response

    from ghactivity.activity import ActivityResult, ActivityService

__all__ = ["ActivityResource", "ViewResource", "serialize_result"]


def serialize_result(result: ActivityResult) -> dict[str, typ.Any]:
    """Serialize an ``ActivityResult`` to a JSON-compatible dict.

    Records are converted with ``msgspec.to_builtins`` so field names follow
    the records' camelCase renaming.
    """
    return {
        "username": result.username,
        "view": str(result.view),
        "items": msgspec.to_builtins(result.items),
        "message": result.message,
    }


class ActivityResource:
    """Handle ``GET /api/activity/{username}``."""

    def __init__(self, service: ActivityService) -> None:
        """Initialize the resource with the activity service."""
        self._service = service

    async def on_get(self, _req: Request, resp: Response, username: str) -> None:
        """Return the formatted activity feed for ``username``."""
        result = await self._service.activity(username)
        resp.media = serialize_result(result)
        resp.status = HTTPStatus.OK


class ViewResource:
    """Handle ``GET /api/{view}/{username}`` for projection views."""

    def __init__(self, service: ActivityService) -> None:
        """Initialize the resource with the activity service."""
        self._service = service

    async def on_get(
        self, _req: Request, resp: Response, view: str, username: str
    ) -> None:
        """Return the records of ``view`` for ``username``.

        Raises
        ------
        InvalidViewError
            If ``view`` does not name an :class:`ActivityView`.

        """
        try:
            selected = ActivityView(view)
        except ValueError as exc:
            raise InvalidViewError(view) from exc

        result = await self._service.view(username, selected)
        resp.media = serialize_result(result)
        resp.status = HTTPStatus.OK
