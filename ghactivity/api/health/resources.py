"""Health probe resources for liveness and readiness checks.

These resources are stateless and never call GitHub. They are always
registered regardless of whether an activity service is configured.

Usage
-----
Register health endpoints on the Falcon app::

    from ghactivity.api.health.resources import HealthResource, ReadyResource

    app.add_route("/health", HealthResource())
    app.add_route("/ready", ReadyResource())
    app.add_route("/api/health", PlainHealthResource())

"""

from __future__ import annotations

import typing as typ
from http import HTTPStatus

import falcon

if typ.TYPE_CHECKING:
    from falcon.asgi import Request, Response

__all__ = ["HealthResource", "PlainHealthResource", "ReadyResource"]


class HealthResource:
    """Liveness probe resource returning ``{"status": "ok"}``."""

    async def on_get(self, _req: Request, resp: Response) -> None:
        """Handle GET /health requests.

        Parameters
        ----------
        _req
            Falcon request (unused).
        resp
            Falcon response populated with liveness status.

        """
        resp.media = {"status": "ok"}
        resp.status = HTTPStatus.OK


class ReadyResource:
    """Readiness probe resource returning ``{"status": "ready"}``."""

    async def on_get(self, _req: Request, resp: Response) -> None:
        """Handle GET /ready requests."""
        resp.media = {"status": "ready"}
        resp.status = HTTPStatus.OK


class PlainHealthResource:
    """Plain-text liveness probe answering ``OK`` on ``/api/health``."""

    async def on_get(self, _req: Request, resp: Response) -> None:
        """Handle GET /api/health requests."""
        resp.content_type = falcon.MEDIA_TEXT
        resp.text = "OK"
        resp.status = HTTPStatus.OK
