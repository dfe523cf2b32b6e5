"""Domain exceptions and Falcon error handlers for the API layer.

This module defines exceptions raised by API resources and the Falcon error
handler functions that translate them, and the GitHub ingestion errors,
into HTTP responses.

Usage
-----
Register every handler on the Falcon app::

    from ghactivity.api.errors import register_error_handlers

    register_error_handlers(app)

Falcon resolves handlers by exception class hierarchy, so the handler for
``SubjectNotFoundError`` takes precedence over the one for its base class
``GitHubAPIError``.

"""

from __future__ import annotations

import typing as typ

import falcon

from ghactivity.github.errors import (
    GitHubAPIError,
    GitHubResponseShapeError,
    GitHubTransportError,
    InvalidUsernameError,
    SubjectNotFoundError,
)

if typ.TYPE_CHECKING:
    import falcon.asgi
    from falcon.asgi import Request, Response

__all__ = [
    "InvalidViewError",
    "handle_invalid_username",
    "handle_invalid_view",
    "handle_subject_not_found",
    "handle_upstream_error",
    "handle_upstream_shape",
    "handle_upstream_unavailable",
    "register_error_handlers",
]


class InvalidViewError(Exception):
    """Raised when a request names a view that does not exist.

    Attributes
    ----------
    view
        The unrecognised view segment from the request path.

    """

    def __init__(self, view: str) -> None:
        """Initialize with the unrecognised view name."""
        self.view = view
        super().__init__(f"No activity view named '{view}' exists.")


async def handle_invalid_view(
    _req: Request,
    resp: Response,
    ex: InvalidViewError,
    _params: dict[str, typ.Any],
) -> None:
    """Map ``InvalidViewError`` to an HTTP 404 JSON response."""
    resp.status = falcon.HTTP_404
    resp.media = {"title": "View not found", "description": str(ex)}


async def handle_subject_not_found(
    _req: Request,
    resp: Response,
    ex: SubjectNotFoundError,
    _params: dict[str, typ.Any],
) -> None:
    """Map ``SubjectNotFoundError`` to an HTTP 404 JSON response.

    Parameters
    ----------
    _req
        Falcon request (unused).
    resp
        Falcon response whose status and media are set.
    ex
        The ingestion error naming the missing user.
    _params
        URI template parameters (unused).

    """
    resp.status = falcon.HTTP_404
    resp.media = {"title": "User not found", "description": str(ex)}


async def handle_invalid_username(
    _req: Request,
    resp: Response,
    ex: InvalidUsernameError,
    _params: dict[str, typ.Any],
) -> None:
    """Map ``InvalidUsernameError`` to an HTTP 400 JSON response."""
    resp.status = falcon.HTTP_400
    resp.media = {
        "title": "Invalid input",
        "description": str(ex),
        "field": "username",
    }


async def handle_upstream_error(
    _req: Request,
    resp: Response,
    ex: GitHubAPIError,
    _params: dict[str, typ.Any],
) -> None:
    """Map ``GitHubAPIError`` to an HTTP 502 JSON response.

    The upstream status code is included so callers can tell a rate-limit
    rejection from other failures.
    """
    resp.status = falcon.HTTP_502
    resp.media = {
        "title": "Upstream error",
        "description": str(ex),
        "upstream_status": ex.status_code,
        "rate_limited": ex.rate_limited,
    }


async def handle_upstream_shape(
    _req: Request,
    resp: Response,
    ex: GitHubResponseShapeError,
    _params: dict[str, typ.Any],
) -> None:
    """Map ``GitHubResponseShapeError`` to an HTTP 502 JSON response."""
    resp.status = falcon.HTTP_502
    resp.media = {"title": "Upstream error", "description": str(ex)}


async def handle_upstream_unavailable(
    _req: Request,
    resp: Response,
    ex: GitHubTransportError,
    _params: dict[str, typ.Any],
) -> None:
    """Map ``GitHubTransportError`` to an HTTP 503 JSON response."""
    resp.status = falcon.HTTP_503
    resp.media = {"title": "Upstream unavailable", "description": str(ex)}


def register_error_handlers(app: falcon.asgi.App) -> None:
    """Register every API error handler on ``app``."""
    app.add_error_handler(InvalidViewError, handle_invalid_view)
    app.add_error_handler(InvalidUsernameError, handle_invalid_username)
    app.add_error_handler(GitHubAPIError, handle_upstream_error)
    app.add_error_handler(SubjectNotFoundError, handle_subject_not_found)
    app.add_error_handler(GitHubResponseShapeError, handle_upstream_shape)
    app.add_error_handler(GitHubTransportError, handle_upstream_unavailable)
