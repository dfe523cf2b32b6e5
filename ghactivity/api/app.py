"""Application factory for the ghactivity Falcon ASGI application.

This module provides ``create_app()`` which builds and configures the
Falcon ASGI application with health endpoints and, when an activity
service is available, the activity view endpoints.

Usage
-----
Create a health-only app::

    app = create_app()

Create a full app with activity endpoints::

    from ghactivity.activity import ActivityService
    from ghactivity.api.app import AppDependencies, create_app
    from ghactivity.github import GitHubRestClient, GitHubRestConfig

    client = GitHubRestClient(GitHubRestConfig.from_env())
    deps = AppDependencies(service=ActivityService(client), client=client)
    app = create_app(deps)

"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

import falcon.asgi

from ghactivity.api.errors import register_error_handlers
from ghactivity.api.health.resources import (
    HealthResource,
    PlainHealthResource,
    ReadyResource,
)

if typ.TYPE_CHECKING:
    from ghactivity.activity import ActivityService
    from ghactivity.api.middleware import SupportsAclose

__all__ = ["AppDependencies", "create_app"]


@dc.dataclass(frozen=True, slots=True)
class AppDependencies:
    """Dependencies for the Falcon ASGI application.

    Attributes
    ----------
    service
        Activity service backing the ``/api/...`` view endpoints.
    client
        Upstream client owned by the application; closed at lifespan
        shutdown when provided.

    """

    service: ActivityService | None = None
    client: SupportsAclose | None = None


def create_app(
    dependencies: AppDependencies | None = None,
) -> falcon.asgi.App:
    """Create and configure the Falcon ASGI application.

    ``/health``, ``/ready`` and ``/api/health`` are always registered. When
    *dependencies* provides a service, ``GET /api/activity/{username}`` and
    ``GET /api/{view}/{username}`` are registered too.

    Parameters
    ----------
    dependencies
        Optional application dependencies. When ``None``, only health
        endpoints are available.

    Returns
    -------
    falcon.asgi.App
        Configured Falcon ASGI application.

    """
    middleware: list[object] = []
    if dependencies is not None and dependencies.client is not None:
        from ghactivity.api.middleware import ClientLifecycleMiddleware

        middleware.append(ClientLifecycleMiddleware(dependencies.client))

    app = falcon.asgi.App(middleware=middleware)  # type: ignore[no-matching-overload]  # Falcon stubs

    app.add_route("/health", HealthResource())
    app.add_route("/ready", ReadyResource())
    app.add_route("/api/health", PlainHealthResource())

    if dependencies is not None and dependencies.service is not None:
        from ghactivity.api.activity.resources import ActivityResource, ViewResource

        app.add_route(
            "/api/activity/{username}", ActivityResource(dependencies.service)
        )
        app.add_route("/api/{view}/{username}", ViewResource(dependencies.service))

    register_error_handlers(app)
    return app
