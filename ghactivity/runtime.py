"""ghactivity runtime entrypoint.

This module provides the ASGI application factory used by Granian. It
builds the GitHub REST client and activity service from the environment and
delegates to :func:`ghactivity.api.app.create_app` for application
construction, keeping the ``ghactivity.runtime:create_app`` entrypoint
stable.

Configuration is driven by environment variables:

- ``GHACTIVITY_HOST``: Bind address (default ``0.0.0.0``)
- ``GHACTIVITY_PORT``: Listen port (default ``8080``)
- ``GHACTIVITY_LOG_LEVEL``: Log level (default ``INFO``)
- ``GHACTIVITY_GITHUB_*``: GitHub client settings, see
  :meth:`ghactivity.github.client.GitHubRestConfig.from_env`

Run the service directly with ``python -m ghactivity.runtime``.
"""

from __future__ import annotations

import os
import typing as typ

from ghactivity.logging import (
    configure_logging,
    get_logger,
    log_error,
    log_info,
    log_warning,
)

if typ.TYPE_CHECKING:
    import falcon.asgi

__all__ = ["create_app", "main"]

logger = get_logger(__name__)

# TCP port number range limits
_MIN_PORT = 1
_MAX_PORT = 65535


def _parse_port(port_str: str) -> int:
    """Parse and validate a port number string.

    Raises
    ------
    SystemExit
        If port_str is not a valid integer in range 1-65535.

    """
    try:
        port = int(port_str)
        if not (_MIN_PORT <= port <= _MAX_PORT):
            msg = f"port {port} outside valid range {_MIN_PORT}-{_MAX_PORT}"
            raise ValueError(msg)  # noqa: TRY301 - unify conversion and range errors
    except ValueError as exc:
        # Validation failures need no traceback
        log_error(
            logger,
            "Invalid GHACTIVITY_PORT value: %r (must be %d-%d): %s",
            port_str,
            _MIN_PORT,
            _MAX_PORT,
            exc,
        )
        raise SystemExit(1) from exc
    return port


def create_app() -> falcon.asgi.App:
    """Create the Falcon ASGI application with activity endpoints.

    Returns
    -------
    falcon.asgi.App
        Configured Falcon ASGI application owning its GitHub client.

    """
    from ghactivity.activity import ActivityService
    from ghactivity.api.app import AppDependencies
    from ghactivity.api.app import create_app as _create_api_app
    from ghactivity.github.client import GitHubRestClient, GitHubRestConfig

    client = GitHubRestClient(GitHubRestConfig.from_env())
    deps = AppDependencies(service=ActivityService(client), client=client)
    return _create_api_app(deps)


def main() -> None:
    """Start the ghactivity server using Granian.

    Reads ``GHACTIVITY_HOST``, ``GHACTIVITY_PORT``, and
    ``GHACTIVITY_LOG_LEVEL`` from the environment and starts the ASGI server.
    """
    from granian import Granian
    from granian.constants import Interfaces

    host = os.environ.get("GHACTIVITY_HOST", "0.0.0.0")  # noqa: S104 - bind all interfaces for container
    port = _parse_port(os.environ.get("GHACTIVITY_PORT", "8080"))
    log_level_str = os.environ.get("GHACTIVITY_LOG_LEVEL", "INFO")

    normalized_level, invalid_level = configure_logging(log_level_str)
    if invalid_level:
        log_warning(
            logger,
            "Invalid GHACTIVITY_LOG_LEVEL %r, falling back to %s",
            log_level_str,
            normalized_level,
        )

    log_info(
        logger,
        "Starting ghactivity runtime on %s:%d (log_level=%s)",
        host,
        port,
        normalized_level,
    )

    server = Granian(
        "ghactivity.runtime:create_app",
        address=host,
        port=port,
        interface=Interfaces.ASGI,
        factory=True,
    )
    server.serve()


if __name__ == "__main__":
    main()
