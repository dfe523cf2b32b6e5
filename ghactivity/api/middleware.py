"""Lifespan middleware closing the GitHub client on shutdown.

Falcon ASGI apps deliver the ASGI lifespan protocol to middleware through
``process_startup`` and ``process_shutdown``. The middleware holds the
client the runtime created so its connection pool is released when the
server stops.

Usage
-----
Register the middleware when creating the Falcon app::

    from ghactivity.api.middleware import ClientLifecycleMiddleware

    app = falcon.asgi.App(middleware=[ClientLifecycleMiddleware(client)])

"""

from __future__ import annotations

import typing as typ

from ghactivity.logging import get_logger, log_info

__all__ = ["ClientLifecycleMiddleware", "SupportsAclose"]

logger = get_logger(__name__)


class SupportsAclose(typ.Protocol):
    """Resource that releases its connections with ``aclose``."""

    async def aclose(self) -> None:
        """Release held resources."""
        ...


class ClientLifecycleMiddleware:
    """Falcon middleware closing an upstream client at lifespan shutdown.

    Parameters
    ----------
    client
        Client whose ``aclose`` is awaited once on shutdown.

    """

    def __init__(self, client: SupportsAclose) -> None:
        """Initialize the middleware with the client to close."""
        self._client = client

    async def process_startup(
        self, _scope: dict[str, typ.Any], _event: dict[str, typ.Any]
    ) -> None:
        """Log application startup."""
        log_info(logger, "ghactivity API starting")

    async def process_shutdown(
        self, _scope: dict[str, typ.Any], _event: dict[str, typ.Any]
    ) -> None:
        """Close the upstream client."""
        await self._client.aclose()
        log_info(logger, "ghactivity API stopped; upstream client closed")
