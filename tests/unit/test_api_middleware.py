"""Unit tests for the lifespan middleware."""

from __future__ import annotations

from ghactivity.api.middleware import ClientLifecycleMiddleware
from tests.helpers.event_builders import FakeActivitySource


async def test_startup_leaves_client_open() -> None:
    """Startup does not touch the client."""
    source = FakeActivitySource()

    await ClientLifecycleMiddleware(source).process_startup({}, {})

    assert source.closed is False


async def test_shutdown_closes_client() -> None:
    """Shutdown awaits the client's aclose."""
    source = FakeActivitySource()

    await ClientLifecycleMiddleware(source).process_shutdown({}, {})

    assert source.closed is True
