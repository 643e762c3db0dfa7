"""Shared HTTP client configuration."""

import httpx

from freshlearn_sdk._version import __version__

USER_AGENT = f"freshlearn-sdk/{__version__}"


def create_http_client(*, timeout: float | None = None) -> httpx.Client:
    """Create configured HTTP client.

    Args:
        timeout: Request timeout in seconds, None for no timeout.

    Returns:
        Configured httpx.Client instance.
    """
    return httpx.Client(
        timeout=timeout,
        headers={"User-Agent": USER_AGENT},
    )


def create_async_http_client() -> httpx.AsyncClient:
    """Create configured async HTTP client.

    The async dispatcher enforces its own deadline, so httpx timeouts are off.

    Returns:
        Configured httpx.AsyncClient instance.
    """
    return httpx.AsyncClient(
        timeout=None,
        headers={"User-Agent": USER_AGENT},
    )
