"""Shared HTTP client configuration."""

import httpx

from atlauncher_api._version import __version__

DEFAULT_BASE_URL = "https://api.atlauncher.com/"
API_VERSION = "v1"
USER_AGENT = f"python/atlauncher-api/{__version__}"

DEFAULT_TIMEOUT = 30.0
DEFAULT_TIMEOUT_MS = int(DEFAULT_TIMEOUT * 1000)


def create_http_client(*, timeout: float = DEFAULT_TIMEOUT) -> httpx.Client:
    """Create configured HTTP client.

    Args:
        timeout: Request timeout in seconds.

    Returns:
        Configured httpx.Client instance.
    """
    return httpx.Client(
        timeout=timeout,
        headers={"User-Agent": USER_AGENT},
    )
