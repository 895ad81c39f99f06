"""User-facing client for the ATLauncher API.

Example usage:
    from atlauncher_api import ATLauncherClient

    with ATLauncherClient(api_key="your-api-key") as client:
        pack = client.pack("SkyFactory")
        stats = client.stats.downloads("exe")

        client.admin.testers.add("SkyFactory", ["Notch"])
        client.admin.get_version_configs("SkyFactory", "1.0.0", save_to="configs.zip")

Every operation also accepts ``callback=``, a continuation receiving
``(error, response)`` that replaces the default raise-or-return handling.
"""

import os
from typing import Any

import httpx

from atlauncher_api._internal.dispatch.client import Callback, Dispatcher
from atlauncher_api._internal.http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_MS
from atlauncher_api._internal.resources import AdminResource, PacksResource, StatsResource


class ATLauncherClient:
    """Client for the ATLauncher pack-distribution API.

    Configuration is fixed at construction. Separate clients in one process
    are independent of each other.

    Use `ATLauncherClient.from_env()` to create a client from environment
    variables.
    """

    def __init__(
        self,
        api_key: str | None = None,
        force_run: bool = False,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        debug: bool = False,
        http_client: httpx.Client | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: API key for admin endpoints. Public endpoints work without one.
            force_run: Continue past rate-limit responses instead of raising
                ATLauncherRateLimitError.
            base_url: Root URL of the API.
            timeout_ms: Request timeout in milliseconds.
            debug: Enable debug logging to stderr.
            http_client: Optional httpx.Client to send requests through.
        """
        self._dispatcher = Dispatcher(
            api_key=api_key,
            force_run=force_run,
            base_url=base_url,
            http_client=http_client,
            timeout_ms=timeout_ms,
            debug=debug,
        )
        self._packs = PacksResource(self._dispatcher)
        self._stats = StatsResource(self._dispatcher)
        self._admin = AdminResource(self._dispatcher)

    @classmethod
    def from_env(cls) -> "ATLauncherClient":
        """Create a client from environment variables.

        Optional environment variables:
            ATLAUNCHER_API_KEY: The API key for admin endpoints.
            ATLAUNCHER_FORCE_RUN: Set to "1" to continue past rate limits.
            ATLAUNCHER_API_BASE_URL: Override the API root URL.
            ATLAUNCHER_API_TIMEOUT_MS: Request timeout in milliseconds.
            ATLAUNCHER_API_DEBUG: Set to "1" to enable debug logging.

        Returns:
            A configured ATLauncherClient.
        """
        api_key = os.environ.get("ATLAUNCHER_API_KEY") or None
        force_run = os.environ.get("ATLAUNCHER_FORCE_RUN", "") == "1"
        base_url = os.environ.get("ATLAUNCHER_API_BASE_URL") or DEFAULT_BASE_URL

        debug = os.environ.get("ATLAUNCHER_API_DEBUG", "") == "1"
        timeout_ms = int(os.environ.get("ATLAUNCHER_API_TIMEOUT_MS", str(DEFAULT_TIMEOUT_MS)))

        return cls(
            api_key=api_key,
            force_run=force_run,
            base_url=base_url,
            timeout_ms=timeout_ms,
            debug=debug,
        )

    def close(self) -> None:
        """Release the HTTP connection pool if the client created it."""
        self._dispatcher.close()

    def __enter__(self) -> "ATLauncherClient":
        """Use the client as a context manager that closes it on exit."""
        return self

    def __exit__(self, *exc_info: object) -> None:
        """Close the client; exceptions from the block propagate."""
        self.close()

    @property
    def dispatcher(self) -> Dispatcher:
        """The dispatcher every operation of this client goes through."""
        return self._dispatcher

    @property
    def packs(self) -> PacksResource:
        """Pack listing endpoints (``packs/...``)."""
        return self._packs

    @property
    def stats(self) -> StatsResource:
        """Download statistics endpoints (``stats/...``)."""
        return self._stats

    @property
    def admin(self) -> AdminResource:
        """Administrative endpoints (``admin/...``). Require an API key."""
        return self._admin

    def heartbeat(self, *, callback: Callback | None = None) -> Any:
        """Check the API is up. Hits the bare base URL."""
        return self._dispatcher.dispatch(False, self._dispatcher.base_url, "GET", callback=callback)

    def pack(
        self,
        name: str,
        version: str | None = None,
        *,
        callback: Callback | None = None,
    ) -> Any:
        """Fetch a pack's public details, or those of one of its versions.

        Args:
            name: Pack safe name.
            version: Optional version; omit for the pack itself.
            callback: Optional continuation receiving ``(error, response)``.
        """
        path = f"pack/{name}" if version is None else f"pack/{name}/{version}"
        return self._dispatcher.dispatch(
            False, self._dispatcher.make_url(path), "GET", callback=callback
        )


def get_client() -> ATLauncherClient:
    """Get a client configured from environment variables.

    Returns:
        A configured ATLauncherClient instance.
    """
    return ATLauncherClient.from_env()
