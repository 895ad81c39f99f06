"""Download statistics endpoints."""

from typing import Any, Literal, get_args

from atlauncher_api._internal.dispatch.client import Callback, Dispatcher

DownloadKind = Literal["all", "exe", "jar", "zip"]


class StatsResource:
    """Endpoints under ``stats/``. No API key is required."""

    def __init__(self, dispatcher: Dispatcher) -> None:
        self._dispatcher = dispatcher

    def downloads(self, kind: DownloadKind = "all", *, callback: Callback | None = None) -> Any:
        """Launcher download counts, overall or per distribution type."""
        if kind not in get_args(DownloadKind):
            raise ValueError(f"Unknown download kind: {kind!r}")
        return self._dispatcher.dispatch(
            False, self._dispatcher.make_url(f"stats/downloads/{kind}"), "GET", callback=callback
        )
