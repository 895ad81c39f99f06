"""Public pack listing endpoints."""

from typing import Any, Literal, get_args

from atlauncher_api._internal.dispatch.client import Callback, Dispatcher

# Visibility filters accepted by packs/full/{visibility}
PackVisibility = Literal["all", "public", "semipublic", "private"]


class PacksResource:
    """Endpoints under ``packs/``. No API key is required."""

    def __init__(self, dispatcher: Dispatcher) -> None:
        self._dispatcher = dispatcher

    def simple(self, *, callback: Callback | None = None) -> Any:
        """List every pack with its basic details."""
        return self._dispatcher.dispatch(
            False, self._dispatcher.make_url("packs/simple"), "GET", callback=callback
        )

    def full(
        self,
        visibility: PackVisibility = "all",
        *,
        callback: Callback | None = None,
    ) -> Any:
        """List packs with full details, filtered by visibility.

        Args:
            visibility: One of 'all', 'public', 'semipublic', 'private'.
            callback: Optional continuation receiving ``(error, response)``.
        """
        if visibility not in get_args(PackVisibility):
            raise ValueError(f"Unknown pack visibility: {visibility!r}")
        return self._dispatcher.dispatch(
            False, self._dispatcher.make_url(f"packs/full/{visibility}"), "GET", callback=callback
        )
