"""Public exceptions for the ATLauncher API client."""

from typing import Any


class ATLauncherError(Exception):
    """Base exception for all ATLauncher API client errors."""


class ATLauncherAPIError(ATLauncherError):
    """Error envelope returned by the ATLauncher API."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response: Any | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.response = response


class ATLauncherRateLimitError(ATLauncherAPIError):
    """The API request limit was exceeded (code 429)."""


class ATLauncherConfigError(ATLauncherError):
    """Configuration error (missing API key, invalid config)."""


class ATLauncherValidationError(ATLauncherError):
    """Validation error for request/response data."""


class ATLauncherTransportError(ATLauncherError):
    """Network-level failure talking to the API."""
