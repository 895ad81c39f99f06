"""ATLauncher API client for Python.

This package exposes the ATLauncher pack-distribution API as method calls.

Public API:
    ATLauncherClient - Client for pack, stats and admin endpoints
    get_client - Client configured from environment variables
    Codec - File payload encoding for uploads/downloads

Internal (not for direct use):
    _internal.dispatch - Request building and response interpretation
"""

from atlauncher_api._internal.dispatch.models import Codec
from atlauncher_api._version import __version__
from atlauncher_api.client import ATLauncherClient, get_client
from atlauncher_api.exceptions import (
    ATLauncherAPIError,
    ATLauncherConfigError,
    ATLauncherError,
    ATLauncherRateLimitError,
    ATLauncherTransportError,
    ATLauncherValidationError,
)

__all__ = [
    "__version__",
    "ATLauncherClient",
    "get_client",
    "Codec",
    "ATLauncherError",
    "ATLauncherAPIError",
    "ATLauncherRateLimitError",
    "ATLauncherConfigError",
    "ATLauncherValidationError",
    "ATLauncherTransportError",
]
