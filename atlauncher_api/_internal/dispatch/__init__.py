"""Request dispatch for the ATLauncher API.

WARNING: This is an internal module backing ATLauncherClient.
Do not call directly from user code.
"""

from atlauncher_api._internal.dispatch.client import Callback, Dispatcher, raise_for_result
from atlauncher_api._internal.dispatch.models import (
    ApiResponse,
    Codec,
    Method,
    RequestSpec,
    UsernameList,
)

__all__ = [
    "Dispatcher",
    "Callback",
    "raise_for_result",
    "ApiResponse",
    "Codec",
    "Method",
    "RequestSpec",
    "UsernameList",
]
