"""Public wire models for the ATLauncher API.

    from atlauncher_api.models import ApiResponse

    def on_pack(error, response: ApiResponse):
        ...
"""

from atlauncher_api._internal.dispatch.models import (
    ApiResponse,
    Codec,
    RequestSpec,
    UsernameList,
)

__all__ = ["ApiResponse", "Codec", "RequestSpec", "UsernameList"]
