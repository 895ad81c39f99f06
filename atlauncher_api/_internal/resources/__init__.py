"""Endpoint catalogue for the ATLauncher API, grouped by resource."""

from atlauncher_api._internal.resources.admin import AdminResource, PlayerListResource
from atlauncher_api._internal.resources.packs import PacksResource, PackVisibility
from atlauncher_api._internal.resources.stats import DownloadKind, StatsResource

__all__ = [
    "AdminResource",
    "PlayerListResource",
    "PacksResource",
    "PackVisibility",
    "StatsResource",
    "DownloadKind",
]
