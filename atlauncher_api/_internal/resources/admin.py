"""Administrative endpoints. Every call here requires an API key."""

from collections.abc import Iterable
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from atlauncher_api._internal.dispatch.client import Callback, Dispatcher, raise_for_result
from atlauncher_api._internal.dispatch.models import Codec, UsernameList
from atlauncher_api._internal.files import LOCAL_IO_ERRORS, read_payload, save_to_file
from atlauncher_api.exceptions import ATLauncherValidationError


def _username_payload(usernames: Iterable[str] | str) -> list[str]:
    """Validate usernames into the JSON array the settings endpoints expect."""
    if isinstance(usernames, str):
        usernames = [usernames]
    try:
        return UsernameList(list(usernames)).model_dump()
    except ValidationError as e:
        raise ATLauncherValidationError(f"Invalid username list: {e}") from e


class PlayerListResource:
    """A per-pack username list under ``admin/pack/{pack}/settings/{setting}``.

    Used for both the allowed-player list and the tester list.
    """

    def __init__(self, dispatcher: Dispatcher, setting: str) -> None:
        self._dispatcher = dispatcher
        self._setting = setting

    def _url(self, pack: str) -> str:
        return self._dispatcher.make_url(f"admin/pack/{pack}/settings/{self._setting}")

    def get(self, pack: str, *, callback: Callback | None = None) -> Any:
        """Fetch the usernames currently on the list."""
        return self._dispatcher.dispatch(True, self._url(pack), "GET", callback=callback)

    def add(
        self,
        pack: str,
        usernames: Iterable[str] | str,
        *,
        callback: Callback | None = None,
    ) -> Any:
        """Append usernames to the list."""
        return self._dispatcher.dispatch(
            True, self._url(pack), "POST", _username_payload(usernames), callback=callback
        )

    def set(
        self,
        pack: str,
        usernames: Iterable[str] | str,
        *,
        callback: Callback | None = None,
    ) -> Any:
        """Replace the whole list with ``usernames``."""
        return self._dispatcher.dispatch(
            True, self._url(pack), "PUT", _username_payload(usernames), callback=callback
        )

    def delete(
        self,
        pack: str,
        usernames: Iterable[str] | str | None = None,
        *,
        callback: Callback | None = None,
    ) -> Any:
        """Remove usernames from the list.

        With no usernames an empty array is sent, which the service treats
        as clearing the list.
        """
        payload = _username_payload(usernames) if usernames is not None else []
        return self._dispatcher.dispatch(True, self._url(pack), "DELETE", payload, callback=callback)


class AdminResource:
    """Endpoints under ``admin/``.

    Download operations accept ``save_to``: when given, the payload is
    written to that path and the continuation receives a confirmation
    message instead of the response. Upload operations read a local file
    and send it in the ``data`` field; a read failure goes to the
    continuation and nothing is sent.
    """

    def __init__(self, dispatcher: Dispatcher) -> None:
        self._dispatcher = dispatcher
        self.allowed_players = PlayerListResource(dispatcher, "allowedplayers")
        self.testers = PlayerListResource(dispatcher, "testers")

    # =========================================================================
    # Helpers
    # =========================================================================

    def _pack_url(self, pack: str, path: str = "") -> str:
        suffix = f"/{path}" if path else ""
        return self._dispatcher.make_url(f"admin/pack/{pack}{suffix}")

    def _download(
        self,
        url: str,
        save_to: str | Path | None,
        codec: Codec | str,
        callback: Callback | None,
    ) -> Any:
        codec = Codec(codec)
        callback = callback or raise_for_result
        if save_to is not None:
            callback = save_to_file(save_to, codec, callback)
        return self._dispatcher.dispatch(True, url, "GET", callback=callback)

    def _upload(
        self,
        url: str,
        file: str | Path,
        codec: Codec | str,
        callback: Callback | None,
    ) -> Any:
        codec = Codec(codec)
        callback = callback or raise_for_result
        try:
            data = read_payload(file, codec)
        except LOCAL_IO_ERRORS as e:
            return callback(e, None)
        return self._dispatcher.dispatch(True, url, "PUT", {"data": data}, callback=callback)

    # =========================================================================
    # Packs
    # =========================================================================

    def packs(self, *, callback: Callback | None = None) -> Any:
        """List every pack the API key can administer."""
        return self._dispatcher.dispatch(
            True, self._dispatcher.make_url("admin/packs"), "GET", callback=callback
        )

    def pack_info(self, pack: str, *, callback: Callback | None = None) -> Any:
        return self._dispatcher.dispatch(True, self._pack_url(pack), "GET", callback=callback)

    # =========================================================================
    # Pack Files
    # =========================================================================

    def files(self, pack: str, folder: str, *, callback: Callback | None = None) -> Any:
        """List the files stored in one of the pack's folders."""
        return self._dispatcher.dispatch(
            True, self._pack_url(pack, f"files/{folder}"), "GET", callback=callback
        )

    def delete_file(
        self,
        pack: str,
        folder: str,
        filename: str,
        *,
        callback: Callback | None = None,
    ) -> Any:
        return self._dispatcher.dispatch(
            True, self._pack_url(pack, f"file/{folder}/{filename}"), "DELETE", callback=callback
        )

    def download_file(
        self,
        pack: str,
        folder: str,
        filename: str,
        save_to: str | Path | None = None,
        *,
        codec: Codec | str = Codec.BASE64,
        callback: Callback | None = None,
    ) -> Any:
        """Download a pack file, optionally writing it to ``save_to``.

        Args:
            pack: Pack safe name.
            folder: Folder within the pack's file storage.
            filename: Name of the file in that folder.
            save_to: Local path to write the decoded file to.
            codec: How the file is carried in the response (base64 by default).
            callback: Optional continuation receiving ``(error, response)``.
        """
        url = self._pack_url(pack, f"file/{folder}/{filename}")
        return self._download(url, save_to, codec, callback)

    def put_file(
        self,
        pack: str,
        folder: str,
        filename: str,
        file: str | Path,
        *,
        codec: Codec | str = Codec.BASE64,
        callback: Callback | None = None,
    ) -> Any:
        """Upload the local ``file`` as ``folder/filename`` in the pack."""
        url = self._pack_url(pack, f"file/{folder}/{filename}")
        return self._upload(url, file, codec, callback)

    # =========================================================================
    # Versions
    # =========================================================================

    def version_info(self, pack: str, version: str, *, callback: Callback | None = None) -> Any:
        return self._dispatcher.dispatch(
            True, self._pack_url(pack, f"versions/{version}"), "GET", callback=callback
        )

    def get_version_xml(
        self,
        pack: str,
        version: str,
        save_to: str | Path | None = None,
        *,
        callback: Callback | None = None,
    ) -> Any:
        """Fetch the version's XML definition as text."""
        url = self._pack_url(pack, f"versions/{version}/xml")
        return self._download(url, save_to, Codec.RAW, callback)

    def put_version_xml(
        self,
        pack: str,
        version: str,
        file: str | Path,
        *,
        callback: Callback | None = None,
    ) -> Any:
        url = self._pack_url(pack, f"versions/{version}/xml")
        return self._upload(url, file, Codec.RAW, callback)

    def get_version_json(
        self,
        pack: str,
        version: str,
        save_to: str | Path | None = None,
        *,
        callback: Callback | None = None,
    ) -> Any:
        """Fetch the version's generated JSON."""
        url = self._pack_url(pack, f"versions/{version}/json")
        return self._download(url, save_to, Codec.RAW, callback)

    def get_version_configs(
        self,
        pack: str,
        version: str,
        save_to: str | Path | None = None,
        *,
        callback: Callback | None = None,
    ) -> Any:
        """Fetch the version's configs archive (base64 on the wire)."""
        url = self._pack_url(pack, f"versions/{version}/configs")
        return self._download(url, save_to, Codec.BASE64, callback)

    def put_version_configs(
        self,
        pack: str,
        version: str,
        file: str | Path,
        *,
        callback: Callback | None = None,
    ) -> Any:
        url = self._pack_url(pack, f"versions/{version}/configs")
        return self._upload(url, file, Codec.BASE64, callback)
