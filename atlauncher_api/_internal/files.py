"""Local file payloads for upload and save-to-file download operations."""

import base64
import json
from pathlib import Path
from typing import Any

from atlauncher_api._internal.dispatch.client import Callback
from atlauncher_api._internal.dispatch.models import ApiResponse, Codec

# Errors a local read or write may hand to the continuation.
LOCAL_IO_ERRORS = (OSError, ValueError)


def read_payload(path: str | Path, codec: Codec | str) -> str:
    """Read a file and encode it for the envelope's data field.

    Args:
        path: File to read.
        codec: BASE64 for binary fields, RAW for text fields. The string
            values "base64" and "raw" are accepted too.

    Returns:
        The base64 text of the file bytes, or the file decoded as UTF-8.
    """
    codec = Codec(codec)
    content = Path(path).read_bytes()
    if codec is Codec.BASE64:
        return base64.b64encode(content).decode("ascii")
    return content.decode("utf-8")


def write_payload(path: str | Path, data: Any, codec: Codec | str) -> str:
    """Decode the envelope's data field and write it to ``path``.

    Returns:
        A confirmation message naming the written file.
    """
    codec = Codec(codec)
    if codec is Codec.BASE64:
        if not isinstance(data, (str, bytes)):
            raise ValueError(f"Expected base64 text, got {type(data).__name__}")
        # Line-wrapped (MIME style) base64 is accepted
        content = base64.b64decode(data[:0].join(data.split()), validate=True)
    elif isinstance(data, bytes):
        content = data
    elif isinstance(data, str):
        content = data.encode("utf-8")
    else:
        content = json.dumps(data, indent=4).encode("utf-8")

    Path(path).write_bytes(content)
    return f"Saved to {path}!"


def save_to_file(save_to: str | Path, codec: Codec, callback: Callback) -> Callback:
    """Wrap ``callback`` so a successful response is written to ``save_to``.

    Errors and error envelopes pass through untouched. On success the
    callback receives the confirmation message instead of the envelope; a
    write failure is passed along with the envelope.
    """

    def continuation(error: BaseException | None, response: Any) -> Any:
        if error is not None or not isinstance(response, ApiResponse) or response.error:
            return callback(error, response)
        try:
            confirmation = write_payload(save_to, response.data, codec)
        except LOCAL_IO_ERRORS as e:
            return callback(e, response)
        return callback(None, confirmation)

    return continuation
