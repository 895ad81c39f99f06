"""Request dispatcher for the ATLauncher API."""

import sys
from collections.abc import Callable
from typing import Any, TypeVar

import httpx
from pydantic import ValidationError

from atlauncher_api._internal.dispatch.models import (
    API_KEY_HEADER,
    BODY_METHODS,
    ApiResponse,
    Method,
    RequestSpec,
)
from atlauncher_api._internal.dispatch.redaction import redact_headers, summarize_body
from atlauncher_api._internal.http import (
    API_VERSION,
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT_MS,
    USER_AGENT,
    create_http_client,
)
from atlauncher_api.exceptions import (
    ATLauncherAPIError,
    ATLauncherConfigError,
    ATLauncherError,
    ATLauncherRateLimitError,
    ATLauncherTransportError,
    ATLauncherValidationError,
)

R = TypeVar("R")

# Continuation invoked once per request with (error, response).
Callback = Callable[[BaseException | None, Any], R]


def raise_for_result(error: BaseException | None, response: Any) -> Any:
    """Default continuation: raise on failure, otherwise return the payload.

    Args:
        error: Transport, validation or local I/O error, if any.
        response: The response envelope, or a confirmation string for
            save-to-file downloads.

    Returns:
        The envelope's ``data`` field, or ``response`` itself when it is not
        an envelope.

    Raises:
        ATLauncherTransportError: The request never got a response.
        ATLauncherAPIError: The envelope reports an error.
        ATLauncherValidationError: A path segment made the URL unusable.
    """
    if error is not None:
        if isinstance(error, ATLauncherError):
            raise error
        if isinstance(error, httpx.HTTPError):
            raise ATLauncherTransportError(str(error)) from error
        if isinstance(error, httpx.InvalidURL):
            raise ATLauncherValidationError(str(error)) from error
        raise error
    if isinstance(response, ApiResponse):
        if response.error:
            raise ATLauncherAPIError(
                response.message or "ATLauncher API returned an error",
                status_code=response.code,
                response=response,
            )
        return response.data
    return response


class Dispatcher:
    """Builds requests for the ATLauncher API and interprets their responses.

    Every public operation ends up in `dispatch()`: one request per call, no
    retries. The outcome is handed to a continuation ``callback(error,
    response)`` which is invoked at most once. Two outcomes never reach the
    continuation: a missing API key for an authenticated endpoint raises
    ATLauncherConfigError before any network traffic, and a rate-limit
    response raises ATLauncherRateLimitError unless ``force_run`` is set.
    """

    def __init__(
        self,
        *,
        api_key: str | None = None,
        force_run: bool = False,
        base_url: str = DEFAULT_BASE_URL,
        api_version: str = API_VERSION,
        http_client: httpx.Client | None = None,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        debug: bool = False,
    ) -> None:
        """Initialize the dispatcher.

        Args:
            api_key: The API key sent as the API-KEY header.
            force_run: Keep going past rate-limit responses instead of raising.
            base_url: Root URL of the API, with trailing slash.
            api_version: Version segment inserted after the base URL.
            http_client: Transport to send requests through. One is created
                (and owned) when omitted.
            timeout_ms: Request timeout in milliseconds for a created client.
            debug: Enable debug logging to stderr.

        Raises:
            ATLauncherConfigError: ``base_url`` is not an http(s) URL.
        """
        if not base_url.startswith(("http://", "https://")):
            raise ATLauncherConfigError(f"base_url must be an http(s) URL, got {base_url!r}")

        self._api_key = api_key
        self._force_run = force_run
        self._base_url = base_url if base_url.endswith("/") else base_url + "/"
        self._api_version = api_version
        self._owns_http = http_client is None
        self._http = http_client if http_client is not None else create_http_client(
            timeout=timeout_ms / 1000
        )
        self._debug = debug

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def has_api_key(self) -> bool:
        return bool(self._api_key)

    @property
    def force_run(self) -> bool:
        return self._force_run

    def close(self) -> None:
        """Close the underlying HTTP client if this dispatcher created it."""
        if self._owns_http:
            self._http.close()

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            print(f"[atlauncher-api] {message}", file=sys.stderr)

    def _log_error(self, message: str) -> None:
        """Log a diagnostic to stderr regardless of debug mode."""
        print(f"[atlauncher-api] {message}", file=sys.stderr)

    def make_url(self, path: str = "") -> str:
        """Build an absolute API URL for ``path``."""
        return f"{self._base_url}{self._api_version}/{path}"

    def build_request(self, url: str, method: Method, payload: Any | None = None) -> RequestSpec:
        """Build the request descriptor for a single call.

        The API-KEY header is attached whenever a key is configured, even for
        public endpoints. The payload is only attached for POST/PUT/DELETE.
        """
        headers = {"User-Agent": USER_AGENT}
        if self._api_key:
            headers[API_KEY_HEADER] = self._api_key

        body = payload if method in BODY_METHODS else None
        return RequestSpec(url=url, method=method, headers=headers, body=body)

    def dispatch(
        self,
        requires_auth: bool,
        url: str,
        method: Method,
        payload: Any | None = None,
        callback: Callback[R] | None = None,
    ) -> R:
        """Send one request and hand the outcome to ``callback``.

        Args:
            requires_auth: Whether the endpoint needs an API key.
            url: Absolute URL, usually from `make_url()`.
            method: HTTP verb.
            payload: JSON payload for mutating verbs.
            callback: Continuation receiving ``(error, response)``. Defaults
                to `raise_for_result`.

        Returns:
            Whatever the continuation returns.

        Raises:
            ATLauncherConfigError: An API key is required but not configured.
            ATLauncherRateLimitError: The API reported code 429 and
                ``force_run`` is off.
        """
        if callback is None:
            callback = raise_for_result

        if requires_auth and not self._api_key:
            raise ATLauncherConfigError("An API key must be set in order to make this request!")

        request = self.build_request(url, method, payload)
        self._log_debug(
            f"{request.method} {request.url} headers={redact_headers(request.headers)} "
            f"body={summarize_body(request.body)}"
        )

        error, response = self._send(request)
        if error is not None:
            return callback(error, None)

        if response.is_invalid_api_key:
            self._log_error("The API key provided was not valid!")

        if response.is_rate_limited and not self._force_run:
            # Exceeded API request limit, we must stop now
            raise ATLauncherRateLimitError(
                response.message or "API request limit exceeded",
                status_code=response.code,
                response=response,
            )

        return callback(None, response)

    def _send(self, request: RequestSpec) -> tuple[BaseException | None, ApiResponse | None]:
        """Submit the request and parse the envelope."""
        kwargs: dict[str, Any] = {"headers": request.headers}
        if request.body is not None:
            kwargs["json"] = request.body

        try:
            raw = self._http.request(request.method, request.url, **kwargs)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            self._log_debug(f"Request failed: {e}")
            return e, None

        try:
            response = ApiResponse.from_http(raw)
        except ValueError as e:
            # json.JSONDecodeError and pydantic's ValidationError both land here
            detail = "not an API envelope" if isinstance(e, ValidationError) else "not valid JSON"
            self._log_debug(f"Unreadable response (status {raw.status_code}): {detail}")
            return (
                ATLauncherValidationError(
                    f"Response from {request.url} was {detail} (HTTP {raw.status_code})"
                ),
                None,
            )

        self._log_debug(
            f"Response status={raw.status_code} error={response.error} code={response.code}"
        )
        return None, response
