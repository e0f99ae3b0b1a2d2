"""Shared HTTP client configuration and the default authenticated requester."""

import os
import sys
from typing import Any

import httpx

from mirlo_node._internal.dispatch.models import RequestDescriptor
from mirlo_node._version import __version__
from mirlo_node.credentials import MirloCredentials
from mirlo_node.exceptions import MirloAPIError

DEFAULT_TIMEOUT = 30.0
DEFAULT_TIMEOUT_MS = 30000


def create_http_client(
    *,
    timeout: float = DEFAULT_TIMEOUT,
    base_url: str | None = None,
    headers: dict[str, str] | None = None,
) -> httpx.Client:
    """Build the httpx client every Mirlo request goes through.

    The User-Agent names this package and its version. Authentication is not
    baked in here; MirloHttpRequester adds the API key per request.

    Args:
        timeout: Seconds before a request is abandoned.
        base_url: Prefix for relative request URLs, if any.
        headers: Default headers merged over the User-Agent.
    """
    return httpx.Client(
        timeout=timeout,
        base_url=base_url or "",
        headers={"User-Agent": f"mirlo-node/{__version__}", **(headers or {})},
    )


def timeout_ms_from_env() -> int:
    """Read MIRLO_TIMEOUT_MS, falling back to the default.

    Raises:
        ValueError: If the variable is set but not an integer.
    """
    return int(os.environ.get("MIRLO_TIMEOUT_MS", str(DEFAULT_TIMEOUT_MS)))


def _error_detail(response: httpx.Response) -> str:
    """Best-effort human-readable detail from an error response."""
    try:
        data = response.json()
    except ValueError:
        return response.text.strip() or response.reason_phrase
    if isinstance(data, dict):
        for key in ("message", "error"):
            value = data.get(key)
            if isinstance(value, str) and value:
                return value
            if isinstance(value, list) and value:
                return ", ".join(str(v) for v in value)
    return response.reason_phrase


class MirloHttpRequester:
    """Authenticated request callable backed by httpx.

    Sends each RequestDescriptor with the credential's ``X-API-Key`` header and
    returns the decoded JSON body. Errors surface as MirloAPIError; there are
    no retries.
    """

    def __init__(
        self,
        credentials: MirloCredentials,
        *,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        client: httpx.Client | None = None,
        debug: bool = False,
    ) -> None:
        """Initialize the requester.

        Args:
            credentials: API key and base URL.
            timeout_ms: Request timeout in milliseconds.
            client: Optional preconfigured client. Its base URL is ignored;
                requests always go to ``credentials.base_url``.
            debug: Enable debug logging to stderr.
        """
        self._credentials = credentials
        self._timeout_ms = timeout_ms
        self._owns_client = client is None
        self._client = client or create_http_client(timeout=timeout_ms / 1000)
        self._debug = debug or os.environ.get("MIRLO_DEBUG", "") == "1"

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            print(f"[mirlo-node:http] {message}", file=sys.stderr)

    def __call__(self, descriptor: RequestDescriptor) -> Any:
        return self.request(descriptor)

    def request(self, descriptor: RequestDescriptor) -> Any:
        """Perform an authenticated request.

        Returns:
            The decoded JSON body, or an empty dict if the body is empty.

        Raises:
            MirloAPIError: On transport failure, non-2xx status or a body that
                is not JSON.
        """
        url = descriptor.url(self._credentials.base_url)
        kwargs: dict[str, Any] = {"headers": self._credentials.auth_headers()}
        if descriptor.query:
            kwargs["params"] = descriptor.query
        if descriptor.body is not None:
            kwargs["json"] = descriptor.body

        try:
            response = self._client.request(descriptor.method, url, **kwargs)
        except httpx.TimeoutException as e:
            self._log_debug(f"{descriptor.method} {descriptor.path} timed out")
            raise MirloAPIError(f"Request to {descriptor.path} timed out") from e
        except (httpx.RequestError, httpx.InvalidURL) as e:
            self._log_debug(f"{descriptor.method} {descriptor.path} transport error: {e}")
            raise MirloAPIError(f"Request to {descriptor.path} failed: {e}") from e

        self._log_debug(f"{descriptor.method} {descriptor.path} -> {response.status_code}")
        if not response.is_success:
            raise MirloAPIError(
                f"Mirlo API request failed with status {response.status_code}: "
                f"{_error_detail(response)}",
                status_code=response.status_code,
            )

        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError as e:
            raise MirloAPIError(
                f"Invalid JSON in response from {descriptor.path}",
                status_code=response.status_code,
            ) from e

    def test_credentials(self) -> bool:
        """Check the credentials against the API.

        Best effort: returns False on any error and never raises.
        """
        try:
            self.request(MirloCredentials.test_request())
        except Exception as e:
            self._log_debug(f"Credential test failed: {e}")
            return False
        self._log_debug("Credential test succeeded")
        return True

    def close(self) -> None:
        """Close the underlying client if this requester created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "MirloHttpRequester":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
