"""User-facing entry point for running the Mirlo node outside a workflow host.

Example usage:
    from mirlo_node import MirloNode

    with MirloNode.from_env() as node:
        records = node.execute(
            [{"json": {"phone": "+521234567890"}}],
            {
                "resource": "message",
                "operation": "send",
                "organizationId": "org-1",
                "organizationAddress": "1234567890",
                "to": "+521234567890",
                "text": "Hello from Mirlo",
            },
        )
"""

import os
from collections.abc import Mapping, Sequence
from typing import Any

from mirlo_node._internal.dispatch.client import ActionDispatcher, RequestFunc
from mirlo_node._internal.dispatch.models import Item, OutputRecord
from mirlo_node._internal.dispatch.resolver import StaticParameterResolver
from mirlo_node._internal.http import (
    DEFAULT_TIMEOUT_MS,
    MirloHttpRequester,
    timeout_ms_from_env,
)
from mirlo_node.credentials import MirloCredentials


class MirloNode:
    """Mirlo node wired to its default httpx transport.

    Hosts that inject their own authenticated request callable pass it as
    ``requester``; the node then never opens an HTTP client of its own.
    """

    def __init__(
        self,
        credentials: MirloCredentials,
        *,
        continue_on_fail: bool = False,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        debug: bool = False,
        requester: RequestFunc | None = None,
    ) -> None:
        self._credentials = credentials
        self._http: MirloHttpRequester | None = None
        if requester is None:
            self._http = MirloHttpRequester(credentials, timeout_ms=timeout_ms, debug=debug)
            requester = self._http
        self._dispatcher = ActionDispatcher(
            requester, continue_on_fail=continue_on_fail, debug=debug
        )

    @classmethod
    def from_env(cls, *, continue_on_fail: bool = False) -> "MirloNode":
        """Create a node from environment variables.

        Required environment variables:
            MIRLO_API_KEY: The Mirlo API key.

        Optional environment variables:
            MIRLO_BASE_URL: API base URL.
            MIRLO_TIMEOUT_MS: Request timeout in milliseconds.
            MIRLO_DEBUG: Set to "1" to enable debug logging.

        Raises:
            MirloConfigError: If MIRLO_API_KEY is not set.
            ValueError: If MIRLO_TIMEOUT_MS is not an integer.
        """
        return cls(
            MirloCredentials.from_env(),
            continue_on_fail=continue_on_fail,
            timeout_ms=timeout_ms_from_env(),
            debug=os.environ.get("MIRLO_DEBUG", "") == "1",
        )

    @property
    def credentials(self) -> MirloCredentials:
        return self._credentials

    def execute(
        self,
        items: Sequence[Item | dict[str, Any]],
        parameters: Mapping[str, Any],
        item_parameters: Sequence[Mapping[str, Any]] | None = None,
    ) -> list[dict[str, Any]]:
        """Run the node over ``items``.

        Args:
            items: Input items.
            parameters: Node-level parameters, including ``resource`` and
                ``operation``.
            item_parameters: Optional per-item parameter overrides, indexed
                like ``items``.

        Returns:
            Output records as ``{"json": ..., "pairedItem": ...}`` dicts.
        """
        resolver = StaticParameterResolver(parameters, item_parameters)
        records: list[OutputRecord] = self._dispatcher.run(items, resolver)
        return [record.to_dict() for record in records]

    def test_credentials(self) -> bool:
        """Check the credentials against the API. Returns False on any error.

        Only available with the default transport.
        """
        if self._http is None:
            raise TypeError("test_credentials requires the default HTTP requester")
        return self._http.test_credentials()

    def close(self) -> None:
        if self._http is not None:
            self._http.close()

    def __enter__(self) -> "MirloNode":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
