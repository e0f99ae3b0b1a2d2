"""Per-item action dispatcher for the Mirlo node."""

import os
import sys
from collections.abc import Callable, Sequence
from typing import Any

from mirlo_node._internal.dispatch.models import Item, OutputRecord, RequestDescriptor
from mirlo_node._internal.dispatch.resolver import (
    ParameterResolver,
    params_model_for,
    resolve_params,
)
from mirlo_node._internal.dispatch.routing import build_request
from mirlo_node.exceptions import MirloValidationError

RequestFunc = Callable[[RequestDescriptor], Any]


def unwrap(body: Any) -> Any:
    """Return the ``data`` member of a response envelope, or the body itself.

    A body is an envelope only if it is an object with a non-null ``data`` key.
    """
    if isinstance(body, dict) and body.get("data") is not None:
        return body["data"]
    return body


def to_records(payload: Any, index: int) -> list[OutputRecord]:
    """Convert a response payload into output records paired to ``index``.

    Lists produce one record per entry. ``None`` produces one empty record.
    Non-object values are wrapped as ``{"value": ...}``.
    """
    entries = payload if isinstance(payload, list) else [payload]
    records = []
    for entry in entries:
        if entry is None:
            entry = {}
        elif not isinstance(entry, dict):
            entry = {"value": entry}
        records.append(OutputRecord(json=entry, pairedItem=index))
    return records


class ActionDispatcher:
    """Runs one resource/operation pair over a batch of workflow items.

    Items are processed strictly in order, one request per item. The
    authenticated request callable is injected; the dispatcher never handles
    credentials itself.
    """

    def __init__(
        self,
        request: RequestFunc,
        *,
        continue_on_fail: bool = False,
        debug: bool = False,
    ) -> None:
        """Initialize the dispatcher.

        Args:
            request: Callable that performs an authenticated request for a
                RequestDescriptor and returns the decoded JSON body.
            continue_on_fail: Emit an error record for a failing item and keep
                going instead of raising.
            debug: Enable debug logging to stderr.
        """
        self._request = request
        self._continue_on_fail = continue_on_fail
        self._debug = debug or os.environ.get("MIRLO_DEBUG", "") == "1"

    @property
    def continue_on_fail(self) -> bool:
        return self._continue_on_fail

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            print(f"[mirlo-node] {message}", file=sys.stderr)

    def run(
        self,
        items: Sequence[Item | dict[str, Any]],
        resolve: ParameterResolver,
    ) -> list[OutputRecord]:
        """Dispatch a batch, reading resource and operation from item 0.

        Heterogeneous per-item resource/operation selection is not supported.

        Raises:
            MirloValidationError: If resource or operation is not set.
        """
        try:
            resource = resolve("resource", 0)
            operation = resolve("operation", 0)
        except KeyError as e:
            raise MirloValidationError("resource and operation are required") from e
        return self.execute(items, resource, operation, resolve)

    def execute(
        self,
        items: Sequence[Item | dict[str, Any]],
        resource: str,
        operation: str,
        resolve: ParameterResolver,
    ) -> list[OutputRecord]:
        """Dispatch one request per item.

        Args:
            items: Input items. Only their count and order matter here; item
                data reaches the request through ``resolve``.
            resource: Resource selected for the whole batch.
            operation: Operation selected for the whole batch.
            resolve: Host parameter resolver.

        Returns:
            Output records in input order, each paired to its item index.

        Raises:
            MirloValidationError: If the pair is unsupported, or an item's
                parameters are invalid and continue-on-fail is off.
            MirloAPIError: Propagated from the request callable when
                continue-on-fail is off.
        """
        model = params_model_for(resource, operation)
        records: list[OutputRecord] = []

        for index in range(len(items)):
            try:
                params = resolve_params(model, resolve, index)
                descriptor = build_request(params)
                self._log_debug(f"Item {index}: {descriptor.method} {descriptor.path}")
                body = self._request(descriptor)
                records.extend(to_records(unwrap(body), index))
            except Exception as e:
                if not self._continue_on_fail:
                    raise
                self._log_debug(f"Item {index} failed, continuing: {e}")
                records.append(OutputRecord(json={"error": str(e)}, pairedItem=index))

        return records
