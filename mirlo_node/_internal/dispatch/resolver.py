"""Parameter resolution from the workflow host into typed operation parameters."""

from collections.abc import Callable, Mapping, Sequence
from typing import Any

from pydantic import ValidationError

from mirlo_node._internal.dispatch.models import PARAMS_MODELS, OperationParams
from mirlo_node.exceptions import MirloValidationError

ParameterResolver = Callable[[str, int], Any]
"""Resolve a parameter by name for an item index. Raises KeyError if unset."""


class StaticParameterResolver:
    """Resolver over plain mappings.

    Per-item overrides win over node-level parameters. Names present in
    neither raise KeyError, so the parameter model's default applies.
    """

    def __init__(
        self,
        parameters: Mapping[str, Any],
        item_parameters: Sequence[Mapping[str, Any]] | None = None,
    ) -> None:
        self._parameters = dict(parameters)
        self._item_parameters = [dict(p) for p in item_parameters or []]

    def __call__(self, name: str, index: int) -> Any:
        if index < len(self._item_parameters) and name in self._item_parameters[index]:
            return self._item_parameters[index][name]
        return self._parameters[name]


def params_model_for(resource: str, operation: str) -> type[OperationParams]:
    """Look up the parameter model for a resource/operation pair.

    Raises:
        MirloValidationError: If the pair is not supported.
    """
    model = PARAMS_MODELS.get((resource, operation))
    if model is None:
        raise MirloValidationError(
            f"Unsupported operation '{operation}' for resource '{resource}'"
        )
    return model


def _format_errors(error: ValidationError) -> str:
    parts = []
    for err in error.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "parameters"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)


def resolve_params(
    model: type[OperationParams],
    resolve: ParameterResolver,
    index: int,
) -> OperationParams:
    """Populate ``model`` for one item.

    Args:
        model: The parameter model of the batch's resource/operation pair.
        resolve: Host resolver, called once per field alias.
        index: Item index the parameters are resolved for.

    Returns:
        A validated, immutable parameter instance.

    Raises:
        MirloValidationError: If a required parameter is missing or invalid.
    """
    data: dict[str, Any] = {}
    for name, field in model.model_fields.items():
        alias = field.alias or name
        try:
            data[alias] = resolve(alias, index)
        except KeyError:
            continue

    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise MirloValidationError(
            f"Invalid parameters for {model.resource} {model.operation}: {_format_errors(e)}"
        ) from e
