"""Action dispatch for the Mirlo node.

WARNING: This is a host-level module used by workflow engines.
Do not call directly from user code.
"""

from mirlo_node._internal.dispatch.client import (
    ActionDispatcher,
    to_records,
    unwrap,
)
from mirlo_node._internal.dispatch.models import (
    PARAMS_MODELS,
    Item,
    OperationParams,
    OutputRecord,
    RequestDescriptor,
)
from mirlo_node._internal.dispatch.parsing import lenient_parse, strict_parse
from mirlo_node._internal.dispatch.resolver import (
    ParameterResolver,
    StaticParameterResolver,
    resolve_params,
)
from mirlo_node._internal.dispatch.routing import build_request

__all__ = [
    "ActionDispatcher",
    "unwrap",
    "to_records",
    "Item",
    "OutputRecord",
    "RequestDescriptor",
    "OperationParams",
    "PARAMS_MODELS",
    "lenient_parse",
    "strict_parse",
    "ParameterResolver",
    "StaticParameterResolver",
    "resolve_params",
    "build_request",
]
