"""Public models for the Mirlo node."""

from mirlo_node._internal.dispatch.models import (
    HttpMethod,
    Item,
    MessageType,
    Operation,
    OutputRecord,
    RequestDescriptor,
    Resource,
)
from mirlo_node.schema import NodeDescription, NodeProperty, PropertyOption

__all__ = [
    "Resource",
    "Operation",
    "MessageType",
    "HttpMethod",
    "Item",
    "OutputRecord",
    "RequestDescriptor",
    "NodeDescription",
    "NodeProperty",
    "PropertyOption",
]
