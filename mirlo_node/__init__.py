"""Mirlo node for workflow automation.

Runs Mirlo WhatsApp API operations (messages, broadcasts, contacts,
conversations, templates) once per workflow item.

Public API:
    MirloNode - Node wired to the default httpx transport
    MirloCredentials - API key and base URL

Internal (used by workflow hosts):
    _internal.dispatch - Per-item action dispatcher
    _internal.http - Authenticated HTTP requester
"""

from mirlo_node._version import __version__
from mirlo_node.client import MirloNode
from mirlo_node.credentials import MirloCredentials
from mirlo_node.exceptions import (
    MirloAPIError,
    MirloConfigError,
    MirloError,
    MirloValidationError,
)

__all__ = [
    "__version__",
    "MirloNode",
    "MirloCredentials",
    "MirloError",
    "MirloAPIError",
    "MirloConfigError",
    "MirloValidationError",
]
