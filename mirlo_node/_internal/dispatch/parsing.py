"""JSON parsing strategies for parameters entered as JSON text.

Two call sites use different policies and must stay that way:
template components fall back to a default, broadcast recipients fail loudly.
"""

import json
from typing import Any

from mirlo_node.exceptions import MirloValidationError


def lenient_parse(raw: Any, default: Any) -> Any:
    """Parse JSON text, returning ``default`` if it is malformed.

    Already-decoded lists and dicts are returned as-is.
    """
    if isinstance(raw, (list, dict)):
        return raw
    try:
        return json.loads(raw)
    except (TypeError, ValueError):
        return default


def strict_parse(raw: Any, field: str) -> Any:
    """Parse JSON text, raising MirloValidationError if it is malformed.

    Already-decoded lists and dicts are returned as-is.

    Args:
        raw: The parameter value.
        field: Parameter name used in the error message.

    Raises:
        MirloValidationError: If ``raw`` is not valid JSON.
    """
    if isinstance(raw, (list, dict)):
        return raw
    try:
        return json.loads(raw)
    except (TypeError, ValueError) as e:
        raise MirloValidationError(f"Invalid {field} JSON format") from e
