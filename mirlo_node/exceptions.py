"""Exceptions raised by the Mirlo node.

Hosts running with continue-on-fail see ``str(error)`` as the ``error`` field
of the failed item's output record, so messages are written for end users.
"""


class MirloError(Exception):
    """Root of every error the node raises on purpose."""


class MirloAPIError(MirloError):
    """The Mirlo API rejected a request, or it never got there.

    ``status_code`` holds the HTTP status for rejected requests and is None
    when the failure happened in transport (DNS, connect, timeout, bad URL).
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class MirloConfigError(MirloError):
    """The node cannot start: MIRLO_API_KEY or other settings are missing."""


class MirloValidationError(MirloError):
    """A node parameter is missing or malformed; no request was sent for it."""
