"""Mirlo API credentials."""

import os

from pydantic import BaseModel, ConfigDict, Field, field_validator

from mirlo_node._internal.dispatch.models import RequestDescriptor
from mirlo_node.exceptions import MirloConfigError

DEFAULT_BASE_URL = "https://api.mirlo.com"
API_KEY_HEADER = "X-API-Key"
CREDENTIAL_NAME = "mirloApi"


class MirloCredentials(BaseModel):
    """API key and base URL for the Mirlo API.

    The API key is sent as the ``X-API-Key`` header on every request.
    """

    api_key: str = Field(min_length=1, repr=False)
    base_url: str = DEFAULT_BASE_URL

    model_config = ConfigDict(frozen=True)

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if not v:
            raise ValueError("base_url must not be empty")
        return v

    @classmethod
    def from_env(cls) -> "MirloCredentials":
        """Create credentials from environment variables.

        Required environment variables:
            MIRLO_API_KEY: The Mirlo API key (starts with sk_live_).

        Optional environment variables:
            MIRLO_BASE_URL: API base URL (default: https://api.mirlo.com).

        Raises:
            MirloConfigError: If MIRLO_API_KEY is not set.
        """
        api_key = os.environ.get("MIRLO_API_KEY")
        if not api_key:
            raise MirloConfigError("MIRLO_API_KEY is not set")
        base_url = os.environ.get("MIRLO_BASE_URL") or DEFAULT_BASE_URL
        return cls(api_key=api_key, base_url=base_url)

    def auth_headers(self) -> dict[str, str]:
        """Headers that authenticate a request."""
        return {API_KEY_HEADER: self.api_key}

    @staticmethod
    def test_request() -> RequestDescriptor:
        """Request used to check that stored credentials are valid."""
        return RequestDescriptor(method="GET", path="/v1/organizations")
