"""Tests for Pydantic models."""

import pytest
from pydantic import ValidationError

from mirlo_node._internal.dispatch.models import (
    DEFAULT_LIMIT,
    ListContactsParams,
    ListMessagesParams,
    OutputRecord,
    RequestDescriptor,
    SendMessageParams,
)


class TestRequestDescriptor:
    """Tests for RequestDescriptor."""

    def test_defaults(self):
        """Should default to no query and no body."""
        descriptor = RequestDescriptor(method="GET", path="/v1/contacts")
        assert descriptor.query == {}
        assert descriptor.body is None

    def test_is_immutable(self):
        """Should reject mutation after construction."""
        descriptor = RequestDescriptor(method="GET", path="/v1/contacts")
        with pytest.raises(ValidationError):
            descriptor.path = "/v1/other"

    def test_rejects_unknown_method(self):
        """Should only allow GET and POST."""
        with pytest.raises(ValidationError):
            RequestDescriptor(method="DELETE", path="/v1/contacts/1")

    def test_url(self):
        """Should join base URL and path."""
        descriptor = RequestDescriptor(method="GET", path="/v1/contacts")
        assert descriptor.url("http://mirlo.test/") == "http://mirlo.test/v1/contacts"


class TestOutputRecord:
    """Tests for OutputRecord."""

    def test_to_dict_uses_host_names(self):
        """Should serialize with json/pairedItem keys."""
        record = OutputRecord(json={"id": 1}, pairedItem=3)
        assert record.to_dict() == {"json": {"id": 1}, "pairedItem": 3}

    def test_populate_by_name(self):
        """Should accept Python field names."""
        record = OutputRecord(json_data={"id": 1}, paired_item=0)
        assert record.json_data == {"id": 1}


class TestOperationParams:
    """Tests for per-operation parameter models."""

    def test_limit_default(self):
        """Should default limit to 50."""
        params = ListMessagesParams.model_validate({})
        assert params.limit == DEFAULT_LIMIT
        assert params.conversation_id == ""

    @pytest.mark.parametrize("limit", [0, 101])
    def test_limit_bounds(self, limit):
        """Should reject limits outside 1..100."""
        with pytest.raises(ValidationError):
            ListMessagesParams.model_validate({"limit": limit})

    def test_required_field_missing(self):
        """Should reject a missing required parameter."""
        with pytest.raises(ValidationError) as exc_info:
            ListContactsParams.model_validate({"limit": 10})
        assert "organizationId" in str(exc_info.value)

    def test_required_field_empty(self):
        """Should reject an empty required parameter."""
        with pytest.raises(ValidationError):
            ListContactsParams.model_validate({"organizationId": ""})

    def test_numeric_id_coerced_to_string(self):
        """Should accept numeric IDs from expressions."""
        params = ListContactsParams.model_validate({"organizationId": 42})
        assert params.organization_id == "42"

    def test_class_tags(self):
        """Should carry resource and operation tags."""
        assert SendMessageParams.resource == "message"
        assert SendMessageParams.operation == "send"


class TestSendMessageParams:
    """Tests for message content validation."""

    BASE = {"organizationId": "org", "organizationAddress": "addr", "to": "+1"}

    def test_text_requires_text(self):
        """Text messages need a body."""
        with pytest.raises(ValidationError) as exc_info:
            SendMessageParams.model_validate({**self.BASE, "messageType": "text"})
        assert "text is required" in str(exc_info.value)

    def test_media_requires_url(self):
        """Media messages need a link."""
        with pytest.raises(ValidationError) as exc_info:
            SendMessageParams.model_validate({**self.BASE, "messageType": "image"})
        assert "mediaUrl is required" in str(exc_info.value)

    def test_unknown_message_type(self):
        """Should reject unsupported message types."""
        with pytest.raises(ValidationError):
            SendMessageParams.model_validate({**self.BASE, "messageType": "sticker"})
