"""Pydantic models for Mirlo dispatch.

Parameter models form a tagged union: the resource is the outer tag, the
operation the inner one. Field aliases are the parameter names the workflow
host resolves (``organizationId``, ``metaTemplateId``, ...).
"""

from typing import Any, ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

# =============================================================================
# Constants
# =============================================================================

DEFAULT_LIMIT = 50
MIN_LIMIT = 1
MAX_LIMIT = 100
DEFAULT_COMPONENTS = "[]"
DEFAULT_RECIPIENTS = '[{"phone_number": "+521234567890"}]'

Resource = Literal["message", "broadcast", "contact", "conversation", "template"]
Operation = Literal["send", "sendTemplate", "get", "getAll", "create", "getRecipients"]
HttpMethod = Literal["GET", "POST"]
MessageType = Literal["text", "image", "video", "audio", "document"]

MEDIA_TYPES: frozenset[str] = frozenset({"image", "video", "audio", "document"})
CAPTION_TYPES: frozenset[str] = frozenset({"image", "video", "document"})

# =============================================================================
# Request / Item / Output
# =============================================================================


class RequestDescriptor(BaseModel):
    """A single HTTP request against the Mirlo API.

    The path is relative to the credential's base URL. Query parameters keep
    their insertion order.
    """

    method: HttpMethod
    path: str
    query: dict[str, str | int] = Field(default_factory=dict)
    body: dict[str, Any] | None = None

    model_config = ConfigDict(frozen=True)

    def url(self, base_url: str) -> str:
        """Absolute URL for this request under ``base_url``."""
        return f"{base_url.rstrip('/')}{self.path}"


class Item(BaseModel):
    """One unit of workflow input data."""

    json_data: dict[str, Any] = Field(default_factory=dict, alias="json")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class OutputRecord(BaseModel):
    """One unit of workflow output data, linked to the input item it came from."""

    json_data: dict[str, Any] = Field(alias="json")
    paired_item: int = Field(alias="pairedItem", ge=0)

    model_config = ConfigDict(populate_by_name=True)

    def to_dict(self) -> dict[str, Any]:
        """Host-facing shape: ``{"json": ..., "pairedItem": ...}``."""
        return self.model_dump(by_alias=True)


# =============================================================================
# Operation Parameters
# =============================================================================


def _required(alias: str, title: str, description: str, **extra: Any) -> Any:
    return Field(
        alias=alias,
        title=title,
        description=description,
        min_length=1,
        json_schema_extra=extra or None,
    )


def _limit() -> Any:
    return Field(
        default=DEFAULT_LIMIT,
        ge=MIN_LIMIT,
        le=MAX_LIMIT,
        title="Limit",
        description="Max number of results to return",
    )


class OperationParams(BaseModel):
    """Base class for per-operation parameters.

    Subclasses set ``resource`` and ``operation`` as class variables.
    """

    resource: ClassVar[str]
    operation: ClassVar[str]

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra="ignore",
    )


# -- message ------------------------------------------------------------------


class SendMessageParams(OperationParams):
    """Free-form text or media message to a single recipient."""

    resource = "message"
    operation = "send"

    organization_id: str = _required(
        "organizationId", "Organization ID", "The ID of your organization"
    )
    organization_address: str = _required(
        "organizationAddress",
        "Organization Address",
        "The WhatsApp phone number ID (organization address)",
    )
    to: str = _required(
        "to", "To", "Recipient phone number with country code", placeholder="+521234567890"
    )
    message_type: MessageType = Field(
        default="text",
        alias="messageType",
        title="Message Type",
        description="Type of message to send",
    )
    text: str = Field(
        default="",
        title="Text",
        description="Body of the text message",
        json_schema_extra={"show_message_types": ["text"]},
    )
    media_url: str = Field(
        default="",
        alias="mediaUrl",
        title="Media URL",
        description="Public URL of the media file",
        json_schema_extra={"show_message_types": sorted(MEDIA_TYPES)},
    )
    caption: str = Field(
        default="",
        title="Caption",
        description="Optional caption shown with the media",
        json_schema_extra={"show_message_types": sorted(CAPTION_TYPES)},
    )
    filename: str = Field(
        default="",
        title="Filename",
        description="Optional filename shown for the document",
        json_schema_extra={"show_message_types": ["document"]},
    )

    @model_validator(mode="after")
    def content_matches_type(self) -> "SendMessageParams":
        if self.message_type == "text" and not self.text:
            raise ValueError("text is required for text messages")
        if self.message_type in MEDIA_TYPES and not self.media_url:
            raise ValueError(f"mediaUrl is required for {self.message_type} messages")
        return self


class SendTemplateParams(OperationParams):
    """Template message to a single recipient."""

    resource = "message"
    operation = "sendTemplate"

    organization_id: str = _required(
        "organizationId", "Organization ID", "The ID of your organization"
    )
    organization_address: str = _required(
        "organizationAddress",
        "Organization Address",
        "The WhatsApp phone number ID (organization address)",
    )
    to: str = _required(
        "to", "To", "Recipient phone number with country code", placeholder="+521234567890"
    )
    meta_template_id: str = _required("metaTemplateId", "Template ID", "The Meta template ID")
    components: Any = Field(
        default=DEFAULT_COMPONENTS,
        title="Template Components",
        description="Template components with parameters (JSON array)",
        json_schema_extra={"ui_type": "json"},
    )
    do_not_pause: bool = Field(
        default=False,
        alias="doNotPause",
        title="Do Not Pause",
        description="Keep the conversation's automation running after sending",
    )


class GetMessageParams(OperationParams):
    resource = "message"
    operation = "get"

    message_id: str = _required("messageId", "Message ID", "The ID of the message to retrieve")


class ListMessagesParams(OperationParams):
    resource = "message"
    operation = "getAll"

    conversation_id: str = Field(
        default="",
        alias="conversationId",
        title="Conversation ID",
        description="Filter messages by conversation ID",
    )
    limit: int = _limit()


# -- broadcast ----------------------------------------------------------------


class CreateBroadcastParams(OperationParams):
    """Templated campaign to a list of recipients."""

    resource = "broadcast"
    operation = "create"

    name: str = _required("name", "Name", "Name of the broadcast campaign")
    organization_id: str = _required(
        "organizationId", "Organization ID", "The ID of your organization"
    )
    organization_address: str = _required(
        "organizationAddress", "Organization Address", "The WhatsApp phone number ID"
    )
    meta_template_id: str = _required(
        "metaTemplateId", "Template ID", "The Meta template ID to use"
    )
    recipients: Any = Field(
        title="Recipients",
        description="Array of recipients with phone numbers and optional components",
        json_schema_extra={"ui_type": "json", "ui_default": DEFAULT_RECIPIENTS},
    )


class SendBroadcastParams(OperationParams):
    resource = "broadcast"
    operation = "send"

    broadcast_id: str = _required("broadcastId", "Broadcast ID", "The ID of the broadcast")


class GetBroadcastParams(OperationParams):
    resource = "broadcast"
    operation = "get"

    broadcast_id: str = _required("broadcastId", "Broadcast ID", "The ID of the broadcast")


class ListBroadcastsParams(OperationParams):
    resource = "broadcast"
    operation = "getAll"

    organization_id: str = Field(
        default="",
        alias="organizationId",
        title="Organization ID",
        description="Filter by organization ID",
    )
    limit: int = _limit()


class ListBroadcastRecipientsParams(OperationParams):
    resource = "broadcast"
    operation = "getRecipients"

    broadcast_id: str = _required("broadcastId", "Broadcast ID", "The ID of the broadcast")
    limit: int = _limit()


# -- contact / conversation / template ---------------------------------------


class GetContactParams(OperationParams):
    resource = "contact"
    operation = "get"

    contact_id: str = _required("contactId", "Contact ID", "The ID of the contact to retrieve")


class ListContactsParams(OperationParams):
    resource = "contact"
    operation = "getAll"

    organization_id: str = _required(
        "organizationId", "Organization ID", "The ID of your organization"
    )
    limit: int = _limit()


class GetConversationParams(OperationParams):
    resource = "conversation"
    operation = "get"

    conversation_id: str = _required(
        "conversationId", "Conversation ID", "The ID of the conversation to retrieve"
    )


class ListConversationsParams(OperationParams):
    resource = "conversation"
    operation = "getAll"

    organization_id: str = _required(
        "organizationId", "Organization ID", "The ID of your organization"
    )
    limit: int = _limit()


class ListTemplatesParams(OperationParams):
    resource = "template"
    operation = "getAll"

    organization_address: str = _required(
        "organizationAddress", "Organization Address", "The WhatsApp phone number ID"
    )


# =============================================================================
# Registry
# =============================================================================

PARAMS_MODELS: dict[tuple[str, str], type[OperationParams]] = {
    (model.resource, model.operation): model
    for model in (
        SendMessageParams,
        SendTemplateParams,
        GetMessageParams,
        ListMessagesParams,
        CreateBroadcastParams,
        SendBroadcastParams,
        GetBroadcastParams,
        ListBroadcastsParams,
        ListBroadcastRecipientsParams,
        GetContactParams,
        ListContactsParams,
        GetConversationParams,
        ListConversationsParams,
        ListTemplatesParams,
    )
}
