"""Request construction for every supported resource/operation pair."""

from collections.abc import Callable
from typing import Any

from mirlo_node._internal.dispatch.models import (
    CAPTION_TYPES,
    MEDIA_TYPES,
    CreateBroadcastParams,
    GetBroadcastParams,
    GetContactParams,
    GetConversationParams,
    GetMessageParams,
    ListBroadcastRecipientsParams,
    ListBroadcastsParams,
    ListContactsParams,
    ListConversationsParams,
    ListMessagesParams,
    ListTemplatesParams,
    OperationParams,
    RequestDescriptor,
    SendBroadcastParams,
    SendMessageParams,
    SendTemplateParams,
)
from mirlo_node._internal.dispatch.parsing import lenient_parse, strict_parse
from mirlo_node.exceptions import MirloValidationError


def build_message(params: SendMessageParams) -> dict[str, Any]:
    """Build the structured message object, keyed by its type.

    Optional media fields are left out when empty.
    """
    message_type = params.message_type
    if message_type == "text":
        content: dict[str, Any] = {"body": params.text}
    else:
        content = {"link": params.media_url}
        if params.caption and message_type in CAPTION_TYPES:
            content["caption"] = params.caption
        if params.filename and message_type == "document":
            content["filename"] = params.filename
    return {"type": message_type, message_type: content}


# =============================================================================
# Message
# =============================================================================


def _send_message(params: SendMessageParams) -> RequestDescriptor:
    return RequestDescriptor(
        method="POST",
        path="/v1/messages/send",
        body={
            "organization_id": params.organization_id,
            "organization_address": params.organization_address,
            "to": params.to,
            "message": build_message(params),
        },
    )


def _send_template(params: SendTemplateParams) -> RequestDescriptor:
    return RequestDescriptor(
        method="POST",
        path="/v1/messages/send-template",
        body={
            "organization_id": params.organization_id,
            "organization_address": params.organization_address,
            "to": params.to,
            "meta_template_id": params.meta_template_id,
            "components": lenient_parse(params.components, default=[]),
            "do_not_pause": params.do_not_pause,
        },
    )


def _get_message(params: GetMessageParams) -> RequestDescriptor:
    return RequestDescriptor(method="GET", path=f"/v1/messages/{params.message_id}")


def _list_messages(params: ListMessagesParams) -> RequestDescriptor:
    query: dict[str, str | int] = {"take": params.limit}
    if params.conversation_id:
        query["conversation_id"] = params.conversation_id
    return RequestDescriptor(method="GET", path="/v1/messages", query=query)


# =============================================================================
# Broadcast
# =============================================================================


def _create_broadcast(params: CreateBroadcastParams) -> RequestDescriptor:
    recipients = strict_parse(params.recipients, field="recipients")
    return RequestDescriptor(
        method="POST",
        path="/v1/broadcasts",
        body={
            "name": params.name,
            "organization_id": params.organization_id,
            "organization_address": params.organization_address,
            "meta_template_id": params.meta_template_id,
            "recipients": recipients,
        },
    )


def _send_broadcast(params: SendBroadcastParams) -> RequestDescriptor:
    return RequestDescriptor(method="POST", path=f"/v1/broadcasts/{params.broadcast_id}/send")


def _get_broadcast(params: GetBroadcastParams) -> RequestDescriptor:
    return RequestDescriptor(method="GET", path=f"/v1/broadcasts/{params.broadcast_id}")


def _list_broadcasts(params: ListBroadcastsParams) -> RequestDescriptor:
    query: dict[str, str | int] = {"take": params.limit}
    if params.organization_id:
        query["organization_id"] = params.organization_id
    return RequestDescriptor(method="GET", path="/v1/broadcasts", query=query)


def _list_broadcast_recipients(params: ListBroadcastRecipientsParams) -> RequestDescriptor:
    return RequestDescriptor(
        method="GET",
        path=f"/v1/broadcasts/{params.broadcast_id}/recipients",
        query={"take": params.limit},
    )


# =============================================================================
# Contact / Conversation / Template
# =============================================================================


def _get_contact(params: GetContactParams) -> RequestDescriptor:
    return RequestDescriptor(method="GET", path=f"/v1/contacts/{params.contact_id}")


def _list_contacts(params: ListContactsParams) -> RequestDescriptor:
    return RequestDescriptor(
        method="GET",
        path="/v1/contacts",
        query={"organization_id": params.organization_id, "take": params.limit},
    )


def _get_conversation(params: GetConversationParams) -> RequestDescriptor:
    return RequestDescriptor(method="GET", path=f"/v1/conversations/{params.conversation_id}")


def _list_conversations(params: ListConversationsParams) -> RequestDescriptor:
    return RequestDescriptor(
        method="GET",
        path="/v1/conversations",
        query={"organization_id": params.organization_id, "take": params.limit},
    )


def _list_templates(params: ListTemplatesParams) -> RequestDescriptor:
    return RequestDescriptor(
        method="GET",
        path="/v1/whatsapp-management/templates",
        query={"organization_address": params.organization_address},
    )


ROUTES: dict[type[OperationParams], Callable[[Any], RequestDescriptor]] = {
    SendMessageParams: _send_message,
    SendTemplateParams: _send_template,
    GetMessageParams: _get_message,
    ListMessagesParams: _list_messages,
    CreateBroadcastParams: _create_broadcast,
    SendBroadcastParams: _send_broadcast,
    GetBroadcastParams: _get_broadcast,
    ListBroadcastsParams: _list_broadcasts,
    ListBroadcastRecipientsParams: _list_broadcast_recipients,
    GetContactParams: _get_contact,
    ListContactsParams: _list_contacts,
    GetConversationParams: _get_conversation,
    ListConversationsParams: _list_conversations,
    ListTemplatesParams: _list_templates,
}


def build_request(params: OperationParams) -> RequestDescriptor:
    """Build the request for a resolved set of operation parameters.

    Raises:
        MirloValidationError: If no route exists for the parameter type, or a
            strictly parsed JSON field is malformed.
    """
    builder = ROUTES.get(type(params))
    if builder is None:
        raise MirloValidationError(
            f"Unsupported operation '{params.operation}' for resource '{params.resource}'"
        )
    return builder(params)
