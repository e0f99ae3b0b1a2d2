"""Static node description for hosts that render the node's configuration UI.

Operation fields are derived from the parameter models, so the UI schema and
the values the dispatcher validates cannot drift apart.
"""

from typing import Any, Literal, get_args, get_origin

from pydantic import BaseModel, Field
from pydantic.fields import FieldInfo

from mirlo_node._internal.dispatch.models import PARAMS_MODELS, OperationParams
from mirlo_node._internal.dispatch.resolver import params_model_for
from mirlo_node._version import __version__
from mirlo_node.credentials import CREDENTIAL_NAME

PropertyType = Literal["options", "string", "number", "boolean", "json"]


class PropertyOption(BaseModel):
    """One choice of an ``options`` property."""

    name: str
    value: str
    description: str | None = None
    action: str | None = None


class NodeProperty(BaseModel):
    """A configurable field of the node.

    ``show`` maps parameter names to the values that make this field visible;
    the field is only relevant when every listed parameter matches.
    """

    name: str
    display_name: str
    type: PropertyType
    default: Any = None
    required: bool = False
    description: str | None = None
    placeholder: str | None = None
    options: list[PropertyOption] | None = None
    show: dict[str, list[str]] | None = None
    min_value: int | None = None
    max_value: int | None = None
    no_data_expression: bool = False


class NodeDescription(BaseModel):
    name: str
    display_name: str
    description: str
    version: str
    credentials: list[str] = Field(default_factory=list)
    subtitle: str | None = None


NODE_DESCRIPTION = NodeDescription(
    name="mirlo",
    display_name="Mirlo",
    description=(
        "Send WhatsApp messages, manage broadcasts, contacts and conversations with Mirlo"
    ),
    version=__version__,
    credentials=[CREDENTIAL_NAME],
    subtitle='={{$parameter["operation"] + ": " + $parameter["resource"]}}',
)

RESOURCES: list[PropertyOption] = [
    PropertyOption(name="Message", value="message"),
    PropertyOption(name="Broadcast", value="broadcast"),
    PropertyOption(name="Contact", value="contact"),
    PropertyOption(name="Conversation", value="conversation"),
    PropertyOption(name="Template", value="template"),
]

OPERATIONS: dict[str, list[PropertyOption]] = {
    "message": [
        PropertyOption(
            name="Send",
            value="send",
            description="Send a text or media message to a single recipient",
            action="Send a message",
        ),
        PropertyOption(
            name="Send Template",
            value="sendTemplate",
            description="Send a WhatsApp template message to a single recipient",
            action="Send a template message",
        ),
        PropertyOption(
            name="Get", value="get", description="Get a message by ID", action="Get a message"
        ),
        PropertyOption(
            name="Get Many",
            value="getAll",
            description="Get many messages",
            action="Get many messages",
        ),
    ],
    "broadcast": [
        PropertyOption(
            name="Create",
            value="create",
            description="Create a new broadcast",
            action="Create a broadcast",
        ),
        PropertyOption(
            name="Send", value="send", description="Send a broadcast", action="Send a broadcast"
        ),
        PropertyOption(
            name="Get", value="get", description="Get a broadcast by ID", action="Get a broadcast"
        ),
        PropertyOption(
            name="Get Many",
            value="getAll",
            description="Get many broadcasts",
            action="Get many broadcasts",
        ),
        PropertyOption(
            name="Get Recipients",
            value="getRecipients",
            description="Get recipients of a broadcast",
            action="Get broadcast recipients",
        ),
    ],
    "contact": [
        PropertyOption(
            name="Get", value="get", description="Get a contact by ID", action="Get a contact"
        ),
        PropertyOption(
            name="Get Many",
            value="getAll",
            description="Get many contacts",
            action="Get many contacts",
        ),
    ],
    "conversation": [
        PropertyOption(
            name="Get",
            value="get",
            description="Get a conversation by ID",
            action="Get a conversation",
        ),
        PropertyOption(
            name="Get Many",
            value="getAll",
            description="Get many conversations",
            action="Get many conversations",
        ),
    ],
    "template": [
        PropertyOption(
            name="Get Many",
            value="getAll",
            description="Get available WhatsApp templates",
            action="Get many templates",
        ),
    ],
}

DEFAULT_OPERATIONS: dict[str, str] = {
    "message": "send",
    "broadcast": "create",
    "contact": "getAll",
    "conversation": "getAll",
    "template": "getAll",
}


def _field_type(field: FieldInfo) -> PropertyType:
    extra = field.json_schema_extra if isinstance(field.json_schema_extra, dict) else {}
    if extra.get("ui_type") == "json":
        return "json"
    annotation = field.annotation
    if get_origin(annotation) is Literal:
        return "options"
    if annotation is bool:
        return "boolean"
    if annotation is int:
        return "number"
    return "string"


def _field_property(
    model: type[OperationParams], name: str, field: FieldInfo
) -> NodeProperty:
    extra = field.json_schema_extra if isinstance(field.json_schema_extra, dict) else {}
    prop_type = _field_type(field)

    show: dict[str, list[str]] = {
        "resource": [model.resource],
        "operation": [model.operation],
    }
    if "show_message_types" in extra:
        show["messageType"] = list(extra["show_message_types"])

    if field.is_required():
        default = extra.get("ui_default", "")
    else:
        default = field.default

    options = None
    if prop_type == "options":
        options = [
            PropertyOption(name=str(v).capitalize(), value=str(v))
            for v in get_args(field.annotation)
        ]

    min_value = max_value = None
    for constraint in field.metadata:
        min_value = getattr(constraint, "ge", min_value)
        max_value = getattr(constraint, "le", max_value)

    return NodeProperty(
        name=field.alias or name,
        display_name=field.title or name,
        type=prop_type,
        default=default,
        required=field.is_required(),
        description=field.description,
        placeholder=extra.get("placeholder"),
        options=options,
        show=show,
        min_value=min_value,
        max_value=max_value,
    )


def node_properties() -> list[NodeProperty]:
    """Every configurable field of the node, selectors first."""
    properties = [
        NodeProperty(
            name="resource",
            display_name="Resource",
            type="options",
            default="message",
            options=RESOURCES,
            no_data_expression=True,
        )
    ]
    for resource, operations in OPERATIONS.items():
        properties.append(
            NodeProperty(
                name="operation",
                display_name="Operation",
                type="options",
                default=DEFAULT_OPERATIONS[resource],
                options=operations,
                show={"resource": [resource]},
                no_data_expression=True,
            )
        )
    for model in PARAMS_MODELS.values():
        for name, field in model.model_fields.items():
            properties.append(_field_property(model, name, field))
    return properties


def visible_parameters(resource: str, operation: str) -> list[str]:
    """Parameter names relevant to a resource/operation pair.

    Raises:
        MirloValidationError: If the pair is not supported.
    """
    model = params_model_for(resource, operation)
    return [field.alias or name for name, field in model.model_fields.items()]
