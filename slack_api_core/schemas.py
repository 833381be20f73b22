"""
Endpoint argument schemas.

Each Slack Web API method we know about lists the arguments it requires and
the ones it accepts. The table is plain data so callers can replace or extend
it at runtime (see ApiClient.set_endpoint_schema).
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Tuple, Union


@dataclass(frozen=True)
class EndpointSchema:
    """Required and optional argument names for one endpoint."""

    required: Tuple[str, ...] = ()
    optional: Tuple[str, ...] = ()

    def __post_init__(self):
        # Accept lists from callers but store tuples
        object.__setattr__(self, "required", tuple(self.required))
        object.__setattr__(self, "optional", tuple(self.optional))

        overlap = set(self.required) & set(self.optional)
        if overlap:
            raise ValueError(
                f"Fields cannot be both required and optional: {', '.join(sorted(overlap))}"
            )

    @property
    def fields(self) -> Tuple[str, ...]:
        """All accepted argument names, required first."""
        return self.required + self.optional

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EndpointSchema":
        """Build a schema from {"required": [...], "optional": [...]}."""
        return cls(
            required=tuple(data.get("required") or ()),
            optional=tuple(data.get("optional") or ()),
        )


SchemaLike = Union[EndpointSchema, Mapping[str, Any]]


def build_schema_table(table: Mapping[str, SchemaLike]) -> Dict[str, EndpointSchema]:
    """Normalize a table whose values are schemas or plain dicts."""
    return {
        endpoint: schema if isinstance(schema, EndpointSchema) else EndpointSchema.from_dict(schema)
        for endpoint, schema in table.items()
    }


DEFAULT_ENDPOINT_SCHEMAS: Dict[str, EndpointSchema] = {
    "rtm.start": EndpointSchema(
        required=("token",),
        optional=("simple_latest", "no_unreads", "mpim_aware"),
    ),
    "chat.postMessage": EndpointSchema(
        required=("token", "channel", "text"),
        optional=(
            "parse",
            "link_names",
            "attachments",
            "unfurl_links",
            "unfurl_media",
            "username",
            "as_user",
            "icon_url",
            "icon_emoji",
        ),
    ),
    "oauth.access": EndpointSchema(
        required=("client_id", "client_secret", "code"),
        optional=("redirect_uri",),
    ),
    "team.info": EndpointSchema(required=("token",)),
    "im.list": EndpointSchema(required=("token",)),
    "users.list": EndpointSchema(required=("token",), optional=("presence",)),
    "users.info": EndpointSchema(required=("token", "user")),
}
