"""
ApiClient - Slack Web API client with per-endpoint argument validation.

Handles:
- Default arguments (bot token, username, as_user, icon_url) merged into every call
- Required argument checks and filtering against the endpoint schema table
- Form-encoded POST and JSON decoding of the reply
- Thin wrappers for the endpoints the bot uses
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Union

import httpx

from .config import AS_USER, BOT_USER_TOKEN, BOT_USERNAME, ICON_URL, BotConfig
from .errors import ResponseDecodeError, TransportError, ValidationError
from .models import ImChannel, Team, User
from .schemas import DEFAULT_ENDPOINT_SCHEMAS, EndpointSchema, SchemaLike, build_schema_table
from .utils import encode_form_body, filter_mapping, has_value

logger = logging.getLogger(__name__)

SLACK_API_BASE_URL = "https://slack.com/api/"
CONTENT_TYPE = "application/x-www-form-urlencoded"


class ApiClient:
    """Slack Web API client. One instance per bot token."""

    def __init__(
        self,
        token: Optional[str] = None,
        config: Optional[Any] = None,
        timeout: float = 10.0,
    ):
        """
        Initialize the client.

        Args:
            token: Slack Bot OAuth token; resolved from config on first use if not given
            config: Object with get(key), e.g. BotConfig or a dict. Defaults to BotConfig.from_env()
            timeout: Request timeout in seconds
        """
        self.config = config if config is not None else BotConfig.from_env()
        self.client = httpx.Client(timeout=timeout)
        self._schemas: Dict[str, EndpointSchema] = dict(DEFAULT_ENDPOINT_SCHEMAS)
        self._token: Optional[str] = None
        self._token_resolved = False
        self.set_token(token)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def close(self):
        """Close the underlying HTTP client."""
        self.client.close()

    # ------------------------------------------------------------------
    # Core call
    # ------------------------------------------------------------------

    def call(self, endpoint: str, arguments: Optional[Mapping[str, Any]] = None) -> Union[Dict, List]:
        """
        Call a Slack API endpoint with a form-encoded POST.

        Args:
            endpoint: API method name, e.g. "chat.postMessage"
            arguments: Endpoint arguments; defaults are merged in and win on conflict

        Returns:
            Decoded JSON response, unmodified

        Raises:
            ValidationError: A required argument is missing
            TransportError: The request failed or Slack returned an HTTP error
            ResponseDecodeError: The body is not a JSON object or array
        """
        body = self._prepare_request_body(endpoint, arguments or {})
        response = self._send_request(endpoint, body)
        return self._process_response(endpoint, response)

    def _prepare_request_body(self, endpoint: str, arguments: Mapping[str, Any]) -> str:
        # Configured defaults win on conflict; unset ones leave caller values alone
        defaults = {k: v for k, v in self.get_default_arguments().items() if v is not None}
        merged = {**arguments, **defaults}
        self._validate_required_arguments(endpoint, merged)

        filtered = self.filter_arguments(endpoint, merged)
        logger.debug(f"Calling {endpoint} with fields: {', '.join(sorted(filtered))}")
        return encode_form_body(filtered)

    def _validate_required_arguments(self, endpoint: str, arguments: Mapping[str, Any]):
        schema = self.get_endpoint_schema(endpoint)
        if schema is None:
            return

        for field in schema.required:
            if not has_value(field, arguments):
                raise ValidationError(field, endpoint)

    def _send_request(self, endpoint: str, body: str) -> httpx.Response:
        try:
            response = self.client.post(
                f"{SLACK_API_BASE_URL}{endpoint}",
                headers={"Content-Type": CONTENT_TYPE},
                content=body,
            )
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"Request to {endpoint} failed: {e}")
            raise TransportError(f"Failed to send data to the Slack API: {e}") from e
        return response

    def _process_response(self, endpoint: str, response: httpx.Response) -> Union[Dict, List]:
        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"Invalid JSON from {endpoint}")
            raise ResponseDecodeError(body=response.text) from e

        if not isinstance(data, (dict, list)):
            logger.error(f"Unexpected response type from {endpoint}: {type(data).__name__}")
            raise ResponseDecodeError(body=response.text)

        if isinstance(data, dict) and data.get("ok") is False:
            logger.warning(f"Slack API error in {endpoint}: {data.get('error')}")
        return data

    # ------------------------------------------------------------------
    # Arguments and schemas
    # ------------------------------------------------------------------

    def get_default_arguments(self) -> Dict[str, Any]:
        """Arguments merged into every call."""
        return {
            "token": self.get_token(),
            "username": self.config.get(BOT_USERNAME),
            "as_user": self.config.get(AS_USER),
            "icon_url": self.config.get(ICON_URL),
        }

    def get_endpoint_schema(self, endpoint: Optional[str] = None):
        """
        Look up argument schemas.

        Returns the whole table when endpoint is None, otherwise the endpoint's
        EndpointSchema, or None if the endpoint is unknown.
        """
        if endpoint is None:
            return self._schemas
        return self._schemas.get(endpoint)

    def set_endpoint_schema(self, table: Mapping[str, SchemaLike]):
        """Replace the schema table. Values may be EndpointSchema or plain dicts."""
        self._schemas = build_schema_table(table)

    def filter_arguments(self, endpoint: str, arguments: Mapping[str, Any]) -> Dict[str, Any]:
        """Drop arguments the endpoint does not accept. Unknown or empty schemas keep all."""
        schema = self.get_endpoint_schema(endpoint)
        if schema is None or not schema.fields:
            return dict(arguments)
        return filter_mapping(arguments, schema.fields)

    # ------------------------------------------------------------------
    # Token
    # ------------------------------------------------------------------

    def get_token(self) -> Optional[str]:
        """Bot token, falling back to the configured botUserToken once."""
        if not self._token_resolved:
            self._token = self.config.get(BOT_USER_TOKEN)
            self._token_resolved = True
        return self._token

    def set_token(self, token: Optional[str]):
        """Override the token. None or "" falls back to config on next read."""
        self._token = token or None
        self._token_resolved = bool(token)

    # ------------------------------------------------------------------
    # Endpoint wrappers
    # ------------------------------------------------------------------

    def chat_post_message(self, arguments: Mapping[str, Any]) -> Union[Dict, List]:
        return self.call("chat.postMessage", arguments)

    def rtm_start(self, arguments: Optional[Mapping[str, Any]] = None) -> Union[Dict, List]:
        return self.call("rtm.start", arguments)

    def oauth_access(self, arguments: Mapping[str, Any]) -> Union[Dict, List]:
        return self.call("oauth.access", arguments)

    def api_test(self) -> Union[Dict, List]:
        """Check connectivity with api.test."""
        return self.call("api.test")

    def team_info(self) -> Dict[str, Any]:
        """Team record from team.info, or {} if missing."""
        result = self.call("team.info")
        if not isinstance(result, dict):
            return {}
        return result.get("team") or {}

    def team_info_as_object(self) -> Optional[Team]:
        team = self.team_info()
        if not team:
            return None
        return Team().load(team)

    def users_list(self, arguments: Optional[Mapping[str, Any]] = None) -> List[Dict[str, Any]]:
        """List all users in the team."""
        result = self.call("users.list", arguments)
        members = result.get("members") if isinstance(result, dict) else None
        members = members or []
        logger.debug(f"Got {len(members)} users")
        return members

    def user_info(self, arguments: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
        """Return a user by Slack user id, or None if not found."""
        result = self.call("users.info", arguments)
        if not isinstance(result, dict):
            return None
        return result.get("user")

    def user_info_as_object(self, arguments: Mapping[str, Any]) -> Optional[User]:
        user = self.user_info(arguments)
        if not user:
            return None
        return User().load(user)

    def im_list(self) -> List[Dict[str, Any]]:
        """List direct message channels."""
        result = self.call("im.list")
        ims = result.get("ims") if isinstance(result, dict) else None
        ims = ims or []
        logger.debug(f"Got {len(ims)} IM channels")
        return ims

    def im_list_as_object(self) -> Dict[str, ImChannel]:
        """IM channels keyed by channel id."""
        return {im["id"]: ImChannel().load(im) for im in self.im_list()}
