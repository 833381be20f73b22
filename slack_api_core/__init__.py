"""
slack-api-core: Slack Web API client with endpoint argument validation, plus text helpers

Usage:
    from slack_api_core import ApiClient, BotConfig

    config = BotConfig(bot_user_token="xoxb-...", bot_username="MyBot")

    with ApiClient(config=config) as api:
        api.chat_post_message({"channel": "C08B64J5G7N", "text": "Hello!"})
        team = api.team_info_as_object()
"""

from .client import ApiClient
from .config import BotConfig
from .errors import (
    InvalidContentError,
    ResponseDecodeError,
    SlackApiCoreError,
    TransportError,
    ValidationError,
)
from .models import ImChannel, Team, User
from .schemas import DEFAULT_ENDPOINT_SCHEMAS, EndpointSchema
from .utils import (
    contains_word,
    is_word1_followed_by_word2,
    parse_json,
    remove_substring,
    snake_to_title_case,
)

__all__ = [
    "ApiClient",
    "BotConfig",
    "EndpointSchema",
    "DEFAULT_ENDPOINT_SCHEMAS",
    "Team",
    "User",
    "ImChannel",
    "SlackApiCoreError",
    "ValidationError",
    "TransportError",
    "ResponseDecodeError",
    "InvalidContentError",
    "parse_json",
    "remove_substring",
    "contains_word",
    "snake_to_title_case",
    "is_word1_followed_by_word2",
]
__version__ = "0.1.0"
