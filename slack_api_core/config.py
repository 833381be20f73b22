"""
Bot configuration consumed by ApiClient.

ApiClient only needs an object with get(key); BotConfig is the default one,
filled from explicit values or from SLACK_* environment variables.
"""

import os
from dataclasses import dataclass
from typing import Any, Optional

BOT_USER_TOKEN = "botUserToken"
BOT_USERNAME = "botUsername"
AS_USER = "asUser"
ICON_URL = "iconURL"

_KEY_TO_FIELD = {
    BOT_USER_TOKEN: "bot_user_token",
    BOT_USERNAME: "bot_username",
    AS_USER: "as_user",
    ICON_URL: "icon_url",
}

_TRUTHY = ("1", "true", "yes", "on")


@dataclass
class BotConfig:
    """Configuration for the bot identity used on every API call.

    Optional:
        bot_user_token: Slack Bot OAuth token (xoxb-...)
        bot_username: Display name sent with posted messages
        as_user: Post as the authed user instead of as a bot
        icon_url: Avatar URL sent with posted messages
    """

    bot_user_token: Optional[str] = None
    bot_username: Optional[str] = None
    as_user: Optional[bool] = None
    icon_url: Optional[str] = None

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a value by its config key, e.g. get("botUserToken")."""
        field_name = _KEY_TO_FIELD.get(key)
        if field_name is None:
            return default
        value = getattr(self, field_name)
        return default if value is None else value

    @classmethod
    def from_env(cls) -> "BotConfig":
        """Build a config from SLACK_* environment variables."""
        as_user = os.environ.get("SLACK_AS_USER")
        return cls(
            bot_user_token=os.environ.get("SLACK_BOT_TOKEN"),
            bot_username=os.environ.get("SLACK_BOT_USERNAME"),
            as_user=as_user.strip().lower() in _TRUTHY if as_user else None,
            icon_url=os.environ.get("SLACK_ICON_URL"),
        )
