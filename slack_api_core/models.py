"""
Typed records hydrated from Slack API response fragments.
"""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Mapping, Optional


@dataclass
class SlackObject:
    """Base record. load() copies known keys and keeps the full payload on raw."""

    id: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    def load(self, data: Mapping[str, Any]):
        known = {f.name for f in fields(self)} - {"raw"}
        for key, value in data.items():
            if key in known:
                setattr(self, key, value)
        self.raw = dict(data)
        return self


@dataclass
class Team(SlackObject):
    """A Slack workspace, as returned by team.info."""

    name: Optional[str] = None
    domain: Optional[str] = None
    email_domain: Optional[str] = None
    icon: Optional[Dict[str, Any]] = None


@dataclass
class User(SlackObject):
    """A Slack user, as returned by users.info and users.list."""

    team_id: Optional[str] = None
    name: Optional[str] = None
    real_name: Optional[str] = None
    deleted: bool = False
    is_admin: bool = False
    is_bot: bool = False
    tz: Optional[str] = None
    profile: Optional[Dict[str, Any]] = None


@dataclass
class ImChannel(SlackObject):
    """A direct message channel, as returned by im.list."""

    user: Optional[str] = None
    created: Optional[int] = None
    is_im: bool = True
    is_org_shared: bool = False
    is_user_deleted: bool = False
