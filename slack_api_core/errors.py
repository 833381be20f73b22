"""
Exceptions raised by slack-api-core.
"""

from typing import Optional


class SlackApiCoreError(Exception):
    """Base class for every error raised by this package."""


class ValidationError(SlackApiCoreError):
    """A required argument is missing for an endpoint."""

    def __init__(self, field: str, endpoint: str):
        self.field = field
        self.endpoint = endpoint
        super().__init__(
            f"Missing required argument(s): {field} must be provided for {endpoint}"
        )


class TransportError(SlackApiCoreError):
    """The request could not be sent or Slack answered with an HTTP error."""


class ResponseDecodeError(SlackApiCoreError):
    """The response body is not a JSON object or array."""

    def __init__(
        self,
        message: str = "Failed to process response from the Slack API",
        body: Optional[str] = None,
    ):
        self.body = body
        super().__init__(message)


class InvalidContentError(SlackApiCoreError):
    """Text handed to parse_json() is not a JSON object or array."""
