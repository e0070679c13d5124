"""Async Slack client singleton.

Creates a cached AsyncWebClient instance authorized with the access token from
application settings. slack_sdk sends it as an ``Authorization: Bearer`` header.
"""

from slack_sdk.web.async_client import AsyncWebClient

from kanowins.config import Settings, get_settings

_client: AsyncWebClient | None = None


async def get_slack_client(settings: Settings | None = None) -> AsyncWebClient:
    """Return a cached async Slack client instance.

    Creates the client on first call using slack_access_token from settings.
    Subsequent calls return the cached instance.
    """
    global _client
    if _client is None:
        settings = settings or get_settings()
        _client = AsyncWebClient(token=settings.slack_access_token)
    return _client


def reset_client() -> None:
    """Reset the cached client instance. Used for testing."""
    global _client
    _client = None
