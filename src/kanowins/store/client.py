"""DynamoDB table handle singleton.

Creates a cached boto3 ``Table`` resource for the configured region and table
name. Follows the same lazy-init pattern as the Slack client.
"""

import boto3

from kanowins.config import Settings, get_settings

_table = None


def get_table(settings: Settings | None = None):
    """Return a cached boto3 DynamoDB ``Table`` for ``settings.table_name``.

    Creates the resource on first call. Subsequent calls return the cached
    instance regardless of the settings passed.
    """
    global _table
    if _table is None:
        settings = settings or get_settings()
        kwargs: dict = {"region_name": settings.region}
        if settings.dynamodb_endpoint_url:
            kwargs["endpoint_url"] = settings.dynamodb_endpoint_url
        dynamodb = boto3.resource("dynamodb", **kwargs)
        _table = dynamodb.Table(settings.table_name)
    return _table


def reset_table() -> None:
    """Reset the cached table handle. Used for testing."""
    global _table
    _table = None
