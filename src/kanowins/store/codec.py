"""Mapping between Win models and DynamoDB items.

Datetimes are stored as ISO-8601 strings. ``expires_at`` is stored as integer
epoch seconds under ``ttl``, the attribute the table's TTL setting watches.
"""

from datetime import datetime, timezone
from decimal import Decimal

from kanowins.models.win import DEFAULT_DESCRIPTION, Win

TTL_ATTRIBUTE = "ttl"


def _parse_datetime(value: str) -> datetime:
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def win_to_item(win: Win) -> dict:
    """Serialize a Win into a DynamoDB item."""
    return {
        "win_id": win.win_id,
        "user_id": win.user_id,
        "user_name": win.user_name,
        "who": win.who,
        "title": win.title,
        "description": win.description,
        "created_at": win.created_at.isoformat(),
        "updated_at": win.updated_at.isoformat(),
        TTL_ATTRIBUTE: int(win.expires_at.timestamp()),
    }


def item_to_win(item: dict) -> Win:
    """Deserialize a DynamoDB item into a Win.

    ``expires_at`` is recomputed from ``updated_at`` rather than read back from
    ``ttl``: the epoch attribute has whole-second precision only. Items written
    before ``win_id`` existed get a key derived from user and creation time.

    Raises:
        KeyError, TypeError, ValueError: the item is missing required
            attributes or carries values that do not form a valid Win.
    """
    created_at = _parse_datetime(item["created_at"])
    updated_at = _parse_datetime(item.get("updated_at") or item["created_at"])
    win_id = item.get("win_id") or f"{item.get('user_id', '')}#{item['created_at']}"
    return Win.new(
        user_id=item.get("user_id", ""),
        user_name=item.get("user_name", ""),
        who=item["who"],
        title=item["title"],
        description=item.get("description") or DEFAULT_DESCRIPTION,
        now=updated_at,
    ).model_copy(update={"win_id": win_id, "created_at": created_at})


def item_expiry(item: dict) -> datetime | None:
    """Return the item's TTL instant, or None if it carries no ``ttl``.

    Raises:
        TypeError, ValueError: ``ttl`` is not an epoch number.
    """
    ttl = item.get(TTL_ATTRIBUTE)
    if ttl is None:
        return None
    if isinstance(ttl, Decimal):
        ttl = int(ttl)
    return datetime.fromtimestamp(int(ttl), tz=timezone.utc)
