"""WIN persistence on DynamoDB.

boto3 is synchronous, so every call is wrapped in asyncio.to_thread() to keep
the event loop free. botocore errors are re-raised as StoreError.
"""

import asyncio
import logging
from datetime import datetime, timezone

from botocore.exceptions import BotoCoreError, ClientError
from pydantic import ValidationError

from kanowins.config import Settings
from kanowins.exceptions import StoreError
from kanowins.models.win import Win
from kanowins.store.client import get_table
from kanowins.store.codec import item_expiry, item_to_win, win_to_item

logger = logging.getLogger(__name__)


async def put_win(win: Win, settings: Settings | None = None) -> None:
    """Write one Win. The item is keyed by ``win_id`` so distinct Wins never collide.

    Raises:
        StoreError: the table could not be reached or rejected the write.
    """
    item = win_to_item(win)
    try:
        table = get_table(settings)
        await asyncio.to_thread(
            table.put_item,
            Item=item,
            ConditionExpression="attribute_not_exists(win_id)",
        )
    except (BotoCoreError, ClientError) as exc:
        raise StoreError(f"failed to write win {win.win_id}: {exc}") from exc

    logger.info(
        "Stored win",
        extra={"win_id": win.win_id, "user_id": win.user_id, "who": win.who},
    )


def _scan_all_items(table) -> list[dict]:
    """Full table scan, following LastEvaluatedKey across pages."""
    items: list[dict] = []
    params: dict = {}
    while True:
        response = table.scan(**params)
        items.extend(response.get("Items", []))
        last_key = response.get("LastEvaluatedKey")
        if not last_key:
            break
        params["ExclusiveStartKey"] = last_key
    return items


async def scan_wins(
    settings: Settings | None = None, now: datetime | None = None
) -> list[Win]:
    """Return every live Win in the table.

    Items whose ``ttl`` already elapsed are dropped: DynamoDB deletes expired
    items lazily, so they can linger after their expiry. Items that cannot be
    decoded are logged and skipped.

    Raises:
        StoreError: the scan failed.
    """
    now = now or datetime.now(timezone.utc)
    try:
        table = get_table(settings)
        items = await asyncio.to_thread(_scan_all_items, table)
    except (BotoCoreError, ClientError) as exc:
        raise StoreError(f"failed to scan wins: {exc}") from exc

    wins: list[Win] = []
    for item in items:
        try:
            expiry = item_expiry(item)
            if expiry is not None and expiry <= now:
                continue
            wins.append(item_to_win(item))
        except (KeyError, TypeError, ValueError, ValidationError):
            logger.warning(
                "Skipping undecodable item",
                extra={"win_id": item.get("win_id")},
                exc_info=True,
            )

    logger.info("Scanned wins", extra={"items": len(items), "live": len(wins)})
    return wins
