"""WINS summary: scan the store, keep sufficiently old WINS, post the report.

The report is delivered to the ``response_url`` of the slash command that asked
for it. Store and delivery failures propagate to the caller.
"""

import json
import logging
from datetime import datetime, timedelta, timezone

import httpx

from kanowins.config import Settings, get_settings
from kanowins.exceptions import SummaryDeliveryError
from kanowins.models.slack import CommandRequest
from kanowins.models.win import Win, WinSummary
from kanowins.store import scan_wins

logger = logging.getLogger(__name__)

BANNER = "============================="


def select_recent_wins(
    wins: list[Win],
    min_age: timedelta,
    now: datetime | None = None,
) -> list[WinSummary]:
    """Keep WINS strictly older than ``min_age`` and convert them to summary rows."""
    now = now or datetime.now(timezone.utc)
    return [win.to_summary() for win in wins if win.age(now) > min_age]


def build_summary_text(rows: list[WinSummary]) -> str:
    """Format summary rows as the banner, a count line and the rows as indented JSON."""
    rows_json = json.dumps(
        [row.model_dump() for row in rows], indent=2, ensure_ascii=False
    )
    lines = [
        BANNER,
        " Summary for last 7 days (TTL)",
        f" WINS count: {len(rows)}",
        BANNER,
        "",
        rows_json,
    ]
    return "\n".join(lines)


async def post_summary(
    response_url: str, text: str, settings: Settings | None = None
) -> dict | str:
    """POST ``{"text": text}`` to the response URL. Single attempt.

    Returns:
        The decoded JSON acknowledgement, or the raw text when Slack answers
        with a non-JSON body such as ``ok``.

    Raises:
        SummaryDeliveryError: transport failure or non-2xx status.
    """
    settings = settings or get_settings()
    headers = {
        "Authorization": f"Bearer {settings.slack_access_token}",
        "Content-Type": "application/json",
    }
    try:
        async with httpx.AsyncClient(
            timeout=httpx.Timeout(settings.http_timeout_seconds)
        ) as client:
            response = await client.post(
                response_url, json={"text": text}, headers=headers
            )
            response.raise_for_status()
    except httpx.HTTPError as exc:
        raise SummaryDeliveryError(f"failed to post summary: {exc}") from exc

    try:
        ack: dict | str = response.json()
    except ValueError:
        ack = response.text
    logger.info("Summary delivered", extra={"ack": ack})
    return ack


async def send_summary(
    request: CommandRequest, settings: Settings | None = None
) -> list[WinSummary]:
    """Build the WINS summary and post it to ``request.response_url``.

    Returns:
        The rows included in the posted report.

    Raises:
        StoreError: the scan failed.
        SummaryDeliveryError: the POST failed.
    """
    settings = settings or get_settings()
    now = datetime.now(timezone.utc)

    wins = await scan_wins(settings, now=now)
    rows = select_recent_wins(
        wins, timedelta(hours=settings.summary_min_age_hours), now=now
    )
    text = build_summary_text(rows)

    await post_summary(request.response_url, text, settings)
    logger.info(
        "Summary sent",
        extra={"wins": len(wins), "rows": len(rows), "channel_id": request.channel_id},
    )
    return rows
