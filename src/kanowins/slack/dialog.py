"""The "Submit a WIN" dialog and the dialog.open call."""

import asyncio
import logging

import aiohttp
from slack_sdk.errors import SlackClientError

from kanowins.config import Settings
from kanowins.models.slack import Dialog, DialogElement
from kanowins.slack.client import get_slack_client

logger = logging.getLogger(__name__)

CALLBACK_ID = "submit-win"


def build_win_dialog(who: str = "") -> Dialog:
    """Build the WIN dialog, pre-filling "who" with the command text."""
    return Dialog(
        title="Submit a WIN",
        callback_id=CALLBACK_ID,
        submit_label="Submit",
        elements=[
            DialogElement(
                label="Who?",
                type="text",
                name="who",
                value=who,
                hint="The name of the person who has this WIN",
            ),
            DialogElement(
                label="Title",
                type="text",
                name="title",
                hint="Title of this WIN",
            ),
            DialogElement(
                label="Long description",
                type="textarea",
                name="description",
                hint="Long description of this WIN (if any)",
                optional=True,
            ),
        ],
    )


async def open_win_dialog(
    trigger_id: str, who: str = "", settings: Settings | None = None
) -> bool:
    """Open the WIN dialog for ``trigger_id``. Single attempt, never raises.

    Returns:
        True if Slack accepted the dialog, False if the call failed (logged).
    """
    dialog = build_win_dialog(who)
    try:
        client = await get_slack_client(settings)
        await client.dialog_open(trigger_id=trigger_id, dialog=dialog.model_dump())
    except (SlackClientError, aiohttp.ClientError, asyncio.TimeoutError):
        logger.error(
            "Failed to open WIN dialog", extra={"trigger_id": trigger_id}, exc_info=True
        )
        return False

    logger.info("Opened WIN dialog", extra={"trigger_id": trigger_id})
    return True
