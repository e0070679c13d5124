"""Entry point handlers: slash command, dialog submission and help.

Each handler takes the raw form-encoded request body and returns a
HandlerResponse. Only token failures and (for the command) summary failures
change the status code. Other failures are logged.
"""

import json
import logging

from kanowins.config import Settings, get_settings
from kanowins.exceptions import (
    InvalidTokenError,
    PayloadDecodeError,
    StoreError,
    SummaryDeliveryError,
)
from kanowins.models.response import HandlerResponse
from kanowins.models.win import Win
from kanowins.slack.dialog import open_win_dialog
from kanowins.slack.forms import decode_command, decode_interaction
from kanowins.slack.verification import verify_token
from kanowins.store import put_win
from kanowins.summary import send_summary

logger = logging.getLogger(__name__)

COMMAND_HANDLER = "KanowinsCommand"
INTERACTION_HANDLER = "KanowinsInteractiveComponent"
HELP_HANDLER = "KanowinsHelp"

SUMMARY_KEYWORD = "summary"

HELP_BODY = "<h2>Invoke /wins Command to enter a new WIN for your team!</h2>"
HELP_INVALID_TOKEN_BODY = "<h2>Invalid token</h2>"


async def handle_command(
    body: bytes | str, settings: Settings | None = None
) -> HandlerResponse:
    """Handle a ``/wins`` slash command.

    1. Verify the shared token (400 on mismatch, no outbound calls).
    2. If the text is "summary", post the summary (400 on failure, no dialog).
    3. Open the WIN dialog pre-filled with the command text. A failed
       dialog.open is logged and still answers 200.
    """
    settings = settings or get_settings()
    try:
        request = decode_command(body)
    except PayloadDecodeError as exc:
        logger.warning("Rejected undecodable command body", extra={"error": str(exc)})
        return HandlerResponse.bad_request(f"{COMMAND_HANDLER} submitting - error: {exc}")

    logger.info(
        "Command received",
        extra={
            "team_id": request.team_id,
            "channel_id": request.channel_id,
            "user_id": request.user_id,
            "text": request.text,
        },
    )

    try:
        verify_token(request.token, settings)
    except InvalidTokenError as exc:
        logger.warning("Rejected command with invalid token", extra={"team_id": request.team_id})
        return HandlerResponse.bad_request(f"{COMMAND_HANDLER} submitting - error: {exc}")

    if request.text.strip().lower() == SUMMARY_KEYWORD:
        try:
            rows = await send_summary(request, settings)
        except (StoreError, SummaryDeliveryError) as exc:
            logger.error("Summary failed", extra={"error": str(exc)}, exc_info=True)
            return HandlerResponse.bad_request(f"{COMMAND_HANDLER} summary - error: {exc}")
        logger.info("Summary posted", extra={"rows": len(rows)})
        if not settings.open_dialog_after_summary:
            return HandlerResponse.ok()

    await open_win_dialog(request.trigger_id, request.text, settings)
    return HandlerResponse.ok()


def _validation_errors(who: str, title: str) -> list[dict]:
    """Slack dialog validation errors for empty required fields."""
    errors = []
    if not who.strip():
        errors.append({"name": "who", "error": "Please tell us who has this WIN"})
    if not title.strip():
        errors.append({"name": "title", "error": "Please give this WIN a title"})
    return errors


async def handle_interaction(
    body: bytes | str, settings: Settings | None = None
) -> HandlerResponse:
    """Handle a WIN dialog submission and persist it.

    Undecodable payloads and bad tokens fail closed with 400. Empty required
    fields answer 200 with Slack's dialog ``errors`` body so the dialog stays
    open. A store failure is logged and still answers 200 with an empty body.
    """
    settings = settings or get_settings()
    try:
        payload = decode_interaction(body)
    except PayloadDecodeError as exc:
        logger.warning("Rejected undecodable interaction", extra={"error": str(exc)})
        return HandlerResponse.bad_request(f"{INTERACTION_HANDLER} submitting - error: {exc}")

    try:
        verify_token(payload.token, settings)
    except InvalidTokenError as exc:
        logger.warning("Rejected interaction with invalid token", extra={"user_id": payload.user.id})
        return HandlerResponse.bad_request(f"{INTERACTION_HANDLER} submitting - error: {exc}")

    if payload.type == "dialog_cancellation":
        logger.info("Dialog cancelled", extra={"user_id": payload.user.id})
        return HandlerResponse.ok()

    submission = payload.submission
    errors = _validation_errors(submission.who, submission.title)
    if errors:
        return HandlerResponse.ok(json.dumps({"errors": errors}))

    win = Win.new(
        user_id=payload.user.id,
        user_name=payload.user.name,
        who=submission.who.strip(),
        title=submission.title.strip(),
        description=submission.description,
    )
    try:
        await put_win(win, settings)
    except StoreError:
        logger.error(
            "Failed to store win",
            extra={
                "win_id": win.win_id,
                "user_id": win.user_id,
                "user_name": win.user_name,
                "who": win.who,
                "title": win.title,
            },
            exc_info=True,
        )
    return HandlerResponse.ok()


async def handle_help(
    body: bytes | str, settings: Settings | None = None
) -> HandlerResponse:
    """Answer ``/wins-help`` with a static usage snippet.

    The body is HTML even though the Content-Type header says JSON.
    """
    settings = settings or get_settings()
    try:
        request = decode_command(body)
        verify_token(request.token, settings)
    except (PayloadDecodeError, InvalidTokenError):
        logger.warning("Rejected help request")
        return HandlerResponse.bad_request(HELP_INVALID_TOKEN_BODY)
    return HandlerResponse.ok(HELP_BODY)
