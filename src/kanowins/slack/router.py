"""Slack webhook routes for the slash commands and interactive components."""

from fastapi import APIRouter, Request, Response

from kanowins.models.response import HandlerResponse
from kanowins.slack.handlers import handle_command, handle_help, handle_interaction

router = APIRouter(prefix="/slack", tags=["slack"])


def _to_response(result: HandlerResponse) -> Response:
    return Response(
        content=result.body,
        status_code=result.status_code,
        headers=result.headers,
    )


@router.post("/commands")
async def slack_command(request: Request) -> Response:
    """Receive the ``/wins`` slash command."""
    return _to_response(await handle_command(await request.body()))


@router.post("/interactive")
async def slack_interactive(request: Request) -> Response:
    """Receive WIN dialog submissions."""
    return _to_response(await handle_interaction(await request.body()))


@router.post("/help")
async def slack_help(request: Request) -> Response:
    """Receive the help slash command."""
    return _to_response(await handle_help(await request.body()))
