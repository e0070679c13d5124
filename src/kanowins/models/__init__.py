"""Data models for WINS, Slack payloads and handler responses."""

from kanowins.models.response import HandlerResponse
from kanowins.models.slack import (
    CommandRequest,
    Dialog,
    DialogElement,
    InteractionPayload,
    InteractionUser,
    Submission,
)
from kanowins.models.win import DEFAULT_DESCRIPTION, WIN_TTL, Win, WinSummary

__all__ = [
    "CommandRequest",
    "DEFAULT_DESCRIPTION",
    "Dialog",
    "DialogElement",
    "HandlerResponse",
    "InteractionPayload",
    "InteractionUser",
    "Submission",
    "WIN_TTL",
    "Win",
    "WinSummary",
]
