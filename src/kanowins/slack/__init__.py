"""Slack ingress: slash commands, dialog submissions, and the dialog.open call."""

from kanowins.slack.client import get_slack_client, reset_client
from kanowins.slack.handlers import handle_command, handle_help, handle_interaction
from kanowins.slack.router import router

__all__ = [
    "get_slack_client",
    "handle_command",
    "handle_help",
    "handle_interaction",
    "reset_client",
    "router",
]
