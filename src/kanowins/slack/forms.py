"""Decoding of Slack's form-encoded request bodies."""

import json
from urllib.parse import parse_qs

from pydantic import ValidationError

from kanowins.exceptions import PayloadDecodeError
from kanowins.models.slack import CommandRequest, InteractionPayload


def parse_form(body: bytes | str) -> dict[str, str]:
    """Parse an ``application/x-www-form-urlencoded`` body.

    Keeps the first value of repeated fields and blank values as empty strings.

    Raises:
        PayloadDecodeError: the body is not valid UTF-8 or not a form.
    """
    if isinstance(body, bytes):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise PayloadDecodeError(f"body is not valid UTF-8: {exc}") from exc
    try:
        fields = parse_qs(body, keep_blank_values=True, strict_parsing=bool(body))
    except ValueError as exc:
        raise PayloadDecodeError(f"malformed form body: {exc}") from exc
    return {key: values[0] for key, values in fields.items()}


def decode_command(body: bytes | str) -> CommandRequest:
    """Decode a slash-command body. Absent fields default to empty strings."""
    return CommandRequest.model_validate(parse_form(body))


def decode_interaction(body: bytes | str) -> InteractionPayload:
    """Decode the JSON ``payload`` field of an interactive-component body.

    Raises:
        PayloadDecodeError: the field is missing or is not a valid payload.
    """
    form = parse_form(body)
    raw = form.get("payload")
    if not raw:
        raise PayloadDecodeError("missing payload field")
    try:
        return InteractionPayload.model_validate(json.loads(raw))
    except (json.JSONDecodeError, ValidationError) as exc:
        raise PayloadDecodeError(f"invalid payload: {exc}") from exc
