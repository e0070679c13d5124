"""Slack request payloads and the dialog descriptor."""

from pydantic import BaseModel, Field


class CommandRequest(BaseModel):
    """A decoded slash-command invocation (form-encoded body)."""

    token: str = ""
    team_id: str = ""
    team_domain: str = ""
    channel_id: str = ""
    channel_name: str = ""
    user_id: str = ""
    user_name: str = ""
    text: str = ""  # Free-text argument after the command
    trigger_id: str = ""  # Authorizes one dialog.open call, short-lived
    response_url: str = ""  # Callback for asynchronous replies


class Submission(BaseModel):
    """Values entered in the WIN dialog."""

    who: str = ""
    title: str = ""
    description: str | None = None  # Slack sends null for an untouched optional field


class InteractionUser(BaseModel):
    id: str = ""
    name: str = ""


class InteractionPayload(BaseModel):
    """A decoded dialog submission (JSON inside the ``payload`` form field)."""

    type: str = ""
    submission: Submission = Field(default_factory=Submission)
    callback_id: str = ""
    user: InteractionUser = Field(default_factory=InteractionUser)
    action_ts: str = ""
    token: str = ""
    response_url: str = ""


class DialogElement(BaseModel):
    label: str
    type: str  # "text" or "textarea"
    name: str
    value: str = ""
    hint: str = ""
    optional: bool = False


class Dialog(BaseModel):
    """Legacy Slack dialog definition sent to ``dialog.open``."""

    title: str
    callback_id: str
    submit_label: str
    elements: list[DialogElement]
