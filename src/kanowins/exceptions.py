"""Error taxonomy shared by the entry points.

Handlers translate these into HTTP responses; nothing here is process-fatal.
"""


class KanowinsError(Exception):
    """Base class for all application errors."""


class InvalidTokenError(KanowinsError):
    """The shared verification token did not match the configured secret."""

    def __init__(self, message: str = "invalid verification token") -> None:
        super().__init__(message)


class PayloadDecodeError(KanowinsError):
    """An inbound form body or its embedded JSON payload could not be decoded."""


class StoreError(KanowinsError):
    """Reading from or writing to the WIN store failed."""


class SummaryDeliveryError(KanowinsError):
    """Posting the summary to the Slack response URL failed."""
