"""Shared verification token check for inbound Slack requests."""

import hmac

from kanowins.config import Settings, get_settings
from kanowins.exceptions import InvalidTokenError


def verify_token(token: str, settings: Settings | None = None) -> None:
    """Compare ``token`` with the configured verification token.

    An unset verification token never matches, so an unconfigured deployment
    rejects every request.

    Raises:
        InvalidTokenError: the token is missing or does not match.
    """
    settings = settings or get_settings()
    expected = settings.slack_verification_token
    if not expected or not hmac.compare_digest(token.encode(), expected.encode()):
        raise InvalidTokenError()
