"""WIN record and its summary row."""

import uuid
from datetime import datetime, timedelta, timezone

from pydantic import BaseModel, ConfigDict, Field, model_validator

DEFAULT_DESCRIPTION = "Big WIN!"
WIN_TTL = timedelta(days=7)
SUMMARY_TIME_FORMAT = "%Y-%m-%dT%H:%M:%S"


def _new_win_id() -> str:
    return uuid.uuid4().hex


class Win(BaseModel):
    """One persisted recognition record. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    win_id: str = Field(default_factory=_new_win_id)  # Store primary key
    user_id: str = ""
    user_name: str = ""
    who: str
    title: str
    description: str = DEFAULT_DESCRIPTION
    created_at: datetime
    updated_at: datetime
    expires_at: datetime  # Stored as the DynamoDB TTL attribute

    @model_validator(mode="after")
    def _check_invariants(self) -> "Win":
        if not self.who.strip():
            raise ValueError("who must not be empty")
        if not self.title.strip():
            raise ValueError("title must not be empty")
        if self.expires_at - self.updated_at != WIN_TTL:
            raise ValueError("expires_at must be exactly 7 days after updated_at")
        return self

    @classmethod
    def new(
        cls,
        *,
        user_id: str,
        user_name: str,
        who: str,
        title: str,
        description: str | None = None,
        now: datetime | None = None,
    ) -> "Win":
        """Create a WIN stamped at ``now`` (UTC) with a seven-day expiry.

        An empty or missing description is replaced by the placeholder.
        """
        now = now or datetime.now(timezone.utc)
        return cls(
            user_id=user_id,
            user_name=user_name,
            who=who,
            title=title,
            description=description or DEFAULT_DESCRIPTION,
            created_at=now,
            updated_at=now,
            expires_at=now + WIN_TTL,
        )

    def age(self, now: datetime | None = None) -> timedelta:
        """Time elapsed since creation."""
        now = now or datetime.now(timezone.utc)
        return now - self.created_at

    def is_expired(self, now: datetime | None = None) -> bool:
        """True once ``expires_at`` has passed, even if the store has not reaped it yet."""
        now = now or datetime.now(timezone.utc)
        return now >= self.expires_at

    def to_summary(self) -> "WinSummary":
        return WinSummary(
            who=self.who,
            title=self.title,
            description=self.description,
            created_at=self.created_at.strftime(SUMMARY_TIME_FORMAT),
        )


class WinSummary(BaseModel):
    """A lightweight row in the summary report."""

    who: str
    title: str
    description: str
    created_at: str  # Whole seconds, no timezone suffix
