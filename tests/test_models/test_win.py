"""Tests for the Win model and its summary row."""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from kanowins.models.win import DEFAULT_DESCRIPTION, WIN_TTL, Win

NOW = datetime(2026, 10, 19, 9, 30, 15, 123456, tzinfo=timezone.utc)


def _make_win(**overrides) -> Win:
    """Create a Win via Win.new with sensible defaults."""
    kwargs = {
        "user_id": "U123",
        "user_name": "carol",
        "who": "Bob",
        "title": "Shipped feature",
        "description": "Released the new onboarding flow",
        "now": NOW,
    }
    kwargs.update(overrides)
    return Win.new(**kwargs)


def test_new_sets_timestamps_to_now():
    """created_at and updated_at both equal the submission time."""
    win = _make_win()
    assert win.created_at == NOW
    assert win.updated_at == NOW


def test_expires_exactly_seven_days_after_update():
    """expires_at is updated_at plus 604800 seconds."""
    win = _make_win()
    assert win.expires_at - win.updated_at == WIN_TTL
    assert (win.expires_at - win.updated_at).total_seconds() == 604800


def test_empty_description_uses_placeholder():
    """An empty description is replaced with the placeholder."""
    assert _make_win(description="").description == DEFAULT_DESCRIPTION
    assert _make_win(description=None).description == "Big WIN!"


def test_description_passed_through():
    """A non-empty description is kept unchanged."""
    assert _make_win(description="Fixed the build").description == "Fixed the build"


def test_each_win_gets_unique_id():
    """Two Wins created from the same input have distinct keys."""
    assert _make_win().win_id != _make_win().win_id


def test_empty_who_rejected():
    """who must not be blank."""
    with pytest.raises(ValidationError):
        _make_win(who="  ")


def test_empty_title_rejected():
    """title must not be blank."""
    with pytest.raises(ValidationError):
        _make_win(title="")


def test_inconsistent_expiry_rejected():
    """A Win whose expiry is not updated_at + 7 days is invalid."""
    with pytest.raises(ValidationError):
        Win(
            who="Bob",
            title="Shipped",
            created_at=NOW,
            updated_at=NOW,
            expires_at=NOW + timedelta(days=1),
        )


def test_win_is_frozen():
    """Wins cannot be mutated after creation."""
    win = _make_win()
    with pytest.raises(ValidationError):
        win.title = "Changed"


def test_age_and_expiry():
    """age() measures from created_at, is_expired() flips at expires_at."""
    win = _make_win()
    assert win.age(NOW + timedelta(hours=13)) == timedelta(hours=13)
    assert not win.is_expired(NOW + timedelta(days=6))
    assert win.is_expired(NOW + timedelta(days=7))


def test_to_summary_truncates_to_whole_seconds():
    """Summary rows carry created_at without fraction or timezone suffix."""
    row = _make_win().to_summary()
    assert row.who == "Bob"
    assert row.title == "Shipped feature"
    assert row.description == "Released the new onboarding flow"
    assert row.created_at == "2026-10-19T09:30:15"
