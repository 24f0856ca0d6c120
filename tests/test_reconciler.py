"""Tests for reminder form validation and normalization."""
from datetime import datetime

import pytest

from reminder_calendar.core.errors import (
    EndBeforeStart, InvalidDate, InvalidTime, MissingDescription, MissingTitle, ValidationError
)
from reminder_calendar.core.models import Create, Edit, Reminder
from reminder_calendar.core.reconciler import form_fields, normalize, time_suggestions


def test_ten_minute_reminder_is_rejected() -> None:
    with pytest.raises(EndBeforeStart):
        normalize("Team sync", "weekly", "2025-06-10", "09:00", "09:10")


def test_thirty_minute_reminder_is_accepted() -> None:
    reminder = normalize("Team sync", "weekly", "2025-06-10", "09:00", "09:30")

    assert reminder.start_time == datetime(2025, 6, 10, 9, 0, 0)
    assert reminder.end_time == datetime(2025, 6, 10, 9, 30, 0)
    assert reminder.to_payload()['startTime'] == "2025-06-10 09:00:00"
    assert reminder.to_payload()['endTime'] == "2025-06-10 09:30:00"
    assert reminder.id is None


def test_fifteen_minutes_is_the_minimum() -> None:
    reminder = normalize("Team sync", "weekly", "2025-06-10", "09:00", "09:15")
    assert reminder.end_time == datetime(2025, 6, 10, 9, 15, 0)

    with pytest.raises(EndBeforeStart):
        normalize("Team sync", "weekly", "2025-06-10", "09:00", "09:14:59")


@pytest.mark.parametrize("start, end", [("10:00", "09:00"), ("10:00", "10:00")])
def test_end_not_after_start_is_rejected(start, end) -> None:
    with pytest.raises(EndBeforeStart):
        normalize("Team sync", "weekly", "2025-06-10", start, end)


@pytest.mark.parametrize("fields, error", [
    (("", "", "not a date", "x", "y"), MissingTitle),
    (("   ", "weekly", "2025-06-10", "09:00", "10:00"), MissingTitle),
    (("Team sync", "", "not a date", "x", "y"), MissingDescription),
    (("Team sync", "weekly", "not a date", "x", "y"), InvalidDate),
    (("Team sync", "weekly", "2025-02-30", "09:00", "10:00"), InvalidDate),
    (("Team sync", "weekly", "2025-06-10", "x", "09:00"), InvalidTime),
    (("Team sync", "weekly", "2025-06-10", "09:00", "25:00"), InvalidTime),
    (("Team sync", "weekly", "2025-06-10", "10:00", "09:00"), EndBeforeStart),
])
def test_first_failing_rule_wins(fields, error) -> None:
    with pytest.raises(error) as excinfo:
        normalize(*fields)
    assert isinstance(excinfo.value, ValidationError)


def test_free_form_times_are_accepted() -> None:
    reminder = normalize("Dinner", "family", "2025-06-10", "6:30 pm", "8pm")
    assert reminder.start_time == datetime(2025, 6, 10, 18, 30, 0)
    assert reminder.end_time == datetime(2025, 6, 10, 20, 0, 0)


def test_text_fields_are_stripped() -> None:
    reminder = normalize("  Team sync ", "\nweekly\n", "2025-06-10", "09:00", "09:30")
    assert reminder.title == "Team sync"
    assert reminder.description == "weekly"


def test_edit_keeps_identity_and_audit_fields() -> None:
    existing = Reminder(
        id=42,
        title="Old",
        description="old",
        start_time=datetime(2025, 6, 9, 8, 0, 0),
        end_time=datetime(2025, 6, 9, 9, 0, 0),
        recurrence="WEEKLY",
        created_date=datetime(2025, 5, 1, 10, 0, 0),
        updated_date=datetime(2025, 5, 2, 10, 0, 0),
    )

    reminder = normalize("Team sync", "weekly", "2025-06-10", "09:00", "09:30", Edit(existing))

    assert reminder.id == 42
    assert reminder.recurrence == "WEEKLY"
    assert reminder.created_date == existing.created_date
    assert reminder.updated_date == existing.updated_date
    assert reminder.title == "Team sync"
    assert reminder.start_time == datetime(2025, 6, 10, 9, 0, 0)
    assert existing.title == "Old"


@pytest.mark.parametrize("start, end", [("09:00", "09:30"), ("07:05:30", "18:00"), ("11pm", "23:59:59")])
def test_normalize_is_idempotent(start, end) -> None:
    """Test that re-normalizing a normalized reminder changes nothing."""
    created = normalize("Team sync", "weekly", "2025-06-10", start, end, Create())
    assert normalize(**form_fields(created), mode=Create()) == created

    persisted = Reminder(**{**created.__dict__, 'id': 3})
    assert normalize(**form_fields(persisted), mode=Edit(persisted)) == persisted


def test_form_fields() -> None:
    reminder = normalize("Team sync", "weekly", "2025-06-10", "09:00", "09:30")
    assert form_fields(reminder) == {
        'title': "Team sync",
        'description': "weekly",
        'day': "2025-06-10",
        'start_hour': "09:00",
        'end_hour': "09:30",
    }


def test_time_suggestions() -> None:
    suggestions = time_suggestions()
    assert len(suggestions) == 48
    assert suggestions[0] == "00:00"
    assert suggestions[19] == "09:30"
    assert suggestions[-1] == "23:30"
    assert len(time_suggestions(15)) == 96
