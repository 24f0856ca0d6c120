"""Turns reminder form input into a validated, normalized Reminder."""
from dataclasses import replace
from datetime import datetime, time, timedelta

from reminder_calendar.core.config import MIN_DURATION, TIME_SUGGESTION_STEP
from reminder_calendar.core.errors import (
    EndBeforeStart, InvalidDate, InvalidTime, MissingDescription, MissingTitle
)
from reminder_calendar.core.models import Create, Edit, Reminder
from reminder_calendar.core.utils import (
    format_date, format_time_of_day, parse_date, parse_time_of_day
)


def _text(value):
    return (value or '').strip()


def normalize(title, description, day, start_hour, end_hour, mode=Create()):
    """Validate form fields and compose a reminder.

    Checks run in order and the first failure is raised: title, description,
    date, times, then the minimum duration. In edit mode the existing
    reminder keeps its identity, audit and recurrence fields; title,
    description and both timestamps are replaced.

    Raises a ValidationError subclass on invalid input.
    """
    title = _text(title)
    if not title:
        raise MissingTitle("Title is required")

    description = _text(description)
    if not description:
        raise MissingDescription("Description is required")

    try:
        day = parse_date(day)
    except ValueError as e:
        raise InvalidDate(f"Invalid date: {day!r}") from e

    try:
        start_of = parse_time_of_day(start_hour)
        end_of = parse_time_of_day(end_hour)
    except ValueError as e:
        raise InvalidTime(str(e)) from e

    start_time = datetime.combine(day, start_of)
    end_time = datetime.combine(day, end_of)
    if end_time - start_time < MIN_DURATION:
        minutes = int(MIN_DURATION.total_seconds() // 60)
        raise EndBeforeStart(f"End time must be at least {minutes} minutes after start time")

    if isinstance(mode, Edit):
        return replace(
            mode.existing,
            title=title,
            description=description,
            start_time=start_time,
            end_time=end_time,
        )
    return Reminder(title=title, description=description, start_time=start_time, end_time=end_time)


def form_fields(reminder):
    """Extract the form fields that reproduce a reminder through normalize()."""
    return {
        'title': reminder.title,
        'description': reminder.description,
        'day': format_date(reminder.start_time),
        'start_hour': format_time_of_day(reminder.start_time),
        'end_hour': format_time_of_day(reminder.end_time),
    }


def time_suggestions(step_minutes=TIME_SUGGESTION_STEP):
    """Suggested values for the free-form time fields, every `step_minutes`."""
    step = timedelta(minutes=step_minutes)
    current = datetime.combine(datetime.min.date(), time(0))
    end = current + timedelta(days=1)
    suggestions = []
    while current < end:
        suggestions.append(current.strftime('%H:%M'))
        current += step
    return suggestions
