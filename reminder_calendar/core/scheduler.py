"""Day detail scheduling: hour buckets, creation drafts and edit intents."""
import logging
from datetime import datetime, time

from reminder_calendar.core.config import DEFAULT_DURATION, SLOTS_PER_DAY
from reminder_calendar.core.errors import DateNotEditable
from reminder_calendar.core.index import CalendarIndex
from reminder_calendar.core.models import DayBucket, DaySchedule, Edit, Reminder
from reminder_calendar.core.utils import as_date, end_of_day

logger = logging.getLogger(__name__)


def slot_for(moment):
    """Return the hour slot that holds a time or datetime."""
    return moment.hour


def bucket(day, reminders):
    """Group a day's reminders into 24 hour slots.

    A reminder lands only in the slot of its start hour, however long it runs.
    Within a slot reminders are ordered by start time, ties keeping input
    order. Reminders starting on another date are left out.
    """
    day = as_date(day)
    buckets = [DayBucket(hour) for hour in range(SLOTS_PER_DAY)]

    same_day = [reminder for reminder in reminders if reminder.start_time.date() == day]
    for reminder in sorted(same_day, key=lambda reminder: reminder.start_time):
        buckets[slot_for(reminder.start_time)].reminders.append(reminder)

    return buckets


def _ensure_editable(day, window, index):
    date_class = window.classify(day, index if index is not None else CalendarIndex.empty())
    if date_class.is_disabled:
        raise DateNotEditable(day, date_class)


def draft_for(day, hour_slot, window, index=None):
    """Create an unsaved reminder draft starting at an hour slot.

    The draft lasts one hour, clamped to the end of the day for the last
    slot. Raises DateNotEditable for dates outside the browsing window and
    ValueError for an hour outside 0-23.
    """
    day = as_date(day)
    if not 0 <= hour_slot < SLOTS_PER_DAY:
        raise ValueError(f"Hour slot out of range: {hour_slot}")
    _ensure_editable(day, window, index)

    start_time = datetime.combine(day, time(hour_slot))
    end_time = min(start_time + DEFAULT_DURATION, end_of_day(day))
    return Reminder(title='', description='', start_time=start_time, end_time=end_time)


def draft_for_day(day, window, index=None):
    """Create a draft for a click on a whole day cell."""
    return draft_for(day, 0, window, index)


def is_holiday_marker(reminder, holiday):
    """Check if a reminder only mirrors the holiday shown on its date."""
    return holiday is not None and reminder.title == holiday.label


def edit_intent(reminder, window, index):
    """Turn a click on a reminder into an edit request.

    Returns None for synthetic holiday markers, which are never edited.
    Raises DateNotEditable for reminders outside the browsing window.
    """
    day = reminder.start_time.date()
    if is_holiday_marker(reminder, index.lookup_holiday(day)):
        logger.debug("Ignoring edit of holiday marker %r on %s", reminder.title, day)
        return None
    _ensure_editable(day, window, index)
    return Edit(reminder)


def holiday_marker(holiday):
    """Represent a holiday as an all-day, unsaved reminder chip."""
    return Reminder(
        title=holiday.label,
        description=holiday.name if holiday.name != holiday.label else '',
        start_time=datetime.combine(holiday.date, time(0)),
        end_time=end_of_day(holiday.date),
    )


def schedule_for(day, index):
    """Build the day detail view: holiday marker first, then reminders."""
    day = as_date(day)
    holiday = index.lookup_holiday(day)
    reminders = index.lookup_reminders(day)
    if holiday is not None:
        reminders.insert(0, holiday_marker(holiday))
    return DaySchedule(date=day, holiday=holiday, buckets=bucket(day, reminders))
