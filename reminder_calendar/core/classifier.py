import enum
from dataclasses import dataclass
from datetime import date

from reminder_calendar.core.config import BROWSING_WINDOW_YEARS
from reminder_calendar.core.utils import (
    add_years, as_date, get_next_month, get_prev_month, month_bounds, month_dates
)


class DateClass(enum.Enum):
    """Classification of a calendar date for the month view."""
    DISABLED_PAST = 'disabled_past'
    DISABLED_FUTURE = 'disabled_future'
    TODAY = 'today'
    HAS_EVENT = 'has_event'
    PLAIN = 'plain'

    @property
    def is_disabled(self):
        return self in (DateClass.DISABLED_PAST, DateClass.DISABLED_FUTURE)


def classify(day, today, window_end, index):
    """Classify a date against today, the browsing window and the index.

    Checks run in priority order: today, out of window, has events, plain.
    Comparison is at date level; times of day are ignored.
    """
    day, today, window_end = as_date(day), as_date(today), as_date(window_end)

    if day == today:
        return DateClass.TODAY
    if day < today:
        return DateClass.DISABLED_PAST
    if day > window_end:
        return DateClass.DISABLED_FUTURE
    if index.has_events(day):
        return DateClass.HAS_EVENT
    return DateClass.PLAIN


@dataclass(frozen=True)
class BrowsingWindow:
    """Inclusive range of dates that may be browsed and edited."""
    start: date
    end: date

    @classmethod
    def from_today(cls, today=None, years=BROWSING_WINDOW_YEARS):
        """Window from today to the same date `years` later."""
        today = as_date(today) if today is not None else date.today()
        return cls(today, add_years(today, years))

    @property
    def today(self):
        return self.start

    def contains(self, day):
        return self.start <= as_date(day) <= self.end

    def classify(self, day, index):
        return classify(day, self.start, self.end, index)


def month_grid(year, month, window, index):
    """Classify every visible date of a month view.

    Returns a list of weeks, each a list of (date, DateClass) pairs. Dates
    spilling over from neighbouring months are included and classified.
    """
    dates = month_dates(year, month)
    classified = [(day, window.classify(day, index)) for day in dates]
    return [classified[i:i + 7] for i in range(0, len(classified), 7)]


def month_in_window(year, month, window):
    """Check if any day of a month falls inside the browsing window."""
    first, last = month_bounds(year, month)
    return first <= window.end and last >= window.start


def adjacent_month(year, month, window, forward=True):
    """Return the (year, month) to navigate to, or None past the window edge."""
    target = get_next_month(year, month) if forward else get_prev_month(year, month)
    return target if month_in_window(*target, window) else None
