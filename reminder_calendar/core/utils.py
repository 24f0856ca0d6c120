import calendar
import re
from datetime import date, datetime, time

from reminder_calendar.core.config import DATE_FORMAT, TIMESTAMP_FORMAT

_TIME_PATTERN = re.compile(
    r'^(?P<hour>\d{1,2})(?::(?P<minute>\d{2})(?::(?P<second>\d{2}))?)?\s*(?P<period>[ap]\.?m\.?)?$',
    re.IGNORECASE,
)


def convert_to_24(hour_str, period):
    """Convert 12-hour time format to 24-hour format."""
    hour = int(hour_str)
    return 0 if hour == 12 and period == "AM" else (hour if period == "AM" or hour == 12 else hour + 12)


def as_date(value):
    """Return the calendar date of a date or datetime value."""
    if isinstance(value, datetime):
        return value.date()
    return value


def format_date(dt):
    """Format date as YYYY-MM-DD."""
    return dt.strftime(DATE_FORMAT)


def format_timestamp(dt):
    """Format datetime in the canonical YYYY-MM-DD HH:MM:SS form."""
    return dt.strftime(TIMESTAMP_FORMAT)


def format_time_of_day(value):
    """Format a time or datetime as HH:MM, keeping seconds only when set."""
    if value.second:
        return value.strftime('%H:%M:%S')
    return value.strftime('%H:%M')


def parse_date(value):
    """Parse a calendar date from a date, datetime or YYYY-MM-DD string.

    Raises ValueError when the value is not a calendar date.
    """
    if isinstance(value, date):
        return as_date(value)
    if not isinstance(value, str):
        raise ValueError(f"Unsupported date value: {value!r}")
    return datetime.strptime(value.strip(), DATE_FORMAT).date()


def parse_time_of_day(value):
    """Parse free-form time-of-day text.

    Accepts ``9``, ``09:30``, ``09:30:15`` and the same with an ``am``/``pm``
    suffix (``9pm``, ``9:30 PM``). ``time`` objects are returned unchanged.

    Raises ValueError when the text is not a time of day.
    """
    if isinstance(value, time):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Unsupported time value: {value!r}")

    match = _TIME_PATTERN.match(value.strip())
    if not match:
        raise ValueError(f"Not a time of day: {value!r}")

    hour = int(match.group('hour'))
    minute = int(match.group('minute') or 0)
    second = int(match.group('second') or 0)
    period = match.group('period')

    if period:
        if not 1 <= hour <= 12:
            raise ValueError(f"Hour out of range for 12-hour time: {value!r}")
        hour = convert_to_24(str(hour), period.replace('.', '').upper())

    # time() rejects out-of-range fields with ValueError
    return time(hour, minute, second)


def parse_timestamp(value):
    """Parse a backend timestamp.

    The canonical form is YYYY-MM-DD HH:MM:SS; ISO 8601 text (``T`` separator,
    fractional seconds, offsets) is also accepted and reduced to naive local
    second precision.
    """
    if isinstance(value, datetime):
        return value.replace(microsecond=0)
    try:
        return datetime.strptime(value, TIMESTAMP_FORMAT)
    except ValueError:
        dt = datetime.fromisoformat(value.replace('Z', '+00:00'))
        if dt.tzinfo is not None:
            dt = dt.astimezone().replace(tzinfo=None)
        return dt.replace(microsecond=0)


def add_years(day, years):
    """Shift a date by whole years, clamping Feb 29 to Feb 28."""
    try:
        return day.replace(year=day.year + years)
    except ValueError:
        return day.replace(year=day.year + years, day=28)


def end_of_day(day):
    """Return the last second of a calendar day."""
    return datetime.combine(day, time(23, 59, 59))


def month_dates(year, month):
    """Return the visible dates of a month view, in full weeks."""
    return [
        week_day
        for week in calendar.Calendar(calendar.firstweekday()).monthdatescalendar(year, month)
        for week_day in week
    ]


def get_prev_month(year, month):
    """Return the (year, month) before the given month."""
    return (year - 1, 12) if month == 1 else (year, month - 1)


def get_next_month(year, month):
    """Return the (year, month) after the given month."""
    return (year + 1, 1) if month == 12 else (year, month + 1)


def month_bounds(year, month):
    """Return the first and last date of a month."""
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)
