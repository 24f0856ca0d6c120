from reminder_calendar.core.utils import as_date


class CalendarIndex:
    """Date-keyed lookup over one snapshot of holidays and reminders.

    An index is never mutated after it is built; a refresh builds a new one
    and swaps it in.
    """

    def __init__(self, holidays_by_date=None, reminders_by_date=None, holidays=(), reminders=()):
        self._holidays_by_date = holidays_by_date or {}
        self._reminders_by_date = reminders_by_date or {}
        self._holidays = tuple(holidays)
        self._reminders = tuple(reminders)

    @classmethod
    def build(cls, holidays, reminders):
        """Build an index from holiday and reminder lists.

        The first holiday listed for a date wins. Reminders are grouped by the
        calendar date of their start time and keep their source order.
        """
        holidays = list(holidays)
        reminders = list(reminders)

        holidays_by_date = {}
        for holiday in holidays:
            holidays_by_date.setdefault(holiday.date, holiday)

        reminders_by_date = {}
        for reminder in reminders:
            reminders_by_date.setdefault(reminder.start_time.date(), []).append(reminder)

        return cls(holidays_by_date, reminders_by_date, holidays, reminders)

    @classmethod
    def empty(cls):
        return cls()

    def lookup_holiday(self, day):
        """Get the holiday for a date, or None."""
        return self._holidays_by_date.get(as_date(day))

    def lookup_reminders(self, day):
        """Get the reminders for a date, in source order."""
        return self._reminders_by_date.get(as_date(day), [])[:]

    def has_events(self, day):
        """Check if a date carries a holiday or at least one reminder."""
        day = as_date(day)
        return day in self._holidays_by_date or bool(self._reminders_by_date.get(day))

    def reminder_by_id(self, reminder_id):
        """Get a reminder by its backend ID, or None."""
        for reminder in self._reminders:
            if reminder.id == reminder_id:
                return reminder
        return None

    @property
    def holidays(self):
        return list(self._holidays)

    @property
    def reminders(self):
        return list(self._reminders)

    def __len__(self):
        return len(self._reminders)
