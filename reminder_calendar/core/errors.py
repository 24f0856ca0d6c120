class CalendarError(Exception):
    """Base class for all reminder calendar errors."""
    pass


class ValidationError(CalendarError):
    """Raised when reminder form input cannot be turned into a reminder."""
    pass


class MissingTitle(ValidationError):
    """Raised when the reminder title is empty."""
    pass


class MissingDescription(ValidationError):
    """Raised when the reminder description is empty."""
    pass


class InvalidDate(ValidationError):
    """Raised when the reminder date is not a calendar date."""
    pass


class InvalidTime(ValidationError):
    """Raised when a start or end time is not a time of day."""
    pass


class EndBeforeStart(ValidationError):
    """Raised when the end time is not far enough after the start time."""
    pass


class DateNotEditable(CalendarError):
    """Raised when a date outside the browsing window is opened for editing."""

    def __init__(self, day, date_class):
        super().__init__(f"{day.isoformat()} is outside the browsing window ({date_class.value})")
        self.day = day
        self.date_class = date_class


class BackendError(CalendarError):
    """Raised when a reminder or holiday backend call fails."""
    pass
