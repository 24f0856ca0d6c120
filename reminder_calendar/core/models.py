from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
import typing as t

from reminder_calendar.core.utils import format_timestamp, parse_date, parse_timestamp


def _optional_timestamp(value):
    return parse_timestamp(value) if value else None


@dataclass(frozen=True)
class Reminder:
    """A user-owned reminder with a same-day start and end time."""
    title: str
    description: str
    start_time: datetime
    end_time: datetime
    id: t.Optional[int] = None
    recurrence: t.Optional[str] = None
    recurrence_end_time: t.Optional[datetime] = None
    created_date: t.Optional[datetime] = None
    updated_date: t.Optional[datetime] = None

    @property
    def date(self) -> date:
        """Calendar date the reminder belongs to."""
        return self.start_time.date()

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    def to_payload(self) -> dict:
        """Serialize for the reminder backend. Audit fields are never sent."""
        payload = {
            'title': self.title,
            'description': self.description,
            'startTime': format_timestamp(self.start_time),
            'endTime': format_timestamp(self.end_time),
        }
        if self.id is not None:
            payload['id'] = self.id
        if self.recurrence is not None:
            payload['recurrence'] = self.recurrence
        if self.recurrence_end_time is not None:
            payload['recurrenceEndTime'] = format_timestamp(self.recurrence_end_time)
        return payload

    @classmethod
    def from_payload(cls, data: dict) -> Reminder:
        """Build a reminder from a backend record.

        Raises AttributeError, KeyError, TypeError or ValueError on a malformed record.
        """
        reminder_id = data.get('id')
        return cls(
            id=int(reminder_id) if reminder_id is not None else None,
            title=data['title'],
            description=data['description'],
            start_time=parse_timestamp(data['startTime']),
            end_time=parse_timestamp(data['endTime']),
            recurrence=data.get('recurrence'),
            recurrence_end_time=_optional_timestamp(data.get('recurrenceEndTime')),
            created_date=_optional_timestamp(data.get('createdDate')),
            updated_date=_optional_timestamp(data.get('updatedDate')),
        )


@dataclass(frozen=True)
class Holiday:
    """A public holiday on a single calendar date."""
    date: date
    local_name: str
    name: str
    country_code: t.Optional[str] = None
    is_global: t.Optional[bool] = None

    @property
    def label(self) -> str:
        """Display label, preferring the local name."""
        return self.local_name or self.name

    @classmethod
    def from_payload(cls, data: dict) -> Holiday:
        """Build a holiday from a Nager.Date style record."""
        return cls(
            date=parse_date(data['date']),
            local_name=data.get('localName') or '',
            name=data.get('name') or '',
            country_code=data.get('countryCode'),
            is_global=data.get('global'),
        )


@dataclass
class DayBucket:
    """Reminders starting within one hour slot of a day."""
    hour: int
    reminders: list[Reminder] = field(default_factory=list)

    @property
    def label(self) -> str:
        return f"{self.hour}:00"

    def __len__(self):
        return len(self.reminders)


@dataclass
class DaySchedule:
    """Detail view of a single day: its holiday and 24 hour buckets."""
    date: date
    holiday: t.Optional[Holiday]
    buckets: list[DayBucket]


@dataclass(frozen=True)
class Create:
    """Form mode for a reminder that has not been persisted yet."""


@dataclass(frozen=True)
class Edit:
    """Form mode for changing an existing reminder."""
    existing: Reminder


FormMode = t.Union[Create, Edit]
